"""
actions.py
Defines the base Action type and concrete action classes for the Liar's Dice game engine.
Actions are what the opponent policy decides and what the engine consumes:
bidding, calling liar, or the degenerate "no bid" outcome.
Related modules:
- bid.py: Defines the Bid model used in BidAction.
- policy.py: Returns Action objects from decide().
- engine.py: Consumes Action objects to update game state.
"""

from dataclasses import dataclass, field

from .bid import Bid, NO_BID


class Action:
    """
    Base class for all game actions. Subclassed by BidAction, CallLiarAction and NoBidAction.
    """
    challenge = False



@dataclass(frozen=True)
class BidAction(Action):
    """
    Represents a bid action: a player claims there are at least 'quantity' dice showing 'face'.
    Args:
        bid (Bid): The bid being placed.
    """
    bid: Bid



@dataclass(frozen=True)
class CallLiarAction(Action):
    """
    Represents the action of calling 'liar' on the standing bid.
    No arguments; triggers a reveal and resolution in the engine.
    """
    challenge = True



@dataclass(frozen=True)
class NoBidAction(Action):
    """
    The policy declined to challenge but produced no usable candidate.
    Carries the NO_BID sentinel; the engine never accepts it as a move.
    """
    bid: Bid = field(default=NO_BID)
