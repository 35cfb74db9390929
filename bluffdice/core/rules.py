"""
rules.py
Bid evaluation for Liar's Dice: counting matching dice and settling a challenged bid.
Faces are fixed; no face is wild.
Related modules:
- engine.py: Uses evaluate to resolve a call.
- policy.py: Uses count_matches on the computer's own dice.
"""

from dataclasses import dataclass
from typing import Sequence

from .bid import Bid


@dataclass(frozen=True)
class BidEvaluation:
    """
    Result of revealing all dice against a bid.
    Fields:
        bid_held (bool): True if at least bid.quantity dice show bid.face.
        actual_count (int): Number of dice in play showing bid.face.
    """
    bid_held: bool
    actual_count: int


def check_dice(dice: Sequence[int]) -> None:
    """Raise ValueError unless every die is a face between 1 and 6."""
    for d in dice:
        if not (1 <= d <= 6):
            raise ValueError(f"die value out of range: {d}")


def count_matches(dice: Sequence[int], face: int) -> int:
    """
    Count the dice showing a given face.
    Args:
        dice (sequence): Dice values.
        face (int): Face value to count.
    Returns:
        int: Number of matching dice.
    """
    return sum(1 for d in dice if d == face)


def evaluate(all_dice: Sequence[int], bid: Bid) -> BidEvaluation:
    """
    Decide whether a bid was true once every die in play is revealed.
    Args:
        all_dice (sequence): Dice of both players, in any order.
        bid (Bid): The challenged bid.
    Returns:
        BidEvaluation: Whether the bid held and the actual matching count.
    Raises:
        ValueError: If all_dice is empty, holds an invalid die, or the bid is malformed.
    """
    if not all_dice:
        raise ValueError("cannot evaluate a bid with no dice in play")
    check_dice(all_dice)
    bid.validate()
    actual_count = count_matches(all_dice, bid.face)
    return BidEvaluation(bid_held=actual_count >= bid.quantity, actual_count=actual_count)
