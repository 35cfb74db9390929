"""
state.py
Defines the game state dataclasses for a two-player match: PlayerState, PublicState, GameState.
Related modules:
- engine.py: Mutates and reads GameState during play.
- bid.py: Used in bid history and last_bid.
- config.py: GameConfig is part of GameState.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple
from .bid import Bid
from .config import GameConfig


@dataclass
class PlayerState:
    """
    Stores private state for a single player.
    Fields:
        player_id (int): Player index.
        num_dice (int): Dice still held; only ever decreases.
        private_dice (list[int]): Player's dice this round (hidden from opponent).
    """
    player_id: int
    num_dice: int
    private_dice: List[int] = field(default_factory=list)


@dataclass
class PublicState:
    """
    Stores public state visible to both players.
    Fields:
        round_index (int): Current round number.
        turn_index (int): Current turn number within the round.
        current_player (int): Player whose turn it is.
        last_bid (Bid|None): Standing bid.
        last_bidder (int|None): Player who placed the standing bid.
        bid_history (list[Bid]): All bids this round.
        dice_counts (tuple): Dice held by each player.
        status (str): NOT_STARTED | BIDDING | ROUND_OVER | GAME_OVER.
        round_winner (int|None): Winner of the last resolved challenge.
        round_loser (int|None): Loser of the last resolved challenge (lost a die).
        winner (int|None): Winner of the match once it is over.
    """
    round_index: int = 0
    turn_index: int = 0
    current_player: int = 0
    last_bid: Optional[Bid] = None
    last_bidder: Optional[int] = None
    bid_history: List[Bid] = field(default_factory=list)
    dice_counts: Tuple[int, ...] = ()
    status: str = "NOT_STARTED"
    round_winner: Optional[int] = None
    round_loser: Optional[int] = None
    winner: Optional[int] = None

    @property
    def total_dice(self) -> int:
        return sum(self.dice_counts)


@dataclass
class GameState:
    """
    Composite state for the entire match: config, both players, and public state.
    """
    config: GameConfig
    players: Tuple[PlayerState, PlayerState]
    public: PublicState
