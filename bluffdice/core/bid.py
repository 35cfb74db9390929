"""
bid.py
Defines the Bid model for Liar's Dice, including validation and ordering logic.
Related modules:
- actions.py: Uses Bid in BidAction and NoBidAction.
- engine.py: Validates and compares bids to enforce game rules.
- policy.py: Builds candidate bids for the computer opponent.
"""

from dataclasses import dataclass
from typing import Optional


FACES = (1, 2, 3, 4, 5, 6)


@dataclass(frozen=True)
class Bid:
    """
    Represents a bid in Liar's Dice: a claim that at least 'quantity' dice in play show 'face'.
    Args:
        quantity (int): Number of dice claimed.
        face (int): Face value claimed (1-6).
    """
    quantity: int
    face: int

    @property
    def is_degenerate(self) -> bool:
        """True for the NO_BID sentinel (and anything else with a zero quantity or face)."""
        return self.quantity <= 0 or self.face <= 0

    def validate(self, total_dice: Optional[int] = None) -> None:
        """
        Validates the bid.
        Args:
            total_dice (int|None): Total dice in play. When given, the quantity may not exceed it.
        Raises:
            ValueError: If bid is out of bounds.
        """
        if not (1 <= self.face <= 6):
            raise ValueError("face must be between 1 and 6")
        if self.quantity < 1:
            raise ValueError("quantity must be at least 1")
        if total_dice is not None and self.quantity > total_dice:
            raise ValueError("quantity must be between 1 and total_dice")

    def is_higher_than(self, other: Optional['Bid']) -> bool:
        """
        Checks if this bid is strictly higher than another bid: quantity first, then face.
        Args:
            other (Bid): The previous bid to compare against (or None).
        Returns:
            bool: True if this bid is higher, False otherwise.
        """
        if other is None:
            return True
        if self.quantity != other.quantity:
            return self.quantity > other.quantity
        return self.face > other.face

    def __str__(self) -> str:
        return f"{self.quantity} {self.face}'s"


# Fallback produced by the opponent policy when it has no candidate to offer.
NO_BID = Bid(0, 0)
