from abc import ABC, abstractmethod
from typing import Any


class Agent(ABC):
    """
    Abstract base class for all Liar's Dice agents.
    Agents must implement choose_action(view), which receives a player-specific view of the game state and returns an Action.
    """

    @abstractmethod
    def choose_action(self, view: Any):
        """
        Given a player-specific view, return the next Action to take.
        Args:
            view (dict): Player view with keys 'public', 'my_dice', 'total_dice' and 'config'.
        Returns:
            Action: The action to take (BidAction or CallLiarAction).
        """
        raise NotImplementedError

    def my_count_of_face(self, my_dice, face: int) -> int:
        """Count how many dice of a given face the agent holds."""
        return sum(1 for d in my_dice if d == face)

    def total_dice(self, view) -> int:
        """Dice in play across both players."""
        if "total_dice" in view:
            return view["total_dice"]
        return sum(view["public"].dice_counts)

    def call_liar_deterministic(self, my_dice, last_bid, total_dice):
        """
        True if the last bid cannot hold even when every unseen die shows its face.
        Args:
            my_dice (iterable): The agent's private dice.
            last_bid (Bid): The last bid made.
            total_dice (int): Total dice in the game.
        Returns:
            bool: True if the agent should call liar deterministically.
        """
        if last_bid is None:
            return False
        opponent_max = max(0, total_dice - len(my_dice))
        my_count = self.my_count_of_face(my_dice, last_bid.face)
        return my_count + opponent_max < last_bid.quantity
