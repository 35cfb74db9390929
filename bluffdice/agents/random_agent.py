import random

from .base import Agent
from ..core.bid import Bid
from ..core.actions import BidAction, CallLiarAction
from . import register_agent


@register_agent("random")
class RandomAgent(Agent):
    """
    Baseline opponent for simulations. Opens with one die of a random face, calls liar on impossible
    bids, otherwise calls with a fixed probability or makes the smallest raise (next face, or one more
    die once the faces run out).
    """
    def __init__(self, rng=None, call_prob=0.25):
        """
        Args:
            rng: Optional random number generator.
            call_prob (float): Probability to call liar on a possible bid.
        """
        self.rng = rng or random.Random()
        self.call_prob = call_prob

    def choose_action(self, view):
        my_dice = tuple(view["my_dice"])
        last = view["public"].last_bid
        total = self.total_dice(view)

        if last is None:
            return BidAction(Bid(1, self.rng.randint(1, 6)))

        if self.call_liar_deterministic(my_dice, last, total):
            return CallLiarAction()

        if self.rng.random() < self.call_prob:
            return CallLiarAction()

        if last.face < 6:
            return BidAction(Bid(last.quantity, last.face + 1))
        if last.quantity < total:
            return BidAction(Bid(last.quantity + 1, 1))
        return CallLiarAction()
