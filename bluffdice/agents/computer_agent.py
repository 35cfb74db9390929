import random

from .base import Agent
from ..core.config import PolicyConfig
from ..core.policy import decide
from . import register_agent


@register_agent("computer")
class ComputerAgent(Agent):
    """
    The heuristic computer opponent: a thin stateful shell around core.policy.decide.
    Owns the random source so a seeded agent replays the same decisions.
    """
    def __init__(self, rng=None, config=None):
        """
        Args:
            rng: Object with a random() method (default: a fresh random.Random()).
            config (PolicyConfig|None): Policy constants.
        """
        self.rng = rng or random.Random()
        self.config = config or PolicyConfig()

    def choose_action(self, view):
        my_dice = view["my_dice"]
        last = view["public"].last_bid
        return decide(my_dice, self.total_dice(view), last, rng=self.rng, config=self.config)
