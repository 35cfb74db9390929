"""
dice.py
Dice rolling for the engine. Every roll goes through an explicit RNG instance.
"""

import random
from typing import List


def roll_die(rng: random.Random) -> int:
    """Roll a single six-sided die."""
    return rng.randint(1, 6)


def roll_n(n: int, rng: random.Random) -> List[int]:
    """
    Roll n six-sided dice using the provided RNG.
    Args:
        n (int): Number of dice to roll (0 gives an empty hand).
        rng (random.Random): RNG instance.
    Returns:
        list[int]: List of die faces.
    """
    return [roll_die(rng) for _ in range(n)]
