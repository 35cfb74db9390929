"""
config.py
Defines the GameConfig and PolicyConfig dataclasses, which centralize the rule options
and the tunable constants of the computer opponent.
Related modules:
- engine.py: Uses GameConfig to initialize and enforce game rules.
- policy.py / probability.py: Use PolicyConfig for thresholds, weights and random gates.
"""

from dataclasses import dataclass
from typing import Tuple, Optional


@dataclass(frozen=True)
class GameConfig:
    """
    Centralizes rule options and numeric constraints for a two-player game.
    Fields:
        num_players (int): Number of players (only 2 is supported).
        dice_per_player (int): Starting dice per player (used if dice_distribution is None).
        dice_distribution (tuple): Starting dice per player (overrides dice_per_player).
        max_turns (int|None): Max turns per round; None allows every legal bid (6 * dice in play) plus the call.
        rng_seed (int|None): Seed for deterministic games; None rolls differently each run.
    """
    num_players: int = 2
    dice_per_player: int = 5
    dice_distribution: Optional[Tuple[int, ...]] = None
    max_turns: Optional[int] = None
    rng_seed: Optional[int] = None

    def starting_dice(self) -> Tuple[int, ...]:
        """Per-player starting dice counts."""
        if self.dice_distribution:
            return tuple(self.dice_distribution)
        return tuple(self.dice_per_player for _ in range(self.num_players))

    def turn_limit(self, total_dice: int) -> int:
        """Turns allowed in one round with total_dice in play."""
        if self.max_turns is not None:
            return self.max_turns
        return 6 * total_dice + 1


@dataclass(frozen=True)
class PolicyConfig:
    """
    Constants of the heuristic computer opponent.
    Fields:
        face_probability (float): Chance a single unseen die shows a given face.
        challenge_base (float): Bluff threshold before confidence is added.
        challenge_confidence_weight (float): How much confidence raises the bluff threshold.
        challenge_noise (float): Probability of actually challenging when the threshold says so.
        raise_probability (float): Gate for proposing the same face with one more die.
        wild_probability (float): Gate for proposing a random-face bid.
        wild_multiplier (float): Quantity multiplier for the random-face bid.
        probability_weight (float): Weight of the bid probability in a candidate's score.
        confidence_weight (float): Weight of the confidence in a candidate's score.
        other_face_penalty (float): Confidence multiplier when own dice hold other faces.
        high_quantity_ratio (float): quantity / own dice above which a bid counts as high.
        high_quantity_penalty (float): Confidence multiplier for high bids.
        min_confidence (float): Lower clamp for confidence.
        max_confidence (float): Upper clamp for confidence.
    """
    face_probability: float = 1 / 6
    challenge_base: float = 0.3
    challenge_confidence_weight: float = 0.2
    challenge_noise: float = 0.8
    raise_probability: float = 0.7
    wild_probability: float = 0.2
    wild_multiplier: float = 1.2
    probability_weight: float = 0.6
    confidence_weight: float = 0.4
    other_face_penalty: float = 0.8
    high_quantity_ratio: float = 1.5
    high_quantity_penalty: float = 0.7
    min_confidence: float = 0.1
    max_confidence: float = 1.0
