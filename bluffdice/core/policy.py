"""
policy.py
Decision policy of the computer opponent.

decide() looks at the computer's own dice, the number of dice in play and the
standing bid, and returns either a CallLiarAction or a new bid. It is a pure
function apart from the random source, which callers pass in.

Random draws happen in a fixed order so seeded games replay exactly:
    1. challenge draw (always taken when a bid is standing)
    2. raise gate
    3. wild gate
    4. wild face (only when the wild gate passes)

Candidates are not filtered against the standing bid, so a returned bid may be
lower than it; the engine re-validates every computer action
(see GameEngine.sanitize_computer_action).
Related modules:
- probability.py: bid_probability and confidence_level.
- rules.py: count_matches.
- agents/computer_agent.py: Wraps decide() as a registered agent.
"""

import math
import random
from collections import Counter
from typing import List, Optional, Sequence

from .actions import Action, BidAction, CallLiarAction, NoBidAction
from .bid import Bid, FACES, NO_BID
from .config import PolicyConfig
from .probability import DEFAULT_POLICY, bid_probability, confidence_level
from .rules import check_dice, count_matches


def opening_bid(own_dice: Sequence[int], total_dice: int) -> Bid:
    """
    First bid of a round: the most common own face, scaled by the share of dice we hold.
    Ties go to the lowest face.
    """
    counts = Counter(own_dice)
    max_count = 0
    max_face = 1
    for face in FACES:
        if counts[face] > max_count:
            max_count = counts[face]
            max_face = face
    multiplier = math.floor(len(own_dice) / total_dice * 2) + 1
    return Bid(max(1, max_count * multiplier), max_face)


def score_bid(bid: Bid, own_dice: Sequence[int], unknown_dice: int,
              config: PolicyConfig = DEFAULT_POLICY) -> float:
    """Weighted mix of how likely the bid is and how well our dice back it."""
    prob = bid_probability(bid.quantity - count_matches(own_dice, bid.face), unknown_dice,
                           config.face_probability)
    confidence = confidence_level(own_dice, bid.quantity, bid.face, config)
    return prob * config.probability_weight + confidence * config.confidence_weight


def should_challenge(own_dice: Sequence[int], total_dice: int, bid: Bid, draw: float,
                     config: PolicyConfig = DEFAULT_POLICY) -> bool:
    """
    Challenge when the bid looks unlikely and the noise draw lets it through.
    Args:
        own_dice (sequence): Computer's dice.
        total_dice (int): Dice in play across both players.
        bid (Bid): Standing bid.
        draw (float): Uniform value in [0, 1).
        config (PolicyConfig): Thresholds.
    Returns:
        bool: True to call liar.
    """
    unknown_dice = total_dice - len(own_dice)
    remaining_needed = bid.quantity - count_matches(own_dice, bid.face)
    prob_bid_true = bid_probability(remaining_needed, unknown_dice, config.face_probability)
    confidence = confidence_level(own_dice, bid.quantity, bid.face, config)
    bluff_threshold = config.challenge_base + confidence * config.challenge_confidence_weight
    return prob_bid_true < bluff_threshold and draw < config.challenge_noise


def candidate_bids(own_dice: Sequence[int], bid: Bid, rng,
                   config: PolicyConfig = DEFAULT_POLICY) -> List[Bid]:
    """
    Build the raise candidates in generation order:
    same face plus one (gated), each other face we hold, then a random-face bid (gated).
    """
    counts = Counter(own_dice)
    candidates = []

    if rng.random() < config.raise_probability:
        candidates.append(Bid(bid.quantity + 1, bid.face))

    for face in FACES:
        if face != bid.face and counts[face] > 0:
            candidates.append(Bid(max(bid.quantity, counts[face] + 1), face))

    if rng.random() < config.wild_probability:
        wild_face = math.floor(rng.random() * 6) + 1
        candidates.append(Bid(math.floor(bid.quantity * config.wild_multiplier), wild_face))

    return candidates


def best_bid(candidates: Sequence[Bid], own_dice: Sequence[int], unknown_dice: int,
             config: PolicyConfig = DEFAULT_POLICY) -> Bid:
    """Highest scoring candidate; the first one wins ties. NO_BID when there is nothing to pick."""
    best, best_score = NO_BID, 0.0
    for candidate in candidates:
        score = score_bid(candidate, own_dice, unknown_dice, config)
        if score > best_score:
            best, best_score = candidate, score
    return best


def decide(own_dice: Sequence[int], total_dice: int, current_bid: Optional[Bid],
           rng=None, config: Optional[PolicyConfig] = None) -> Action:
    """
    Decide the computer's move.
    Args:
        own_dice (sequence): Computer's dice (non-empty, faces 1-6).
        total_dice (int): Dice in play across both players.
        current_bid (Bid|None): Standing bid, or None when opening the round.
        rng: Object with a random() method returning floats in [0, 1). Defaults to a private random.Random().
        config (PolicyConfig|None): Policy constants.
    Returns:
        Action: CallLiarAction, BidAction, or NoBidAction when no candidate was produced.
    Raises:
        ValueError: On empty or out-of-range dice, an impossible dice total, or a malformed bid.
    """
    if not own_dice:
        raise ValueError("own_dice must not be empty")
    check_dice(own_dice)
    if total_dice < len(own_dice):
        raise ValueError("total_dice cannot be smaller than the number of own dice")
    config = config or DEFAULT_POLICY
    rng = rng or random.Random()

    if current_bid is None:
        return BidAction(opening_bid(own_dice, total_dice))

    current_bid.validate()
    if should_challenge(own_dice, total_dice, current_bid, rng.random(), config):
        return CallLiarAction()

    unknown_dice = total_dice - len(own_dice)
    candidates = candidate_bids(own_dice, current_bid, rng, config)
    chosen = best_bid(candidates, own_dice, unknown_dice, config)
    if chosen.is_degenerate:
        return NoBidAction()
    return BidAction(chosen)
