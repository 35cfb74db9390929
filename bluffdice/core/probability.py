"""
probability.py
Probability and confidence estimates used by the computer opponent.

bid_probability answers: given that 'needed' more dice must show a face and
'available' unseen dice remain, how likely is it that the bid holds?

    P(X >= k) = sum_{i=k}^{n} C(n, i) * p^i * (1 - p)^(n - i),   X ~ Binomial(n, p)

confidence_level is a hand-tuned score of how strongly the computer's own
dice back a bid.
Related modules:
- policy.py: Scores candidate bids with both functions.
- config.py: PolicyConfig carries p and the confidence multipliers.
"""

from typing import Optional, Sequence

from .config import PolicyConfig


DEFAULT_POLICY = PolicyConfig()


def binomial_coefficient(n: int, k: int) -> float:
    """C(n, k) computed as a running product, so no factorial is ever formed."""
    result = 1.0
    for i in range(1, k + 1):
        result *= (n + 1 - i) / i
    return result


def bid_probability(needed: int, available: int, p: Optional[float] = None) -> float:
    """
    Probability that at least 'needed' of 'available' unseen dice show the bid face.
    Args:
        needed (int): Dice still required beyond the ones already seen.
        available (int): Number of unseen dice.
        p (float|None): Chance one die shows the face (default 1/6).
    Returns:
        float: Probability in [0, 1].
    """
    if needed <= 0:
        return 1.0
    if needed > available:
        return 0.0
    if p is None:
        p = DEFAULT_POLICY.face_probability
    n = available
    prob = 0.0
    # smallest terms first; also keeps the tail monotone in 'needed'
    for i in range(n, needed - 1, -1):
        prob += binomial_coefficient(n, i) * p ** i * (1 - p) ** (n - i)
    return min(1.0, prob)


def confidence_level(dice: Sequence[int], quantity: int, face: int,
                     config: PolicyConfig = DEFAULT_POLICY) -> float:
    """
    Heuristic confidence in a bid based on the computer's own dice.
    Starts from the share of own dice showing the face, is damped when other
    faces are held and when the quantity is large relative to the hand, then
    clamped to [min_confidence, max_confidence].
    Args:
        dice (sequence): Own dice (non-empty).
        quantity (int): Bid quantity.
        face (int): Bid face.
        config (PolicyConfig): Multipliers and clamp bounds.
    Returns:
        float: Confidence in [0.1, 1.0] with the default config.
    Raises:
        ValueError: If dice is empty.
    """
    if not dice:
        raise ValueError("confidence needs at least one die")
    value_count = sum(1 for d in dice if d == face)
    other_values = len(dice) - value_count

    confidence = value_count / len(dice)
    if other_values > 0:
        confidence *= config.other_face_penalty
    if quantity / len(dice) > config.high_quantity_ratio:
        confidence *= config.high_quantity_penalty

    return max(config.min_confidence, min(config.max_confidence, confidence))
