import random
import unittest

from bluffdice.core.actions import BidAction, CallLiarAction, NoBidAction
from bluffdice.core.bid import Bid, NO_BID
from bluffdice.core.config import PolicyConfig
from bluffdice.core.policy import decide, opening_bid, candidate_bids, best_bid


class ScriptedRng:
    """Hands out a fixed list of draws and fails loudly if more are requested."""
    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.values.pop(0)


class TestOpeningBid(unittest.TestCase):
    """
    With no standing bid the policy bids its most common face, scaled by
    floor(own / total * 2) + 1, and never consumes a random draw.
    """

    def test_reference_scenario(self):
        rng = ScriptedRng([])
        action = decide([5, 5, 5, 1, 2], 10, None, rng=rng)
        self.assertEqual(action, BidAction(Bid(6, 5)))
        self.assertFalse(action.challenge)
        self.assertEqual(rng.calls, 0)

    def test_ties_go_to_lowest_face(self):
        self.assertEqual(opening_bid([6, 4, 4, 2, 2], 10), Bid(4, 2))

    def test_small_share_of_dice_uses_multiplier_one(self):
        self.assertEqual(opening_bid([3, 3], 10), Bid(2, 3))

    def test_never_challenges_without_a_bid(self):
        rng = random.Random(11)
        for _ in range(200):
            own = [rng.randint(1, 6) for _ in range(rng.randint(1, 5))]
            total = len(own) + rng.randint(1, 5)
            action = decide(own, total, None, rng=rng)
            self.assertIsInstance(action, BidAction)
            self.assertGreaterEqual(action.bid.quantity, 1)


class TestChallenge(unittest.TestCase):
    # no fives held, five unseen dice: P(bid true) = (1/6)^5, threshold 0.32
    own = [1, 2, 3, 4, 6]
    bid = Bid(5, 5)

    def test_unlikely_bid_is_challenged(self):
        rng = ScriptedRng([0.5])
        action = decide(self.own, 10, self.bid, rng=rng)
        self.assertIsInstance(action, CallLiarAction)
        self.assertTrue(action.challenge)
        self.assertEqual(rng.calls, 1)

    def test_noise_can_let_an_unlikely_bid_through(self):
        rng = ScriptedRng([0.85, 0.9, 0.9])
        action = decide(self.own, 10, self.bid, rng=rng)
        self.assertIsInstance(action, BidAction)

    def test_bid_covered_by_own_dice_is_never_challenged(self):
        rng = ScriptedRng([0.0, 0.1, 0.9])
        action = decide([4, 4, 4], 6, Bid(2, 4), rng=rng)
        self.assertIsInstance(action, BidAction)

    def test_noise_can_be_switched_off(self):
        cfg = PolicyConfig(challenge_noise=0.0)
        rng = ScriptedRng([0.0, 0.9, 0.9])
        action = decide(self.own, 10, self.bid, rng=rng, config=cfg)
        self.assertNotIsInstance(action, CallLiarAction)


class TestCandidates(unittest.TestCase):
    def test_generation_order(self):
        rng = ScriptedRng([0.1, 0.1, 0.99])
        candidates = candidate_bids([1, 1, 3, 5, 5], Bid(2, 5), rng)
        self.assertEqual(candidates, [Bid(3, 5), Bid(3, 1), Bid(2, 3), Bid(2, 6)])
        self.assertEqual(rng.calls, 3)

    def test_gates_closed(self):
        rng = ScriptedRng([0.7, 0.2])
        self.assertEqual(candidate_bids([2, 2], Bid(4, 2), rng), [])

    def test_best_bid_of_empty_pool_is_sentinel(self):
        self.assertEqual(best_bid([], [1, 2], 3), NO_BID)

    def test_first_candidate_wins_ties(self):
        # faces 1, 2, 3, 4 and 6 score the same; face 1 comes first
        rng = ScriptedRng([0.9, 0.1, 0.5])
        action = decide([1, 2, 3, 4, 6], 10, Bid(5, 5), rng=rng)
        self.assertEqual(action, BidAction(Bid(5, 1)))

    def test_raise_on_own_face(self):
        rng = ScriptedRng([0.0, 0.1, 0.9])
        action = decide([4, 4, 4], 6, Bid(2, 4), rng=rng)
        self.assertEqual(action, BidAction(Bid(3, 4)))

    def test_wild_bid(self):
        # floor(2 * 1.2) = 2, face floor(0.99 * 6) + 1 = 6
        rng = ScriptedRng([0.0, 0.9, 0.1, 0.99])
        action = decide([4, 4, 4], 6, Bid(2, 4), rng=rng)
        self.assertEqual(action, BidAction(Bid(2, 6)))
        self.assertEqual(rng.calls, 4)


class TestPermissiveCandidates(unittest.TestCase):
    """
    Candidates are not filtered against the standing bid: decide() can return a bid
    that does not beat it, and the engine re-validates (see test_engine_flow).
    """

    def test_lower_face_at_same_quantity(self):
        rng = ScriptedRng([0.9, 0.1, 0.5])
        action = decide([1, 2, 3, 4, 6], 10, Bid(5, 5), rng=rng)
        self.assertFalse(action.bid.is_higher_than(Bid(5, 5)))

    def test_wild_bid_equal_to_standing_bid(self):
        rng = ScriptedRng([0.0, 0.9, 0.1, 0.5])
        action = decide([4, 4, 4], 6, Bid(2, 4), rng=rng)
        self.assertEqual(action, BidAction(Bid(2, 4)))
        self.assertFalse(action.bid.is_higher_than(Bid(2, 4)))

    def test_empty_pool_returns_no_bid_sentinel(self):
        rng = ScriptedRng([0.0, 0.9, 0.9])
        action = decide([4, 4, 4], 6, Bid(2, 4), rng=rng)
        self.assertIsInstance(action, NoBidAction)
        self.assertFalse(action.challenge)
        self.assertEqual(action.bid, NO_BID)
        self.assertTrue(action.bid.is_degenerate)


class TestDecideContract(unittest.TestCase):
    def test_seeded_rng_is_reproducible(self):
        for seed in range(20):
            a = decide([2, 3, 3, 5], 9, Bid(3, 3), rng=random.Random(seed))
            b = decide([2, 3, 3, 5], 9, Bid(3, 3), rng=random.Random(seed))
            self.assertEqual(a, b)

    def test_invalid_input_fails_fast(self):
        with self.assertRaises(ValueError):
            decide([], 5, None)
        with self.assertRaises(ValueError):
            decide([0, 2], 5, None)
        with self.assertRaises(ValueError):
            decide([1, 2, 3], 2, None)
        with self.assertRaises(ValueError):
            decide([1, 2], 5, Bid(0, 3), rng=ScriptedRng([]))
        with self.assertRaises(ValueError):
            decide([1, 2], 5, Bid(1, 7), rng=ScriptedRng([]))


if __name__ == '__main__':
    unittest.main()
