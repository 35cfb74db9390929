import math
import unittest

from bluffdice.core.probability import binomial_coefficient, bid_probability, confidence_level


class TestBinomial(unittest.TestCase):
    def test_matches_exact_coefficients(self):
        for n in range(0, 31):
            for k in range(0, n + 1):
                self.assertAlmostEqual(binomial_coefficient(n, k) / math.comb(n, k), 1.0, places=9)

    def test_certain_and_impossible(self):
        for n in range(0, 12):
            self.assertEqual(bid_probability(0, n), 1.0)
            self.assertEqual(bid_probability(-3, n), 1.0)
            self.assertEqual(bid_probability(n + 1, n), 0.0)

    def test_known_values(self):
        self.assertAlmostEqual(bid_probability(1, 1), 1 / 6)
        self.assertAlmostEqual(bid_probability(1, 2), 11 / 36)
        self.assertAlmostEqual(bid_probability(4, 5), 26 / 7776)
        for n in range(1, 31):
            self.assertAlmostEqual(bid_probability(1, n), 1 - (5 / 6) ** n)

    def test_monotone_in_needed(self):
        for n in range(0, 31):
            probs = [bid_probability(k, n) for k in range(0, n + 2)]
            for a, b in zip(probs, probs[1:]):
                self.assertGreaterEqual(a, b)
            for p in probs:
                self.assertTrue(0.0 <= p <= 1.0)

    def test_custom_face_probability(self):
        self.assertAlmostEqual(bid_probability(1, 1, p=0.5), 0.5)


class TestConfidence(unittest.TestCase):
    def test_all_dice_match(self):
        self.assertEqual(confidence_level([5, 5, 5, 5, 5], 5, 5), 1.0)

    def test_other_faces_penalty(self):
        self.assertAlmostEqual(confidence_level([5, 5, 1, 2, 3], 2, 5), 0.32)

    def test_high_quantity_penalty(self):
        # 8 / 5 > 1.5
        self.assertAlmostEqual(confidence_level([5, 5, 1, 2, 3], 8, 5), 0.224)

    def test_clamped_to_floor(self):
        self.assertEqual(confidence_level([1, 2], 1, 6), 0.1)
        self.assertEqual(confidence_level([1, 2], 9, 6), 0.1)

    def test_empty_hand_rejected(self):
        with self.assertRaises(ValueError):
            confidence_level([], 1, 1)


if __name__ == '__main__':
    unittest.main()
