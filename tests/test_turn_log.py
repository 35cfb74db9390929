import json
import unittest
from bluffdice.core.config import GameConfig
from bluffdice.core.engine import GameEngine
from bluffdice.core.bid import Bid
from bluffdice.core.actions import BidAction, CallLiarAction


class TestTurnLog(unittest.TestCase):
    """
    Tests for the per-turn `turn_log` snapshots recorded by `GameEngine`.
    These tests verify:
      - An initial snapshot is recorded at the start of the round.
      - After each action a snapshot is appended containing actor, action, public and players info.
      - The snapshot after a call reflects the settled round and the lost die.
    """

    def test_initial_and_action_snapshots(self):
        engine = GameEngine(GameConfig())
        engine.start_new_round()
        self.assertEqual(len(engine.turn_log), 1)
        initial = engine.turn_log[0]
        self.assertIsNone(initial['actor'])
        self.assertIsNone(initial['action'])
        engine.apply_action(0, BidAction(Bid(1, 2)))
        self.assertEqual(len(engine.turn_log), 2)
        second = engine.turn_log[-1]
        self.assertEqual(second['actor'], 0)
        self.assertEqual(second['action']['type'], 'Bid')
        self.assertEqual(second['public']['last_bid'], (1, 2))
        self.assertIn('players', second)

    def test_final_snapshot_on_call(self):
        engine = GameEngine(GameConfig())
        engine.start_new_round()
        engine.apply_action(0, BidAction(Bid(1, 2)))
        engine.apply_action(1, CallLiarAction())
        self.assertEqual(engine.state.public.status, 'ROUND_OVER')
        last = engine.turn_log[-1]
        self.assertEqual(last['action']['type'], 'CallLiar')
        self.assertEqual(last['public']['status'], 'ROUND_OVER')
        self.assertEqual(sum(last['public']['dice_counts']), 9)

    def test_snapshots_are_json_serialisable(self):
        engine = GameEngine(GameConfig(rng_seed=4))
        engine.start_new_round()
        engine.apply_action(0, BidAction(Bid(2, 3)))
        json.dumps(engine.turn_log)

    def test_player_snapshot_fields(self):
        engine = GameEngine(GameConfig())
        engine.start_new_round()
        for player in engine.turn_log[0]['players']:
            self.assertEqual(set(player), {'player_id', 'num_dice', 'private_dice'})


if __name__ == '__main__':
    unittest.main()
