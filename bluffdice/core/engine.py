"""
engine.py
Implements the GameEngine class, which runs a two-player match: rolls dice, enforces turn and
bid order, settles challenges with the bid evaluator, removes dice from round losers and
detects the end of the game. Every state change is emitted as an event dict.
Related modules:
- config.py: GameConfig is used to configure the engine.
- state.py: GameState, PlayerState, PublicState hold all game data.
- actions.py: Actions are applied to update state.
- bid.py: Bid validation and ordering.
- rules.py: evaluate settles a call.
"""

import random
from typing import Dict, List, Optional, Sequence

from .config import GameConfig
from .state import PlayerState, PublicState, GameState
from .dice import roll_n
from .bid import Bid
from .actions import BidAction, CallLiarAction, NoBidAction, Action
from .rules import evaluate


class IllegalMoveError(Exception):
    """
    Raised when an illegal action is attempted (invalid move, wrong turn, etc).
    """
    pass


class GameEngine:
    """
    Match state machine for Liar's Dice. Manages game state, applies actions, enforces legality, and emits events.
    Interacts with agents via get_view and apply_action.
    """
    def __init__(self, config: Optional[GameConfig] = None):
        """
        Initialize a new match with the given configuration.
        Args:
            config (GameConfig): Game configuration (defaults to GameConfig()).
        """
        self.config = config or GameConfig()
        if self.config.num_players != 2:
            raise ValueError("only two-player games are supported")
        self.rng = random.Random(self.config.rng_seed)
        dist = self.config.starting_dice()
        if len(dist) != 2 or min(dist) < 1:
            raise ValueError("each of the two players needs at least one starting die")

        p0 = PlayerState(player_id=0, num_dice=dist[0])
        p1 = PlayerState(player_id=1, num_dice=dist[1])
        public = PublicState(dice_counts=(p0.num_dice, p1.num_dice))
        self.state = GameState(config=self.config, players=(p0, p1), public=public)
        self._events = []
        # per-action snapshots, JSON-serialisable
        self.turn_log = []

    def _emit(self, event: Dict):
        self._events.append(event)

    def pop_events(self):
        """
        Return and clear all emitted events since last call.
        Returns:
            list[dict]: List of event dicts.
        """
        ev = list(self._events)
        self._events.clear()
        return ev

    def get_events(self):
        """Return all events emitted so far (does not clear)."""
        return list(self._events)

    def _snapshot(self, actor: int = None, action: Dict = None):
        """
        Internal: Create a snapshot of the current state for logging/replay.
        Args:
            actor (int|None): Player who made the action.
            action (dict|None): Action that produced this state.
        Returns:
            dict: Snapshot of state.
        """
        players_snapshot = []
        for p in self.state.players:
            players_snapshot.append({
                "player_id": p.player_id,
                "num_dice": p.num_dice,
                "private_dice": list(p.private_dice),
            })

        public = self.state.public
        last_bid_ser = None if public.last_bid is None else (public.last_bid.quantity, public.last_bid.face)
        public_snapshot = {
            "round_index": public.round_index,
            "turn_index": public.turn_index,
            "current_player": public.current_player,
            "last_bid": last_bid_ser,
            "bid_history": [(b.quantity, b.face) for b in public.bid_history],
            "dice_counts": list(public.dice_counts),
            "status": public.status,
            "round_winner": public.round_winner,
            "round_loser": public.round_loser,
            "winner": public.winner,
        }

        snap = {
            "actor": actor,
            "action": action,
            "public": public_snapshot,
            "players": players_snapshot,
        }
        self.turn_log.append(snap)
        return snap

    def _sync_dice_counts(self) -> None:
        self.state.public.dice_counts = tuple(p.num_dice for p in self.state.players)

    def _opening_player(self) -> int:
        """Player 0 opens the match; afterwards the loser of the last round opens, if still in the game."""
        loser = self.state.public.round_loser
        if loser is None:
            return 0
        if self.state.players[loser].num_dice > 0:
            return loser
        return 1 - loser

    def start_new_round(self) -> None:
        """
        Start a new round: reroll every remaining die, clear the standing bid, emit initial events.
        Raises:
            IllegalMoveError: If the match is over or a round is still being bid.
        """
        public = self.state.public
        if public.status == "GAME_OVER":
            raise IllegalMoveError("Game is over")
        if public.status == "BIDDING":
            raise IllegalMoveError("Round still in progress")
        p0, p1 = self.state.players
        p0.private_dice = roll_n(p0.num_dice, self.rng)
        p1.private_dice = roll_n(p1.num_dice, self.rng)
        public.current_player = self._opening_player()
        public.status = "BIDDING"
        public.round_index += 1
        public.turn_index = 0
        public.last_bid = None
        public.last_bidder = None
        public.bid_history = []
        self._sync_dice_counts()
        self._emit({"type": "RoundStarted", "round": public.round_index, "opener": public.current_player})
        self._emit({"type": "DiceRolled", "player0": p0.private_dice.copy(), "player1": p1.private_dice.copy()})
        self._snapshot(actor=None, action=None)

    def get_view(self, player_id: int):
        """
        Get a player-specific view of the game state (public info + private dice).
        Args:
            player_id (int): Player index (0 or 1).
        Returns:
            dict: Player view for agent decision-making.
        """
        p = self.state.players[player_id]
        return {
            "player_id": player_id,
            "public": self.state.public,
            "my_dice": tuple(p.private_dice),
            "total_dice": self.state.public.total_dice,
            "config": self.config,
        }

    def sanitize_computer_action(self, action: Action) -> Action:
        """
        Re-validate a computer decision against the current round.
        A degenerate NoBidAction, or a bid that is invalid or not higher than the standing bid,
        is turned into a call. An opening bid above the dice in play is clamped to that total.
        Args:
            action (Action): Action proposed by an agent.
        Returns:
            Action: An action apply_action will accept (for bids and calls with a standing bid).
        """
        last = self.state.public.last_bid
        total = self.state.public.total_dice
        if isinstance(action, NoBidAction):
            return CallLiarAction() if last is not None else action
        if not isinstance(action, BidAction):
            return action
        bid = action.bid
        if last is None:
            if bid.quantity > total:
                return BidAction(Bid(total, bid.face))
            return action
        try:
            bid.validate(total)
        except ValueError:
            return CallLiarAction()
        if not bid.is_higher_than(last):
            return CallLiarAction()
        return action

    def apply_action(self, player_id: int, action: Action) -> None:
        """
        Apply an action for the given player, updating state and emitting events.
        Args:
            player_id (int): Player index (0 or 1).
            action (Action): BidAction or CallLiarAction.
        Raises:
            IllegalMoveError: If action is invalid or not player's turn.
        """
        public = self.state.public
        if public.status != "BIDDING":
            raise IllegalMoveError("Game is not in bidding state")
        if player_id != public.current_player:
            raise IllegalMoveError("Not player's turn")

        if isinstance(action, NoBidAction):
            raise IllegalMoveError("Degenerate bid cannot be played")

        if isinstance(action, BidAction):
            bid = action.bid
            try:
                bid.validate(public.total_dice)
            except ValueError as e:
                raise IllegalMoveError(f"Invalid bid: {e}") from e
            if not bid.is_higher_than(public.last_bid):
                raise IllegalMoveError("Bid is not higher than last bid")
            public.last_bid = bid
            public.last_bidder = player_id
            public.bid_history.append(bid)
            public.turn_index += 1
            public.current_player = 1 - player_id
            self._emit({"type": "BidPlaced", "player": player_id, "bid": (bid.quantity, bid.face)})
            action_ser = {"type": "Bid", "bid": (bid.quantity, bid.face)}

        elif isinstance(action, CallLiarAction):
            if public.last_bid is None:
                raise IllegalMoveError("No bid to call")
            last = public.last_bid
            self._emit({"type": "LiarCalled", "caller": player_id, "last_bid": (last.quantity, last.face)})
            action_ser = {"type": "CallLiar"}
            self._resolve_call(caller_id=player_id)
        else:
            raise IllegalMoveError("Unknown action")

        self._snapshot(actor=player_id, action=action_ser)

    def _resolve_call(self, caller_id: int) -> None:
        """
        Internal: reveal all dice, settle the standing bid, take a die from the loser and
        end the match when someone runs out of dice.
        Args:
            caller_id (int): Player who called liar.
        """
        public = self.state.public
        last_bid = public.last_bid
        p0, p1 = self.state.players
        result = evaluate(p0.private_dice + p1.private_dice, last_bid)
        # caller loses if the bid held, otherwise the bidder does
        if result.bid_held:
            loser = caller_id
        else:
            loser = public.last_bidder
        winner = 1 - loser

        self.state.players[loser].num_dice -= 1
        self._sync_dice_counts()
        public.round_winner = winner
        public.round_loser = loser

        self._emit({"type": "DiceRevealed", "all_dice": {0: list(p0.private_dice), 1: list(p1.private_dice)}})
        self._emit({"type": "RoundEnded", "caller": caller_id, "winner": winner, "loser": loser,
                    "match_count": result.actual_count, "was_true": result.bid_held})
        self._emit({"type": "DiceLost", "player": loser, "remaining": self.state.players[loser].num_dice})

        if self.state.players[loser].num_dice == 0:
            public.status = "GAME_OVER"
            public.winner = winner
            self._emit({"type": "GameEnded", "winner": winner, "rounds": public.round_index})
        else:
            public.status = "ROUND_OVER"

    def is_round_over(self) -> bool:
        """True once the current round has been settled by a call."""
        return self.state.public.status in ("ROUND_OVER", "GAME_OVER")

    def is_game_over(self) -> bool:
        """True once either player has no dice left."""
        return self.state.public.status == "GAME_OVER"


def play_round(engine: GameEngine, agents: Sequence) -> List[Dict]:
    """
    Play one round between two agents, re-validating every agent decision.
    Args:
        engine (GameEngine): Engine with no round in progress.
        agents (sequence): Agent for player 0 and player 1.
    Returns:
        list[dict]: Events emitted during the round.
    Raises:
        IllegalMoveError: If an agent still plays illegally after re-validation, or the
            round runs past config.turn_limit().
    """
    engine.start_new_round()
    turns = 0
    limit = engine.config.turn_limit(engine.state.public.total_dice)
    while not engine.is_round_over():
        if turns >= limit:
            raise IllegalMoveError(f"Round exceeded {limit} turns")
        current = engine.state.public.current_player
        action = agents[current].choose_action(engine.get_view(current))
        engine.apply_action(current, engine.sanitize_computer_action(action))
        turns += 1
    return engine.pop_events()


def play_match(engine: GameEngine, agents: Sequence) -> int:
    """
    Play rounds until one player has no dice left.
    Returns:
        int: Index of the winning player.
    """
    while not engine.is_game_over():
        play_round(engine, agents)
    return engine.state.public.winner
