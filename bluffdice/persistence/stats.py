"""
stats.py
Win/loss counters for the human player, kept behind a small key-value port so the
orchestrator can store them anywhere (memory for tests, a JSON file for the CLI).
Values are stored as decimal strings; a missing key reads as 0.
Related modules:
- serializer.py: JSON encoding for JsonFileStore.
- UI/cli.py: Records every finished game.
"""

import os
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Optional

from . import serializer


WINS_KEY = "player_wins"
LOSSES_KEY = "player_losses"
GAMES_KEY = "games_played"


class KeyValueStore(ABC):
    """
    Persistence port for simple string values.
    """

    @abstractmethod
    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    @abstractmethod
    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class InMemoryStore(KeyValueStore):
    """Dict-backed store; nothing outlives the process."""
    def __init__(self, initial: Optional[Dict[str, str]] = None):
        self._data: Dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)


class JsonFileStore(KeyValueStore):
    """
    Store backed by a single JSON object on disk. The file is read on every get and
    rewritten on every set, so several processes can share it between games.
    """
    def __init__(self, path: str):
        self.path = path

    def _load(self) -> Dict[str, str]:
        if not os.path.exists(self.path):
            return {}
        with open(self.path, "r", encoding="utf-8") as f:
            content = f.read()
        if not content.strip():
            return {}
        data = serializer.loads(content)
        if not isinstance(data, dict):
            raise ValueError(f"stats file {self.path} does not hold a JSON object")
        return data

    def get(self, key: str) -> Optional[str]:
        value = self._load().get(key)
        return None if value is None else str(value)

    def set(self, key: str, value: str) -> None:
        data = self._load()
        data[key] = str(value)
        directory = os.path.dirname(self.path)
        if directory:
            os.makedirs(directory, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as f:
            f.write(serializer.dumps(data))


@dataclass(frozen=True)
class GameStats:
    """
    Counters from the human player's point of view.
    Fields:
        wins (int): Games won against the computer.
        losses (int): Games lost against the computer.
        games_played (int): All finished games.
    """
    wins: int = 0
    losses: int = 0
    games_played: int = 0

    @property
    def win_rate(self) -> float:
        return self.wins / self.games_played if self.games_played else 0.0


def _read_int(store: KeyValueStore, key: str) -> int:
    raw = store.get(key)
    return int(raw) if raw else 0


def _increment(store: KeyValueStore, key: str) -> None:
    store.set(key, str(_read_int(store, key) + 1))


def record_game(store: KeyValueStore, winner: str) -> GameStats:
    """
    Count a finished game.
    Args:
        store (KeyValueStore): Where the counters live.
        winner (str): 'player' or 'computer'.
    Returns:
        GameStats: Counters after the update.
    Raises:
        ValueError: For any other winner value.
    """
    if winner == "player":
        _increment(store, WINS_KEY)
    elif winner == "computer":
        _increment(store, LOSSES_KEY)
    else:
        raise ValueError(f"winner must be 'player' or 'computer', got {winner!r}")
    _increment(store, GAMES_KEY)
    return read_stats(store)


def read_stats(store: KeyValueStore) -> GameStats:
    """Current counters; missing keys count as zero."""
    return GameStats(
        wins=_read_int(store, WINS_KEY),
        losses=_read_int(store, LOSSES_KEY),
        games_played=_read_int(store, GAMES_KEY),
    )
