"""
Replay system for board and score reconstruction.

Replay applies turns to a working board in log order and snapshots every
turn boundary. Must be 100% deterministic: same log -> same states.
"""

from .runner import ReplayResult, SkippedTurn, build, replay_game
from .digest import replay_digest, serialize_replay, snapshot_digest

__all__ = [
    "ReplayResult",
    "SkippedTurn",
    "build",
    "replay_game",
    "replay_digest",
    "serialize_replay",
    "snapshot_digest",
]
