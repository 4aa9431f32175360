"""
Deterministic replay digests.

Same replay always produces the same bytes and the same hash.
"""

import hashlib

from ..core.board import BoardSnapshot
from ..core.canonical import canonical_json_bytes
from .runner import ReplayResult


def serialize_replay(result: ReplayResult) -> bytes:
    """
    Serialize a replay result to canonical bytes.

    Covers states, scores, parsed turns and skipped-turn diagnostics.
    """
    return canonical_json_bytes(result.to_dict())


def replay_digest(result: ReplayResult) -> str:
    """SHA-256 of the canonical replay (64 hex chars)."""
    return hashlib.sha256(serialize_replay(result)).hexdigest()


def snapshot_digest(snapshot: BoardSnapshot) -> str:
    """SHA-256 of a single board snapshot."""
    return hashlib.sha256(canonical_json_bytes(snapshot)).hexdigest()
