"""
Canonical serialization for replay digests.

Boards, turns and score vectors all reduce to plain JSON so the same
replay always produces the same bytes.
"""

import json
from typing import Any

from .board import Board, BoardSnapshot
from .turns import TURN_TYPES


def canonicalize(obj: Any) -> Any:
    """
    Convert replay values to canonical JSON-ready form.

    Rules:
    - dict keys sorted (keys coerced to str)
    - tuples converted to lists
    - boards converted to nested lists
    - turn variants converted to their wire records
    """
    if isinstance(obj, (Board, BoardSnapshot)):
        return obj.to_list()
    if isinstance(obj, TURN_TYPES):
        return canonicalize(obj.to_record())
    if isinstance(obj, dict):
        return {str(k): canonicalize(obj[k]) for k in sorted(obj.keys(), key=str)}
    if isinstance(obj, (list, tuple)):
        return [canonicalize(x) for x in obj]
    return obj


def canonical_json_bytes(obj: Any) -> bytes:
    """
    Deterministic JSON bytes for hashing.

    Returns:
        UTF-8 encoded JSON without whitespace, keys sorted
    """
    canon = canonicalize(obj)
    s = json.dumps(canon, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    return s.encode("utf-8")


def canonical_json_str(obj: Any) -> str:
    """Same as canonical_json_bytes, decoded."""
    return canonical_json_bytes(obj).decode("utf-8")
