"""
Tests for canonical serialization.

Critical: These tests verify determinism guarantees.
"""

from floe.core.board import Board, BoardSnapshot
from floe.core.canonical import canonicalize, canonical_json_bytes, canonical_json_str
from floe.core.turns import Move, Pass


def test_canonicalize_dict_key_order():
    """Dict key order must not affect canonical output."""
    d1 = {"z": 1, "a": 2, "m": 3}
    d2 = {"a": 2, "m": 3, "z": 1}

    assert canonicalize(d1) == canonicalize(d2)
    assert list(canonicalize(d1).keys()) == ["a", "m", "z"]


def test_canonicalize_boards_and_tuples():
    snap = BoardSnapshot(rows=((0, 1), (128, 0)))

    assert canonicalize(snap) == [[0, 1], [128, 0]]
    assert canonicalize(Board([[0, 1]])) == [[0, 1]]
    assert canonicalize({"scores": (1, 2)}) == {"scores": [1, 2]}


def test_canonicalize_turns_to_wire_records():
    assert canonicalize(Pass()) == {"type": "pass"}
    assert canonicalize(Move(0, 1, 2, 3, player=128, score=4)) == {
        "dst_col": 3,
        "dst_row": 2,
        "player": 128,
        "score": 4,
        "src_col": 1,
        "src_row": 0,
        "type": "move",
    }


def test_canonical_json_str_determinism():
    """Same object must produce identical string."""
    obj = {"b": 2, "a": 1}

    assert canonical_json_str(obj) == canonical_json_str(obj)
    assert canonical_json_str(obj) == '{"a":1,"b":2}'


def test_canonical_json_bytes_for_snapshot():
    b = canonical_json_bytes({"board": BoardSnapshot(rows=((3,),))})
    assert isinstance(b, bytes)
    assert b == b'{"board":[[3]]}'
