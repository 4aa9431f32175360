"""
Tests for the viewer cursor.
"""

import pytest

from floe.replay import build
from floe.viewer import ReplayCursor


def _result():
    return build(
        [[0, 0], [0, 0]],
        [
            {"type": "place", "src_row": 0, "src_col": 0, "player": 128, "score": 0},
            {"type": "move", "src_row": 0, "src_col": 0, "dst_row": 1, "dst_col": 1, "player": 128, "score": 2},
            {"type": "pass"},
        ],
        2,
    )


def test_cursor_navigation_clamps():
    cursor = ReplayCursor(_result())

    assert cursor.at_start
    assert cursor.prev() == 0
    assert cursor.next() == 1
    assert cursor.last() == 3
    assert cursor.at_end
    assert cursor.next() == 3
    assert cursor.first() == 0


def test_cursor_reaches_final_state():
    result = _result()
    cursor = ReplayCursor(result)
    cursor.last()

    assert cursor.board == result.states[-1]
    assert cursor.scores == (2, 0)


def test_cursor_exposes_turn_and_arrow():
    cursor = ReplayCursor(_result(), index=2)

    assert cursor.board.to_list() == [[0, 0], [0, 128]]
    assert cursor.arrow == ((0, 0), (1, 1))
    assert cursor.turn.kind == "move"

    cursor.first()
    assert cursor.turn is None
    assert cursor.arrow is None


def test_cursor_seek_bounds():
    cursor = ReplayCursor(_result())
    assert cursor.seek(3) == 3
    with pytest.raises(IndexError):
        cursor.seek(4)
    with pytest.raises(IndexError):
        cursor.seek(-1)
    with pytest.raises(IndexError):
        ReplayCursor(_result(), index=9)


def test_cursor_does_not_mutate_result():
    result = _result()
    before = result.to_dict()
    cursor = ReplayCursor(result)
    while not cursor.at_end:
        cursor.next()
    assert result.to_dict() == before
