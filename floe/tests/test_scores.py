"""
Tests for score tracking.
"""

import pytest

from floe.core.errors import UnknownPlayerError
from floe.core.scores import initial_scores, next_scores, score_update, scorer_known
from floe.core.turns import Move, Pass, Place, parse_turn


def test_initial_scores():
    assert initial_scores(3) == (0, 0, 0)


def test_place_overwrites_one_index():
    prev = (0, 0)
    new = next_scores(prev, Place(row=0, col=1, player=129, score=5), 2)

    assert new == (0, 5)
    assert prev == (0, 0)


def test_score_is_total_not_delta():
    assert next_scores((7, 3), Move(0, 0, 1, 1, player=128, score=9), 2) == (9, 3)


def test_turn_without_pair_keeps_scores():
    assert next_scores((2, 4), Pass(), 2) == (2, 4)
    # player without score is not a pair
    assert next_scores((2, 4), Pass(player=128), 2) == (2, 4)
    assert score_update(Move(0, 0, 0, 1)) is None


def test_pass_with_pair_updates_scores():
    assert next_scores((0, 0), Pass(player=129, score=3), 2) == (0, 3)


def test_unrecognized_turn_still_scores():
    turn = parse_turn({"type": "bogus", "player": 128, "score": 11})
    assert next_scores((0, 0), turn, 2) == (11, 0)


def test_unknown_player_leaves_scores_unchanged():
    assert next_scores((3, 4), Pass(player=130, score=1), 2) == (3, 4)
    assert next_scores((3, 4), Pass(player=5, score=1), 2) == (3, 4)
    assert not scorer_known(Pass(player=130, score=1), 2)
    assert scorer_known(Pass(player=129, score=1), 2)
    # no pair, nothing to check
    assert scorer_known(Pass(player=130), 2)


def test_unknown_player_raises_in_strict_mode():
    with pytest.raises(UnknownPlayerError):
        next_scores((0, 0), Pass(player=130, score=1), 2, strict=True)
    with pytest.raises(UnknownPlayerError):
        next_scores((0, 0), Pass(player=5, score=1), 2, strict=True)


def test_next_scores_accepts_lists():
    prev = [1, 2]
    assert next_scores(prev, Pass(player=128, score=4)) == (4, 2)
    assert prev == [1, 2]
