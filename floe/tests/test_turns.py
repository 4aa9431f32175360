"""
Tests for turn record parsing.
"""

import logging

from floe.core.turns import (
    MISSING_FIELDS,
    UNKNOWN_KIND,
    Move,
    Pass,
    Place,
    Unrecognized,
    coerce_turn,
    parse_turn,
)


def test_parse_pass_keeps_score_pair():
    assert parse_turn({"type": "pass"}) == Pass()
    assert parse_turn({"type": "pass", "player": 129, "score": 4}) == Pass(player=129, score=4)


def test_parse_place_uses_src_fields_as_destination():
    turn = parse_turn({"type": "place", "src_row": 1, "src_col": 2, "player": 128, "score": 0})
    assert turn == Place(row=1, col=2, player=128, score=0)
    assert turn.to_record() == {"type": "place", "src_row": 1, "src_col": 2, "player": 128, "score": 0}


def test_parse_move():
    turn = parse_turn({"type": "move", "src_row": 0, "src_col": 0, "dst_row": 1, "dst_col": 1})
    assert turn == Move(0, 0, 1, 1)
    assert turn.src == (0, 0)
    assert turn.dst == (1, 1)


def test_incomplete_records_become_unrecognized():
    place = parse_turn({"type": "place", "src_row": 1, "player": 128, "score": 3})
    assert isinstance(place, Unrecognized)
    assert place.reason == MISSING_FIELDS
    assert place.declared_type == "place"
    # score pair survives for the score tracker
    assert (place.player, place.score) == (128, 3)

    move = parse_turn({"type": "move", "src_row": 0, "src_col": 0, "dst_row": 1})
    assert isinstance(move, Unrecognized)
    assert move.reason == MISSING_FIELDS


def test_place_without_player_is_incomplete():
    turn = parse_turn({"type": "place", "src_row": 0, "src_col": 0})
    assert isinstance(turn, Unrecognized)
    assert turn.reason == MISSING_FIELDS


def test_non_integer_fields_count_as_missing():
    turn = parse_turn({"type": "move", "src_row": "0", "src_col": 0, "dst_row": 1, "dst_col": None})
    assert isinstance(turn, Unrecognized)

    flagged = parse_turn({"type": "pass", "player": True, "score": 1})
    assert flagged.player is None


def test_unknown_kind():
    turn = parse_turn({"type": "teleport", "src_row": 0, "src_col": 0})
    assert isinstance(turn, Unrecognized)
    assert turn.reason == UNKNOWN_KIND
    assert turn.declared_type == "teleport"
    assert turn.to_record()["type"] == "teleport"

    untyped = parse_turn({})
    assert untyped.declared_type is None
    assert untyped.reason == UNKNOWN_KIND


def test_coerce_turn_passes_variants_through():
    turn = Move(0, 0, 0, 1)
    assert coerce_turn(turn) is turn
    assert coerce_turn({"type": "pass"}) == Pass()


def test_non_mapping_record_is_unknown_kind():
    for record in (None, [1, 2], 7, "pass"):
        turn = parse_turn(record)
        assert isinstance(turn, Unrecognized)
        assert turn.declared_type is None
        assert turn.reason == UNKNOWN_KIND
        assert turn.to_record() == {}
    assert isinstance(coerce_turn(None), Unrecognized)


def test_non_integer_score_is_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="floe.core.turns"):
        turn = parse_turn({"type": "pass", "player": 128, "score": 2.5})

    assert turn == Pass(player=128)
    assert "non-integer score=2.5" in caplog.text


def test_absent_fields_are_not_logged(caplog):
    with caplog.at_level(logging.WARNING, logger="floe.core.turns"):
        parse_turn({"type": "pass"})
    assert caplog.records == []
