"""
Tests for cell encoding.
"""

import pytest

from floe.core.cells import (
    CellKind,
    decode_cell,
    player_index,
    player_label,
    player_token,
)
from floe.core.errors import InvalidCellValueError


def test_decode_empty_food_player():
    assert decode_cell(0).kind is CellKind.EMPTY

    food = decode_cell(3)
    assert food.kind is CellKind.FOOD
    assert food.food == 3
    assert food.label == "3"

    player = decode_cell(129)
    assert player.kind is CellKind.PLAYER
    assert player.player == 1
    assert player.label == "B"


@pytest.mark.parametrize("value", [4, 127, -1, 128 + 26, 255, 1.0, True, "1", None])
def test_decode_rejects_values_outside_encoding(value):
    with pytest.raises(InvalidCellValueError):
        decode_cell(value)


def test_decode_respects_player_count():
    """Token for player C is invalid in a two-player game."""
    assert decode_cell(129, player_count=2).player == 1
    with pytest.raises(InvalidCellValueError):
        decode_cell(130, player_count=2)


def test_player_token_roundtrip_and_labels():
    assert player_token(0) == 128
    assert player_index(131) == 3
    assert player_label(0) == "A"
    assert player_label(25) == "Z"
    with pytest.raises(InvalidCellValueError):
        player_token(26)
