"""
Cell encoding for the game grid.

A cell is a single integer:
- 0: empty (the ice floe has sunk or was never there)
- 1..3: a fish tile worth that many points
- 128 + p: the token of player p (p = 0 is player "A")
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .errors import InvalidCellValueError

EMPTY = 0
MIN_FOOD = 1
MAX_FOOD = 3
PLAYER_BASE = 0x80
MAX_PLAYERS = 26


class CellKind(str, Enum):
    EMPTY = "empty"
    FOOD = "food"
    PLAYER = "player"


@dataclass(frozen=True)
class Cell:
    """
    Decoded cell.

    Fields:
        kind: Which of the three classes the value belongs to
        value: Raw cell integer
        food: Fish value for FOOD cells, else None
        player: Player index for PLAYER cells, else None
    """
    kind: CellKind
    value: int
    food: Optional[int] = None
    player: Optional[int] = None

    @property
    def label(self) -> str:
        if self.kind is CellKind.PLAYER:
            return player_label(self.player)
        if self.kind is CellKind.FOOD:
            return str(self.food)
        return ""


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def decode_cell(value, player_count: Optional[int] = None) -> Cell:
    """
    Classify a cell integer.

    Args:
        value: Raw cell value
        player_count: When given, player tokens beyond this count are rejected

    Raises:
        InvalidCellValueError: If value is not empty, food or a player token
    """
    if not _is_int(value):
        raise InvalidCellValueError(value, "not an integer")
    if value == EMPTY:
        return Cell(kind=CellKind.EMPTY, value=value)
    if MIN_FOOD <= value <= MAX_FOOD:
        return Cell(kind=CellKind.FOOD, value=value, food=value)
    if PLAYER_BASE <= value < PLAYER_BASE + MAX_PLAYERS:
        index = value - PLAYER_BASE
        if player_count is not None and index >= player_count:
            raise InvalidCellValueError(value, f"player index {index} but only {player_count} players")
        return Cell(kind=CellKind.PLAYER, value=value, player=index)
    raise InvalidCellValueError(value)


def validate_cell(value, player_count: Optional[int] = None) -> int:
    decode_cell(value, player_count)
    return value


def player_token(index: int) -> int:
    """Cell value written for player index."""
    if not 0 <= index < MAX_PLAYERS:
        raise InvalidCellValueError(PLAYER_BASE + index, "player index out of range")
    return PLAYER_BASE + index


def player_index(token: int) -> int:
    """Player index encoded by a token (no range check)."""
    return token - PLAYER_BASE


def player_label(index: int) -> str:
    """Letter shown for player index: 0 -> 'A', 1 -> 'B', ..."""
    return chr(ord("A") + index)
