"""
Deterministic query helpers over a built replay.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from .core.board import BoardSnapshot, Coord
from .core.cells import CellKind, decode_cell, player_index, player_label
from .core.turns import Move, Pass, Place, Turn, Unrecognized
from .replay.runner import ReplayResult


def turn_before(result: ReplayResult, index: int) -> Optional[Turn]:
    """Turn that produced states[index]; None for the start state."""
    if not 0 <= index <= result.last_index:
        raise IndexError(f"replay index {index} outside 0..{result.last_index}")
    if index == 0:
        return None
    return result.turns[index - 1]


def move_arrow(result: ReplayResult, index: int) -> Optional[Tuple[Coord, Coord]]:
    """
    Source and destination of the move leading to states[index].

    Returns None unless that turn is a move.
    """
    turn = turn_before(result, index)
    if isinstance(turn, Move):
        return turn.src, turn.dst
    return None


def _who(turn: Turn) -> str:
    if turn.player is None:
        return "?"
    return player_label(player_index(turn.player))


def describe_turn(turn: Optional[Turn]) -> str:
    if turn is None:
        return "start"
    if isinstance(turn, Place):
        text = f"{_who(turn)} places at ({turn.row}, {turn.col})"
    elif isinstance(turn, Move):
        text = f"{_who(turn)} moves ({turn.src_row}, {turn.src_col}) -> ({turn.dst_row}, {turn.dst_col})"
    elif isinstance(turn, Pass):
        text = "pass" if turn.player is None else f"{_who(turn)} passes"
    elif isinstance(turn, Unrecognized):
        text = f"ignored {turn.declared_type or 'untyped'} turn ({turn.reason})"
    else:
        raise TypeError(f"not a turn: {turn!r}")

    if turn.player is not None and turn.score is not None:
        text += f", score {turn.score}"
    return text


def standings(scores: Sequence[int]) -> List[Tuple[str, int]]:
    """(label, score) pairs, highest score first, ties in player order."""
    order = sorted(range(len(scores)), key=lambda i: (-scores[i], i))
    return [(player_label(i), scores[i]) for i in order]


def board_census(snapshot: BoardSnapshot) -> Dict[str, object]:
    """
    Count what is on the board.

    Returns:
        {"empty": n, "food_cells": n, "food_total": n, "players": {label: n}}
    """
    empty = 0
    food_cells = 0
    food_total = 0
    players: Dict[str, int] = {}

    for _, _, value in snapshot.cells():
        cell = decode_cell(value)
        if cell.kind is CellKind.EMPTY:
            empty += 1
        elif cell.kind is CellKind.FOOD:
            food_cells += 1
            food_total += cell.food
        else:
            label = player_label(cell.player)
            players[label] = players.get(label, 0) + 1

    return {
        "empty": empty,
        "food_cells": food_cells,
        "food_total": food_total,
        "players": dict(sorted(players.items())),
    }
