"""
Turn applicator: board transitions for each turn variant.

Handlers mutate the working board in place and return the cells they
touched. Dispatch is keyed on the turn's variant class, and every variant
must have a handler.
"""

from typing import Callable, Dict, Tuple, Type

from .board import Board, Coord
from .errors import InvalidTransitionError
from .turns import Move, Pass, Place, Turn, Unrecognized

# Handler signature: (turn, board) -> touched coordinates
Handler = Callable[[Turn, Board], Tuple[Coord, ...]]


def apply_pass(turn: Pass, board: Board) -> Tuple[Coord, ...]:
    return ()


def apply_place(turn: Place, board: Board) -> Tuple[Coord, ...]:
    board.set(turn.row, turn.col, turn.player)
    return ((turn.row, turn.col),)


def apply_move(turn: Move, board: Board) -> Tuple[Coord, ...]:
    # Both ends are checked before anything is written
    value = board.get(turn.src_row, turn.src_col)
    board.get(turn.dst_row, turn.dst_col)
    board.set(turn.dst_row, turn.dst_col, value)
    board.set(turn.src_row, turn.src_col, 0)
    return (turn.src, turn.dst)


def apply_unrecognized(turn: Unrecognized, board: Board) -> Tuple[Coord, ...]:
    return ()


class TurnApplicator:
    """
    Registry of per-variant board handlers.

    Usage:
        applicator = TurnApplicator()
        touched = applicator.apply(turn, board)
    """

    def __init__(self) -> None:
        self._handlers: Dict[Type, Handler] = {}
        self.register(Pass, apply_pass)
        self.register(Place, apply_place)
        self.register(Move, apply_move)
        self.register(Unrecognized, apply_unrecognized)

    def register(self, turn_type: Type, handler: Handler) -> None:
        """
        Register (or replace) the handler for a turn variant.

        Args:
            turn_type: Variant class
            handler: Function (turn, board) -> touched coordinates
        """
        self._handlers[turn_type] = handler

    def apply(self, turn: Turn, board: Board) -> Tuple[Coord, ...]:
        """
        Apply turn to board in place.

        Returns:
            Coordinates written by the turn (empty for pass/unrecognized)

        Raises:
            InvalidTransitionError: If no handler is registered for the variant
            OutOfBoundsError: If the turn addresses a cell outside the board
            InvalidCellValueError: If a place writes an invalid player token
        """
        handler = self._handlers.get(type(turn))
        if handler is None:
            raise InvalidTransitionError(f"No handler for turn type: {type(turn).__name__}")
        return handler(turn, board)


_default = TurnApplicator()


def apply_turn(turn: Turn, board: Board) -> Tuple[Coord, ...]:
    """Apply turn with the default handler set."""
    return _default.apply(turn, board)
