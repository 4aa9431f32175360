"""
Viewer cursor: the single piece of mutable state a presentation layer owns.

The replay itself is immutable; the cursor only moves an index over it.
"""

from typing import Optional, Tuple

from .core.board import BoardSnapshot
from .core.scores import Scores
from .core.turns import Turn
from .query import move_arrow, turn_before
from .replay.runner import ReplayResult


class ReplayCursor:
    """
    Navigable position in a replay, from 0 (start) to len(turns) (final board).

    first/prev/next/last clamp at the ends and return the new index.
    """

    def __init__(self, result: ReplayResult, index: int = 0) -> None:
        self.result = result
        self.index = 0
        self.seek(index)

    @property
    def last_index(self) -> int:
        return self.result.last_index

    @property
    def at_start(self) -> bool:
        return self.index == 0

    @property
    def at_end(self) -> bool:
        return self.index == self.last_index

    @property
    def board(self) -> BoardSnapshot:
        return self.result.states[self.index]

    @property
    def scores(self) -> Scores:
        return self.result.scores[self.index]

    @property
    def turn(self) -> Optional[Turn]:
        return turn_before(self.result, self.index)

    @property
    def arrow(self) -> Optional[Tuple[Tuple[int, int], Tuple[int, int]]]:
        return move_arrow(self.result, self.index)

    def seek(self, index: int) -> int:
        if not 0 <= index <= self.last_index:
            raise IndexError(f"replay index {index} outside 0..{self.last_index}")
        self.index = index
        return self.index

    def first(self) -> int:
        self.index = 0
        return self.index

    def last(self) -> int:
        self.index = self.last_index
        return self.index

    def next(self) -> int:
        if self.index < self.last_index:
            self.index += 1
        return self.index

    def prev(self) -> int:
        if self.index > 0:
            self.index -= 1
        return self.index
