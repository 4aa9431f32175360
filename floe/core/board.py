"""
Board model: mutable working grid and immutable snapshots.

The replay builder owns exactly one Board while it runs and hands out
BoardSnapshot values, so no two replay entries ever share storage.
"""

from dataclasses import dataclass
from typing import Iterator, List, Optional, Sequence, Tuple

from .cells import validate_cell
from .errors import MalformedDocumentError, OutOfBoundsError

Coord = Tuple[int, int]


def _copy_rows(rows: Sequence[Sequence[int]]) -> List[List[int]]:
    if isinstance(rows, (Board, BoardSnapshot)):
        return rows.to_list()
    if not isinstance(rows, (list, tuple)) or not rows:
        raise MalformedDocumentError("board must have at least one row")
    copied = []
    for r, row in enumerate(rows):
        if not isinstance(row, (list, tuple)):
            raise MalformedDocumentError(f"board row {r} is not a sequence")
        copied.append(list(row))
    width = len(copied[0])
    if width == 0:
        raise MalformedDocumentError("board rows must not be empty")
    for r, row in enumerate(copied):
        if len(row) != width:
            raise MalformedDocumentError(f"board row {r} has {len(row)} cells, expected {width}")
    return copied


@dataclass(frozen=True)
class BoardSnapshot:
    """
    Immutable board captured at a turn boundary.

    Indexing works like the raw grid: snapshot[row][col]. A snapshot also
    compares equal to a nested list or tuple holding the same values.
    """
    rows: Tuple[Tuple[int, ...], ...]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, BoardSnapshot):
            return self.rows == other.rows
        if isinstance(other, (list, tuple)):
            if not all(isinstance(row, (list, tuple)) for row in other):
                return False
            return self.rows == tuple(tuple(row) for row in other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.rows)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0]) if self.rows else 0

    def __getitem__(self, row: int) -> Tuple[int, ...]:
        return self.rows[row]

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Tuple[int, ...]]:
        return iter(self.rows)

    def cell(self, row: int, col: int) -> int:
        if not (0 <= row < self.height and 0 <= col < self.width):
            raise OutOfBoundsError(row, col, self.height, self.width)
        return self.rows[row][col]

    def cells(self) -> Iterator[Tuple[int, int, int]]:
        """Yield (row, col, value) in row-major order."""
        for r, row in enumerate(self.rows):
            for c, value in enumerate(row):
                yield r, c, value

    def diff(self, other: "BoardSnapshot") -> List[Coord]:
        """Coordinates whose values differ between two snapshots of equal shape."""
        if (self.height, self.width) != (other.height, other.width):
            raise ValueError("cannot diff boards of different shape")
        return [
            (r, c)
            for r, c, value in self.cells()
            if other.rows[r][c] != value
        ]

    def to_list(self) -> List[List[int]]:
        return [list(row) for row in self.rows]


class Board:
    """
    Mutable grid of cell values.

    Every write is bounds-checked and validated against the cell encoding.
    Negative indices are rejected rather than wrapped.
    """

    def __init__(self, rows: Sequence[Sequence[int]], player_count: Optional[int] = None) -> None:
        self._rows = _copy_rows(rows)
        self.player_count = player_count
        for row in self._rows:
            for value in row:
                validate_cell(value, player_count)

    @classmethod
    def from_rows(
        cls,
        rows: Sequence[Sequence[int]],
        width: Optional[int] = None,
        height: Optional[int] = None,
        player_count: Optional[int] = None,
    ) -> "Board":
        """
        Build a board and check it against declared dimensions.

        Raises:
            MalformedDocumentError: If the grid is ragged or disagrees with width/height
            InvalidCellValueError: If any cell is outside the encoding
        """
        board = cls(rows, player_count=player_count)
        if height is not None and board.height != height:
            raise MalformedDocumentError(f"board has {board.height} rows, game declares height {height}")
        if width is not None and board.width != width:
            raise MalformedDocumentError(f"board has {board.width} columns, game declares width {width}")
        return board

    @property
    def height(self) -> int:
        return len(self._rows)

    @property
    def width(self) -> int:
        return len(self._rows[0])

    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.height and 0 <= col < self.width

    def _check(self, row: int, col: int) -> None:
        if not self.contains(row, col):
            raise OutOfBoundsError(row, col, self.height, self.width)

    def get(self, row: int, col: int) -> int:
        self._check(row, col)
        return self._rows[row][col]

    def set(self, row: int, col: int, value: int) -> None:
        self._check(row, col)
        self._rows[row][col] = validate_cell(value, self.player_count)

    def snapshot(self) -> BoardSnapshot:
        return BoardSnapshot(rows=tuple(tuple(row) for row in self._rows))

    def copy(self) -> "Board":
        return Board(self._rows, player_count=self.player_count)

    def to_list(self) -> List[List[int]]:
        return [list(row) for row in self._rows]

    def __repr__(self) -> str:
        return f"Board({self.height}x{self.width})"
