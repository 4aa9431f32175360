"""
Exception types for the replay engine.
"""

from typing import Optional


class ReplayError(Exception):
    """Base class for every failure reported by the replay engine."""

    turn_index: Optional[int] = None

    def at_turn(self, index: int) -> "ReplayError":
        """Attach the index of the turn being processed and return self."""
        self.turn_index = index
        return self

    def __str__(self) -> str:
        msg = super().__str__()
        if self.turn_index is not None:
            return f"turn {self.turn_index}: {msg}"
        return msg


class MalformedDocumentError(ReplayError, ValueError):
    """Raised when a game document is missing sections or has inconsistent shape."""
    pass


class InvalidCellValueError(ReplayError, ValueError):
    """Raised when a cell value is not empty, food (1-3) or a known player token."""

    def __init__(self, value, reason: str = "") -> None:
        self.value = value
        detail = f"invalid cell value {value!r}"
        if reason:
            detail = f"{detail} ({reason})"
        super().__init__(detail)


class OutOfBoundsError(ReplayError, IndexError):
    """Raised when a turn addresses a cell outside the board."""

    def __init__(self, row: int, col: int, height: int, width: int) -> None:
        self.row = row
        self.col = col
        self.height = height
        self.width = width
        super().__init__(f"cell ({row}, {col}) outside {height}x{width} board")


class UnknownPlayerError(ReplayError):
    """Raised when a turn reports a score for a player the game does not have."""
    pass


class InvalidPlayerCountError(ReplayError, ValueError):
    """Raised when the player count cannot be encoded as player letters."""
    pass


class UnrecognizedTurnError(ReplayError):
    """Raised in strict mode for a turn of unknown kind or with missing fields."""
    pass


class ReplayCancelledError(ReplayError):
    """Raised when the caller cancels a build between two turns."""
    pass


class InvalidTransitionError(ReplayError):
    """Raised when no handler is registered for a turn variant."""
    pass
