"""
Core replay primitives.

This module provides the building blocks used by the replay builder:
- Cells: Cell encoding (empty, fish, player token)
- Board: Mutable working grid and immutable snapshots
- Turns: Closed set of turn variants and the tolerant record parser
- Applicator: Board transition per turn variant
- Scores: Cumulative score vector updates
- Canonical: Deterministic serialization
"""

from .cells import Cell, CellKind, MAX_PLAYERS, decode_cell, player_label, player_token, player_index
from .board import Board, BoardSnapshot
from .turns import Move, Pass, Place, Turn, Unrecognized, parse_turn, coerce_turn
from .applicator import TurnApplicator, apply_turn
from .scores import initial_scores, next_scores, scorer_known
from .canonical import canonicalize, canonical_json_bytes, canonical_json_str
from .errors import (
    ReplayError,
    MalformedDocumentError,
    InvalidCellValueError,
    OutOfBoundsError,
    UnknownPlayerError,
    InvalidPlayerCountError,
    UnrecognizedTurnError,
    ReplayCancelledError,
    InvalidTransitionError,
)

__all__ = [
    "Cell",
    "CellKind",
    "MAX_PLAYERS",
    "decode_cell",
    "player_label",
    "player_token",
    "player_index",
    "Board",
    "BoardSnapshot",
    "Move",
    "Pass",
    "Place",
    "Turn",
    "Unrecognized",
    "parse_turn",
    "coerce_turn",
    "TurnApplicator",
    "apply_turn",
    "initial_scores",
    "next_scores",
    "scorer_known",
    "canonicalize",
    "canonical_json_bytes",
    "canonical_json_str",
    "ReplayError",
    "MalformedDocumentError",
    "InvalidCellValueError",
    "OutOfBoundsError",
    "UnknownPlayerError",
    "InvalidPlayerCountError",
    "UnrecognizedTurnError",
    "ReplayCancelledError",
    "InvalidTransitionError",
]
