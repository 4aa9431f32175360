"""
Turn model: the closed set of turn variants found in a game log.

Raw records are parsed tolerantly. A record of unknown type, or one missing
the fields its type needs, becomes an Unrecognized turn instead of an error,
so one bad record never blocks a replay.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Union

PASS = "pass"
PLACE = "place"
MOVE = "move"

UNKNOWN_KIND = "unknown-kind"
MISSING_FIELDS = "missing-fields"
UNKNOWN_PLAYER = "unknown-player"

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Pass:
    """Turn with no board effect. May still report a score."""
    player: Optional[int] = None
    score: Optional[int] = None

    kind: ClassVar[str] = PASS

    def to_record(self) -> Dict[str, Any]:
        return _with_score({"type": PASS}, self.player, self.score)


@dataclass(frozen=True)
class Place:
    """Put player's token on (row, col). Wire fields are src_row/src_col."""
    row: int
    col: int
    player: int
    score: Optional[int] = None

    kind: ClassVar[str] = PLACE

    def to_record(self) -> Dict[str, Any]:
        rec = {"type": PLACE, "src_row": self.row, "src_col": self.col}
        return _with_score(rec, self.player, self.score)


@dataclass(frozen=True)
class Move:
    """Move whatever is on the source cell to the destination, leaving 0 behind."""
    src_row: int
    src_col: int
    dst_row: int
    dst_col: int
    player: Optional[int] = None
    score: Optional[int] = None

    kind: ClassVar[str] = MOVE

    @property
    def src(self) -> Tuple[int, int]:
        return (self.src_row, self.src_col)

    @property
    def dst(self) -> Tuple[int, int]:
        return (self.dst_row, self.dst_col)

    def to_record(self) -> Dict[str, Any]:
        rec = {
            "type": MOVE,
            "src_row": self.src_row,
            "src_col": self.src_col,
            "dst_row": self.dst_row,
            "dst_col": self.dst_col,
        }
        return _with_score(rec, self.player, self.score)


@dataclass(frozen=True)
class Unrecognized:
    """
    Record that cannot affect the board.

    Fields:
        declared_type: The record's "type" value, if any
        reason: UNKNOWN_KIND or MISSING_FIELDS
        player/score: Still honoured by the score tracker
        record: The raw record, kept for diagnostics
    """
    declared_type: Optional[str]
    reason: str
    player: Optional[int] = None
    score: Optional[int] = None
    record: Dict[str, Any] = field(default_factory=dict, compare=False)

    kind: ClassVar[str] = "unrecognized"

    def to_record(self) -> Dict[str, Any]:
        return dict(self.record)


Turn = Union[Pass, Place, Move, Unrecognized]
TURN_TYPES = (Pass, Place, Move, Unrecognized)


def _with_score(rec: Dict[str, Any], player: Optional[int], score: Optional[int]) -> Dict[str, Any]:
    if player is not None:
        rec["player"] = player
    if score is not None:
        rec["score"] = score
    return rec


def _int_field(record: Mapping[str, Any], key: str) -> Optional[int]:
    value = record.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    logger.warning("Ignoring non-integer %s=%r in %r turn record", key, value, record.get("type"))
    return None


def parse_turn(record: Mapping[str, Any]) -> Turn:
    """
    Convert a raw turn record into a turn variant.

    Never raises for unknown types or missing fields; see Unrecognized.
    Anything that is not a mapping is an untyped record of unknown kind.
    """
    if not isinstance(record, Mapping):
        logger.warning("Turn record is not a mapping: %r", record)
        return Unrecognized(None, UNKNOWN_KIND)

    declared = record.get("type")
    player = _int_field(record, "player")
    score = _int_field(record, "score")
    src_row = _int_field(record, "src_row")
    src_col = _int_field(record, "src_col")

    if declared == PASS:
        return Pass(player=player, score=score)

    if declared == PLACE:
        if src_row is not None and src_col is not None and player is not None:
            return Place(row=src_row, col=src_col, player=player, score=score)
        return Unrecognized(PLACE, MISSING_FIELDS, player, score, dict(record))

    if declared == MOVE:
        dst_row = _int_field(record, "dst_row")
        dst_col = _int_field(record, "dst_col")
        if None not in (src_row, src_col, dst_row, dst_col):
            return Move(src_row, src_col, dst_row, dst_col, player=player, score=score)
        return Unrecognized(MOVE, MISSING_FIELDS, player, score, dict(record))

    declared_type = declared if isinstance(declared, str) else None
    return Unrecognized(declared_type, UNKNOWN_KIND, player, score, dict(record))


def coerce_turn(turn: Union[Turn, Mapping[str, Any]]) -> Turn:
    if isinstance(turn, TURN_TYPES):
        return turn
    return parse_turn(turn)
