"""
Game document model.

A game document has three sections:
    game:  {width, height, players, fishes, penguins}
    start: height rows of width cell values
    turns: turn records in play order

Validation happens here, before any replay starts, so the builder never
sees a document it would have to partially reconstruct.
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Mapping, Optional, Tuple

from pydantic import BaseModel, Field, StrictInt, ValidationError

from ..core.board import Board, BoardSnapshot
from ..core.cells import MAX_PLAYERS
from ..core.errors import MalformedDocumentError
from ..core.turns import Turn, parse_turn


class GameInfo(BaseModel):
    width: StrictInt = Field(ge=1)
    height: StrictInt = Field(ge=1)
    players: StrictInt = Field(ge=1, le=MAX_PLAYERS)
    # display-only metadata
    fishes: Optional[int] = None
    penguins: Optional[int] = None


class GameDocument(BaseModel):
    game: GameInfo
    start: List[List[StrictInt]]
    turns: List[Dict[str, Any]]


@dataclass(frozen=True)
class GameLog:
    """
    Validated game document.

    Fields:
        info: Game metadata
        start: Initial board
        turns: Parsed turns (unrecognized records included, in order)
        source: Where the document came from, if known
    """
    info: GameInfo
    start: BoardSnapshot
    turns: Tuple[Turn, ...]
    source: Optional[str] = None


def _describe_errors(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or "<root>"
        parts.append(f"{loc}: {err.get('msg')}")
    return "; ".join(parts)


def parse_document(data: Mapping[str, Any], source: Optional[str] = None) -> GameLog:
    """
    Validate a decoded game document.

    Args:
        data: Decoded JSON object
        source: Optional origin (file path) kept for display and logging

    Returns:
        GameLog ready for replay

    Raises:
        MalformedDocumentError: If a section is missing or mistyped, or the
            start board disagrees with game.width/game.height
        InvalidCellValueError: If the start board holds an invalid cell
    """
    if not isinstance(data, Mapping):
        raise MalformedDocumentError(f"game document must be an object, got {type(data).__name__}")
    try:
        doc = GameDocument.model_validate(dict(data))
    except ValidationError as exc:
        raise MalformedDocumentError(_describe_errors(exc)) from exc

    board = Board.from_rows(
        doc.start,
        width=doc.game.width,
        height=doc.game.height,
        player_count=doc.game.players,
    )
    return GameLog(
        info=doc.game,
        start=board.snapshot(),
        turns=tuple(parse_turn(rec) for rec in doc.turns),
        source=source,
    )
