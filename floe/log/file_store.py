"""
File-based game log loading (JSON).
"""

import json
import logging
import os

from ..core.errors import MalformedDocumentError
from .document import GameLog, parse_document

logger = logging.getLogger(__name__)


def load_game_log(path: str) -> GameLog:
    """
    Read and validate a JSON game document.

    Raises:
        FileNotFoundError: If path does not exist
        MalformedDocumentError: If the file is not valid JSON or not a valid document
    """
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f)
        except json.JSONDecodeError as exc:
            raise MalformedDocumentError(f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})") from exc

    game_log = parse_document(data, source=os.fspath(path))
    logger.debug(
        "Loaded %s: %dx%d, %d players, %d turns",
        path, game_log.info.width, game_log.info.height, game_log.info.players, len(game_log.turns),
    )
    return game_log
