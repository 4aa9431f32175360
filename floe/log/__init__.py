"""
Game log documents.

This module provides:
- GameInfo / GameDocument: pydantic models of the raw document
- GameLog: Validated document ready for replay
- parse_document: Validate an already-decoded document
- load_game_log: Read and validate a JSON file
"""

from .document import GameDocument, GameInfo, GameLog, parse_document
from .file_store import load_game_log

__all__ = [
    "GameDocument",
    "GameInfo",
    "GameLog",
    "parse_document",
    "load_game_log",
]
