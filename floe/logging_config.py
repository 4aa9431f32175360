"""
Structured logging configuration for floe.

Provides JSON-formatted logs with a game_id field so that messages from one
replay can be correlated.

Environment Variables:
    FLOE_LOG_LEVEL: Log level (DEBUG, INFO, WARNING, ERROR) - default: WARNING
    FLOE_LOG_FORMAT: Log format (json, text) - default: json

Usage:
    from floe.logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__, game_id="games/final.json")
    logger.info("Replay loaded")
"""

import logging
import sys
from typing import Optional

from pythonjsonlogger.json import JsonFormatter

from .config import Settings


class GameIDFilter(logging.Filter):
    """
    Logging filter that adds game_id to all log records.

    Ensures every record can be formatted, even if not logged via get_logger().
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "game_id"):
            record.game_id = "N/A"  # type: ignore
        return True


def setup_logging(settings: Optional[Settings] = None) -> None:
    """
    Configure root logger with structured logging.

    Output goes to stderr so command output on stdout stays machine readable.
    """
    settings = settings or Settings.from_env()
    level = getattr(logging, settings.log_level, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)
    handler.addFilter(GameIDFilter())

    if settings.log_format == "json":
        formatter = JsonFormatter(
            "%(asctime)s %(name)s %(levelname)s %(message)s %(game_id)s",
            rename_fields={
                "asctime": "timestamp",
                "name": "logger",
                "levelname": "level",
            },
        )
    else:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s [game_id=%(game_id)s]",
            datefmt="%Y-%m-%d %H:%M:%S",
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str, game_id: Optional[str] = None) -> logging.LoggerAdapter:
    """
    Get a logger that tags every record with game_id.

    Example:
        logger = get_logger(__name__, game_id="final.json")
        logger.warning("Skipped 2 turns")
        # {"timestamp": "...", "level": "WARNING", "message": "Skipped 2 turns", "game_id": "final.json"}
    """
    logger = logging.getLogger(name)
    return logging.LoggerAdapter(logger, {"game_id": game_id or "N/A"})
