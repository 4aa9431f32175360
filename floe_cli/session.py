"""
Shared command plumbing: load a log, build its replay, report errors.
"""

import json
from typing import NoReturn, Tuple

import typer
from rich.console import Console
from rich.markup import escape

from floe.config import Settings
from floe.log import GameLog, load_game_log
from floe.logging_config import get_logger
from floe.replay import ReplayResult, replay_game

console = Console()


def load_replay(log_path: str, strict: bool = False) -> Tuple[GameLog, ReplayResult]:
    """
    Load a game log and build its replay.

    Strict mode is on if requested here or by FLOE_STRICT_TURNS.
    """
    strict = strict or Settings.from_env().strict_turns
    logger = get_logger(__name__, game_id=log_path)

    game_log = load_game_log(log_path)
    result = replay_game(game_log, strict=strict)
    if result.skipped:
        logger.warning("Replay tolerated %d unrecognized turns", len(result.skipped))
    logger.info("Replay ready with %d states", len(result))
    return game_log, result


def fail(message: str, json_output: bool, **extra) -> NoReturn:
    """Report an error and exit with status 2."""
    if json_output:
        print(json.dumps({"error": message, **extra}))
    else:
        console.print(f"[red]Error:[/red] {escape(message)}")
    raise typer.Exit(2)
