"""
Browse command: step through a replay interactively
"""

import typer
from rich.markup import escape

from floe.core.errors import ReplayError
from floe.viewer import ReplayCursor
from floe_cli.render import render_state
from floe_cli.session import console, fail, load_replay

PROMPT = "[dim]\\[n]ext \\[p]rev \\[f]irst \\[l]ast, a turn number, or \\[q]uit[/dim] > "


def step(cursor: ReplayCursor, command: str) -> bool:
    """
    Apply one browse command to cursor.

    Returns:
        False when the command asks to quit
    """
    command = command.strip().lower()
    if command in ("q", "quit", "exit"):
        return False
    if command in ("", "n", "next"):
        cursor.next()
    elif command in ("p", "prev"):
        cursor.prev()
    elif command in ("f", "first"):
        cursor.first()
    elif command in ("l", "last"):
        cursor.last()
    elif command.lstrip("-").isdigit():
        try:
            cursor.seek(int(command))
        except IndexError:
            console.print(f"[yellow]Turn must be between 0 and {cursor.last_index}[/yellow]")
    else:
        console.print(f"[yellow]Unknown command: {escape(command)}[/yellow]")
    return True


def browse_command(
    log_path: str = typer.Argument(..., help="Path to game log (JSON)"),
    strict: bool = typer.Option(False, "--strict", help="Fail on unrecognized turns (also FLOE_STRICT_TURNS)"),
):
    """
    Step forward and backward through a game.

    Examples:
        floe browse game.json
    """
    try:
        game_log, result = load_replay(log_path, strict)
    except FileNotFoundError:
        fail("Log file not found", False, path=log_path)
    except ReplayError as e:
        fail(str(e), False)

    cursor = ReplayCursor(result)
    while True:
        console.print(render_state(game_log.info, cursor))
        try:
            command = console.input(PROMPT)
        except EOFError:
            break
        if not step(cursor, command):
            break
