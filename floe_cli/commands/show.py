"""
Show command: render the board and scores at one turn boundary
"""

import json

import typer

from floe.core.errors import ReplayError
from floe.viewer import ReplayCursor
from floe_cli.render import render_state
from floe_cli.session import console, fail, load_replay


def show_command(
    log_path: str = typer.Argument(..., help="Path to game log (JSON)"),
    turn: int = typer.Option(0, "--turn", "-t", help="Turn boundary to show (negative counts from the end)"),
    strict: bool = typer.Option(False, "--strict", help="Fail on unrecognized turns (also FLOE_STRICT_TURNS)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Show the board and scores after a given turn.

    Examples:
        floe show game.json
        floe show game.json --turn 12
        floe show game.json --turn -1
        floe show game.json --json
    """
    try:
        game_log, result = load_replay(log_path, strict)
    except FileNotFoundError:
        fail("Log file not found", json_output, path=log_path)
    except ReplayError as e:
        fail(str(e), json_output)

    index = turn if turn >= 0 else result.last_index + 1 + turn
    try:
        cursor = ReplayCursor(result, index)
    except IndexError:
        fail(f"turn {turn} outside 0..{result.last_index}", json_output)

    if json_output:
        arrow = cursor.arrow
        output = {
            "index": cursor.index,
            "turns": result.last_index,
            "board": cursor.board.to_list(),
            "scores": list(cursor.scores),
            "turn": None if cursor.turn is None else cursor.turn.to_record(),
            "arrow": None if arrow is None else [list(arrow[0]), list(arrow[1])],
        }
        print(json.dumps(output, indent=2))
    else:
        console.print(render_state(game_log.info, cursor))
