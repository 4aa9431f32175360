"""
Replay command: rebuild every state of a game log and summarize it
"""

import json
from collections import Counter

import typer
from rich.markup import escape
from rich.table import Table

from floe.core.errors import ReplayError
from floe.query import standings
from floe.replay import replay_digest
from floe_cli.session import console, fail, load_replay


def replay_command(
    log_path: str = typer.Argument(..., help="Path to game log (JSON)"),
    strict: bool = typer.Option(False, "--strict", help="Fail on unrecognized turns (also FLOE_STRICT_TURNS)"),
    show_states: bool = typer.Option(False, "--show-states", "-s", help="Include every board and score vector"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replay a game log and verify state reconstruction.

    Examples:
        floe replay game.json
        floe replay game.json --strict
        floe replay game.json --json --show-states
    """
    try:
        game_log, result = load_replay(log_path, strict)
    except FileNotFoundError:
        fail("Log file not found", json_output, path=log_path)
    except ReplayError as e:
        fail(str(e), json_output)

    digest = replay_digest(result)
    skipped = Counter(s.reason for s in result.skipped)
    final = standings(result.scores[-1])

    if json_output:
        output = {
            "success": True,
            "turns_replayed": len(result.turns),
            "states": len(result),
            "skipped": dict(sorted(skipped.items())),
            "final_scores": list(result.scores[-1]),
            "standings": [[label, score] for label, score in final],
            "digest": digest,
        }
        if show_states:
            output["replay"] = result.to_dict()
        print(json.dumps(output, indent=2))
        return

    console.print(f"[green]✓ Replayed {len(result.turns)} turns successfully[/green]")
    console.print(f"  Board: [cyan]{game_log.info.width}x{game_log.info.height}[/cyan], players: [cyan]{result.player_count}[/cyan]")
    console.print(f"  Digest: [yellow]{digest}[/yellow]")

    if skipped:
        table = Table(title="Skipped Turns")
        table.add_column("Reason", style="yellow")
        table.add_column("Count", style="cyan", justify="right")
        for reason in sorted(skipped):
            table.add_row(reason, str(skipped[reason]))
        console.print(table)

    table = Table(title="Final Standings")
    table.add_column("Player", style="green")
    table.add_column("Score", style="cyan", justify="right")
    for label, score in final:
        table.add_row(f"Player {label}", str(score))
    console.print(table)

    if show_states:
        for index, (board, scores) in enumerate(zip(result.states, result.scores)):
            console.print(f"[bold]{index}[/bold] " + escape(f"scores={list(scores)} board={board.to_list()}"))
