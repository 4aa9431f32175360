"""
Rich renderables for replay states.
"""

from typing import Optional, Sequence, Tuple

from rich.console import Group
from rich.table import Table
from rich.text import Text

from floe.core.board import BoardSnapshot
from floe.core.cells import CellKind, decode_cell, player_label
from floe.log import GameInfo
from floe.query import describe_turn
from floe.viewer import ReplayCursor

PLAYER_STYLES = {0: "bold green", 1: "bold red"}
ARROW_STYLE = "on grey23"


def cell_text(value: int, highlight: bool = False) -> Text:
    cell = decode_cell(value)
    if cell.kind is CellKind.EMPTY:
        text = Text("·", style="dim")
    elif cell.kind is CellKind.FOOD:
        text = Text(f"{cell.food}≈", style="cyan")
    else:
        text = Text(player_label(cell.player), style=PLAYER_STYLES.get(cell.player, "bold"))
    if highlight:
        text.stylize(ARROW_STYLE)
    return text


def render_board(
    snapshot: BoardSnapshot,
    arrow: Optional[Tuple[Tuple[int, int], Tuple[int, int]]] = None,
) -> Table:
    """Board grid; the cells of the last move are highlighted."""
    marked = set(arrow) if arrow else set()
    table = Table(show_header=True, box=None, padding=(0, 1))
    table.add_column("", style="dim", justify="right")
    for c in range(snapshot.width):
        table.add_column(str(c), justify="center", style="dim")

    for r, row in enumerate(snapshot):
        table.add_row(str(r), *(cell_text(v, (r, c) in marked) for c, v in enumerate(row)))
    return table


def render_game_info(info: GameInfo) -> Table:
    table = Table(show_header=False, box=None)
    table.add_row("Game Width:", str(info.width))
    table.add_row("Game Height:", str(info.height))
    table.add_row("Players Count:", str(info.players))
    table.add_row("Max Fish Count:", "" if info.fishes is None else str(info.fishes))
    table.add_row("Penguins Count:", "" if info.penguins is None else str(info.penguins))
    return table


def render_scores(scores: Sequence[int]) -> Table:
    table = Table(title="Scores")
    table.add_column("Player", style="green")
    table.add_column("Score", style="cyan", justify="right")
    for index, score in enumerate(scores):
        table.add_row(f"Player {player_label(index)}", str(score))
    return table


def render_state(info: GameInfo, cursor: ReplayCursor) -> Group:
    """Everything the viewer shows for the cursor's current index."""
    header = Text.assemble(
        ("Current Turn: ", "bold"),
        (f"{cursor.index}", "cyan"),
        f" / {cursor.last_index}  ",
        (describe_turn(cursor.turn), "italic"),
    )
    parts = [render_game_info(info), render_scores(cursor.scores), header, render_board(cursor.board, cursor.arrow)]
    if cursor.arrow is not None:
        (sr, sc), (dr, dc) = cursor.arrow
        parts.append(Text(f"({sr}, {sc}) → ({dr}, {dc})", style="green"))
    return Group(*parts)
