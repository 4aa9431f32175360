#!/usr/bin/env python3
"""
Floe CLI - Penguin/fish game replay viewer

Main entrypoint for the floe command-line tool.
"""

import typer
from rich.console import Console
from rich.table import Table

from floe.logging_config import setup_logging
from floe_cli.commands import browse, replay, show

# Initialize Typer app
app = typer.Typer(
    name="floe",
    help="Replay viewer for penguin/fish grid game logs",
    add_completion=False,
)

# Console for rich output
console = Console()

app.command("show")(show.show_command)
app.command("replay")(replay.replay_command)
app.command("browse")(browse.browse_command)


@app.callback()
def configure():
    """Configure logging from FLOE_LOG_LEVEL / FLOE_LOG_FORMAT."""
    setup_logging()


@app.command()
def version():
    """Show version information."""
    from floe import __version__

    table = Table(show_header=False, box=None)
    table.add_row("[bold]Floe CLI[/bold]", f"v{__version__}")
    table.add_row("Engine", "Replay builder")

    console.print(table)


def main():
    """Main entrypoint."""
    app()


if __name__ == "__main__":
    main()
