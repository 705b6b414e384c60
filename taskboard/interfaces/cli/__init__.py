"""CLI interface for Taskboard using Typer.

Usage:
    taskboard show                   # Show the board
    taskboard add BACKLOG Write docs # Add a task
    taskboard move 1a2b3c4d TODO     # Move a task one column
    taskboard reset                  # Start over with an empty board
    taskboard config                 # Show or update settings

The CLI is structured as:
- app: Main Typer application
- commands/: Command implementations (board, config)
- common.py: Shared utilities for CLI commands
- main.py: Entry point that runs the app
"""

from typing import Optional

import typer

from taskboard import __version__
from taskboard.global_config import get_global_config
from taskboard.interfaces.cli.commands import board, config
from taskboard.interfaces.cli.common import configure_logging

# Create the main Typer application
app = typer.Typer(
    name="taskboard",
    help="A task board that enforces a BACKLOG -> TODO -> DOING -> DONE workflow",
    add_completion=False,
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"taskboard version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Optional[bool] = typer.Option(
        None,
        "--version",
        "-v",
        help="Show version and exit",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Log debug output to stderr"),
) -> None:
    """Taskboard - move tasks through BACKLOG, TODO, DOING and DONE.

    Tasks move one column at a time, DOING holds at most two tasks,
    and tasks in DONE stay there.
    """
    configure_logging("DEBUG" if verbose else get_global_config().log_level)


# =============================================================================
# Register Commands
# =============================================================================

app.command("show")(board.show)
app.command("add")(board.add)
app.command("move")(board.move)
app.command("reset")(board.reset)
app.command("config")(config.config)


__all__ = ["app"]
