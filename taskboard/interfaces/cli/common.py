"""Shared utilities for Taskboard CLI commands.

This module provides common utilities used across CLI commands:
- Board file resolution and session opening
- Logging setup
- Formatted output helpers (error, success, info)
- Board and task formatting for display
"""

import logging
from pathlib import Path
from typing import Annotated, Optional

import typer

from taskboard.application import BoardSession
from taskboard.domain.board import WIP_LIMIT, WIP_STAGE, Board, ErrorKind, Stage, parse_stage
from taskboard.domain.shared import Err, Ok, Result
from taskboard.global_config import BoardConfig, get_global_config
from taskboard.infrastructure.storage import JsonFileGateway

# Shown ids are shortened; any unique prefix is accepted back
SHORT_ID_LENGTH = 8

# Reusable board file option for CLI commands
# Usage: def my_command(board: board_option = None) -> None:
board_option = Annotated[Optional[Path], typer.Option(
    "--board", "-b",
    help="Board file (or set TASKBOARD_FILE env var)",
    envvar="TASKBOARD_FILE",
)]


def configure_logging(level: str) -> None:
    """Send log records to stderr at the given level."""
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def open_session(board_file: Path | None, config: BoardConfig | None = None) -> BoardSession:
    """Open a session on the board file.

    Resolution order for the file:
    1. Explicit --board option (or TASKBOARD_FILE env var)
    2. board_file from the global config

    Args:
        board_file: Board file from the CLI option (may be None).
        config: Loaded config, read from disk if not given.

    Returns:
        A session holding the stored board, or an empty board if none is stored.
    """
    config = config or get_global_config()
    path = board_file or config.board_file
    return BoardSession.open(JsonFileGateway(path.expanduser()))


def to_stage(value: str) -> Stage | str:
    """Map user input to a Stage.

    Unknown names are passed through unchanged so the board reports them
    with its own error.
    """
    return parse_stage(value) or value.strip().upper()


def resolve_task_id(board: Board, value: str) -> Result[str, str]:
    """Expand a shortened task id.

    Args:
        board: Board to look the id up on.
        value: Full id or a prefix of one.

    Returns:
        Ok(full id) for an exact or unique prefix match, Ok(value) when
        nothing matches (the move will report the missing task), or
        Err(str) when the prefix is ambiguous.
    """
    if not value:
        return Ok(value)

    ids = [task.id for task in board.all_tasks()]
    if value in ids:
        return Ok(value)

    matches = [task_id for task_id in ids if task_id.startswith(value)]
    if len(matches) > 1:
        return Err(f"Ambiguous task id '{value}' matches {len(matches)} tasks")
    if matches:
        return Ok(matches[0])
    return Ok(value)


def exit_with(error: ErrorKind | str) -> None:
    """Print an error and exit with status 1.

    Raises:
        typer.Exit: Always.
    """
    print_error(error.value if isinstance(error, ErrorKind) else error)
    raise typer.Exit(1)


def print_error(msg: str) -> None:
    """Print a formatted error message.

    Args:
        msg: Error message to display
    """
    typer.echo(typer.style(f"Error: {msg}", fg=typer.colors.RED), err=True)


def print_success(msg: str) -> None:
    """Print a formatted success message."""
    typer.echo(typer.style(msg, fg=typer.colors.GREEN))


def print_info(msg: str) -> None:
    """Print a formatted info message."""
    typer.echo(typer.style(msg, fg=typer.colors.BLUE))


def print_separator(char: str = "=", width: int = 60) -> None:
    """Print a separator line."""
    typer.echo(char * width)


def short_id(task_id: str) -> str:
    return task_id[:SHORT_ID_LENGTH]


def print_board(board: Board) -> None:
    """Print every column with its tasks.

    The DOING header also shows how much of the WIP limit is used.
    """
    for column in board.columns:
        count = f"{len(column.tasks)}/{WIP_LIMIT}" if column.stage_id == WIP_STAGE else len(column.tasks)
        print_separator()
        typer.echo(typer.style(f"{column.label} ({count})", bold=True))
        print_separator()
        if not column.tasks:
            typer.echo("  (empty)")
        for task in column.tasks:
            typer.echo(f"  {short_id(task.id)}  {task.text}")
        typer.echo()


__all__ = [
    "board_option",
    "configure_logging",
    "open_session",
    "to_stage",
    "resolve_task_id",
    "exit_with",
    "print_error",
    "print_success",
    "print_info",
    "print_separator",
    "print_board",
    "short_id",
    "SHORT_ID_LENGTH",
]
