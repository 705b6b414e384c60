"""Configuration commands.

Shows or updates ~/.taskboard/config.json.
"""

from pathlib import Path
from typing import Annotated, Optional

import typer
from pydantic import ValidationError

from taskboard.global_config import BoardConfig, get_global_config, save_global_config
from taskboard.interfaces.cli.common import exit_with, print_success


def config(
    board_file: Annotated[Optional[Path], typer.Option("--board-file", help="Default board file")] = None,
    log_level: Annotated[Optional[str], typer.Option("--log-level", help="Logging level, e.g. INFO")] = None,
    confirm_done: Annotated[
        Optional[bool],
        typer.Option("--confirm-done/--no-confirm-done", help="Ask before moving a task into DONE"),
    ] = None,
) -> None:
    """Show the configuration, or update it when options are given."""
    current = get_global_config()
    updates = {
        key: value
        for key, value in (
            ("board_file", board_file),
            ("log_level", log_level),
            ("confirm_done", confirm_done),
        )
        if value is not None
    }

    if updates:
        try:
            current = BoardConfig(**{**current.model_dump(), **updates})
        except ValidationError as e:
            exit_with(e.errors()[0]["msg"])
        save_global_config(current)
        print_success("Configuration saved")

    for key, value in current.model_dump(mode="json").items():
        typer.echo(f"{key}: {value}")
