"""Board commands: show, add, move and reset.

Each command opens a session on the board file, makes at most one board
call, and the session saves the result on success.
"""

from typing import Annotated

import typer

from taskboard.domain.board import STAGE_LABELS, TERMINAL_STAGE, stage_index
from taskboard.domain.shared import Err
from taskboard.global_config import get_global_config
from taskboard.interfaces.cli.common import (
    board_option,
    exit_with,
    open_session,
    print_board,
    print_info,
    print_success,
    resolve_task_id,
    short_id,
    to_stage,
)


def show(board: board_option = None) -> None:
    """Show all columns and their tasks."""
    session = open_session(board)
    print_board(session.board)


def add(
    stage: Annotated[str, typer.Argument(help="Column to add to, e.g. BACKLOG")],
    text: Annotated[list[str], typer.Argument(help="Task text")],
    board: board_option = None,
) -> None:
    """Add a task to the end of a column."""
    session = open_session(board)
    target = to_stage(stage)

    result = session.add_task(target, " ".join(text))
    if isinstance(result, Err):
        exit_with(result.error)

    column = result.value.get_column(target)
    task = column.tasks[-1]
    print_success(f"Added {short_id(task.id)} to {column.label}: {task.text}")


def move(
    task_id: Annotated[str, typer.Argument(help="Task id (a unique prefix is enough)")],
    stage: Annotated[str, typer.Argument(help="Column to move to, e.g. TODO")],
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Don't ask before moving to DONE")] = False,
    board: board_option = None,
) -> None:
    """Move a task one column forward or back."""
    config = get_global_config()
    session = open_session(board, config)
    target = to_stage(stage)

    resolved = resolve_task_id(session.board, task_id)
    if isinstance(resolved, Err):
        exit_with(resolved.error)
    full_id = resolved.value

    # Moving from DOING into DONE is final, so it needs an explicit yes first
    source_index = session.board.find_column_of(full_id)
    entering_done = (
        target == TERMINAL_STAGE
        and source_index != -1
        and stage_index(TERMINAL_STAGE) - source_index == 1
    )
    if entering_done and config.confirm_done and not yes:
        task = session.board.columns[source_index].get_task(full_id)
        if not typer.confirm(f"Move '{task.text}' to DONE? It cannot be moved back."):
            print_info("Move cancelled")
            return

    before = session.board
    result = session.move_task(full_id, target)
    if isinstance(result, Err):
        exit_with(result.error)

    if result.value is before:
        print_info(f"Task {short_id(full_id)} is already in {STAGE_LABELS[target]}")
    else:
        print_success(f"Moved {short_id(full_id)} to {STAGE_LABELS[target]}")


def reset(
    yes: Annotated[bool, typer.Option("--yes", "-y", help="Don't ask for confirmation")] = False,
    board: board_option = None,
) -> None:
    """Replace the board with an empty one."""
    session = open_session(board)
    if not yes and not typer.confirm(f"Remove all {session.board.count()} tasks?"):
        print_info("Reset cancelled")
        return

    session.reset()
    print_success("Board reset")
