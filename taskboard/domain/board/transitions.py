"""Board transition engine.

Pure functions that validate and apply task creation and task movement.
Each takes a board and returns a Result: Ok with the new board, or Err with
an ErrorKind. A rejected call never changes anything, and an accepted one
returns a new board with only the affected columns replaced.

The workflow is strictly linear (BACKLOG -> TODO -> DOING -> DONE): tasks
move one stage at a time, DOING holds at most WIP_LIMIT tasks, and DONE is
final.
"""

from enum import Enum
from uuid import uuid4

from taskboard.domain.shared import Err, Ok, Result

from .models import Board, Column, Task
from .stages import TERMINAL_STAGE, WIP_LIMIT, WIP_STAGE, Stage, stage_index


class ErrorKind(str, Enum):
    """Why a transition was rejected. The value is the user-facing message."""

    EMPTY_TEXT = "Task text cannot be empty"
    COLUMN_NOT_FOUND = "Column not found"
    TASK_NOT_FOUND = "Task not found"
    INVALID_TARGET_COLUMN = "Invalid target column"
    TERMINAL_COLUMN_IMMUTABLE = "Tasks in DONE cannot be moved"
    NON_ADJACENT_MOVE = "Tasks can only move to adjacent columns"
    WIP_LIMIT_EXCEEDED = f"DOING column can only contain {WIP_LIMIT} tasks"


def _new_task_id() -> str:
    return str(uuid4())


def _replace_columns(board: Board, replacements: dict[int, Column]) -> Board:
    """Build a new board, swapping in columns by index.

    Columns not named in ``replacements`` are reused as-is.
    """
    return board.model_copy(
        update={
            "columns": tuple(
                replacements.get(index, column) for index, column in enumerate(board.columns)
            )
        }
    )


def add_task(board: Board, stage_id: Stage | str, text: str) -> Result[Board, ErrorKind]:
    """Append a new task to the end of a column.

    Args:
        board: Current board.
        stage_id: Stage of the column to add to.
        text: Task text; surrounding whitespace is trimmed.

    Returns:
        Ok(new board) with a freshly generated task id, or
        Err(EMPTY_TEXT) / Err(COLUMN_NOT_FOUND).
    """
    trimmed = text.strip()
    if not trimmed:
        return Err(ErrorKind.EMPTY_TEXT)

    column_index = next(
        (index for index, column in enumerate(board.columns) if column.stage_id == stage_id),
        -1,
    )
    if column_index == -1:
        return Err(ErrorKind.COLUMN_NOT_FOUND)

    column = board.columns[column_index]
    task = Task(id=_new_task_id(), text=trimmed)
    updated = column.model_copy(update={"tasks": (*column.tasks, task)})
    return Ok(_replace_columns(board, {column_index: updated}))


def move_task(board: Board, task_id: str, target_stage_id: Stage | str) -> Result[Board, ErrorKind]:
    """Move a task to another stage.

    Checks run in a fixed order and the first failure is reported:

    1. the task must be on the board (TASK_NOT_FOUND)
    2. the target must be a known stage (INVALID_TARGET_COLUMN)
    3. a task in DONE cannot go anywhere else (TERMINAL_COLUMN_IMMUTABLE)
    4. moving to the current stage is a no-op returning the same board object
    5. the target must be directly before or after the source (NON_ADJACENT_MOVE)
    6. DOING must have room unless it already holds the task (WIP_LIMIT_EXCEEDED)

    The terminal check comes before the no-op, so "move a DONE task to DONE"
    succeeds as a no-op.

    Args:
        board: Current board.
        task_id: Id of the task to move.
        target_stage_id: Stage to move the task to.

    Returns:
        Ok(board) with the task appended to the end of the target column,
        or Err(ErrorKind) with the board left untouched.
    """
    source_column_index = board.find_column_of(task_id)
    if source_column_index == -1:
        return Err(ErrorKind.TASK_NOT_FOUND)

    target_index = stage_index(target_stage_id)
    if target_index == -1:
        return Err(ErrorKind.INVALID_TARGET_COLUMN)

    source = board.columns[source_column_index]
    task = source.get_task(task_id)
    if task is None:
        return Err(ErrorKind.TASK_NOT_FOUND)

    if source.stage_id == TERMINAL_STAGE and target_stage_id != TERMINAL_STAGE:
        return Err(ErrorKind.TERMINAL_COLUMN_IMMUTABLE)

    if source.stage_id == target_stage_id:
        return Ok(board)

    if abs(stage_index(source.stage_id) - target_index) != 1:
        return Err(ErrorKind.NON_ADJACENT_MOVE)

    target = board.columns[target_index]
    if (
        target.stage_id == WIP_STAGE
        and not target.has_task(task_id)
        and len(target.tasks) >= WIP_LIMIT
    ):
        return Err(ErrorKind.WIP_LIMIT_EXCEEDED)

    return Ok(
        _replace_columns(
            board,
            {
                source_column_index: source.model_copy(
                    update={"tasks": tuple(t for t in source.tasks if t.id != task_id)}
                ),
                target_index: target.model_copy(update={"tasks": (*target.tasks, task)}),
            },
        )
    )
