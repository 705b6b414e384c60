"""Validation of untrusted board data.

``validate_board`` is the only way stored data becomes a Board. It checks
the board shape, then the board invariants, and reports the first problem
as a message:

1. column count          -> "Board must contain all columns"
2. column order          -> "Column order mismatch at position <i>"
3. column and task shape -> first schema error, e.g. "columns.0.tasks.1.text: Field required"
4. unique task ids       -> "Duplicate task id found"
"""

from collections.abc import Mapping, Sequence

from pydantic import ValidationError

from taskboard.domain.shared import Err, Ok, Result

from .models import Board
from .stages import STAGE_ORDER

MISSING_COLUMNS = "Board must contain all columns"
DUPLICATE_TASK_ID = "Duplicate task id found"


def _format_error(error: ValidationError) -> str:
    first = error.errors()[0]
    location = ".".join(str(part) for part in first["loc"])
    if not location:
        return first["msg"]
    return f"{location}: {first['msg']}"


def _check_column_order(columns: Sequence[object]) -> str | None:
    """Return a message for the first column whose stage is out of place.

    Columns without a readable ``stageId`` are left to the schema check.
    """
    for index, (column, stage) in enumerate(zip(columns, STAGE_ORDER)):
        if not isinstance(column, Mapping) or "stageId" not in column:
            continue
        if column["stageId"] != stage:
            return f"Column order mismatch at position {index}"
    return None


def _has_duplicate_ids(board: Board) -> bool:
    seen: set[str] = set()
    for task in board.all_tasks():
        if task.id in seen:
            return True
        seen.add(task.id)
    return False


def validate_board(candidate: object) -> Result[Board, str]:
    """Validate an untrusted value as a board.

    Args:
        candidate: Anything, typically parsed JSON. A Board instance is
            accepted too and checked like raw data.

    Returns:
        Ok(Board) if the value is a well-formed board, otherwise Err(str)
        describing the first violation found.
    """
    if isinstance(candidate, Board):
        candidate = candidate.model_dump(by_alias=True)

    if not isinstance(candidate, Mapping):
        return Err("Board must be an object")

    columns = candidate.get("columns")
    if isinstance(columns, (str, bytes)) or not isinstance(columns, Sequence):
        return Err("Board columns must be a list")

    if len(columns) != len(STAGE_ORDER):
        return Err(MISSING_COLUMNS)

    order_error = _check_column_order(columns)
    if order_error:
        return Err(order_error)

    try:
        board = Board.model_validate(candidate)
    except ValidationError as e:
        return Err(_format_error(e))

    # The engine indexes columns by stage position, whatever the input looked like
    order_error = _check_column_order([{"stageId": c.stage_id} for c in board.columns])
    if order_error:
        return Err(order_error)

    if _has_duplicate_ids(board):
        return Err(DUPLICATE_TASK_ID)

    return Ok(board)
