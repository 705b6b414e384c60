"""Board domain - stages, board models and the rules for changing them.

All exports are pure (no I/O, no side effects beyond task id generation).

Key Types:
    Stage - Workflow stage enumeration
    Task, Column, Board - Frozen board models
    ErrorKind - Why a transition was rejected

Catalog:
    STAGE_ORDER - Stages in workflow order
    STAGE_LABELS - Display label per stage
    TERMINAL_STAGE, WIP_STAGE, WIP_LIMIT - Workflow limits

Operations:
    create_board - Empty board
    add_task - Append a task to a column
    move_task - Move a task one stage forward or back
    validate_board - Accept or reject untrusted board data
"""

from .factory import create_board
from .models import Board, Column, Task
from .stages import (
    STAGE_LABELS,
    STAGE_ORDER,
    TERMINAL_STAGE,
    WIP_LIMIT,
    WIP_STAGE,
    Stage,
    parse_stage,
    stage_index,
)
from .transitions import ErrorKind, add_task, move_task
from .validation import DUPLICATE_TASK_ID, MISSING_COLUMNS, validate_board

__all__ = [
    # Catalog
    "Stage",
    "STAGE_ORDER",
    "STAGE_LABELS",
    "TERMINAL_STAGE",
    "WIP_STAGE",
    "WIP_LIMIT",
    "parse_stage",
    "stage_index",
    # Models
    "Task",
    "Column",
    "Board",
    # Factory
    "create_board",
    # Transitions
    "ErrorKind",
    "add_task",
    "move_task",
    # Validation
    "validate_board",
    "MISSING_COLUMNS",
    "DUPLICATE_TASK_ID",
]
