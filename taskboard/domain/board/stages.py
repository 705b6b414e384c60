"""Stage catalog.

The fixed, ordered set of workflow stages. Order defines adjacency: a task
may only move to the stage directly before or after its current one.
This is process-wide configuration, not board state.
"""

from enum import Enum
from types import MappingProxyType


class Stage(str, Enum):
    """A step in the linear workflow."""

    BACKLOG = "BACKLOG"
    TODO = "TODO"
    DOING = "DOING"
    DONE = "DONE"


STAGE_ORDER: tuple[Stage, ...] = (Stage.BACKLOG, Stage.TODO, Stage.DOING, Stage.DONE)

STAGE_LABELS: MappingProxyType[Stage, str] = MappingProxyType(
    {
        Stage.BACKLOG: "BACKLOG",
        Stage.TODO: "TODO",
        Stage.DOING: "DOING",
        Stage.DONE: "DONE",
    }
)

# Tasks that reach this stage can never leave it
TERMINAL_STAGE = Stage.DONE

WIP_STAGE = Stage.DOING
WIP_LIMIT = 2


def stage_index(stage_id: object) -> int:
    """Return the position of a stage in STAGE_ORDER, or -1 if unknown."""
    for index, stage in enumerate(STAGE_ORDER):
        if stage == stage_id:
            return index
    return -1


def parse_stage(value: str) -> Stage | None:
    """Turn user input such as "doing" into a Stage.

    Args:
        value: Stage identifier, case-insensitive, surrounding spaces ignored.

    Returns:
        The matching Stage, or None if the value names no stage.
    """
    try:
        return Stage(value.strip().upper())
    except ValueError:
        return None
