"""Board domain models.

Frozen Pydantic models: a board value never changes once built, every
accepted mutation produces a new one. Serialized field names (``stageId``,
``label``, ``tasks``, ``id``, ``text``, ``columns``) are the persisted form.
"""

from pydantic import BaseModel, Field, StrictStr

from .stages import Stage


class Task(BaseModel):
    """A unit of work on the board."""

    id: StrictStr
    text: StrictStr

    model_config = {"frozen": True}


class Column(BaseModel):
    """All tasks currently in one stage, in insertion order."""

    stage_id: Stage = Field(alias="stageId")
    label: StrictStr
    tasks: tuple[Task, ...]

    model_config = {"frozen": True}

    def has_task(self, task_id: str) -> bool:
        """Check if a task with this id is in the column."""
        return any(task.id == task_id for task in self.tasks)

    def get_task(self, task_id: str) -> Task | None:
        """Get a task by its id."""
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None


class Board(BaseModel):
    """The whole board: one column per stage, in canonical stage order.

    Boards in circulation come either from ``create_board`` or from
    ``validate_board``; the transition engine relies on that and does not
    re-check the invariants.
    """

    columns: tuple[Column, ...]

    model_config = {"frozen": True}

    def get_column(self, stage_id: Stage) -> Column | None:
        """Get the column for a stage."""
        for column in self.columns:
            if column.stage_id == stage_id:
                return column
        return None

    def find_column_of(self, task_id: str) -> int:
        """Return the index of the column holding a task, or -1."""
        for index, column in enumerate(self.columns):
            if column.has_task(task_id):
                return index
        return -1

    def all_tasks(self) -> list[Task]:
        """Get every task on the board, column by column."""
        return [task for column in self.columns for task in column.tasks]

    def count(self) -> int:
        """Get the total number of tasks."""
        return sum(len(column.tasks) for column in self.columns)
