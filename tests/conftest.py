"""Shared test fixtures for Taskboard tests."""

from pathlib import Path

import pytest

from taskboard.domain.board import STAGE_LABELS, STAGE_ORDER, Board, Column, Task
from taskboard.infrastructure.storage import InMemoryGateway


@pytest.fixture(autouse=True)
def taskboard_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Keep config and default board files out of the real home directory."""
    home = tmp_path / "home"
    monkeypatch.setenv("TASKBOARD_HOME", str(home))
    monkeypatch.delenv("TASKBOARD_FILE", raising=False)
    return home


@pytest.fixture
def make_board():
    """Build a board from stage name -> list of task ids.

    Example: make_board(DOING=["c1", "c2"], TODO=["c3"])
    """

    def _make(**tasks_by_stage: list[str]) -> Board:
        return Board(
            columns=tuple(
                Column(
                    stageId=stage,
                    label=STAGE_LABELS[stage],
                    tasks=tuple(
                        Task(id=task_id, text=f"Task {task_id}")
                        for task_id in tasks_by_stage.get(stage.value, [])
                    ),
                )
                for stage in STAGE_ORDER
            )
        )

    return _make


@pytest.fixture
def raw_board() -> dict:
    """A valid board in its persisted (JSON) form."""
    return {
        "columns": [
            {"stageId": stage.value, "label": STAGE_LABELS[stage], "tasks": []}
            for stage in STAGE_ORDER
        ]
    }


@pytest.fixture
def gateway() -> InMemoryGateway:
    return InMemoryGateway()


@pytest.fixture
def board_file(tmp_path: Path) -> Path:
    return tmp_path / "boards" / "board.json"
