"""Tests for validate_board."""

import copy

import pytest
from pydantic import ValidationError

from taskboard.domain.board import (
    DUPLICATE_TASK_ID,
    MISSING_COLUMNS,
    Board,
    Column,
    Stage,
    add_task,
    create_board,
    validate_board,
)
from taskboard.domain.shared import Err, Ok
from taskboard.infrastructure.storage import serialize_board


def reason(result) -> str:
    assert isinstance(result, Err)
    return result.error


# =============================================================================
# Accepted boards
# =============================================================================


def test_validates_a_fresh_board():
    result = validate_board(create_board())

    assert isinstance(result, Ok)
    assert result.value == create_board()


def test_validates_raw_board(raw_board):
    result = validate_board(raw_board)

    assert isinstance(result, Ok)
    assert result.value == create_board()


def test_validates_board_with_tasks(raw_board):
    raw_board["columns"][0]["tasks"].append({"id": "card-1", "text": "Test card"})
    raw_board["columns"][1]["tasks"].append({"id": "card-2", "text": "Another card"})

    result = validate_board(raw_board)

    assert isinstance(result, Ok)
    assert [t.id for t in result.value.get_column(Stage.BACKLOG).tasks] == ["card-1"]
    assert [t.id for t in result.value.get_column(Stage.TODO).tasks] == ["card-2"]


def test_serialized_board_validates_back_to_equal_board():
    board = add_task(create_board(), Stage.TODO, "Persist me").value

    result = validate_board(serialize_board(board))

    assert result == Ok(board)


def test_extra_keys_are_ignored(raw_board):
    raw_board["version"] = 3
    raw_board["columns"][0]["color"] = "blue"

    result = validate_board(raw_board)

    assert isinstance(result, Ok)
    assert result.value == create_board()


def test_validation_does_not_modify_input(raw_board):
    raw_board["columns"][2]["tasks"].append({"id": "x", "text": "y"})
    before = copy.deepcopy(raw_board)

    validate_board(raw_board)

    assert raw_board == before


# =============================================================================
# Board shape
# =============================================================================


@pytest.mark.parametrize("candidate", [None, "board", 42, ["columns"]])
def test_rejects_non_object(candidate):
    assert reason(validate_board(candidate)) == "Board must be an object"


@pytest.mark.parametrize("columns", [None, "BACKLOG", {"0": {}}, 7])
def test_rejects_non_list_columns(columns):
    assert reason(validate_board({"columns": columns})) == "Board columns must be a list"


def test_rejects_missing_columns_key():
    assert reason(validate_board({})) == "Board columns must be a list"


def test_rejects_missing_column(raw_board):
    raw_board["columns"].pop()

    assert validate_board(raw_board) == Err(MISSING_COLUMNS)


def test_rejects_extra_column(raw_board):
    raw_board["columns"].append({"stageId": "BACKLOG", "label": "Duplicate", "tasks": []})

    assert validate_board(raw_board) == Err(MISSING_COLUMNS)


def test_rejects_wrong_column_order(raw_board):
    columns = raw_board["columns"]
    columns[0], columns[1] = columns[1], columns[0]

    assert validate_board(raw_board) == Err("Column order mismatch at position 0")


def test_reports_first_out_of_order_position(raw_board):
    columns = raw_board["columns"]
    columns[2], columns[3] = columns[3], columns[2]

    assert validate_board(raw_board) == Err("Column order mismatch at position 2")


def test_rejects_unknown_column_id(raw_board):
    raw_board["columns"][0]["stageId"] = "INVALID"

    assert reason(validate_board(raw_board)) == "Column order mismatch at position 0"


def test_column_count_checked_before_order(raw_board):
    raw_board["columns"].reverse()
    raw_board["columns"].pop()

    assert validate_board(raw_board) == Err(MISSING_COLUMNS)


def test_order_checked_before_column_shape(raw_board):
    del raw_board["columns"][0]["label"]
    raw_board["columns"][3]["stageId"] = "TODO"

    assert reason(validate_board(raw_board)) == "Column order mismatch at position 3"


# =============================================================================
# Column and task shape
# =============================================================================


def test_rejects_column_without_id(raw_board):
    del raw_board["columns"][0]["stageId"]

    assert reason(validate_board(raw_board)).startswith("columns.0.stageId:")


def test_rejects_column_without_label(raw_board):
    del raw_board["columns"][1]["label"]

    assert reason(validate_board(raw_board)).startswith("columns.1.label:")


def test_rejects_column_without_tasks(raw_board):
    del raw_board["columns"][2]["tasks"]

    assert reason(validate_board(raw_board)).startswith("columns.2.tasks:")


def test_rejects_non_list_tasks(raw_board):
    raw_board["columns"][0]["tasks"] = "nothing"

    assert reason(validate_board(raw_board)).startswith("columns.0.tasks:")


def test_rejects_non_object_column(raw_board):
    raw_board["columns"][1] = "TODO"

    assert reason(validate_board(raw_board)).startswith("columns.1")


def test_rejects_task_without_id(raw_board):
    raw_board["columns"][0]["tasks"].append({"text": "Card without id"})

    assert reason(validate_board(raw_board)).startswith("columns.0.tasks.0.id:")


def test_rejects_task_without_text(raw_board):
    raw_board["columns"][0]["tasks"].append({"id": "card-1"})

    assert reason(validate_board(raw_board)).startswith("columns.0.tasks.0.text:")


def test_rejects_non_string_task_id(raw_board):
    raw_board["columns"][3]["tasks"].append({"id": 12, "text": "numbered"})

    assert reason(validate_board(raw_board)).startswith("columns.3.tasks.0.id:")


def test_rejects_snake_case_column_ids():
    columns = [
        {"stage_id": stage, "label": stage, "tasks": []}
        for stage in ["DONE", "DOING", "TODO", "BACKLOG"]
    ]

    assert reason(validate_board({"columns": columns})).startswith("columns.0.stageId:")


def test_column_requires_persisted_field_name():
    with pytest.raises(ValidationError):
        Column(stage_id=Stage.TODO, label="TODO", tasks=())


@pytest.mark.parametrize("task", [{"id": b"raw", "text": "bytes id"}, {"id": "a", "text": b"bytes"}])
def test_rejects_bytes_in_task_fields(raw_board, task):
    raw_board["columns"][0]["tasks"].append(task)

    assert reason(validate_board(raw_board)).startswith("columns.0.tasks.0.")


def test_reports_first_schema_violation(raw_board):
    raw_board["columns"][1]["tasks"].append({"id": "a"})
    raw_board["columns"][2]["tasks"].append({"text": "b"})

    assert reason(validate_board(raw_board)).startswith("columns.1.tasks.0.text:")


# =============================================================================
# Duplicate ids
# =============================================================================


def test_rejects_duplicate_ids_across_columns(raw_board):
    raw_board["columns"][0]["tasks"].append({"id": "duplicate-id", "text": "Card 1"})
    raw_board["columns"][1]["tasks"].append({"id": "duplicate-id", "text": "Card 2"})

    assert validate_board(raw_board) == Err(DUPLICATE_TASK_ID)


def test_rejects_duplicate_ids_in_same_column(raw_board):
    raw_board["columns"][0]["tasks"].extend(
        [{"id": "duplicate-id", "text": "Card 1"}, {"id": "duplicate-id", "text": "Card 2"}]
    )

    assert validate_board(raw_board) == Err(DUPLICATE_TASK_ID)


def test_schema_errors_reported_before_duplicates(raw_board):
    raw_board["columns"][0]["tasks"].append({"id": "dup", "text": "one"})
    raw_board["columns"][1]["tasks"].append({"id": "dup", "text": "two"})
    raw_board["columns"][2]["tasks"].append({"id": "other"})

    assert reason(validate_board(raw_board)).startswith("columns.2.tasks.0.text:")


def test_rejects_duplicate_ids_in_board_instance(make_board):
    board: Board = make_board(BACKLOG=["same"], DONE=["same"])

    assert validate_board(board) == Err(DUPLICATE_TASK_ID)
