"""Board gateways: load and save a board-shaped value.

A gateway is the only persistence capability the application layer knows
about. ``load`` hands back raw, untrusted data (or None when nothing is
stored) and never validates it; that is ``validate_board``'s job.
``save`` is fire-and-forget from the caller's point of view.
"""

import logging
from pathlib import Path
from typing import Any, Protocol

from taskboard.domain.board import Board
from taskboard.domain.shared import Err
from taskboard.infrastructure.storage.json_storage import JsonStorage

logger = logging.getLogger(__name__)


def serialize_board(board: Board) -> dict[str, Any]:
    """Convert a board to its persisted JSON form."""
    return board.model_dump(mode="json", by_alias=True)


class BoardGateway(Protocol):
    """Load/save capability injected into the board session."""

    def load(self) -> Any | None:
        """Return previously saved raw data, or None if there is none."""
        ...

    def save(self, board: Board) -> None:
        """Persist the board."""
        ...


class JsonFileGateway:
    """Board gateway backed by a single JSON file.

    A missing file means "no board yet". An unreadable or malformed file is
    logged and reported as absent too, so the caller starts from an empty
    board.
    """

    def __init__(self, path: Path, storage: JsonStorage | None = None) -> None:
        """Initialize the gateway.

        Args:
            path: Location of the board file.
            storage: JsonStorage instance to use. Creates new one if not provided.
        """
        self.path = path
        self._storage = storage or JsonStorage()

    def load(self) -> Any | None:
        if not self.path.exists():
            logger.debug(f"No board file at {self.path}")
            return None

        result = self._storage.load_json(self.path)
        if isinstance(result, Err):
            logger.warning(f"Ignoring unreadable board file: {result.error}")
            return None
        return result.value

    def save(self, board: Board) -> None:
        result = self._storage.save_json(self.path, serialize_board(board))
        if isinstance(result, Err):
            logger.error(f"Failed to save board: {result.error}")
        else:
            logger.debug(f"Saved board with {board.count()} tasks to {self.path}")


class InMemoryGateway:
    """Board gateway that keeps the last saved board in memory.

    Stores the serialized form, so loading goes through the same path as a
    real file. Useful for tests and throwaway sessions.
    """

    def __init__(self, initial: Any | None = None) -> None:
        self.data: Any | None = initial
        self.save_count = 0

    def load(self) -> Any | None:
        return self.data

    def save(self, board: Board) -> None:
        self.data = serialize_board(board)
        self.save_count += 1
