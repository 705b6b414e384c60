"""Board application service.

Wires the pure board domain to a gateway, following the caller contract:

- on startup load the stored board, validate it, and fall back to an empty
  board when nothing is stored or the stored data is rejected;
- run every user action as exactly one domain call;
- on success persist the new board before making it current, on failure
  leave the current board untouched and hand the error back.
"""

import logging

from taskboard.domain.board import (
    Board,
    ErrorKind,
    Stage,
    add_task,
    create_board,
    move_task,
    validate_board,
)
from taskboard.domain.shared import Err, Result, unwrap_or
from taskboard.infrastructure.storage import BoardGateway

logger = logging.getLogger(__name__)


def load_board(gateway: BoardGateway) -> Board:
    """Load the current board from a gateway.

    Corrupt stored state is not an error for the caller: it is logged and
    replaced by an empty board.

    Args:
        gateway: Where the board is stored.

    Returns:
        The validated stored board, or an empty board.
    """
    raw = gateway.load()
    if raw is None:
        logger.info("No stored board found, starting with an empty board")
        return create_board()

    result = validate_board(raw)
    if isinstance(result, Err):
        logger.warning(f"Discarding stored board: {result.error}")
    return unwrap_or(result, create_board())


class BoardSession:
    """Owner of the current board for one caller.

    Calls must not overlap: each mutation reads the latest board, and the
    board is saved before the next mutation is accepted.
    """

    def __init__(self, gateway: BoardGateway, board: Board) -> None:
        self._gateway = gateway
        self._board = board

    @classmethod
    def open(cls, gateway: BoardGateway) -> "BoardSession":
        """Start a session from whatever the gateway has stored."""
        return cls(gateway, load_board(gateway))

    @property
    def board(self) -> Board:
        """The current board."""
        return self._board

    def add_task(self, stage_id: Stage | str, text: str) -> Result[Board, ErrorKind]:
        """Add a task to a column and persist the result."""
        return self._commit(add_task(self._board, stage_id, text), "add")

    def move_task(self, task_id: str, target_stage_id: Stage | str) -> Result[Board, ErrorKind]:
        """Move a task and persist the result.

        A no-op move returns the same board and is not saved again.
        """
        return self._commit(move_task(self._board, task_id, target_stage_id), "move")

    def reset(self) -> Board:
        """Replace the current board with an empty one and persist it."""
        board = create_board()
        self._gateway.save(board)
        self._board = board
        logger.info("Board reset")
        return board

    def _commit(self, result: Result[Board, ErrorKind], action: str) -> Result[Board, ErrorKind]:
        if isinstance(result, Err):
            logger.info(f"Rejected {action}: {result.error.value}")
            return result

        if result.value is self._board:
            logger.debug(f"{action} left the board unchanged")
            return result

        self._gateway.save(result.value)
        self._board = result.value
        return result
