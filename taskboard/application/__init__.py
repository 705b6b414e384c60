"""Application service layer for Taskboard.

Orchestrates domain operations against an injected gateway. The domain
stays pure; this layer is where loading, fallback and saving happen.

Example usage:
    >>> from taskboard.application import BoardSession
    >>> from taskboard.infrastructure.storage import InMemoryGateway
    >>>
    >>> session = BoardSession.open(InMemoryGateway())
    >>> result = session.add_task("BACKLOG", "Ship feature")
"""

from taskboard.application.board_service import BoardSession, load_board

__all__ = [
    "BoardSession",
    "load_board",
]
