"""Storage infrastructure for Taskboard.

Provides JSON file I/O and the board gateways built on it.
"""

from taskboard.infrastructure.storage.gateways import (
    BoardGateway,
    InMemoryGateway,
    JsonFileGateway,
    serialize_board,
)
from taskboard.infrastructure.storage.json_storage import JsonStorage

__all__ = [
    "JsonStorage",
    "BoardGateway",
    "JsonFileGateway",
    "InMemoryGateway",
    "serialize_board",
]
