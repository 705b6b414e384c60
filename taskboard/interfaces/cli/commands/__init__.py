"""CLI commands for Taskboard.

Command modules:
- board: show, add, move, reset
- config: show or update user configuration

Commands are plain functions; the main app registers them as top-level
commands.
"""

from taskboard.interfaces.cli.commands import board, config

__all__ = ["board", "config"]
