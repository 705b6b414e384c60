"""Taskboard - a workflow-enforcing task board.

Tasks move one stage at a time through BACKLOG, TODO, DOING and DONE.
The domain layer is pure; persistence and the CLI sit around it.
"""

__version__ = "0.1.0"
