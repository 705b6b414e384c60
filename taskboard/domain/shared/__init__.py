"""Shared domain utilities.

Example usage:
    >>> from taskboard.domain.shared import Ok, Err, Result, is_ok
    >>>
    >>> def find_column(name: str) -> Result[str, str]:
    ...     if name not in ("BACKLOG", "TODO"):
    ...         return Err("Column not found")
    ...     return Ok(name)
"""

from taskboard.domain.shared.result import (
    Err,
    Ok,
    Result,
    is_err,
    is_ok,
    unwrap_or,
)

__all__ = [
    "Ok",
    "Err",
    "Result",
    "is_ok",
    "is_err",
    "unwrap_or",
]
