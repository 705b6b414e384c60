"""Result type for board operations that can be rejected.

Every expected failure in the domain (an empty task text, a move that
skips a stage, a stored board with a duplicate id) is returned as a value
instead of being raised. Callers branch on the result type:

    >>> result = add_task(board, Stage.BACKLOG, "Write docs")
    >>> if is_ok(result):
    ...     board = result.value
    ... else:
    ...     print(result.error.value)
"""

from dataclasses import dataclass
from typing import Generic, TypeVar, Union

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    """A successful result.

    Attributes:
        value: The produced value (usually the new board).
    """

    value: T


@dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    """A rejected operation.

    Attributes:
        error: Why it was rejected. An ``ErrorKind`` for transitions,
            a message string for validation and storage.
    """

    error: E


# Union is needed here: TypeVar aliases don't work with | at runtime
Result = Union[Ok[T], Err[E]]  # noqa: UP007


def is_ok(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Ok."""
    return isinstance(result, Ok)


def is_err(result: Ok[T] | Err[E]) -> bool:
    """Return True if the result is Err."""
    return isinstance(result, Err)


def unwrap_or(result: Ok[T] | Err[E], default: T) -> T:
    """Return the Ok value, or ``default`` if the result is an Err."""
    if isinstance(result, Ok):
        return result.value
    return default
