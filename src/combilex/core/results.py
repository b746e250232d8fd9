"""Result protocol shared by every parser.

A parser returns exactly one of two shapes:

- ``ParseResult(value, cursor)`` on success
- ``None`` on failure (no payload, no reason code)

No component constructs results by other means: every combinator routes
through success() and failure(). Because success() only accepts a cursor
derived from the input cursor, the remaining input of a success is always
a suffix of the input that was passed in.
"""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any

from .cursor import Cursor

__all__ = ["ParseResult", "failure", "is_success", "success"]


@dataclass(frozen=True, slots=True)
class ParseResult[T]:
    """Parser result containing parsed value and new cursor position.

    Type Parameters:
        T: The type of the parsed value

    Design:
        - Generic over result type T
        - Frozen for immutability (results are shared by backtracking branches)
        - Contains BOTH parsed value AND new cursor
        - Unpacks like a pair: ``value, remaining = parser("...")``

    Example:
        >>> result = ParseResult("h", Cursor("hello", 1))
        >>> result.value
        'h'
        >>> result.remaining
        'ello'
        >>> value, rest = result
        >>> rest
        'ello'
    """

    value: T
    cursor: Cursor

    @property
    def remaining(self) -> str:
        """The unconsumed input left after this success."""
        return self.cursor.remaining

    def __iter__(self) -> Iterator[Any]:
        yield self.value
        yield self.cursor.remaining


def success[T](value: T, cursor: Cursor) -> ParseResult[T]:
    """Construct a successful result.

    Args:
        value: Parsed value
        cursor: Cursor positioned after the consumed input
    """
    return ParseResult(value, cursor)


def failure() -> None:
    """Construct the failure marker.

    Failure carries no payload by design; it is an ordinary return value
    that combinators inspect, never an exception.
    """
    return None


def is_success(result: ParseResult[Any] | None) -> bool:
    """Check whether a parser call succeeded."""
    return result is not None
