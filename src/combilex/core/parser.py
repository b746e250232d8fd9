"""The Parser type and its write-once lazy cell.

Every constructor and combinator in the engine returns a ``Parser[T]``:
a thin, immutable wrapper around a pure function

    Cursor -> ParseResult[T] | None

Calling a parser twice on the same input yields the same result, which is
what makes backtracking (try one parser, discard its effect, try another
from the same cursor) safe and cheap.
"""

from __future__ import annotations

from collections.abc import Callable
from threading import RLock
from typing import Any

from .cursor import Cursor
from .results import ParseResult, failure, success

__all__ = ["LazyCell", "ParseFn", "Parser", "create", "fail", "succeed"]

type ParseFn[T] = Callable[[Cursor], ParseResult[T] | None]


class Parser[T]:
    """A composable parser.

    Parsers are plain data until invoked. ``parser(text)`` accepts a string
    (parsed from position 0) or a Cursor; ``parser.apply(cursor)`` is the
    cursor-only path used inside combinators.

    Example:
        >>> from combilex import literal
        >>> hello = literal("hello")
        >>> hello("hello world").remaining
        ' world'
        >>> hello("goodbye") is None
        True
    """

    __slots__ = ("_fn", "name")

    def __init__(self, fn: ParseFn[T], name: str | None = None) -> None:
        self._fn = fn
        self.name = name

    def apply(self, cursor: Cursor) -> ParseResult[T] | None:
        """Run the parser at a cursor."""
        return self._fn(cursor)

    def __call__(self, text: str | Cursor) -> ParseResult[T] | None:
        return self._fn(Cursor.of(text))

    def named(self, name: str) -> Parser[T]:
        """Return the same parser under a descriptive name (for repr/logging)."""
        return Parser(self._fn, name)

    def __repr__(self) -> str:
        return f"<Parser {self.name}>" if self.name else "<Parser>"


def create[T](fn: ParseFn[T], name: str | None = None) -> Parser[T]:
    """Wrap a raw ``Cursor -> ParseResult | None`` function as a Parser."""
    return Parser(fn, name)


def succeed[T](value: T) -> Parser[T]:
    """Parser that always succeeds with value, consuming nothing."""
    return Parser(lambda cursor: success(value, cursor), "succeed")


def fail() -> Parser[Any]:
    """Parser that always fails."""
    return Parser(lambda cursor: failure(), "fail")


class LazyCell[T]:
    """Write-once slot holding a parser that is built on first use.

    The thunk runs at most once per cell. Realization uses double-checked
    locking so that two threads racing on first use converge on a single
    cached parser; thunks are pure, so a lost race would only duplicate work.

    Thread Safety:
        Thread-safe. Reads after realization take no lock.
    """

    __slots__ = ("_lock", "_parser", "_thunk")

    def __init__(self, thunk: Callable[[], Parser[T]]) -> None:
        self._thunk: Callable[[], Parser[T]] | None = thunk
        self._parser: Parser[T] | None = None
        self._lock = RLock()

    @property
    def is_realized(self) -> bool:
        """Whether the thunk has already run."""
        return self._parser is not None

    def get(self) -> Parser[T]:
        """Return the cached parser, running the thunk on first call."""
        parser = self._parser
        if parser is not None:
            return parser
        with self._lock:
            if self._parser is None:
                thunk = self._thunk
                assert thunk is not None  # cleared only after _parser is set
                self._parser = thunk()
                self._thunk = None
            return self._parser
