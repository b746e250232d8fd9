"""Combinator algebra: sequence, choice, transformation and binding.

Every combinator here is a pure function from parsers to a new parser.
Failure of a composite never exposes partial consumption: because cursors
are immutable, returning None simply discards whatever the sub-parsers
advanced, and the caller still holds its original cursor.
"""

from collections.abc import Callable
from functools import reduce
from typing import Any

from combilex.core.cursor import Cursor
from combilex.core.parser import LazyCell, Parser
from combilex.core.results import ParseResult, failure, success

__all__ = ["attempt", "bind", "choice", "lazy", "map_", "pipe", "sequence"]


def sequence(*parsers: Parser[Any]) -> Parser[tuple[Any, ...]]:
    """Run parsers in order, threading the cursor; value is the tuple of values.

    Short-circuits on the first failure. An empty sequence succeeds with ()
    without consuming.

    Example:
        >>> from combilex import literal
        >>> sequence(literal("a"), literal("b"))("abc").value
        ('a', 'b')
        >>> sequence(literal("a"), literal("b"))("ac") is None
        True
    """

    def parse_sequence(cursor: Cursor) -> ParseResult[tuple[Any, ...]] | None:
        values: list[Any] = []
        for parser in parsers:
            result = parser.apply(cursor)
            if result is None:
                return failure()
            values.append(result.value)
            cursor = result.cursor
        return success(tuple(values), cursor)

    return Parser(parse_sequence, "sequence")


def choice(*parsers: Parser[Any]) -> Parser[Any]:
    """Try parsers in order against the same cursor; first success wins.

    Ordered alternation: no longest-match or ambiguity resolution. An empty
    choice always fails.
    """

    def parse_choice(cursor: Cursor) -> ParseResult[Any] | None:
        for parser in parsers:
            result = parser.apply(cursor)
            if result is not None:
                return result
        return failure()

    return Parser(parse_choice, "choice")


def pipe(*functions: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose functions left to right: pipe(f, g)(x) == g(f(x))."""

    def piped(value: Any) -> Any:
        return reduce(lambda acc, fn: fn(acc), functions, value)

    return piped


def map_[T](parser: Parser[T], *transforms: Callable[[Any], Any]) -> Parser[Any]:
    """Apply transforms left to right to a successful value.

    The cursor is untouched; failure propagates. With no transforms the
    parser behaves exactly like the original.

    Example:
        >>> from combilex import pattern
        >>> map_(pattern(r"\\d+"), int, lambda n: n * 2)("21").value
        42
    """
    transform = pipe(*transforms)

    def parse_map(cursor: Cursor) -> ParseResult[Any] | None:
        result = parser.apply(cursor)
        if result is None:
            return failure()
        return success(transform(result.value), result.cursor)

    return Parser(parse_map, parser.name)


def bind[T, U](parser: Parser[T], continuation: Callable[[T], Parser[U]]) -> Parser[U]:
    """Run parser, build the next parser from its value, run that on the rest.

    This is the context-sensitive point of the algebra: later structure may
    depend on earlier parsed values (e.g. a length prefix).
    """

    def parse_bind(cursor: Cursor) -> ParseResult[U] | None:
        result = parser.apply(cursor)
        if result is None:
            return failure()
        return continuation(result.value).apply(result.cursor)

    return Parser(parse_bind, "bind")


def lazy[T](thunk: Callable[[], Parser[T]]) -> Parser[T]:
    """Defer building a parser until it is first invoked.

    The thunk runs once; later calls reuse the realized parser. This is
    what lets a parser refer to itself:

        >>> from combilex import char, choice, between
        >>> paren = lazy(lambda: choice(between(char("("), paren, char(")")), char("x")))
        >>> paren("((x))").value
        'x'
    """
    cell = LazyCell(thunk)

    def parse_lazy(cursor: Cursor) -> ParseResult[T] | None:
        return cell.get().apply(cursor)

    return Parser(parse_lazy, "lazy")


def attempt[T](parser: Parser[T]) -> Parser[T]:
    """Identity wrapper.

    Every parser in this engine already backtracks fully on failure, so
    attempt() only exists for symmetry with libraries where it does not.
    """
    return parser
