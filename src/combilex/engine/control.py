"""Control combinators: conditional runs, recovery, validation and vetoes.

validate() and transform() turn a successful parse into a failure after the
fact. Downstream combinators cannot tell such a veto apart from an ordinary
parse failure: both are None at the original cursor.
"""

from collections.abc import Callable
from typing import Any

from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult, failure, success

__all__ = ["commit", "guard", "not_", "recover", "transform", "unless", "validate"]


def guard[T](condition: bool, parser: Parser[T]) -> Parser[T | None]:
    """Run parser when condition is true; otherwise succeed with None, consuming nothing."""

    def parse_guard(cursor: Cursor) -> ParseResult[T | None] | None:
        if condition:
            return parser.apply(cursor)
        return success(None, cursor)

    return Parser(parse_guard, "guard")


def unless[T](condition: bool, parser: Parser[T]) -> Parser[T | None]:
    """Inverse of guard(): run parser only when condition is false."""
    return guard(not condition, parser).named("unless")


def recover[T](parser: Parser[T], fallback: T) -> Parser[T]:
    """Run parser; on failure succeed with fallback at the original cursor."""

    def parse_recover(cursor: Cursor) -> ParseResult[T]:
        result = parser.apply(cursor)
        if result is None:
            return success(fallback, cursor)
        return result

    return Parser(parse_recover, "recover")


def commit[T](parser: Parser[T]) -> Parser[T]:
    """Identity wrapper, kept alongside attempt().

    All choices backtrack fully; there is no commit point to record.
    """
    return parser


def validate[T](parser: Parser[T], predicate: Callable[[T], bool]) -> Parser[T]:
    """Succeed only if parser succeeds AND predicate accepts its value.

    Example:
        >>> from combilex.lexical import natural_number
        >>> byte = validate(natural_number, lambda n: n < 256)
        >>> byte("255").value
        255
        >>> byte("256") is None
        True
    """

    def parse_validate(cursor: Cursor) -> ParseResult[T] | None:
        result = parser.apply(cursor)
        if result is None or not predicate(result.value):
            return failure()
        return result

    return Parser(parse_validate, "validate")


def transform[A, B](parser: Parser[A], transformer: Callable[[A], B | None]) -> Parser[B]:
    """Like map_(), but a None from transformer vetoes the parse.

    Use this when a value can only be judged after it is computed, e.g.
    looking a parsed keyword up in a table.
    """

    def parse_transform(cursor: Cursor) -> ParseResult[B] | None:
        result = parser.apply(cursor)
        if result is None:
            return failure()
        transformed = transformer(result.value)
        if transformed is None:
            return failure()
        return success(transformed, result.cursor)

    return Parser(parse_transform, "transform")


def not_(parser: Parser[Any]) -> Parser[str]:
    """Consume one character iff parser does NOT match here.

    Fails on empty input and wherever parser matches.

    Example:
        >>> from combilex import char, many
        >>> many(not_(char('"')))('abc"').value
        ['a', 'b', 'c']
    """

    def parse_not(cursor: Cursor) -> ParseResult[str] | None:
        if cursor.is_eof or parser.apply(cursor) is not None:
            return failure()
        return success(cursor.current, cursor.advance())

    return Parser(parse_not, "not_")
