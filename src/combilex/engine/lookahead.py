"""Non-consuming lookahead combinators.

None of these parsers ever advances the cursor, whether they succeed or fail.
"""

from typing import Any

from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult, failure, success

__all__ = ["followed_by", "lookahead", "not_followed_by", "peek"]


def lookahead[T](parser: Parser[T]) -> Parser[T]:
    """Succeed with parser's value without consuming input.

    Example:
        >>> from combilex import literal
        >>> result = lookahead(literal("ab"))("abc")
        >>> result.value, result.remaining
        ('ab', 'abc')
    """

    def parse_lookahead(cursor: Cursor) -> ParseResult[T] | None:
        result = parser.apply(cursor)
        if result is None:
            return failure()
        return success(result.value, cursor)

    return Parser(parse_lookahead, "lookahead")


def peek[T](parser: Parser[T]) -> Parser[T]:
    """Alias of lookahead()."""
    return lookahead(parser).named("peek")


def not_followed_by(parser: Parser[Any]) -> Parser[None]:
    """Succeed with None iff parser fails here."""

    def parse_not_followed_by(cursor: Cursor) -> ParseResult[None] | None:
        if parser.apply(cursor) is None:
            return success(None, cursor)
        return failure()

    return Parser(parse_not_followed_by, "not_followed_by")


def followed_by(parser: Parser[Any]) -> Parser[None]:
    """Succeed with None iff parser succeeds here; parser's value is discarded."""

    def parse_followed_by(cursor: Cursor) -> ParseResult[None] | None:
        if parser.apply(cursor) is None:
            return failure()
        return success(None, cursor)

    return Parser(parse_followed_by, "followed_by")
