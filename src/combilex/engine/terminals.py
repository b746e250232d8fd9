"""Terminal-driven collection and value-discarding combinators."""

import logging
from typing import Any

from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult, failure, success

from .combinators import map_
from .repetition import many, many1

__all__ = ["consume", "skip_many", "skip_many1", "until"]

logger = logging.getLogger(__name__)


def _discard(_value: Any) -> None:
    return None


def until[T](parser: Parser[T], terminator: Parser[Any]) -> Parser[list[T]]:
    """Collect parser results until terminator would match.

    The terminator is checked (never consumed) before each item. The whole
    parse fails if parser fails before the terminator is found, or if
    parser succeeds without advancing (no terminator could ever be reached).

    Example:
        >>> from combilex import any_char, literal
        >>> result = until(any_char, literal("*/"))("abc*/rest")
        >>> "".join(result.value), result.remaining
        ('abc', '*/rest')
    """

    def parse_until(cursor: Cursor) -> ParseResult[list[T]] | None:
        values: list[T] = []
        while terminator.apply(cursor) is None:
            result = parser.apply(cursor)
            if result is None:
                return failure()
            if result.cursor.pos == cursor.pos:
                logger.debug(
                    "until() halted: %r made no progress at position %d",
                    parser,
                    cursor.pos,
                )
                return failure()
            values.append(result.value)
            cursor = result.cursor
        return success(values, cursor)

    return Parser(parse_until, "until")


def skip_many(parser: Parser[Any]) -> Parser[None]:
    """many(parser), discarding the values."""
    return map_(many(parser), _discard).named("skip_many")


def skip_many1(parser: Parser[Any]) -> Parser[None]:
    """many1(parser), discarding the values."""
    return map_(many1(parser), _discard).named("skip_many1")


def consume(parser: Parser[Any]) -> Parser[None]:
    """Run parser once, discarding its value."""
    return map_(parser, _discard).named("consume")
