"""Repetition engine: many, bounded counts and optionals.

Loop Termination:
    many() (and everything built on it) stops at the first failure OR the
    first success that does not advance the cursor. Without that progress
    check, many(p) for a p that matches the empty string would loop forever.
    Bounded forms (count, at_most, range_) terminate on their bound and need
    no such check.
"""

import logging

from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult, failure, success
from combilex.diagnostics import ErrorTemplate, ParserConstructionError

__all__ = [
    "at_least",
    "at_most",
    "count",
    "exactly",
    "many",
    "many1",
    "optional",
    "optional_maybe",
    "range_",
]

logger = logging.getLogger(__name__)


def _check_count(combinator: str, n: int) -> None:
    if n < 0:
        raise ParserConstructionError(ErrorTemplate.count_negative(combinator, n))


def _many_from[T](
    parser: Parser[T], cursor: Cursor, values: list[T]
) -> ParseResult[list[T]]:
    """Collect successes of parser into values starting at cursor."""
    while True:
        result = parser.apply(cursor)
        if result is None:
            break
        if result.cursor.pos == cursor.pos:
            logger.debug(
                "Repetition of %r halted: zero-length match at position %d",
                parser,
                cursor.pos,
            )
            break
        values.append(result.value)
        cursor = result.cursor
    return success(values, cursor)


def _count_from[T](
    parser: Parser[T], cursor: Cursor, n: int, values: list[T]
) -> ParseResult[list[T]] | None:
    """Collect exactly n successes of parser into values, or fail."""
    for _ in range(n):
        result = parser.apply(cursor)
        if result is None:
            return failure()
        values.append(result.value)
        cursor = result.cursor
    return success(values, cursor)


def _at_most_from[T](
    parser: Parser[T], cursor: Cursor, n: int, values: list[T]
) -> ParseResult[list[T]]:
    """Collect up to n successes of parser into values; never fails."""
    for _ in range(n):
        result = parser.apply(cursor)
        if result is None:
            break
        values.append(result.value)
        cursor = result.cursor
    return success(values, cursor)


def many[T](parser: Parser[T]) -> Parser[list[T]]:
    """Zero or more occurrences. Never fails.

    Example:
        >>> from combilex import char, succeed
        >>> many(char("a"))("aaab").value
        ['a', 'a', 'a']
        >>> many(succeed(1))("xyz").value  # zero-length matches stop the loop
        []
    """

    def parse_many(cursor: Cursor) -> ParseResult[list[T]]:
        return _many_from(parser, cursor, [])

    return Parser(parse_many, "many")


def many1[T](parser: Parser[T]) -> Parser[list[T]]:
    """One or more occurrences; fails if the first attempt fails."""

    def parse_many1(cursor: Cursor) -> ParseResult[list[T]] | None:
        first = parser.apply(cursor)
        if first is None:
            return failure()
        return _many_from(parser, first.cursor, [first.value])

    return Parser(parse_many1, "many1")


def count[T](parser: Parser[T], n: int) -> Parser[list[T]]:
    """Exactly n consecutive occurrences; stops after the n-th.

    Raises:
        ParserConstructionError: If n is negative
    """
    _check_count("count", n)

    def parse_count(cursor: Cursor) -> ParseResult[list[T]] | None:
        return _count_from(parser, cursor, n, [])

    return Parser(parse_count, f"count({n})")


exactly = count


def at_most[T](parser: Parser[T], n: int) -> Parser[list[T]]:
    """Zero to n occurrences, greedy. Never fails.

    Raises:
        ParserConstructionError: If n is negative
    """
    _check_count("at_most", n)

    def parse_at_most(cursor: Cursor) -> ParseResult[list[T]]:
        return _at_most_from(parser, cursor, n, [])

    return Parser(parse_at_most, f"at_most({n})")


def at_least[T](parser: Parser[T], n: int) -> Parser[list[T]]:
    """n mandatory occurrences followed by any number of optional ones.

    Raises:
        ParserConstructionError: If n is negative
    """
    _check_count("at_least", n)

    def parse_at_least(cursor: Cursor) -> ParseResult[list[T]] | None:
        required = _count_from(parser, cursor, n, [])
        if required is None:
            return failure()
        return _many_from(parser, required.cursor, required.value)

    return Parser(parse_at_least, f"at_least({n})")


def range_[T](parser: Parser[T], minimum: int, maximum: int) -> Parser[list[T]]:
    """Between minimum and maximum occurrences (inclusive), greedy.

    Raises:
        ParserConstructionError: If minimum is negative or exceeds maximum
    """
    _check_count("range_", minimum)
    if minimum > maximum:
        raise ParserConstructionError(ErrorTemplate.range_inverted(minimum, maximum))

    def parse_range(cursor: Cursor) -> ParseResult[list[T]] | None:
        required = _count_from(parser, cursor, minimum, [])
        if required is None:
            return failure()
        return _at_most_from(parser, required.cursor, maximum - minimum, required.value)

    return Parser(parse_range, f"range_({minimum}, {maximum})")


def optional[T, D](parser: Parser[T], default: D) -> Parser[T | D]:
    """Try parser once; on failure succeed with default at the original cursor."""

    def parse_optional(cursor: Cursor) -> ParseResult[T | D]:
        result = parser.apply(cursor)
        if result is None:
            return success(default, cursor)
        return result

    return Parser(parse_optional, "optional")


def optional_maybe[T](parser: Parser[T]) -> Parser[T | None]:
    """optional() with None as the default."""
    return optional(parser, None).named("optional_maybe")
