"""Separator and terminator combinators: list-shaped structures.

Backtracking Rule:
    A separator that is not followed by a successful item is NOT consumed.
    The list ends just before that separator and the separator stays in the
    remainder:

        >>> from combilex import char, sep_by
        >>> from combilex.lexical import natural_number
        >>> value, remaining = sep_by(natural_number, char(","))("1,2,")
        >>> value, remaining
        ([1, 2], ',')

    Every loop here also stops when a separator-and-item round makes no
    progress, so a pair of empty-matching parsers cannot spin forever.
"""

import logging
from typing import Any

from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult, failure, success

from .combinators import map_, sequence
from .primitives import literal
from .repetition import many, many1
from .sequencing import between

__all__ = [
    "delimited",
    "delimited_by",
    "end_by",
    "end_by1",
    "interleaved",
    "sep_by",
    "sep_by1",
    "sep_end_by",
    "sep_end_by1",
]

logger = logging.getLogger(__name__)


def _separated[T](
    item: Parser[T],
    separator: Parser[Any],
    cursor: Cursor,
    *,
    keep_separators: bool,
) -> ParseResult[list[Any]]:
    """Shared loop for sep_by and interleaved.

    Zero items is a success with an empty list at the original cursor.
    """
    first = item.apply(cursor)
    if first is None:
        return success([], cursor)

    values: list[Any] = [first.value]
    cursor = first.cursor
    while True:
        sep = separator.apply(cursor)
        if sep is None:
            break
        following = item.apply(sep.cursor)
        if following is None:
            break
        if following.cursor.pos == cursor.pos:
            logger.debug(
                "Separated list halted: zero-length round at position %d", cursor.pos
            )
            break
        if keep_separators:
            values.append(sep.value)
        values.append(following.value)
        cursor = following.cursor
    return success(values, cursor)


def sep_by[T](item: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """Zero or more items separated by separator. Never fails."""

    def parse_sep_by(cursor: Cursor) -> ParseResult[list[T]]:
        return _separated(item, separator, cursor, keep_separators=False)

    return Parser(parse_sep_by, "sep_by")


def sep_by1[T](item: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """One or more items separated by separator."""

    def parse_sep_by1(cursor: Cursor) -> ParseResult[list[T]] | None:
        result = _separated(item, separator, cursor, keep_separators=False)
        return result if result.value else failure()

    return Parser(parse_sep_by1, "sep_by1")


def _trailing_separator[T](
    listed: Parser[list[T]], separator: Parser[Any], name: str
) -> Parser[list[T]]:
    def parse_with_trailing(cursor: Cursor) -> ParseResult[list[T]] | None:
        result = listed.apply(cursor)
        if result is None:
            return failure()
        trailing = separator.apply(result.cursor)
        if trailing is None:
            return result
        return success(result.value, trailing.cursor)

    return Parser(parse_with_trailing, name)


def sep_end_by[T](item: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """sep_by() that also consumes one optional trailing separator.

    The trailing separator is tried even after zero items, so ``","`` alone
    parses as an empty list with the comma consumed.
    """
    return _trailing_separator(sep_by(item, separator), separator, "sep_end_by")


def sep_end_by1[T](item: Parser[T], separator: Parser[Any]) -> Parser[list[T]]:
    """sep_by1() that also consumes one optional trailing separator."""
    return _trailing_separator(sep_by1(item, separator), separator, "sep_end_by1")


def _first(pair: tuple[Any, ...]) -> Any:
    return pair[0]


def end_by[T](item: Parser[T], terminator: Parser[Any]) -> Parser[list[T]]:
    """Zero or more items, each followed by terminator.

    An unterminated final item is left in the remainder, not an error.
    """
    return many(map_(sequence(item, terminator), _first)).named("end_by")


def end_by1[T](item: Parser[T], terminator: Parser[Any]) -> Parser[list[T]]:
    """One or more items, each followed by terminator."""
    return many1(map_(sequence(item, terminator), _first)).named("end_by1")


def interleaved[T, S](item: Parser[T], separator: Parser[S]) -> Parser[list[T | S]]:
    """Alternating item, separator, item, ... keeping both kinds of value.

    Never fails; a trailing separator without an item is left unconsumed.

    Example:
        >>> from combilex import one_of
        >>> from combilex.lexical import natural_number
        >>> interleaved(natural_number, one_of("+-"))("1+2-3").value
        [1, '+', 2, '-', 3]
    """

    def parse_interleaved(cursor: Cursor) -> ParseResult[list[T | S]]:
        return _separated(item, separator, cursor, keep_separators=True)

    return Parser(parse_interleaved, "interleaved")


def delimited[T](
    item: Parser[T], separator: Parser[Any], terminator: Parser[Any]
) -> Parser[list[T]]:
    """sep_by() list that must be followed by terminator, else the whole parse fails."""
    listed = sep_by(item, separator)

    def parse_delimited(cursor: Cursor) -> ParseResult[list[T]] | None:
        result = listed.apply(cursor)
        if result is None:
            return failure()
        end = terminator.apply(result.cursor)
        if end is None:
            return failure()
        return success(result.value, end.cursor)

    return Parser(parse_delimited, "delimited")


def delimited_by[T](open_text: str, close_text: str, content: Parser[T]) -> Parser[T]:
    """content wrapped in the literal delimiters open_text and close_text.

    Example:
        >>> from combilex.lexical import natural_number
        >>> delimited_by("(", ")", natural_number)("(42)").value
        42
    """
    return between(literal(open_text), content, literal(close_text)).named(
        f"delimited_by({open_text!r}, {close_text!r})"
    )
