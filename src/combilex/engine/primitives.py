"""Primitive parsers: the leaves that terminate every grammar.

Each primitive inspects the cursor directly and performs a single step
with no backtracking of its own. Construction-time misuse (a multi-character
char(), a multi-match pattern, a negative take()) raises
ParserConstructionError immediately; parse-time mismatches return None.
"""

import re
from collections.abc import Callable, Iterator

from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult, failure, success
from combilex.diagnostics import ErrorTemplate, ParserConstructionError

__all__ = [
    "any_char",
    "char",
    "eof",
    "literal",
    "location",
    "none_of",
    "one_of",
    "pattern",
    "position",
    "regex",
    "rest",
    "satisfy",
    "take",
    "take_until",
    "take_while",
]

# Leading anchors are redundant for an anchored match() and would pin the
# pattern to the start of the source instead of the cursor position.
_LEADING_ANCHORS: tuple[str, ...] = ("^", "\\A")


def literal(text: str) -> Parser[str]:
    """Match text exactly at the cursor, consuming exactly len(text).

    The empty literal always succeeds without consuming.

    Example:
        >>> literal("test")("testing").remaining
        'ing'
    """
    length = len(text)

    def parse_literal(cursor: Cursor) -> ParseResult[str] | None:
        if cursor.startswith(text):
            return success(text, cursor.advance(length))
        return failure()

    return Parser(parse_literal, f"literal({text!r})")


def char(expected: str) -> Parser[str]:
    """Match a single character.

    Raises:
        ParserConstructionError: If expected is not exactly one character
    """
    if not isinstance(expected, str) or len(expected) != 1:
        raise ParserConstructionError(ErrorTemplate.char_not_single(expected))

    def parse_char(cursor: Cursor) -> ParseResult[str] | None:
        if not cursor.is_eof and cursor.current == expected:
            return success(expected, cursor.advance())
        return failure()

    return Parser(parse_char, f"char({expected!r})")


def satisfy(predicate: Callable[[str], bool]) -> Parser[str]:
    """Match one character for which predicate returns True."""

    def parse_satisfy(cursor: Cursor) -> ParseResult[str] | None:
        if cursor.is_eof:
            return failure()
        ch = cursor.current
        if predicate(ch):
            return success(ch, cursor.advance())
        return failure()

    return Parser(parse_satisfy, "satisfy")


def one_of(chars: str) -> Parser[str]:
    """Match one character contained in chars. An empty set never matches."""
    allowed = frozenset(chars)
    return satisfy(lambda ch: ch in allowed).named(f"one_of({chars!r})")


def none_of(chars: str) -> Parser[str]:
    """Match one character NOT contained in chars. An empty set matches any character."""
    forbidden = frozenset(chars)
    return satisfy(lambda ch: ch not in forbidden).named(f"none_of({chars!r})")


def _compile_single_shot(source: object, flags: int) -> tuple[re.Pattern[str], bool]:
    """Validate and compile a pattern for one anchored match per call.

    Returns the compiled pattern and whether it must be matched against the
    remaining text rather than the whole source. Any anchor left after the
    leading one is stripped (``^a|^b``, ``(?i)^b``) would otherwise pin the
    match to the start of the source.

    Raises:
        ParserConstructionError: For multi-match objects (finditer results,
            re.Scanner) and for anything that is not text.
    """
    if isinstance(source, Iterator) or hasattr(source, "scan"):
        raise ParserConstructionError(
            ErrorTemplate.pattern_multi_match(type(source).__name__)
        )
    if isinstance(source, re.Pattern):
        if not isinstance(source.pattern, str):
            raise ParserConstructionError(
                ErrorTemplate.pattern_invalid_type("bytes re.Pattern")
            )
        text, flags = source.pattern, source.flags | flags
    elif isinstance(source, str):
        text = source
    else:
        raise ParserConstructionError(
            ErrorTemplate.pattern_invalid_type(type(source).__name__)
        )

    for anchor in _LEADING_ANCHORS:
        if text.startswith(anchor):
            text = text[len(anchor) :]
            break
    needs_remaining = "^" in text or "\\A" in text
    return re.compile(text, flags), needs_remaining


def pattern(regex: str | re.Pattern[str], flags: int = 0) -> Parser[str]:
    """Match a regular expression anchored at the cursor; value is the matched text.

    The match never searches ahead: it either starts exactly at the cursor
    or the parser fails. Every ``^`` or ``\\A`` in the pattern means "at the
    cursor", including inside alternations and groups.

    Args:
        regex: Pattern string or compiled str pattern
        flags: Extra ``re`` flags to combine with the pattern's own

    Raises:
        ParserConstructionError: If regex is a multi-match object or not text

    Example:
        >>> pattern(r"\\d+")("123abc").value
        '123'
        >>> pattern(r"\\d+")("abc123") is None
        True
    """
    compiled, needs_remaining = _compile_single_shot(regex, flags)

    def parse_pattern(cursor: Cursor) -> ParseResult[str] | None:
        if needs_remaining:
            match = compiled.match(cursor.remaining)
            if match is None:
                return failure()
            return success(match.group(0), cursor.advance(match.end()))
        match = compiled.match(cursor.source, cursor.pos)
        if match is None:
            return failure()
        return success(match.group(0), Cursor(cursor.source, match.end()))

    return Parser(parse_pattern, f"pattern({compiled.pattern!r})")


regex = pattern


def take(count: int) -> Parser[str]:
    """Consume exactly count characters; fail if fewer remain.

    Raises:
        ParserConstructionError: If count is negative
    """
    if count < 0:
        raise ParserConstructionError(ErrorTemplate.count_negative("take", count))

    def parse_take(cursor: Cursor) -> ParseResult[str] | None:
        if cursor.remaining_length < count:
            return failure()
        return success(cursor.slice_ahead(count), cursor.advance(count))

    return Parser(parse_take, f"take({count})")


def _scan(predicate: Callable[[str], bool], stop_when: bool) -> Parser[str]:
    def parse_scan(cursor: Cursor) -> ParseResult[str] | None:
        source = cursor.source
        end = cursor.pos
        size = len(source)
        while end < size and bool(predicate(source[end])) is not stop_when:
            end += 1
        return success(cursor.slice_to(end), Cursor(source, end))

    return Parser(parse_scan)


def take_while(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consume characters while predicate holds. Never fails (may match "")."""
    return _scan(predicate, stop_when=False).named("take_while")


def take_until(predicate: Callable[[str], bool]) -> Parser[str]:
    """Consume characters until predicate holds. Never fails (may match "")."""
    return _scan(predicate, stop_when=True).named("take_until")


def _any_char(cursor: Cursor) -> ParseResult[str] | None:
    if cursor.is_eof:
        return failure()
    return success(cursor.current, cursor.advance())


def _eof(cursor: Cursor) -> ParseResult[None] | None:
    return success(None, cursor) if cursor.is_eof else failure()


def _rest(cursor: Cursor) -> ParseResult[str]:
    return success(cursor.remaining, Cursor(cursor.source, len(cursor.source)))


def _position(cursor: Cursor) -> ParseResult[int]:
    return success(cursor.remaining_length, cursor)


def _location(cursor: Cursor) -> ParseResult[tuple[int, int]]:
    return success(cursor.compute_line_col(), cursor)


any_char: Parser[str] = Parser(_any_char, "any_char")
"""Match any single character; fail on empty input."""

eof: Parser[None] = Parser(_eof, "eof")
"""Succeed with None only at end of input."""

rest: Parser[str] = Parser(_rest, "rest")
"""Consume and return everything that is left."""

position: Parser[int] = Parser(_position, "position")
"""Number of characters not yet consumed; consumes nothing."""

location: Parser[tuple[int, int]] = Parser(_location, "location")
"""1-indexed (line, column) of the cursor; consumes nothing."""
