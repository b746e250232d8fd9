"""Text-level lexical parsers: keywords, case-insensitive strings, brackets."""

from combilex.constants import WORD_CHARS
from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult, failure, success
from combilex.engine import choice, delimited_by, left, literal, not_followed_by, satisfy

from .lexeme import lexeme

__all__ = [
    "braced",
    "bracketed",
    "parenthesized",
    "quoted",
    "string",
    "string_ci",
    "word",
]

_word_char: Parser[str] = satisfy(WORD_CHARS.__contains__).named("word_char")


def string(text: str) -> Parser[str]:
    """Exact string match. Same as literal()."""
    return literal(text).named(f"string({text!r})")


def string_ci(text: str) -> Parser[str]:
    """Case-insensitive match; the value keeps the input's own spelling.

    Example:
        >>> string_ci("select")("SeLeCt *").value
        'SeLeCt'
    """
    length = len(text)
    folded = text.casefold()

    def parse_string_ci(cursor: Cursor) -> ParseResult[str] | None:
        candidate = cursor.slice_ahead(length)
        if len(candidate) == length and candidate.casefold() == folded:
            return success(candidate, cursor.advance(length))
        return failure()

    return Parser(parse_string_ci, f"string_ci({text!r})")


def word(keyword: str) -> Parser[str]:
    """keyword as a whole word, then any whitespace.

    Fails when keyword is only a prefix of a longer word:

        >>> word("if")("if x").value
        'if'
        >>> word("if")("iffy") is None
        True
    """
    return lexeme(left(literal(keyword), not_followed_by(_word_char))).named(
        f"word({keyword!r})"
    )


def quoted[T](content: Parser[T]) -> Parser[T]:
    """content between double quotes, or else between single quotes."""
    return choice(
        delimited_by('"', '"', content),
        delimited_by("'", "'", content),
    ).named("quoted")


def parenthesized[T](content: Parser[T]) -> Parser[T]:
    return delimited_by("(", ")", content)


def braced[T](content: Parser[T]) -> Parser[T]:
    return delimited_by("{", "}", content)


def bracketed[T](content: Parser[T]) -> Parser[T]:
    return delimited_by("[", "]", content)
