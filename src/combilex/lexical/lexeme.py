"""Whitespace handling: the lexeme layer.

The convention is that every token parser skips the whitespace AFTER it.
A grammar then only needs one leading ``whitespace`` at the document start.
"""

from typing import Any

from combilex.constants import WHITESPACE
from combilex.core.parser import Parser
from combilex.engine import choice, eof, left, literal, map_, pattern, take_while

from .chars import crlf, newline

__all__ = ["end_of_line", "identifier", "lexeme", "symbol", "whitespace"]

whitespace: Parser[str] = take_while(WHITESPACE.__contains__).named("whitespace")
"""Zero or more whitespace characters. Never fails."""


def lexeme[T](parser: Parser[T]) -> Parser[T]:
    """parser followed by any whitespace; keeps parser's value.

    Example:
        >>> from combilex.lexical import natural_number
        >>> result = lexeme(natural_number)("42   +")
        >>> result.value, result.remaining
        (42, '+')
    """
    return left(parser, whitespace).named(f"lexeme({parser.name})")


def symbol(text: str) -> Parser[str]:
    """lexeme(literal(text))."""
    return lexeme(literal(text)).named(f"symbol({text!r})")


def _empty(_value: Any) -> str:
    return ""


end_of_line: Parser[str] = choice(newline, crlf, map_(eof, _empty)).named(
    "end_of_line"
)
"""``\\n``, ``\\r\\n``, or end of input (yielding "")."""

identifier: Parser[str] = pattern(r"[a-zA-Z_][a-zA-Z0-9_]*").named("identifier")
