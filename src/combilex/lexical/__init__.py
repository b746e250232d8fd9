"""Lexical parsers built on the engine.

These are ordinary applications of the combinators: every one is a
Parser that returns a value with the remaining input, or None.

Exports:
    chars: digit, letter, alpha_num, upper, lower, space, tab, newline, crlf, line
    numbers: digits, natural_number, integer, float_, hex_number
    lexeme: whitespace, lexeme, symbol, end_of_line, identifier
    text: string, string_ci, word, quoted, parenthesized, braced, bracketed
    locale: NumberSymbols, decimal_parser, number_symbols, locale_decimal
        (number_symbols and locale_decimal need the ``babel`` extra)

Python 3.13+.
"""

from .chars import (
    alpha_num,
    crlf,
    digit,
    letter,
    line,
    lower,
    newline,
    space,
    tab,
    upper,
)
from .lexeme import end_of_line, identifier, lexeme, symbol, whitespace
from .locale import NumberSymbols, decimal_parser, locale_decimal, number_symbols
from .numbers import digits, float_, hex_number, integer, natural_number
from .text import braced, bracketed, parenthesized, quoted, string, string_ci, word

__all__ = [
    "NumberSymbols",
    "alpha_num",
    "braced",
    "bracketed",
    "crlf",
    "decimal_parser",
    "digit",
    "digits",
    "end_of_line",
    "float_",
    "hex_number",
    "identifier",
    "integer",
    "letter",
    "lexeme",
    "line",
    "locale_decimal",
    "lower",
    "natural_number",
    "newline",
    "number_symbols",
    "parenthesized",
    "quoted",
    "space",
    "string",
    "string_ci",
    "symbol",
    "tab",
    "upper",
    "whitespace",
    "word",
]
