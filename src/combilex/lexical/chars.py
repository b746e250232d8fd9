"""Single-character and line-level lexical parsers.

Character classes are ASCII: letter matches ``[a-zA-Z]``, not every
character for which str.isalpha() is true.
"""

from combilex.constants import WHITESPACE
from combilex.core.parser import Parser
from combilex.engine import char, literal, map_, satisfy, take_while

__all__ = [
    "alpha_num",
    "crlf",
    "digit",
    "letter",
    "line",
    "lower",
    "newline",
    "space",
    "tab",
    "upper",
]

_ASCII_DIGITS = frozenset("0123456789")
_ASCII_UPPER = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
_ASCII_LOWER = frozenset("abcdefghijklmnopqrstuvwxyz")
_ASCII_LETTERS = _ASCII_UPPER | _ASCII_LOWER

digit: Parser[int] = map_(satisfy(_ASCII_DIGITS.__contains__), int).named("digit")
"""One decimal digit, as an int."""

letter: Parser[str] = satisfy(_ASCII_LETTERS.__contains__).named("letter")
alpha_num: Parser[str] = satisfy(
    lambda ch: ch in _ASCII_LETTERS or ch in _ASCII_DIGITS
).named("alpha_num")
upper: Parser[str] = satisfy(_ASCII_UPPER.__contains__).named("upper")
lower: Parser[str] = satisfy(_ASCII_LOWER.__contains__).named("lower")

space: Parser[str] = satisfy(WHITESPACE.__contains__).named("space")
"""One whitespace character (space, tab, newline, CR, FF or VT)."""

tab: Parser[str] = char("\t").named("tab")
newline: Parser[str] = char("\n").named("newline")
crlf: Parser[str] = literal("\r\n").named("crlf")

line: Parser[str] = take_while(lambda ch: ch not in "\r\n").named("line")
"""Everything up to (not including) the next line break. Never fails."""
