"""Numeric lexical parsers.

All patterns are ASCII-only: Python's ``\\d`` would also accept digits from
other scripts, which int() converts but users rarely expect.
"""

from combilex.core.parser import Parser
from combilex.engine import many1, map_, pattern

from .chars import digit

__all__ = ["digits", "float_", "hex_number", "integer", "natural_number"]


def _to_int(digit_values: list[int]) -> int:
    value = 0
    for d in digit_values:
        value = value * 10 + d
    return value


digits: Parser[int] = map_(many1(digit), _to_int).named("digits")
"""One or more digits folded into an int."""

natural_number: Parser[int] = map_(pattern(r"[0-9]+"), int).named("natural_number")
"""Unsigned decimal integer."""

integer: Parser[int] = map_(pattern(r"[+-]?[0-9]+"), int).named("integer")
"""Optionally signed decimal integer."""

float_: Parser[float] = map_(
    pattern(r"[+-]?[0-9]+(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"), float
).named("float_")
"""Decimal number with optional fraction and exponent, as a float.

A fraction needs digits on both sides of the dot: ``"1."`` parses as 1.0
and leaves the dot unconsumed.
"""

hex_number: Parser[int] = map_(
    pattern(r"0[xX][0-9a-fA-F]+"), lambda text: int(text[2:], 16)
).named("hex_number")
"""``0x``-prefixed hexadecimal integer."""
