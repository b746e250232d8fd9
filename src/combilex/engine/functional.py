"""Helpers that reshape list results or fold repeated values."""

from collections.abc import Callable
from functools import reduce
from typing import Any

from combilex.core.parser import Parser

from .combinators import map_
from .repetition import many

__all__ = ["first", "fold", "fold_right", "last", "nth"]


def nth[T](parser: Parser[list[T]], index: int) -> Parser[T | None]:
    """Pick element index of a list result; None when out of range.

    Negative indices count from the end, as with Python sequences.
    """

    def pick(values: list[T]) -> T | None:
        try:
            return values[index]
        except IndexError:
            return None

    return map_(parser, pick).named(f"nth({index})")


def first[T](parser: Parser[list[T]]) -> Parser[T | None]:
    return nth(parser, 0).named("first")


def last[T](parser: Parser[list[T]]) -> Parser[T | None]:
    return nth(parser, -1).named("last")


def fold[T, U](
    parser: Parser[T], initial: U, folder: Callable[[U, T], U]
) -> Parser[U]:
    """Left-fold the values of many(parser) starting from initial.

    Example:
        >>> from combilex.lexical import digit
        >>> fold(digit, 0, lambda acc, d: acc * 10 + d)("123x").value
        123
    """

    def fold_values(values: list[T]) -> U:
        return reduce(folder, values, initial)

    return map_(many(parser), fold_values).named("fold")


def fold_right[T, U](
    parser: Parser[T], initial: U, folder: Callable[[T, U], U]
) -> Parser[U]:
    """Right-fold the values of many(parser); folder receives (item, acc)."""

    def fold_values(values: list[T]) -> U:
        acc: Any = initial
        for value in reversed(values):
            acc = folder(value, acc)
        return acc

    return map_(many(parser), fold_values).named("fold_right")
