"""Sequencing helpers that run several parsers and keep one value."""

from typing import Any

from combilex.core.parser import Parser

from .combinators import map_, sequence

__all__ = ["after", "before", "between", "left", "middle", "right", "surrounded"]


def left[A](first: Parser[A], second: Parser[Any]) -> Parser[A]:
    """Run first then second; keep first's value."""
    return map_(sequence(first, second), lambda values: values[0]).named("left")


def right[B](first: Parser[Any], second: Parser[B]) -> Parser[B]:
    """Run first then second; keep second's value."""
    return map_(sequence(first, second), lambda values: values[1]).named("right")


def middle[B](first: Parser[Any], second: Parser[B], third: Parser[Any]) -> Parser[B]:
    """Run three parsers; keep the middle value."""
    return map_(sequence(first, second, third), lambda values: values[1]).named(
        "middle"
    )


def between[T](
    open_parser: Parser[Any], content: Parser[T], close_parser: Parser[Any]
) -> Parser[T]:
    """content enclosed by open_parser and close_parser.

    Example:
        >>> from combilex import char, pattern
        >>> between(char("["), pattern(r"\\w+"), char("]"))("[abc]").value
        'abc'
    """
    return middle(open_parser, content, close_parser).named("between")


def surrounded[T](delimiter: Parser[Any], content: Parser[T]) -> Parser[T]:
    """content with the same delimiter on both sides."""
    return between(delimiter, content, delimiter).named("surrounded")


def before[A](first: Parser[A], second: Parser[Any]) -> Parser[A]:
    """Parse first, then ignore second. Same as left()."""
    return left(first, second).named("before")


def after[B](first: Parser[Any], second: Parser[B]) -> Parser[B]:
    """Parse first and ignore it, then keep second. Same as right()."""
    return right(first, second).named("after")
