"""Top-level entry points for parsing whole documents.

parse() is the whole-document contract: the parser must succeed and only
whitespace may remain. parse_or_raise() applies the same rule but explains
a rejection with a ParseSyntaxError carrying line:column and a source
excerpt. Neither changes the two-outcome protocol used inside the engine.
"""

import logging

from combilex.constants import DEFAULT_CONTEXT_LINES
from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult
from combilex.diagnostics import ErrorTemplate, ParseSyntaxError

__all__ = ["parse", "parse_or_raise", "parse_partial"]

logger = logging.getLogger(__name__)

# Characters of unconsumed input quoted in a trailing-input error
_EXCERPT_LENGTH = 20


def parse_partial[T](parser: Parser[T], text: str) -> ParseResult[T] | None:
    """Run parser from the start of text; return the raw result.

    No whole-document check is applied.
    """
    return parser.apply(Cursor(text, 0))


def _is_complete(result: ParseResult[object]) -> bool:
    return result.remaining.strip() == ""


def parse[T](parser: Parser[T], text: str) -> T | None:
    """Parse a whole document.

    Returns the parsed value if parser succeeds and the remaining input is
    empty after trimming whitespace. Returns None otherwise.

    Example:
        >>> from combilex import literal
        >>> parse(literal("hello"), "hello   ")
        'hello'
        >>> parse(literal("hello"), "hello world") is None
        True
    """
    result = parse_partial(parser, text)
    if result is None or not _is_complete(result):
        return None
    return result.value


def parse_or_raise[T](
    parser: Parser[T], text: str, *, context_lines: int = DEFAULT_CONTEXT_LINES
) -> T:
    """Parse a whole document, raising instead of returning None.

    Args:
        parser: Top-level parser
        text: Document to parse
        context_lines: Source lines shown around the error line

    Returns:
        The parsed value

    Raises:
        ParseSyntaxError: If parser fails (reported at the start of input)
            or leaves non-whitespace input (reported where it stopped)
    """
    result = parse_partial(parser, text)
    if result is not None and _is_complete(result):
        return result.value

    if result is None:
        cursor = Cursor(text, 0)
        diagnostic = ErrorTemplate.parse_failed(cursor.pos)
    else:
        cursor = result.cursor
        diagnostic = ErrorTemplate.trailing_input(
            cursor.pos, cursor.slice_ahead(_EXCERPT_LENGTH)
        )

    context = cursor.format_context(diagnostic.message, context_lines)
    logger.debug("parse_or_raise rejected input:\n%s", context)
    raise ParseSyntaxError(diagnostic, cursor, context)
