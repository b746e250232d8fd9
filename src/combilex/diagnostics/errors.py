"""CombiLex exception hierarchy with structured diagnostics.

Parse failure is never an exception inside the engine. These exceptions
signal construction-time misuse (a programming mistake in grammar assembly)
or are raised on request by the top-level parse_or_raise() reporter.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from .codes import Diagnostic

if TYPE_CHECKING:
    from combilex.core.cursor import Cursor

__all__ = [
    "BabelImportError",
    "CombilexError",
    "GrammarRuleError",
    "ParseSyntaxError",
    "ParserConstructionError",
]


class CombilexError(Exception):
    """Base exception for all CombiLex errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize CombilexError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.message)
        else:
            self.diagnostic = None
            super().__init__(message)


class ParserConstructionError(CombilexError, ValueError):
    """A primitive or combinator was built with invalid arguments.

    Examples:
    - char("ab") (more than one character)
    - pattern(re.finditer(...)) (multi-match object)
    - count(p, -1)
    """


class GrammarRuleError(CombilexError, KeyError):
    """A grammar rule was requested that the grammar does not define."""

    def __str__(self) -> str:
        # KeyError.__str__ reprs its argument; keep the plain message
        return str(self.args[0]) if self.args else ""


class ParseSyntaxError(CombilexError):
    """Input rejected by parse_or_raise().

    Attributes:
        cursor: Cursor at the failure point (for line:column)
        context: Formatted source excerpt with a caret under the failure point
    """

    def __init__(self, message: Diagnostic, cursor: Cursor, context: str) -> None:
        super().__init__(message)
        self.cursor = cursor
        self.context = context

    def __str__(self) -> str:
        return self.context


class BabelImportError(ImportError):
    """Raised when a Babel-backed parser is built without Babel installed.

    Attributes:
        feature: Name of the feature that required Babel
    """

    def __init__(self, feature: str) -> None:
        self.feature = feature
        super().__init__(
            f"{feature} requires Babel for CLDR locale data. "
            "Install with: pip install combilex[babel]"
        )
