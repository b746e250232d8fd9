"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for construction-time misuse
and top-level parse reporting.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum

__all__ = ["Diagnostic", "DiagnosticCode"]


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Construction errors (malformed primitive/combinator arguments)
        2000-2999: Grammar errors (rule definition and lookup)
        3000-3999: Syntax errors (reported by parse_or_raise only)
        4000-4999: Locale errors (Babel-backed lexical parsers)
    """

    # Construction errors (1000-1999)
    CHAR_NOT_SINGLE = 1001
    PATTERN_MULTI_MATCH = 1002
    PATTERN_INVALID_TYPE = 1003
    COUNT_NEGATIVE = 1004
    RANGE_INVERTED = 1005

    # Grammar errors (2000-2999)
    RULE_NOT_CALLABLE = 2001
    RULE_BAD_ARITY = 2002
    RULE_NOT_FOUND = 2003

    # Syntax errors (3000-3999)
    PARSE_FAILED = 3001
    TRAILING_INPUT = 3002

    # Locale errors (4000-4999)
    LOCALE_UNKNOWN = 4001
    NUMBER_SYMBOLS_INVALID = 4002


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        position: Character offset in the parsed source (syntax errors only)
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    position: int | None = None

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic with its code name and optional hint.

        Example output:
            error[CHAR_NOT_SINGLE]: char() expects exactly one character, got 'ab'
              = help: Use literal() to match multi-character strings

        Returns:
            Formatted error message
        """
        lines = [f"error[{self.code.name}]: {self.message}"]
        if self.position is not None:
            lines.append(f"  --> position {self.position}")
        if self.hint:
            lines.append(f"  = help: {self.hint}")
        return "\n".join(lines)
