"""Shared constants for CombiLex.

This module provides centralized constants used across the core, engine
and lexical packages. Placing constants here avoids circular imports and
provides a single source of truth.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "DEFAULT_CONTEXT_LINES",
    "WHITESPACE",
    "WORD_CHARS",
]

# ============================================================================
# CHARACTER CLASSES
# ============================================================================

# Characters treated as insignificant whitespace by lexeme() and whitespace.
# Matches the set str.isspace() accepts for ASCII input.
WHITESPACE: frozenset[str] = frozenset(" \t\n\r\f\v")

# Characters that continue a word for word(): a keyword must not be followed
# by one of these, otherwise "if" would match the prefix of "iffy".
WORD_CHARS: frozenset[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789_"
)

# ============================================================================
# ERROR REPORTING
# ============================================================================

# Source lines shown before and after the error line by parse_or_raise().
DEFAULT_CONTEXT_LINES: int = 2
