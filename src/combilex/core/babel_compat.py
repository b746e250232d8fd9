"""Babel compatibility layer for optional dependency handling.

Provides centralized, lazy import infrastructure for Babel to ensure consistent
error messaging and import behavior across Babel-dependent parsers.

Design Rationale:
    CombiLex supports two installation modes:
    - Engine-only: `pip install combilex` (no external dependencies)
    - Locale-aware lexing: `pip install combilex[babel]` (CLDR number symbols)

    This module ensures that:
    1. Engine-only installations never trigger Babel imports
    2. Locale-aware parsers get consistent, helpful error messages when Babel is missing
    3. Babel types are available for TYPE_CHECKING without runtime import

Usage Pattern:
    from combilex.core.babel_compat import get_babel_numbers

    def my_parser(locale_code: str) -> Parser[Decimal]:
        numbers = get_babel_numbers()  # Raises BabelImportError if Babel missing
        ...

Python 3.13+.
"""

from __future__ import annotations

from functools import lru_cache
from typing import TYPE_CHECKING, Protocol

from combilex.diagnostics import BabelImportError

if TYPE_CHECKING:
    from babel import Locale
    from babel.core import UnknownLocaleError as UnknownLocaleErrorType


# pylint: disable=unnecessary-ellipsis
# Reason: Ellipsis (...) is the standard Protocol method body per PEP 544
class BabelNumbersProtocol(Protocol):
    """Protocol for Babel numbers module interface.

    Defines the subset of babel.numbers API actually used by CombiLex:
    the CLDR number symbols needed to build a locale-aware decimal lexer.
    """

    def get_decimal_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the decimal separator for the locale."""
        ...

    def get_group_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the digit grouping separator for the locale."""
        ...

    def get_plus_sign_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the plus sign for the locale."""
        ...

    def get_minus_sign_symbol(self, locale: Locale | str | None = None) -> str:
        """Return the minus sign for the locale."""
        ...
# pylint: enable=unnecessary-ellipsis


__all__ = [
    "BabelImportError",
    "BabelNumbersProtocol",
    "get_babel_numbers",
    "get_locale_class",
    "get_unknown_locale_error",
    "is_babel_available",
    "require_babel",
]


@lru_cache(maxsize=1)
def _check_babel_available() -> bool:
    """Check if Babel is installed (computed once, cached via lru_cache)."""
    try:
        import babel  # noqa: F401, PLC0415  # pylint: disable=unused-import

        return True
    except ImportError:
        return False


def is_babel_available() -> bool:
    """Check if Babel is installed.

    Uses cached result to avoid repeated import attempts.
    """
    return _check_babel_available()


def require_babel(feature: str) -> None:
    """Assert that Babel is available, raising BabelImportError if not.

    Use at the entry point of parser constructors that require Babel.
    This provides fail-fast behavior at grammar assembly time.

    Args:
        feature: Name of the feature requiring Babel (for error message)

    Raises:
        BabelImportError: If Babel is not installed
    """
    if not _check_babel_available():
        raise BabelImportError(feature)


def get_locale_class() -> type[Locale]:
    """Get the Babel Locale class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_locale_class")
    from babel import Locale  # noqa: PLC0415

    return Locale


def get_unknown_locale_error() -> type[UnknownLocaleErrorType]:
    """Get the Babel UnknownLocaleError exception class.

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_unknown_locale_error")
    from babel.core import UnknownLocaleError  # noqa: PLC0415

    return UnknownLocaleError


def get_babel_numbers() -> BabelNumbersProtocol:
    """Get the Babel numbers module.

    Returns:
        The babel.numbers module (typed via BabelNumbersProtocol)

    Raises:
        BabelImportError: If Babel is not installed
    """
    require_babel("get_babel_numbers")
    from babel import numbers  # noqa: PLC0415

    return numbers
