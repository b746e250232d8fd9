"""Locale-aware decimal lexing backed by Babel's CLDR data.

Babel Dependency:
    locale_decimal() and number_symbols() need the optional ``babel`` extra.
    The import is deferred to call time so that engine-only installations
    never load Babel; a missing Babel raises BabelImportError when the
    parser is constructed, not when it runs.

    decimal_parser() takes explicit NumberSymbols and works without Babel.

Python 3.13+.
"""

import logging
import re
from dataclasses import dataclass
from decimal import Decimal

from combilex.core.babel_compat import (
    get_babel_numbers,
    get_locale_class,
    get_unknown_locale_error,
    require_babel,
)
from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult, failure, success
from combilex.diagnostics import ErrorTemplate, ParserConstructionError

__all__ = ["NumberSymbols", "decimal_parser", "locale_decimal", "number_symbols"]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class NumberSymbols:
    """Symbols used to write a decimal number in one locale.

    Attributes:
        decimal: Separator between integer and fraction ("." in en_US)
        group: Digit grouping separator ("," in en_US)
        plus: Locale plus sign
        minus: Locale minus sign (ASCII "-" is always accepted as well)

    Raises:
        ParserConstructionError: If decimal or group is empty, or they are equal
    """

    decimal: str = "."
    group: str = ","
    plus: str = "+"
    minus: str = "-"

    def __post_init__(self) -> None:
        if not self.decimal or not self.group:
            raise ParserConstructionError(
                ErrorTemplate.number_symbols_invalid("decimal and group must be non-empty")
            )
        if self.decimal == self.group:
            raise ParserConstructionError(
                ErrorTemplate.number_symbols_invalid(
                    f"decimal and group are both {self.decimal!r}"
                )
            )


def _normalize_locale(locale_code: str) -> str:
    # Accept BCP 47 spelling ("de-DE") as well as POSIX ("de_DE")
    return locale_code.replace("-", "_")


def number_symbols(locale_code: str) -> NumberSymbols:
    """Resolve CLDR number symbols for a locale.

    Raises:
        BabelImportError: If Babel is not installed
        ParserConstructionError: If Babel does not know the locale
    """
    require_babel("number_symbols")
    locale_class = get_locale_class()
    unknown_locale_error = get_unknown_locale_error()

    try:
        locale = locale_class.parse(_normalize_locale(locale_code))
    except (unknown_locale_error, ValueError) as e:
        logger.warning("Unknown locale %r: %s", locale_code, e)
        raise ParserConstructionError(ErrorTemplate.locale_unknown(locale_code)) from e

    numbers = get_babel_numbers()
    return NumberSymbols(
        decimal=numbers.get_decimal_symbol(locale),
        group=numbers.get_group_symbol(locale),
        plus=numbers.get_plus_sign_symbol(locale),
        minus=numbers.get_minus_sign_symbol(locale),
    )


def _compile_decimal(symbols: NumberSymbols) -> re.Pattern[str]:
    minus_signs = sorted({symbols.minus, "-"}, key=len, reverse=True)
    plus_signs = sorted({symbols.plus, "+"}, key=len, reverse=True)
    sign = "|".join(
        [f"(?P<minus>{'|'.join(map(re.escape, minus_signs))})"]
        + ["|".join(map(re.escape, plus_signs))]
    )
    group = re.escape(symbols.group)
    decimal = re.escape(symbols.decimal)
    return re.compile(
        rf"(?:{sign})?"
        rf"(?P<integer>[0-9]{{1,3}}(?:{group}[0-9]{{3}})+|[0-9]+)"
        rf"(?:{decimal}(?P<fraction>[0-9]+))?"
    )


def decimal_parser(symbols: NumberSymbols) -> Parser[Decimal]:
    """Parse a decimal written with the given symbols into a Decimal.

    Grouping is accepted in runs of three digits; a fraction needs at least
    one digit after the decimal symbol.

    Example:
        >>> german = NumberSymbols(decimal=",", group=".")
        >>> decimal_parser(german)("-1.234,5 EUR").value
        Decimal('-1234.5')
    """
    compiled = _compile_decimal(symbols)

    def parse_decimal(cursor: Cursor) -> ParseResult[Decimal] | None:
        match = compiled.match(cursor.source, cursor.pos)
        if match is None:
            return failure()
        digits = match.group("integer").replace(symbols.group, "")
        fraction = match.group("fraction")
        text = f"{digits}.{fraction}" if fraction else digits
        value = Decimal(text)
        if match.group("minus") is not None:
            value = -value
        return success(value, Cursor(cursor.source, match.end()))

    return Parser(parse_decimal, "decimal")


def locale_decimal(locale_code: str) -> Parser[Decimal]:
    """Parse a decimal formatted for locale_code, e.g. "1,234.5" in en_US.

    Symbols are resolved once, when the parser is built.

    Raises:
        BabelImportError: If Babel is not installed
        ParserConstructionError: If Babel does not know the locale

    Example:
        >>> locale_decimal("de_DE")("1.234,5").value
        Decimal('1234.5')
    """
    return decimal_parser(number_symbols(locale_code)).named(
        f"locale_decimal({locale_code!r})"
    )
