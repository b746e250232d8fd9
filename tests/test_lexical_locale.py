"""Tests for locale-aware decimal lexing."""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest

from combilex import Cursor, ParserConstructionError
from combilex.core import babel_compat
from combilex.diagnostics import BabelImportError, DiagnosticCode
from combilex.lexical import NumberSymbols, decimal_parser, locale_decimal, number_symbols

GERMAN = NumberSymbols(decimal=",", group=".")


class TestDecimalParser:
    """Test decimal_parser() with explicit symbols (no Babel needed)."""

    def test_english_defaults(self) -> None:
        """Default symbols read "1,234.5"."""
        value, remaining = decimal_parser(NumberSymbols())("1,234.5")
        assert value == Decimal("1234.5")
        assert remaining == ""

    def test_german_symbols_with_sign(self) -> None:
        """Swapped separators and a leading minus."""
        value, remaining = decimal_parser(GERMAN)("-1.234,5 EUR")
        assert value == Decimal("-1234.5")
        assert remaining == " EUR"

    def test_fraction_needs_digits(self) -> None:
        """A decimal symbol without digits is left unconsumed."""
        value, remaining = decimal_parser(NumberSymbols())("7.x")
        assert value == Decimal(7)
        assert remaining == ".x"

    def test_grouping_requires_three_digits(self) -> None:
        """A group separator not followed by three digits ends the integer."""
        value, remaining = decimal_parser(NumberSymbols())("12,34")
        assert value == Decimal(12)
        assert remaining == ",34"

    def test_plain_digits(self) -> None:
        """Ungrouped digits are accepted."""
        assert decimal_parser(NumberSymbols())("1234567").value == Decimal(1234567)

    def test_explicit_plus(self) -> None:
        """A leading plus sign is accepted and dropped."""
        assert decimal_parser(NumberSymbols())("+3.25").value == Decimal("3.25")

    def test_locale_minus_sign(self) -> None:
        """A locale minus sign works alongside ASCII hyphen-minus."""
        symbols = NumberSymbols(decimal=",", group=" ", minus="−")
        parser = decimal_parser(symbols)
        assert parser("−1 000,5").value == Decimal("-1000.5")
        assert parser("-2").value == Decimal(-2)

    def test_no_digits_fails(self) -> None:
        """A sign alone is not a number."""
        assert decimal_parser(NumberSymbols())("-x") is None
        assert decimal_parser(NumberSymbols())("") is None

    def test_offset_cursor(self) -> None:
        """Parsing starts at the cursor, not the start of the source."""
        result = decimal_parser(GERMAN)(Cursor("EUR 1,5", 4))
        assert result is not None
        assert result.value == Decimal("1.5")


class TestNumberSymbols:
    """Test NumberSymbols validation."""

    @pytest.mark.parametrize(
        ("decimal", "group"),
        [("", ","), (".", ""), (".", ".")],
    )
    def test_invalid_symbols(self, decimal: str, group: str) -> None:
        """Empty or identical separators are rejected."""
        with pytest.raises(ParserConstructionError) as exc_info:
            NumberSymbols(decimal=decimal, group=group)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.NUMBER_SYMBOLS_INVALID

    def test_frozen(self) -> None:
        """NumberSymbols is immutable."""
        symbols = NumberSymbols()
        with pytest.raises(AttributeError):
            symbols.decimal = ","  # type: ignore[misc]


class TestLocaleDecimal:
    """Test Babel-backed locale_decimal() and number_symbols()."""

    @pytest.fixture(autouse=True)
    def _babel(self) -> None:
        pytest.importorskip("babel")

    def test_en_us(self) -> None:
        """en_US groups with commas."""
        assert locale_decimal("en_US")("1,234.5").value == Decimal("1234.5")

    @pytest.mark.parametrize("locale_code", ["de_DE", "de-DE"])
    def test_de_de(self, locale_code: str) -> None:
        """de_DE groups with dots; BCP 47 spelling is accepted."""
        value, remaining = locale_decimal(locale_code)("1.234,5 EUR")
        assert value == Decimal("1234.5")
        assert remaining == " EUR"

    def test_number_symbols(self) -> None:
        """CLDR symbols resolve for German."""
        symbols = number_symbols("de_DE")
        assert symbols.decimal == ","
        assert symbols.group == "."

    def test_parser_name(self) -> None:
        """The parser is named after its locale."""
        assert locale_decimal("en_US").name == "locale_decimal('en_US')"

    def test_unknown_locale(self, caplog: pytest.LogCaptureFixture) -> None:
        """Unknown locales fail at construction and log a warning."""
        with (
            caplog.at_level(logging.WARNING, logger="combilex.lexical.locale"),
            pytest.raises(ParserConstructionError) as exc_info,
        ):
            locale_decimal("zz_ZZ")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.LOCALE_UNKNOWN
        assert "zz_ZZ" in caplog.text


class TestWithoutBabel:
    """Test behaviour when Babel is not installed."""

    def test_locale_decimal_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Construction raises BabelImportError naming the feature."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        with pytest.raises(BabelImportError) as exc_info:
            locale_decimal("en_US")
        assert exc_info.value.feature == "number_symbols"

    def test_decimal_parser_needs_no_babel(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Explicit symbols never touch Babel."""
        monkeypatch.setattr(babel_compat, "_check_babel_available", lambda: False)
        assert decimal_parser(GERMAN)("2,5").value == Decimal("2.5")
