"""Tests for diagnostic codes, templates and the exception hierarchy."""

from __future__ import annotations

import pytest

from combilex import Cursor, char
from combilex.diagnostics import (
    BabelImportError,
    CombilexError,
    Diagnostic,
    DiagnosticCode,
    ErrorTemplate,
    GrammarRuleError,
    ParserConstructionError,
    ParseSyntaxError,
)


class TestDiagnosticCode:
    """Test DiagnosticCode numbering."""

    def test_codes_are_unique(self) -> None:
        """No two codes share a value."""
        values = [code.value for code in DiagnosticCode]
        assert len(values) == len(set(values))

    @pytest.mark.parametrize(
        ("code", "low", "high"),
        [
            (DiagnosticCode.CHAR_NOT_SINGLE, 1000, 1999),
            (DiagnosticCode.RULE_NOT_FOUND, 2000, 2999),
            (DiagnosticCode.TRAILING_INPUT, 3000, 3999),
            (DiagnosticCode.LOCALE_UNKNOWN, 4000, 4999),
        ],
    )
    def test_code_ranges(self, code: DiagnosticCode, low: int, high: int) -> None:
        """Codes sit in their category range."""
        assert low <= code.value <= high


class TestDiagnostic:
    """Test Diagnostic formatting."""

    def test_str_is_message(self) -> None:
        """str() gives the bare message."""
        diagnostic = ErrorTemplate.char_not_single("ab")
        assert str(diagnostic) == "char() expects exactly one character, got 'ab'"

    def test_format_error_with_hint(self) -> None:
        """format_error() prefixes the code name and appends the hint."""
        formatted = ErrorTemplate.char_not_single("ab").format_error()
        assert formatted == (
            "error[CHAR_NOT_SINGLE]: char() expects exactly one character, got 'ab'\n"
            "  = help: Use literal() to match multi-character strings"
        )

    def test_format_error_with_position(self) -> None:
        """Syntax diagnostics show their position."""
        formatted = ErrorTemplate.parse_failed(0).format_error()
        assert formatted == (
            "error[PARSE_FAILED]: Input does not match the grammar\n  --> position 0"
        )

    def test_frozen(self) -> None:
        """Diagnostics are immutable."""
        diagnostic = Diagnostic(code=DiagnosticCode.PARSE_FAILED, message="x")
        with pytest.raises(AttributeError):
            diagnostic.message = "y"  # type: ignore[misc]

    def test_rule_not_found_lists_rules(self) -> None:
        """The hint names the rules that do exist."""
        assert ErrorTemplate.rule_not_found("x", ("a", "b")).hint == "Defined rules: a, b"
        assert ErrorTemplate.rule_not_found("x", ()).hint == "Defined rules: (none)"


class TestExceptions:
    """Test the exception hierarchy."""

    def test_plain_message(self) -> None:
        """A plain string leaves diagnostic unset."""
        error = CombilexError("boom")
        assert str(error) == "boom"
        assert error.diagnostic is None

    def test_construction_error_is_value_error(self) -> None:
        """Construction errors can be caught as ValueError."""
        with pytest.raises(ValueError, match="exactly one character"):
            char("ab")

    def test_construction_error_carries_diagnostic(self) -> None:
        """The diagnostic travels with the exception."""
        with pytest.raises(ParserConstructionError) as exc_info:
            char("")
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.CHAR_NOT_SINGLE

    def test_grammar_rule_error_str(self) -> None:
        """GrammarRuleError prints its message without KeyError quoting."""
        error = GrammarRuleError(ErrorTemplate.rule_not_found("expr", ()))
        assert str(error) == "Grammar rule 'expr' is not defined"
        assert isinstance(error, KeyError)

    def test_parse_syntax_error_str_is_context(self) -> None:
        """ParseSyntaxError prints the formatted excerpt."""
        cursor = Cursor("abc", 1)
        error = ParseSyntaxError(ErrorTemplate.parse_failed(1), cursor, "1:2: context")
        assert str(error) == "1:2: context"
        assert error.cursor is cursor
        assert isinstance(error, CombilexError)

    def test_babel_import_error(self) -> None:
        """BabelImportError is an ImportError, not a CombilexError."""
        error = BabelImportError("locale_decimal")
        assert isinstance(error, ImportError)
        assert not isinstance(error, CombilexError)
