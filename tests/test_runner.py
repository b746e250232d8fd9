"""Tests for parse(), parse_partial() and parse_or_raise()."""

from __future__ import annotations

import logging

import pytest

from combilex import (
    ParseSyntaxError,
    literal,
    parse,
    parse_or_raise,
    parse_partial,
    sep_by,
)
from combilex.diagnostics import DiagnosticCode
from combilex.lexical import natural_number, newline


class TestParse:
    """Test the whole-document parse() contract."""

    def test_trailing_whitespace_accepted(self) -> None:
        """Whitespace-only remainder is trimmed."""
        assert parse(literal("hello"), "hello   ") == "hello"
        assert parse(literal("hello"), "hello\n\t ") == "hello"

    def test_trailing_text_rejected(self) -> None:
        """Non-whitespace remainder is a failure."""
        assert parse(literal("hello"), "hello world") is None

    def test_parser_failure(self) -> None:
        """A failed parser gives None."""
        assert parse(literal("hello"), "goodbye") is None

    def test_parse_partial_keeps_remainder(self) -> None:
        """parse_partial() returns the raw result."""
        result = parse_partial(literal("hello"), "hello world")
        assert result is not None
        assert result.remaining == " world"


class TestParseOrRaise:
    """Test parse_or_raise() error reporting."""

    def test_success_returns_value(self) -> None:
        """A complete parse returns its value."""
        assert parse_or_raise(natural_number, "42 ") == 42

    def test_outright_failure(self) -> None:
        """A failed parser is reported at the start of input."""
        with pytest.raises(ParseSyntaxError) as exc_info:
            parse_or_raise(literal("hello"), "goodbye")
        error = exc_info.value
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.PARSE_FAILED
        assert error.cursor.pos == 0
        assert str(error).startswith("1:1: Input does not match the grammar")

    def test_trailing_input(self) -> None:
        """Leftover input is reported where the parser stopped."""
        with pytest.raises(ParseSyntaxError) as exc_info:
            parse_or_raise(literal("hello"), "hello world")
        error = exc_info.value
        assert error.diagnostic is not None
        assert error.diagnostic.code == DiagnosticCode.TRAILING_INPUT
        assert error.cursor.pos == 5
        assert str(error).startswith("1:6: Unexpected trailing input ' world'")

    def test_context_lines(self) -> None:
        """The excerpt shows numbered source lines around the error."""
        parser = sep_by(natural_number, newline)
        with pytest.raises(ParseSyntaxError) as exc_info:
            parse_or_raise(parser, "1\n2\nx")
        text = str(exc_info.value)
        assert text.startswith("2:2:")
        assert "   1 | 1" in text
        assert "   3 | x" in text

        with pytest.raises(ParseSyntaxError) as exc_info:
            parse_or_raise(parser, "1\n2\nx", context_lines=0)
        assert "   1 | 1" not in str(exc_info.value)

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The formatted error is logged at DEBUG before raising."""
        with (
            caplog.at_level(logging.DEBUG, logger="combilex.runner"),
            pytest.raises(ParseSyntaxError),
        ):
            parse_or_raise(literal("a"), "b")
        assert "rejected input" in caplog.text
