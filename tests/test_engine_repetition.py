"""Tests for the repetition engine."""

from __future__ import annotations

import logging

import pytest

from combilex import (
    ParserConstructionError,
    at_least,
    at_most,
    char,
    count,
    exactly,
    literal,
    many,
    many1,
    optional,
    optional_maybe,
    range_,
    succeed,
)
from combilex.diagnostics import DiagnosticCode


class TestMany:
    """Test many() and many1()."""

    def test_collects_until_failure(self) -> None:
        """many() collects every success and stops at the first failure."""
        value, remaining = many(char("a"))("aaab")
        assert value == ["a", "a", "a"]
        assert remaining == "b"

    def test_zero_matches_succeeds(self) -> None:
        """many() never fails."""
        value, remaining = many(char("a"))("bbb")
        assert value == []
        assert remaining == "bbb"

    def test_zero_length_success_terminates(self) -> None:
        """many() of an always-succeeding non-consumer returns ([], input)."""
        value, remaining = many(succeed(1))("xyz")
        assert value == []
        assert remaining == "xyz"

    def test_stops_at_first_zero_length_success(self) -> None:
        """A parser that stops consuming halts the loop."""
        value, remaining = many(optional(char("a"), ""))("aab")
        assert value == ["a", "a"]
        assert remaining == "b"

    def test_zero_progress_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        """The progress check emits a DEBUG record."""
        with caplog.at_level(logging.DEBUG, logger="combilex.engine.repetition"):
            many(literal(""))("abc")
        assert "zero-length match" in caplog.text

    def test_many1_requires_one(self) -> None:
        """many1() fails when nothing matches."""
        assert many1(char("a"))("b") is None
        value, remaining = many1(char("a"))("aab")
        assert value == ["a", "a"]
        assert remaining == "b"


class TestBoundedCounts:
    """Test count(), at_most(), at_least() and range_()."""

    def test_count_stops_after_n(self) -> None:
        """count() consumes exactly n items."""
        value, remaining = count(char("a"), 2)("aaa")
        assert value == ["a", "a"]
        assert remaining == "a"

    def test_count_fails_when_short(self) -> None:
        """count() fails if fewer than n items are available."""
        assert count(char("a"), 2)("ab") is None

    def test_count_zero(self) -> None:
        """count(p, 0) succeeds without consuming."""
        value, remaining = count(char("a"), 0)("aaa")
        assert value == []
        assert remaining == "aaa"

    def test_exactly_is_count(self) -> None:
        """exactly is an alias of count."""
        assert exactly is count

    def test_at_most_is_greedy_and_bounded(self) -> None:
        """at_most() takes up to n items and never fails."""
        value, remaining = at_most(char("a"), 2)("aaaa")
        assert value == ["a", "a"]
        assert remaining == "aa"
        value, remaining = at_most(char("a"), 2)("b")
        assert value == []
        assert remaining == "b"

    def test_at_least(self) -> None:
        """at_least() needs n items and then takes the rest."""
        value, remaining = at_least(char("a"), 2)("aaaab")
        assert value == ["a", "a", "a", "a"]
        assert remaining == "b"
        assert at_least(char("a"), 2)("ab") is None

    def test_range(self) -> None:
        """range_() takes min mandatory plus up to max - min more."""
        value, remaining = range_(char("a"), 1, 3)("aaaaa")
        assert value == ["a", "a", "a"]
        assert remaining == "aa"
        assert range_(char("a"), 1, 3)("b") is None

    @pytest.mark.parametrize(
        "build",
        [
            lambda: count(char("a"), -1),
            lambda: at_most(char("a"), -1),
            lambda: at_least(char("a"), -1),
            lambda: range_(char("a"), -1, 2),
        ],
    )
    def test_negative_counts_raise(self, build: object) -> None:
        """Negative counts are rejected at construction."""
        with pytest.raises(ParserConstructionError) as exc_info:
            build()  # type: ignore[operator]
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.COUNT_NEGATIVE

    def test_inverted_range_raises(self) -> None:
        """range_() rejects min > max."""
        with pytest.raises(ParserConstructionError) as exc_info:
            range_(char("a"), 3, 1)
        assert exc_info.value.diagnostic is not None
        assert exc_info.value.diagnostic.code == DiagnosticCode.RANGE_INVERTED


class TestOptional:
    """Test optional() and optional_maybe()."""

    def test_default_on_failure(self) -> None:
        """optional() absorbs failure and keeps the original input."""
        value, remaining = optional(char("a"), "z")("b")
        assert value == "z"
        assert remaining == "b"

    def test_value_on_success(self) -> None:
        """optional() passes a success through."""
        value, remaining = optional(char("a"), "z")("ab")
        assert value == "a"
        assert remaining == "b"

    def test_optional_maybe(self) -> None:
        """optional_maybe() defaults to None."""
        result = optional_maybe(char("a"))("b")
        assert result is not None
        assert result.value is None
        assert result.remaining == "b"
