"""Tests for sequence, choice, map_, pipe, bind, lazy and attempt."""

from __future__ import annotations

from combilex import (
    Parser,
    attempt,
    between,
    bind,
    char,
    choice,
    lazy,
    literal,
    map_,
    pattern,
    pipe,
    sequence,
    take,
)
from combilex.lexical import digit


class TestSequence:
    """Test sequence()."""

    def test_collects_values_in_order(self) -> None:
        """sequence() returns a tuple of every value."""
        result = sequence(literal("a"), literal("b"))("abc")
        assert result is not None
        assert (result.value, result.remaining) == (("a", "b"), "c")

    def test_short_circuits_on_failure(self) -> None:
        """sequence() fails as soon as one parser fails."""
        assert sequence(literal("a"), literal("b"))("ac") is None

    def test_empty_sequence_succeeds(self) -> None:
        """An empty sequence succeeds with () and consumes nothing."""
        result = sequence()("abc")
        assert result is not None
        assert (result.value, result.remaining) == ((), "abc")


class TestChoice:
    """Test choice()."""

    def test_first_success_wins(self) -> None:
        """choice() is ordered: the first listed success is returned."""
        result = choice(literal("a"), literal("ab"))("ab")
        assert result is not None
        assert (result.value, result.remaining) == ("a", "b")

    def test_alternatives_start_from_same_input(self) -> None:
        """A failed alternative does not consume input for the next one."""
        parser = choice(sequence(literal("a"), literal("x")), literal("ab"))
        assert parser("ab").value == "ab"

    def test_all_fail(self) -> None:
        """choice() fails when every alternative fails."""
        assert choice(literal("a"), literal("b"))("c") is None
        assert choice()("a") is None


class TestMapAndPipe:
    """Test map_() and pipe()."""

    def test_transforms_apply_left_to_right(self) -> None:
        """map_() applies each transform in order."""
        parser = map_(pattern(r"\d+"), int, lambda n: n * 2)
        assert parser("21").value == 42

    def test_remaining_is_untouched(self) -> None:
        """map_() does not change the remainder."""
        result = map_(literal("ab"), str.upper)("abc")
        assert result is not None
        assert (result.value, result.remaining) == ("AB", "c")

    def test_failure_propagates(self) -> None:
        """map_() fails when the underlying parser fails."""
        assert map_(literal("a"), str.upper)("b") is None

    def test_no_transforms_is_identity(self) -> None:
        """map_() with no transforms behaves like the parser."""
        parser = literal("ab")
        assert map_(parser)("abc") == parser("abc")

    def test_pipe_composes_left_to_right(self) -> None:
        """pipe(f, g)(x) is g(f(x))."""
        assert pipe(str.strip, str.upper)(" a ") == "A"
        assert pipe()(5) == 5


class TestBind:
    """Test bind()."""

    def test_value_selects_next_parser(self) -> None:
        """bind() builds the next parser from the parsed value."""
        length_prefixed = bind(digit, take)
        result = length_prefixed("3abcde")
        assert result is not None
        assert (result.value, result.remaining) == ("abc", "de")

    def test_first_failure_propagates(self) -> None:
        """bind() never calls the continuation after a failure."""
        called: list[int] = []

        def continuation(value: int) -> Parser[str]:
            called.append(value)
            return take(value)

        assert bind(digit, continuation)("x") is None
        assert called == []

    def test_second_failure_propagates(self) -> None:
        """bind() fails when the built parser fails."""
        assert bind(digit, take)("5ab") is None


class TestLazy:
    """Test lazy() and attempt()."""

    def test_thunk_deferred_and_memoized(self) -> None:
        """lazy() runs its thunk on first use only."""
        calls: list[int] = []

        def build() -> Parser[str]:
            calls.append(1)
            return literal("a")

        parser = lazy(build)
        assert calls == []
        assert parser("a").value == "a"
        assert parser("a").value == "a"
        assert calls == [1]

    def test_self_reference(self) -> None:
        """A lazy parser may refer to itself."""
        paren: Parser[str] = lazy(
            lambda: choice(between(char("("), paren, char(")")), char("x"))
        )
        assert paren("(((x)))").value == "x"
        assert paren("((x)") is None

    def test_attempt_is_identity(self) -> None:
        """attempt() returns the parser itself."""
        parser = literal("a")
        assert attempt(parser) is parser
