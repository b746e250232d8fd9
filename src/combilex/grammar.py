"""Grammars: named, mutually recursive rules realized lazily.

A grammar is built in two phases:

1. One RuleHandle is allocated per rule name. A handle is a real Parser that
   other rules can capture and compose immediately, before anything it
   refers to has been built.
2. Each handle is bound to a write-once LazyCell wrapping the rule's thunk.
   The thunk runs on the handle's first invocation (or on realize_all()),
   and its parser is cached for the lifetime of the grammar instance.

Because thunks only capture handles, rule A may mention rule B before B
exists, and a rule may mention itself; construction never recurses.

Example:
    >>> from combilex import char, choice, between
    >>> g = grammar({
    ...     "atom": lambda: char("x"),
    ...     "paren": lambda g: choice(between(char("("), g.paren, char(")")), g.atom),
    ... })
    >>> g["paren"]("(((x)))").value
    'x'

Thread Safety:
    Rule caches are the only mutable state and are write-once. Concurrent
    first use of one rule converges on a single cached parser.
"""

import inspect
import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from combilex.core.cursor import Cursor
from combilex.core.parser import LazyCell, Parser
from combilex.core.results import ParseResult
from combilex.diagnostics import ErrorTemplate, GrammarRuleError, ParserConstructionError

__all__ = ["Grammar", "RuleHandle", "RuleThunk", "grammar"]

logger = logging.getLogger(__name__)

type RuleThunk = Callable[[], Parser[Any]] | Callable[["Grammar"], Parser[Any]]


class RuleHandle[T](Parser[T]):
    """Placeholder parser for one grammar rule.

    Delegates to the rule's realized parser. Invoking an unbound handle is a
    programming error in grammar assembly and raises RuntimeError.
    """

    __slots__ = ("_cell",)

    def __init__(self, name: str) -> None:
        super().__init__(self._parse_rule, name)
        self._cell: LazyCell[T] | None = None

    def bind(self, cell: LazyCell[T]) -> None:
        """Attach the cell holding the rule's parser (phase 2)."""
        self._cell = cell

    @property
    def is_realized(self) -> bool:
        return self._cell is not None and self._cell.is_realized

    def realize(self) -> Parser[T]:
        """Build (once) and return the rule's parser."""
        if self._cell is None:
            msg = f"Grammar rule '{self.name}' was invoked before it was bound"
            raise RuntimeError(msg)
        return self._cell.get()

    def _parse_rule(self, cursor: Cursor) -> ParseResult[T] | None:
        return self.realize().apply(cursor)

    def __repr__(self) -> str:
        return f"<RuleHandle {self.name}>"


def _required_arity(name: str, thunk: object) -> int:
    """Number of required positional parameters of a rule thunk (0 or 1).

    Raises:
        ParserConstructionError: If thunk is not callable or needs 2+ arguments
    """
    if isinstance(thunk, Parser) or not callable(thunk):
        raise ParserConstructionError(
            ErrorTemplate.rule_not_callable(name, type(thunk).__name__)
        )
    try:
        signature = inspect.signature(thunk)
    except (TypeError, ValueError):
        # Some builtins expose no signature; treat them as zero-argument
        return 0
    required = sum(
        1
        for param in signature.parameters.values()
        if param.kind in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD)
        and param.default is param.empty
    )
    if required > 1:
        raise ParserConstructionError(ErrorTemplate.rule_bad_arity(name, required))
    return required


class Grammar(Mapping[str, Parser[Any]]):
    """Immutable mapping from rule name to ready-to-call parser.

    Rules are reachable by item (``g["expr"]``) and by attribute
    (``g.expr``). A thunk may take no arguments, or one argument which
    receives this grammar so it can reference sibling rules.

    Args:
        definitions: Mapping of rule name to thunk

    Raises:
        ParserConstructionError: If a definition is not a 0- or 1-argument callable
    """

    __slots__ = ("_rules",)

    def __init__(self, definitions: Mapping[str, RuleThunk]) -> None:
        arities = {name: _required_arity(name, thunk) for name, thunk in definitions.items()}

        # Phase 1: every name gets a handle before any rule is bound
        self._rules: dict[str, RuleHandle[Any]] = {
            name: RuleHandle(name) for name in definitions
        }

        # Phase 2: bind handles to write-once cells
        for name, thunk in definitions.items():
            self._rules[name].bind(LazyCell(self._realizer(name, thunk, arities[name])))

    def _realizer(
        self, name: str, thunk: Callable[..., Parser[Any]], arity: int
    ) -> Callable[[], Parser[Any]]:
        def realize() -> Parser[Any]:
            logger.debug("Realizing grammar rule %r", name)
            return thunk(self) if arity else thunk()

        return realize

    def __getitem__(self, name: str) -> Parser[Any]:
        try:
            return self._rules[name]
        except KeyError:
            raise GrammarRuleError(
                ErrorTemplate.rule_not_found(name, tuple(self._rules))
            ) from None

    def __getattr__(self, name: str) -> Parser[Any]:
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self._rules[name]
        except KeyError:
            msg = f"Grammar has no rule '{name}'"
            raise AttributeError(msg) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)

    def is_realized(self, name: str) -> bool:
        """Whether the rule's thunk has already run.

        Raises:
            GrammarRuleError: If name is not a rule of this grammar
        """
        if name not in self._rules:
            raise GrammarRuleError(ErrorTemplate.rule_not_found(name, tuple(self._rules)))
        return self._rules[name].is_realized

    def realize_all(self) -> "Grammar":
        """Eagerly build every rule; returns self for chaining."""
        for handle in self._rules.values():
            handle.realize()
        return self

    def __repr__(self) -> str:
        return f"Grammar({', '.join(self._rules)})"


def grammar(definitions: Mapping[str, RuleThunk]) -> Grammar:
    """Build a Grammar from a mapping of rule name to thunk."""
    return Grammar(definitions)
