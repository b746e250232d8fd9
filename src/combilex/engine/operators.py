"""Operator-precedence combinators.

Binary operators are parsers whose value is a two-argument function; unary
operators are parsers whose value is a one-argument function. Precedence
levels are expressed by nesting: the term of one level is the chain of the
next-tighter level.

    >>> from combilex import char, map_
    >>> from combilex.lexical import natural_number
    >>> sub = map_(char("-"), lambda _: lambda a, b: a - b)
    >>> left_assoc(natural_number, sub)("10-3-2").value    # (10-3)-2
    5
    >>> right_assoc(natural_number, sub)("10-3-2").value   # 10-(3-2)
    9

Stack Use:
    All chains here are parsed iteratively. right_assoc() collects the whole
    term/operator chain first and folds it from the right afterwards, so its
    Python stack depth does not grow with the length of the chain.
"""

from collections.abc import Callable

from combilex.core.cursor import Cursor
from combilex.core.parser import Parser
from combilex.core.results import ParseResult, failure, success

__all__ = [
    "chainl",
    "chainl1",
    "chainr",
    "chainr1",
    "left_assoc",
    "postfix",
    "prefix",
    "right_assoc",
]

type BinaryOp[T] = Callable[[T, T], T]
type UnaryOp[T] = Callable[[T], T]


def _collect_chain[T](
    term: Parser[T], operator: Parser[BinaryOp[T]], cursor: Cursor
) -> tuple[list[T], list[BinaryOp[T]], Cursor] | None:
    """Parse term (op term)* and return the terms, the operators and the end cursor.

    A trailing operator without a term after it is not consumed.
    """
    head = term.apply(cursor)
    if head is None:
        return None
    terms = [head.value]
    ops: list[BinaryOp[T]] = []
    cursor = head.cursor
    while True:
        op = operator.apply(cursor)
        if op is None:
            break
        following = term.apply(op.cursor)
        if following is None or following.cursor.pos == cursor.pos:
            break
        ops.append(op.value)
        terms.append(following.value)
        cursor = following.cursor
    return terms, ops, cursor


def left_assoc[T](term: Parser[T], operator: Parser[BinaryOp[T]]) -> Parser[T]:
    """Fold term (op term)* from the left: a op b op c == (a op b) op c.

    Fails only if the first term fails.
    """

    def parse_left_assoc(cursor: Cursor) -> ParseResult[T] | None:
        chain = _collect_chain(term, operator, cursor)
        if chain is None:
            return failure()
        terms, ops, end = chain
        acc = terms[0]
        for op, value in zip(ops, terms[1:], strict=True):
            acc = op(acc, value)
        return success(acc, end)

    return Parser(parse_left_assoc, "left_assoc")


def right_assoc[T](term: Parser[T], operator: Parser[BinaryOp[T]]) -> Parser[T]:
    """Fold term (op term)* from the right: a op b op c == a op (b op c).

    Fails only if the first term fails.
    """

    def parse_right_assoc(cursor: Cursor) -> ParseResult[T] | None:
        chain = _collect_chain(term, operator, cursor)
        if chain is None:
            return failure()
        terms, ops, end = chain
        acc = terms[-1]
        for index in range(len(ops) - 1, -1, -1):
            acc = ops[index](terms[index], acc)
        return success(acc, end)

    return Parser(parse_right_assoc, "right_assoc")


def _with_default[T](chain: Parser[T], default: T, name: str) -> Parser[T]:
    def parse_with_default(cursor: Cursor) -> ParseResult[T]:
        result = chain.apply(cursor)
        if result is None:
            return success(default, cursor)
        return result

    return Parser(parse_with_default, name)


def chainl1[T](term: Parser[T], operator: Parser[BinaryOp[T]]) -> Parser[T]:
    """Same as left_assoc()."""
    return left_assoc(term, operator).named("chainl1")


def chainl[T](term: Parser[T], operator: Parser[BinaryOp[T]], default: T) -> Parser[T]:
    """chainl1(), succeeding with default (consuming nothing) when no term parses."""
    return _with_default(chainl1(term, operator), default, "chainl")


def chainr1[T](term: Parser[T], operator: Parser[BinaryOp[T]]) -> Parser[T]:
    """Same as right_assoc()."""
    return right_assoc(term, operator).named("chainr1")


def chainr[T](term: Parser[T], operator: Parser[BinaryOp[T]], default: T) -> Parser[T]:
    """chainr1(), succeeding with default (consuming nothing) when no term parses."""
    return _with_default(chainr1(term, operator), default, "chainr")


def prefix[T](operator: Parser[UnaryOp[T]], atom: Parser[T]) -> Parser[T]:
    """Zero or more prefix operators, then atom.

    The operator nearest the atom applies first, so ``--5`` is ``-(-(5))``.
    """

    def parse_prefix(cursor: Cursor) -> ParseResult[T] | None:
        ops: list[UnaryOp[T]] = []
        while True:
            op = operator.apply(cursor)
            if op is None or op.cursor.pos == cursor.pos:
                break
            ops.append(op.value)
            cursor = op.cursor
        result = atom.apply(cursor)
        if result is None:
            return failure()
        value = result.value
        for fn in reversed(ops):
            value = fn(value)
        return success(value, result.cursor)

    return Parser(parse_prefix, "prefix")


def postfix[T](atom: Parser[T], operator: Parser[UnaryOp[T]]) -> Parser[T]:
    """atom, then zero or more postfix operators applied left to right.

    ``3²!`` is ``(3²)!``.
    """

    def parse_postfix(cursor: Cursor) -> ParseResult[T] | None:
        result = atom.apply(cursor)
        if result is None:
            return failure()
        value, cursor = result.value, result.cursor
        while True:
            op = operator.apply(cursor)
            if op is None or op.cursor.pos == cursor.pos:
                break
            value = op.value(value)
            cursor = op.cursor
        return success(value, cursor)

    return Parser(parse_postfix, "postfix")
