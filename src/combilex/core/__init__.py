"""Core types shared by every layer of CombiLex.

This package provides the foundation that the engine, grammar and lexical
packages depend on:

    core <- engine <- grammar/runner <- lexical

Exports:
    Cursor: Immutable view of the unconsumed input
    ParseResult: Success shape (value + cursor)
    Parser: The uniform parser type
    success / failure / is_success: The result protocol
    create / succeed / fail: Parser constructors

Python 3.13+.
"""

from .cursor import Cursor
from .parser import LazyCell, ParseFn, Parser, create, fail, succeed
from .results import ParseResult, failure, is_success, success

__all__ = [
    "Cursor",
    "LazyCell",
    "ParseFn",
    "ParseResult",
    "Parser",
    "create",
    "fail",
    "failure",
    "is_success",
    "succeed",
    "success",
]
