"""CombiLex - composable parser combinators for Python.

Parsers are plain values built from small primitives and combinators.
Running a parser on text returns a ParseResult (value plus remaining input)
or None; failure is an ordinary return value, never an exception.

Public API:
    Parser, Cursor, ParseResult - Core types
    success, failure, is_success - Result protocol
    grammar, Grammar - Named, mutually recursive rules
    parse, parse_partial, parse_or_raise - Top-level entry points
    Every combinator from combilex.engine (sequence, choice, many, sep_by, ...)

Exceptions:
    CombilexError - Base exception class
    ParserConstructionError - Invalid arguments while building a parser
    GrammarRuleError - Unknown grammar rule
    ParseSyntaxError - Raised by parse_or_raise()

Submodules:
    combilex.lexical - Digits, identifiers, lexemes, quoted text, locale decimals
    combilex.diagnostics - Diagnostic codes and message templates

Example:
    >>> from combilex import char, left_assoc, map_, parse
    >>> from combilex.lexical import natural_number
    >>> minus = map_(char("-"), lambda _: lambda a, b: a - b)
    >>> parse(left_assoc(natural_number, minus), "10-3-2")
    5
"""

from .core import (
    Cursor,
    ParseResult,
    Parser,
    create,
    fail,
    failure,
    is_success,
    succeed,
    success,
)
from .diagnostics import (
    BabelImportError,
    CombilexError,
    GrammarRuleError,
    ParserConstructionError,
    ParseSyntaxError,
)
from .engine import (
    after,
    any_char,
    at_least,
    at_most,
    attempt,
    before,
    between,
    bind,
    chainl,
    chainl1,
    chainr,
    chainr1,
    char,
    choice,
    commit,
    consume,
    count,
    delimited,
    delimited_by,
    end_by,
    end_by1,
    eof,
    exactly,
    first,
    fold,
    fold_right,
    followed_by,
    guard,
    interleaved,
    last,
    lazy,
    left,
    left_assoc,
    literal,
    location,
    lookahead,
    many,
    many1,
    map_,
    middle,
    none_of,
    not_,
    not_followed_by,
    nth,
    one_of,
    optional,
    optional_maybe,
    pattern,
    peek,
    pipe,
    position,
    postfix,
    prefix,
    range_,
    recover,
    regex,
    rest,
    right,
    right_assoc,
    satisfy,
    sep_by,
    sep_by1,
    sep_end_by,
    sep_end_by1,
    sequence,
    skip_many,
    skip_many1,
    surrounded,
    take,
    take_until,
    take_while,
    transform,
    unless,
    until,
    validate,
)
from .grammar import Grammar, grammar
from .runner import parse, parse_or_raise, parse_partial

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError  # noqa: E402
from importlib.metadata import version as _get_version  # noqa: E402

try:
    __version__ = _get_version("combilex")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "BabelImportError",
    "CombilexError",
    "Cursor",
    "Grammar",
    "GrammarRuleError",
    "ParseResult",
    "ParseSyntaxError",
    "Parser",
    "ParserConstructionError",
    "__version__",
    "after",
    "any_char",
    "at_least",
    "at_most",
    "attempt",
    "before",
    "between",
    "bind",
    "chainl",
    "chainl1",
    "chainr",
    "chainr1",
    "char",
    "choice",
    "commit",
    "consume",
    "count",
    "create",
    "delimited",
    "delimited_by",
    "end_by",
    "end_by1",
    "eof",
    "exactly",
    "fail",
    "failure",
    "first",
    "fold",
    "fold_right",
    "followed_by",
    "grammar",
    "guard",
    "interleaved",
    "is_success",
    "last",
    "lazy",
    "left",
    "left_assoc",
    "literal",
    "location",
    "lookahead",
    "many",
    "many1",
    "map_",
    "middle",
    "none_of",
    "not_",
    "not_followed_by",
    "nth",
    "one_of",
    "optional",
    "optional_maybe",
    "parse",
    "parse_or_raise",
    "parse_partial",
    "pattern",
    "peek",
    "pipe",
    "position",
    "postfix",
    "prefix",
    "range_",
    "recover",
    "regex",
    "rest",
    "right",
    "right_assoc",
    "satisfy",
    "sep_by",
    "sep_by1",
    "sep_end_by",
    "sep_end_by1",
    "sequence",
    "skip_many",
    "skip_many1",
    "succeed",
    "success",
    "surrounded",
    "take",
    "take_until",
    "take_while",
    "transform",
    "unless",
    "until",
    "validate",
]
