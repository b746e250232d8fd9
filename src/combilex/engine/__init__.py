"""The combinator engine.

Primitives terminate recursion; everything else composes parsers into
larger parsers. Every function here is pure: building a parser runs no
parsing, and running a parser mutates nothing.

Python 3.13+. Zero external dependencies.
"""

from .combinators import attempt, bind, choice, lazy, map_, pipe, sequence
from .control import commit, guard, not_, recover, transform, unless, validate
from .functional import first, fold, fold_right, last, nth
from .lookahead import followed_by, lookahead, not_followed_by, peek
from .operators import (
    chainl,
    chainl1,
    chainr,
    chainr1,
    left_assoc,
    postfix,
    prefix,
    right_assoc,
)
from .primitives import (
    any_char,
    char,
    eof,
    literal,
    location,
    none_of,
    one_of,
    pattern,
    position,
    regex,
    rest,
    satisfy,
    take,
    take_until,
    take_while,
)
from .repetition import (
    at_least,
    at_most,
    count,
    exactly,
    many,
    many1,
    optional,
    optional_maybe,
    range_,
)
from .separators import (
    delimited,
    delimited_by,
    end_by,
    end_by1,
    interleaved,
    sep_by,
    sep_by1,
    sep_end_by,
    sep_end_by1,
)
from .sequencing import after, before, between, left, middle, right, surrounded
from .terminals import consume, skip_many, skip_many1, until

__all__ = [
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
    "delimited",
    "delimited_by",
    "end_by",
    "end_by1",
    "eof",
    "exactly",
    "first",
    "fold",
    "fold_right",
    "followed_by",
    "guard",
    "interleaved",
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
    "surrounded",
    "take",
    "take_until",
    "take_while",
    "transform",
    "unless",
    "until",
    "validate",
]
