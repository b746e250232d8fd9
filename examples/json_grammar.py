"""JSON parser built with combilex grammars.

Demonstrates:
1. Mutually recursive rules (value -> array -> value)
2. Lexemes: every token skips the whitespace after it
3. sep_by for comma-separated members
4. parse_or_raise for line:column error reports

String escapes are decoded by the standard json module; everything else is
plain combinators.
"""

from __future__ import annotations

import json
from typing import Any

from combilex import (
    Grammar,
    ParseSyntaxError,
    between,
    choice,
    grammar,
    map_,
    parse_or_raise,
    pattern,
    right,
    sep_by,
    sequence,
)
from combilex.lexical import lexeme, symbol, whitespace, word

_STRING = r'"(?:[^"\\\x00-\x1f]|\\["\\/bfnrt]|\\u[0-9a-fA-F]{4})*"'
_NUMBER = r"-?(?:0|[1-9][0-9]*)(?:\.[0-9]+)?(?:[eE][+-]?[0-9]+)?"


def _member(pair: tuple[Any, ...]) -> tuple[str, Any]:
    key, _colon, value = pair
    return key, value


def build_json_grammar() -> Grammar:
    """Build the JSON grammar; "document" is the entry rule."""
    string = lexeme(map_(pattern(_STRING), json.loads))
    return grammar({
        "document": lambda g: right(whitespace, g.value),
        "value": lambda g: choice(
            g.object,
            g.array,
            string,
            lexeme(map_(pattern(_NUMBER), json.loads)),
            map_(word("true"), lambda _: True),
            map_(word("false"), lambda _: False),
            map_(word("null"), lambda _: None),
        ),
        "array": lambda g: between(symbol("["), sep_by(g.value, symbol(",")), symbol("]")),
        "object": lambda g: map_(
            between(
                symbol("{"),
                sep_by(map_(sequence(string, symbol(":"), g.value), _member), symbol(",")),
                symbol("}"),
            ),
            dict,
        ),
    })


def main() -> None:
    """Parse a document and report a broken one."""
    json_grammar = build_json_grammar()

    print("=" * 60)
    print("Parsing a JSON document")
    print("=" * 60)
    document = """
    {
        "name": "combilex",
        "tags": ["parser", "combinator"],
        "stable": false,
        "ratio": -1.5e3,
        "escaped": "tab\\there"
    }
    """
    print(parse_or_raise(json_grammar["document"], document))

    print()
    print("=" * 60)
    print("Reporting a syntax error")
    print("=" * 60)
    try:
        parse_or_raise(json_grammar["document"], '{\n  "a": [1, 2,,]\n}')
    except ParseSyntaxError as e:
        print(e)


if __name__ == "__main__":
    main()
