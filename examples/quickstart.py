"""Quickstart example for combilex.

Builds a small calculator from primitives and combinators, shows how a
failed parse is reported, and (when Babel is installed) reads a
locale-formatted decimal.

Note: parsers return None on failure. Use parse_or_raise() when a
human-readable error is needed.
"""

import operator

from combilex import (
    ParseSyntaxError,
    between,
    choice,
    grammar,
    left_assoc,
    map_,
    parse,
    parse_or_raise,
    prefix,
)
from combilex.core.babel_compat import is_babel_available
from combilex.lexical import lexeme, locale_decimal, natural_number, symbol


def _op(text, fn):
    return map_(symbol(text), lambda _: fn)


add_op = choice(_op("+", operator.add), _op("-", operator.sub))
mul_op = choice(_op("*", operator.mul), _op("/", operator.truediv))
negate = _op("-", operator.neg)

calculator = grammar({
    "expr": lambda g: left_assoc(g.term, add_op),
    "term": lambda g: left_assoc(g.unary, mul_op),
    "unary": lambda g: prefix(negate, g.atom),
    "atom": lambda g: choice(
        lexeme(natural_number),
        between(symbol("("), g.expr, symbol(")")),
    ),
})

# Example 1: Evaluate expressions
print("=" * 50)
print("Example 1: Calculator")
print("=" * 50)

for text in ["1 + 2 * 3", "(1 + 2) * 3", "10 - 4 - 3", "-(2 + 3) * 4", "7 / 2"]:
    print(f"{text:>16} = {parse(calculator['expr'], text)}")
# Output:
#        1 + 2 * 3 = 7
#      (1 + 2) * 3 = 9
#       10 - 4 - 3 = 3
#     -(2 + 3) * 4 = -20
#            7 / 2 = 3.5

# Example 2: Rejected input
print("\n" + "=" * 50)
print("Example 2: Error Reporting")
print("=" * 50)

print(parse(calculator["expr"], "1 + 2 )"))
# Output: None

try:
    parse_or_raise(calculator["expr"], "1 + 2\n* 3\n+ )")
except ParseSyntaxError as e:
    print(e)
    print(e.diagnostic.format_error())

# Example 3: Locale-aware decimals
print("\n" + "=" * 50)
print("Example 3: Locale Decimals")
print("=" * 50)

if is_babel_available():
    for locale_code, text in [("en_US", "1,234.5"), ("de_DE", "1.234,5")]:
        result = locale_decimal(locale_code)(text)
        print(f"{locale_code}: {text!r} -> {result.value if result else None!r}")
else:
    print("Install combilex[babel] for locale-aware decimals")
