"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    Construction errors point at grammar assembly mistakes, so every template
    carries a hint naming the correct primitive to use.
    """

    # =========================================================================
    # CONSTRUCTION ERRORS (1000-1999)
    # =========================================================================

    @staticmethod
    def char_not_single(value: object) -> Diagnostic:
        """char() received something other than a one-character string.

        Args:
            value: The offending argument

        Returns:
            Diagnostic for CHAR_NOT_SINGLE
        """
        msg = f"char() expects exactly one character, got {value!r}"
        return Diagnostic(
            code=DiagnosticCode.CHAR_NOT_SINGLE,
            message=msg,
            hint="Use literal() to match multi-character strings",
        )

    @staticmethod
    def pattern_multi_match(kind: str) -> Diagnostic:
        """pattern() received an object that scans past more than one match.

        Args:
            kind: Type name of the offending object

        Returns:
            Diagnostic for PATTERN_MULTI_MATCH
        """
        msg = f"pattern() requires a single-shot pattern, got multi-match object {kind}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_MULTI_MATCH,
            message=msg,
            hint="Pass the pattern string or compiled re.Pattern, not a finditer/Scanner",
        )

    @staticmethod
    def pattern_invalid_type(kind: str) -> Diagnostic:
        """pattern() received a non-text pattern.

        Args:
            kind: Type name of the offending object

        Returns:
            Diagnostic for PATTERN_INVALID_TYPE
        """
        msg = f"pattern() expects a str or str-based re.Pattern, got {kind}"
        return Diagnostic(
            code=DiagnosticCode.PATTERN_INVALID_TYPE,
            message=msg,
            hint="Parsers operate on text; compile the pattern from a str",
        )

    @staticmethod
    def count_negative(combinator: str, value: int) -> Diagnostic:
        """A repetition count was negative.

        Args:
            combinator: Name of the combinator being constructed
            value: The negative count

        Returns:
            Diagnostic for COUNT_NEGATIVE
        """
        msg = f"{combinator}() count must be >= 0, got {value}"
        return Diagnostic(
            code=DiagnosticCode.COUNT_NEGATIVE,
            message=msg,
        )

    @staticmethod
    def range_inverted(minimum: int, maximum: int) -> Diagnostic:
        """range_() received min > max.

        Args:
            minimum: Requested minimum
            maximum: Requested maximum

        Returns:
            Diagnostic for RANGE_INVERTED
        """
        msg = f"range_() minimum ({minimum}) exceeds maximum ({maximum})"
        return Diagnostic(
            code=DiagnosticCode.RANGE_INVERTED,
            message=msg,
            hint="Swap the bounds or use count() for an exact repetition",
        )

    # =========================================================================
    # GRAMMAR ERRORS (2000-2999)
    # =========================================================================

    @staticmethod
    def rule_not_callable(name: str, kind: str) -> Diagnostic:
        """A grammar rule definition is not a thunk.

        Args:
            name: Rule name
            kind: Type name of the definition

        Returns:
            Diagnostic for RULE_NOT_CALLABLE
        """
        msg = f"Grammar rule '{name}' must be a callable returning a Parser, got {kind}"
        return Diagnostic(
            code=DiagnosticCode.RULE_NOT_CALLABLE,
            message=msg,
            hint="Wrap the parser in a lambda: {'rule': lambda g: ...}",
        )

    @staticmethod
    def rule_bad_arity(name: str, arity: int) -> Diagnostic:
        """A grammar rule thunk takes the wrong number of arguments.

        Args:
            name: Rule name
            arity: Number of required positional parameters found

        Returns:
            Diagnostic for RULE_BAD_ARITY
        """
        msg = f"Grammar rule '{name}' takes {arity} required arguments, expected 0 or 1"
        return Diagnostic(
            code=DiagnosticCode.RULE_BAD_ARITY,
            message=msg,
            hint="A rule thunk receives at most the grammar itself",
        )

    @staticmethod
    def rule_not_found(name: str, available: tuple[str, ...]) -> Diagnostic:
        """A grammar rule was looked up but never defined.

        Args:
            name: Requested rule name
            available: Names defined in the grammar

        Returns:
            Diagnostic for RULE_NOT_FOUND
        """
        msg = f"Grammar rule '{name}' is not defined"
        return Diagnostic(
            code=DiagnosticCode.RULE_NOT_FOUND,
            message=msg,
            hint=f"Defined rules: {', '.join(available) or '(none)'}",
        )

    # =========================================================================
    # SYNTAX ERRORS (3000-3999)
    # =========================================================================

    @staticmethod
    def parse_failed(position: int) -> Diagnostic:
        """The top-level parser failed outright.

        Args:
            position: Offset where parsing started

        Returns:
            Diagnostic for PARSE_FAILED
        """
        return Diagnostic(
            code=DiagnosticCode.PARSE_FAILED,
            message="Input does not match the grammar",
            position=position,
        )

    @staticmethod
    def trailing_input(position: int, excerpt: str) -> Diagnostic:
        """The parser succeeded but left non-whitespace input behind.

        Args:
            position: Offset of the first unconsumed character
            excerpt: Short preview of the unconsumed input

        Returns:
            Diagnostic for TRAILING_INPUT
        """
        msg = f"Unexpected trailing input {excerpt!r}"
        return Diagnostic(
            code=DiagnosticCode.TRAILING_INPUT,
            message=msg,
            position=position,
            hint="Only whitespace may follow a complete document",
        )

    # =========================================================================
    # LOCALE ERRORS (4000-4999)
    # =========================================================================

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Babel has no CLDR data for the requested locale.

        Args:
            locale_code: The locale identifier that failed to resolve

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a CLDR locale identifier such as 'en_US' or 'de_DE'",
        )

    @staticmethod
    def number_symbols_invalid(reason: str) -> Diagnostic:
        """A NumberSymbols configuration is unusable for parsing.

        Args:
            reason: What is wrong with the symbols

        Returns:
            Diagnostic for NUMBER_SYMBOLS_INVALID
        """
        msg = f"Invalid number symbols: {reason}"
        return Diagnostic(
            code=DiagnosticCode.NUMBER_SYMBOLS_INVALID,
            message=msg,
            hint="Decimal and group symbols must be non-empty and distinct",
        )
