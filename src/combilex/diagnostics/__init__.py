"""Diagnostic system for CombiLex errors.

Provides structured error diagnostics with codes and hints for
construction-time misuse and top-level syntax reporting.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode
from .errors import (
    BabelImportError,
    CombilexError,
    GrammarRuleError,
    ParserConstructionError,
    ParseSyntaxError,
)
from .templates import ErrorTemplate

__all__ = [
    "BabelImportError",
    "CombilexError",
    "Diagnostic",
    "DiagnosticCode",
    "ErrorTemplate",
    "GrammarRuleError",
    "ParseSyntaxError",
    "ParserConstructionError",
]
