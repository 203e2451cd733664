"""Diagnostic system for SQL function errors.

Provides structured error diagnostics with codes, hints, and argument context.
Inspired by Rust compiler diagnostics and Elm error messages.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode, ErrorCategory
from .errors import (
    ArityMismatchError,
    InvalidLocaleError,
    SqlFunctionError,
    TypeMismatchError,
    UnknownFunctionError,
)
from .formatter import DiagnosticFormatter, OutputFormat
from .templates import ErrorTemplate

__all__ = [
    "ArityMismatchError",
    "Diagnostic",
    "DiagnosticCode",
    "DiagnosticFormatter",
    "ErrorCategory",
    "ErrorTemplate",
    "InvalidLocaleError",
    "OutputFormat",
    "SqlFunctionError",
    "TypeMismatchError",
    "UnknownFunctionError",
]
