"""Diagnostic codes and data structures.

Defines error codes and diagnostic messages for SQL function evaluation.
Python 3.13+. Zero external dependencies.
"""

from dataclasses import dataclass
from enum import Enum, StrEnum
from typing import Literal

__all__ = [
    "Diagnostic",
    "DiagnosticCode",
    "ErrorCategory",
]


class ErrorCategory(StrEnum):
    """Error categorization for SqlFunctionError subclasses.

    Inherits from ``StrEnum`` so that ``str(category)`` and direct string
    comparisons work without accessing ``.value``.

    Categories:
        LOCALE: Locale identifier not present in the lookup table
        TYPE: Argument type not accepted by the function
        CALL: Function lookup or arity failure at the call site
    """

    LOCALE = "locale"
    TYPE = "type"
    CALL = "call"


class DiagnosticCode(Enum):
    """Error codes with unique identifiers.

    Organized by category:
        1000-1999: Call errors (unknown function, arity)
        2000-2999: Argument errors (type mismatch)
        3000-3999: Locale errors (lookup table misses)
    """

    # Call errors (1000-1999)
    FUNCTION_NOT_FOUND = 1001
    FUNCTION_ARITY_MISMATCH = 1002

    # Argument errors (2000-2999)
    TYPE_MISMATCH = 2001

    # Locale errors (3000-3999)
    LOCALE_UNKNOWN = 3001
    LOCALE_DATA_UNAVAILABLE = 3002

    @property
    def category(self) -> ErrorCategory:
        """Category derived from the code's numeric range."""
        if self.value < 2000:
            return ErrorCategory.CALL
        if self.value < 3000:
            return ErrorCategory.TYPE
        return ErrorCategory.LOCALE


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Structured diagnostic message.

    Inspired by Rust compiler diagnostics. Provides rich error information
    for both humans and tools.

    Attributes:
        code: Unique error code
        message: Human-readable error description
        hint: Suggestion for fixing the error
        function_name: SQL function where the error occurred
        argument_name: Argument that caused the error
        expected_type: Expected type for argument
        received_type: Actual type received
        severity: Error severity level
    """

    code: DiagnosticCode
    message: str
    hint: str | None = None
    function_name: str | None = None
    argument_name: str | None = None
    expected_type: str | None = None
    received_type: str | None = None
    severity: Literal["error", "warning"] = "error"

    def __str__(self) -> str:
        """Return human-readable error description."""
        return self.message

    def format_error(self) -> str:
        """Format diagnostic like Rust compiler.

        Example output:
            error[TYPE_MISMATCH]: Invalid argument type for FORMAT() function
              = function: FORMAT
              = argument: value
              = expected: Number
              = received: str
              = help: Cast the argument to a numeric type first

        Returns:
            Formatted error message
        """
        from .formatter import DiagnosticFormatter  # noqa: PLC0415 - circular

        return DiagnosticFormatter().format(self)
