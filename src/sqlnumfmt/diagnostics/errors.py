"""SQL function exception hierarchy with structured diagnostics.

All exceptions optionally store Diagnostic objects for rich error information.

Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic


class SqlFunctionError(Exception):
    """Base exception for all SQL function errors.

    Attributes:
        diagnostic: Structured diagnostic information (optional)
    """

    def __init__(self, message: str | Diagnostic) -> None:
        """Initialize SqlFunctionError.

        Args:
            message: Error message string OR Diagnostic object
        """
        if isinstance(message, Diagnostic):
            self.diagnostic: Diagnostic | None = message
            super().__init__(message.format_error())
        else:
            self.diagnostic = None
            super().__init__(message)


class InvalidLocaleError(SqlFunctionError):
    """Locale identifier not found in the lookup table.

    Raised only in strict mode. Non-strict callers get the default
    locale instead.

    Attributes:
        locale_code: The locale identifier as passed by the caller
    """

    def __init__(self, message: str | Diagnostic, *, locale_code: str = "") -> None:
        super().__init__(message)
        self.locale_code = locale_code


class TypeMismatchError(SqlFunctionError):
    """Argument value of a type the function does not accept.

    Attributes:
        argument_name: Name of the offending argument
        received_type: Python type name of the received value
    """

    def __init__(
        self,
        message: str | Diagnostic,
        *,
        argument_name: str = "",
        received_type: str = "",
    ) -> None:
        super().__init__(message)
        self.argument_name = argument_name
        self.received_type = received_type


class ArityMismatchError(SqlFunctionError):
    """Function called with the wrong number of arguments."""


class UnknownFunctionError(SqlFunctionError):
    """Function name not registered."""
