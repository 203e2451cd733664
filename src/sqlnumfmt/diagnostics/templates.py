"""Error message templates.

Centralized error message templates for testable, consistent error messages.
Python 3.13+. Zero external dependencies.
"""

from .codes import Diagnostic, DiagnosticCode


class ErrorTemplate:
    """Centralized error message templates.

    All error messages are created here. NO f-strings in exception constructors!
    This provides:
        - Testable error messages
        - Consistent formatting
        - Documentation of all error cases
    """

    @staticmethod
    def function_not_found(function_name: str) -> Diagnostic:
        """SQL function not registered.

        Args:
            function_name: The function name that was called

        Returns:
            Diagnostic for FUNCTION_NOT_FOUND
        """
        msg = f"Unknown function '{function_name}'"
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_NOT_FOUND,
            message=msg,
            hint="Check the function name or register it in the FunctionRegistry",
            function_name=function_name,
        )

    @staticmethod
    def arity_mismatch(
        function_name: str, min_args: int, max_args: int, received: int
    ) -> Diagnostic:
        """Wrong number of arguments for a SQL function.

        Args:
            function_name: The function name
            min_args: Minimum accepted argument count
            max_args: Maximum accepted argument count
            received: Argument count actually passed

        Returns:
            Diagnostic for FUNCTION_ARITY_MISMATCH
        """
        expected = str(min_args) if min_args == max_args else f"{min_args} to {max_args}"
        msg = (
            f"Function {function_name}() expects {expected} arguments, "
            f"got {received}"
        )
        return Diagnostic(
            code=DiagnosticCode.FUNCTION_ARITY_MISMATCH,
            message=msg,
            function_name=function_name,
        )

    @staticmethod
    def type_mismatch(
        function_name: str,
        argument_name: str,
        expected_type: str,
        received_type: str,
    ) -> Diagnostic:
        """Argument of the wrong type.

        Args:
            function_name: Function receiving the argument
            argument_name: Name of the offending argument
            expected_type: Human-readable expected type
            received_type: Python type name of the received value

        Returns:
            Diagnostic for TYPE_MISMATCH
        """
        msg = f"Invalid argument type for {function_name}() function"
        return Diagnostic(
            code=DiagnosticCode.TYPE_MISMATCH,
            message=msg,
            hint=f"Cast '{argument_name}' to {expected_type} before calling {function_name}()",
            function_name=function_name,
            argument_name=argument_name,
            expected_type=expected_type,
            received_type=received_type,
        )

    @staticmethod
    def locale_unknown(locale_code: str) -> Diagnostic:
        """Locale not present in the lookup table.

        Args:
            locale_code: The locale identifier as passed by the caller

        Returns:
            Diagnostic for LOCALE_UNKNOWN
        """
        msg = f"Unknown locale '{locale_code}'"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_UNKNOWN,
            message=msg,
            hint="Use a locale from the lookup table, or pass NULL for the default",
            argument_name="locale",
        )

    @staticmethod
    def locale_data_unavailable(locale_code: str, reason: str) -> Diagnostic:
        """Babel has no CLDR data for a locale requested at table build time.

        Args:
            locale_code: The locale identifier
            reason: Error text reported by Babel

        Returns:
            Diagnostic for LOCALE_DATA_UNAVAILABLE
        """
        msg = f"No locale data for '{locale_code}': {reason}"
        return Diagnostic(
            code=DiagnosticCode.LOCALE_DATA_UNAVAILABLE,
            message=msg,
            hint="Check the locale identifier against babel.localedata.locale_identifiers()",
        )
