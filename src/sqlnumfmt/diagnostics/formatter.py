"""Diagnostic formatting service.

Centralizes diagnostic output formatting with configurable options.
Python 3.13+. Zero external dependencies.
"""

import json
from collections.abc import Iterable
from dataclasses import dataclass
from enum import StrEnum

from .codes import Diagnostic

__all__ = [
    "DiagnosticFormatter",
    "OutputFormat",
]


class OutputFormat(StrEnum):
    """Output format options for diagnostic formatting."""

    RUST = "rust"  # Rust compiler-style output (default)
    SIMPLE = "simple"  # Single-line format
    JSON = "json"  # JSON format for tooling integration


@dataclass(frozen=True, slots=True)
class DiagnosticFormatter:
    """Diagnostic formatting service.

    Formats Diagnostic objects into human-readable or machine-readable output.

    Attributes:
        output_format: Output style (rust, simple, json)
        color: Enable ANSI color codes (for terminal output)

    Example:
        >>> formatter = DiagnosticFormatter()
        >>> diagnostic = ErrorTemplate.locale_unknown("xx_XX")
        >>> print(formatter.format(diagnostic))
        error[LOCALE_UNKNOWN]: Unknown locale 'xx_XX'
          = argument: locale
          = help: Use a locale from the lookup table, or pass NULL for the default

        >>> formatter = DiagnosticFormatter(output_format=OutputFormat.SIMPLE)
        >>> print(formatter.format(diagnostic))
        LOCALE_UNKNOWN: Unknown locale 'xx_XX'
    """

    output_format: OutputFormat = OutputFormat.RUST
    color: bool = False

    def format(self, diagnostic: Diagnostic) -> str:
        """Format a single diagnostic.

        Args:
            diagnostic: Diagnostic to format

        Returns:
            Formatted diagnostic string
        """
        match self.output_format:
            case OutputFormat.RUST:
                return self._format_rust(diagnostic)
            case OutputFormat.SIMPLE:
                return self._format_simple(diagnostic)
            case OutputFormat.JSON:
                return self._format_json(diagnostic)

    def format_all(self, diagnostics: Iterable[Diagnostic]) -> str:
        """Format multiple diagnostics separated by blank lines."""
        return "\n\n".join(self.format(d) for d in diagnostics)

    def _format_rust(self, diagnostic: Diagnostic) -> str:
        severity = diagnostic.severity
        if self.color:
            code = "1;31" if severity == "error" else "1;33"  # Bold red / bold yellow
            severity_str = f"\033[{code}m{severity}\033[0m"
        else:
            severity_str = severity

        parts = [f"{severity_str}[{diagnostic.code.name}]: {self._escape(diagnostic.message)}"]

        if diagnostic.function_name:
            parts.append(f"  = function: {diagnostic.function_name}")
        if diagnostic.argument_name:
            parts.append(f"  = argument: {diagnostic.argument_name}")
        if diagnostic.expected_type:
            parts.append(f"  = expected: {diagnostic.expected_type}")
        if diagnostic.received_type:
            parts.append(f"  = received: {diagnostic.received_type}")
        if diagnostic.hint:
            parts.append(f"  = help: {self._escape(diagnostic.hint)}")

        return "\n".join(parts)

    def _format_simple(self, diagnostic: Diagnostic) -> str:
        return f"{diagnostic.code.name}: {self._escape(diagnostic.message)}"

    def _format_json(self, diagnostic: Diagnostic) -> str:
        data: dict[str, str | int] = {
            "code": diagnostic.code.name,
            "code_value": diagnostic.code.value,
            "category": str(diagnostic.code.category),
            "message": diagnostic.message,
            "severity": diagnostic.severity,
        }
        optional = {
            "hint": diagnostic.hint,
            "function": diagnostic.function_name,
            "argument": diagnostic.argument_name,
            "expected": diagnostic.expected_type,
            "received": diagnostic.received_type,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return json.dumps(data, ensure_ascii=False)

    @staticmethod
    def _escape(text: str) -> str:
        """Escape control characters so caller-supplied text stays on one line."""
        return text.replace("\r", "\\r").replace("\n", "\\n").replace("\x1b", "\\x1b")
