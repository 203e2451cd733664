"""SQL FORMAT(number, decimals[, locale]) implementation.

Renders a numeric value as a rounded, thousands-grouped decimal string using
the separators of a locale taken from an explicit LocaleTable.

Architecture:
    - NumberFormatter: Frozen formatter owning its locale table and policy
    - format_number(): Functional entry point with the SQL argument order
    - All arithmetic uses decimal.Decimal (no binary float rounding)

Semantics:
    - NULL value or NULL precision -> NULL (None), never an error
    - Negative precision is clamped to 0
    - Rounding is half away from zero (ROUND_HALF_UP)
    - Integer part grouped every three digits; no decimal separator at
      precision 0; fraction zero-padded to exactly ``precision`` digits

Python 3.13+.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, localcontext
from typing import TypeAlias

from sqlnumfmt.constants import FORMAT_FUNCTION_NAME, GROUP_SIZE
from sqlnumfmt.diagnostics import ErrorTemplate, TypeMismatchError

from .locale_table import (
    DEFAULT_SEPARATORS,
    LocaleSeparators,
    LocaleTable,
    default_locale_table,
)

__all__ = ["NumberFormatter", "format_number"]

NumericValue: TypeAlias = int | float | Decimal

# Minimum working precision for the rounding context (decimal default).
_MIN_CONTEXT_PRECISION = 28


@dataclass(frozen=True, slots=True)
class NumberFormatter:
    """Immutable FORMAT() evaluator bound to a locale table.

    Attributes:
        table: Locale lookup table. None selects the built-in table, which
            is only loaded when a non-empty locale is actually requested.
        strict_locale: Raise InvalidLocaleError on unknown locales. When
            False, unknown locales use the default separators and a warning
            is logged. MySQL itself behaves like False here (en_US plus a
            warning); pass strict_locale=False to match it.

    Examples:
        >>> NumberFormatter().format(12332.123456, 4)
        '12,332.1235'
        >>> table = LocaleTable({"de_DE": (".", ",")})
        >>> NumberFormatter(table).format(-12332.123456, 2, "de_DE")
        '-12.332,12'
        >>> NumberFormatter().format(None, 2) is None
        True

    Thread Safety:
        Immutable and stateless. Instances can be shared between threads.
    """

    table: LocaleTable | None = None
    strict_locale: bool = True

    def format(
        self,
        value: NumericValue | None,
        precision: int | None,
        locale: str | None = None,
    ) -> str | None:
        """Evaluate FORMAT(value, precision[, locale]).

        Args:
            value: Number to format, or None (SQL NULL)
            precision: Fractional digits, or None (SQL NULL). Negative
                values are treated as 0.
            locale: Locale identifier. None or "" selects the default
                separators ("," grouping, "." decimal).

        Returns:
            Formatted string, or None when value or precision is NULL

        Raises:
            TypeMismatchError: If value is not int/float/Decimal or precision
                is not int
            InvalidLocaleError: If strict_locale and the locale is unknown
        """
        if value is None or precision is None:
            return None

        number = _to_decimal(value)
        digits = _to_digits(precision)
        separators = self._separators(locale)

        if not number.is_finite():
            return _format_non_finite(number)

        # copy_abs() is exact; abs() would round to the context precision
        rounded = _round_half_up(number.copy_abs(), digits)
        integer_part, _, fraction_part = f"{rounded:f}".partition(".")

        text = _group_digits(integer_part, separators.grouping)
        if digits > 0:
            text = f"{text}{separators.decimal}{fraction_part}"
        if number < 0:
            text = f"-{text}"
        return text

    __call__ = format

    def _separators(self, locale: str | None) -> LocaleSeparators:
        # Default locale never touches the table, so two-argument calls
        # do not pay for loading CLDR data.
        if locale is None:
            return DEFAULT_SEPARATORS
        if not isinstance(locale, str):
            raise TypeMismatchError(
                ErrorTemplate.type_mismatch(
                    FORMAT_FUNCTION_NAME, "locale", "String", type(locale).__name__
                ),
                argument_name="locale",
                received_type=type(locale).__name__,
            )
        if not locale.strip():
            return DEFAULT_SEPARATORS
        table = self.table if self.table is not None else default_locale_table()
        return table.resolve(locale, strict=self.strict_locale)


def format_number(
    value: NumericValue | None,
    precision: int | None,
    locale: str | None = None,
    *,
    table: LocaleTable | None = None,
    strict_locale: bool = True,
) -> str | None:
    """Format a number the way SQL FORMAT() does.

    Args:
        value: Number to format (int, float, or Decimal), or None
        precision: Number of fractional digits, or None
        locale: Optional locale identifier (e.g. 'en_US', 'zh-CN')
        table: Locale lookup table (default: built-in CLDR-derived table)
        strict_locale: Raise on unknown locales instead of falling back

    Returns:
        Formatted string, or None if value or precision is None

    Examples:
        >>> format_number(12332.123456, 4)
        '12,332.1235'
        >>> format_number(12332.1, 4)
        '12,332.1000'
        >>> format_number(12332.2, -1)
        '12,332'
        >>> format_number(12332.123456, 4, "de_DE")
        '12.332,1235'
        >>> format_number(1, None) is None
        True
    """
    return NumberFormatter(table=table, strict_locale=strict_locale).format(
        value, precision, locale
    )


def _to_decimal(value: object) -> Decimal:
    """Convert an accepted numeric argument to Decimal.

    Floats go through their shortest repr so that a literal such as
    12332.123456 keeps exactly the digits it was written with.
    """
    # bool is an int subclass but not a SQL number
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        received = type(value).__name__
        raise TypeMismatchError(
            ErrorTemplate.type_mismatch(FORMAT_FUNCTION_NAME, "value", "Number", received),
            argument_name="value",
            received_type=received,
        )
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def _to_digits(precision: object) -> int:
    if isinstance(precision, bool) or not isinstance(precision, int):
        received = type(precision).__name__
        raise TypeMismatchError(
            ErrorTemplate.type_mismatch(FORMAT_FUNCTION_NAME, "precision", "Integer", received),
            argument_name="precision",
            received_type=received,
        )
    return max(precision, 0)


def _round_half_up(magnitude: Decimal, digits: int) -> Decimal:
    """Round a non-negative Decimal to ``digits`` fractional places."""
    quantum = Decimal(1).scaleb(-digits)
    # The context must hold every integer digit plus the requested fraction,
    # otherwise quantize() signals InvalidOperation.
    needed = max(magnitude.adjusted(), 0) + digits + 2
    with localcontext() as ctx:
        ctx.prec = max(_MIN_CONTEXT_PRECISION, needed)
        ctx.Emin = min(ctx.Emin, -digits)
        ctx.Emax = max(ctx.Emax, magnitude.adjusted() + 1)
        return magnitude.quantize(quantum, rounding=ROUND_HALF_UP)


def _group_digits(digits: str, separator: str) -> str:
    """Insert ``separator`` every GROUP_SIZE digits from the right.

    >>> _group_digits("1234567", ",")
    '1,234,567'
    >>> _group_digits("332", ",")
    '332'
    """
    head = len(digits) % GROUP_SIZE or GROUP_SIZE
    groups = [digits[:head]]
    groups.extend(digits[i : i + GROUP_SIZE] for i in range(head, len(digits), GROUP_SIZE))
    return separator.join(groups)


def _format_non_finite(number: Decimal) -> str:
    if number.is_nan():
        return "NaN"
    return "-Infinity" if number < 0 else "Infinity"
