"""Tests for FORMAT(value, precision[, locale]) behavior.

Covers every scenario of the SQL FORMAT() regression suite, plus type
handling, non-finite values, large precision, and locale resolution.

Python 3.13+. Uses pytest.
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from sqlnumfmt import (
    InvalidLocaleError,
    LocaleTable,
    NumberFormatter,
    TypeMismatchError,
    format_number,
)


class TestFormatScenarios:
    """The FORMAT() statements from the SQL function regression suite."""

    @pytest.mark.parametrize(
        ("value", "precision", "expected"),
        [
            (12332.123456, 4, "12,332.1235"),
            (-12332.123456, 4, "-12,332.1235"),
            (12332.1, 4, "12,332.1000"),
            (12332.2, 0, "12,332"),
            (12332.2, -1, "12,332"),
            (12332, 2, "12,332.00"),
            (0, 0, "0"),
            (100 + 100, 2, "200.00"),
        ],
    )
    def test_two_argument_form(self, value: float, precision: int, expected: str) -> None:
        """Two-argument FORMAT() uses comma grouping and period decimals."""
        assert format_number(value, precision) == expected

    @pytest.mark.parametrize(
        ("value", "precision"),
        [(None, 1), (1, None), (None, None)],
    )
    def test_null_arguments_yield_null(self, value: int | None, precision: int | None) -> None:
        """NULL value or NULL precision produces NULL, not an error."""
        assert format_number(value, precision) is None

    @pytest.mark.parametrize("locale", ["en_US", "zh_CN", "", None])
    def test_three_argument_form(self, locale: str | None) -> None:
        """en_US, zh_CN, empty and NULL locales all use comma/period."""
        assert format_number(12332.123456, 4, locale) == "12,332.1235"

    def test_number_sequence(self) -> None:
        """FORMAT(number, number) over a 0..2 row source."""
        assert [format_number(n, n) for n in range(3)] == ["0", "1.0", "2.00"]


class TestRounding:
    """Half-away-from-zero rounding on exact decimal digits."""

    def test_half_rounds_up(self) -> None:
        """A trailing 5 rounds away from zero, not to even."""
        assert format_number(0.5, 0) == "1"
        assert format_number(2.5, 0) == "3"
        assert format_number(0.125, 2) == "0.13"

    def test_half_rounds_away_from_zero_for_negatives(self) -> None:
        """Negative halves round to larger magnitude."""
        assert format_number(-2.5, 0) == "-3"
        assert format_number(-0.125, 2) == "-0.13"

    def test_float_uses_shortest_repr(self) -> None:
        """2.675 is formatted from its written digits, not its binary value."""
        assert format_number(2.675, 2) == "2.68"

    def test_carry_propagates_into_new_group(self) -> None:
        """Rounding 999.9995 adds a digit and a grouping separator."""
        assert format_number(999.9995, 3) == "1,000.000"
        assert format_number(999999.5, 0) == "1,000,000"

    def test_decimal_input(self) -> None:
        """Decimal input keeps full precision."""
        assert format_number(Decimal("1234567.8912345678901234567890123"), 20) == (
            "1,234,567.89123456789012345679"
        )

    def test_small_negative_keeps_sign(self) -> None:
        """A negative input that rounds to zero keeps its minus sign."""
        assert format_number(-0.001, 2) == "-0.00"

    def test_negative_zero_has_no_sign(self) -> None:
        """-0.0 is not negative and prints as plain zero."""
        assert format_number(-0.0, 1) == "0.0"


class TestGrouping:
    """Integer-part grouping every three digits."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (1, "1"),
            (12, "12"),
            (123, "123"),
            (1234, "1,234"),
            (123456, "123,456"),
            (1234567, "1,234,567"),
            (-1234567, "-1,234,567"),
        ],
    )
    def test_group_boundaries(self, value: int, expected: str) -> None:
        """No separator up to three digits, then one per group."""
        assert format_number(value, 0) == expected

    def test_large_integer(self) -> None:
        """Integers wider than the default decimal context still format."""
        assert format_number(10**30, 1) == "1," + ",".join(["000"] * 10) + ".0"

    def test_large_float_exponent(self) -> None:
        """Floats in exponent notation expand to plain digits."""
        assert format_number(1e16, 0) == "10,000,000,000,000,000"


class TestPrecision:
    """Precision handling."""

    def test_large_precision_zero_pads(self) -> None:
        """Precision beyond float digits produces that many digits."""
        result = format_number(1.5, 40)
        assert result == "1." + "5" + "0" * 39

    def test_very_large_precision_does_not_crash(self) -> None:
        """Precision larger than the default decimal context succeeds."""
        result = format_number(1, 5000)
        assert result is not None
        integer_part, fraction = result.split(".")
        assert integer_part == "1"
        assert fraction == "0" * 5000

    def test_precision_rejects_float(self) -> None:
        """Precision must be an integer."""
        with pytest.raises(TypeMismatchError) as exc_info:
            format_number(1, 2.0)  # type: ignore[arg-type]
        assert exc_info.value.argument_name == "precision"
        assert exc_info.value.received_type == "float"

    def test_precision_rejects_bool(self) -> None:
        """bool is not accepted as an integer precision."""
        with pytest.raises(TypeMismatchError):
            format_number(1, True)


class TestValueTypes:
    """Value argument type checks."""

    @pytest.mark.parametrize("value", ["12", b"12", [1], True])
    def test_non_numeric_value_rejected(self, value: object) -> None:
        """Strings, bytes, containers and bools raise TypeMismatchError."""
        with pytest.raises(TypeMismatchError) as exc_info:
            format_number(value, 2)  # type: ignore[arg-type]
        assert exc_info.value.argument_name == "value"
        assert exc_info.value.received_type == type(value).__name__

    def test_null_value_checked_before_types(self) -> None:
        """NULL value short-circuits even with an invalid precision type."""
        assert format_number(None, "x") is None  # type: ignore[arg-type]

    def test_type_error_diagnostic(self) -> None:
        """TypeMismatchError carries a TYPE_MISMATCH diagnostic."""
        with pytest.raises(TypeMismatchError) as exc_info:
            format_number("abc", 2)  # type: ignore[arg-type]
        diagnostic = exc_info.value.diagnostic
        assert diagnostic is not None
        assert diagnostic.code.name == "TYPE_MISMATCH"
        assert diagnostic.function_name == "FORMAT"


class TestNonFinite:
    """NaN and infinities render as text instead of failing."""

    def test_nan(self) -> None:
        """NaN renders as 'NaN'."""
        assert format_number(float("nan"), 2) == "NaN"

    def test_infinities(self) -> None:
        """Infinities keep their sign."""
        assert format_number(float("inf"), 2) == "Infinity"
        assert format_number(float("-inf"), 0) == "-Infinity"

    def test_decimal_nan(self) -> None:
        """Signaling and quiet Decimal NaN both render as 'NaN'."""
        assert format_number(Decimal("NaN"), 1) == "NaN"
        assert format_number(Decimal("sNaN"), 1) == "NaN"


class TestLocales:
    """Locale argument resolution."""

    def test_locale_with_different_separators(self) -> None:
        """de_DE swaps grouping and decimal separators."""
        table = LocaleTable({"de_DE": (".", ",")})
        assert format_number(12332.123456, 4, "de_DE", table=table) == "12.332,1235"
        assert format_number(-12332.123456, 4, "de-de", table=table) == "-12.332,1235"

    def test_precision_zero_omits_locale_decimal(self) -> None:
        """At precision 0 no decimal separator is emitted in any locale."""
        table = LocaleTable({"de_DE": (".", ",")})
        assert format_number(12332.2, 0, "de_DE", table=table) == "12.332"

    def test_multi_character_separator(self) -> None:
        """Separators are strings, not single characters."""
        table = LocaleTable({"x_custom": ("<>", "::")})
        assert format_number(1234567.5, 1, "x_custom", table=table) == "1<>234<>567::5"

    def test_unknown_locale_raises(self) -> None:
        """Unknown locales raise InvalidLocaleError in strict mode."""
        table = LocaleTable({"en_US": (",", ".")})
        with pytest.raises(InvalidLocaleError) as exc_info:
            format_number(1, 2, "xx_XX", table=table)
        assert exc_info.value.locale_code == "xx_XX"

    def test_unknown_locale_falls_back(self, caplog: pytest.LogCaptureFixture) -> None:
        """Non-strict mode uses the default separators and logs a warning."""
        table = LocaleTable({"de_DE": (".", ",")})
        with caplog.at_level("WARNING", logger="sqlnumfmt.runtime.locale_table"):
            result = format_number(12332.5, 1, "xx_XX", table=table, strict_locale=False)
        assert result == "12,332.5"
        assert "xx_XX" in caplog.text

    def test_lenient_matches_en_us(self) -> None:
        """strict_locale=False renders unknown locales exactly like en_US."""
        formatter = NumberFormatter(strict_locale=False)
        assert NumberFormatter().strict_locale is True
        assert formatter.format(1234567.891, 2, "xx_XX") == formatter.format(
            1234567.891, 2, "en_US"
        )

    def test_null_value_skips_locale_validation(self) -> None:
        """NULL value returns NULL even with an unknown locale."""
        assert format_number(None, 2, "xx_XX", table=LocaleTable()) is None

    def test_whitespace_locale_is_default(self) -> None:
        """A blank locale string selects the default separators."""
        assert format_number(1234.5, 1, "   ", table=LocaleTable()) == "1,234.5"

    def test_non_string_locale_rejected(self) -> None:
        """Locale must be a string or NULL."""
        with pytest.raises(TypeMismatchError) as exc_info:
            format_number(1, 2, 42)  # type: ignore[arg-type]
        assert exc_info.value.argument_name == "locale"

    def test_builtin_table_locale(self) -> None:
        """Without an explicit table, CLDR data from the built-in table is used."""
        assert format_number(12332.123456, 4, "de_DE") == "12.332,1235"


class TestNumberFormatter:
    """NumberFormatter as a reusable, immutable evaluator."""

    def test_callable(self) -> None:
        """Instances are callable with the FORMAT() argument order."""
        formatter = NumberFormatter()
        assert formatter(12332, 2) == "12,332.00"

    def test_frozen(self) -> None:
        """Configuration cannot be changed after construction."""
        formatter = NumberFormatter()
        with pytest.raises(AttributeError):
            formatter.strict_locale = False  # type: ignore[misc]

    def test_pure(self) -> None:
        """Repeated calls with identical inputs give identical output."""
        formatter = NumberFormatter(LocaleTable({"de_DE": (".", ",")}))
        results = {formatter.format(9876.54321, 3, "de_DE") for _ in range(5)}
        assert results == {"9.876,543"}
