"""Quickstart example for sqlnumfmt.

This example demonstrates the SQL FORMAT() function from Python, both as a
plain function and through the function registry a query engine would use.

Note: Locale errors are shown explicitly. In production, decide per call
site whether unknown locales should fail (strict) or fall back.
"""

from decimal import Decimal

from sqlnumfmt import (
    InvalidLocaleError,
    LocaleTable,
    create_default_registry,
    format_number,
    get_shared_registry,
)

# Example 1: Two-argument FORMAT()
print("=" * 50)
print("Example 1: FORMAT(value, decimals)")
print("=" * 50)

print(format_number(12332.123456, 4))
# Output: 12,332.1235
print(format_number(-12332.123456, 4))
# Output: -12,332.1235
print(format_number(12332.2, -1))
# Output: 12,332
print(format_number(Decimal("0.125"), 2))
# Output: 0.13
print(format_number(None, 2))
# Output: None

# Example 2: Locale argument
print("\n" + "=" * 50)
print("Example 2: FORMAT(value, decimals, locale)")
print("=" * 50)

for locale in ("en_US", "zh_CN", "de_DE", "fr_FR", ""):
    print(f"{locale or '(default)':>10}: {format_number(1234567.891, 2, locale)!r}")

# Example 3: Injected locale table
print("\n" + "=" * 50)
print("Example 3: Custom Locale Table")
print("=" * 50)

table = LocaleTable({"de_CH": ("'", "."), "en_US": (",", ".")})
print(format_number(1234567.891, 2, "de-CH", table=table))
# Output: 1'234'567.89

try:
    format_number(1, 2, "xx_XX", table=table)
except InvalidLocaleError as e:
    print(e)

print(format_number(1234.5, 1, "xx_XX", table=table, strict_locale=False))
# Output: 1,234.5 (warning logged)

# Example 4: Registry calls, as issued by a query engine
print("\n" + "=" * 50)
print("Example 4: Function Registry")
print("=" * 50)

registry = get_shared_registry()
print(registry.call("FORMAT", (100 + 100, 2)))
# Output: 200.00

# SELECT FORMAT(number, number) FROM numbers(3) ORDER BY number
rows = ((number, number) for number in range(3))
for number, formatted in enumerate(registry.evaluate_rows("FORMAT", rows)):
    print(number, formatted)
# Output:
# 0 0
# 1 1.0
# 2 2.00

lenient = create_default_registry(table, strict_locale=False)
print(lenient.call("format", (9876.5, 1, "xx_XX")))
# Output: 9,876.5
