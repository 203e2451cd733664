"""sqlnumfmt - the SQL FORMAT() numeric formatting function.

Renders numbers as rounded, thousands-grouped, locale-aware strings with
SQL NULL semantics, and exposes the function to query engines through a
case-insensitive function registry.

Public API:
    format_number - FORMAT(value, precision[, locale]) as a Python function
    NumberFormatter - Immutable formatter bound to a locale table
    LocaleTable - Read-only locale -> separators lookup table
    LocaleSeparators - (grouping, decimal) separator pair
    default_locale_table - Built-in CLDR-derived locale table
    FunctionRegistry - SQL name -> callable bridge with arity checks
    create_default_registry - Fresh registry with FORMAT registered
    get_shared_registry - Shared frozen registry

Exceptions:
    SqlFunctionError - Base exception class
    InvalidLocaleError - Unknown locale in strict mode
    TypeMismatchError - Non-numeric value or non-integer precision
    ArityMismatchError - Wrong argument count in a registry call
    UnknownFunctionError - Unregistered function name

Submodules:
    sqlnumfmt.diagnostics - Diagnostic codes, templates, and formatting
    sqlnumfmt.runtime - Formatter, locale tables, and function registry
    sqlnumfmt.locale_utils - Locale key normalization and Babel lookup
"""

from .diagnostics import (
    ArityMismatchError,
    InvalidLocaleError,
    SqlFunctionError,
    TypeMismatchError,
    UnknownFunctionError,
)
from .runtime import (
    FunctionRegistry,
    LocaleSeparators,
    LocaleTable,
    NumberFormatter,
    create_default_registry,
    default_locale_table,
    format_number,
    get_shared_registry,
)

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("sqlnumfmt")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "ArityMismatchError",
    "FunctionRegistry",
    "InvalidLocaleError",
    "LocaleSeparators",
    "LocaleTable",
    "NumberFormatter",
    "SqlFunctionError",
    "TypeMismatchError",
    "UnknownFunctionError",
    "__version__",
    "create_default_registry",
    "default_locale_table",
    "format_number",
    "get_shared_registry",
]
