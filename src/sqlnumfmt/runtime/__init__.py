"""SQL function runtime package.

Provides the FORMAT() implementation, locale lookup tables, and the
FunctionRegistry through which a query engine calls them.
Depends on the diagnostics package for error reporting.

Python 3.13+.
"""

from .function_bridge import FunctionRegistry, FunctionSignature, SqlValue
from .functions import create_default_registry, get_shared_registry
from .locale_table import (
    DEFAULT_SEPARATORS,
    LocaleSeparators,
    LocaleTable,
    default_locale_table,
)
from .numeric_format import NumberFormatter, format_number

__all__ = [
    "DEFAULT_SEPARATORS",
    "FunctionRegistry",
    "FunctionSignature",
    "LocaleSeparators",
    "LocaleTable",
    "NumberFormatter",
    "SqlValue",
    "create_default_registry",
    "default_locale_table",
    "format_number",
    "get_shared_registry",
]
