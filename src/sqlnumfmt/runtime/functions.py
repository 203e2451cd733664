"""Built-in SQL function registries.

Binds the FORMAT() implementation into FunctionRegistry instances, either
fresh (with a caller-chosen locale table and locale policy) or as a shared,
frozen default.

Python 3.13+.
"""

import logging
from threading import Lock

from sqlnumfmt.constants import FORMAT_FUNCTION_NAME

from .function_bridge import FunctionRegistry
from .locale_table import LocaleTable
from .numeric_format import NumberFormatter

__all__ = ["create_default_registry", "get_shared_registry"]

logger = logging.getLogger(__name__)


def create_default_registry(
    table: LocaleTable | None = None,
    *,
    strict_locale: bool = True,
) -> FunctionRegistry:
    """Create a new FunctionRegistry with the built-in SQL functions.

    Each call returns a new, unfrozen instance, so callers can add their
    own functions without affecting anyone else.

    Args:
        table: Locale table used by FORMAT() (default: built-in table)
        strict_locale: Raise on unknown FORMAT() locales instead of
            falling back to the default separators

    Returns:
        FunctionRegistry with FORMAT registered (2 or 3 arguments)

    Example:
        >>> registry = create_default_registry()
        >>> registry.call("FORMAT", (12332.123456, 4))
        '12,332.1235'
        >>> registry.call("format", (100 + 100, 2))
        '200.00'
    """
    formatter = NumberFormatter(table=table, strict_locale=strict_locale)
    registry = FunctionRegistry()
    registry.register(formatter.format, sql_name=FORMAT_FUNCTION_NAME)
    return registry


# Module-level cached default registry.
# Initialized lazily on first access to avoid import-time side effects.
_SHARED_REGISTRY: FunctionRegistry | None = None
_SHARED_REGISTRY_LOCK = Lock()


def get_shared_registry() -> FunctionRegistry:
    """Get a shared, frozen FunctionRegistry with the built-in functions.

    The returned registry is FROZEN: register() raises TypeError. To add
    functions, use copy() or create_default_registry().

    Returns:
        Frozen shared FunctionRegistry
    """
    global _SHARED_REGISTRY  # noqa: PLW0603
    with _SHARED_REGISTRY_LOCK:
        if _SHARED_REGISTRY is None:
            _SHARED_REGISTRY = create_default_registry()
            _SHARED_REGISTRY.freeze()
            logger.debug("Initialized shared function registry: %r", _SHARED_REGISTRY)
        return _SHARED_REGISTRY
