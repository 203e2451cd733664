"""Locale utilities for BCP-47 to POSIX conversion.

Centralizes locale key normalization used by the lookup table and the
formatter. Provides canonical locale handling to ensure consistent table keys.

Python 3.13+.
"""

from __future__ import annotations

import functools
from typing import TYPE_CHECKING

from sqlnumfmt.constants import MAX_LOCALE_CACHE_SIZE

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "normalize_locale",
]


def normalize_locale(locale_code: str) -> str:
    """Convert a locale identifier to a lowercase POSIX table key.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Locale identifiers are case-insensitive, so the result is lowercased to
    make "en-US", "en_US" and "EN_us" share one table key. Surrounding
    whitespace is stripped.

    Args:
        locale_code: BCP-47 or POSIX locale code (e.g., "en-US", "zh_CN")

    Returns:
        Lowercase POSIX-formatted key (e.g., "en_us", "zh_cn")

    Example:
        >>> normalize_locale("en-US")
        'en_us'
        >>> normalize_locale("zh_CN")
        'zh_cn'
        >>> normalize_locale("de")
        'de'
    """
    return locale_code.strip().replace("-", "_").lower()


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Parses the locale code once and caches the result, so building several
    tables over the same locales does not re-parse CLDR data.

    Thread-safe via lru_cache internal locking.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("zh-CN")
        >>> locale.language
        'zh'
        >>> locale.territory
        'CN'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(locale_code.strip().replace("-", "_"))


def clear_locale_cache() -> None:
    """Clear the cached Babel Locale objects."""
    get_babel_locale.cache_clear()
