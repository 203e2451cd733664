"""Immutable locale lookup table for FORMAT() separators.

Maps locale identifiers to the (grouping, decimal) separator pair used when
rendering numbers. Tables are values: they are built once, never mutated,
and passed explicitly to the formatter that uses them.

Architecture:
    - LocaleSeparators: Frozen (grouping, decimal) pair
    - LocaleTable: Read-only Mapping keyed by normalized locale code
    - LocaleTable.from_babel(): Derives separators from CLDR via Babel
    - default_locale_table(): Cached Babel-derived table of built-in locales

Python 3.13+. Uses Babel for CLDR data.
"""

import functools
import logging
from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from babel import UnknownLocaleError
from babel import numbers as babel_numbers

from sqlnumfmt.constants import (
    BUILTIN_LOCALES,
    DEFAULT_DECIMAL_SEPARATOR,
    DEFAULT_GROUPING_SEPARATOR,
    LOCALE_ALIASES,
)
from sqlnumfmt.diagnostics import ErrorTemplate, InvalidLocaleError
from sqlnumfmt.locale_utils import get_babel_locale, normalize_locale

__all__ = [
    "DEFAULT_SEPARATORS",
    "LocaleSeparators",
    "LocaleTable",
    "default_locale_table",
]

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class LocaleSeparators:
    """Separator pair used to render a formatted number.

    Attributes:
        grouping: Inserted between each group of three integer digits
        decimal: Placed between the integer and fractional parts
    """

    grouping: str
    decimal: str

    def __post_init__(self) -> None:
        """Validate separator invariants.

        Raises:
            ValueError: If the decimal separator is empty, or equal to the
                grouping separator (the output would be ambiguous).
        """
        if not self.decimal:
            msg = "LocaleSeparators.decimal must not be empty"
            raise ValueError(msg)
        if self.grouping == self.decimal:
            msg = f"Grouping and decimal separators must differ, both are '{self.decimal}'"
            raise ValueError(msg)


DEFAULT_SEPARATORS = LocaleSeparators(
    grouping=DEFAULT_GROUPING_SEPARATOR,
    decimal=DEFAULT_DECIMAL_SEPARATOR,
)


class LocaleTable(Mapping[str, LocaleSeparators]):
    """Read-only mapping from locale identifier to separators.

    Keys are normalized with normalize_locale(), so "en-US", "en_US" and
    "EN_us" address the same entry. Values may be given as LocaleSeparators
    or as plain (grouping, decimal) tuples.

    Example:
        >>> table = LocaleTable({"de_DE": (".", ","), "en_US": (",", ".")})
        >>> table["de-de"]
        LocaleSeparators(grouping='.', decimal=',')
        >>> table.resolve(None)
        LocaleSeparators(grouping=',', decimal='.')
        >>> "xx_XX" in table
        False
    """

    __slots__ = ("_entries",)

    def __init__(
        self,
        entries: Mapping[str, LocaleSeparators | tuple[str, str]] | None = None,
    ) -> None:
        normalized: dict[str, LocaleSeparators] = {}
        for code, separators in (entries or {}).items():
            if not isinstance(separators, LocaleSeparators):
                grouping, decimal = separators
                separators = LocaleSeparators(grouping=grouping, decimal=decimal)
            normalized[normalize_locale(code)] = separators
        self._entries: Mapping[str, LocaleSeparators] = MappingProxyType(normalized)

    @classmethod
    def from_babel(cls, locale_codes: Iterable[str], *, strict: bool = True) -> "LocaleTable":
        """Build a table with separators taken from CLDR data.

        Args:
            locale_codes: Locale identifiers to include
            strict: Raise on locales Babel does not know. When False, such
                locales are logged and skipped.

        Returns:
            LocaleTable with one entry per loadable locale

        Raises:
            InvalidLocaleError: If strict and a locale has no CLDR data

        Example:
            >>> table = LocaleTable.from_babel(["de_DE", "zh_CN"])
            >>> table["de_DE"]
            LocaleSeparators(grouping='.', decimal=',')
        """
        entries: dict[str, LocaleSeparators] = {}
        for code in locale_codes:
            try:
                babel_locale = get_babel_locale(code)
            except (UnknownLocaleError, ValueError) as e:
                if strict:
                    diagnostic = ErrorTemplate.locale_data_unavailable(code, str(e))
                    raise InvalidLocaleError(diagnostic, locale_code=code) from e
                logger.warning("No locale data for '%s': %s. Skipping", code, e)
                continue
            entries[code] = LocaleSeparators(
                grouping=babel_numbers.get_group_symbol(babel_locale),
                decimal=babel_numbers.get_decimal_symbol(babel_locale),
            )
        return cls(entries)

    def with_entries(
        self, entries: Mapping[str, LocaleSeparators | tuple[str, str]]
    ) -> "LocaleTable":
        """Return a new table extended (or overridden) by ``entries``."""
        merged: dict[str, LocaleSeparators | tuple[str, str]] = dict(self._entries)
        merged.update({normalize_locale(code): value for code, value in entries.items()})
        return LocaleTable(merged)

    def resolve(self, locale_code: str | None, *, strict: bool = True) -> LocaleSeparators:
        """Look up separators for a FORMAT() locale argument.

        NULL (None) and the empty string select the default separators.

        Args:
            locale_code: Locale identifier, or None
            strict: Raise on unknown locales. When False, unknown locales
                fall back to the default separators with a warning logged.

        Returns:
            Separators for the locale

        Raises:
            InvalidLocaleError: If strict and the locale is not in the table
        """
        if locale_code is None:
            return DEFAULT_SEPARATORS
        key = normalize_locale(locale_code)
        if not key:
            return DEFAULT_SEPARATORS

        separators = self._entries.get(key)
        if separators is not None:
            return separators

        if strict:
            raise InvalidLocaleError(
                ErrorTemplate.locale_unknown(locale_code), locale_code=locale_code
            )
        logger.warning("Unknown locale '%s'. Falling back to default separators", locale_code)
        return DEFAULT_SEPARATORS

    def __getitem__(self, locale_code: str) -> LocaleSeparators:
        return self._entries[normalize_locale(locale_code)]

    def __contains__(self, locale_code: object) -> bool:
        return isinstance(locale_code, str) and normalize_locale(locale_code) in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"LocaleTable(locales={len(self._entries)})"


@functools.lru_cache(maxsize=1)
def default_locale_table() -> LocaleTable:
    """Get the built-in locale table.

    Derived from CLDR for the locales in BUILTIN_LOCALES on first call, then
    cached. Locales listed in LOCALE_ALIASES take the separators of their
    target locale. Locales missing from the installed Babel data are skipped.

    Returns:
        Shared, immutable LocaleTable
    """
    babel_codes = [code for code in BUILTIN_LOCALES if code not in LOCALE_ALIASES]
    table = LocaleTable.from_babel(babel_codes, strict=False)
    aliases = {
        alias: table[target] for alias, target in LOCALE_ALIASES.items() if target in table
    }
    table = table.with_entries(aliases)
    logger.debug("Built default locale table with %d locales", len(table))
    return table
