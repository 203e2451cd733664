"""Shared constants for sqlnumfmt.

This module provides centralized configuration constants used across the
diagnostics and runtime packages. Placing constants here avoids circular
imports and provides a single source of truth.

Constants are grouped by domain:
- Locale defaults: Separators used when no locale is requested
- Grouping: Integer-part digit grouping
- Cache limits: Memory bounds for caching subsystems
- Built-in locales: Locale set of the default lookup table

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Locale defaults
    "DEFAULT_LOCALE",
    "DEFAULT_GROUPING_SEPARATOR",
    "DEFAULT_DECIMAL_SEPARATOR",
    # Grouping
    "GROUP_SIZE",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
    # Built-in locales
    "BUILTIN_LOCALES",
    # Function names
    "FORMAT_FUNCTION_NAME",
    # Locale aliases
    "LOCALE_ALIASES",
]

# ============================================================================
# LOCALE DEFAULTS
# ============================================================================

# Locale used when FORMAT() receives no locale, NULL, or an empty string.
DEFAULT_LOCALE: str = "en_US"

# Separators of the default locale. These are fixed and never looked up,
# so FORMAT() with two arguments does not depend on CLDR data.
DEFAULT_GROUPING_SEPARATOR: str = ","
DEFAULT_DECIMAL_SEPARATOR: str = "."

# ============================================================================
# GROUPING
# ============================================================================

# Digits per group in the integer part. FORMAT() always groups by three,
# regardless of CLDR secondary grouping (e.g. Indian lakh/crore).
GROUP_SIZE: int = 3

# ============================================================================
# CACHE LIMITS
# ============================================================================

# Maximum cached Babel Locale objects.
# 128 covers the built-in table plus application-registered locales.
MAX_LOCALE_CACHE_SIZE: int = 128

# ============================================================================
# BUILT-IN LOCALES
# ============================================================================

# Locales available in the default lookup table. Mirrors the locale set that
# MySQL-compatible engines accept as the third FORMAT() argument.
BUILTIN_LOCALES: tuple[str, ...] = (
    "ar_AE", "ar_BH", "ar_DZ", "ar_EG", "ar_IQ", "ar_JO", "ar_KW",
    "ar_LB", "ar_LY", "ar_MA", "ar_OM", "ar_QA", "ar_SA", "ar_SD", "ar_SY",
    "ar_TN", "ar_YE", "be_BY", "bg_BG", "ca_ES", "cs_CZ", "da_DK", "de_AT",
    "de_BE", "de_CH", "de_DE", "de_LU", "el_GR", "en_AU", "en_CA", "en_GB",
    "en_IN", "en_NZ", "en_PH", "en_US", "en_ZA", "en_ZW", "es_AR", "es_BO",
    "es_CL", "es_CO", "es_CR", "es_DO", "es_EC", "es_ES", "es_GT", "es_HN",
    "es_MX", "es_NI", "es_PA", "es_PE", "es_PR", "es_PY", "es_SV", "es_US",
    "es_UY", "es_VE", "et_EE", "eu_ES", "fi_FI", "fo_FO", "fr_BE", "fr_CA",
    "fr_CH", "fr_FR", "fr_LU", "gl_ES", "gu_IN", "he_IL", "hi_IN", "hr_HR",
    "hu_HU", "id_ID", "is_IS", "it_CH", "it_IT", "ja_JP", "ko_KR", "lt_LT",
    "lv_LV", "mk_MK", "mn_MN", "ms_MY", "nb_NO", "nl_BE", "nl_NL", "no_NO",
    "pl_PL", "pt_BR", "pt_PT", "rm_CH", "ro_RO", "ru_RU", "ru_UA", "sk_SK",
    "sl_SI", "sq_AL", "sr_RS", "sv_FI", "sv_SE", "ta_IN", "te_IN", "th_TH",
    "tr_TR", "uk_UA", "ur_PK", "vi_VN", "zh_CN", "zh_HK", "zh_TW",
)

# ============================================================================
# FUNCTION NAMES
# ============================================================================

# SQL name under which the formatter is registered.
FORMAT_FUNCTION_NAME: str = "FORMAT"

# ============================================================================
# LOCALE ALIASES
# ============================================================================

# Built-in locales with no CLDR data of their own, mapped to the locale
# whose separators they share. Bokmål ("nb") replaced "no" in CLDR.
LOCALE_ALIASES: dict[str, str] = {
    "no_NO": "nb_NO",
}
