"""
Input normalization ahead of strict parsing.

Locale decimal/grouping symbols come from Babel's CLDR data. Unknown locales
fall back to ``.`` and ``,`` and are logged once per locale.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Tuple

from babel.core import UnknownLocaleError
from babel.numbers import get_decimal_symbol, get_group_symbol

from fraction_text.codec.config import FractionConfig
from fraction_text.codec.constants import NO_BREAK_SPACE, SLASH
from fraction_text.utils.logging import get_logger

logger = get_logger(__name__)

DEFAULT_DECIMAL_SYMBOL = "."
DEFAULT_GROUP_SYMBOL = ","


@lru_cache(maxsize=64)
def locale_separators(locale: str) -> Tuple[str, str]:
    """
    Return ``(decimal_symbol, group_symbol)`` for a locale identifier.

    Both ``de_DE`` and ``de-DE`` spellings are accepted.
    """
    identifier = locale.replace("-", "_")
    try:
        return get_decimal_symbol(identifier), get_group_symbol(identifier)
    except (UnknownLocaleError, ValueError, TypeError) as exc:
        logger.warning("locale.lookup_failed", locale=locale, error=str(exc))
        return DEFAULT_DECIMAL_SYMBOL, DEFAULT_GROUP_SYMBOL


def normalize_number_text(raw: str, config: FractionConfig) -> str:
    """Trim, drop grouping symbols and map the locale decimal symbol to ``.``."""
    normalized = raw.strip()
    if not config.allows_locale_aware_parsing:
        return normalized

    decimal_symbol, group_symbol = locale_separators(config.parsing_locale)
    if group_symbol:
        normalized = normalized.replace(group_symbol, "")
    normalized = normalized.replace(NO_BREAK_SPACE, "")
    if decimal_symbol != DEFAULT_DECIMAL_SYMBOL:
        normalized = normalized.replace(decimal_symbol, DEFAULT_DECIMAL_SYMBOL)
    return normalized


def normalize_division_separators(text: str, config: FractionConfig) -> str:
    """Rewrite every accepted division separator as the canonical slash."""
    normalized = text
    for separator in sorted(config.accepted_input_division_separators):
        if separator != SLASH:
            normalized = normalized.replace(separator, SLASH)
    return normalized


def normalize(raw: str, config: FractionConfig) -> str:
    """
    Canonical ASCII form of locale-formatted or mixed-notation input.

    With locale-aware parsing disabled only surrounding whitespace is trimmed.
    """
    normalized = normalize_number_text(raw, config)
    if not config.allows_locale_aware_parsing:
        return normalized
    return normalize_division_separators(normalized, config)


__all__ = [
    "locale_separators",
    "normalize",
    "normalize_division_separators",
    "normalize_number_text",
]
