"""Configuration management for fraction_text.

Usage:
    >>> from fraction_text.config import get_settings
    >>> settings = get_settings()
    >>> print(settings.parsing_locale)
"""

from fraction_text.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
