"""
fraction_text: convert between numbers and human-readable fraction text.

Usage:
    # 1. Owned formatter instance with explicit configuration
    from fraction_text import FractionFormatter, FractionType, MaxDenominator

    formatter = FractionFormatter(reduction_policy=MaxDenominator(16))
    formatter.format_number(0.3333)                        # '⅓'
    formatter.format_number(2.2, FractionType.BUILT_UP)    # '2 1/5'
    formatter.parse_to_number("-1 1/2")                    # -1.5

    # 2. One-off helpers configured from environment settings
    from fraction_text import format_number, parse_to_number

    parse_to_number("1½")                                  # 1.5
"""

from typing import Optional

from fraction_text.codec import (
    CaseFractionStyle,
    ExactFromDecimalDigits,
    FractionConfig,
    FractionDefect,
    FractionError,
    FractionFormatter,
    FractionType,
    FractionValue,
    GlyphTable,
    InvalidConfiguration,
    InvalidFraction,
    MalformedInput,
    MaxDenominator,
    NegativeFormatStyle,
    Sign,
    StyledFraction,
    UnicodeFormattingStyle,
    Unrepresentable,
)

__version__ = "1.0.0"


def parse_to_number(text: str) -> Optional[float]:
    """Parse fraction text with a settings-configured formatter."""
    return FractionFormatter.from_settings().parse_to_number(text)


def format_number(
    value: float, style: FractionType = FractionType.UNICODE
) -> Optional[str]:
    """Format a number with a settings-configured formatter."""
    return FractionFormatter.from_settings().format_number(value, style)


def format_text(text: str, style: FractionType = FractionType.UNICODE) -> Optional[str]:
    """Re-format fraction text with a settings-configured formatter."""
    return FractionFormatter.from_settings().format_text(text, style)


__all__ = [
    "CaseFractionStyle",
    "ExactFromDecimalDigits",
    "FractionConfig",
    "FractionDefect",
    "FractionError",
    "FractionFormatter",
    "FractionType",
    "FractionValue",
    "GlyphTable",
    "InvalidConfiguration",
    "InvalidFraction",
    "MalformedInput",
    "MaxDenominator",
    "NegativeFormatStyle",
    "Sign",
    "StyledFraction",
    "UnicodeFormattingStyle",
    "Unrepresentable",
    "format_number",
    "format_text",
    "parse_to_number",
]
