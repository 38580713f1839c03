"""
Fraction codec: parse fraction text into numbers and render numbers as fractions.

Leaves first: ``script_codec``, ``glyph_table``, ``reducer``, ``config``,
``normalizer``, ``parser``, ``renderer``; ``formatter`` owns a configuration
and exposes the public operations.
"""

from fraction_text.codec.config import (
    CaseFractionStyle,
    FractionConfig,
    FractionType,
    NegativeFormatStyle,
    UnicodeFormattingStyle,
)
from fraction_text.codec.errors import (
    FractionDefect,
    FractionError,
    InvalidConfiguration,
    InvalidFraction,
    MalformedInput,
    Unrepresentable,
)
from fraction_text.codec.formatter import FractionFormatter, StyledFraction
from fraction_text.codec.glyph_table import GlyphTable
from fraction_text.codec.reducer import (
    ExactFromDecimalDigits,
    MaxDenominator,
    ReductionPolicy,
    greatest_common_divisor,
    reduce_fraction,
)
from fraction_text.codec.renderer import FractionValue, Sign

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
    "ReductionPolicy",
    "Sign",
    "StyledFraction",
    "UnicodeFormattingStyle",
    "Unrepresentable",
    "greatest_common_divisor",
    "reduce_fraction",
]
