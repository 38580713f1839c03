"""
Per-instance configuration for the fraction codec.

``FractionConfig`` is owned by a single ``FractionFormatter``. Fields may be
reassigned between calls (assignment is validated) but are only read while a
parse/format call is running.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING, Any, FrozenSet, Iterable, Mapping

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fraction_text.codec.constants import (
    DEFAULT_INPUT_DIVISION_SEPARATORS,
    FRACTION_SLASH,
    OPENTYPE_DIAGONAL_FRACTIONS,
    OPENTYPE_VERTICAL_FRACTIONS,
    SLASH,
)
from fraction_text.codec.errors import InvalidConfiguration
from fraction_text.codec.glyph_table import GlyphTable
from fraction_text.codec.reducer import (
    ExactFromDecimalDigits,
    MaxDenominator,
    ReductionPolicy,
)

if TYPE_CHECKING:  # pragma: no cover - imported only for typing
    from fraction_text.config.settings import Settings


class FractionType(Enum):
    """Output notation."""

    UNICODE = "unicode"
    BUILT_UP = "built_up"
    CASE_FRACTION = "case_fraction"


class NegativeFormatStyle(Enum):
    """How negative values are shown: ``-1½`` or ``(1½)``."""

    PREFIXED_SIGN = "prefixed_sign"
    PARENTHESIZED = "parenthesized"


class UnicodeFormattingStyle(Enum):
    """Fallback used when no single vulgar glyph exists."""

    SUPERSCRIPT_SUBSCRIPT = "superscript_subscript"
    INLINE = "inline"


class CaseFractionStyle(Enum):
    """Typography hint for case-fraction output."""

    DIAGONAL = "diagonal"
    VERTICAL = "vertical"

    @property
    def opentype_feature(self) -> str:
        if self is CaseFractionStyle.VERTICAL:
            return OPENTYPE_VERTICAL_FRACTIONS
        return OPENTYPE_DIAGONAL_FRACTIONS


class FractionConfig(BaseModel):
    """Policy and style values threaded through normalizer, reducer and renderer."""

    model_config = ConfigDict(
        validate_assignment=True,
        arbitrary_types_allowed=True,
        extra="forbid",
    )

    reduction_policy: Any = Field(
        default_factory=ExactFromDecimalDigits,
        description="ExactFromDecimalDigits() or MaxDenominator(bound)",
    )
    negative_format_style: NegativeFormatStyle = NegativeFormatStyle.PREFIXED_SIGN
    negative_sign_symbol: str = "-"
    unicode_formatting_style: UnicodeFormattingStyle = (
        UnicodeFormattingStyle.SUPERSCRIPT_SUBSCRIPT
    )

    built_up_whole_fraction_separator: str = " "
    built_up_division_separator: str = SLASH
    case_fraction_whole_fraction_separator: str = " "
    case_fraction_division_separator: str = SLASH
    unicode_whole_fraction_separator: str = ""
    unicode_division_separator: str = FRACTION_SLASH

    accepted_input_division_separators: FrozenSet[str] = Field(
        default=DEFAULT_INPUT_DIVISION_SEPARATORS
    )
    vulgar_fraction_glyphs: GlyphTable = Field(default_factory=GlyphTable.default)

    parsing_locale: str = "en_US"
    allows_locale_aware_parsing: bool = True

    case_fraction_style: CaseFractionStyle = CaseFractionStyle.DIAGONAL

    @field_validator("reduction_policy", mode="plain")
    @classmethod
    def _check_policy(cls, value: Any) -> ReductionPolicy:
        if isinstance(value, MaxDenominator):
            if not isinstance(value.bound, int) or value.bound <= 0:
                raise InvalidConfiguration(
                    f"MaxDenominator bound must be a positive integer, got {value.bound!r}"
                )
            return value
        if isinstance(value, ExactFromDecimalDigits):
            return value
        raise InvalidConfiguration(f"Unknown reduction policy: {value!r}")

    @field_validator("accepted_input_division_separators", mode="before")
    @classmethod
    def _check_separators(cls, value: Any) -> FrozenSet[str]:
        if isinstance(value, str):
            value = set(value)
        if not isinstance(value, Iterable):
            raise InvalidConfiguration(
                f"Division separators must be an iterable of characters, got {value!r}"
            )
        separators = frozenset(value)
        for separator in separators:
            if not isinstance(separator, str) or len(separator) != 1:
                raise InvalidConfiguration(
                    f"Division separators must be single characters, got {separator!r}"
                )
        return separators

    @field_validator("vulgar_fraction_glyphs", mode="before")
    @classmethod
    def _coerce_glyphs(cls, value: Any) -> Any:
        if isinstance(value, Mapping):
            return GlyphTable.from_mapping(value)
        return value

    @classmethod
    def from_settings(cls, settings: "Settings") -> "FractionConfig":
        """Build an instance configuration from application settings."""
        policy: ReductionPolicy = ExactFromDecimalDigits()
        if settings.max_denominator is not None:
            policy = MaxDenominator(settings.max_denominator)
        return cls(
            reduction_policy=policy,
            parsing_locale=settings.parsing_locale,
            allows_locale_aware_parsing=settings.locale_aware_parsing,
        )


__all__ = [
    "CaseFractionStyle",
    "FractionConfig",
    "FractionType",
    "NegativeFormatStyle",
    "UnicodeFormattingStyle",
]
