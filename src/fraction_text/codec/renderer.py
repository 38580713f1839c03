"""
Rendering of numeric values as fraction text.

Three notations are produced from the same decomposition:

- ``UNICODE``: ``1½``, ``¹²³⁄₁₀₀₀`` or ``123⁄1000`` (inline fallback)
- ``BUILT_UP``: ``1 1/2``
- ``CASE_FRACTION``: plain ``1 1/2`` source text for downstream typography
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum

from fraction_text.codec.config import (
    FractionConfig,
    FractionType,
    NegativeFormatStyle,
    UnicodeFormattingStyle,
)
from fraction_text.codec.errors import MalformedInput
from fraction_text.codec.reducer import reduce_fraction
from fraction_text.codec.script_codec import to_subscript, to_superscript


class Sign(Enum):
    POSITIVE = "positive"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class FractionValue:
    """
    A mixed number split into sign, whole part and a reduced proper fraction.

    Attributes:
        sign: Sign of the original value
        whole: Non-negative integer part
        numerator: Reduced numerator, smaller than ``denominator`` unless zero
        denominator: Positive denominator, ``1`` when ``numerator`` is zero
    """

    sign: Sign
    whole: int
    numerator: int
    denominator: int

    def __post_init__(self) -> None:
        if self.whole < 0 or self.numerator < 0 or self.denominator <= 0:
            raise ValueError(f"Invalid fraction components: {self!r}")
        if self.numerator and self.numerator >= self.denominator:
            raise ValueError(f"Fraction must be proper: {self!r}")

    @property
    def is_negative(self) -> bool:
        return self.sign is Sign.NEGATIVE

    @property
    def fraction_value(self) -> float:
        return self.numerator / self.denominator

    def __float__(self) -> float:
        magnitude = self.whole + self.fraction_value
        return -magnitude if self.is_negative else magnitude


def decompose(value: float, config: FractionConfig) -> FractionValue:
    """
    Split ``value`` into whole and reduced fractional parts.

    A reduction that rounds up to a full unit (``0.999`` with a small
    ``MaxDenominator`` bound) is carried into the whole part.

    Raises:
        MalformedInput: If ``value`` is NaN, infinite or too large for a float
    """
    try:
        value = float(value)
    except OverflowError as exc:
        raise MalformedInput("Value out of floating point range") from exc
    if not math.isfinite(value):
        raise MalformedInput(f"Cannot format non-finite value {value!r}")

    is_negative = value < 0
    absolute = abs(value)
    whole = math.floor(absolute)
    numerator, denominator = reduce_fraction(absolute - whole, config.reduction_policy)
    if numerator == 0:
        denominator = 1
    elif numerator >= denominator:
        whole += numerator // denominator
        numerator %= denominator
        if numerator == 0:
            denominator = 1

    return FractionValue(
        sign=Sign.NEGATIVE if is_negative else Sign.POSITIVE,
        whole=whole,
        numerator=numerator,
        denominator=denominator,
    )


def _compose(parts: FractionValue, whole_separator: str, division_separator: str) -> str:
    components = []
    if parts.whole > 0:
        components.append(str(parts.whole))
    if parts.numerator > 0:
        components.append(f"{parts.numerator}{division_separator}{parts.denominator}")
    if not components:
        return "0"
    return whole_separator.join(components)


def format_built_up(parts: FractionValue, config: FractionConfig) -> str:
    return _compose(
        parts,
        config.built_up_whole_fraction_separator,
        config.built_up_division_separator,
    )


def format_case_fraction(parts: FractionValue, config: FractionConfig) -> str:
    return _compose(
        parts,
        config.case_fraction_whole_fraction_separator,
        config.case_fraction_division_separator,
    )


def format_unicode(parts: FractionValue, config: FractionConfig) -> str:
    """
    Vulgar glyph when the table has one, otherwise the configured fallback.

    Raises:
        Unrepresentable: If the superscript/subscript fallback cannot script
            the numerator or denominator
    """
    rendered = str(parts.whole) if parts.whole > 0 else ""
    if parts.numerator > 0:
        if parts.whole > 0:
            rendered += config.unicode_whole_fraction_separator

        glyph = config.vulgar_fraction_glyphs.glyph_for(parts.fraction_value)
        if glyph is not None:
            rendered += glyph
        elif config.unicode_formatting_style is UnicodeFormattingStyle.INLINE:
            rendered += (
                f"{parts.numerator}{config.unicode_division_separator}{parts.denominator}"
            )
        else:
            rendered += "".join(
                [
                    to_superscript(parts.numerator),
                    config.unicode_division_separator,
                    to_subscript(parts.denominator),
                ]
            )
    return rendered or "0"


def apply_negative_style(formatted_absolute: str, is_negative: bool, config: FractionConfig) -> str:
    if not is_negative:
        return formatted_absolute
    if config.negative_format_style is NegativeFormatStyle.PARENTHESIZED:
        return f"({formatted_absolute})"
    return f"{config.negative_sign_symbol}{formatted_absolute}"


_FORMATTERS = {
    FractionType.UNICODE: format_unicode,
    FractionType.BUILT_UP: format_built_up,
    FractionType.CASE_FRACTION: format_case_fraction,
}


def render(value: float, style: FractionType, config: FractionConfig) -> str:
    """
    Render ``value`` in the requested notation.

    Raises:
        MalformedInput: Non-finite value
        Unrepresentable: Unicode fallback cannot script the digits
    """
    parts = decompose(value, config)
    formatted = _FORMATTERS[FractionType(style)](parts, config)
    return apply_negative_style(formatted, parts.is_negative, config)


__all__ = [
    "FractionValue",
    "Sign",
    "apply_negative_style",
    "decompose",
    "format_built_up",
    "format_case_fraction",
    "format_unicode",
    "render",
]
