"""Render measurements with the fraction formatter handling the number."""

import math
from decimal import Decimal
from typing import Optional

from babel.core import UnknownLocaleError
from babel.numbers import format_decimal

from fraction_text.codec import FractionFormatter, FractionType


def _numeric_text(value: float, formatter: FractionFormatter) -> str:
    # Spell the number the way the formatter's parser reads it back
    try:
        value = float(value)
    except OverflowError:
        return str(value)
    if not math.isfinite(value):
        return repr(value)

    config = formatter.config
    locale = config.parsing_locale if config.allows_locale_aware_parsing else "en_US"
    number = Decimal(repr(value))
    try:
        return format_decimal(
            number,
            locale=locale.replace("-", "_"),
            decimal_quantization=False,
            group_separator=False,
        )
    except (UnknownLocaleError, ValueError):
        # The normalizer falls back to "." for locales Babel does not know
        return format(number, "f")


def format_measurement(
    value: float,
    unit: str,
    formatter: FractionFormatter,
    plural_unit: Optional[str] = None,
    prefer_singular_for_proper_fractions: bool = False,
    style: FractionType = FractionType.UNICODE,
) -> str:
    """
    Format ``value`` followed by its unit, e.g. ``"1½ cups"``.

    The number goes through ``formatter.measurement_hook(style)``, so values
    the formatter cannot render appear as plain numeric text. ``plural_unit``
    is used for every value other than exactly one; with
    ``prefer_singular_for_proper_fractions`` values below one in magnitude
    keep the singular unit (``"½ cup"`` rather than ``"½ cups"``).

    >>> format_measurement(0.5, "cup", FractionFormatter(), plural_unit="cups")
    '½ cups'
    """
    render = formatter.measurement_hook(style)
    numeric_text = render(_numeric_text(value, formatter))

    unit_text = unit
    if plural_unit is not None and abs(value) != 1:
        unit_text = plural_unit
        if prefer_singular_for_proper_fractions and abs(value) < 1:
            unit_text = unit
    return f"{numeric_text} {unit_text}"


__all__ = ["format_measurement"]
