"""
Reduction of a fractional remainder to a numerator/denominator pair.

Two policies are supported:

- ``ExactFromDecimalDigits``: keep every digit of the float's shortest
  decimal text (``repr``) and reduce ``digits / 10**n`` to lowest terms.
  Values such as ``1/3`` therefore reduce to ``3333333333333333/10**16``,
  which is still close enough to match the ``⅓`` glyph.
- ``MaxDenominator(bound)``: brute-force search for the closest
  ``n/k`` with ``k <= bound``.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from decimal import Decimal
from typing import Tuple, Union

from fraction_text.codec.constants import GCD_EPSILON
from fraction_text.codec.errors import FractionDefect, InvalidConfiguration


@dataclass(frozen=True)
class ExactFromDecimalDigits:
    """Preserve all observed decimal digits."""


@dataclass(frozen=True)
class MaxDenominator:
    """Approximate to the nearest rational whose denominator is at most ``bound``."""

    bound: int


ReductionPolicy = Union[ExactFromDecimalDigits, MaxDenominator]

Number = Union[int, float]


def greatest_common_divisor(x: Number, y: Number) -> Number:
    """
    Euclid's algorithm on magnitudes, stopping once ``y`` drops below 1e-7.

    Float operands tolerate representation noise; int operands stay exact
    because an int remainder below the epsilon is zero.
    """
    x, y = abs(x), abs(y)
    while y >= GCD_EPSILON:
        x, y = y, x % y
    return x


def reduce_fraction(fraction: float, policy: ReductionPolicy) -> Tuple[int, int]:
    """
    Reduce ``fraction`` (in [0, 1)) to ``(numerator, denominator)``.

    Raises:
        FractionDefect: If ``fraction`` is outside [0, 1)
        InvalidConfiguration: If a ``MaxDenominator`` bound is not positive
    """
    if not 0.0 <= fraction < 1.0:
        raise FractionDefect(f"Fractional part must be in [0, 1), got {fraction!r}")

    if isinstance(policy, MaxDenominator):
        return _reduce_max_denominator(fraction, policy.bound)
    if isinstance(policy, ExactFromDecimalDigits):
        return _reduce_exact(fraction)
    raise InvalidConfiguration(f"Unknown reduction policy: {policy!r}")


def _reduce_exact(fraction: float) -> Tuple[int, int]:
    if fraction == 0.0:
        return 0, 1

    # Decimal keeps exponent-notation reprs such as '1e-05' intact
    decimal_text = Decimal(repr(fraction))
    exponent = decimal_text.as_tuple().exponent
    digits = -exponent if isinstance(exponent, int) and exponent < 0 else 0
    if digits == 0:
        return 0, 1

    denominator = 10**digits
    numerator = math.floor(decimal_text.scaleb(digits))
    divisor = greatest_common_divisor(numerator, denominator)
    return numerator // divisor, denominator // divisor


def _reduce_max_denominator(fraction: float, bound: int) -> Tuple[int, int]:
    if bound <= 0:
        raise InvalidConfiguration(f"MaxDenominator bound must be positive, got {bound}")

    best_numerator = 0
    best_denominator = 1
    best_error = math.inf
    for denominator in range(1, bound + 1):
        # round half away from zero; fraction is never negative here
        numerator = math.floor(fraction * denominator + 0.5)
        error = abs(numerator / denominator - fraction)
        if error < best_error:
            best_error = error
            best_numerator = numerator
            best_denominator = denominator

    divisor = max(1, greatest_common_divisor(best_numerator, best_denominator))
    return best_numerator // divisor, best_denominator // divisor


__all__ = [
    "ExactFromDecimalDigits",
    "MaxDenominator",
    "ReductionPolicy",
    "greatest_common_divisor",
    "reduce_fraction",
]
