"""
Fraction text parser.

Accepted inputs, tried in order:

1. strict decimals: ``"1.5"``, ``"-.25"`` (locale separators honoured)
2. vulgar glyphs, optionally with a whole part: ``"½"``, ``"-1½"``, ``"5 ⅛"``
3. superscript/subscript fractions: ``"1¹²³⁄₁₀₀₀"``
4. built-up text: ``"3/4"``, ``"-1 1/2"``

Internal helpers return ``None`` when a step does not apply; ``parse``
raises a ``FractionError`` subclass when no step produces a value.
"""

from __future__ import annotations

import math
import re
from typing import Optional, Tuple

from fraction_text.codec.config import FractionConfig
from fraction_text.codec.constants import (
    ASCII_DIGITS,
    FRACTION_SLASH,
    SLASH,
    STRICT_NUMBER_PATTERN,
)
from fraction_text.codec.errors import InvalidFraction, MalformedInput
from fraction_text.codec.normalizer import (
    normalize_division_separators,
    normalize_number_text,
)
from fraction_text.codec.script_codec import contains_script, script_to_digit

_STRICT_NUMBER_RE = re.compile(STRICT_NUMBER_PATTERN)

# Two-token parses never exceed this
MAX_MIXED_PARTS = 2


def strict_number(text: str, config: FractionConfig) -> Optional[float]:
    """
    Parse ``text`` as a complete decimal number or return ``None``.

    Partial numeric prefixes (``"1/"``, ``"2 apples"``) and exponent notation
    are rejected, as are values that overflow to infinity.
    """
    normalized = normalize_number_text(text, config)
    if not normalized or not _STRICT_NUMBER_RE.fullmatch(normalized):
        return None
    value = float(normalized)
    return value if math.isfinite(value) else None


def parse_vulgar_fraction(text: str, config: FractionConfig) -> Optional[float]:
    """
    Parse text built around one vulgar glyph: ``"¾"``, ``"-½"``, ``"1000⅗"``.

    The first table entry whose glyph occurs in the text decides the outcome;
    a non-numeric remainder yields ``None`` without trying other entries.
    """
    trimmed = text.strip()
    for value, glyph in config.vulgar_fraction_glyphs:
        if trimmed == glyph:
            return value
        if trimmed == f"-{glyph}":
            return -value
        if glyph not in trimmed:
            continue

        remainder = trimmed.replace(glyph, "").strip()
        if remainder == "-":
            return -value
        whole = strict_number(remainder, config)
        if whole is None:
            return None
        if whole < 0 or remainder.startswith("-"):
            return whole - value
        return whole + value
    return None


def has_scripted_fraction(text: str) -> bool:
    return FRACTION_SLASH in text or contains_script(text)


def decode_scripted_fraction(text: str, config: FractionConfig) -> Tuple[str, str]:
    """
    Split superscript/subscript text into ``(integer, built_up_fraction)``.

    ``"1¹²³⁄₁₀₀₀"`` becomes ``("1", "123/1000")``. Plain digits belong to the
    integer part until the first slash or script digit; every later digit
    belongs to the fraction.

    Raises:
        MalformedInput: On an unmapped character or a misplaced minus
        InvalidFraction: If no fraction part was found
    """
    integer = []
    fraction = []
    for char in text:
        if char in ASCII_DIGITS:
            (fraction if fraction else integer).append(char)
        elif char == "-":
            if not integer and not fraction:
                integer.append(char)
            elif fraction:
                fraction.append(char)
            else:
                raise MalformedInput(f"Unexpected minus sign in {text!r}")
        elif char == SLASH or char in config.accepted_input_division_separators:
            fraction.append(SLASH)
        else:
            digit = script_to_digit(char)
            if digit is not None:
                fraction.append(digit)
            elif char.isspace():
                continue
            else:
                raise MalformedInput(f"Unsupported character {char!r} in {text!r}")

    if not fraction:
        raise InvalidFraction(f"No fraction found in {text!r}")
    return "".join(integer).strip(), "".join(fraction)


def join_decoded_parts(integer: str, fraction: str, separator: str) -> str:
    """Rebuild built-up text from decoded parts; a bare minus stays on the fraction."""
    if not integer:
        return fraction
    if integer == "-":
        return f"-{fraction}"
    return f"{integer}{separator}{fraction}"


def _parse_slash_token(token: str, config: FractionConfig) -> float:
    pieces = token.split(SLASH)
    if len(pieces) != 2:
        raise InvalidFraction(f"Expected numerator/denominator, got {token!r}")

    numerator = strict_number(pieces[0], config)
    denominator = strict_number(pieces[1], config)
    if numerator is None or denominator is None:
        raise InvalidFraction(f"Missing numerator or denominator in {token!r}")
    if denominator == 0:
        raise InvalidFraction(f"Zero denominator in {token!r}")

    quotient = numerator / denominator
    if not math.isfinite(quotient):
        raise InvalidFraction(f"Non-finite quotient for {token!r}")
    return quotient


def _sum_mixed_parts(text: str, config: FractionConfig) -> float:
    parts = text.split()
    if not parts:
        raise MalformedInput("Empty input")
    if len(parts) > MAX_MIXED_PARTS:
        raise MalformedInput(f"Too many components in {text!r}")

    negative_whole = len(parts) == MAX_MIXED_PARTS and parts[0].startswith("-")
    quantity = 0.0
    for part in parts:
        if SLASH in part:
            fraction = _parse_slash_token(part, config)
            if negative_whole and not part.startswith("-"):
                quantity -= fraction
            else:
                quantity += fraction
        else:
            number = strict_number(part, config)
            if number is None:
                raise MalformedInput(f"Not a number: {part!r}")
            quantity += number
    return quantity


def parse(raw: str, config: FractionConfig) -> float:
    """
    Parse fraction-like text into a float.

    Raises:
        MalformedInput: Empty text, unsupported characters, too many parts
        InvalidFraction: Broken slash expression or zero denominator
    """
    text = raw.strip()
    if not text:
        raise MalformedInput("Empty input")

    strict = strict_number(text, config)
    if strict is not None:
        return strict

    vulgar = parse_vulgar_fraction(text, config)
    if vulgar is not None:
        return vulgar

    text = normalize_division_separators(text, config)

    if has_scripted_fraction(text):
        integer, fraction = decode_scripted_fraction(text, config)
        text = join_decoded_parts(integer, fraction, " ")

    return _sum_mixed_parts(text, config)


__all__ = [
    "decode_scripted_fraction",
    "has_scripted_fraction",
    "join_decoded_parts",
    "parse",
    "parse_vulgar_fraction",
    "strict_number",
]
