"""Superscript/subscript digit conversion."""

from __future__ import annotations

from typing import Mapping, Optional

from fraction_text.codec.constants import UNICODE_SUBSCRIPT, UNICODE_SUPERSCRIPT
from fraction_text.codec.errors import Unrepresentable

_REVERSE_SCRIPT = {
    glyph: char
    for table in (UNICODE_SUPERSCRIPT, UNICODE_SUBSCRIPT)
    for char, glyph in table.items()
}

SCRIPT_CHARACTERS = frozenset(_REVERSE_SCRIPT)


def digits_to_script(number: int, table: Mapping[str, str]) -> str:
    """
    Map every character of ``str(number)`` through ``table``.

    Args:
        number: Integer to convert, a leading minus is mapped too
        table: ASCII -> script glyph table

    Returns:
        Scripted text, e.g. ``123`` -> ``"¹²³"`` for superscript

    Raises:
        Unrepresentable: If any character has no mapping in ``table``
    """
    scripted = []
    for char in str(number):
        glyph = table.get(char)
        if glyph is None:
            raise Unrepresentable(f"Cannot script character {char!r} of {number}")
        scripted.append(glyph)
    return "".join(scripted)


def to_superscript(number: int) -> str:
    return digits_to_script(number, UNICODE_SUPERSCRIPT)


def to_subscript(number: int) -> str:
    return digits_to_script(number, UNICODE_SUBSCRIPT)


def script_to_digit(char: str) -> Optional[str]:
    """Return the ASCII digit (or minus) for a superscript/subscript glyph."""
    return _REVERSE_SCRIPT.get(char)


def contains_script(text: str) -> bool:
    return any(char in SCRIPT_CHARACTERS for char in text)


__all__ = [
    "SCRIPT_CHARACTERS",
    "contains_script",
    "digits_to_script",
    "script_to_digit",
    "to_subscript",
    "to_superscript",
]
