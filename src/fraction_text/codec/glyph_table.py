"""Vulgar fraction glyph table with tolerance-based lookup."""

from __future__ import annotations

from typing import Iterable, Iterator, Mapping, Optional, Tuple, Union

from fraction_text.codec.constants import DEFAULT_VULGAR_FRACTIONS, GLYPH_TOLERANCE

GlyphEntries = Union[Mapping[float, str], Iterable[Tuple[float, str]]]


class GlyphTable:
    """
    Ordered mapping from a decimal value in [0, 1) to a single glyph.

    Keys are float approximations (``1 / 3`` and friends), so lookups compare
    with an absolute tolerance instead of hashing. Instances are immutable;
    build a new table with ``from_mapping`` to customise glyphs.

    Example:
        >>> table = GlyphTable.default()
        >>> table.glyph_for(0.5)
        '½'
        >>> table.value_for("¾")
        0.75
    """

    __slots__ = ("_entries", "_tolerance")

    def __init__(
        self,
        entries: GlyphEntries = DEFAULT_VULGAR_FRACTIONS,
        tolerance: float = GLYPH_TOLERANCE,
    ) -> None:
        items = entries.items() if isinstance(entries, Mapping) else entries
        normalized = []
        for value, glyph in items:
            value = float(value)
            if not 0.0 <= value < 1.0:
                raise ValueError(f"Glyph value must be in [0, 1): {value!r}")
            if not isinstance(glyph, str) or not glyph:
                raise ValueError(f"Glyph for {value!r} must be a non-empty string")
            normalized.append((value, glyph))
        self._entries: Tuple[Tuple[float, str], ...] = tuple(normalized)
        self._tolerance = tolerance

    @classmethod
    def default(cls) -> "GlyphTable":
        return cls(DEFAULT_VULGAR_FRACTIONS)

    @classmethod
    def from_mapping(cls, mapping: GlyphEntries) -> "GlyphTable":
        """Build a replacement table from ``{value: glyph}`` or value/glyph pairs."""
        return cls(mapping)

    def glyph_for(self, value: float) -> Optional[str]:
        for key, glyph in self._entries:
            if abs(key - value) < self._tolerance:
                return glyph
        return None

    def value_for(self, glyph: str) -> Optional[float]:
        for key, candidate in self._entries:
            if candidate == glyph:
                return key
        return None

    @property
    def glyphs(self) -> Tuple[str, ...]:
        return tuple(glyph for _, glyph in self._entries)

    def __iter__(self) -> Iterator[Tuple[float, str]]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GlyphTable):
            return NotImplemented
        return self._entries == other._entries

    def __hash__(self) -> int:
        return hash(self._entries)

    def __repr__(self) -> str:
        return f"GlyphTable({len(self._entries)} entries)"


__all__ = ["GlyphTable"]
