"""Unicode tables and numeric tolerances shared by the fraction codec.

All tables are read-only. Per-instance glyph tables are built from
``DEFAULT_VULGAR_FRACTIONS`` (see ``glyph_table.GlyphTable``) and never
mutate it.
"""

from types import MappingProxyType
from typing import Mapping, Tuple

# Canonical ASCII slash used internally for built-up text
SLASH = "/"
# U+2044 FRACTION SLASH
FRACTION_SLASH = "⁄"
# U+00A0 NO-BREAK SPACE, stripped during locale-aware parsing
NO_BREAK_SPACE = "\u00a0"

# Glyph keys are float approximations of repeating decimals
GLYPH_TOLERANCE = 1e-12
# Euclid stops once the remainder drops below this
GCD_EPSILON = 1e-7

STRICT_NUMBER_PATTERN = r"[+-]?([0-9]+(\.[0-9]+)?|\.[0-9]+)"

ASCII_DIGITS = "0123456789"

UNICODE_SUPERSCRIPT: Mapping[str, str] = MappingProxyType(
    {
        "-": "⁻",
        "0": "⁰",
        "1": "¹",
        "2": "²",
        "3": "³",
        "4": "⁴",
        "5": "⁵",
        "6": "⁶",
        "7": "⁷",
        "8": "⁸",
        "9": "⁹",
    }
)

UNICODE_SUBSCRIPT: Mapping[str, str] = MappingProxyType(
    {
        "-": "₋",
        "0": "₀",
        "1": "₁",
        "2": "₂",
        "3": "₃",
        "4": "₄",
        "5": "₅",
        "6": "₆",
        "7": "₇",
        "8": "₈",
        "9": "₉",
    }
)

# Ordered by value; denominators 2-10 and their proper complements
DEFAULT_VULGAR_FRACTIONS: Tuple[Tuple[float, str], ...] = (
    (1 / 10, "⅒"),
    (1 / 9, "⅑"),
    (1 / 8, "⅛"),
    (1 / 7, "⅐"),
    (1 / 6, "⅙"),
    (1 / 5, "⅕"),
    (1 / 4, "¼"),
    (1 / 3, "⅓"),
    (3 / 8, "⅜"),
    (2 / 5, "⅖"),
    (1 / 2, "½"),
    (3 / 5, "⅗"),
    (5 / 8, "⅝"),
    (2 / 3, "⅔"),
    (3 / 4, "¾"),
    (4 / 5, "⅘"),
    (5 / 6, "⅚"),
    (7 / 8, "⅞"),
)

DEFAULT_INPUT_DIVISION_SEPARATORS = frozenset({SLASH, FRACTION_SLASH})

# OpenType feature tags requested for case-fraction typography
OPENTYPE_DIAGONAL_FRACTIONS = "frac"
OPENTYPE_VERTICAL_FRACTIONS = "afrc"
