"""Tests for fraction text parsing."""

import pytest

from fraction_text.codec.config import FractionConfig
from fraction_text.codec.errors import FractionError, InvalidFraction, MalformedInput
from fraction_text.codec.glyph_table import GlyphTable
from fraction_text.codec.parser import (
    decode_scripted_fraction,
    join_decoded_parts,
    parse,
    parse_vulgar_fraction,
    strict_number,
)


@pytest.mark.unit
class TestStrictNumber:
    @pytest.mark.parametrize(
        "text,expected",
        [("1.5", 1.5), ("-2", -2.0), (".25", 0.25), ("+3", 3.0), (" 4 ", 4.0)],
    )
    def test_complete_decimals(self, config, text, expected):
        assert strict_number(text, config) == expected

    @pytest.mark.parametrize(
        "text", ["", "1/", "2 apples", "1e5", "inf", "nan", "1.", "١٢"]
    )
    def test_rejects_partial_or_non_decimal_text(self, config, text):
        assert strict_number(text, config) is None

    def test_overflow_rejected(self, config):
        assert strict_number("9" * 400, config) is None


@pytest.mark.unit
class TestVulgarFractions:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("½", 0.5),
            ("-½", -0.5),
            ("1½", 1.5),
            ("-1½", -1.5),
            ("5 ⅛", 5.125),
            ("1000⅗", 1000.6),
            ("- ¾", -0.75),
        ],
    )
    def test_glyph_with_optional_whole_part(self, config, text, expected):
        assert parse_vulgar_fraction(text, config) == pytest.approx(expected)

    def test_non_numeric_remainder_is_not_a_vulgar_fraction(self, config):
        assert parse_vulgar_fraction("1½ inches", config) is None

    def test_text_without_glyph(self, config):
        assert parse_vulgar_fraction("1 1/2", config) is None

    def test_custom_table(self):
        config = FractionConfig(vulgar_fraction_glyphs=GlyphTable.from_mapping({0.5: "h"}))

        assert parse_vulgar_fraction("2h", config) == 2.5
        assert parse_vulgar_fraction("½", config) is None


@pytest.mark.unit
class TestScriptedFractions:
    def test_decode_mixed(self, config):
        assert decode_scripted_fraction("1¹²³/₁₀₀₀", config) == ("1", "123/1000")

    def test_decode_negative_subscript(self, config):
        assert decode_scripted_fraction("¹²³/₋₁₀₀₀", config) == ("", "123/-1000")

    def test_decode_leading_minus(self, config):
        assert decode_scripted_fraction("-¹/₂", config) == ("-", "1/2")

    def test_decode_without_fraction_raises(self, config):
        with pytest.raises(InvalidFraction):
            decode_scripted_fraction("12", config)

    def test_decode_unsupported_character_raises(self, config):
        with pytest.raises(MalformedInput):
            decode_scripted_fraction("1¹x/₂", config)

    def test_join_decoded_parts(self):
        assert join_decoded_parts("1", "1/2", " ") == "1 1/2"
        assert join_decoded_parts("", "1/2", " ") == "1/2"
        assert join_decoded_parts("-", "1/2", " ") == "-1/2"


@pytest.mark.unit
class TestParse:
    @pytest.mark.parametrize(
        "text,expected",
        [
            ("0", 0.0),
            ("3/4", 0.75),
            ("1 1/2", 1.5),
            ("-1 1/2", -1.5),
            ("-1/2", -0.5),
            ("1 -1/2", 0.5),
            ("1⁄2", 0.5),
            ("¹⁄₂", 0.5),
            ("1¹²³⁄₁₀₀₀", 1.123),
            ("¹²³⁄₋₁₀₀₀", -0.123),
            ("-¹⁄₂", -0.5),
            ("  2.5  ", 2.5),
        ],
    )
    def test_accepted_inputs(self, config, text, expected):
        assert parse(text, config) == pytest.approx(expected)

    @pytest.mark.parametrize(
        "text", ["1/", "/2", "/", "1//2", "1/0", "0/0", "1 1/0"]
    )
    def test_broken_slash_expressions(self, config, text):
        with pytest.raises(InvalidFraction):
            parse(text, config)

    @pytest.mark.parametrize(
        "text", ["", "   ", "a", "11.5 inches", "1 1/2 10", "1½ inches", "½ ¾ 1"]
    )
    def test_malformed_inputs(self, config, text):
        with pytest.raises(FractionError):
            parse(text, config)

    def test_comma_decimal_locale(self):
        config = FractionConfig(parsing_locale="de_DE")

        assert parse("1,5", config) == 1.5
        assert parse("1,5/3", config) == 0.5

    def test_custom_division_separator(self):
        config = FractionConfig(accepted_input_division_separators={"/", ":"})

        assert parse("1 3:4", config) == 1.75
