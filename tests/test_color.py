"""Tests for crt_theme_generator.color — hex codec and alpha compositing."""

import pytest

from crt_theme_generator.color import (
    Color,
    composite,
    composite_hex,
    format_hex,
    normalize_hex,
    parse_hex,
    rgb_hex,
)
from crt_theme_generator.errors import MalformedColor, ThemeError


class TestParseHex:
    def test_short_forms(self):
        assert parse_hex("#000") == Color(0, 0, 0, 1)
        assert parse_hex("#fff") == Color(255, 255, 255, 1)
        assert parse_hex("#0000") == Color(0, 0, 0, 0)
        assert parse_hex("#ffff") == Color(255, 255, 255, 1)

    def test_long_forms(self):
        assert parse_hex("#000000") == Color(0, 0, 0, 1)
        assert parse_hex("#ffffff") == Color(255, 255, 255, 1)
        assert parse_hex("#00000000") == Color(0, 0, 0, 0)
        assert parse_hex("#ffffffff") == Color(255, 255, 255, 1)

    def test_alpha_is_normalized(self):
        assert parse_hex("#10203080").a == pytest.approx(128 / 255)
        assert parse_hex("#1238").a == pytest.approx(0x88 / 255)

    def test_uppercase(self):
        assert parse_hex("#D4D4D4") == Color(212, 212, 212, 1)

    def test_shorthand_equivalence(self):
        assert parse_hex("#abc") == parse_hex("#aabbcc") == parse_hex("#aabbccff")

    @pytest.mark.parametrize(
        "value", ["#ff", "fff", "#fff\n", "#ggg", "#fffff", "#1234567", "", "#", None, 0xFFFFFF]
    )
    def test_malformed(self, value):
        with pytest.raises(MalformedColor) as exc:
            parse_hex(value)
        assert exc.value.value == value

    def test_malformed_is_theme_error_and_value_error(self):
        with pytest.raises(ThemeError):
            parse_hex("#12")
        with pytest.raises(ValueError):
            parse_hex("#12")


class TestFormatHex:
    def test_opaque_white(self):
        assert format_hex(Color(255, 255, 255, 1)) == "#ffffffff"

    def test_half_alpha_rounds_up(self):
        assert format_hex(Color(128, 128, 128, 0.5)) == "#80808080"

    def test_always_eight_digits(self):
        assert format_hex(parse_hex("#abc")) == "#aabbccff"
        assert format_hex(Color(1, 2, 3, 0)) == "#01020300"

    def test_clamps_out_of_range(self):
        assert format_hex(Color(300, -5, 12.4, 1.5)) == "#ff000cff"

    def test_round_trip(self):
        for color in [Color(10, 20, 30, 0.5), Color(0, 129, 255, 0.4), Color(255, 0, 7, 1)]:
            parsed = parse_hex(format_hex(color))
            assert parsed[:3] == color[:3]
            assert abs(parsed.a - color.a) <= 1 / 255


class TestHelpers:
    def test_rgb_hex_drops_alpha(self):
        assert rgb_hex("#12345678") == "#123456"
        assert rgb_hex(Color(255, 0, 0, 0.2)) == "#ff0000"
        assert rgb_hex("#f00") == "#ff0000"

    def test_normalize_hex(self):
        assert normalize_hex("#1E1E1E") == "#1e1e1eff"


class TestComposite:
    def test_known_value(self):
        assert composite(Color(0, 129, 255, 0.4), Color(255, 255, 255, 1)) == Color(
            153, 205, 255, 1
        )

    def test_opaque_foreground_ignores_background(self):
        assert composite(Color(255, 255, 255, 1), Color(0, 0, 0, 1)) == Color(255, 255, 255, 1)

    def test_transparent_foreground_yields_background(self):
        assert composite(Color(200, 100, 50, 0), Color(12, 34, 56, 1)) == Color(12, 34, 56, 1)

    def test_background_alpha_ignored(self):
        assert composite(Color(0, 0, 0, 0), Color(12, 34, 56, 0.1)) == Color(12, 34, 56, 1)

    def test_result_is_opaque(self):
        assert composite(Color(10, 10, 10, 0.3), Color(90, 90, 90, 1)).a == 1


class TestCompositeHex:
    def test_known_value(self):
        fg = format_hex(Color(0, 129, 255, 0.4))
        bg = format_hex(Color(255, 255, 255, 1))
        assert composite_hex(fg, bg) == "#99cdffff"

    def test_opaque_pairs(self):
        assert composite_hex("#ffffffff", "#000000") == "#ffffffff"
        assert composite_hex("#000000ff", "#ffffff") == "#000000ff"

    def test_malformed_background(self):
        with pytest.raises(MalformedColor):
            composite_hex("#000000ff", "#ff")
