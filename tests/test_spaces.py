"""Tests for color space transforms and canonical string formatting."""

import itertools

import pytest

from chromalut.formatting import (
    format_cmyk,
    format_hsb,
    format_hsl,
    format_hsla,
    format_lab,
    format_number,
    format_rgb,
    format_rgba,
    format_xyz,
)
from chromalut.parser import parse
from chromalut.spaces import (
    cmyk_to_rgb,
    hex_to_rgb,
    hsb_to_rgb,
    hsl_to_rgb,
    lab_to_lch,
    lab_to_rgb,
    lch_to_lab,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsb,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_rgb,
)
from chromalut.types import CMYK, HSB, HSL, LAB, RGBA, XYZ

GRID = range(0, 256, 15)


@pytest.fixture
def primaries():
    return {
        "red": RGBA(255, 0, 0),
        "green": RGBA(0, 255, 0),
        "blue": RGBA(0, 0, 255),
        "white": RGBA(255, 255, 255),
        "black": RGBA(0, 0, 0),
    }


class TestHex:
    @pytest.mark.parametrize("value", ["#a1b2c3", "#000000", "#ffffff", "#7f7f7f"])
    def test_round_trip(self, value):
        """hex -> rgb -> hex is the identity on lowercase 6-digit hex."""
        assert rgb_to_hex(hex_to_rgb(value)) == value

    def test_uppercase_normalized(self):
        assert rgb_to_hex(hex_to_rgb("#A1B2C3")) == "#a1b2c3"

    def test_alpha_round_trip(self):
        """Every alpha byte survives the round trip, opaque included."""
        for n in range(256):
            value = f"#102030{n:02x}"
            assert rgb_to_hex(hex_to_rgb(value)) == value

    @pytest.mark.parametrize("value", ["#ff0000ff", "#102030ff", "#10203000", "#ffffff80"])
    def test_eight_digit_round_trip(self, value):
        assert rgb_to_hex(hex_to_rgb(value)) == value

    def test_short_alpha_expands(self):
        assert rgb_to_hex(hex_to_rgb("#f00f")) == "#ff0000ff"
        assert rgb_to_hex(hex_to_rgb("#f00")) == "#ff0000"

    def test_explicit_alpha_ignored_by_equality(self):
        """An opaque 8-digit color equals its 6-digit form."""
        assert hex_to_rgb("#ff0000ff") == RGBA(255, 0, 0)
        assert hex_to_rgb("#ff0000ff") == hex_to_rgb("#ff0000")
        assert len({hex_to_rgb("#ff0000ff"), RGBA(255, 0, 0)}) == 1

    def test_parsed_alpha_kept_in_hex(self):
        """Functional notations with an alpha component keep it in hex."""
        assert parse("rgba(255, 0, 0, 1)").hex == "#ff0000ff"
        assert parse("hsla(0, 100%, 50%, 1)").hex == "#ff0000ff"
        assert parse("rgb(255, 0, 0)").hex == "#ff0000"
        assert parse("hsl(0, 100%, 50%)").hex == "#ff0000"


class TestHSL:
    def test_primaries(self, primaries):
        assert rgb_to_hsl(primaries["red"]) == HSL(0, 100, 50)
        assert rgb_to_hsl(primaries["green"]) == HSL(120, 100, 50)
        assert rgb_to_hsl(primaries["blue"]) == HSL(240, 100, 50)
        assert rgb_to_hsl(primaries["white"]) == HSL(0, 0, 100)

    def test_gray(self):
        assert rgb_to_hsl(RGBA(128, 128, 128)) == HSL(0, 0, 50)

    def test_components_are_whole_numbers(self):
        hsl = rgb_to_hsl(RGBA(12, 200, 77))
        assert all(float(v).is_integer() for v in (hsl.h, hsl.s, hsl.l))

    @pytest.mark.parametrize(
        "hsl,expected",
        [
            (HSL(0, 100, 50), (255, 0, 0)),
            (HSL(60, 100, 50), (255, 255, 0)),
            (HSL(180, 100, 50), (0, 255, 255)),
            (HSL(300, 100, 50), (255, 0, 255)),
            (HSL(0, 0, 0), (0, 0, 0)),
            (HSL(360, 100, 50), (255, 0, 0)),
        ],
    )
    def test_hsl_to_rgb(self, hsl, expected):
        assert hsl_to_rgb(hsl).rgb == expected


class TestHSB:
    def test_primaries(self, primaries):
        assert rgb_to_hsb(primaries["red"]) == HSB(0, 100, 100)
        assert rgb_to_hsb(primaries["black"]) == HSB(0, 0, 0)

    @pytest.mark.parametrize(
        "hsb,expected",
        [
            (HSB(0, 100, 100), (255, 0, 0)),
            (HSB(120, 100, 100), (0, 255, 0)),
            (HSB(240, 100, 100), (0, 0, 255)),
            (HSB(0, 0, 100), (255, 255, 255)),
        ],
    )
    def test_hsb_to_rgb(self, hsb, expected):
        assert hsb_to_rgb(hsb).rgb == expected


class TestCMYK:
    def test_black_first(self, primaries):
        """k is computed first; pure black is all key."""
        assert rgb_to_cmyk(primaries["red"]) == CMYK(0, 100, 100, 0)
        assert rgb_to_cmyk(primaries["black"]) == CMYK(0, 0, 0, 100)
        assert rgb_to_cmyk(primaries["white"]) == CMYK(0, 0, 0, 0)

    def test_cmyk_to_rgb(self):
        assert cmyk_to_rgb(CMYK(0, 100, 100, 0)).rgb == (255, 0, 0)
        assert cmyk_to_rgb(CMYK(0, 0, 0, 50)).rgb == (128, 128, 128)


class TestXYZAndLab:
    def test_white_point(self, primaries):
        xyz = rgb_to_xyz(primaries["white"])
        assert xyz.x == pytest.approx(95.047, abs=0.01)
        assert xyz.y == pytest.approx(100.0, abs=0.01)
        assert xyz.z == pytest.approx(108.883, abs=0.01)

    def test_red_lab(self, primaries):
        lab = rgb_to_lab(primaries["red"])
        assert lab.l == pytest.approx(53.24, abs=0.05)
        assert lab.a == pytest.approx(80.09, abs=0.05)
        assert lab.b == pytest.approx(67.20, abs=0.05)

    def test_white_and_black_lab(self, primaries):
        white = rgb_to_lab(primaries["white"])
        black = rgb_to_lab(primaries["black"])
        assert white.l == pytest.approx(100.0, abs=0.05)
        assert abs(white.a) < 0.05 and abs(white.b) < 0.05
        assert black.as_tuple() == pytest.approx((0.0, 0.0, 0.0), abs=1e-9)

    def test_xyz_round_trip_grid(self):
        """RGB -> XYZ -> RGB stays within two steps per channel."""
        for r, g, b in itertools.product(GRID, GRID, GRID):
            back = xyz_to_rgb(rgb_to_xyz(RGBA(r, g, b)))
            assert max(abs(back.r - r), abs(back.g - g), abs(back.b - b)) <= 2

    def test_lab_round_trip_grid(self):
        """RGB -> LAB -> RGB stays within two steps per channel."""
        for r, g, b in itertools.product(GRID, GRID, GRID):
            back = lab_to_rgb(rgb_to_lab(RGBA(r, g, b)))
            assert max(abs(back.r - r), abs(back.g - g), abs(back.b - b)) <= 2

    def test_out_of_gamut_clamps(self):
        """Extreme LAB values clamp instead of failing."""
        color = lab_to_rgb(LAB(50, 127, -127))
        assert all(0 <= c <= 255 for c in color.rgb)

    def test_lch(self):
        lightness, chroma, h = lab_to_lch(LAB(50, 0, 10))
        assert (lightness, chroma) == (50, 10)
        assert h == pytest.approx(90.0)
        lab = lch_to_lab(50, 10, 90)
        assert lab.a == pytest.approx(0.0, abs=1e-9)
        assert lab.b == pytest.approx(10.0)

    def test_achromatic_lch_hue(self):
        assert lab_to_lch(LAB(40, 0, 0))[2] == 0.0


class TestFormatting:
    @pytest.mark.parametrize(
        "value,decimals,expected",
        [(50.0, 0, "50"), (53.2408, 2, "53.24"), (0.5, 3, "0.5"), (-0.0001, 2, "0"), (67.2032, 2, "67.2")],
    )
    def test_format_number(self, value, decimals, expected):
        assert format_number(value, decimals) == expected

    def test_formats(self):
        """Bare commas, no spaces."""
        assert format_rgb(RGBA(0, 0, 255)) == "rgb(0,0,255)"
        assert format_rgba(RGBA(255, 0, 0, 0.5)) == "rgba(255,0,0,0.5)"
        assert format_rgba(RGBA(255, 0, 0)) == "rgba(255,0,0,1)"
        assert format_hsl(HSL(0, 100, 50)) == "hsl(0,100%,50%)"
        assert format_hsla(HSL(0, 100, 50), 0.25) == "hsla(0,100%,50%,0.25)"
        assert format_hsb(HSB(240, 100, 100)) == "hsb(240,100%,100%)"
        assert format_cmyk(CMYK(0, 100, 100, 0)) == "cmyk(0%,100%,100%,0%)"
        assert format_lab(LAB(53.2408, 80.0925, 67.2032)) == "lab(53.24%,80.09,67.2)"
        assert format_xyz(XYZ(41.246, 21.267, 1.933)) == "xyz(41.246,21.267,1.933)"
