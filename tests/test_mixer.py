"""Tests for color mixing and blend modes."""

import pytest

from chromalut.converter import ConversionResult
from chromalut.errors import InvalidFormat, OutOfRangeValue, UnknownBlendMode
from chromalut.mixer import MixResult, blend_channels, mix_colors
from chromalut.types import RGBA

MODES = ["normal", "multiply", "screen", "overlay"]
SAMPLES = ["#000000", "#ffffff", "#3a7bd5", "#ff8800", "#12ab34"]


class TestEndpoints:
    @pytest.mark.parametrize("mode", MODES)
    def test_ratio_zero_is_first_color(self, mode):
        """ratio 0 always yields A."""
        assert mix_colors("#ff0000", "#00ff00", 0.0, mode).hex == "#ff0000"

    def test_normal_ratio_one_is_second_color(self):
        assert mix_colors("#ff0000", "#00ff00", 1.0, "normal").hex == "#00ff00"

    @pytest.mark.parametrize("color", SAMPLES)
    def test_normal_identical_colors(self, color):
        """Mixing a color with itself returns it unchanged."""
        for ratio in (0.1, 0.5, 0.9):
            assert mix_colors(color, color, ratio).hex == color

    @pytest.mark.parametrize("mode", MODES)
    def test_fixed_points(self, mode):
        """White and black are fixed under every blend."""
        assert mix_colors("#ffffff", "#ffffff", 0.7, mode).hex == "#ffffff"
        assert mix_colors("#000000", "#000000", 0.7, mode).hex == "#000000"


class TestBlendModes:
    @pytest.mark.parametrize("color", SAMPLES)
    def test_multiply_white_identity(self, color):
        """White is the multiply identity."""
        assert mix_colors("#ffffff", color, 1.0, "multiply").hex == color

    @pytest.mark.parametrize("color", SAMPLES)
    def test_screen_black_identity(self, color):
        """Black is the screen identity."""
        assert mix_colors("#000000", color, 1.0, "screen").hex == color

    @pytest.mark.parametrize(
        "mode,ratio,expected",
        [
            ("multiply", 1.0, "#404040"),
            ("multiply", 0.5, "#606060"),
            ("screen", 1.0, "#c0c0c0"),
            ("overlay", 1.0, "#808080"),
        ],
    )
    def test_gray_on_gray(self, mode, ratio, expected):
        """#808080 blended with itself."""
        assert mix_colors("#808080", "#808080", ratio, mode).hex == expected

    def test_overlay_dark_branch(self):
        """Channels below 128 take the multiply branch."""
        assert mix_colors("#404040", "#404040", 1.0, "overlay").hex == "#202020"

    def test_normal_uses_lab(self):
        """Red + green in LAB leans yellow rather than muddy brown."""
        r, g, b = mix_colors("#ff0000", "#00ff00", 0.5).color.rgb
        assert r > 150 and g > 150
        assert b < 50

    def test_blend_channels_identities(self):
        color = (10, 20, 30)
        assert blend_channels((255, 255, 255), color, "multiply") == color
        assert blend_channels((0, 0, 0), color, "screen") == color
        assert blend_channels((1, 2, 3), color, "normal") == color

    def test_blend_channels_unknown_mode(self):
        with pytest.raises(UnknownBlendMode):
            blend_channels((0, 0, 0), (1, 1, 1), "dodge")


class TestAlpha:
    @pytest.mark.parametrize("mode", MODES)
    def test_alpha_interpolated(self, mode):
        """Alpha is interpolated regardless of blend mode."""
        result = mix_colors("rgba(255, 0, 0, 0)", "rgba(0, 0, 255, 1)", 0.25, mode)
        assert result.color.a == 0.25

    def test_alpha_rounded(self):
        result = mix_colors("#ff0000", "#0000ff80", 0.5)
        assert result.color.a == 0.751

    def test_opaque_inputs_stay_opaque(self):
        assert mix_colors("red", "blue", 0.5, "screen").color.a == 1.0


class TestMixResult:
    def test_fields(self):
        result = mix_colors("red", RGBA(0, 0, 255), 0.5, "multiply")
        assert isinstance(result, MixResult)
        assert isinstance(result, ConversionResult)
        assert result.ratio == 0.5
        assert result.mode == "multiply"
        assert result.color_a == "red"
        assert result.color_b == "#0000ff"
        assert result.input == result.hex
        assert result.rgb is not None and result.lab is not None

    def test_formats(self):
        result = mix_colors("red", "blue", 0.5, formats=["hex"])
        assert result.hex is not None
        assert result.rgb is None

    def test_default_ratio_and_mode(self):
        result = mix_colors("red", "blue")
        assert (result.ratio, result.mode) == (0.5, "normal")


class TestMixErrors:
    def test_invalid_color(self):
        with pytest.raises(InvalidFormat):
            mix_colors("invalid", "#ff0000", 0.5)

    def test_unknown_mode(self):
        with pytest.raises(UnknownBlendMode):
            mix_colors("#ff0000", "#00ff00", 0.5, "unknown")
        with pytest.raises(UnknownBlendMode):
            mix_colors("#ff0000", "#00ff00", mode="unknown")

    @pytest.mark.parametrize("ratio", [-0.1, 1.5])
    def test_ratio_out_of_range(self, ratio):
        with pytest.raises(OutOfRangeValue):
            mix_colors("#ff0000", "#00ff00", ratio)
