"""Tests for WCAG contrast checks and accessible color suggestions."""

import pytest

from chromalut.accessibility import (
    RECOMMENDATIONS,
    AccessibleColor,
    _recommend,
    check_contrast,
    contrast_ratio,
    contrast_report,
    find_accessible_color,
    relative_luminance,
    suggest_accessible_pairs,
)
from chromalut.errors import InvalidFormat, OutOfRangeValue
from chromalut.spaces import rgb_to_hsl
from chromalut.types import RGBA


class TestLuminance:
    def test_extremes(self):
        assert relative_luminance("#ffffff") == pytest.approx(1.0)
        assert relative_luminance("#000000") == 0.0

    def test_green_weighs_most(self):
        assert relative_luminance("#00ff00") > relative_luminance("#ff0000") > relative_luminance("#0000ff")

    def test_accepts_tuples(self):
        assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)


class TestContrast:
    def test_black_on_white(self):
        result = check_contrast("#000000", "#ffffff")
        assert result.ratio == 21.0
        assert result.aa_normal and result.aa_large
        assert result.aaa_normal and result.aaa_large
        assert result.recommendation == RECOMMENDATIONS["aaa"]

    def test_symmetric(self):
        assert contrast_ratio("#3a7bd5", "#ffffff") == contrast_ratio("#ffffff", "#3a7bd5")

    def test_same_color(self):
        result = check_contrast("#3a7bd5", "#3a7bd5")
        assert result.ratio == 1.0
        assert not result.aa_large
        assert result.recommendation == RECOMMENDATIONS["fail"]

    def test_large_text_only(self):
        """#777777 on white sits just under 4.5."""
        result = check_contrast("#777777", "#ffffff")
        assert result.ratio == 4.48
        assert result.aa_large
        assert not result.aa_normal
        assert result.recommendation == RECOMMENDATIONS["aa_large"]

    def test_aa(self):
        result = check_contrast("#666666", "#ffffff")
        assert result.aa_normal and not result.aaa_normal
        assert result.recommendation == RECOMMENDATIONS["aa"]

    def test_ratio_bounds(self):
        for fg, bg in [("red", "blue"), ("#123456", "#fedcba"), ("white", "white")]:
            assert 1.0 <= check_contrast(fg, bg).ratio <= 21.0

    def test_to_dict(self):
        data = check_contrast("#000000", "#ffffff").to_dict()
        assert data["ratio"] == 21.0
        assert data["passes"] == {
            "aa": {"normal": True, "large": True},
            "aaa": {"normal": True, "large": True},
        }

    def test_invalid_color(self):
        with pytest.raises(InvalidFormat):
            check_contrast("bogus", "#ffffff")

    @pytest.mark.parametrize(
        "ratio,key",
        [(21.0, "aaa"), (7.0, "aaa"), (6.99, "aa"), (4.5, "aa"), (4.49, "aa_large"), (3.0, "aa_large"), (2.99, "fail")],
    )
    def test_recommendation_tiers(self, ratio, key):
        """Each ratio maps to exactly one reachable tier."""
        assert _recommend(ratio) == RECOMMENDATIONS[key]

    def test_recommendation_keys(self):
        assert set(RECOMMENDATIONS) == {"aaa", "aa", "aa_large", "fail"}

    def test_report(self):
        report = contrast_report("#000000")
        assert set(report) == {"white", "black", "gray"}
        assert report["white"].ratio == 21.0
        assert report["black"].ratio == 1.0


class TestFindAccessibleColor:
    def test_already_passing(self):
        result = find_accessible_color("#000000", "#ffffff")
        assert isinstance(result, AccessibleColor)
        assert result.hex == "#000000"
        assert result.contrast == pytest.approx(21.0)

    def test_darkens_on_light_background(self):
        result = find_accessible_color("#777777", "#ffffff")
        assert result.contrast >= 4.5
        assert relative_luminance(result.color) < relative_luminance("#777777")

    def test_lightens_on_dark_background(self):
        result = find_accessible_color("#3a7bd5", "#000000", 7.0)
        assert result.contrast >= 7.0
        assert relative_luminance(result.color) > relative_luminance("#3a7bd5")

    def test_keeps_hue(self):
        result = find_accessible_color("hsl(200, 80%, 60%)", "#ffffff")
        hsl = rgb_to_hsl(result.color)
        assert abs(hsl.h - 200) <= 2

    def test_without_hue(self):
        assert find_accessible_color("#777777", "#ffffff", maintain_hue=False).color == RGBA(0, 0, 0)
        assert find_accessible_color("#555555", "#000000", maintain_hue=False).color == RGBA(255, 255, 255)

    def test_unreachable_returns_best(self):
        """When no lightness passes, the strongest candidate comes back."""
        result = find_accessible_color("#808080", "#808080", 21.0)
        assert result.hex == "#ffffff"
        assert result.contrast < 21.0

    def test_prefer_darker(self):
        result = find_accessible_color("#808080", "#808080", 3.0, prefer_darker=True)
        assert relative_luminance(result.color) < relative_luminance("#808080")

    @pytest.mark.parametrize("target", [0.5, 22])
    def test_target_out_of_range(self, target):
        with pytest.raises(OutOfRangeValue):
            find_accessible_color("#777777", "#ffffff", target)


class TestAccessiblePairs:
    def test_sorted_and_passing(self):
        pairs = suggest_accessible_pairs("#3a7bd5", 10)
        assert pairs
        contrasts = [p.contrast for p in pairs]
        assert contrasts == sorted(contrasts, reverse=True)
        for pair in pairs:
            assert pair.result.aa_large
            assert relative_luminance(pair.foreground) <= relative_luminance(pair.background)

    def test_no_duplicates(self):
        pairs = suggest_accessible_pairs("red", 100)
        keys = [(p.foreground, p.background) for p in pairs]
        assert len(keys) == len(set(keys))

    def test_count(self):
        assert len(suggest_accessible_pairs("red", 2)) == 2

    def test_count_out_of_range(self):
        with pytest.raises(OutOfRangeValue):
            suggest_accessible_pairs("red", 0)
