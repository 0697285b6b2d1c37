"""Tests for the CSS named color table."""

import pytest

import chromalut
from chromalut.named_colors import (
    COMMON_COLORS,
    NAMED_COLORS,
    is_named_color,
    lookup_named,
    name_for_hex,
    nearest_named_color,
)
from chromalut.types import RGBA


class TestTable:
    def test_size(self):
        """148 CSS keywords plus transparent and currentcolor."""
        assert len(NAMED_COLORS) == 150

    def test_aliases_share_value(self):
        assert NAMED_COLORS["aqua"] is NAMED_COLORS["cyan"]
        assert NAMED_COLORS["fuchsia"] is NAMED_COLORS["magenta"]
        assert NAMED_COLORS["gray"] == NAMED_COLORS["grey"] == "#808080"

    def test_lime_is_not_green(self):
        assert NAMED_COLORS["lime"] == "#00ff00"
        assert NAMED_COLORS["green"] == "#008000"

    def test_values_are_lowercase_hex(self):
        for name, value in NAMED_COLORS.items():
            if name in ("transparent", "currentcolor"):
                continue
            assert value.startswith("#") and len(value) == 7
            assert value == value.lower()

    def test_read_only(self):
        with pytest.raises(TypeError):
            NAMED_COLORS["red"] = "#000000"

    def test_common_colors_subset(self):
        for name, value in COMMON_COLORS.items():
            assert NAMED_COLORS[name] == value

    def test_public_exports(self):
        assert chromalut.COMMON_COLORS is COMMON_COLORS
        assert chromalut.is_named_color("teal")
        assert {"COMMON_COLORS", "is_named_color"} <= set(chromalut.__all__)


class TestLookup:
    @pytest.mark.parametrize("name", ["rebeccapurple", "RebeccaPurple", "  rebeccapurple "])
    def test_lookup(self, name):
        assert lookup_named(name) == "#663399"
        assert is_named_color(name)

    def test_unknown(self):
        assert lookup_named("notacolor") is None
        assert not is_named_color("notacolor")

    def test_name_for_hex(self):
        """Shared values resolve to the alphabetically first name."""
        assert name_for_hex("#00ffff") == "aqua"
        assert name_for_hex("#FF00FF") == "fuchsia"
        assert name_for_hex("#808080") == "gray"
        assert name_for_hex("#123456") is None


class TestNearest:
    def test_near_red(self):
        assert nearest_named_color("#fe0101")[0] == "red"

    def test_exact_match(self):
        name, distance = nearest_named_color(RGBA(0, 0, 128))
        assert name == "navy"
        assert distance == pytest.approx(0.0, abs=1e-6)

    def test_distance_positive(self):
        name, distance = nearest_named_color("#010203")
        assert name == "black"
        assert distance > 0
