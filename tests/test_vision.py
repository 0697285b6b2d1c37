"""Tests for color vision deficiency simulation."""

import itertools

import numpy as np
import pytest

from chromalut.errors import InvalidFormat, OutOfRangeValue
from chromalut.types import RGBA
from chromalut.vision import (
    DEFICIENCY_INFO,
    DEFICIENCY_MATRICES,
    DEFICIENCY_TYPES,
    SAFE_CHECK_TYPES,
    are_distinguishable,
    find_safe_alternative,
    generate_safe_palette,
    simulate_all,
    simulate_array,
    simulate_color_blindness,
)


class TestSimulation:
    def test_achromatopsia_red(self):
        assert simulate_color_blindness("#ff0000", "achromatopsia").hex == "#959595"

    @pytest.mark.parametrize("kind", DEFICIENCY_TYPES)
    def test_black_and_white_fixed(self, kind):
        """Every matrix row sums to one, so the extremes do not move."""
        assert simulate_color_blindness("#ffffff", kind) == RGBA(255, 255, 255)
        assert simulate_color_blindness("#000000", kind) == RGBA(0, 0, 0)

    def test_alpha_preserved(self):
        assert simulate_color_blindness("rgba(255, 0, 0, 0.5)", "protanopia").a == 0.5

    def test_unknown_kind(self):
        with pytest.raises(ValueError, match="kind"):
            simulate_color_blindness("red", "bogus")

    def test_invalid_color(self):
        with pytest.raises(InvalidFormat):
            simulate_color_blindness("bogus", "protanopia")

    def test_simulate_all(self):
        results = simulate_all("#3a7bd5")
        assert tuple(results) == DEFICIENCY_TYPES
        assert len(results) == 8
        for kind, entry in results.items():
            assert entry["hex"] == entry["simulated"].hex
            assert entry["info"] is DEFICIENCY_INFO[kind]

    def test_array_matches_scalar(self):
        rows = np.array([[255, 0, 0], [12, 200, 77], [0, 0, 255]])
        out = simulate_array(rows, "deuteranopia")
        assert out.shape == (3, 3)
        for row, sim in zip(rows, out):
            expected = simulate_color_blindness(RGBA(*(int(v) for v in row)), "deuteranopia")
            assert tuple(int(v) for v in sim) == expected.rgb

    def test_array_unknown_kind(self):
        with pytest.raises(ValueError):
            simulate_array([[0, 0, 0]], "bogus")

    def test_matrices_read_only(self):
        with pytest.raises(ValueError):
            DEFICIENCY_MATRICES["protanopia"][0, 0] = 1.0


class TestDistinguishable:
    def test_red_green(self):
        assert are_distinguishable("#ff0000", "#00ff00", "deuteranopia")

    def test_same_color(self):
        assert not are_distinguishable("#3a7bd5", "#3a7bd5", "protanopia")

    def test_threshold(self):
        assert not are_distinguishable("#ff0000", "#00ff00", "deuteranopia", threshold=1000)

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            are_distinguishable("red", "green", "bogus")


class TestSafeAlternative:
    def test_already_safe(self):
        """A color already distinct from every reference comes back as is."""
        assert find_safe_alternative("#0000ff", ["#ffff00"]) == RGBA(0, 0, 255)

    def test_conflicting_color_shifted(self):
        result = find_safe_alternative("#ff0000", ["#ff0000"])
        assert result is not None
        assert result != RGBA(255, 0, 0)
        for kind in SAFE_CHECK_TYPES:
            assert are_distinguishable(result, "#ff0000", kind)

    def test_custom_kinds(self):
        result = find_safe_alternative("#808080", ["#808080"], kinds=["achromatopsia"])
        assert result is not None
        assert are_distinguishable(result, "#808080", "achromatopsia")

    def test_unknown_kind(self):
        with pytest.raises(ValueError):
            find_safe_alternative("red", ["blue"], kinds=["bogus"])


class TestSafePalette:
    def test_seeded_is_deterministic(self):
        first = generate_safe_palette(["#3a7bd5"], 5, seed=42)
        second = generate_safe_palette(["#3a7bd5"], 5, seed=42)
        assert first == second

    def test_starts_with_base(self):
        palette = generate_safe_palette(["#3a7bd5", "#ff8800"], 4, seed=1)
        assert palette[:2] == [RGBA(58, 123, 213), RGBA(255, 136, 0)]
        assert 2 <= len(palette) <= 4

    def test_base_truncated_to_count(self):
        palette = generate_safe_palette(["red", "green", "blue"], 2, seed=0)
        assert palette == [RGBA(255, 0, 0), RGBA(0, 128, 0)]

    def test_generated_colors_distinguishable(self):
        """Each added color is at least 30 apart from earlier members."""
        palette = generate_safe_palette(["#3a7bd5"], 6, seed=7)
        for a, b in itertools.combinations(palette, 2):
            for kind in SAFE_CHECK_TYPES:
                assert are_distinguishable(a, b, kind, threshold=30)

    def test_empty_base(self):
        with pytest.raises(ValueError, match="base_colors"):
            generate_safe_palette([], 3)

    def test_count_out_of_range(self):
        with pytest.raises(OutOfRangeValue):
            generate_safe_palette(["red"], 0)
