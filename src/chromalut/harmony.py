"""
Hue-wheel harmony schemes.

Every scheme rotates the base color's hue while holding its saturation and
lightness (HSL, whole numbers) constant. ``angle_adjustment`` shifts every
rotated hue, never the base.

Example:
    >>> generate_harmony("#ff0000", "complementary").colors
    ['#ff0000', '#00ffff']
    >>> generate_harmony("#0000ff", "triadic", "rgb").colors
    ['rgb(0,0,255)', 'rgb(255,0,0)', 'rgb(0,255,0)']
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from chromalut.constants import (
    ALL_HARMONY_TYPES,
    DEFAULT_ANALOGOUS_ANGLE,
    DEFAULT_ANALOGOUS_COUNT,
    DEFAULT_DOUBLE_ANGLE,
    DEFAULT_OUTPUT_FORMAT,
    DEFAULT_SPLIT_ANGLE,
    HARMONY_OUTPUT_FORMATS,
    HARMONY_TYPES,
    MAX_ANALOGOUS_COUNT,
)
from chromalut.core.numeric import normalize_hue
from chromalut.errors import UnknownHarmonyType, UnsupportedFormat
from chromalut.formatting import format_cmyk, format_hsb, format_hsl, format_lab, format_rgb, format_xyz
from chromalut.parser import coerce_color
from chromalut.spaces import hsl_to_rgb, rgb_to_cmyk, rgb_to_hsb, rgb_to_hsl, rgb_to_lab, rgb_to_xyz
from chromalut.types import HSL, RGBA
from chromalut.validators import check_range, validate_choices

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class HarmonyOptions:
    """
    Tuning knobs for harmony generation.

    Attributes:
        angle_adjustment: Degrees added to every rotated hue
        analogous_count: Colors in an analogous scheme (base included)
        analogous_angle: Degrees between neighbouring analogous colors
        split_angle: Offset of split-complementary colors from the complement
        double_angle: Offset of the second pair in double-complementary
    """

    angle_adjustment: float = 0.0
    analogous_count: int = DEFAULT_ANALOGOUS_COUNT
    analogous_angle: float = DEFAULT_ANALOGOUS_ANGLE
    split_angle: float = DEFAULT_SPLIT_ANGLE
    double_angle: float = DEFAULT_DOUBLE_ANGLE

    def __post_init__(self):
        """Validate option values."""
        check_range(self.angle_adjustment, -360.0, 360.0, "angle_adjustment")
        check_range(self.analogous_angle, 0.0, 180.0, "analogous_angle")
        check_range(self.split_angle, 0.0, 180.0, "split_angle")
        check_range(self.double_angle, 0.0, 180.0, "double_angle")
        check_range(self.analogous_count, 1, MAX_ANALOGOUS_COUNT, "analogous_count")
        if self.analogous_count != int(self.analogous_count):
            raise ValueError(f"analogous_count={self.analogous_count} must be an integer")

    @classmethod
    def from_dict(cls, options: dict[str, Any] | None) -> HarmonyOptions:
        """Build from a dict; camelCase keys are accepted too."""
        if not options:
            return cls()
        aliases = {
            "angleAdjustment": "angle_adjustment",
            "analogousCount": "analogous_count",
            "analogousAngle": "analogous_angle",
            "splitAngle": "split_angle",
            "doubleAngle": "double_angle",
        }
        kwargs = {aliases.get(k, k): v for k, v in options.items()}
        return cls(**kwargs)


@dataclass(frozen=True)
class HarmonyResult:
    """
    Attributes:
        type: Scheme name as requested
        base_color: Base color in the output format
        colors: Scheme colors in output order
        raw_values: HSL components of each color, in the same order
    """

    type: str
    base_color: str
    colors: list[str] = field(default_factory=list)
    raw_values: list[dict[str, float]] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.type,
            "base_color": self.base_color,
            "colors": list(self.colors),
            "raw_values": [dict(v) for v in self.raw_values],
        }


# =============================================================================
# Output formatting
# =============================================================================

_FORMATTERS = {
    "hex": lambda rgb: rgb.hex,
    "rgb": format_rgb,
    "hsl": lambda rgb: format_hsl(rgb_to_hsl(rgb)),
    "hsb": lambda rgb: format_hsb(rgb_to_hsb(rgb)),
    "hsv": lambda rgb: format_hsb(rgb_to_hsb(rgb)),
    "cmyk": lambda rgb: format_cmyk(rgb_to_cmyk(rgb)),
    "lab": lambda rgb: format_lab(rgb_to_lab(rgb)),
    "xyz": lambda rgb: format_xyz(rgb_to_xyz(rgb)),
}


def format_hsl_as(hsl: HSL, output_format: str) -> str:
    """Render an HSL color in a harmony output format."""
    formatter = _FORMATTERS.get(output_format)
    if formatter is None:
        raise UnsupportedFormat(output_format, HARMONY_OUTPUT_FORMATS, operation="harmony")
    return formatter(hsl_to_rgb(hsl))


# =============================================================================
# Schemes
# =============================================================================


def _rotate(base: HSL, degrees: float) -> HSL:
    return HSL(normalize_hue(base.h + degrees), base.s, base.l)


def complementary(base: HSL, options: HarmonyOptions) -> list[HSL]:
    adj = options.angle_adjustment
    return [base, _rotate(base, 180 + adj)]


def analogous(base: HSL, options: HarmonyOptions) -> list[HSL]:
    """Negative side (farthest first), then base, then positive side."""
    count = int(options.analogous_count)
    angle = options.analogous_angle
    adj = options.angle_adjustment
    positive_count = (count - 1) // 2
    negative_count = count - 1 - positive_count

    negatives = [_rotate(base, -i * angle + adj) for i in range(negative_count, 0, -1)]
    positives = [_rotate(base, i * angle + adj) for i in range(1, positive_count + 1)]
    return [*negatives, base, *positives]


def triadic(base: HSL, options: HarmonyOptions) -> list[HSL]:
    adj = options.angle_adjustment
    return [base, _rotate(base, 120 + adj), _rotate(base, 240 + adj)]


def tetradic(base: HSL, options: HarmonyOptions) -> list[HSL]:
    adj = options.angle_adjustment
    return [base, _rotate(base, 90 + adj), _rotate(base, 180 + adj), _rotate(base, 270 + adj)]


def split_complementary(base: HSL, options: HarmonyOptions) -> list[HSL]:
    adj = options.angle_adjustment
    split = options.split_angle
    return [base, _rotate(base, 180 - split + adj), _rotate(base, 180 + split + adj)]


def double_complementary(base: HSL, options: HarmonyOptions) -> list[HSL]:
    adj = options.angle_adjustment
    offset = options.double_angle
    return [
        base,
        _rotate(base, offset + adj),
        _rotate(base, 180 + adj),
        _rotate(base, 180 + offset + adj),
    ]


SCHEMES = {
    "complementary": complementary,
    "analogous": analogous,
    "triadic": triadic,
    "tetradic": tetradic,
    "square": tetradic,
    "split-complementary": split_complementary,
    "double-complementary": double_complementary,
}


def _hsl_dict(hsl: HSL) -> dict[str, float]:
    # Whole-degree hues print as ints
    h = int(hsl.h) if hsl.h == int(hsl.h) else hsl.h
    return {"h": h, "s": hsl.s, "l": hsl.l}


@validate_choices(HARMONY_TYPES, "harmony_type", param_index=1, error=UnknownHarmonyType)
def generate_harmony(
    base_color: str | RGBA,
    harmony_type: str,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    options: HarmonyOptions | dict[str, Any] | None = None,
) -> HarmonyResult:
    """
    Generate a harmony scheme from a base color.

    Args:
        base_color: Any parseable color string or RGBA
        harmony_type: complementary, analogous, triadic, tetradic/square,
            split-complementary or double-complementary
        output_format: hex (default), rgb, hsl, hsb/hsv, cmyk, lab or xyz
        options: HarmonyOptions or an equivalent dict

    Returns:
        HarmonyResult with formatted colors and their raw HSL values

    Raises:
        InvalidFormat: If base_color cannot be parsed
        UnknownHarmonyType: If harmony_type is not recognized
        UnsupportedFormat: If output_format is not recognized
    """
    if output_format not in HARMONY_OUTPUT_FORMATS:
        raise UnsupportedFormat(output_format, HARMONY_OUTPUT_FORMATS, operation="harmony")
    if not isinstance(options, HarmonyOptions):
        options = HarmonyOptions.from_dict(options)

    base = rgb_to_hsl(coerce_color(base_color))
    palette = SCHEMES[harmony_type](base, options)
    logger.debug("[Harmony] %s from %s: %d colors", harmony_type, base, len(palette))

    return HarmonyResult(
        type=harmony_type,
        base_color=format_hsl_as(base, output_format),
        colors=[format_hsl_as(hsl, output_format) for hsl in palette],
        raw_values=[_hsl_dict(hsl) for hsl in palette],
    )


def generate_all_harmonies(
    base_color: str | RGBA,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    options: HarmonyOptions | dict[str, Any] | None = None,
) -> dict[str, HarmonyResult]:
    """Every scheme for one base color, keyed by scheme name."""
    return {
        name: generate_harmony(base_color, name, output_format, options)
        for name in ALL_HARMONY_TYPES
    }
