"""
WCAG 2.x contrast checks and accessible color suggestions.

Example:
    >>> check_contrast("#000000", "#ffffff").ratio
    21.0
    >>> check_contrast("#777777", "#ffffff").aa_large
    True
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Any

from chromalut.constants import (
    DEFAULT_TARGET_CONTRAST,
    WCAG_AA_LARGE,
    WCAG_AA_NORMAL,
    WCAG_AAA_LARGE,
    WCAG_AAA_NORMAL,
    WCAG_LINEAR_THRESHOLD,
)
from chromalut.core.numeric import round_to
from chromalut.parser import coerce_color
from chromalut.spaces import hsl_to_rgb, rgb_to_hsl
from chromalut.types import HSL, RGBA
from chromalut.validators import validate_range

logger = logging.getLogger(__name__)

WHITE = RGBA(255, 255, 255)
BLACK = RGBA(0, 0, 0)
GRAY = RGBA(128, 128, 128)

# Lightness steps used when pairing variants of one hue
PAIR_LIGHTNESS_LEVELS = (5, 15, 25, 35, 45, 55, 65, 75, 85, 95)
PAIR_MIN_LIGHTNESS_GAP = 30

RECOMMENDATIONS = {
    "aaa": "Excellent contrast! Passes all WCAG standards.",
    "aa": "Good contrast. Passes WCAG AA for all text sizes.",
    "aa_large": "Adequate contrast for large text only (18pt+ or 14pt+ bold).",
    "fail": "Poor contrast. Does not meet WCAG standards.",
}


@dataclass(frozen=True, slots=True)
class ContrastResult:
    """
    WCAG verdict for a foreground/background pair.

    Attributes:
        ratio: Contrast ratio rounded to two decimals (1.0 to 21.0)
        aa_normal: Ratio >= 4.5
        aa_large: Ratio >= 3.0
        aaa_normal: Ratio >= 7.0
        aaa_large: Ratio >= 4.5
        recommendation: Human-readable summary
    """

    ratio: float
    aa_normal: bool
    aa_large: bool
    aaa_normal: bool
    aaa_large: bool
    recommendation: str

    @property
    def passes(self) -> dict[str, dict[str, bool]]:
        return {
            "aa": {"normal": self.aa_normal, "large": self.aa_large},
            "aaa": {"normal": self.aaa_normal, "large": self.aaa_large},
        }

    def to_dict(self) -> dict[str, Any]:
        return {"ratio": self.ratio, "passes": self.passes, "recommendation": self.recommendation}


@dataclass(frozen=True, slots=True)
class AccessibleColor:
    color: RGBA
    hex: str
    contrast: float


@dataclass(frozen=True, slots=True)
class AccessiblePair:
    """Darker color as foreground, lighter as background."""

    foreground: RGBA
    background: RGBA
    contrast: float
    result: ContrastResult


# =============================================================================
# Luminance and contrast
# =============================================================================


def _linearize(channel: int) -> float:
    c = channel / 255.0
    if c <= WCAG_LINEAR_THRESHOLD:
        return c / 12.92
    return ((c + 0.055) / 1.055) ** 2.4


def relative_luminance(color: str | RGBA | tuple) -> float:
    """WCAG relative luminance in [0, 1]."""
    rgb = coerce_color(color)
    return 0.2126 * _linearize(rgb.r) + 0.7152 * _linearize(rgb.g) + 0.0722 * _linearize(rgb.b)


def contrast_ratio(color_a: str | RGBA | tuple, color_b: str | RGBA | tuple) -> float:
    """Unrounded WCAG contrast ratio; symmetric in its arguments."""
    lum_a = relative_luminance(color_a)
    lum_b = relative_luminance(color_b)
    lighter, darker = max(lum_a, lum_b), min(lum_a, lum_b)
    return (lighter + 0.05) / (darker + 0.05)


def _recommend(ratio: float) -> str:
    if ratio >= WCAG_AAA_NORMAL:
        return RECOMMENDATIONS["aaa"]
    if ratio >= WCAG_AA_NORMAL:
        return RECOMMENDATIONS["aa"]
    if ratio >= WCAG_AA_LARGE:
        return RECOMMENDATIONS["aa_large"]
    return RECOMMENDATIONS["fail"]


def check_contrast(foreground: str | RGBA | tuple, background: str | RGBA | tuple) -> ContrastResult:
    """
    Evaluate a color pair against WCAG AA and AAA.

    Pass/fail flags use the unrounded ratio; ``ratio`` is rounded for display.

    Raises:
        InvalidFormat: If either color cannot be parsed
    """
    ratio = contrast_ratio(foreground, background)
    return ContrastResult(
        ratio=round_to(ratio, 2),
        aa_normal=ratio >= WCAG_AA_NORMAL,
        aa_large=ratio >= WCAG_AA_LARGE,
        aaa_normal=ratio >= WCAG_AAA_NORMAL,
        aaa_large=ratio >= WCAG_AAA_LARGE,
        recommendation=_recommend(ratio),
    )


def contrast_report(color: str | RGBA | tuple) -> dict[str, ContrastResult]:
    """Contrast of ``color`` against white, black and mid gray (#808080)."""
    return {
        "white": check_contrast(color, WHITE),
        "black": check_contrast(color, BLACK),
        "gray": check_contrast(color, GRAY),
    }


# =============================================================================
# Suggestions
# =============================================================================


@validate_range(1.0, 21.0, "target_contrast", param_index=2)
def find_accessible_color(
    target: str | RGBA | tuple,
    background: str | RGBA | tuple,
    target_contrast: float = DEFAULT_TARGET_CONTRAST,
    maintain_hue: bool = True,
    prefer_darker: bool | None = None,
) -> AccessibleColor:
    """
    Nearest color to ``target`` that reaches ``target_contrast`` on ``background``.

    With ``maintain_hue`` the HSL lightness is walked in 1% steps, darker
    when the background is light (luminance > 0.5) unless ``prefer_darker``
    says otherwise. The first passing color is returned; if none passes,
    the best contrast found is. Without ``maintain_hue`` the answer is black
    or white.

    Args:
        target: Color to adjust
        background: Background it must contrast with
        target_contrast: Required ratio (default 4.5, WCAG AA normal text)
        maintain_hue: Keep hue and saturation, vary lightness only
        prefer_darker: Force the search direction

    Returns:
        AccessibleColor with the chosen color and its unrounded contrast
    """
    fg = coerce_color(target)
    bg = coerce_color(background)

    current = contrast_ratio(fg, bg)
    if current >= target_contrast:
        return AccessibleColor(fg, fg.hex, current)

    darken = prefer_darker if prefer_darker is not None else relative_luminance(bg) > 0.5

    if not maintain_hue:
        black_contrast = contrast_ratio(BLACK, bg)
        white_contrast = contrast_ratio(WHITE, bg)
        if darken and black_contrast >= target_contrast:
            return AccessibleColor(BLACK, BLACK.hex, black_contrast)
        if not darken and white_contrast >= target_contrast:
            return AccessibleColor(WHITE, WHITE.hex, white_contrast)
        if black_contrast > white_contrast:
            return AccessibleColor(BLACK, BLACK.hex, black_contrast)
        return AccessibleColor(WHITE, WHITE.hex, white_contrast)

    hsl = rgb_to_hsl(fg)
    start = int(hsl.l)
    levels = range(start, -1, -1) if darken else range(start, 101)

    best: AccessibleColor | None = None
    for lightness in levels:
        candidate = hsl_to_rgb(HSL(hsl.h, hsl.s, lightness))
        contrast = contrast_ratio(candidate, bg)
        if contrast >= target_contrast:
            return AccessibleColor(candidate, candidate.hex, contrast)
        if best is None or contrast > best.contrast:
            best = AccessibleColor(candidate, candidate.hex, contrast)

    logger.debug(
        "[Accessibility] No lightness of %s reaches %.2f on %s; best %.2f",
        fg.hex, target_contrast, bg.hex, best.contrast,
    )
    return best


@validate_range(1, 100, "count", param_index=1)
def suggest_accessible_pairs(color: str | RGBA | tuple, count: int = 5) -> list[AccessiblePair]:
    """
    Foreground/background pairs built from lightness variants of one hue.

    Variants at least 30 lightness points apart that pass WCAG AA for large
    text are kept, strongest contrast first.
    """
    hsl = rgb_to_hsl(coerce_color(color))
    pairs: list[AccessiblePair] = []

    for l1, l2 in itertools.combinations(PAIR_LIGHTNESS_LEVELS, 2):
        if abs(l1 - l2) < PAIR_MIN_LIGHTNESS_GAP:
            continue
        c1 = hsl_to_rgb(HSL(hsl.h, hsl.s, l1))
        c2 = hsl_to_rgb(HSL(hsl.h, hsl.s, l2))
        result = check_contrast(c1, c2)
        if not result.aa_large:
            continue
        if relative_luminance(c1) < relative_luminance(c2):
            fg, bg = c1, c2
        else:
            fg, bg = c2, c1
        pairs.append(AccessiblePair(fg, bg, result.ratio, result))

    pairs.sort(key=lambda p: p.contrast, reverse=True)
    return pairs[: int(count)]
