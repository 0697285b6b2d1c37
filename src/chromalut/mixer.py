"""
Color mixing with blend modes.

``normal`` interpolates in CIE LAB, which keeps midpoints of distant hues
bright (red + green leans yellow instead of brown). ``multiply``, ``screen``
and ``overlay`` first compute the unweighted per-channel blend of A and B,
then interpolate from A toward that blend by ``ratio``:

    result = A + (blend(A, B) - A) * ratio

so ratio 0 is always A and ratio 1 is the pure blend. Output alpha is the
interpolation of the two input alphas, whatever the mode.

Example:
    >>> mix_colors("#ff0000", "#00ff00", 0.0).hex
    '#ff0000'
    >>> mix_colors("#ffffff", "#ff0000", 1.0, "multiply").hex
    '#ff0000'
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from chromalut.constants import BLEND_MODES, DEFAULT_BLEND_MODE, DEFAULT_MIX_RATIO, MIX_ALPHA_DECIMALS
from chromalut.converter import ConversionResult, describe
from chromalut.core.numeric import clamp, clamp_to_byte, lerp, round_to
from chromalut.errors import UnknownBlendMode
from chromalut.parser import coerce_color
from chromalut.spaces import lab_to_rgb, rgb_to_lab
from chromalut.types import LAB, RGBA
from chromalut.validators import validate_choices, validate_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class MixResult(ConversionResult):
    """Conversion of the mixed color plus the parameters that produced it."""

    ratio: float = DEFAULT_MIX_RATIO
    mode: str = DEFAULT_BLEND_MODE
    color_a: str = ""
    color_b: str = ""


# =============================================================================
# Per-channel blend formulas (0-255 domain)
# =============================================================================


def blend_normal(a: float, b: float) -> float:
    return b


def blend_multiply(a: float, b: float) -> float:
    return a * b / 255


def blend_screen(a: float, b: float) -> float:
    return 255 - (255 - a) * (255 - b) / 255


def blend_overlay(a: float, b: float) -> float:
    if a < 128:
        return 2 * a * b / 255
    return 255 - 2 * (255 - a) * (255 - b) / 255


BLEND_FUNCTIONS: dict[str, Callable[[float, float], float]] = {
    "normal": blend_normal,
    "multiply": blend_multiply,
    "screen": blend_screen,
    "overlay": blend_overlay,
}


@validate_choices(BLEND_MODES, "mode", param_index=2, error=UnknownBlendMode)
def blend_channels(
    a: tuple[int, int, int], b: tuple[int, int, int], mode: str
) -> tuple[float, float, float]:
    """
    Unweighted blend of two RGB triples.

    ``normal`` here is plain compositing (B over A); :func:`mix_colors`
    handles ``normal`` through LAB interpolation instead.
    """
    fn = BLEND_FUNCTIONS[mode]
    return (fn(a[0], b[0]), fn(a[1], b[1]), fn(a[2], b[2]))


def _mix_lab(a: RGBA, b: RGBA, ratio: float) -> tuple[int, int, int]:
    if ratio <= 0.0 or a.rgb == b.rgb:
        return a.rgb
    if ratio >= 1.0:
        return b.rgb
    lab_a = rgb_to_lab(a)
    lab_b = rgb_to_lab(b)
    mixed = LAB(
        clamp(lerp(lab_a.l, lab_b.l, ratio), 0.0, 100.0),
        lerp(lab_a.a, lab_b.a, ratio),
        lerp(lab_a.b, lab_b.b, ratio),
    )
    return lab_to_rgb(mixed).rgb


def _mix_blend(a: RGBA, b: RGBA, ratio: float, mode: str) -> tuple[int, int, int]:
    blended = blend_channels(a.rgb, b.rgb, mode)
    r, g, bl = (clamp_to_byte(lerp(ca, cb, ratio)) for ca, cb in zip(a.rgb, blended))
    return (r, g, bl)


@validate_choices(BLEND_MODES, "mode", param_index=3, error=UnknownBlendMode)
@validate_range(0.0, 1.0, "ratio", param_index=2)
def mix_colors(
    color_a: str | RGBA,
    color_b: str | RGBA,
    ratio: float = DEFAULT_MIX_RATIO,
    mode: str = DEFAULT_BLEND_MODE,
    formats: Iterable[str] | None = None,
) -> MixResult:
    """
    Mix two colors.

    Args:
        color_a: First color (any parseable string or RGBA)
        color_b: Second color
        ratio: 0.0 gives A, 1.0 gives B (normal) or the pure blend (other modes)
        mode: "normal", "multiply", "screen" or "overlay"
        formats: Output formats for the result (default: all)

    Returns:
        MixResult with the canonical color, every requested format, the
        ratio and the mode

    Raises:
        InvalidFormat: If either color cannot be parsed
        UnknownBlendMode: If mode is not recognized
        OutOfRangeValue: If ratio is outside [0, 1]
    """
    a = coerce_color(color_a)
    b = coerce_color(color_b)

    if mode == "normal":
        rgb = _mix_lab(a, b, ratio)
    else:
        rgb = _mix_blend(a, b, ratio, mode)

    mixed_alpha = round_to(lerp(a.a, b.a, ratio), MIX_ALPHA_DECIMALS)
    mixed = RGBA(*rgb, mixed_alpha)
    logger.debug("[Mixer] %s %s + %s @ %.3f -> %s", mode, a.hex, b.hex, ratio, mixed.hex)

    return describe(
        mixed,
        formats,
        input=mixed.hex,
        cls=MixResult,
        ratio=ratio,
        mode=mode,
        color_a=color_a if isinstance(color_a, str) else a.hex,
        color_b=color_b if isinstance(color_b, str) else b.hex,
    )
