"""
Color vision deficiency simulation.

Each deficiency is a 3x3 matrix applied to linear-light sRGB (after
Brettel/Vienot/Mollon and Machado et al.). Batches go through numpy so that
palette searches stay vectorized.

Example:
    >>> simulate_color_blindness("#ff0000", "achromatopsia").hex
    '#959595'
    >>> are_distinguishable("#ff0000", "#00ff00", "deuteranopia")
    True
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from types import MappingProxyType

import numpy as np

from chromalut.constants import (
    DEFAULT_DISTINGUISH_THRESHOLD,
    PALETTE_CANDIDATES,
    PALETTE_DISTINGUISH_THRESHOLD,
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_OFFSET,
    SRGB_SCALE,
)
from chromalut.core.numeric import clamp, normalize_hue
from chromalut.parser import coerce_color
from chromalut.spaces import hsl_to_rgb, rgb_to_hsl
from chromalut.types import HSL, RGBA
from chromalut.validators import validate_choices, validate_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class DeficiencyInfo:
    kind: str
    name: str
    description: str
    prevalence: str
    severity: str


DEFICIENCY_INFO = MappingProxyType(
    {
        "protanopia": DeficiencyInfo(
            "protanopia", "Protanopia",
            "Complete absence of red photoreceptors (L-cones)",
            "1.3% of males, 0.02% of females", "severe",
        ),
        "protanomaly": DeficiencyInfo(
            "protanomaly", "Protanomaly",
            "Shifted spectral sensitivity of red photoreceptors",
            "1.3% of males, 0.02% of females", "moderate",
        ),
        "deuteranopia": DeficiencyInfo(
            "deuteranopia", "Deuteranopia",
            "Complete absence of green photoreceptors (M-cones)",
            "1.2% of males, 0.01% of females", "severe",
        ),
        "deuteranomaly": DeficiencyInfo(
            "deuteranomaly", "Deuteranomaly",
            "Shifted spectral sensitivity of green photoreceptors",
            "5% of males, 0.4% of females", "moderate",
        ),
        "tritanopia": DeficiencyInfo(
            "tritanopia", "Tritanopia",
            "Complete absence of blue photoreceptors (S-cones)",
            "0.001% (very rare)", "severe",
        ),
        "tritanomaly": DeficiencyInfo(
            "tritanomaly", "Tritanomaly",
            "Shifted spectral sensitivity of blue photoreceptors",
            "0.01% (rare)", "mild",
        ),
        "achromatopsia": DeficiencyInfo(
            "achromatopsia", "Achromatopsia",
            "Complete color blindness, seeing only in grayscale",
            "0.003% (extremely rare)", "severe",
        ),
        "achromatomaly": DeficiencyInfo(
            "achromatomaly", "Achromatomaly",
            "Partial color blindness with severely reduced color discrimination",
            "Very rare", "moderate",
        ),
    }
)

_MATRICES = {
    "protanopia": [[0.567, 0.433, 0.0], [0.558, 0.442, 0.0], [0.0, 0.242, 0.758]],
    "protanomaly": [[0.817, 0.183, 0.0], [0.333, 0.667, 0.0], [0.0, 0.125, 0.875]],
    "deuteranopia": [[0.625, 0.375, 0.0], [0.7, 0.3, 0.0], [0.0, 0.3, 0.7]],
    "deuteranomaly": [[0.8, 0.2, 0.0], [0.258, 0.742, 0.0], [0.0, 0.142, 0.858]],
    "tritanopia": [[0.95, 0.05, 0.0], [0.0, 0.433, 0.567], [0.0, 0.475, 0.525]],
    "tritanomaly": [[0.967, 0.033, 0.0], [0.0, 0.733, 0.267], [0.0, 0.183, 0.817]],
    "achromatopsia": [[0.299, 0.587, 0.114], [0.299, 0.587, 0.114], [0.299, 0.587, 0.114]],
    "achromatomaly": [[0.618, 0.32, 0.062], [0.163, 0.775, 0.062], [0.163, 0.32, 0.516]],
}

DEFICIENCY_MATRICES = MappingProxyType(
    {kind: np.array(m, dtype=np.float64) for kind, m in _MATRICES.items()}
)
DEFICIENCY_TYPES = tuple(DEFICIENCY_INFO)
SAFE_CHECK_TYPES = ("protanopia", "deuteranopia", "tritanopia")

# Search grid for find_safe_alternative, nearest shifts first
HUE_SHIFTS = (0, 30, -30, 60, -60, 90, -90, 120, -120, 150, -150, 180)
LIGHTNESS_SHIFTS = (0, 10, -10, 20, -20)

for _m in DEFICIENCY_MATRICES.values():
    _m.flags.writeable = False


# =============================================================================
# Vectorized simulation
# =============================================================================


def _linearize(rgb: np.ndarray) -> np.ndarray:
    c = rgb / 255.0
    return np.where(
        c <= SRGB_DECODE_THRESHOLD,
        c / SRGB_LINEAR_SLOPE,
        ((np.maximum(c, SRGB_DECODE_THRESHOLD) + SRGB_OFFSET) / SRGB_SCALE) ** SRGB_GAMMA,
    )


def _delinearize(linear: np.ndarray) -> np.ndarray:
    encoded = np.where(
        linear <= SRGB_ENCODE_THRESHOLD,
        linear * SRGB_LINEAR_SLOPE,
        SRGB_SCALE * np.maximum(linear, SRGB_ENCODE_THRESHOLD) ** (1.0 / SRGB_GAMMA) - SRGB_OFFSET,
    )
    # Half-up rounding to whole channel values
    return np.clip(np.floor(encoded * 255.0 + 0.5), 0, 255)


def simulate_array(rgb: np.ndarray | Sequence[Sequence[float]], kind: str) -> np.ndarray:
    """
    Simulate a deficiency on an ``(N, 3)`` array of 0-255 RGB rows.

    Returns:
        ``(N, 3)`` float array of whole-number channels in [0, 255]
    """
    if kind not in DEFICIENCY_MATRICES:
        raise ValueError(
            f"kind='{kind}' is not valid. Valid options are: {', '.join(sorted(DEFICIENCY_TYPES))}"
        )
    rows = np.asarray(rgb, dtype=np.float64).reshape(-1, 3)
    linear = _linearize(rows)
    return _delinearize(linear @ DEFICIENCY_MATRICES[kind].T)


def _to_rgba(row: np.ndarray, a: float = 1.0) -> RGBA:
    return RGBA(int(row[0]), int(row[1]), int(row[2]), a)


# =============================================================================
# Public API
# =============================================================================


@validate_choices(DEFICIENCY_TYPES, "kind", param_index=1)
def simulate_color_blindness(color: str | RGBA | tuple, kind: str) -> RGBA:
    """
    How ``color`` appears with the given deficiency; alpha is preserved.

    Raises:
        ValueError: If kind is unknown
        InvalidFormat: If color cannot be parsed
    """
    rgb = coerce_color(color)
    return _to_rgba(simulate_array([rgb.rgb], kind)[0], rgb.a)


def simulate_all(color: str | RGBA | tuple) -> dict[str, dict]:
    """Every deficiency for one color: ``{kind: {"simulated", "hex", "info"}}``."""
    rgb = coerce_color(color)
    result = {}
    for kind in DEFICIENCY_TYPES:
        simulated = _to_rgba(simulate_array([rgb.rgb], kind)[0], rgb.a)
        result[kind] = {"simulated": simulated, "hex": simulated.hex, "info": DEFICIENCY_INFO[kind]}
    return result


@validate_choices(DEFICIENCY_TYPES, "kind", param_index=2)
def are_distinguishable(
    color_a: str | RGBA | tuple,
    color_b: str | RGBA | tuple,
    kind: str,
    threshold: float = DEFAULT_DISTINGUISH_THRESHOLD,
) -> bool:
    """True when the simulated colors are at least ``threshold`` apart in RGB."""
    a = coerce_color(color_a)
    b = coerce_color(color_b)
    simulated = simulate_array([a.rgb, b.rgb], kind)
    return bool(np.linalg.norm(simulated[0] - simulated[1]) >= threshold)


def find_safe_alternative(
    color: str | RGBA | tuple,
    references: Iterable[str | RGBA | tuple],
    kinds: Sequence[str] = SAFE_CHECK_TYPES,
) -> RGBA | None:
    """
    Nearest hue/lightness variant of ``color`` that every deficiency in
    ``kinds`` can tell apart from each reference color.

    Variants are tried in order of increasing hue shift, then lightness
    shift. Returns None when no variant works.
    """
    for kind in kinds:
        if kind not in DEFICIENCY_MATRICES:
            raise ValueError(
                f"kind='{kind}' is not valid. Valid options are: {', '.join(sorted(DEFICIENCY_TYPES))}"
            )
    base = rgb_to_hsl(coerce_color(color))
    refs = np.array([coerce_color(r).rgb for r in references], dtype=np.float64).reshape(-1, 3)
    simulated_refs = {kind: simulate_array(refs, kind) for kind in kinds}

    for hue_shift in HUE_SHIFTS:
        for lightness_shift in LIGHTNESS_SHIFTS:
            candidate = hsl_to_rgb(
                HSL(
                    normalize_hue(base.h + hue_shift),
                    base.s,
                    clamp(base.l + lightness_shift, 0, 100),
                )
            )
            ok = True
            for kind in kinds:
                sim = simulate_array([candidate.rgb], kind)
                distances = np.linalg.norm(simulated_refs[kind] - sim, axis=1)
                if np.any(distances < DEFAULT_DISTINGUISH_THRESHOLD):
                    ok = False
                    break
            if ok:
                return candidate
    return None


@validate_range(1, 64, "count", param_index=1)
def generate_safe_palette(
    base_colors: Sequence[str | RGBA | tuple],
    count: int = 5,
    seed: int | None = None,
) -> list[RGBA]:
    """
    Grow a palette that stays distinguishable under protanopia,
    deuteranopia and tritanopia.

    The palette starts from ``base_colors``. Each further slot draws random
    candidates (hue 0-360, saturation 40-100%, lightness 25-75%) and keeps the
    one whose smallest simulated distance to the palette is largest; a
    candidate closer than 30 to any member under any deficiency is rejected.
    Generation stops early when no candidate qualifies.

    Args:
        base_colors: One or more starting colors
        count: Target palette size
        seed: Seed for reproducible palettes

    Returns:
        Between ``min(len(base_colors), count)`` and ``count`` colors
    """
    if not base_colors:
        raise ValueError("base_colors must contain at least one color")

    rng = np.random.default_rng(seed)
    palette = [coerce_color(c) for c in base_colors][: int(count)]

    while len(palette) < count:
        hsl = np.column_stack(
            (
                rng.random(PALETTE_CANDIDATES) * 360.0,
                40.0 + rng.random(PALETTE_CANDIDATES) * 60.0,
                25.0 + rng.random(PALETTE_CANDIDATES) * 50.0,
            )
        )
        candidates = [hsl_to_rgb(HSL(*row)) for row in hsl]
        cand_rgb = np.array([c.rgb for c in candidates], dtype=np.float64)
        pal_rgb = np.array([c.rgb for c in palette], dtype=np.float64)

        min_dist = np.full(len(candidates), np.inf)
        for kind in SAFE_CHECK_TYPES:
            sim_c = simulate_array(cand_rgb, kind)
            sim_p = simulate_array(pal_rgb, kind)
            dist = np.linalg.norm(sim_c[:, None, :] - sim_p[None, :, :], axis=2)
            min_dist = np.minimum(min_dist, dist.min(axis=1))

        eligible = np.where(min_dist >= PALETTE_DISTINGUISH_THRESHOLD, min_dist, 0.0)
        best = int(np.argmax(eligible))
        if eligible[best] <= 0.0:
            logger.debug("[Vision] No distinguishable candidate after %d colors", len(palette))
            break
        palette.append(candidates[best])

    return palette
