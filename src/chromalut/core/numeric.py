"""
Closed-form numeric helpers shared by every color space transform.

All functions are pure. Division-by-zero is guarded where a formula has a
degenerate case (e.g. hue is 0 for achromatic colors).
"""

from __future__ import annotations

import math
from collections.abc import Sequence


def round_half_up(value: float) -> int:
    """Round to nearest integer with halves going up (127.5 -> 128)."""
    return int(math.floor(value + 0.5))


def round_to(value: float, decimals: int) -> float:
    """Round half up to a fixed number of decimals."""
    scale = 10.0**decimals
    result = math.floor(value * scale + 0.5) / scale
    # Avoid "-0.0" in formatted output
    return result + 0.0 if result != 0 else 0.0


def clamp(value: float, lo: float, hi: float) -> float:
    return lo if value < lo else hi if value > hi else value


def clamp01(value: float) -> float:
    if value != value:  # NaN
        return 0.0
    return clamp(value, 0.0, 1.0)


def clamp_to_byte(value: float) -> int:
    """Round and clamp a channel value into the 0-255 integer range."""
    if value != value:
        return 0
    return int(clamp(round_half_up(value), 0, 255))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def normalize_hue(degrees: float) -> float:
    """Map any angle into [0, 360), correct for negative input."""
    result = ((degrees % 360.0) + 360.0) % 360.0
    return 0.0 if result >= 360.0 else result


def matrix_transform_3x3(
    matrix: Sequence[float], x: float, y: float, z: float
) -> tuple[float, float, float]:
    """
    Multiply a row-major 3x3 matrix by a column vector.

    Args:
        matrix: Nine coefficients, row-major
        x, y, z: Vector components

    Returns:
        Transformed (x, y, z)
    """
    m = matrix
    return (
        m[0] * x + m[1] * y + m[2] * z,
        m[3] * x + m[4] * y + m[5] * z,
        m[6] * x + m[7] * y + m[8] * z,
    )


def distance_squared(p: Sequence[float], q: Sequence[float]) -> float:
    return (p[0] - q[0]) ** 2 + (p[1] - q[1]) ** 2 + (p[2] - q[2]) ** 2


def delta_e(lab1: Sequence[float], lab2: Sequence[float]) -> float:
    """CIE76 color difference: Euclidean distance in LAB."""
    return math.sqrt(distance_squared(lab1, lab2))


def calculate_hue(r: float, g: float, b: float) -> float:
    """
    Hue in degrees from normalized RGB components.

    Args:
        r, g, b: Channels in [0, 1]

    Returns:
        Hue in [0, 360); 0 when the color is achromatic
    """
    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn
    if d == 0:
        return 0.0
    if mx == r:
        h = ((g - b) / d) % 6
    elif mx == g:
        h = (b - r) / d + 2
    else:
        h = (r - g) / d + 4
    h *= 60.0
    if h < 0:
        h += 360.0
    return h


def calculate_lightness(r: float, g: float, b: float) -> float:
    """HSL lightness in [0, 1]."""
    return (max(r, g, b) + min(r, g, b)) / 2.0


def calculate_saturation(r: float, g: float, b: float) -> float:
    """HSL saturation in [0, 1]."""
    mx = max(r, g, b)
    mn = min(r, g, b)
    d = mx - mn
    if d == 0:
        return 0.0
    lightness = (mx + mn) / 2.0
    if lightness > 0.5:
        return d / (2.0 - mx - mn)
    return d / (mx + mn)
