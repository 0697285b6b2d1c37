"""
Pure color space transforms.

RGB is the hub for HSL, HSB and CMYK; XYZ and LAB are reached through the
sRGB transfer function and the D65 matrices. HSL, HSB and CMYK results are
rounded to whole numbers (degrees / percent), LAB and XYZ are returned at
full precision and rounded only when formatted.
"""

from __future__ import annotations

import math

from chromalut.constants import D65_WHITE, SRGB_TO_XYZ, XYZ_TO_SRGB
from chromalut.core.numeric import (
    calculate_hue,
    calculate_lightness,
    calculate_saturation,
    clamp,
    clamp_to_byte,
    matrix_transform_3x3,
    normalize_hue,
    round_half_up,
)
from chromalut.core.tables import get_tables
from chromalut.types import CMYK, HSB, HSL, LAB, RGBA, XYZ, hex_color

# =============================================================================
# Hex
# =============================================================================


def hex_to_rgb(value: str) -> RGBA:
    """
    Parse ``#rgb``, ``#rgba``, ``#rrggbb`` or ``#rrggbbaa``.

    Raises:
        InvalidFormat: If the string is not a hex color
    """
    digits = hex_color(value)[1:]
    if len(digits) in (3, 4):
        digits = "".join(ch * 2 for ch in digits)
    r, g, b = (int(digits[i : i + 2], 16) for i in (0, 2, 4))
    if len(digits) == 8:
        return RGBA(r, g, b, int(digits[6:8], 16) / 255.0, alpha_explicit=True)
    return RGBA(r, g, b)


def rgb_to_hex(color: RGBA) -> str:
    """Lowercase hex; alpha digits follow when alpha < 1 or the source carried alpha."""
    return color.hex


# =============================================================================
# HSL / HSB
# =============================================================================


def rgb_to_hsl(color: RGBA) -> HSL:
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    h = normalize_hue(round_half_up(calculate_hue(r, g, b)))
    s = round_half_up(calculate_saturation(r, g, b) * 100)
    lightness = round_half_up(calculate_lightness(r, g, b) * 100)
    return HSL(int(h), s, lightness)


def _sector_rgb(h: float, c: float, x: float) -> tuple[float, float, float]:
    if h < 60:
        return c, x, 0.0
    if h < 120:
        return x, c, 0.0
    if h < 180:
        return 0.0, c, x
    if h < 240:
        return 0.0, x, c
    if h < 300:
        return x, 0.0, c
    return c, 0.0, x


def hsl_to_rgb(hsl: HSL) -> RGBA:
    """HSL to RGB via chroma / sector decomposition."""
    h = hsl.h
    s = hsl.s / 100.0
    lightness = hsl.l / 100.0

    c = (1 - abs(2 * lightness - 1)) * s
    x = c * (1 - abs((h / 60.0) % 2 - 1))
    m = lightness - c / 2
    r, g, b = _sector_rgb(h, c, x)
    return RGBA(
        clamp_to_byte((r + m) * 255),
        clamp_to_byte((g + m) * 255),
        clamp_to_byte((b + m) * 255),
    )


def rgb_to_hsb(color: RGBA) -> HSB:
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    mx = max(r, g, b)
    d = mx - min(r, g, b)
    h = normalize_hue(round_half_up(calculate_hue(r, g, b)))
    s = 0.0 if mx == 0 else d / mx
    return HSB(int(h), round_half_up(s * 100), round_half_up(mx * 100))


def hsb_to_rgb(hsb: HSB) -> RGBA:
    h = hsb.h / 60.0
    s = hsb.s / 100.0
    v = hsb.b / 100.0

    i = int(math.floor(h)) % 6
    f = h - math.floor(h)
    p = v * (1 - s)
    q = v * (1 - f * s)
    t = v * (1 - (1 - f) * s)
    r, g, b = (
        (v, t, p),
        (q, v, p),
        (p, v, t),
        (p, q, v),
        (t, p, v),
        (v, p, q),
    )[i]
    return RGBA(clamp_to_byte(r * 255), clamp_to_byte(g * 255), clamp_to_byte(b * 255))


# =============================================================================
# CMYK
# =============================================================================


def rgb_to_cmyk(color: RGBA) -> CMYK:
    """Black first, then c/m/y from the residual; pure black is (0, 0, 0, 100)."""
    r, g, b = color.r / 255.0, color.g / 255.0, color.b / 255.0
    k = 1 - max(r, g, b)
    if k >= 1:
        return CMYK(0, 0, 0, 100)
    c = (1 - r - k) / (1 - k)
    m = (1 - g - k) / (1 - k)
    y = (1 - b - k) / (1 - k)
    return CMYK(
        round_half_up(c * 100),
        round_half_up(m * 100),
        round_half_up(y * 100),
        round_half_up(k * 100),
    )


def cmyk_to_rgb(cmyk: CMYK) -> RGBA:
    c, m, y, k = (v / 100.0 for v in (cmyk.c, cmyk.m, cmyk.y, cmyk.k))
    return RGBA(
        clamp_to_byte(255 * (1 - c) * (1 - k)),
        clamp_to_byte(255 * (1 - m) * (1 - k)),
        clamp_to_byte(255 * (1 - y) * (1 - k)),
    )


# =============================================================================
# XYZ / LAB
# =============================================================================


def rgb_to_xyz(color: RGBA) -> XYZ:
    tables = get_tables()
    r = tables.gamma_decode(color.r / 255.0)
    g = tables.gamma_decode(color.g / 255.0)
    b = tables.gamma_decode(color.b / 255.0)
    x, y, z = matrix_transform_3x3(SRGB_TO_XYZ, r, g, b)
    return XYZ(x * 100, y * 100, z * 100)


def xyz_to_rgb(xyz: XYZ) -> RGBA:
    tables = get_tables()
    r, g, b = matrix_transform_3x3(XYZ_TO_SRGB, xyz.x / 100, xyz.y / 100, xyz.z / 100)
    return RGBA(
        clamp_to_byte(tables.gamma_encode(r) * 255),
        clamp_to_byte(tables.gamma_encode(g) * 255),
        clamp_to_byte(tables.gamma_encode(b) * 255),
    )


def xyz_to_lab(xyz: XYZ) -> LAB:
    tables = get_tables()
    fx = tables.lab_forward(xyz.x / D65_WHITE[0])
    fy = tables.lab_forward(xyz.y / D65_WHITE[1])
    fz = tables.lab_forward(xyz.z / D65_WHITE[2])
    # Interpolated tables can land just outside [0, 100]
    return LAB(clamp(116 * fy - 16, 0.0, 100.0), 500 * (fx - fy), 200 * (fy - fz))


def lab_to_xyz(lab: LAB) -> XYZ:
    tables = get_tables()
    fy = (lab.l + 16) / 116
    fx = lab.a / 500 + fy
    fz = fy - lab.b / 200
    return XYZ(
        max(0.0, tables.lab_inverse(fx) * D65_WHITE[0]),
        max(0.0, tables.lab_inverse(fy) * D65_WHITE[1]),
        max(0.0, tables.lab_inverse(fz) * D65_WHITE[2]),
    )


def rgb_to_lab(color: RGBA) -> LAB:
    return xyz_to_lab(rgb_to_xyz(color))


def lab_to_rgb(lab: LAB) -> RGBA:
    return xyz_to_rgb(lab_to_xyz(lab))


def lab_to_lch(lab: LAB) -> tuple[float, float, float]:
    """Cylindrical LAB: ``(L, chroma, hue degrees)``."""
    chroma = math.hypot(lab.a, lab.b)
    h = normalize_hue(math.degrees(math.atan2(lab.b, lab.a))) if chroma else 0.0
    return lab.l, chroma, h


def lch_to_lab(lightness: float, chroma: float, hue_degrees: float) -> LAB:
    tables = get_tables()
    return LAB(
        lightness,
        chroma * tables.cos_degrees(hue_degrees),
        chroma * tables.sin_degrees(hue_degrees),
    )
