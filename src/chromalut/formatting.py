"""
Canonical string formatting for every output format.

Components are joined by a bare comma, e.g. ``rgb(0,0,255)`` and
``hsl(0,100%,50%)``. Whole numbers print without a decimal point; LAB is
rounded to two decimals and XYZ to three.
"""

from __future__ import annotations

from chromalut.constants import ALPHA_DECIMALS, LAB_DECIMALS, XYZ_DECIMALS
from chromalut.core.numeric import round_to
from chromalut.types import CMYK, HSB, HSL, LAB, RGBA, XYZ


def format_number(value: float, decimals: int = 0) -> str:
    """
    Shortest decimal text for ``value`` rounded to ``decimals`` places.

    Example:
        >>> format_number(50.0)
        '50'
        >>> format_number(53.2408, 2)
        '53.24'
    """
    rounded = round_to(float(value), decimals)
    if rounded == int(rounded):
        return str(int(rounded))
    return f"{rounded:.{decimals}f}".rstrip("0").rstrip(".")


def format_hex(color: RGBA) -> str:
    return color.hex


def format_rgb(color: RGBA) -> str:
    return f"rgb({color.r},{color.g},{color.b})"


def format_rgba(color: RGBA) -> str:
    return f"rgba({color.r},{color.g},{color.b},{format_number(color.a, ALPHA_DECIMALS)})"


def format_hsl(hsl: HSL) -> str:
    return f"hsl({format_number(hsl.h)},{format_number(hsl.s)}%,{format_number(hsl.l)}%)"


def format_hsla(hsl: HSL, alpha: float) -> str:
    return (
        f"hsla({format_number(hsl.h)},{format_number(hsl.s)}%,{format_number(hsl.l)}%,"
        f"{format_number(alpha, ALPHA_DECIMALS)})"
    )


def format_hsb(hsb: HSB) -> str:
    return f"hsb({format_number(hsb.h)},{format_number(hsb.s)}%,{format_number(hsb.b)}%)"


def format_cmyk(cmyk: CMYK) -> str:
    return (
        f"cmyk({format_number(cmyk.c)}%,{format_number(cmyk.m)}%,"
        f"{format_number(cmyk.y)}%,{format_number(cmyk.k)}%)"
    )


def format_lab(lab: LAB) -> str:
    return (
        f"lab({format_number(lab.l, LAB_DECIMALS)}%,{format_number(lab.a, LAB_DECIMALS)},"
        f"{format_number(lab.b, LAB_DECIMALS)})"
    )


def format_xyz(xyz: XYZ) -> str:
    return (
        f"xyz({format_number(xyz.x, XYZ_DECIMALS)},{format_number(xyz.y, XYZ_DECIMALS)},"
        f"{format_number(xyz.z, XYZ_DECIMALS)})"
    )
