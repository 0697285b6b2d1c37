"""
Validated value types for every supported color space.

Smart constructors (``rgb_value``, ``hue``, ``percentage``, ``alpha``,
``lab_lightness``, ``non_negative``, ``hex_color``) are the single range
check for each constrained numeric domain; they either return a normalized
value or raise :class:`~chromalut.errors.OutOfRangeValue`. Every value type
runs them in ``__post_init__``, so an out-of-range color cannot be built.
"""

from __future__ import annotations

import math
import re
import sys
from dataclasses import asdict, dataclass, field

# Python 3.10 compatibility: Self was added in Python 3.11
if sys.version_info >= (3, 11):
    from typing import Self
else:
    from typing_extensions import Self

from chromalut.constants import (
    ALPHA_MAX,
    ALPHA_MIN,
    HUE_MAX,
    HUE_MIN,
    LAB_L_MAX,
    LAB_L_MIN,
    PERCENT_MAX,
    PERCENT_MIN,
    RGB_MAX,
    RGB_MIN,
)
from chromalut.core.numeric import normalize_hue
from chromalut.errors import InvalidFormat, OutOfRangeValue
from chromalut.validators import check_range

HEX_PATTERN = re.compile(r"^#(?:[0-9a-fA-F]{3,4}|[0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")

# =============================================================================
# Smart constructors
# =============================================================================


def rgb_value(value: float, name: str = "channel") -> int:
    """Integer channel in [0, 255]; integral floats are accepted."""
    check_range(value, RGB_MIN, RGB_MAX, name)
    if value != int(value):
        raise OutOfRangeValue(
            name, value, RGB_MIN, RGB_MAX, " RGB channels are integers from 0 to 255."
        )
    return int(value)


def hue(value: float, name: str = "hue") -> float:
    """Hue in [0, 360], normalized into [0, 360)."""
    check_range(value, HUE_MIN, HUE_MAX, name)
    return normalize_hue(float(value))


def percentage(value: float, name: str = "percentage") -> float:
    return float(check_range(value, PERCENT_MIN, PERCENT_MAX, name))


def alpha(value: float, name: str = "alpha") -> float:
    return float(check_range(value, ALPHA_MIN, ALPHA_MAX, name))


def lab_lightness(value: float, name: str = "lightness") -> float:
    return float(check_range(value, LAB_L_MIN, LAB_L_MAX, name))


def non_negative(value: float, name: str = "value") -> float:
    return float(check_range(value, 0.0, math.inf, name))


def hex_color(value: str) -> str:
    """A ``#``-prefixed 3/4/6/8-digit hex string, lowercased."""
    if not isinstance(value, str) or not HEX_PATTERN.match(value.strip()):
        raise InvalidFormat(value, f"Invalid hex color: {value!r}", format="hex")
    return value.strip().lower()


# =============================================================================
# Value types
# =============================================================================


@dataclass(frozen=True, slots=True)
class RGBA:
    """
    Canonical color: integer RGB channels in [0, 255] and alpha in [0, 1].

    ``alpha_explicit`` records that the source notation carried an alpha
    component (``#rrggbbaa``, ``rgba()``, ...). It keeps ``#ff0000ff``
    round-tripping through :attr:`hex` and takes no part in equality.

    Example:
        >>> RGBA(255, 0, 0).hex
        '#ff0000'
        >>> RGBA(255, 0, 0, 0.5).hex
        '#ff000080'
        >>> RGBA(255, 0, 0, alpha_explicit=True).hex
        '#ff0000ff'
    """

    r: int
    g: int
    b: int
    a: float = 1.0
    alpha_explicit: bool = field(default=False, compare=False, repr=False)

    def __post_init__(self):
        object.__setattr__(self, "r", rgb_value(self.r, "r"))
        object.__setattr__(self, "g", rgb_value(self.g, "g"))
        object.__setattr__(self, "b", rgb_value(self.b, "b"))
        object.__setattr__(self, "a", alpha(self.a, "alpha"))

    @classmethod
    def from_tuple(cls, values: tuple[int, ...] | list[int]) -> Self:
        """Build from ``(r, g, b)`` or ``(r, g, b, a)``."""
        if len(values) not in (3, 4):
            raise ValueError(f"Expected 3 or 4 components, got {len(values)}")
        return cls(*values)

    @property
    def rgb(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    @property
    def has_alpha(self) -> bool:
        return self.a < 1.0 or self.alpha_explicit

    @property
    def hex(self) -> str:
        out = f"#{self.r:02x}{self.g:02x}{self.b:02x}"
        if self.has_alpha:
            out += f"{int(self.a * 255 + 0.5):02x}"
        return out

    def with_alpha(self, value: float) -> Self:
        """Same channels with an explicitly given alpha."""
        return type(self)(self.r, self.g, self.b, value, alpha_explicit=True)

    def as_dict(self) -> dict[str, float]:
        return {"r": self.r, "g": self.g, "b": self.b, "a": self.a}


def _whole(value: float) -> float:
    return int(value) if float(value).is_integer() else value


@dataclass(frozen=True, slots=True)
class HSL:
    """Hue in degrees, saturation and lightness in percent."""

    h: float
    s: float
    l: float  # noqa: E741

    def __post_init__(self):
        object.__setattr__(self, "h", _whole(hue(self.h)))
        percentage(self.s, "saturation")
        percentage(self.l, "lightness")

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class HSB:
    h: float
    s: float
    b: float

    def __post_init__(self):
        object.__setattr__(self, "h", _whole(hue(self.h)))
        percentage(self.s, "saturation")
        percentage(self.b, "brightness")

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class CMYK:
    c: float
    m: float
    y: float
    k: float

    def __post_init__(self):
        for name in ("c", "m", "y", "k"):
            percentage(getattr(self, name), name)

    def as_dict(self) -> dict[str, float]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class LAB:
    """CIE LAB; lightness is range-checked, a and b are unbounded."""

    l: float  # noqa: E741
    a: float
    b: float

    def __post_init__(self):
        lab_lightness(self.l, "lightness")

    def as_dict(self) -> dict[str, float]:
        return asdict(self)

    def as_tuple(self) -> tuple[float, float, float]:
        return (self.l, self.a, self.b)


@dataclass(frozen=True, slots=True)
class XYZ:
    """CIE XYZ scaled to Y = 100; components are non-negative."""

    x: float
    y: float
    z: float

    def __post_init__(self):
        for name in ("x", "y", "z"):
            non_negative(getattr(self, name), name)

    def as_dict(self) -> dict[str, float]:
        return asdict(self)
