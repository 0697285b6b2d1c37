"""
Multi-format conversion.

:func:`convert` parses a color string once and projects the canonical color
into every requested output format, returning both the formatted strings and
the raw numeric components. Results are memoized in a
:class:`~chromalut.cache.ConversionCache` when one is supplied.

Array helpers (:func:`rgb_array_to_lab`, :func:`lab_array_to_rgb`,
:func:`delta_e_array`) run the same table-driven math through numba kernels
for palette-sized batches.

Example:
    >>> result = convert("red", ["hex", "hsl"])
    >>> result.hex, result.hsl
    ('#ff0000', 'hsl(0,100%,50%)')
    >>> result.raw_values["hsl"]
    {'h': 0, 's': 100, 'l': 50}
"""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field, fields, replace
from typing import Any

import numpy as np

from chromalut.cache import ConversionCache
from chromalut.constants import (
    ALPHA_DECIMALS,
    D65_WHITE,
    LAB_DECIMALS,
    OUTPUT_FORMATS,
    SRGB_TO_XYZ,
    XYZ_DECIMALS,
    XYZ_TO_SRGB,
)
from chromalut.core.kernels import delta_e_numba, lab_to_rgb_numba, rgb_to_lab_numba
from chromalut.core.numeric import round_to
from chromalut.core.tables import get_tables
from chromalut.errors import UnsupportedFormat
from chromalut.formatting import (
    format_cmyk,
    format_hex,
    format_hsb,
    format_hsl,
    format_hsla,
    format_lab,
    format_rgb,
    format_rgba,
    format_xyz,
)
from chromalut.parser import parse
from chromalut.spaces import rgb_to_cmyk, rgb_to_hsb, rgb_to_hsl, rgb_to_lab, rgb_to_xyz
from chromalut.types import RGBA
from chromalut.validators import validate_type

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """
    A canonical color projected into several output formats.

    Attributes:
        success: Always True; failures raise instead
        input: The string that was converted
        color: Canonical RGBA
        hex, rgb, rgba, hsl, hsla, hsb, hsv, cmyk, lab, xyz: Formatted
            strings, None for formats that were not requested
        raw_values: Format name -> numeric components
    """

    success: bool = True
    input: str = ""
    color: RGBA | None = None
    hex: str | None = None
    rgb: str | None = None
    rgba: str | None = None
    hsl: str | None = None
    hsla: str | None = None
    hsb: str | None = None
    hsv: str | None = None
    cmyk: str | None = None
    lab: str | None = None
    xyz: str | None = None
    raw_values: dict[str, dict[str, float]] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict view without unset formats."""
        out: dict[str, Any] = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if value is None:
                continue
            if isinstance(value, RGBA):
                value = value.as_dict()
            elif f.name == "raw_values":
                value = copy.deepcopy(value)
            out[f.name] = value
        return out


def _check_formats(formats: Iterable[str] | None) -> tuple[str, ...]:
    if formats is None:
        return OUTPUT_FORMATS
    if isinstance(formats, str):
        formats = [formats]
    result = []
    for fmt in formats:
        name = fmt.strip().lower() if isinstance(fmt, str) else fmt
        if name not in OUTPUT_FORMATS:
            raise UnsupportedFormat(fmt, OUTPUT_FORMATS, operation="convert")
        if name not in result:
            result.append(name)
    return tuple(result)


def describe(
    color: RGBA,
    formats: Iterable[str] | None = None,
    input: str = "",
    cls: type[ConversionResult] = ConversionResult,
    **extra: Any,
) -> ConversionResult:
    """
    Project a canonical color into the requested formats.

    Args:
        color: Canonical color
        formats: Output format names (default: all)
        input: Value recorded in the result's ``input`` field
        cls: Result class to build (subclasses add fields via ``extra``)

    Returns:
        A fully populated result
    """
    targets = _check_formats(formats)
    values: dict[str, Any] = {}
    raw: dict[str, dict[str, float]] = {"rgb": {"r": color.r, "g": color.g, "b": color.b}}

    hsl = rgb_to_hsl(color) if {"hsl", "hsla"} & set(targets) else None
    for fmt in targets:
        if fmt == "hex":
            values["hex"] = format_hex(color)
        elif fmt == "rgb":
            values["rgb"] = format_rgb(color)
        elif fmt == "rgba":
            values["rgba"] = format_rgba(color)
            raw["rgba"] = {**color.as_dict(), "a": round_to(color.a, ALPHA_DECIMALS)}
        elif fmt == "hsl":
            values["hsl"] = format_hsl(hsl)
            raw["hsl"] = hsl.as_dict()
        elif fmt == "hsla":
            values["hsla"] = format_hsla(hsl, color.a)
            raw["hsla"] = {**hsl.as_dict(), "a": round_to(color.a, ALPHA_DECIMALS)}
        elif fmt in ("hsb", "hsv"):
            hsb = rgb_to_hsb(color)
            values[fmt] = format_hsb(hsb)
            raw[fmt] = hsb.as_dict()
        elif fmt == "cmyk":
            cmyk = rgb_to_cmyk(color)
            values["cmyk"] = format_cmyk(cmyk)
            raw["cmyk"] = cmyk.as_dict()
        elif fmt == "lab":
            lab = rgb_to_lab(color)
            values["lab"] = format_lab(lab)
            raw["lab"] = {k: round_to(v, LAB_DECIMALS) for k, v in lab.as_dict().items()}
        elif fmt == "xyz":
            xyz = rgb_to_xyz(color)
            values["xyz"] = format_xyz(xyz)
            raw["xyz"] = {k: round_to(v, XYZ_DECIMALS) for k, v in xyz.as_dict().items()}

    return cls(success=True, input=input, color=color, raw_values=raw, **values, **extra)


@validate_type(str, "value", param_index=0)
def convert(
    value: str,
    formats: Iterable[str] | None = None,
    source_format: str | None = None,
    cache: ConversionCache | None = None,
) -> ConversionResult:
    """
    Parse ``value`` and convert it to the requested formats.

    Args:
        value: Any parseable color string
        formats: Output formats (default: hex, rgb, rgba, hsl, hsla, hsb,
            hsv, cmyk, lab, xyz)
        source_format: Restrict parsing to one input grammar
        cache: Optional cache for memoizing results

    Returns:
        ConversionResult; it is equal to the uncached result for the same input

    Raises:
        InvalidFormat: If value cannot be parsed
        OutOfRangeValue: If a parsed component is out of range
        UnsupportedFormat: If a requested format is unknown
    """
    targets = _check_formats(formats)
    if cache is None:
        return describe(parse(value, source_format), targets, input=value)

    key = ConversionCache.make_key(value, source_format, targets)
    cached = cache.get(key)
    if cached is not None:
        logger.debug("[Converter] Cache hit for %r", key)
        return replace(cached, input=value, raw_values=copy.deepcopy(cached.raw_values))

    logger.debug("[Converter] Cache miss for %r", key)
    result = describe(parse(value, source_format), targets, input=value)
    cache.put(key, result)
    return replace(result, raw_values=copy.deepcopy(result.raw_values))


def convert_batch(
    values: Sequence[str],
    formats: Iterable[str] | None = None,
    source_format: str | None = None,
    cache: ConversionCache | None = None,
) -> list[ConversionResult]:
    """
    Convert several colors; the first invalid input raises and nothing is returned.
    """
    targets = _check_formats(formats)
    return [convert(v, targets, source_format, cache) for v in values]


# =============================================================================
# Array API (numba)
# =============================================================================


def _as_rows(array: Any, name: str) -> np.ndarray:
    arr = np.asarray(array, dtype=np.float64)
    if arr.ndim == 1:
        arr = arr.reshape(1, -1)
    if arr.ndim != 2 or arr.shape[1] != 3:
        raise ValueError(f"{name} must have shape (N, 3) or (3,), got {np.shape(array)}")
    return np.ascontiguousarray(arr)


def rgb_array_to_lab(rgb: Any) -> np.ndarray:
    """
    Convert an ``(N, 3)`` array of 0-255 RGB rows to LAB.

    Channels outside [0, 255] are clipped before conversion.
    """
    rows = np.clip(_as_rows(rgb, "rgb"), 0.0, 255.0)
    tables = get_tables()
    out = np.empty_like(rows)
    rgb_to_lab_numba(
        rows,
        tables.gamma_decode_table,
        tables.lab_forward_table,
        np.asarray(SRGB_TO_XYZ, dtype=np.float64),
        np.asarray(D65_WHITE, dtype=np.float64),
        out,
    )
    return out


def lab_array_to_rgb(lab: Any) -> np.ndarray:
    """Convert an ``(N, 3)`` LAB array to ``uint8`` RGB rows."""
    rows = _as_rows(lab, "lab")
    tables = get_tables()
    out = np.empty_like(rows)
    lab_to_rgb_numba(
        rows,
        tables.lab_inverse_table,
        tables.gamma_encode_table,
        np.asarray(XYZ_TO_SRGB, dtype=np.float64),
        np.asarray(D65_WHITE, dtype=np.float64),
        out,
    )
    return out.astype(np.uint8)


def delta_e_array(lab_a: Any, lab_b: Any) -> np.ndarray:
    """Row-wise CIE76 distances between two LAB arrays of equal length."""
    a = _as_rows(lab_a, "lab_a")
    b = _as_rows(lab_b, "lab_b")
    if a.shape != b.shape:
        raise ValueError(f"Shape mismatch: {a.shape} vs {b.shape}")
    out = np.empty(a.shape[0], dtype=np.float64)
    delta_e_numba(a, b, out)
    return out
