"""Numeric core: closed-form helpers, lookup tables and batch kernels."""

from chromalut.core.numeric import (
    calculate_hue,
    calculate_lightness,
    calculate_saturation,
    clamp,
    clamp01,
    clamp_to_byte,
    delta_e,
    distance_squared,
    lerp,
    matrix_transform_3x3,
    normalize_hue,
    round_half_up,
    round_to,
)
from chromalut.core.tables import (
    LookupTables,
    cos_degrees,
    gamma_decode,
    gamma_encode,
    get_tables,
    lab_forward,
    lab_inverse,
    sin_degrees,
    table_memory_usage,
    table_sizes,
)

__all__ = [
    "LookupTables",
    "get_tables",
    "gamma_encode",
    "gamma_decode",
    "lab_forward",
    "lab_inverse",
    "sin_degrees",
    "cos_degrees",
    "table_sizes",
    "table_memory_usage",
    "calculate_hue",
    "calculate_lightness",
    "calculate_saturation",
    "clamp",
    "clamp01",
    "clamp_to_byte",
    "delta_e",
    "distance_squared",
    "lerp",
    "matrix_transform_3x3",
    "normalize_hue",
    "round_half_up",
    "round_to",
]
