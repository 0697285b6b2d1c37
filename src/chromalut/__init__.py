"""
chromalut - Table-Driven Color Conversion, Mixing and Harmony

Deterministic color transforms across hex, RGB(A), HSL(A), HSB/HSV, CMYK,
CIE LAB, CIE XYZ and CSS named colors, backed by precomputed lookup tables.

Features:
- One parser for every common CSS-style notation, with typed errors
- Round-trippable conversions through a canonical RGBA color
- Perceptual mixing (LAB interpolation) plus multiply, screen and overlay
- Hue-wheel harmonies: complementary, analogous, triadic, tetradic/square,
  split- and double-complementary
- Thread-safe LRU conversion cache with hit/miss statistics
- WCAG contrast checks and color vision deficiency simulation
- Numba kernels for palette-sized RGB/LAB batches

Example - Conversion:
    >>> from chromalut import convert
    >>>
    >>> result = convert("rgb(255, 0, 0)", ["hex", "hsl"])
    >>> result.hex, result.hsl
    ('#ff0000', 'hsl(0,100%,50%)')

Example - Mixing:
    >>> from chromalut import mix_colors
    >>>
    >>> mix_colors("#808080", "#808080", 1.0, "multiply").hex
    '#404040'

Example - Harmony:
    >>> from chromalut import generate_harmony
    >>>
    >>> generate_harmony("#ff0000", "complementary").colors
    ['#ff0000', '#00ffff']

Example - Dedicated engine:
    >>> from chromalut import ColorEngine
    >>>
    >>> engine = ColorEngine(cache_size=500)
    >>> engine.convert("navy").rgb
    'rgb(0,0,128)'
"""

__version__ = "0.1.0"

# Accessibility
from chromalut.accessibility import (
    ContrastResult,
    check_contrast,
    contrast_ratio,
    contrast_report,
    find_accessible_color,
    relative_luminance,
    suggest_accessible_pairs,
)

# Cache
from chromalut.cache import CacheStats, ConversionCache

# Conversion
from chromalut.converter import (
    ConversionResult,
    convert_batch,
    delta_e_array,
    lab_array_to_rgb,
    rgb_array_to_lab,
)

# Numeric core
from chromalut.core import LookupTables, get_tables

# Engine and default-engine helpers
from chromalut.engine import (
    ColorEngine,
    cache_stats,
    clear_cache,
    convert,
    generate_all_harmonies,
    generate_harmony,
    get_default_engine,
    mix_colors,
    set_default_engine,
)

# Errors
from chromalut.errors import (
    ColorError,
    ErrorCode,
    InvalidFormat,
    OutOfRangeValue,
    UnknownBlendMode,
    UnknownHarmonyType,
    UnsupportedFormat,
)

# Harmony
from chromalut.harmony import HarmonyOptions, HarmonyResult

# Mixing
from chromalut.mixer import MixResult, blend_channels

# Named colors
from chromalut.named_colors import (
    COMMON_COLORS,
    NAMED_COLORS,
    is_named_color,
    lookup_named,
    name_for_hex,
    nearest_named_color,
)

# Parsing
from chromalut.parser import detect_format, is_valid_color, parse

# Color space conversions
from chromalut.spaces import (
    cmyk_to_rgb,
    hex_to_rgb,
    hsb_to_rgb,
    hsl_to_rgb,
    lab_to_lch,
    lab_to_rgb,
    lab_to_xyz,
    lch_to_lab,
    rgb_to_cmyk,
    rgb_to_hex,
    rgb_to_hsb,
    rgb_to_hsl,
    rgb_to_lab,
    rgb_to_xyz,
    xyz_to_lab,
    xyz_to_rgb,
)

# Value types
from chromalut.types import CMYK, HSB, HSL, LAB, RGBA, XYZ

# Color vision
from chromalut.vision import (
    are_distinguishable,
    find_safe_alternative,
    generate_safe_palette,
    simulate_all,
    simulate_color_blindness,
)

__all__ = [
    # Version
    "__version__",
    # Value types
    "RGBA",
    "HSL",
    "HSB",
    "CMYK",
    "LAB",
    "XYZ",
    # Engine
    "ColorEngine",
    "get_default_engine",
    "set_default_engine",
    "clear_cache",
    "cache_stats",
    # Core operations
    "parse",
    "detect_format",
    "is_valid_color",
    "convert",
    "convert_batch",
    "mix_colors",
    "blend_channels",
    "generate_harmony",
    "generate_all_harmonies",
    # Results
    "ConversionResult",
    "MixResult",
    "HarmonyOptions",
    "HarmonyResult",
    "ContrastResult",
    "CacheStats",
    "ConversionCache",
    # Color spaces
    "hex_to_rgb",
    "rgb_to_hex",
    "rgb_to_hsl",
    "hsl_to_rgb",
    "rgb_to_hsb",
    "hsb_to_rgb",
    "rgb_to_cmyk",
    "cmyk_to_rgb",
    "rgb_to_xyz",
    "xyz_to_rgb",
    "xyz_to_lab",
    "lab_to_xyz",
    "rgb_to_lab",
    "lab_to_rgb",
    "lab_to_lch",
    "lch_to_lab",
    # Arrays
    "rgb_array_to_lab",
    "lab_array_to_rgb",
    "delta_e_array",
    "LookupTables",
    "get_tables",
    # Named colors
    "NAMED_COLORS",
    "COMMON_COLORS",
    "is_named_color",
    "lookup_named",
    "name_for_hex",
    "nearest_named_color",
    # Accessibility
    "relative_luminance",
    "contrast_ratio",
    "check_contrast",
    "contrast_report",
    "find_accessible_color",
    "suggest_accessible_pairs",
    # Color vision
    "simulate_color_blindness",
    "simulate_all",
    "are_distinguishable",
    "find_safe_alternative",
    "generate_safe_palette",
    # Errors
    "ColorError",
    "ErrorCode",
    "InvalidFormat",
    "OutOfRangeValue",
    "UnknownBlendMode",
    "UnknownHarmonyType",
    "UnsupportedFormat",
]
