"""
Constants and default values for chromalut.

Centralizes table resolutions, colorimetric coefficients and configuration
defaults so that every module reads them from one place.
"""

from __future__ import annotations

# =============================================================================
# Lookup Table Constants
# =============================================================================

GAMMA_TABLE_SIZE = 4096  # sRGB transfer function resolution
LAB_TABLE_SIZE = 2048  # CIE LAB nonlinearity resolution
TRIG_STEP_DEGREES = 0.1  # Hue-wheel trig resolution

MIN_TABLE_SIZE = 256  # Smaller tables break the two-step round-trip tolerance
MAX_TABLE_SIZE = 65536

# sRGB transfer function
SRGB_ENCODE_THRESHOLD = 0.0031308  # Linear-side breakpoint
SRGB_DECODE_THRESHOLD = 0.04045  # Encoded-side breakpoint
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4
SRGB_SCALE = 1.055
SRGB_OFFSET = 0.055

# CIE LAB nonlinearity
LAB_EPSILON = 0.008856
LAB_KAPPA = 7.787
LAB_OFFSET = 16.0 / 116.0

# =============================================================================
# Colorimetry
# =============================================================================

# D65 reference white (scaled to Y = 100)
D65_WHITE = (95.047, 100.0, 108.883)

# Row-major 3x3 matrices, sRGB primaries with D65 white
SRGB_TO_XYZ = (
    0.4124564, 0.3575761, 0.1804375,
    0.2126729, 0.7151522, 0.0721750,
    0.0193339, 0.1191920, 0.9503041,
)

XYZ_TO_SRGB = (
    3.2404542, -1.5371385, -0.4985314,
    -0.9692660, 1.8760108, 0.0415560,
    0.0556434, -0.2040259, 1.0572252,
)

# =============================================================================
# Value Ranges
# =============================================================================

RGB_MIN = 0
RGB_MAX = 255
HUE_MIN = 0.0
HUE_MAX = 360.0
PERCENT_MIN = 0.0
PERCENT_MAX = 100.0
ALPHA_MIN = 0.0
ALPHA_MAX = 1.0
LAB_L_MIN = 0.0
LAB_L_MAX = 100.0
LAB_AB_LIMIT = 128.0  # Conventional |a|, |b| bound accepted by the parser

# Formatting precision
LAB_DECIMALS = 2
XYZ_DECIMALS = 3
ALPHA_DECIMALS = 3
MIX_ALPHA_DECIMALS = 4

# =============================================================================
# Formats, Modes, Schemes
# =============================================================================

INPUT_FORMATS = ("hex", "rgb", "hsl", "hsb", "cmyk", "lab", "xyz", "named")

OUTPUT_FORMATS = ("hex", "rgb", "rgba", "hsl", "hsla", "hsb", "hsv", "cmyk", "lab", "xyz")

HARMONY_OUTPUT_FORMATS = ("hex", "rgb", "hsl", "hsb", "hsv", "cmyk", "lab", "xyz")

BLEND_MODES = ("normal", "multiply", "screen", "overlay")

HARMONY_TYPES = (
    "complementary",
    "analogous",
    "triadic",
    "tetradic",
    "square",
    "split-complementary",
    "double-complementary",
)

# Schemes produced by generate_all_harmonies ("square" aliases "tetradic")
ALL_HARMONY_TYPES = (
    "complementary",
    "analogous",
    "triadic",
    "tetradic",
    "split-complementary",
    "double-complementary",
)

# =============================================================================
# Defaults
# =============================================================================

DEFAULT_CACHE_SIZE = 100
MAX_CACHE_SIZE = 1_000_000
DEFAULT_MIX_RATIO = 0.5
DEFAULT_BLEND_MODE = "normal"
DEFAULT_OUTPUT_FORMAT = "hex"

DEFAULT_ANALOGOUS_COUNT = 3
DEFAULT_ANALOGOUS_ANGLE = 30.0
DEFAULT_SPLIT_ANGLE = 30.0
DEFAULT_DOUBLE_ANGLE = 30.0
MAX_ANALOGOUS_COUNT = 36

# =============================================================================
# Accessibility (WCAG 2.x)
# =============================================================================

WCAG_LINEAR_THRESHOLD = 0.03928
WCAG_AA_NORMAL = 4.5
WCAG_AA_LARGE = 3.0
WCAG_AAA_NORMAL = 7.0
WCAG_AAA_LARGE = 4.5
DEFAULT_TARGET_CONTRAST = WCAG_AA_NORMAL

# Color vision simulation
DEFAULT_DISTINGUISH_THRESHOLD = 10.0
PALETTE_DISTINGUISH_THRESHOLD = 30.0
PALETTE_CANDIDATES = 100
