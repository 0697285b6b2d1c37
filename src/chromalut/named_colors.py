"""
CSS named color table.

``NAMED_COLORS`` maps every CSS Color Module Level 4 keyword to its hex
value, plus the two non-hex keywords ``transparent`` and ``currentcolor``.
Aliases (``aqua``/``cyan``, ``fuchsia``/``magenta``, the ``gray``/``grey``
spellings) are bound to the very same string.
"""

from __future__ import annotations

import logging
import threading
from types import MappingProxyType

import numpy as np

logger = logging.getLogger(__name__)

TRANSPARENT = "transparent"
CURRENT_COLOR = "currentcolor"

_AQUA = "#00ffff"
_FUCHSIA = "#ff00ff"

_CSS_COLORS: dict[str, str] = {
    "aliceblue": "#f0f8ff",
    "antiquewhite": "#faebd7",
    "aqua": _AQUA,
    "aquamarine": "#7fffd4",
    "azure": "#f0ffff",
    "beige": "#f5f5dc",
    "bisque": "#ffe4c4",
    "black": "#000000",
    "blanchedalmond": "#ffebcd",
    "blue": "#0000ff",
    "blueviolet": "#8a2be2",
    "brown": "#a52a2a",
    "burlywood": "#deb887",
    "cadetblue": "#5f9ea0",
    "chartreuse": "#7fff00",
    "chocolate": "#d2691e",
    "coral": "#ff7f50",
    "cornflowerblue": "#6495ed",
    "cornsilk": "#fff8dc",
    "crimson": "#dc143c",
    "cyan": _AQUA,
    "darkblue": "#00008b",
    "darkcyan": "#008b8b",
    "darkgoldenrod": "#b8860b",
    "darkgray": "#a9a9a9",
    "darkgreen": "#006400",
    "darkgrey": "#a9a9a9",
    "darkkhaki": "#bdb76b",
    "darkmagenta": "#8b008b",
    "darkolivegreen": "#556b2f",
    "darkorange": "#ff8c00",
    "darkorchid": "#9932cc",
    "darkred": "#8b0000",
    "darksalmon": "#e9967a",
    "darkseagreen": "#8fbc8f",
    "darkslateblue": "#483d8b",
    "darkslategray": "#2f4f4f",
    "darkslategrey": "#2f4f4f",
    "darkturquoise": "#00ced1",
    "darkviolet": "#9400d3",
    "deeppink": "#ff1493",
    "deepskyblue": "#00bfff",
    "dimgray": "#696969",
    "dimgrey": "#696969",
    "dodgerblue": "#1e90ff",
    "firebrick": "#b22222",
    "floralwhite": "#fffaf0",
    "forestgreen": "#228b22",
    "fuchsia": _FUCHSIA,
    "gainsboro": "#dcdcdc",
    "ghostwhite": "#f8f8ff",
    "gold": "#ffd700",
    "goldenrod": "#daa520",
    "gray": "#808080",
    "green": "#008000",
    "greenyellow": "#adff2f",
    "grey": "#808080",
    "honeydew": "#f0fff0",
    "hotpink": "#ff69b4",
    "indianred": "#cd5c5c",
    "indigo": "#4b0082",
    "ivory": "#fffff0",
    "khaki": "#f0e68c",
    "lavender": "#e6e6fa",
    "lavenderblush": "#fff0f5",
    "lawngreen": "#7cfc00",
    "lemonchiffon": "#fffacd",
    "lightblue": "#add8e6",
    "lightcoral": "#f08080",
    "lightcyan": "#e0ffff",
    "lightgoldenrodyellow": "#fafad2",
    "lightgray": "#d3d3d3",
    "lightgreen": "#90ee90",
    "lightgrey": "#d3d3d3",
    "lightpink": "#ffb6c1",
    "lightsalmon": "#ffa07a",
    "lightseagreen": "#20b2aa",
    "lightskyblue": "#87cefa",
    "lightslategray": "#778899",
    "lightslategrey": "#778899",
    "lightsteelblue": "#b0c4de",
    "lightyellow": "#ffffe0",
    "lime": "#00ff00",
    "limegreen": "#32cd32",
    "linen": "#faf0e6",
    "magenta": _FUCHSIA,
    "maroon": "#800000",
    "mediumaquamarine": "#66cdaa",
    "mediumblue": "#0000cd",
    "mediumorchid": "#ba55d3",
    "mediumpurple": "#9370db",
    "mediumseagreen": "#3cb371",
    "mediumslateblue": "#7b68ee",
    "mediumspringgreen": "#00fa9a",
    "mediumturquoise": "#48d1cc",
    "mediumvioletred": "#c71585",
    "midnightblue": "#191970",
    "mintcream": "#f5fffa",
    "mistyrose": "#ffe4e1",
    "moccasin": "#ffe4b5",
    "navajowhite": "#ffdead",
    "navy": "#000080",
    "oldlace": "#fdf5e6",
    "olive": "#808000",
    "olivedrab": "#6b8e23",
    "orange": "#ffa500",
    "orangered": "#ff4500",
    "orchid": "#da70d6",
    "palegoldenrod": "#eee8aa",
    "palegreen": "#98fb98",
    "paleturquoise": "#afeeee",
    "palevioletred": "#db7093",
    "papayawhip": "#ffefd5",
    "peachpuff": "#ffdab9",
    "peru": "#cd853f",
    "pink": "#ffc0cb",
    "plum": "#dda0dd",
    "powderblue": "#b0e0e6",
    "purple": "#800080",
    "rebeccapurple": "#663399",
    "red": "#ff0000",
    "rosybrown": "#bc8f8f",
    "royalblue": "#4169e1",
    "saddlebrown": "#8b4513",
    "salmon": "#fa8072",
    "sandybrown": "#f4a460",
    "seagreen": "#2e8b57",
    "seashell": "#fff5ee",
    "sienna": "#a0522d",
    "silver": "#c0c0c0",
    "skyblue": "#87ceeb",
    "slateblue": "#6a5acd",
    "slategray": "#708090",
    "slategrey": "#708090",
    "snow": "#fffafa",
    "springgreen": "#00ff7f",
    "steelblue": "#4682b4",
    "tan": "#d2b48c",
    "teal": "#008080",
    "thistle": "#d8bfd8",
    "tomato": "#ff6347",
    "turquoise": "#40e0d0",
    "violet": "#ee82ee",
    "wheat": "#f5deb3",
    "white": "#ffffff",
    "whitesmoke": "#f5f5f5",
    "yellow": "#ffff00",
    "yellowgreen": "#9acd32",
}

NAMED_COLORS: MappingProxyType[str, str] = MappingProxyType(
    {**_CSS_COLORS, TRANSPARENT: TRANSPARENT, CURRENT_COLOR: CURRENT_COLOR}
)

# Frequently requested colors, used by callers that want a short list
COMMON_COLORS: MappingProxyType[str, str] = MappingProxyType(
    {
        name: _CSS_COLORS[name]
        for name in (
            "black",
            "white",
            "red",
            "green",
            "blue",
            "yellow",
            "cyan",
            "magenta",
            "gray",
            "orange",
            "purple",
            "pink",
        )
    }
)

_HEX_TO_NAME: MappingProxyType[str, str] = MappingProxyType(
    {hex_value: name for name, hex_value in sorted(_CSS_COLORS.items(), reverse=True)}
)


def lookup_named(name: str) -> str | None:
    """Case-insensitive lookup; returns the hex (or keyword) or None."""
    return NAMED_COLORS.get(name.strip().lower())


def is_named_color(name: str) -> bool:
    return lookup_named(name) is not None


def name_for_hex(hex_value: str) -> str | None:
    """
    Exact reverse lookup.

    When several names share a value the alphabetically first one wins
    (``#00ffff`` -> ``aqua``).
    """
    return _HEX_TO_NAME.get(hex_value.strip().lower())


# Palette of named colors in LAB, built on first nearest-name query
_lab_palette: tuple[tuple[str, ...], np.ndarray] | None = None
_lab_palette_lock = threading.Lock()


def _get_lab_palette() -> tuple[tuple[str, ...], np.ndarray]:
    global _lab_palette
    if _lab_palette is not None:
        return _lab_palette
    with _lab_palette_lock:
        if _lab_palette is None:
            from chromalut.converter import rgb_array_to_lab

            names = tuple(sorted(_CSS_COLORS))
            rgb = np.array(
                [
                    [int(_CSS_COLORS[n][i : i + 2], 16) for i in (1, 3, 5)]
                    for n in names
                ],
                dtype=np.float64,
            )
            _lab_palette = (names, rgb_array_to_lab(rgb))
            logger.info("[NamedColors] Built LAB palette for %d names", len(names))
        return _lab_palette


def nearest_named_color(color) -> tuple[str, float]:
    """
    Closest CSS color name by CIE76 delta E.

    Args:
        color: Any parseable color string or an RGBA

    Returns:
        ``(name, delta_e)``; aliases resolve to the alphabetically first name

    Example:
        >>> nearest_named_color("#fe0101")[0]
        'red'
    """
    from chromalut.core.kernels import nearest_index_numba
    from chromalut.core.numeric import delta_e
    from chromalut.parser import coerce_color
    from chromalut.spaces import rgb_to_lab

    names, palette = _get_lab_palette()
    lab = rgb_to_lab(coerce_color(color)).as_tuple()
    idx = nearest_index_numba(np.asarray(lab, dtype=np.float64), palette)
    return names[idx], delta_e(lab, tuple(palette[idx]))
