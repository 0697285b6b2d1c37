"""
Color string parsing.

Turns any supported textual notation into a canonical :class:`RGBA`.
Grammars are tried in a fixed priority order: hex, rgb/rgba, hsl/hsla,
hsb/hsv, cmyk, lab, xyz, then the named color table. Matching is
case-insensitive and whitespace-insensitive; components may be separated by
commas, spaces or a ``/`` before alpha.

Example:
    >>> parse("#f00")
    RGBA(r=255, g=0, b=0, a=1.0)
    >>> parse("hsl(120deg, 100%, 25%)").hex
    '#008000'
    >>> parse("rgba(255, 0, 0, 0.5)").a
    0.5
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable

from chromalut.constants import INPUT_FORMATS, LAB_AB_LIMIT
from chromalut.core.numeric import normalize_hue, round_half_up
from chromalut.errors import InvalidFormat, OutOfRangeValue, UnsupportedFormat
from chromalut.named_colors import CURRENT_COLOR, TRANSPARENT, is_named_color, lookup_named
from chromalut.spaces import cmyk_to_rgb, hex_to_rgb, hsb_to_rgb, hsl_to_rgb, lab_to_rgb, xyz_to_rgb
from chromalut.types import CMYK, HSB, HSL, LAB, RGBA, XYZ, alpha, lab_lightness, percentage
from chromalut.validators import check_range, validate_type

logger = logging.getLogger(__name__)

HEX_RE = re.compile(r"^#(?:[0-9a-f]{3,4}|[0-9a-f]{6}|[0-9a-f]{8})$")
FUNCTION_RE = re.compile(r"^([a-z]+)\s*\((.*)\)$", re.DOTALL)
BARE_RGB_RE = re.compile(r"^\d+(?:\.\d+)?\s*,\s*\d+(?:\.\d+)?\s*,\s*\d+(?:\.\d+)?$")
TOKEN_RE = re.compile(r"^([+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:e[+-]?\d+)?)(%|deg)?$")
SPLIT_RE = re.compile(r"[\s,/]+")

# Function name -> grammar name
_FUNCTION_GRAMMARS = {
    "rgb": "rgb",
    "rgba": "rgb",
    "hsl": "hsl",
    "hsla": "hsl",
    "hsb": "hsb",
    "hsv": "hsb",
    "cmyk": "cmyk",
    "lab": "lab",
    "xyz": "xyz",
}

# Accepted source_format names -> grammar name
_FORMAT_ALIASES = {**_FUNCTION_GRAMMARS, **{name: name for name in INPUT_FORMATS}}


class _Token:
    __slots__ = ("value", "unit")

    def __init__(self, value: float, unit: str | None):
        self.value = value
        self.unit = unit


def _tokenize(raw: str, inner: str) -> list[_Token]:
    tokens = []
    for part in SPLIT_RE.split(inner.strip()):
        if not part:
            continue
        match = TOKEN_RE.match(part)
        if match is None:
            raise InvalidFormat(raw, f"Invalid color format: {raw!r} (bad component {part!r})")
        tokens.append(_Token(float(match.group(1)), match.group(2)))
    return tokens


def _alpha(raw: str, token: _Token) -> float:
    if token.unit == "%":
        return alpha(token.value / 100.0)
    if token.unit is not None:
        raise InvalidFormat(raw)
    return alpha(token.value)


def _with_alpha(raw: str, color: RGBA, tokens: list[_Token]) -> RGBA:
    """Apply a fourth alpha component when the notation carries one."""
    if len(tokens) == 4:
        return color.with_alpha(_alpha(raw, tokens[3]))
    return color


def _percent(raw: str, token: _Token, name: str) -> float:
    if token.unit not in (None, "%"):
        raise InvalidFormat(raw)
    return percentage(token.value, name)


def _expect(raw: str, tokens: list[_Token], counts: tuple[int, ...], grammar: str) -> None:
    if len(tokens) not in counts:
        raise InvalidFormat(
            raw,
            f"Invalid {grammar} color: {raw!r} expects "
            f"{' or '.join(str(c) for c in counts)} components, got {len(tokens)}",
            format=grammar,
        )


# =============================================================================
# Grammars
# =============================================================================


def _parse_rgb(raw: str, tokens: list[_Token]) -> RGBA:
    _expect(raw, tokens, (3, 4), "rgb")
    channels = []
    for token, name in zip(tokens[:3], ("r", "g", "b")):
        if token.unit == "%":
            channels.append(round_half_up(percentage(token.value, name) * 255 / 100))
        elif token.unit is None:
            channels.append(round_half_up(check_range(token.value, 0, 255, name)))
        else:
            raise InvalidFormat(raw)
    return _with_alpha(raw, RGBA(*channels), tokens)


def _hue_token(raw: str, token: _Token) -> float:
    if token.unit == "%":
        raise InvalidFormat(raw, f"Invalid hue in {raw!r}: hue is an angle, not a percentage")
    return normalize_hue(token.value)


def _parse_hsl(raw: str, tokens: list[_Token]) -> RGBA:
    _expect(raw, tokens, (3, 4), "hsl")
    hsl = HSL(
        _hue_token(raw, tokens[0]),
        _percent(raw, tokens[1], "saturation"),
        _percent(raw, tokens[2], "lightness"),
    )
    return _with_alpha(raw, hsl_to_rgb(hsl), tokens)


def _parse_hsb(raw: str, tokens: list[_Token]) -> RGBA:
    _expect(raw, tokens, (3, 4), "hsb")
    hsb = HSB(
        _hue_token(raw, tokens[0]),
        _percent(raw, tokens[1], "saturation"),
        _percent(raw, tokens[2], "brightness"),
    )
    return _with_alpha(raw, hsb_to_rgb(hsb), tokens)


def _parse_cmyk(raw: str, tokens: list[_Token]) -> RGBA:
    _expect(raw, tokens, (4,), "cmyk")
    values = [_percent(raw, t, n) for t, n in zip(tokens, ("cyan", "magenta", "yellow", "key"))]
    return cmyk_to_rgb(CMYK(*values))


def _parse_lab(raw: str, tokens: list[_Token]) -> RGBA:
    _expect(raw, tokens, (3, 4), "lab")
    if tokens[0].unit not in (None, "%") or tokens[1].unit or tokens[2].unit:
        raise InvalidFormat(raw)
    lab = LAB(
        lab_lightness(tokens[0].value, "lightness"),
        check_range(tokens[1].value, -LAB_AB_LIMIT, LAB_AB_LIMIT, "a"),
        check_range(tokens[2].value, -LAB_AB_LIMIT, LAB_AB_LIMIT, "b"),
    )
    return _with_alpha(raw, lab_to_rgb(lab), tokens)


def _parse_xyz(raw: str, tokens: list[_Token]) -> RGBA:
    _expect(raw, tokens, (3, 4), "xyz")
    if any(t.unit for t in tokens[:3]):
        raise InvalidFormat(raw)
    xyz = XYZ(tokens[0].value, tokens[1].value, tokens[2].value)
    return _with_alpha(raw, xyz_to_rgb(xyz), tokens)


_FUNCTION_PARSERS: dict[str, Callable[[str, list[_Token]], RGBA]] = {
    "rgb": _parse_rgb,
    "hsl": _parse_hsl,
    "hsb": _parse_hsb,
    "cmyk": _parse_cmyk,
    "lab": _parse_lab,
    "xyz": _parse_xyz,
}


def _parse_named(raw: str, text: str) -> RGBA | None:
    value = lookup_named(text)
    if value is None:
        return None
    if value == TRANSPARENT:
        return RGBA(0, 0, 0, 0.0)
    if value == CURRENT_COLOR:
        raise InvalidFormat(
            raw,
            "Invalid color format: 'currentcolor' has no value outside a rendering context",
            format="named",
        )
    return hex_to_rgb(value)


# =============================================================================
# Public API
# =============================================================================


def detect_format(value: str) -> str | None:
    """
    Name of the grammar ``value`` is written in, or None.

    Detection is syntactic only; a detected string may still fail parsing
    because of out-of-range components.
    """
    text = value.strip().lower()
    if HEX_RE.match(text):
        return "hex"
    match = FUNCTION_RE.match(text)
    if match and match.group(1) in _FUNCTION_GRAMMARS:
        return _FUNCTION_GRAMMARS[match.group(1)]
    if BARE_RGB_RE.match(text):
        return "rgb"
    if is_named_color(text):
        return "named"
    return None


@validate_type(str, "value", param_index=0)
def parse(value: str, source_format: str | None = None) -> RGBA:
    """
    Parse a color string into a canonical :class:`RGBA`.

    Args:
        value: Color notation (hex, rgb(), hsl(), hsb()/hsv(), cmyk(), lab(),
            xyz() or a CSS color name)
        source_format: Restrict parsing to one grammar (``"hex"``, ``"rgb"``,
            ``"hsl"``, ``"hsb"``, ``"cmyk"``, ``"lab"``, ``"xyz"``, ``"named"``
            or an alias such as ``"rgba"``/``"hsv"``)

    Returns:
        Canonical color; alpha is 1.0 unless the notation carries one

    Raises:
        TypeError: If value is not a string
        InvalidFormat: If no grammar matches
        OutOfRangeValue: If a grammar matches but a component is out of range
        UnsupportedFormat: If source_format is not a known grammar
    """
    grammar = None
    if source_format is not None:
        grammar = _FORMAT_ALIASES.get(source_format.strip().lower())
        if grammar is None:
            raise UnsupportedFormat(source_format, INPUT_FORMATS, operation="parse")

    text = value.strip().lower()
    if not text:
        raise InvalidFormat(value, "Invalid color format: empty string")

    if grammar in (None, "hex") and HEX_RE.match(text):
        logger.debug("[Parser] %r parsed as hex", value)
        return hex_to_rgb(text)

    match = FUNCTION_RE.match(text)
    if match and match.group(1) in _FUNCTION_GRAMMARS:
        detected = _FUNCTION_GRAMMARS[match.group(1)]
        if grammar in (None, detected):
            logger.debug("[Parser] %r parsed as %s", value, detected)
            return _FUNCTION_PARSERS[detected](value, _tokenize(value, match.group(2)))

    if grammar in (None, "rgb") and BARE_RGB_RE.match(text):
        return _parse_rgb(value, _tokenize(value, text))

    if grammar in (None, "named"):
        named = _parse_named(value, text)
        if named is not None:
            logger.debug("[Parser] %r parsed as named color", value)
            return named

    if grammar is not None:
        raise InvalidFormat(value, f"Invalid {grammar} color: {value!r}", format=grammar)
    raise InvalidFormat(value)


def coerce_color(color: str | RGBA | tuple | list) -> RGBA:
    """Accept a color string, an :class:`RGBA`, or an ``(r, g, b[, a])`` sequence."""
    if isinstance(color, RGBA):
        return color
    if isinstance(color, str):
        return parse(color)
    if isinstance(color, (tuple, list)):
        return RGBA.from_tuple(color)
    raise TypeError(f"color must be str, RGBA or tuple, got {type(color).__name__}")


def is_valid_color(value: str) -> bool:
    """True when ``value`` parses; range and format errors yield False."""
    try:
        parse(value)
    except (InvalidFormat, OutOfRangeValue, TypeError):
        return False
    return True
