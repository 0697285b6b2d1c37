"""
Engine facade owning the conversion cache.

A :class:`ColorEngine` bundles one :class:`ConversionCache` with the
conversion, mixing and harmony operations. Module-level helpers route through
a lazily created process-wide default engine.

Example:
    >>> engine = ColorEngine(cache_size=50)
    >>> engine.convert("#FF0000", ["rgb"]).rgb
    'rgb(255,0,0)'
    >>> engine.cache_stats().miss_count
    1
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable, Sequence
from typing import Any

from chromalut.cache import CacheStats, ConversionCache
from chromalut.constants import DEFAULT_BLEND_MODE, DEFAULT_CACHE_SIZE, DEFAULT_MIX_RATIO, DEFAULT_OUTPUT_FORMAT
from chromalut.converter import ConversionResult, convert_batch
from chromalut.converter import convert as _convert
from chromalut.harmony import HarmonyOptions, HarmonyResult
from chromalut.harmony import generate_all_harmonies as _generate_all_harmonies
from chromalut.harmony import generate_harmony as _generate_harmony
from chromalut.mixer import MixResult
from chromalut.mixer import mix_colors as _mix_colors
from chromalut.types import RGBA

logger = logging.getLogger(__name__)


class ColorEngine:
    """
    Conversion, mixing and harmony with a shared result cache.

    Args:
        cache_size: Maximum cached conversions (default 100)
        cache_ttl: Seconds a cached conversion stays valid (default: forever)
    """

    __slots__ = ("cache",)

    def __init__(self, cache_size: int = DEFAULT_CACHE_SIZE, cache_ttl: float | None = None):
        self.cache = ConversionCache(cache_size, cache_ttl)
        logger.info("[Engine] Initialized with cache_size=%d", self.cache.max_size)

    def convert(
        self,
        value: str,
        formats: Iterable[str] | None = None,
        source_format: str | None = None,
    ) -> ConversionResult:
        """Cached :func:`chromalut.converter.convert`."""
        return _convert(value, formats, source_format, self.cache)

    def convert_batch(
        self,
        values: Sequence[str],
        formats: Iterable[str] | None = None,
        source_format: str | None = None,
    ) -> list[ConversionResult]:
        return convert_batch(values, formats, source_format, self.cache)

    def mix(
        self,
        color_a: str | RGBA,
        color_b: str | RGBA,
        ratio: float = DEFAULT_MIX_RATIO,
        mode: str = DEFAULT_BLEND_MODE,
        formats: Iterable[str] | None = None,
    ) -> MixResult:
        return _mix_colors(color_a, color_b, ratio, mode, formats)

    def harmony(
        self,
        base_color: str | RGBA,
        harmony_type: str,
        output_format: str = DEFAULT_OUTPUT_FORMAT,
        options: HarmonyOptions | dict[str, Any] | None = None,
    ) -> HarmonyResult:
        return _generate_harmony(base_color, harmony_type, output_format, options)

    def all_harmonies(
        self,
        base_color: str | RGBA,
        output_format: str = DEFAULT_OUTPUT_FORMAT,
        options: HarmonyOptions | dict[str, Any] | None = None,
    ) -> dict[str, HarmonyResult]:
        return _generate_all_harmonies(base_color, output_format, options)

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_stats(self) -> CacheStats:
        return self.cache.stats()

    def __repr__(self) -> str:
        return f"ColorEngine(cache={self.cache!r})"


# =============================================================================
# Process-wide default engine
# =============================================================================

_default_engine: ColorEngine | None = None
_default_lock = threading.Lock()


def get_default_engine() -> ColorEngine:
    """Return the shared engine, creating it on first use."""
    global _default_engine
    if _default_engine is None:
        with _default_lock:
            if _default_engine is None:
                _default_engine = ColorEngine()
    return _default_engine


def set_default_engine(engine: ColorEngine | None) -> None:
    """Replace the shared engine; None resets it to a fresh one on next use."""
    global _default_engine
    if engine is not None and not isinstance(engine, ColorEngine):
        raise TypeError(f"engine must be ColorEngine, got {type(engine).__name__}")
    with _default_lock:
        _default_engine = engine


def clear_cache() -> None:
    get_default_engine().clear_cache()


def cache_stats() -> CacheStats:
    return get_default_engine().cache_stats()


def convert(
    value: str,
    formats: Iterable[str] | None = None,
    source_format: str | None = None,
) -> ConversionResult:
    """Convert through the default engine's cache."""
    return get_default_engine().convert(value, formats, source_format)


def mix_colors(
    color_a: str | RGBA,
    color_b: str | RGBA,
    ratio: float = DEFAULT_MIX_RATIO,
    mode: str = DEFAULT_BLEND_MODE,
    formats: Iterable[str] | None = None,
) -> MixResult:
    return get_default_engine().mix(color_a, color_b, ratio, mode, formats)


def generate_harmony(
    base_color: str | RGBA,
    harmony_type: str,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    options: HarmonyOptions | dict[str, Any] | None = None,
) -> HarmonyResult:
    return get_default_engine().harmony(base_color, harmony_type, output_format, options)


def generate_all_harmonies(
    base_color: str | RGBA,
    output_format: str = DEFAULT_OUTPUT_FORMAT,
    options: HarmonyOptions | dict[str, Any] | None = None,
) -> dict[str, HarmonyResult]:
    return get_default_engine().all_harmonies(base_color, output_format, options)
