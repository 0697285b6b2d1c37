"""
Bounded LRU cache for conversion results.

The cache is safe to share between threads: every operation takes one lock,
so recency order and entry count stay consistent under concurrent readers
and writers. It is a pure latency optimization and never changes results.

Example:
    >>> cache = ConversionCache(max_size=2)
    >>> cache.put("a", 1)
    >>> cache.put("b", 2)
    >>> cache.get("a")
    1
    >>> cache.put("c", 3)  # evicts "b", the least recently used
    >>> "b" in cache
    False
"""

from __future__ import annotations

import logging
import threading
import time
from collections import OrderedDict
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from chromalut.constants import DEFAULT_CACHE_SIZE, MAX_CACHE_SIZE
from chromalut.validators import validate_positive, validate_range

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class CacheStats:
    """Snapshot of cache metrics."""

    size: int
    max_size: int
    hit_count: int
    miss_count: int
    eviction_count: int

    @property
    def hit_rate(self) -> float:
        total = self.hit_count + self.miss_count
        return self.hit_count / total if total else 0.0


class ConversionCache:
    """
    Thread-safe least-recently-used cache with optional time-to-live.

    Args:
        max_size: Maximum number of entries (default 100)
        ttl: Seconds an entry stays valid; None keeps entries until evicted
    """

    __slots__ = (
        "max_size",
        "ttl",
        "_entries",
        "_lock",
        "_hits",
        "_misses",
        "_evictions",
    )

    @validate_range(1, MAX_CACHE_SIZE, "max_size")
    @validate_positive("ttl", param_index=2)
    def __init__(self, max_size: int = DEFAULT_CACHE_SIZE, ttl: float | None = None):
        self.max_size = int(max_size)
        self.ttl = ttl
        # key -> (value, inserted_at)
        self._entries: OrderedDict[str, tuple[Any, float]] = OrderedDict()
        self._lock = threading.Lock()
        self._hits = 0
        self._misses = 0
        self._evictions = 0
        logger.info("[Cache] Initialized with max_size=%d, ttl=%s", self.max_size, ttl)

    @staticmethod
    def make_key(
        value: str,
        source_format: str | None = None,
        formats: Iterable[str] | None = None,
    ) -> str:
        """
        Deterministic key for a conversion request.

        Input is trimmed and lowercased so that ``"RED"``, ``"red"`` and
        ``" red "`` share an entry.
        """
        fmt = (source_format or "auto").strip().lower()
        targets = "all" if formats is None else ",".join(formats)
        return f"{value.strip().lower()}|{fmt}|{targets}"

    def _expired(self, inserted_at: float) -> bool:
        return self.ttl is not None and time.monotonic() - inserted_at > self.ttl

    def get(self, key: str) -> Any | None:
        """Return the cached value and mark it most recently used, or None."""
        with self._lock:
            entry = self._entries.get(key)
            if entry is None:
                self._misses += 1
                return None
            value, inserted_at = entry
            if self._expired(inserted_at):
                del self._entries[key]
                self._misses += 1
                logger.debug("[Cache] Expired %r", key)
                return None
            self._entries.move_to_end(key)
            self._hits += 1
            return value

    def put(self, key: str, value: Any) -> None:
        """Insert or refresh an entry, evicting the least recently used if full."""
        with self._lock:
            if key in self._entries:
                self._entries.move_to_end(key)
            self._entries[key] = (value, time.monotonic())
            while len(self._entries) > self.max_size:
                evicted, _ = self._entries.popitem(last=False)
                self._evictions += 1
                logger.debug("[Cache] Evicted %r", evicted)

    def has(self, key: str) -> bool:
        """Membership test that does not touch recency or hit counters."""
        with self._lock:
            entry = self._entries.get(key)
            return entry is not None and not self._expired(entry[1])

    def delete(self, key: str) -> bool:
        with self._lock:
            return self._entries.pop(key, None) is not None

    def clear(self) -> None:
        """Drop all entries and reset metrics."""
        with self._lock:
            self._entries.clear()
            self._hits = 0
            self._misses = 0
            self._evictions = 0

    def keys(self) -> list[str]:
        """Keys from least to most recently used."""
        with self._lock:
            return list(self._entries)

    def stats(self) -> CacheStats:
        with self._lock:
            return CacheStats(
                size=len(self._entries),
                max_size=self.max_size,
                hit_count=self._hits,
                miss_count=self._misses,
                eviction_count=self._evictions,
            )

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.has(key)

    def __repr__(self) -> str:
        return f"ConversionCache(max_size={self.max_size}, size={len(self)})"
