"""
Precomputed lookup tables for the color math hot path.

Tables are built once per process behind a lock and are read-only afterwards.
Each table samples a nonlinear function on an evenly spaced grid over [0, 1]
(or the hue wheel for trig), and lookups clamp the input before indexing so
no argument can read outside the table or propagate NaN.

Example:
    >>> from chromalut.core.tables import gamma_decode, gamma_encode
    >>> round(gamma_encode(gamma_decode(0.5)), 3)
    0.5
"""

from __future__ import annotations

import logging
import math
import threading

import numpy as np

from chromalut.constants import (
    GAMMA_TABLE_SIZE,
    LAB_EPSILON,
    LAB_KAPPA,
    LAB_OFFSET,
    LAB_TABLE_SIZE,
    MAX_TABLE_SIZE,
    MIN_TABLE_SIZE,
    SRGB_DECODE_THRESHOLD,
    SRGB_ENCODE_THRESHOLD,
    SRGB_GAMMA,
    SRGB_LINEAR_SLOPE,
    SRGB_OFFSET,
    SRGB_SCALE,
    TRIG_STEP_DEGREES,
)

logger = logging.getLogger(__name__)


def _build_gamma_encode(size: int) -> np.ndarray:
    """Linear light -> sRGB encoded."""
    v = np.linspace(0.0, 1.0, size, dtype=np.float64)
    return np.where(
        v > SRGB_ENCODE_THRESHOLD,
        SRGB_SCALE * np.power(v, 1.0 / SRGB_GAMMA) - SRGB_OFFSET,
        SRGB_LINEAR_SLOPE * v,
    )


def _build_gamma_decode(size: int) -> np.ndarray:
    """sRGB encoded -> linear light."""
    v = np.linspace(0.0, 1.0, size, dtype=np.float64)
    return np.where(
        v > SRGB_DECODE_THRESHOLD,
        np.power((v + SRGB_OFFSET) / SRGB_SCALE, SRGB_GAMMA),
        v / SRGB_LINEAR_SLOPE,
    )


def _build_lab_forward(size: int) -> np.ndarray:
    t = np.linspace(0.0, 1.0, size, dtype=np.float64)
    return np.where(t > LAB_EPSILON, np.cbrt(t), LAB_KAPPA * t + LAB_OFFSET)


def _build_lab_inverse(size: int) -> np.ndarray:
    t = np.linspace(0.0, 1.0, size, dtype=np.float64)
    cubed = t**3
    return np.where(cubed > LAB_EPSILON, cubed, (t - LAB_OFFSET) / LAB_KAPPA)


class LookupTables:
    """
    Immutable bundle of the numeric core's tables.

    Holds NumPy arrays (consumed by the numba kernels) and tuple mirrors of
    the same data (consumed by the scalar lookups, where indexing a tuple is
    cheaper than indexing an ndarray).

    Args:
        gamma_size: Entries in each gamma table
        lab_size: Entries in each LAB nonlinearity table
        trig_step: Degrees between trig samples
    """

    __slots__ = (
        "gamma_size",
        "lab_size",
        "trig_step",
        "trig_size",
        "gamma_encode_table",
        "gamma_decode_table",
        "lab_forward_table",
        "lab_inverse_table",
        "sin_table",
        "cos_table",
        "_gamma_encode",
        "_gamma_decode",
        "_lab_forward",
        "_lab_inverse",
        "_sin",
        "_cos",
    )

    def __init__(
        self,
        gamma_size: int = GAMMA_TABLE_SIZE,
        lab_size: int = LAB_TABLE_SIZE,
        trig_step: float = TRIG_STEP_DEGREES,
    ):
        for name, size in (("gamma_size", gamma_size), ("lab_size", lab_size)):
            if not MIN_TABLE_SIZE <= size <= MAX_TABLE_SIZE:
                raise ValueError(
                    f"{name}={size} is outside valid range [{MIN_TABLE_SIZE}, {MAX_TABLE_SIZE}]. "
                    f"Use {GAMMA_TABLE_SIZE} for gamma and {LAB_TABLE_SIZE} for LAB."
                )
        if not 0.0 < trig_step <= 1.0:
            raise ValueError(f"trig_step={trig_step} must be in (0, 1] degrees")

        self.gamma_size = gamma_size
        self.lab_size = lab_size
        self.trig_step = trig_step
        self.trig_size = int(round(360.0 / trig_step))

        self.gamma_encode_table = _build_gamma_encode(gamma_size)
        self.gamma_decode_table = _build_gamma_decode(gamma_size)
        self.lab_forward_table = _build_lab_forward(lab_size)
        self.lab_inverse_table = _build_lab_inverse(lab_size)

        radians = np.deg2rad(np.arange(self.trig_size, dtype=np.float64) * trig_step)
        self.sin_table = np.sin(radians)
        self.cos_table = np.cos(radians)

        for arr in (
            self.gamma_encode_table,
            self.gamma_decode_table,
            self.lab_forward_table,
            self.lab_inverse_table,
            self.sin_table,
            self.cos_table,
        ):
            arr.flags.writeable = False

        self._gamma_encode = tuple(self.gamma_encode_table.tolist())
        self._gamma_decode = tuple(self.gamma_decode_table.tolist())
        self._lab_forward = tuple(self.lab_forward_table.tolist())
        self._lab_inverse = tuple(self.lab_inverse_table.tolist())
        self._sin = tuple(self.sin_table.tolist())
        self._cos = tuple(self.cos_table.tolist())

    @staticmethod
    def _lookup(table: tuple[float, ...], value: float) -> float:
        # Clamp input first, then interpolate between neighbouring entries
        if value != value or value <= 0.0:
            return table[0]
        last = len(table) - 1
        if value >= 1.0:
            return table[last]
        pos = value * last
        i = int(pos)
        if i >= last:
            return table[last]
        lo = table[i]
        return lo + (table[i + 1] - lo) * (pos - i)

    def _trig_index(self, degrees: float) -> int:
        if degrees != degrees or math.isinf(degrees):
            return 0
        normalized = ((degrees % 360.0) + 360.0) % 360.0
        return min(int(math.floor(normalized * self.trig_size / 360.0)), self.trig_size - 1)

    def gamma_encode(self, linear: float) -> float:
        return self._lookup(self._gamma_encode, linear)

    def gamma_decode(self, srgb: float) -> float:
        return self._lookup(self._gamma_decode, srgb)

    def lab_forward(self, t: float) -> float:
        return self._lookup(self._lab_forward, t)

    def lab_inverse(self, t: float) -> float:
        return self._lookup(self._lab_inverse, t)

    def sin_degrees(self, degrees: float) -> float:
        return self._sin[self._trig_index(degrees)]

    def cos_degrees(self, degrees: float) -> float:
        return self._cos[self._trig_index(degrees)]

    def sizes(self) -> dict[str, int]:
        return {
            "gamma": self.gamma_size,
            "lab": self.lab_size,
            "trig": self.trig_size,
        }

    def memory_usage(self) -> int:
        """Bytes held by the NumPy tables (tuple mirrors excluded)."""
        return int(
            sum(
                arr.nbytes
                for arr in (
                    self.gamma_encode_table,
                    self.gamma_decode_table,
                    self.lab_forward_table,
                    self.lab_inverse_table,
                    self.sin_table,
                    self.cos_table,
                )
            )
        )


_tables: LookupTables | None = None
_tables_lock = threading.Lock()


def get_tables() -> LookupTables:
    """
    Return the process-wide tables, building them on first use.

    Concurrent first calls are serialized by a lock; every caller receives
    the same instance.
    """
    global _tables
    tables = _tables
    if tables is not None:
        return tables
    with _tables_lock:
        if _tables is None:
            _tables = LookupTables()
            logger.info(
                "[Tables] Built lookup tables (gamma=%d, lab=%d, trig=%d, %d bytes)",
                _tables.gamma_size,
                _tables.lab_size,
                _tables.trig_size,
                _tables.memory_usage(),
            )
        return _tables


def gamma_encode(linear: float) -> float:
    """sRGB transfer function, linear [0, 1] -> encoded [0, 1]."""
    return get_tables().gamma_encode(linear)


def gamma_decode(srgb: float) -> float:
    """Inverse sRGB transfer function, encoded [0, 1] -> linear [0, 1]."""
    return get_tables().gamma_decode(srgb)


def lab_forward(t: float) -> float:
    """CIE LAB nonlinearity f(t)."""
    return get_tables().lab_forward(t)


def lab_inverse(t: float) -> float:
    """Inverse CIE LAB nonlinearity."""
    return get_tables().lab_inverse(t)


def sin_degrees(degrees: float) -> float:
    return get_tables().sin_degrees(degrees)


def cos_degrees(degrees: float) -> float:
    return get_tables().cos_degrees(degrees)


def table_sizes() -> dict[str, int]:
    """Entry counts of the process tables."""
    return get_tables().sizes()


def table_memory_usage() -> int:
    """Bytes used by the process tables."""
    return get_tables().memory_usage()
