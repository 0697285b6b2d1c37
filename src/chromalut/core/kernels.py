"""
Numba-optimized kernels for batch color conversion.

Provides JIT-compiled kernels that run the same table-driven RGB <-> LAB math
as the scalar path over ``(N, 3)`` arrays, plus nearest-color search.
"""

import numpy as np
from numba import njit, prange

# ============================================================================
# Table Lookup
# ============================================================================


@njit(fastmath=True, cache=True, nogil=True, inline="always")
def _lookup(table: np.ndarray, value: float) -> float:
    """Clamped linear-interpolated lookup on a [0, 1] grid."""
    last = table.shape[0] - 1
    if not value > 0.0:
        return table[0]
    if value >= 1.0:
        return table[last]
    pos = value * last
    i = int(pos)
    if i >= last:
        return table[last]
    lo = table[i]
    return lo + (table[i + 1] - lo) * (pos - i)


# ============================================================================
# Conversion Kernels
# ============================================================================


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def rgb_to_lab_numba(
    rgb: np.ndarray,
    gamma_decode: np.ndarray,
    lab_forward: np.ndarray,
    matrix: np.ndarray,
    white: np.ndarray,
    out: np.ndarray,
) -> None:
    """
    Convert sRGB rows to CIE LAB.

    Args:
        rgb: Input colors [N, 3], channels in [0, 255]
        gamma_decode: sRGB -> linear table
        lab_forward: LAB nonlinearity table
        matrix: Row-major sRGB -> XYZ coefficients [9]
        white: Reference white [3]
        out: Output buffer [N, 3] (L, a, b)
    """
    n = rgb.shape[0]
    for i in prange(n):
        r = _lookup(gamma_decode, rgb[i, 0] / 255.0)
        g = _lookup(gamma_decode, rgb[i, 1] / 255.0)
        b = _lookup(gamma_decode, rgb[i, 2] / 255.0)

        x = (matrix[0] * r + matrix[1] * g + matrix[2] * b) * 100.0
        y = (matrix[3] * r + matrix[4] * g + matrix[5] * b) * 100.0
        z = (matrix[6] * r + matrix[7] * g + matrix[8] * b) * 100.0

        fx = _lookup(lab_forward, x / white[0])
        fy = _lookup(lab_forward, y / white[1])
        fz = _lookup(lab_forward, z / white[2])

        out[i, 0] = 116.0 * fy - 16.0
        out[i, 1] = 500.0 * (fx - fy)
        out[i, 2] = 200.0 * (fy - fz)


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def lab_to_rgb_numba(
    lab: np.ndarray,
    lab_inverse: np.ndarray,
    gamma_encode: np.ndarray,
    matrix: np.ndarray,
    white: np.ndarray,
    out: np.ndarray,
) -> None:
    """
    Convert CIE LAB rows to sRGB, rounded and clamped to [0, 255].

    Args:
        lab: Input colors [N, 3] (L, a, b)
        lab_inverse: Inverse LAB nonlinearity table
        gamma_encode: linear -> sRGB table
        matrix: Row-major XYZ -> sRGB coefficients [9]
        white: Reference white [3]
        out: Output buffer [N, 3]
    """
    n = lab.shape[0]
    for i in prange(n):
        fy = (lab[i, 0] + 16.0) / 116.0
        fx = lab[i, 1] / 500.0 + fy
        fz = fy - lab[i, 2] / 200.0

        x = _lookup(lab_inverse, fx) * white[0] / 100.0
        y = _lookup(lab_inverse, fy) * white[1] / 100.0
        z = _lookup(lab_inverse, fz) * white[2] / 100.0

        lr = matrix[0] * x + matrix[1] * y + matrix[2] * z
        lg = matrix[3] * x + matrix[4] * y + matrix[5] * z
        lb = matrix[6] * x + matrix[7] * y + matrix[8] * z

        sr = np.floor(_lookup(gamma_encode, lr) * 255.0 + 0.5)
        sg = np.floor(_lookup(gamma_encode, lg) * 255.0 + 0.5)
        sb = np.floor(_lookup(gamma_encode, lb) * 255.0 + 0.5)
        out[i, 0] = min(max(sr, 0.0), 255.0)
        out[i, 1] = min(max(sg, 0.0), 255.0)
        out[i, 2] = min(max(sb, 0.0), 255.0)


@njit(parallel=True, fastmath=True, cache=True, nogil=True)
def delta_e_numba(lab_a: np.ndarray, lab_b: np.ndarray, out: np.ndarray) -> None:
    """Row-wise CIE76 distance between two [N, 3] LAB arrays."""
    n = lab_a.shape[0]
    for i in prange(n):
        dl = lab_a[i, 0] - lab_b[i, 0]
        da = lab_a[i, 1] - lab_b[i, 1]
        db = lab_a[i, 2] - lab_b[i, 2]
        out[i] = np.sqrt(dl * dl + da * da + db * db)


@njit(fastmath=True, cache=True, nogil=True)
def nearest_index_numba(query: np.ndarray, candidates: np.ndarray) -> int:
    """
    Index of the candidate LAB row closest to ``query``.

    Ties resolve to the lowest index.
    """
    best = 0
    best_dist = np.inf
    for i in range(candidates.shape[0]):
        dl = candidates[i, 0] - query[0]
        da = candidates[i, 1] - query[1]
        db = candidates[i, 2] - query[2]
        dist = dl * dl + da * da + db * db
        if dist < best_dist:
            best_dist = dist
            best = i
    return best
