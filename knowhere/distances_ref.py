"""Reference distance kernels with single-precision, in-order accumulation."""

from __future__ import annotations

from typing import Any

import numpy as np

_ARGMIN_START = np.float32(1e20)


def _as_vector(x: Any) -> np.ndarray:
    arr = np.asarray(x, dtype=np.float32)
    if arr.ndim != 1:
        raise ValueError("expected a one-dimensional vector")
    return arr


def _as_pair(x: Any, y: Any) -> tuple[np.ndarray, np.ndarray]:
    xa, ya = _as_vector(x), _as_vector(y)
    if xa.shape != ya.shape:
        raise ValueError(f"vector lengths differ: {xa.shape[0]} and {ya.shape[0]}")
    return xa, ya


def _as_rows(x: Any, ys: Any) -> tuple[np.ndarray, np.ndarray]:
    """Return ``x`` and ``ys`` as an (ny, d) matrix of rows of the length of ``x``."""
    xa = _as_vector(x)
    d = xa.shape[0]
    arr = np.asarray(ys, dtype=np.float32)
    if arr.ndim == 1:
        if d == 0 or arr.shape[0] % d:
            raise ValueError("flat ys must hold a whole number of vectors of the length of x")
        arr = arr.reshape(-1, d)
    elif arr.ndim != 2 or arr.shape[1] != d:
        raise ValueError("ys must be a matrix whose rows have the length of x")
    return xa, arr


def _sequential_sum(values: np.ndarray, dtype: type = np.float32) -> np.ndarray:
    """Sum along the last axis one element after another, in ``dtype``."""
    if values.shape[-1] == 0:
        return np.zeros(values.shape[:-1], dtype=dtype)
    return np.cumsum(values, axis=-1, dtype=dtype)[..., -1]


def fvec_l2sqr(x: Any, y: Any) -> float:
    """Squared L2 distance between two vectors."""
    xa, ya = _as_pair(x, y)
    diff = xa - ya
    return float(_sequential_sum(diff * diff))


def fvec_inner_product(x: Any, y: Any) -> float:
    """Inner product of two vectors."""
    xa, ya = _as_pair(x, y)
    return float(_sequential_sum(xa * ya))


def fvec_l1(x: Any, y: Any) -> float:
    """L1 distance between two vectors."""
    xa, ya = _as_pair(x, y)
    return float(_sequential_sum(np.abs(xa - ya)))


def fvec_linf(x: Any, y: Any) -> float:
    """Infinity-norm distance; NaN components are ignored."""
    xa, ya = _as_pair(x, y)
    return float(np.fmax.reduce(np.abs(xa - ya), initial=np.float32(0)))


def fvec_norm_l2sqr(x: Any) -> float:
    """Squared norm, accumulated in double precision."""
    xa = _as_vector(x)
    return float(np.float32(_sequential_sum(xa * xa, np.float64)))


def fvec_l2sqr_ny(x: Any, ys: Any) -> np.ndarray:
    """Squared L2 distances between ``x`` and every row of ``ys``."""
    xa, rows = _as_rows(x, ys)
    diff = rows - xa
    return _sequential_sum(diff * diff)


def fvec_inner_products_ny(x: Any, ys: Any) -> np.ndarray:
    """Inner products between ``x`` and every row of ``ys``."""
    xa, rows = _as_rows(x, ys)
    return _sequential_sum(rows * xa)


def fvec_madd(a: Any, bf: float, b: Any) -> np.ndarray:
    """Return ``a + bf * b`` in single precision."""
    aa, ba = _as_pair(a, b)
    return aa + np.float32(bf) * ba


def fvec_madd_and_argmin(a: Any, bf: float, b: Any) -> tuple[np.ndarray, int]:
    """Return ``a + bf * b`` and the first index of its minimum below 1e20, or -1."""
    c = fvec_madd(a, bf, b)
    candidates = c < _ARGMIN_START
    if not candidates.any():
        return c, -1
    return c, int(np.argmin(np.where(candidates, c, np.inf)))