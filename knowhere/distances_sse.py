"""Distance kernels that accumulate in four lanes, as 128-bit vector code does."""

from __future__ import annotations

from typing import Any

import numpy as np

from knowhere import distances_ref as _ref
from knowhere.distances_ref import _as_pair, _as_rows, _as_vector

_LANES = np.arange(4, dtype=np.int64)
_ARGMIN_START = np.float32(1e20)


def _lane_sums(products: np.ndarray) -> np.ndarray:
    """Accumulate the last axis into four lanes, block of four after block of four."""
    lead = products.shape[:-1]
    pad = -products.shape[-1] % 4
    if pad:
        products = np.concatenate([products, np.zeros(lead + (pad,), dtype=np.float32)], axis=-1)
    blocks = products.reshape(lead + (-1, 4))
    if blocks.shape[-2] == 0:
        return np.zeros(lead + (4,), dtype=np.float32)
    return np.cumsum(blocks, axis=-2, dtype=np.float32)[..., -1, :]


def _horizontal_sum(lanes: np.ndarray) -> np.ndarray:
    return (lanes[..., 0] + lanes[..., 1]) + (lanes[..., 2] + lanes[..., 3])


def fvec_l2sqr(x: Any, y: Any) -> float:
    """Squared L2 distance between two vectors."""
    xa, ya = _as_pair(x, y)
    diff = xa - ya
    return float(_horizontal_sum(_lane_sums(diff * diff)))


def fvec_inner_product(x: Any, y: Any) -> float:
    """Inner product of two vectors."""
    xa, ya = _as_pair(x, y)
    return float(_horizontal_sum(_lane_sums(xa * ya)))


def fvec_l1(x: Any, y: Any) -> float:
    """L1 distance between two vectors."""
    return _ref.fvec_l1(x, y)


def fvec_linf(x: Any, y: Any) -> float:
    """Infinity-norm distance between two vectors."""
    return _ref.fvec_linf(x, y)


def fvec_norm_l2sqr(x: Any) -> float:
    """Squared norm of a vector."""
    xa = _as_vector(x)
    return float(_horizontal_sum(_lane_sums(xa * xa)))


def fvec_l2sqr_ny(x: Any, ys: Any) -> np.ndarray:
    """Squared L2 distances between ``x`` and every row of ``ys``."""
    xa, rows = _as_rows(x, ys)
    diff = rows - xa
    if xa.shape[0] == 1:
        return (diff * diff)[:, 0]
    return _horizontal_sum(_lane_sums(diff * diff))


def fvec_inner_products_ny(x: Any, ys: Any) -> np.ndarray:
    """Inner products between ``x`` and every row of ``ys``."""
    xa, rows = _as_rows(x, ys)
    products = rows * xa
    if xa.shape[0] == 1:
        return products[:, 0]
    return _horizontal_sum(_lane_sums(products))


def fvec_madd(a: Any, bf: float, b: Any) -> np.ndarray:
    """Return ``a + bf * b`` in single precision."""
    return _ref.fvec_madd(a, bf, b)


def fvec_madd_and_argmin(a: Any, bf: float, b: Any) -> tuple[np.ndarray, int]:
    """Return ``a + bf * b`` and an index of its minimum below 1e20, or -1.

    When the length is a multiple of four, each lane keeps its own minimum and
    ties between lanes are settled lane 0 over lane 2, lane 1 over lane 3, and
    then the first pair over the second.
    """
    c = _ref.fvec_madd(a, bf, b)
    if c.shape[0] % 4:
        return _ref.fvec_madd_and_argmin(a, bf, b)

    vmin = np.full(4, _ARGMIN_START, dtype=np.float32)
    imin = np.full(4, -1, dtype=np.int64)
    for block_no, block in enumerate(c.reshape(-1, 4)):
        imin = np.where(vmin > block, _LANES + 4 * block_no, imin)
        vmin = np.where(vmin < block, vmin, block)

    low, high = vmin[:2], vmin[2:]
    pair_idx = np.where(low > high, imin[2:], imin[:2])
    pair_min = np.where(low < high, low, high)
    best = pair_idx[1] if pair_min[0] > pair_min[1] else pair_idx[0]
    return c, int(best)