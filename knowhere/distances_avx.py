"""Distance kernels that accumulate in eight lanes, as 256-bit vector code does."""

from __future__ import annotations

from typing import Any, Callable

import numpy as np

from knowhere.distances_ref import _as_pair
from knowhere.distances_sse import _horizontal_sum

_LANES = 4
_WIDTH = 8

Combine = Callable[[np.ndarray, np.ndarray], np.ndarray]


def _add(acc: np.ndarray, block: np.ndarray) -> np.ndarray:
    return acc + block


def _select_max(acc: np.ndarray, block: np.ndarray) -> np.ndarray:
    """Vector max: keep ``acc`` only where it is strictly greater, else take ``block``."""
    return np.where(acc > block, acc, block)


def _lane_reduce(values: np.ndarray, width: int, combine: Combine) -> np.ndarray:
    """Fold ``values`` into four lanes.

    Whole blocks of ``width`` are combined first; the accumulator is then
    halved step by step down to four lanes, taking in one more block of the
    current width at each step when enough values remain, and finally the
    last one to three values are combined zero-padded.
    """
    d = values.shape[0]
    lanes = np.zeros(width, dtype=np.float32)
    full = d - d % width
    for block in values[:full].reshape(-1, width):
        lanes = combine(lanes, block)
    pos = full
    while width > _LANES:
        width //= 2
        lanes = combine(lanes[width:], lanes[:width])
        if d - pos >= width:
            lanes = combine(lanes, values[pos : pos + width])
            pos += width
    if pos < d:
        tail = np.zeros(_LANES, dtype=np.float32)
        tail[: d - pos] = values[pos:]
        lanes = combine(lanes, tail)
    return lanes


def _horizontal_max(lanes: np.ndarray) -> np.float32:
    def pick(a: np.float32, b: np.float32) -> np.float32:
        return a if a > b else b

    return pick(pick(lanes[2], lanes[0]), pick(lanes[3], lanes[1]))


def _l2sqr(x: Any, y: Any, width: int) -> float:
    xa, ya = _as_pair(x, y)
    diff = xa - ya
    return float(_horizontal_sum(_lane_reduce(diff * diff, width, _add)))


def _inner_product(x: Any, y: Any, width: int) -> float:
    xa, ya = _as_pair(x, y)
    return float(_horizontal_sum(_lane_reduce(xa * ya, width, _add)))


def _l1(x: Any, y: Any, width: int) -> float:
    xa, ya = _as_pair(x, y)
    return float(_horizontal_sum(_lane_reduce(np.abs(xa - ya), width, _add)))


def _linf(x: Any, y: Any, width: int) -> float:
    xa, ya = _as_pair(x, y)
    return float(_horizontal_max(_lane_reduce(np.abs(xa - ya), width, _select_max)))


def fvec_l2sqr(x: Any, y: Any) -> float:
    """Squared L2 distance between two vectors."""
    return _l2sqr(x, y, _WIDTH)


def fvec_inner_product(x: Any, y: Any) -> float:
    """Inner product of two vectors."""
    return _inner_product(x, y, _WIDTH)


def fvec_l1(x: Any, y: Any) -> float:
    """L1 distance between two vectors."""
    return _l1(x, y, _WIDTH)


def fvec_linf(x: Any, y: Any) -> float:
    """Infinity-norm distance between two vectors."""
    return _linf(x, y, _WIDTH)