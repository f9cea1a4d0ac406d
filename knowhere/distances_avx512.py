"""Distance kernels that accumulate in sixteen lanes, as 512-bit vector code does."""

from __future__ import annotations

from typing import Any

from knowhere.distances_avx import _inner_product, _l1, _l2sqr, _linf

_WIDTH = 16


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