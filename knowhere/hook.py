"""Selection of the distance kernels used by the library."""

from __future__ import annotations

import platform
import threading
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Callable, Iterable

from knowhere import distances_avx, distances_avx512, distances_ref, distances_sse
from knowhere.log import log_info

use_avx512 = True
use_avx2 = True
use_sse4_2 = True

_AVX512_FLAGS = frozenset({"avx512f", "avx512dq", "avx512bw"})


class SimdType(str, Enum):
    REF = "REF"
    SSE4_2 = "SSE4_2"
    AVX2 = "AVX2"
    AVX512 = "AVX512"


@dataclass(frozen=True)
class DistanceKernels:
    """One implementation of each distance kernel."""

    inner_product: Callable
    l2sqr: Callable
    l1: Callable
    linf: Callable
    norm_l2sqr: Callable
    l2sqr_ny: Callable
    inner_products_ny: Callable
    madd: Callable
    madd_and_argmin: Callable


def _with_pairwise(module) -> DistanceKernels:
    """Pairwise kernels from ``module``, the rest from the four-lane set."""
    return DistanceKernels(
        inner_product=module.fvec_inner_product,
        l2sqr=module.fvec_l2sqr,
        l1=module.fvec_l1,
        linf=module.fvec_linf,
        norm_l2sqr=distances_sse.fvec_norm_l2sqr,
        l2sqr_ny=distances_sse.fvec_l2sqr_ny,
        inner_products_ny=distances_sse.fvec_inner_products_ny,
        madd=distances_sse.fvec_madd,
        madd_and_argmin=distances_sse.fvec_madd_and_argmin,
    )


_REF_KERNELS = DistanceKernels(
    inner_product=distances_ref.fvec_inner_product,
    l2sqr=distances_ref.fvec_l2sqr,
    l1=distances_ref.fvec_l1,
    linf=distances_ref.fvec_linf,
    norm_l2sqr=distances_ref.fvec_norm_l2sqr,
    l2sqr_ny=distances_ref.fvec_l2sqr_ny,
    inner_products_ny=distances_ref.fvec_inner_products_ny,
    madd=distances_ref.fvec_madd,
    madd_and_argmin=distances_ref.fvec_madd_and_argmin,
)

_KERNELS = {
    SimdType.REF: _REF_KERNELS,
    SimdType.SSE4_2: _with_pairwise(distances_sse),
    SimdType.AVX2: _with_pairwise(distances_avx),
    SimdType.AVX512: _with_pairwise(distances_avx512),
}

_lock = threading.Lock()
_active = _REF_KERNELS


def _cpu_flags() -> frozenset[str]:
    if platform.machine().lower() not in ("x86_64", "amd64"):
        return frozenset()
    try:
        text = Path("/proc/cpuinfo").read_text()
    except OSError:
        return frozenset()
    for line in text.splitlines():
        key, _, value = line.partition(":")
        if key.strip() == "flags":
            return frozenset(value.split())
    return frozenset()


def _detect_supported() -> set[SimdType]:
    flags = _cpu_flags()
    supported: set[SimdType] = set()
    if _AVX512_FLAGS <= flags:
        supported.add(SimdType.AVX512)
    if "avx2" in flags:
        supported.add(SimdType.AVX2)
    if "sse4_2" in flags:
        supported.add(SimdType.SSE4_2)
    return supported


def fvec_hook(supported: Iterable[SimdType | str] | None = None) -> SimdType:
    """Choose the best enabled kernel set among ``supported`` and make it current.

    ``supported`` lists the instruction sets available; when None they are
    detected from the running machine. Returns the chosen type.
    """
    global _active
    available = _detect_supported() if supported is None else {SimdType(s) for s in supported}
    enabled = {
        SimdType.AVX512: use_avx512,
        SimdType.AVX2: use_avx2,
        SimdType.SSE4_2: use_sse4_2,
    }
    with _lock:
        chosen = next(
            (kind for kind, on in enabled.items() if on and kind in available),
            SimdType.REF,
        )
        _active = _KERNELS[chosen]
    return chosen


def current_kernels() -> DistanceKernels:
    """Return the kernel set selected by the last :func:`fvec_hook` call."""
    with _lock:
        return _active


log_info(f"simd type: {fvec_hook().value}")