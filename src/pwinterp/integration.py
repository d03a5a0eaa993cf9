"""
pwinterp.integration
====================

Exact definite integrals of a piecewise interpolant.

An interval ``[t1, t2]`` is split into

* an extrapolated tail below ``t[0]`` and / or above ``t[-1]``,
* a partial segment at each end,
* a run of complete interior segments.

The interior run is either summed segment by segment or read off the
prefix-sum cache

    I[k] = ∫_{t₀}^{t_k} u(t) dt,        I[0] = 0,

which is built once at construction when ``cache_parameters=True``.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import numpy as np

from . import extrapolation as _ex
from .errors import IntegralNotFoundError
from .locator import locate

if TYPE_CHECKING:  # pragma: no cover
    from .interpolation import Interpolation

__all__ = ["integral", "cumulative_integral"]

logger = logging.getLogger(__name__)


def cumulative_integral(A: "Interpolation") -> np.ndarray:
    """Prefix sums of the exact segment integrals (length ``n``, leading zero)."""
    t = A.t
    seg = A.variant.integral
    out = np.zeros(len(t))
    out[1:] = np.cumsum([seg(A, i, t[i], t[i + 1]) for i in range(len(t) - 1)])
    logger.debug("cumulative integral cached for %d segments", len(t) - 1)
    return out


def integral(A: "Interpolation", t1: float, t2: float) -> float:
    """∫_{t1}^{t2} u(t) dt for any ordering of ``t1`` and ``t2``."""
    seg = A.variant.integral
    if seg is None:
        raise IntegralNotFoundError(A.variant.name)

    if t1 == t2:
        return 0.0
    if t1 > t2:
        return -integral(A, t2, t1)

    t = A.t
    # segment containing t1, and last segment ending at or before t2
    idx1 = locate(t, t1)
    idx2 = locate(t, t2, shift=-1, side="first")

    total = 0.0

    # lower, possibly incomplete, interval
    if t1 < t[0]:
        if t2 < t[0]:
            return _ex.integral_down(A, t1) - _ex.integral_down(A, t2)
        idx1 -= 1  # lowest complete segment must be included
        total += _ex.integral_down(A, t1)
    else:
        total += seg(A, idx1, t1, t[idx1 + 1])

    # upper, possibly incomplete, interval
    if t2 > t[-1]:
        if t1 > t[-1]:
            return _ex.integral_up(A, t2) - _ex.integral_up(A, t1)
        idx2 += 1  # highest complete segment must be included
        total += _ex.integral_up(A, t2)
    else:
        total += seg(A, idx2, t[idx2], t2)

    if idx1 == idx2:
        return seg(A, idx1, t1, t2)

    # complete segments idx1 + 1 … idx2 − 1
    if A.I is not None:
        total += A.I[idx2] - A.I[idx1 + 1]
    else:
        for idx in range(idx1 + 1, idx2):
            total += seg(A, idx, t[idx], t[idx + 1])

    return total
