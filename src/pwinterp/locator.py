"""
pwinterp.locator
================

Segment lookup over a strictly increasing knot vector.

Segment ``i`` is the interval ``[t[i], t[i+1]]``; valid segment indices are
``0 … n−2``.
"""

from __future__ import annotations

from typing import Literal

import numpy as np

__all__ = ["locate"]


def locate(
    knots: np.ndarray,
    x: float,
    *,
    shift: int = 0,
    side: Literal["last", "first"] = "last",
    clamp: bool = True,
) -> int:
    """
    Index of the segment containing ``x``.

    Parameters
    ----------
    knots    : strictly increasing 1-D array.
    x        : query point.
    shift    : offset added to the raw index before clamping.
    side     : ``"last"``  → last knot with ``t[i] <= x``; a query sitting on a
                             knot maps to the segment *starting* there.
               ``"first"`` → first knot with ``t[i] >= x``; combined with
                             ``shift=-1`` a query on a knot maps to the
                             segment *ending* there.
    clamp    : if ``False`` the raw index is returned; values outside
               ``[0, len(knots) − 2]`` then flag an out-of-domain
               query and are left to the caller.
    """
    if side == "last":
        idx = int(np.searchsorted(knots, x, side="right")) - 1
    elif side == "first":
        idx = int(np.searchsorted(knots, x, side="left"))
    else:
        raise ValueError(f"side must be 'last' or 'first', got {side!r}")

    idx += shift
    if clamp:
        idx = min(max(idx, 0), len(knots) - 2)
    return idx
