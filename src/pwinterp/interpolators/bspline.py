"""
interpolators.bspline
=====================

Interpolating **B-spline** of configurable degree (``degree=3`` default).

The B-spline coefficients come from one global collocation solve
(:func:`scipy.interpolate.make_interp_spline`).  Values and derivatives
are available everywhere the spline is defined; integration is not part
of this family's contract.
"""

from __future__ import annotations

import numpy as np
from scipy.interpolate import make_interp_spline

from ..errors import ConstructionError
from .base import Variant


def _prepare(A):
    k = A.options["degree"]
    if not isinstance(k, (int, np.integer)) or k < 1:
        raise ConstructionError(f"option 'degree' must be a positive integer, got {k!r}")
    if len(A.t) < k + 1:
        raise ConstructionError(
            f"bspline of degree {k} needs at least {k + 1} knots, got {len(A.t)}"
        )
    return {"spline": make_interp_spline(np.asarray(A.t), np.asarray(A.u), k=int(k))}


def _value(A, idx, t):
    return float(A.aux["spline"](t))


def _derivative(A, idx, t):
    return float(A.aux["spline"](t, nu=1))


def _second_derivative(A, idx, t):
    if A.options["degree"] < 2:
        return 0.0
    return float(A.aux["spline"](t, nu=2))


VARIANT = Variant(
    name="bspline",
    value=_value,
    min_points=2,
    options={"degree": 3},
    derivative=_derivative,
    second_derivative=_second_derivative,
    prepare=_prepare,
)
