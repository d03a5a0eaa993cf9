"""
interpolators.lagrange
======================

Global **Lagrange** polynomial through every sample (degree n − 1).

Evaluation and derivatives go through SciPy's Krogh interpolator; there
is no per-segment representation, so no coefficients are cached and no
closed-form integral is offered.
"""

from __future__ import annotations

import numpy as np
from scipy.interpolate import KroghInterpolator

from .base import Variant


def _prepare(A):
    return {"poly": KroghInterpolator(np.asarray(A.t), np.asarray(A.u))}


def _value(A, idx, t):
    return float(A.aux["poly"](t))


def _derivative(A, idx, t):
    return float(A.aux["poly"].derivative(t, der=1))


def _second_derivative(A, idx, t):
    return float(A.aux["poly"].derivative(t, der=2))


VARIANT = Variant(
    name="lagrange",
    value=_value,
    min_points=2,
    derivative=_derivative,
    second_derivative=_second_derivative,
    prepare=_prepare,
)
