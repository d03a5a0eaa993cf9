"""
interpolators.quadratic_spline
==============================

C¹ **quadratic spline**.

On segment *i*

    u(t) = αᵢ (t − tᵢ)² + βᵢ (t − tᵢ) + uᵢ,

with βᵢ the slope at the left knot.  There is no breakpoint at the
second-to-last knot: the last two segments share the parabola through the
final three samples, which fixes every slope by back-substitution (see
:func:`pwinterp._core.quadratic_spline_slopes`).
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .._core import quadratic_spline_slopes
from .base import Variant


class QuadraticSplineParameters(NamedTuple):
    alpha: object
    beta: object


def _prepare(A):
    return {"slopes": quadratic_spline_slopes(np.array(A.t), np.array(A.u))}


def _parameters(A, idx):
    h = A.t[idx + 1] - A.t[idx]
    beta = A.aux["slopes"][idx]
    alpha = ((A.u[idx + 1] - A.u[idx]) / h - beta) / h
    return alpha, beta


def _value(A, idx, t):
    alpha, beta = A.parameters(idx)
    s = t - A.t[idx]
    return s * (alpha * s + beta) + A.u[idx]


def _derivative(A, idx, t):
    alpha, beta = A.parameters(idx)
    return 2.0 * alpha * (t - A.t[idx]) + beta


def _second_derivative(A, idx, t):
    alpha, _ = A.parameters(idx)
    return 2.0 * alpha


def _integral(A, idx, t1, t2):
    alpha, beta = A.parameters(idx)
    s1 = t1 - A.t[idx]
    s2 = t2 - A.t[idx]
    return (t2 - t1) * (
        alpha * (s2 * s2 + s1 * s2 + s1 * s1) / 3.0 + beta * (s1 + s2) / 2.0 + A.u[idx]
    )


VARIANT = Variant(
    name="quadratic_spline",
    value=_value,
    min_points=3,
    parameter_type=QuadraticSplineParameters,
    parameters=_parameters,
    derivative=_derivative,
    second_derivative=_second_derivative,
    integral=_integral,
    prepare=_prepare,
)
