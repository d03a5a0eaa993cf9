"""
interpolators.akima
===================

**Akima** interpolation: a C¹ cubic per segment whose knot slopes are
weighted averages of neighbouring secant slopes, which suppresses the
overshoot of a global cubic spline near outliers.

    u(t) = uᵢ + bᵢ s + cᵢ s² + dᵢ s³,       s = t − tᵢ
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np

from .._core import akima_slopes, integrate_cubic_polynomial
from .base import Variant


class AkimaParameters(NamedTuple):
    b: object
    c: object
    d: object


def _prepare(A):
    b, m = akima_slopes(np.array(A.t), np.array(A.u))
    return {"b": b, "m": m}


def _parameters(A, idx):
    h = A.t[idx + 1] - A.t[idx]
    b = A.aux["b"]
    m = A.aux["m"][idx + 2]
    c = (3.0 * m - 2.0 * b[idx] - b[idx + 1]) / h
    d = (b[idx] + b[idx + 1] - 2.0 * m) / h**2
    return b[idx], c, d


def _value(A, idx, t):
    b, c, d = A.parameters(idx)
    s = t - A.t[idx]
    return A.u[idx] + s * (b + s * (c + s * d))


def _derivative(A, idx, t):
    b, c, d = A.parameters(idx)
    s = t - A.t[idx]
    return b + s * (2.0 * c + 3.0 * d * s)


def _second_derivative(A, idx, t):
    _, c, d = A.parameters(idx)
    return 2.0 * c + 6.0 * d * (t - A.t[idx])


def _integral(A, idx, t1, t2):
    b, c, d = A.parameters(idx)
    return integrate_cubic_polynomial(
        t1, t2, float(A.t[idx]), float(A.u[idx]), float(b), float(c), float(d)
    )


VARIANT = Variant(
    name="akima",
    value=_value,
    min_points=3,
    parameter_type=AkimaParameters,
    parameters=_parameters,
    derivative=_derivative,
    second_derivative=_second_derivative,
    integral=_integral,
    prepare=_prepare,
)
