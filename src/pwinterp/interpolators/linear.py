"""
interpolators.linear
====================

Piece-wise **linear** interpolation.

* On each interval *[tᵢ, tᵢ₊₁]*

        u(t) = uᵢ + sᵢ (t − tᵢ),
        sᵢ = (uᵢ₊₁ − uᵢ) / (tᵢ₊₁ − tᵢ).

* The integral over any sub-interval is the segment mean times its width,
  so the primitive is an exact quadratic per segment.
"""

from __future__ import annotations

from typing import NamedTuple

from .base import Variant


class LinearParameters(NamedTuple):
    slope: object


def _parameters(A, idx):
    return ((A.u[idx + 1] - A.u[idx]) / (A.t[idx + 1] - A.t[idx]),)


def _value(A, idx, t):
    (slope,) = A.parameters(idx)
    return A.u[idx] + slope * (t - A.t[idx])


def _derivative(A, idx, t):
    (slope,) = A.parameters(idx)
    return slope


def _second_derivative(A, idx, t):
    return 0.0


def _integral(A, idx, t1, t2):
    (slope,) = A.parameters(idx)
    u_mean = A.u[idx] + slope * (0.5 * (t1 + t2) - A.t[idx])
    return u_mean * (t2 - t1)


VARIANT = Variant(
    name="linear",
    value=_value,
    min_points=2,
    parameter_type=LinearParameters,
    parameters=_parameters,
    derivative=_derivative,
    second_derivative=_second_derivative,
    integral=_integral,
)
