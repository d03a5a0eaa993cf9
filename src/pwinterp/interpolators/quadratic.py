"""
interpolators.quadratic
=======================

Piece-wise **quadratic Lagrange** interpolation over three consecutive knots.

Window *j* spans *(tⱼ, tⱼ₊₁, tⱼ₊₂)* and carries the scaled basis weights

    l_k = u_{j+k} / Π_{m≠k} (t_{j+k} − t_{j+m}),      k = 0, 1, 2

so that on the window

    u(t) = l₀ (t − tⱼ₊₁)(t − tⱼ₊₂) + l₁ (t − tⱼ)(t − tⱼ₊₂) + l₂ (t − tⱼ)(t − tⱼ₊₁).

Segment *i* uses window *i* (``mode="forward"``) or *i − 1*
(``mode="backward"``, first segment excepted); the last segment always
falls back to the final window *n − 3*.
"""

from __future__ import annotations

from typing import NamedTuple

from .._core import integrate_cubic_polynomial
from .base import Variant, check_choice, window_count


class QuadraticParameters(NamedTuple):
    l0: object
    l1: object
    l2: object


def _prepare(A):
    check_choice(A, "mode", ("forward", "backward"))
    return {}


def _window(A, idx):
    if A.options["mode"] == "backward" and idx > 0:
        idx -= 1
    return min(idx, len(A.t) - 3)


def _parameters(A, j):
    t0, t1, t2 = A.t[j], A.t[j + 1], A.t[j + 2]
    l0 = A.u[j] / ((t0 - t1) * (t0 - t2))
    l1 = A.u[j + 1] / ((t1 - t0) * (t1 - t2))
    l2 = A.u[j + 2] / ((t2 - t0) * (t2 - t1))
    return l0, l1, l2


def _offsets(A, idx, t):
    j = _window(A, idx)
    return j, t - A.t[j], t - A.t[j + 1], t - A.t[j + 2]


def _value(A, idx, t):
    j, d0, d1, d2 = _offsets(A, idx, t)
    l0, l1, l2 = A.parameters(j)
    return l0 * d1 * d2 + l1 * d0 * d2 + l2 * d0 * d1


def _derivative(A, idx, t):
    j, d0, d1, d2 = _offsets(A, idx, t)
    l0, l1, l2 = A.parameters(j)
    return l0 * (d1 + d2) + l1 * (d0 + d2) + l2 * (d0 + d1)


def _second_derivative(A, idx, t):
    l0, l1, l2 = A.parameters(_window(A, idx))
    return 2.0 * (l0 + l1 + l2)


def _integral(A, idx, t1, t2):
    # window polynomial in s = t − tⱼ:  uⱼ + slope·s + curv·s²
    j = _window(A, idx)
    l0, l1, l2 = A.parameters(j)
    a = A.t[j + 1] - A.t[j]
    b = A.t[j + 2] - A.t[j]
    slope = -(l0 * (a + b) + l1 * b + l2 * a)
    curv = l0 + l1 + l2
    return integrate_cubic_polynomial(
        t1, t2, float(A.t[j]), float(A.u[j]), float(slope), float(curv), 0.0
    )


VARIANT = Variant(
    name="quadratic",
    value=_value,
    min_points=3,
    options={"mode": "forward"},
    parameter_type=QuadraticParameters,
    parameters=_parameters,
    n_parameters=window_count,
    derivative=_derivative,
    second_derivative=_second_derivative,
    integral=_integral,
    prepare=_prepare,
)
