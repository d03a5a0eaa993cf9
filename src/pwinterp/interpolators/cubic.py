"""
interpolators.cubic
===================

Natural **C² cubic-spline** interpolation.

The second derivatives *zᵢ* at the knots solve the classical tri-diagonal
system (natural boundary: z₀ = zₙ₋₁ = 0).  With hᵢ = tᵢ₊₁ − tᵢ the spline on
segment *i* reads

    u(t) = [zᵢ (tᵢ₊₁ − t)³ + zᵢ₊₁ (t − tᵢ)³] / (6hᵢ) + c₁ (t − tᵢ) + c₂ (tᵢ₊₁ − t)

    c₁ = uᵢ₊₁ / hᵢ − zᵢ₊₁ hᵢ / 6
    c₂ = uᵢ   / hᵢ − zᵢ   hᵢ / 6

Implementation notes
--------------------
*  The tri-diagonal solve runs once, through SciPy's banded solver.
*  Segment integrals are two shifted cubic polynomials integrated in
   closed form (see :func:`pwinterp._core.integrate_cubic_polynomial`).

Example
-------
>>> from pwinterp import Interpolation
>>> spl = Interpolation("cubic_spline", [0.5, 1, 2, 3, 5], [3.0, 3.2, 3.4, 3.5, 3.7])
>>> spl.integral(0.5, 4.2)
"""

from __future__ import annotations

from typing import NamedTuple

import numpy as np
from scipy.linalg import solve_banded

from .._core import integrate_cubic_polynomial
from .base import Variant


class CubicSplineParameters(NamedTuple):
    c1: object
    c2: object


class _TriDiag:
    """Natural cubic-spline second derivatives via one banded solve."""

    @staticmethod
    def build(t: np.ndarray, u: np.ndarray):
        n = len(t)
        h = np.diff(t)
        slopes = np.diff(u) / h

        # banded storage: row 0 super-diagonal, row 1 diagonal, row 2 sub-diagonal
        ab = np.zeros((3, n))
        rhs = np.zeros(n)
        ab[1, 0] = ab[1, -1] = 1.0
        if n > 2:
            ab[0, 2:] = h[1:]            # a[i, i+1] = h[i],    i = 1 … n−2
            ab[1, 1:-1] = 2.0 * (h[:-1] + h[1:])
            ab[2, :-2] = h[:-1]          # a[i, i−1] = h[i−1],  i = 1 … n−2
            rhs[1:-1] = 6.0 * np.diff(slopes)

        z = solve_banded((1, 1), ab, rhs)
        return z, h


def _prepare(A):
    z, h = _TriDiag.build(np.asarray(A.t), np.asarray(A.u))
    return {"z": z, "h": h}


def _parameters(A, idx):
    h = A.aux["h"][idx]
    z = A.aux["z"]
    c1 = A.u[idx + 1] / h - z[idx + 1] * h / 6.0
    c2 = A.u[idx] / h - z[idx] * h / 6.0
    return c1, c2


def _value(A, idx, t):
    h = A.aux["h"][idx]
    z = A.aux["z"]
    dt1 = t - A.t[idx]
    dt2 = A.t[idx + 1] - t
    c1, c2 = A.parameters(idx)
    return (z[idx] * dt2**3 + z[idx + 1] * dt1**3) / (6.0 * h) + c1 * dt1 + c2 * dt2


def _derivative(A, idx, t):
    h = A.aux["h"][idx]
    z = A.aux["z"]
    dt1 = t - A.t[idx]
    dt2 = A.t[idx + 1] - t
    c1, c2 = A.parameters(idx)
    return (z[idx + 1] * dt1**2 - z[idx] * dt2**2) / (2.0 * h) + c1 - c2


def _second_derivative(A, idx, t):
    h = A.aux["h"][idx]
    z = A.aux["z"]
    return (z[idx] * (A.t[idx + 1] - t) + z[idx + 1] * (t - A.t[idx])) / h


def _integral(A, idx, t1, t2):
    h = A.aux["h"][idx]
    z = A.aux["z"]
    t_lo = float(A.t[idx])
    t_hi = float(A.t[idx + 1])
    c1, c2 = A.parameters(idx)
    return integrate_cubic_polynomial(
        t1, t2, t_lo, 0.0, float(c1), 0.0, float(z[idx + 1] / (6.0 * h))
    ) + integrate_cubic_polynomial(
        t1, t2, t_hi, 0.0, float(-c2), 0.0, float(-z[idx] / (6.0 * h))
    )


VARIANT = Variant(
    name="cubic_spline",
    value=_value,
    min_points=2,
    parameter_type=CubicSplineParameters,
    parameters=_parameters,
    derivative=_derivative,
    second_derivative=_second_derivative,
    integral=_integral,
    prepare=_prepare,
)
