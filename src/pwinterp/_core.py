"""
Low‑level numerics – JIT‑accelerated kernels shared by the interpolation
variants.

Everything here is purely functional (scalars and 1‑D float arrays in,
scalars / arrays out) so that Numba can compile it without touching
Python objects.  The variant modules call into these helpers from their
one‑shot ``prepare`` step or from the closed‑form segment integrals.
"""

from __future__ import annotations

import numpy as np
from numba import njit

__all__ = [
    "integrate_cubic_polynomial",
    "quadratic_spline_slopes",
    "akima_slopes",
]


# ---------------------------------------------------------------------------
# Closed-form integrals
# ---------------------------------------------------------------------------


@njit(cache=True)
def integrate_cubic_polynomial(
    t1: float, t2: float, offset: float, a: float, b: float, c: float, d: float
) -> float:
    """∫_{t1}^{t2}  a + b·s + c·s² + d·s³  dt   with  s = t − offset."""
    s1 = t1 - offset
    s2 = t2 - offset
    s_sum = s1 + s2
    s_sq_sum = s1 * s1 + s2 * s2
    return (t2 - t1) * (
        a + s_sum * (0.5 * b + 0.25 * d * s_sq_sum) + c * (s_sq_sum + s1 * s2) / 3.0
    )


# ---------------------------------------------------------------------------
# Knot-slope builders
# ---------------------------------------------------------------------------


@njit(cache=True)
def quadratic_spline_slopes(t: np.ndarray, u: np.ndarray) -> np.ndarray:
    """Left-end slopes β_i of the C¹ quadratic spline (length n−1).

    The last two segments share the parabola through the final three
    knots; the remaining slopes follow from C¹ continuity,

        β_i = 2 (u_{i+1} − u_i) / h_i − β_{i+1}.
    """
    n = t.size
    beta = np.empty(n - 1)

    d1 = (u[n - 2] - u[n - 3]) / (t[n - 2] - t[n - 3])
    d2 = (u[n - 1] - u[n - 2]) / (t[n - 1] - t[n - 2])
    f012 = (d2 - d1) / (t[n - 1] - t[n - 3])
    beta[n - 3] = d1 + f012 * (t[n - 3] - t[n - 2])
    beta[n - 2] = d1 + f012 * (t[n - 2] - t[n - 3])

    for i in range(n - 4, -1, -1):
        beta[i] = 2.0 * (u[i + 1] - u[i]) / (t[i + 1] - t[i]) - beta[i + 1]
    return beta


@njit(cache=True)
def akima_slopes(t: np.ndarray, u: np.ndarray):
    """Akima knot slopes.

    Returns ``(b, m)`` where ``b`` (length n) are the knot slopes and ``m``
    (length n+3) the secant slopes padded with two linearly extended
    values at each end; segment ``i`` uses ``m[i + 2]``.
    """
    n = t.size
    m = np.empty(n + 3)
    for i in range(n - 1):
        m[i + 2] = (u[i + 1] - u[i]) / (t[i + 1] - t[i])
    m[1] = 2.0 * m[2] - m[3]
    m[0] = 2.0 * m[1] - m[2]
    m[n + 1] = 2.0 * m[n] - m[n - 1]
    m[n + 2] = 2.0 * m[n + 1] - m[n]

    b = np.empty(n)
    f1 = np.empty(n)
    f2 = np.empty(n)
    for i in range(n):
        b[i] = 0.5 * (m[i + 3] + m[i])
        f1[i] = abs(m[i + 3] - m[i + 2])
        f2[i] = abs(m[i + 1] - m[i])

    f12 = f1 + f2
    tol = 1e-9 * f12.max()
    for i in range(n):
        if f12[i] > tol:
            b[i] = (f1[i] * m[i + 1] + f2[i] * m[i + 2]) / f12[i]
    return b, m
