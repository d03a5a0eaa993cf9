"""
interpolators.hermite
=====================

**Cubic** and **quintic Hermite** splines: the caller supplies first (and,
for the quintic, second) derivatives at every knot, and each segment is
the unique polynomial matching them at both ends.

Cubic, with s = t − tᵢ and q = t − tᵢ₊₁:

    u(t) = uᵢ + duᵢ s + s² (c₁ + q c₂)

Quintic:

    u(t) = uᵢ + s (duᵢ + dduᵢ s / 2) + s³ (c₁ + q (c₂ + q c₃))
"""

from __future__ import annotations

from typing import NamedTuple

from .._core import integrate_cubic_polynomial
from .base import Variant


class CubicHermiteParameters(NamedTuple):
    c1: object
    c2: object


class QuinticHermiteParameters(NamedTuple):
    c1: object
    c2: object
    c3: object


# ---------------------------------------------------------------------------
# Cubic Hermite
# ---------------------------------------------------------------------------


def _cubic_parameters(A, idx):
    h = A.t[idx + 1] - A.t[idx]
    du0, du1 = A.du[idx], A.du[idx + 1]
    c1 = (A.u[idx + 1] - A.u[idx] - du0 * h) / h**2
    c2 = (du1 - du0 - 2.0 * c1 * h) / h**2
    return c1, c2


def _cubic_value(A, idx, t):
    s = t - A.t[idx]
    q = t - A.t[idx + 1]
    c1, c2 = A.parameters(idx)
    return A.u[idx] + s * A.du[idx] + s**2 * (c1 + q * c2)


def _cubic_derivative(A, idx, t):
    s = t - A.t[idx]
    q = t - A.t[idx + 1]
    c1, c2 = A.parameters(idx)
    return A.du[idx] + 2.0 * s * (c1 + q * c2) + s**2 * c2


def _cubic_second_derivative(A, idx, t):
    s = t - A.t[idx]
    q = t - A.t[idx + 1]
    c1, c2 = A.parameters(idx)
    return 2.0 * (c1 + q * c2) + 4.0 * s * c2


def _cubic_integral(A, idx, t1, t2):
    c1, c2 = A.parameters(idx)
    t_lo = A.t[idx]
    c = c1 - c2 * (A.t[idx + 1] - t_lo)
    return integrate_cubic_polynomial(
        t1, t2, float(t_lo), float(A.u[idx]), float(A.du[idx]), float(c), float(c2)
    )


CUBIC = Variant(
    name="cubic_hermite",
    value=_cubic_value,
    min_points=2,
    requires=("du",),
    parameter_type=CubicHermiteParameters,
    parameters=_cubic_parameters,
    derivative=_cubic_derivative,
    second_derivative=_cubic_second_derivative,
    integral=_cubic_integral,
)


# ---------------------------------------------------------------------------
# Quintic Hermite
# ---------------------------------------------------------------------------


def _quintic_parameters(A, idx):
    h = A.t[idx + 1] - A.t[idx]
    u0, u1 = A.u[idx], A.u[idx + 1]
    du0, du1 = A.du[idx], A.du[idx + 1]
    ddu0, ddu1 = A.ddu[idx], A.ddu[idx + 1]
    c1 = (u1 - u0 - du0 * h - ddu0 * h**2 / 2.0) / h**3
    c2 = (3.0 * u0 - 3.0 * u1 + 2.0 * (du0 + du1 / 2.0) * h + ddu0 * h**2 / 2.0) / h**4
    c3 = (
        6.0 * u1 - 6.0 * u0 - 3.0 * (du0 + du1) * h + (ddu1 - ddu0) * h**2 / 2.0
    ) / h**5
    return c1, c2, c3


def _quintic_terms(A, idx, t):
    """Offsets plus p(q) = c₁ + c₂q + c₃q² and its q-derivatives."""
    s = t - A.t[idx]
    q = t - A.t[idx + 1]
    c1, c2, c3 = A.parameters(idx)
    p = c1 + q * (c2 + c3 * q)
    dp = c2 + 2.0 * c3 * q
    ddp = 2.0 * c3
    return s, p, dp, ddp


def _quintic_value(A, idx, t):
    s, p, _, _ = _quintic_terms(A, idx, t)
    return A.u[idx] + s * (A.du[idx] + A.ddu[idx] * s / 2.0) + s**3 * p


def _quintic_derivative(A, idx, t):
    s, p, dp, _ = _quintic_terms(A, idx, t)
    return A.du[idx] + A.ddu[idx] * s + 3.0 * s**2 * p + s**3 * dp


def _quintic_second_derivative(A, idx, t):
    s, p, dp, ddp = _quintic_terms(A, idx, t)
    return A.ddu[idx] + 6.0 * s * p + 6.0 * s**2 * dp + s**3 * ddp


def _quintic_primitive(A, idx, t):
    """∫_{tᵢ}^{t} u(τ) dτ, integrating s³ p(q) by parts."""
    s, p, dp, ddp = _quintic_terms(A, idx, t)
    out = s * (A.u[idx] + A.du[idx] * s / 2.0 + A.ddu[idx] * s**2 / 6.0)
    out += s**4 / 4.0 * (p - s / 5.0 * dp + s**2 / 30.0 * ddp)
    return out


def _quintic_integral(A, idx, t1, t2):
    return _quintic_primitive(A, idx, t2) - _quintic_primitive(A, idx, t1)


QUINTIC = Variant(
    name="quintic_hermite",
    value=_quintic_value,
    min_points=2,
    requires=("du", "ddu"),
    parameter_type=QuinticHermiteParameters,
    parameters=_quintic_parameters,
    derivative=_quintic_derivative,
    second_derivative=_quintic_second_derivative,
    integral=_quintic_integral,
)
