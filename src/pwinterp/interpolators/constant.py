"""
interpolators.constant
======================

Piece-wise **constant** (step) interpolation.

``dir="left"``  – the sample to the *left* of ``t`` is held:  u(t) = uᵢ on [tᵢ, tᵢ₊₁).
``dir="right"`` – the sample to the *right* of ``t`` is held: u(t) = uᵢ₊₁ on (tᵢ, tᵢ₊₁].

On a knot both directions return that knot's sample.  Past the far end of
its own segment a step holds the neighbouring sample, which is what the
``extension`` extrapolation sees.
"""

from __future__ import annotations

from .base import Variant, check_choice


def _prepare(A):
    check_choice(A, "dir", ("left", "right"))
    return {}


def _value(A, idx, t):
    if A.options["dir"] == "left":
        return A.u[idx + 1] if t >= A.t[idx + 1] else A.u[idx]
    return A.u[idx] if t <= A.t[idx] else A.u[idx + 1]


def _zero(A, idx, t):
    return 0.0


def _integral(A, idx, t1, t2):
    if A.options["dir"] == "left":
        # u[idx] up to the right knot, u[idx + 1] beyond it
        edge = A.t[idx + 1]
        inner = min(t2, edge) - min(t1, edge)
        return A.u[idx] * inner + A.u[idx + 1] * (t2 - t1 - inner)
    # u[idx] up to the left knot, u[idx + 1] beyond it
    edge = A.t[idx]
    inner = max(t2, edge) - max(t1, edge)
    return A.u[idx + 1] * inner + A.u[idx] * (t2 - t1 - inner)


VARIANT = Variant(
    name="constant",
    value=_value,
    min_points=2,
    options={"dir": "left"},
    derivative=_zero,
    second_derivative=_zero,
    integral=_integral,
    prepare=_prepare,
)
