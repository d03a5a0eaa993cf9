"""
pwinterp.extrapolation
======================

Behaviour below the first knot (``extrapolation_down``) and above the last
knot (``extrapolation_up``).  The two directions are configured
independently; each policy comes with a value, a derivative and a
tail-integral form so that evaluation and integration stay consistent.

none       – raise :class:`DownExtrapolationError` / :class:`UpExtrapolationError`
constant   – hold the boundary sample (C⁰)
linear     – tangent line at the boundary knot (C¹)
extension  – keep evaluating the boundary segment's own expression

Tail integrals
--------------
``integral_down(A, t)`` is ∫_t^{t₀} and ``integral_up(A, t)`` is
∫_{tₙ₋₁}^t, i.e. both are positive-orientation integrals of the
extrapolant over the part of the axis outside the knots.
"""

from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

from .errors import ConstructionError, DownExtrapolationError, UpExtrapolationError

if TYPE_CHECKING:  # pragma: no cover
    from .interpolation import Interpolation

__all__ = [
    "ExtrapolationType",
    "value_down",
    "value_up",
    "derivative_down",
    "derivative_up",
    "integral_down",
    "integral_up",
]


class ExtrapolationType(str, Enum):
    NONE = "none"
    CONSTANT = "constant"
    LINEAR = "linear"
    EXTENSION = "extension"

    @classmethod
    def coerce(cls, value: "ExtrapolationType | str | None") -> "ExtrapolationType":
        """Accept an enum member, its (case-insensitive) name / value, or ``None``."""
        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        for member in cls:
            if member.value == key:
                return member
        raise ConstructionError(
            f"Unknown extrapolation type {value!r}. "
            f"Available: {[m.value for m in cls]}"
        )


# ---------------------------------------------------------------------------
# Values
# ---------------------------------------------------------------------------


def value_down(A: "Interpolation", t: float) -> float:
    kind = A.extrapolation_down
    if kind is ExtrapolationType.NONE:
        raise DownExtrapolationError(t)
    if kind is ExtrapolationType.CONSTANT:
        return A.u[0]
    if kind is ExtrapolationType.LINEAR:
        t0 = A.t[0]
        return A.u[0] + A.derivative(t0) * (t - t0)
    return A.variant.value(A, 0, t)


def value_up(A: "Interpolation", t: float) -> float:
    kind = A.extrapolation_up
    if kind is ExtrapolationType.NONE:
        raise UpExtrapolationError(t)
    if kind is ExtrapolationType.CONSTANT:
        return A.u[-1]
    if kind is ExtrapolationType.LINEAR:
        tn = A.t[-1]
        return A.u[-1] + A.derivative(tn) * (t - tn)
    return A.variant.value(A, len(A.t) - 2, t)


# ---------------------------------------------------------------------------
# Derivatives
# ---------------------------------------------------------------------------


def _derivative(A, kind, boundary, idx, t, order, error):
    if kind is ExtrapolationType.NONE:
        raise error(t)
    if kind is ExtrapolationType.CONSTANT:
        return 0.0
    if kind is ExtrapolationType.LINEAR:
        return A.derivative(boundary) if order == 1 else 0.0
    return A._segment_derivative(idx, t, order)


def derivative_down(A: "Interpolation", t: float, order: int = 1) -> float:
    return _derivative(
        A, A.extrapolation_down, A.t[0], 0, t, order, DownExtrapolationError
    )


def derivative_up(A: "Interpolation", t: float, order: int = 1) -> float:
    return _derivative(
        A, A.extrapolation_up, A.t[-1], len(A.t) - 2, t, order, UpExtrapolationError
    )


# ---------------------------------------------------------------------------
# Tail integrals
# ---------------------------------------------------------------------------


def integral_down(A: "Interpolation", t: float) -> float:
    """∫_t^{t₀} of the downward extrapolant (``t <= t₀``)."""
    kind = A.extrapolation_down
    t0 = A.t[0]
    if kind is ExtrapolationType.NONE:
        raise DownExtrapolationError(t)
    if kind is ExtrapolationType.CONSTANT:
        return A.u[0] * (t0 - t)
    if kind is ExtrapolationType.LINEAR:
        slope = A.derivative(t0)
        dt = t0 - t
        return (A.u[0] - slope * dt / 2.0) * dt
    return A.variant.integral(A, 0, t, t0)


def integral_up(A: "Interpolation", t: float) -> float:
    """∫_{tₙ₋₁}^t of the upward extrapolant (``t >= tₙ₋₁``)."""
    kind = A.extrapolation_up
    tn = A.t[-1]
    if kind is ExtrapolationType.NONE:
        raise UpExtrapolationError(t)
    if kind is ExtrapolationType.CONSTANT:
        return A.u[-1] * (t - tn)
    if kind is ExtrapolationType.LINEAR:
        slope = A.derivative(tn)
        dt = t - tn
        return (A.u[-1] + slope * dt / 2.0) * dt
    return A.variant.integral(A, len(A.t) - 2, tn, t)
