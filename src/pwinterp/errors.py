"""
pwinterp.errors
===============

Error taxonomy shared by every interpolation variant.

All errors are raised synchronously on the call that triggers them; no
partial result is ever returned and nothing is retried internally.

ConstructionError            – bad knots / samples / options, object never built
InvalidQueryError            – NaN or non-numeric query point
DownExtrapolationError       – query below ``t[0]`` with ``extrapolation_down = none``
UpExtrapolationError         – query above ``t[-1]`` with ``extrapolation_up = none``
IntegralNotFoundError        – variant has no closed-form antiderivative
DerivativeNotAvailableError  – variant / order has no analytic derivative
"""

from __future__ import annotations

__all__ = [
    "InterpolationError",
    "ConstructionError",
    "InvalidQueryError",
    "ExtrapolationError",
    "DownExtrapolationError",
    "UpExtrapolationError",
    "IntegralNotFoundError",
    "DerivativeNotAvailableError",
]


class InterpolationError(Exception):
    """Base class of every error raised by :mod:`pwinterp`."""


class ConstructionError(InterpolationError, ValueError):
    """Invalid input shape, ordering or configuration."""


class InvalidQueryError(InterpolationError, ValueError):
    """Query point is not a number."""


class ExtrapolationError(InterpolationError, ValueError):
    """Query outside ``[t[0], t[-1]]`` in a direction configured as ``none``."""

    direction = ""

    def __init__(self, t: float | None = None):
        self.t = t
        where = "" if t is None else f" (t = {t!r})"
        super().__init__(
            f"Cannot extrapolate {self.direction}{where}: "
            f"`extrapolation_{self.direction}` is `none`."
        )


class DownExtrapolationError(ExtrapolationError):
    direction = "down"


class UpExtrapolationError(ExtrapolationError):
    direction = "up"


class IntegralNotFoundError(InterpolationError, NotImplementedError):
    """Selected variant has no closed-form integral."""

    def __init__(self, variant: str = ""):
        self.variant = variant
        super().__init__(f"Integral is not available for the '{variant}' variant.")


class DerivativeNotAvailableError(InterpolationError, NotImplementedError):
    """Derivative of the requested order is not available."""

    def __init__(self, variant: str = "", order: int = 1):
        self.variant = variant
        self.order = order
        super().__init__(
            f"Derivative of order {order} is not available for the '{variant}' variant."
        )
