"""
pwinterp.interpolation
======================

The :class:`Interpolation` handle: knot store, coefficient cache and the
public ``value`` / ``derivative`` / ``integral`` entry points.

The handle is built once and is read-only afterwards (frozen attributes,
non-writeable arrays), so concurrent evaluation needs no locking.

>>> from pwinterp import Interpolation
>>> A = Interpolation("linear", [1, 2, 3, 4, 5], [1, 5, 3, 4, 4],
...                   extrapolation="linear", cache_parameters=True)
>>> A.p.slope
array([ 4., -2.,  1.,  0.])
>>> A.integral(1, 5)
14.5
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Mapping, Sequence

import numpy as np

from . import extrapolation as _ex
from .errors import ConstructionError, DerivativeNotAvailableError, InvalidQueryError
from .extrapolation import ExtrapolationType
from .integration import cumulative_integral
from .integration import integral as _integral
from .interpolators import Variant
from .interpolators import get as get_variant
from .locator import locate

if TYPE_CHECKING:  # pragma: no cover
    from .config import InterpolationConfig

__all__ = ["Interpolation", "new", "value", "derivative", "integral"]

logger = logging.getLogger(__name__)


def _readonly(arr: np.ndarray) -> np.ndarray:
    arr.flags.writeable = False
    return arr


def _as_samples(name: str, values, n: int | None = None) -> np.ndarray:
    try:
        arr = np.array(values, dtype=float)
    except (TypeError, ValueError) as exc:
        raise ConstructionError(f"`{name}` must be numeric.") from exc
    if arr.ndim != 1:
        raise ConstructionError(f"`{name}` must be 1-D.")
    if n is not None and arr.shape[0] != n:
        raise ConstructionError(
            f"`{name}` length mismatch: expected {n}, got {arr.shape[0]}."
        )
    return _readonly(arr)


def _query(t) -> float:
    try:
        t = float(t)
    except (TypeError, ValueError) as exc:
        raise InvalidQueryError(f"query point must be numeric, got {t!r}") from exc
    if np.isnan(t):
        raise InvalidQueryError("query point must not be NaN")
    return t


class Interpolation:
    """Piecewise interpolant of ``(t, u)`` samples.

    Parameters
    ----------
    variant            : Registry tag (``"linear"``, ``"cubic_spline"``, …) or a
                         :class:`~pwinterp.interpolators.Variant`.
    t                  : Strictly increasing knots, ``len(t) >= 2``.
    u                  : Samples, same length as ``t``.
    du, ddu            : First / second derivative samples (Hermite variants).
    extrapolation      : Policy applied in both directions.
    extrapolation_down : Policy below ``t[0]``; overrides ``extrapolation``.
    extrapolation_up   : Policy above ``t[-1]``; overrides ``extrapolation``.
    cache_parameters   : Materialise per-segment coefficients and the
                         prefix-sum integral cache at construction.
    **options          : Variant options (``mode``, ``dir``, ``degree``).
    """

    def __init__(
        self,
        variant: str | Variant,
        t: Sequence[float],
        u: Sequence[float],
        du: Sequence[float] | None = None,
        ddu: Sequence[float] | None = None,
        *,
        extrapolation: ExtrapolationType | str | None = None,
        extrapolation_down: ExtrapolationType | str | None = None,
        extrapolation_up: ExtrapolationType | str | None = None,
        cache_parameters: bool = False,
        **options: Any,
    ) -> None:
        var = variant if isinstance(variant, Variant) else get_variant(variant)
        set_ = object.__setattr__

        t_arr = _as_samples("t", t)
        n = t_arr.shape[0]
        if n < max(2, var.min_points):
            raise ConstructionError(
                f"'{var.name}' needs at least {max(2, var.min_points)} knots, got {n}."
            )
        if not np.all(np.isfinite(t_arr)):
            raise ConstructionError("`t` must be finite.")
        if np.any(np.diff(t_arr) <= 0):
            raise ConstructionError("`t` must be strictly increasing.")

        samples = {"du": du, "ddu": ddu}
        for name in var.requires:
            if samples[name] is None:
                raise ConstructionError(f"'{var.name}' requires `{name}`.")

        unknown = set(options) - set(var.options)
        if unknown:
            raise ConstructionError(
                f"Unknown option(s) {sorted(unknown)} for '{var.name}'. "
                f"Accepted: {sorted(var.options)}"
            )

        down = extrapolation if extrapolation_down is None else extrapolation_down
        up = extrapolation if extrapolation_up is None else extrapolation_up

        set_(self, "variant", var)
        set_(self, "t", t_arr)
        set_(self, "u", _as_samples("u", u, n))
        set_(self, "du", None if du is None else _as_samples("du", du, n))
        set_(self, "ddu", None if ddu is None else _as_samples("ddu", ddu, n))
        set_(self, "extrapolation_down", ExtrapolationType.coerce(down))
        set_(self, "extrapolation_up", ExtrapolationType.coerce(up))
        set_(self, "options", MappingProxyType({**var.options, **options}))
        set_(self, "cache_parameters", bool(cache_parameters))
        set_(self, "p", None)
        set_(self, "I", None)

        aux = var.prepare(self) if var.prepare is not None else {}
        for v in aux.values():
            if isinstance(v, np.ndarray):
                _readonly(v)
        set_(self, "aux", MappingProxyType(aux))

        if self.cache_parameters:
            if var.parameters is not None:
                rows = [var.parameters(self, i) for i in range(var.n_parameters(n))]
                cols = (_readonly(np.array(col, dtype=float)) for col in zip(*rows))
                set_(self, "p", var.parameter_type(*cols))
            if var.has_integral:
                set_(self, "I", _readonly(cumulative_integral(self)))

        logger.debug(
            "built %s interpolation: n=%d cache_parameters=%s down=%s up=%s",
            var.name,
            n,
            self.cache_parameters,
            self.extrapolation_down.value,
            self.extrapolation_up.value,
        )

    # ------------------------------------------------------------------ #
    # immutability
    # ------------------------------------------------------------------ #

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is read-only")

    def __repr__(self) -> str:
        return (
            f"Interpolation({self.variant.name!r}, n={len(self.t)}, "
            f"domain=[{self.t[0]:g}, {self.t[-1]:g}], "
            f"extrapolation_down={self.extrapolation_down.value!r}, "
            f"extrapolation_up={self.extrapolation_up.value!r}, "
            f"cache_parameters={self.cache_parameters})"
        )

    # ------------------------------------------------------------------ #
    # coefficients
    # ------------------------------------------------------------------ #

    def parameters(self, idx: int) -> tuple:
        """Coefficient tuple of segment (or window) ``idx``, cached or computed."""
        if self.p is not None:
            return tuple(col[idx] for col in self.p)
        if self.variant.parameters is None:
            return ()
        return self.variant.parameters(self, idx)

    def _segment_derivative(self, idx: int, t: float, order: int) -> float:
        fn = self.variant.derivative if order == 1 else self.variant.second_derivative
        if fn is None:
            raise DerivativeNotAvailableError(self.variant.name, order)
        return fn(self, idx, t)

    # ------------------------------------------------------------------ #
    # Public API
    # ------------------------------------------------------------------ #

    def value(self, t: float) -> float:
        """Interpolated (or extrapolated) value at ``t``."""
        t = _query(t)
        if t < self.t[0]:
            return float(_ex.value_down(self, t))
        if t > self.t[-1]:
            return float(_ex.value_up(self, t))
        return float(self.variant.value(self, locate(self.t, t), t))

    def derivative(self, t: float, order: int = 1) -> float:
        """Analytic derivative of order 1 or 2 at ``t``."""
        if order not in (1, 2):
            raise DerivativeNotAvailableError(self.variant.name, order)
        t = _query(t)
        if t < self.t[0]:
            return float(_ex.derivative_down(self, t, order))
        if t > self.t[-1]:
            return float(_ex.derivative_up(self, t, order))
        return float(self._segment_derivative(locate(self.t, t), t, order))

    def integral(self, t1: float, t2: float | None = None) -> float:
        """∫_{t1}^{t2}; with a single argument ∫_{t[0]}^{t1}."""
        if t2 is None:
            t1, t2 = self.t[0], t1
        return float(_integral(self, _query(t1), _query(t2)))

    def __call__(self, t):
        """Vectorised :meth:`value` – scalar in, float out; array in, array out."""
        if np.ndim(t) == 0:
            return self.value(t)
        arr = np.asarray(t, dtype=float)
        return np.array([self.value(x) for x in arr.ravel()]).reshape(arr.shape)


# -------------------------------------------------------------------------
# Functional API
# -------------------------------------------------------------------------


def new(
    config: "InterpolationConfig | Mapping[str, Any]",
    t: Sequence[float],
    u: Sequence[float],
    du: Sequence[float] | None = None,
    ddu: Sequence[float] | None = None,
) -> Interpolation:
    """Build an :class:`Interpolation` from a config object or plain mapping."""
    from .config import InterpolationConfig

    if not isinstance(config, InterpolationConfig):
        config = InterpolationConfig.from_mapping(config)
    return Interpolation(
        config.variant,
        t,
        u,
        du,
        ddu,
        extrapolation_down=config.extrapolation_down,
        extrapolation_up=config.extrapolation_up,
        cache_parameters=config.cache_parameters,
        **config.options,
    )


def value(A: Interpolation, t: float) -> float:
    return A.value(t)


def derivative(A: Interpolation, t: float, order: int = 1) -> float:
    return A.derivative(t, order)


def integral(A: Interpolation, t1: float, t2: float | None = None) -> float:
    return A.integral(t1, t2)
