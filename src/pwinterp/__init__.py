"""
Piecewise interpolation with exact derivatives and integrals.

Public interface
----------------
* **Interpolation**        – handle built from ``(t, u[, du, ddu])`` samples.
* **new / value / derivative / integral** – functional wrappers.
* **ExtrapolationType**    – ``none | constant | linear | extension``.
* **InterpolationConfig**, **load_config** – declarative build recipes.
* **interpolators.get(tag)** / **available** – the variant registry.
* error classes from :mod:`pwinterp.errors`.
"""

# ---------------------------------------------------------------------------
# Public re-exports
# ---------------------------------------------------------------------------
from . import interpolators as interpolators  # noqa: F401 – re-export
from .config import InterpolationConfig, load_config
from .errors import (
    ConstructionError,
    DerivativeNotAvailableError,
    DownExtrapolationError,
    ExtrapolationError,
    IntegralNotFoundError,
    InterpolationError,
    InvalidQueryError,
    UpExtrapolationError,
)
from .extrapolation import ExtrapolationType
from .interpolation import Interpolation, derivative, integral, new, value
from .interpolators import available

__version__ = "0.1.0"

# ---------------------------------------------------------------------------
# Public namespace
# ---------------------------------------------------------------------------

__all__ = [
    "Interpolation",
    "new",
    "value",
    "derivative",
    "integral",
    "ExtrapolationType",
    "InterpolationConfig",
    "load_config",
    "interpolators",
    "available",
    "InterpolationError",
    "ConstructionError",
    "InvalidQueryError",
    "ExtrapolationError",
    "DownExtrapolationError",
    "UpExtrapolationError",
    "IntegralNotFoundError",
    "DerivativeNotAvailableError",
]
