"""
Variant registry for the piecewise interpolation engine.

Each concrete family is described by one :class:`~.base.Variant` record
(coefficient, value, derivative and segment-integral formulas); the
registry maps a short tag to that record.

Implemented variants
--------------------
constant          – piece-wise constant (left / right hold)
linear            – C⁰ linear
quadratic         – 3-point quadratic Lagrange (forward / backward window)
quadratic_spline  – C¹ quadratic spline
cubic_spline      – C² natural cubic spline
cubic_hermite     – C¹ cubic Hermite (needs ``du``)
quintic_hermite   – C² quintic Hermite (needs ``du`` and ``ddu``)
akima             – Akima cubic
lagrange          – global Lagrange polynomial   (no integral)
bspline           – interpolating B-spline       (no integral)

Adding a scheme means dropping a module that defines ``VARIANT`` **or**
calling ``register(tag, variant)`` manually.
"""

from importlib import import_module
from types import MappingProxyType
from typing import Dict

from ..errors import ConstructionError
from .base import Variant

# ---------------------------------------------------------------- registry

_REGISTRY: Dict[str, Variant] = {}


def register(tag: str, variant: Variant):
    """
    Add a variant to the registry.

    Raises
    ------
    ValueError  if `tag` already taken.
    """
    if tag in _REGISTRY:
        raise ValueError(f"Variant '{tag}' already registered")
    _REGISTRY[tag] = variant


def get(tag: str) -> Variant:
    """Retrieve a variant by tag (e.g. ``'cubic_spline'``), case-insensitive."""
    key = tag.strip().lower() if isinstance(tag, str) else tag
    try:
        return _REGISTRY[key]
    except (KeyError, TypeError) as exc:
        raise ConstructionError(
            f"Unknown interpolation variant {tag!r}. Available: {list(_REGISTRY)}"
        ) from exc


# ---------------------------------------------------------------- built-ins
# NB: each module must define a public `VARIANT` record.

for _name in (
    "constant",
    "linear",
    "quadratic",
    "quadratic_spline",
    "cubic",
    "akima",
    "lagrange",
    "bspline",
):
    _mod = import_module(f".{_name}", __name__)
    register(_mod.VARIANT.name, _mod.VARIANT)

# both Hermite flavours live in one file
from .hermite import CUBIC as _CUBIC_HERMITE  # noqa: E402  (after registry helpers)
from .hermite import QUINTIC as _QUINTIC_HERMITE  # noqa: E402

register(_CUBIC_HERMITE.name, _CUBIC_HERMITE)
register(_QUINTIC_HERMITE.name, _QUINTIC_HERMITE)

# immutable public view -------------------------------------------------------

available = MappingProxyType(_REGISTRY)  # read-only dict proxy

__all__ = ["Variant", "register", "get", "available"]
