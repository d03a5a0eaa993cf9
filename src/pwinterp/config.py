"""
pwinterp.config
===============

Declarative description of one interpolation build.

>>> cfg = InterpolationConfig.from_mapping(
...     {"variant": "cubic_spline", "extrapolation": "linear", "cache_parameters": True}
... )
>>> A = pwinterp.new(cfg, t, u)

The same keys can live in a YAML or JSON file read by :func:`load_config`.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any, Mapping

from .errors import ConstructionError
from .extrapolation import ExtrapolationType

__all__ = ["InterpolationConfig", "load_config"]

_KEYS = {
    "variant",
    "extrapolation",
    "extrapolation_down",
    "extrapolation_up",
    "cache_parameters",
    "options",
}


@dataclass(frozen=True)
class InterpolationConfig:
    """Frozen build recipe.

    Parameters
    ----------
    variant            : Registry tag of the interpolation family.
    extrapolation_down : Policy below the first knot.
    extrapolation_up   : Policy above the last knot.
    cache_parameters   : Materialise coefficients and prefix sums at build time.
    options            : Variant options (``mode``, ``dir``, ``degree`` …).
    """

    variant: str = "linear"
    extrapolation_down: ExtrapolationType = ExtrapolationType.NONE
    extrapolation_up: ExtrapolationType = ExtrapolationType.NONE
    cache_parameters: bool = False
    options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        set_ = object.__setattr__
        set_(self, "variant", str(self.variant).strip().lower())
        set_(self, "extrapolation_down", ExtrapolationType.coerce(self.extrapolation_down))
        set_(self, "extrapolation_up", ExtrapolationType.coerce(self.extrapolation_up))
        set_(self, "cache_parameters", bool(self.cache_parameters))
        set_(self, "options", MappingProxyType(dict(self.options or {})))

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "InterpolationConfig":
        """Build from a plain mapping; ``extrapolation`` sets both directions."""
        unknown = set(data) - _KEYS
        if unknown:
            raise ConstructionError(
                f"Unknown config key(s) {sorted(unknown)}. Accepted: {sorted(_KEYS)}"
            )
        both = data.get("extrapolation")
        return cls(
            variant=data.get("variant", "linear"),
            extrapolation_down=data.get("extrapolation_down", both),
            extrapolation_up=data.get("extrapolation_up", both),
            cache_parameters=data.get("cache_parameters", False),
            options=data.get("options") or {},
        )


def load_config(path: str | Path) -> InterpolationConfig:
    """Read an :class:`InterpolationConfig` from a YAML or JSON file."""
    from .utils.data import load_yaml

    data = load_yaml(path)
    if not isinstance(data, Mapping):
        raise ConstructionError(f"{path}: expected a mapping at top level")
    return InterpolationConfig.from_mapping(data)
