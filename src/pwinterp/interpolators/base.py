"""
interpolators.base
==================

A :class:`Variant` bundles every closed-form formula one interpolation
family needs.  The :class:`~pwinterp.interpolation.Interpolation` handle
never branches on the family itself; it looks the formulas up here.

Every formula receives the handle ``A`` first, so it can read the knot
store (``A.t``, ``A.u``, ``A.du``, ``A.ddu``), the one-shot global
quantities produced by ``prepare`` (``A.aux``), the resolved options
(``A.options``) and the per-segment coefficients (``A.parameters(idx)``).

Signatures
----------
prepare(A)                      -> dict          global precomputation (once)
parameters(A, idx)              -> tuple         coefficients of segment / window idx
value(A, idx, t)                -> float
derivative(A, idx, t)           -> float
second_derivative(A, idx, t)    -> float
integral(A, idx, t1, t2)        -> float         exact ∫_{t1}^{t2} of segment idx
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING, Any, Callable, Mapping, NamedTuple, Sequence

if TYPE_CHECKING:  # pragma: no cover
    from ..interpolation import Interpolation  # noqa: F401

from ..errors import ConstructionError

__all__ = ["Variant", "segment_count", "window_count", "check_choice"]


def segment_count(n: int) -> int:
    return n - 1


def window_count(n: int) -> int:
    return n - 2


def check_choice(A, key: str, choices: Sequence[str]) -> None:
    """Raise :class:`ConstructionError` unless ``A.options[key]`` is one of ``choices``."""
    if A.options[key] not in choices:
        raise ConstructionError(
            f"option '{key}' must be one of {list(choices)}, got {A.options[key]!r}"
        )


@dataclass(frozen=True)
class Variant:
    """Closed-form formula table of one interpolation family.

    Parameters
    ----------
    name              : Registry tag.
    value             : Pointwise value on one segment.
    min_points        : Smallest admissible knot count.
    requires          : Extra sample arrays that must be supplied (``"du"``, ``"ddu"``).
    options           : Accepted keyword options and their defaults.
    parameter_type    : NamedTuple class holding the cached coefficient arrays.
    parameters        : Per-segment coefficient formula (``None`` → no coefficients).
    n_parameters      : Number of coefficient sets for ``n`` knots.
    derivative        : First derivative (``None`` → not available).
    second_derivative : Second derivative (``None`` → not available).
    integral          : Exact segment integral (``None`` → no closed form).
    prepare           : One-shot global precomputation, result lands in ``A.aux``.
    """

    name: str
    value: Callable[..., float]
    min_points: int = 2
    requires: Sequence[str] = ()
    options: Mapping[str, Any] = field(default_factory=dict)
    parameter_type: type[NamedTuple] | None = None
    parameters: Callable[..., tuple] | None = None
    n_parameters: Callable[[int], int] = segment_count
    derivative: Callable[..., float] | None = None
    second_derivative: Callable[..., float] | None = None
    integral: Callable[..., float] | None = None
    prepare: Callable[..., dict] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "options", MappingProxyType(dict(self.options)))
        object.__setattr__(self, "requires", tuple(self.requires))

    @property
    def has_integral(self) -> bool:
        return self.integral is not None
