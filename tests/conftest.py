from __future__ import annotations

import sys
from pathlib import Path

import numpy as np
import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC_ROOT = ROOT / "src"
if str(SRC_ROOT) not in sys.path:
    sys.path.insert(0, str(SRC_ROOT))

from pwinterp import Interpolation  # noqa: E402

T = [1.0, 2.0, 3.0, 4.0, 5.0]
U = [1.0, 5.0, 3.0, 4.0, 4.0]
DU = [5.0, 3.0, 6.0, 8.0, 1.0]
DDU = [0.0, 3.0, 6.0, 4.0, 5.0]

INTEGRABLE = [
    ("constant", {"dir": "left"}),
    ("constant", {"dir": "right"}),
    ("linear", {}),
    ("quadratic", {"mode": "forward"}),
    ("quadratic", {"mode": "backward"}),
    ("quadratic_spline", {}),
    ("cubic_spline", {}),
    ("cubic_hermite", {}),
    ("quintic_hermite", {}),
    ("akima", {}),
]

EVALUATION_ONLY = [("lagrange", {}), ("bspline", {"degree": 3})]


def build(
    variant: str, options: dict | None = None, *, offset: float = 0.0, **kwargs
) -> Interpolation:
    """Interpolation of the shared fixture data, derivative samples included as needed.

    ``offset`` translates the knots; samples are left unchanged.
    """
    extra = {}
    if variant in ("cubic_hermite", "quintic_hermite"):
        extra["du"] = DU
    if variant == "quintic_hermite":
        extra["ddu"] = DDU
    knots = [t + offset for t in T]
    return Interpolation(variant, knots, U, **extra, **(options or {}), **kwargs)


def variant_id(case) -> str:
    name, options = case
    return "-".join([name, *map(str, options.values())])


@pytest.fixture
def knots() -> np.ndarray:
    return np.asarray(T)
