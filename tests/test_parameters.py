from __future__ import annotations

import numpy as np
import pytest

from conftest import build

EXPECTED = {
    "linear": {"slope": [4.0, -2.0, 1.0, 0.0]},
    "quadratic": {
        "l0": [0.5, 2.5, 1.5],
        "l1": [-5.0, -3.0, -4.0],
        "l2": [1.5, 2.0, 2.0],
    },
    "quadratic_spline": {
        "alpha": [-9.5, 3.5, -0.5, -0.5],
        "beta": [13.5, -5.5, 1.5, 0.5],
    },
    "cubic_spline": {
        "c1": [6.839285714285714, 1.642857142857143, 4.589285714285714, 4.0],
        "c2": [1.0, 6.839285714285714, 1.642857142857143, 4.589285714285714],
    },
    "cubic_hermite": {
        "c1": [-1.0, -5.0, -5.0, -8.0],
        "c2": [0.0, 13.0, 12.0, 9.0],
    },
    "quintic_hermite": {
        "c1": [-1.0, -6.5, -8.0, -10.0],
        "c2": [1.0, 19.5, 20.0, 19.0],
        "c3": [1.5, -37.5, -37.0, -26.5],
    },
}


@pytest.mark.parametrize("variant", sorted(EXPECTED))
def test_cached_parameters_match_reference(variant: str) -> None:
    A = build(variant, cache_parameters=True)

    for name, expected in EXPECTED[variant].items():
        np.testing.assert_allclose(getattr(A.p, name), expected, rtol=1e-12, atol=1e-12)


@pytest.mark.parametrize("variant", sorted(EXPECTED))
def test_lazy_parameters_match_reference(variant: str) -> None:
    A = build(variant, cache_parameters=False)
    expected = EXPECTED[variant]
    count = len(next(iter(expected.values())))

    assert A.p is None
    computed = [A.parameters(i) for i in range(count)]
    for k, name in enumerate(expected):
        np.testing.assert_allclose(
            [row[k] for row in computed], expected[name], rtol=1e-12, atol=1e-12
        )


def test_parameter_cache_fields_follow_variant() -> None:
    assert build("quadratic", cache_parameters=True).p._fields == ("l0", "l1", "l2")
    assert build("akima", cache_parameters=True).p._fields == ("b", "c", "d")


def test_akima_coefficients_reproduce_samples() -> None:
    A = build("akima", cache_parameters=True)
    h = np.diff(A.t)
    b, c, d = A.p

    # the cubic on each segment must land on the right-hand sample
    np.testing.assert_allclose(A.u[:-1] + b * h + c * h**2 + d * h**3, A.u[1:], atol=1e-12)
    # and leave with the next knot slope (C¹)
    np.testing.assert_allclose(b + 2 * c * h + 3 * d * h**2, A.aux["b"][1:], atol=1e-12)


def test_variants_without_coefficients_have_no_cache() -> None:
    for variant in ("constant", "lagrange", "bspline"):
        A = build(variant, cache_parameters=True)
        assert A.p is None
        assert A.parameters(0) == ()
