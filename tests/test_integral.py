from __future__ import annotations

import itertools

import numpy as np
import pytest
from scipy.integrate import quad

from conftest import EVALUATION_ONLY, INTEGRABLE, T, build, variant_id
from pwinterp import IntegralNotFoundError

POINTS = [-1.5, 0.0, 1.0, 1.3, 2.0, 2.7, 4.0, 4.5, 5.0, 6.0, 7.25]


def test_linear_known_values() -> None:
    A = build("linear", extrapolation="linear")

    assert A.integral(1.0, 5.0) == pytest.approx(14.5)
    assert A.integral(0.0, 1.0) == pytest.approx(-1.0)
    assert A.integral(5.0, 6.0) == pytest.approx(4.0)
    # both ends outside, on the same side
    assert A.integral(-1.0, 0.0) == pytest.approx(-5.0)
    assert A.integral(6.0, 8.0) == pytest.approx(8.0)


def test_constant_policy_tail() -> None:
    A = build("linear", extrapolation="constant")

    assert A.integral(0.0, 1.0) == pytest.approx(1.0)
    assert A.integral(5.0, 7.0) == pytest.approx(8.0)


@pytest.mark.parametrize(("direction", "expected"), [("left", 13.0), ("right", 16.0)])
def test_step_integral(direction: str, expected: float) -> None:
    A = build("constant", {"dir": direction})

    assert A.integral(1.0, 5.0) == pytest.approx(expected)


def test_single_argument_integrates_from_first_knot() -> None:
    A = build("linear")

    assert A.integral(3.0) == pytest.approx(A.integral(1.0, 3.0))
    assert A.integral(3.0) == pytest.approx(7.0)


@pytest.mark.parametrize("case", INTEGRABLE, ids=variant_id)
def test_zero_width_interval(case) -> None:
    A = build(*case, extrapolation="extension")

    for t in (0.0, 1.0, 2.5, 5.0, 6.0):
        assert A.integral(t, t) == 0.0


@pytest.mark.parametrize("case", INTEGRABLE, ids=variant_id)
def test_antisymmetry_and_additivity(case) -> None:
    A = build(*case, extrapolation="extension")

    for a, b in itertools.combinations(POINTS, 2):
        assert A.integral(b, a) == pytest.approx(-A.integral(a, b), abs=1e-12)
    for a, b, c in itertools.combinations(POINTS, 3):
        assert A.integral(a, c) == pytest.approx(
            A.integral(a, b) + A.integral(b, c), rel=1e-10, abs=1e-10
        )


@pytest.mark.parametrize("policy", ["constant", "linear", "extension"])
@pytest.mark.parametrize("case", INTEGRABLE, ids=variant_id)
def test_matches_numerical_quadrature(case, policy: str) -> None:
    A = build(*case, extrapolation=policy)

    for a, b in [(1.0, 5.0), (1.3, 4.5), (2.0, 2.7), (-1.5, 7.25), (-1.5, 0.0), (6.0, 7.25)]:
        expected, _ = quad(A.value, a, b, points=[x for x in T if a < x < b] or None, limit=200)
        assert A.integral(a, b) == pytest.approx(expected, rel=1e-8, abs=1e-8)


@pytest.mark.parametrize("case", INTEGRABLE, ids=variant_id)
def test_cache_does_not_change_results(case) -> None:
    lazy = build(*case, extrapolation="extension")
    cached = build(*case, extrapolation="extension", cache_parameters=True)

    for t in POINTS:
        assert cached(t) == pytest.approx(lazy(t), rel=1e-12, abs=1e-12)
        assert cached.derivative(t) == pytest.approx(lazy.derivative(t), rel=1e-12, abs=1e-12)
        assert cached.derivative(t, 2) == pytest.approx(
            lazy.derivative(t, 2), rel=1e-12, abs=1e-12
        )
    for a, b in itertools.combinations(POINTS, 2):
        assert cached.integral(a, b) == pytest.approx(lazy.integral(a, b), rel=1e-10, abs=1e-10)


@pytest.mark.parametrize("case", INTEGRABLE, ids=variant_id)
def test_prefix_sums_hold_segment_integrals(case) -> None:
    A = build(*case, cache_parameters=True)
    segments = [A.variant.integral(A, i, T[i], T[i + 1]) for i in range(len(T) - 1)]

    assert A.I.shape == (len(T),)
    assert A.I[0] == 0.0
    np.testing.assert_allclose(np.diff(A.I), segments, rtol=1e-12, atol=1e-12)
    assert A.I[-1] == pytest.approx(A.integral(T[0], T[-1]))


@pytest.mark.parametrize("case", EVALUATION_ONLY, ids=variant_id)
def test_integral_unavailable(case) -> None:
    A = build(*case, extrapolation="extension", cache_parameters=True)

    assert A.I is None
    with pytest.raises(IntegralNotFoundError):
        A.integral(1.0, 3.0)
    with pytest.raises(IntegralNotFoundError):
        A.integral(2.0, 2.0)
    with pytest.raises(NotImplementedError):
        A.integral(4.0)


# --------------------------------------------------------------------------- #
# Translated domain
# --------------------------------------------------------------------------- #

EPOCH = 1.7e9
# binary fractions stay exact after adding EPOCH
LOCAL_POINTS = [-1.5, 0.0, 1.0, 1.25, 2.0, 2.75, 4.0, 4.5, 5.0, 6.0, 7.25]


@pytest.mark.parametrize("policy", ["linear", "extension"])
@pytest.mark.parametrize("case", INTEGRABLE, ids=variant_id)
def test_results_invariant_under_knot_translation(case, policy: str) -> None:
    local = build(*case, extrapolation=policy)
    shifted = build(*case, extrapolation=policy, offset=EPOCH)
    cached = build(*case, extrapolation=policy, offset=EPOCH, cache_parameters=True)

    for t in LOCAL_POINTS:
        assert shifted(t + EPOCH) == pytest.approx(local(t), rel=1e-9, abs=1e-9)
        assert shifted.derivative(t + EPOCH) == pytest.approx(
            local.derivative(t), rel=1e-9, abs=1e-9
        )
    for a, b in itertools.combinations(LOCAL_POINTS, 2):
        expected = local.integral(a, b)
        assert shifted.integral(a + EPOCH, b + EPOCH) == pytest.approx(
            expected, rel=1e-9, abs=1e-9
        )
        assert cached.integral(a + EPOCH, b + EPOCH) == pytest.approx(
            expected, rel=1e-9, abs=1e-9
        )


@pytest.mark.parametrize("mode", ["forward", "backward"])
def test_quadratic_integral_on_large_knots(mode: str) -> None:
    A = build("quadratic", {"mode": mode})
    B = build("quadratic", {"mode": mode}, offset=1e6)

    assert B.integral(1e6 + 1.0, 1e6 + 5.0) == pytest.approx(A.integral(1.0, 5.0), rel=1e-12)
    assert B.integral(1e6 + 2.0, 1e6 + 2.5) == pytest.approx(A.integral(2.0, 2.5), rel=1e-12)
