from __future__ import annotations

import logging
from concurrent.futures import ThreadPoolExecutor

import numpy as np
import pytest

import pwinterp
from conftest import T, U, build
from pwinterp import ConstructionError, Interpolation, interpolators


def test_handle_is_read_only() -> None:
    A = build("cubic_spline", cache_parameters=True)

    with pytest.raises(AttributeError):
        A.u = np.zeros(5)
    with pytest.raises(AttributeError):
        del A.t
    with pytest.raises(ValueError):
        A.u[0] = 10.0
    with pytest.raises(ValueError):
        A.I[1] = 0.0
    with pytest.raises(ValueError):
        A.p.c1[0] = 0.0
    with pytest.raises(TypeError):
        A.options["extra"] = 1  # type: ignore[index]


def test_inputs_are_copied() -> None:
    u = np.array(U)
    A = Interpolation("linear", T, u)
    u[1] = 100.0

    assert A(2.0) == 5.0


def test_no_cache_by_default() -> None:
    A = build("akima")

    assert A.cache_parameters is False
    assert A.p is None
    assert A.I is None


def test_repr_names_variant_and_domain() -> None:
    text = repr(build("akima", extrapolation_up="linear"))

    assert text.startswith("Interpolation('akima', n=5, domain=[1, 5]")
    assert "extrapolation_down='none'" in text
    assert "extrapolation_up='linear'" in text


def test_variant_record_can_be_passed_directly() -> None:
    A = Interpolation(interpolators.get("linear"), T, U)

    assert A(1.5) == pytest.approx(3.0)


def test_functional_api_matches_methods() -> None:
    A = build("cubic_spline", extrapolation="linear")

    assert pwinterp.value(A, 2.5) == A(2.5)
    assert pwinterp.derivative(A, 2.5) == A.derivative(2.5)
    assert pwinterp.derivative(A, 2.5, 2) == A.derivative(2.5, 2)
    assert pwinterp.integral(A, 0.0, 6.0) == A.integral(0.0, 6.0)
    assert pwinterp.integral(A, 3.0) == A.integral(1.0, 3.0)


def test_construction_is_logged(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="pwinterp"):
        build("quadratic_spline", cache_parameters=True)

    messages = [r.getMessage() for r in caplog.records]
    assert any("built quadratic_spline interpolation: n=5" in m for m in messages)
    assert any("cumulative integral cached for 4 segments" in m for m in messages)


def test_concurrent_reads_agree() -> None:
    A = build("cubic_spline", extrapolation="extension", cache_parameters=True)
    grid = np.linspace(0.0, 6.0, 241)
    expected = [A(x) for x in grid]

    def work(_):
        return [A(x) for x in grid], A.integral(0.0, 6.0)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(work, range(16)))

    for values, total in results:
        assert values == expected
        assert total == A.integral(0.0, 6.0)


# --------------------------------------------------------------------------- #
# Registry
# --------------------------------------------------------------------------- #


def test_registry_lists_every_variant() -> None:
    assert set(pwinterp.available) == {
        "constant",
        "linear",
        "quadratic",
        "quadratic_spline",
        "cubic_spline",
        "cubic_hermite",
        "quintic_hermite",
        "akima",
        "lagrange",
        "bspline",
    }
    assert not pwinterp.available["lagrange"].has_integral
    assert pwinterp.available["akima"].has_integral


def test_registry_lookup_is_case_insensitive() -> None:
    assert interpolators.get(" Cubic_Spline ") is interpolators.get("cubic_spline")


def test_registry_rejects_unknown_and_duplicate_tags() -> None:
    with pytest.raises(ConstructionError, match="Available"):
        interpolators.get("monotone")
    with pytest.raises(ValueError):
        interpolators.register("linear", interpolators.get("linear"))
    with pytest.raises(TypeError):
        pwinterp.available["linear"] = None  # type: ignore[index]
