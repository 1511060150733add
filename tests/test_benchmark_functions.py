"""Tests for the benchmark objectives."""

import numpy as np
import pytest

from evostrat.utils.benchmark_functions import (
    Ackley,
    CEC17Function,
    Rastrigin,
    Rosenbrock,
    Schwefel,
    Sphere,
)


@pytest.mark.parametrize("cls", [Sphere, Rosenbrock, Rastrigin, Ackley])
def test_value_at_global_minimum(cls):
    func = cls(dimensions=4)
    x_opt, f_opt = func.global_minimum
    assert func(x_opt) == pytest.approx(f_opt, abs=1e-10)


def test_schwefel_near_global_minimum():
    func = Schwefel(dimensions=3)
    x_opt, f_opt = func.global_minimum
    assert func(x_opt) == pytest.approx(f_opt, abs=1e-3)


def test_bounds_shape():
    lower, upper = Rastrigin(dimensions=5).bounds
    assert lower.shape == upper.shape == (5,)
    assert np.all(lower < upper)


def test_evaluations_are_counted():
    func = Sphere(dimensions=2)
    func(np.ones(2))
    func.evaluate(np.zeros(2))
    assert func.evaluations == 2
    func.reset()
    assert func.evaluations == 0


def test_sphere_value():
    assert Sphere(dimensions=3)(np.array([1.0, 2.0, 3.0])) == 14.0


@pytest.mark.parametrize("function_id", [0, 31])
def test_cec17_rejects_unknown_id(function_id):
    with pytest.raises(ValueError):
        CEC17Function(dimensions=10, function_id=function_id)
