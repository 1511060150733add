"""
Benchmark objectives for exercising the optimizers, all minimized.
"""

import numpy as np
from numpy.typing import NDArray

from opfunu.cec_based import cec2017

from evostrat.core.objective import ObjectiveFunction


class BenchmarkFunction(ObjectiveFunction):
    """Objective with known search bounds and global minimum."""

    def __init__(self, dimensions: int):
        """
        Args:
            dimensions: Number of dimensions for the function
        """
        super().__init__()
        self.dimensions = dimensions

    @property
    def bounds(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        """Tuple of (lower_bounds, upper_bounds)."""
        raise NotImplementedError("Subclasses must implement this method")

    @property
    def global_minimum(self) -> tuple[NDArray[np.float64], float]:
        """Tuple of (optimal_solution, optimal_value)."""
        raise NotImplementedError("Subclasses must implement this method")


class Sphere(BenchmarkFunction):
    """
    f(x) = sum(x_i^2)
    Global minimum: f(0, ..., 0) = 0
    """

    def _evaluate(self, x: NDArray[np.float64]) -> float:
        return float(np.sum(x**2))

    @property
    def bounds(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        return -100.0 * np.ones(self.dimensions), 100.0 * np.ones(self.dimensions)

    @property
    def global_minimum(self) -> tuple[NDArray[np.float64], float]:
        return np.zeros(self.dimensions), 0.0


class Rosenbrock(BenchmarkFunction):
    """
    f(x) = sum(100 * (x_{i+1} - x_i^2)^2 + (1 - x_i)^2)
    Global minimum: f(1, ..., 1) = 0
    """

    def _evaluate(self, x: NDArray[np.float64]) -> float:
        return float(np.sum(100.0 * (x[1:] - x[:-1] ** 2) ** 2 + (1 - x[:-1]) ** 2))

    @property
    def bounds(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        return -5.0 * np.ones(self.dimensions), 10.0 * np.ones(self.dimensions)

    @property
    def global_minimum(self) -> tuple[NDArray[np.float64], float]:
        return np.ones(self.dimensions), 0.0


class Rastrigin(BenchmarkFunction):
    """
    f(x) = 10*d + sum(x_i^2 - 10*cos(2*pi*x_i))
    Global minimum: f(0, ..., 0) = 0
    """

    def _evaluate(self, x: NDArray[np.float64]) -> float:
        return float(10 * self.dimensions + np.sum(x**2 - 10 * np.cos(2 * np.pi * x)))

    @property
    def bounds(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        return -5.12 * np.ones(self.dimensions), 5.12 * np.ones(self.dimensions)

    @property
    def global_minimum(self) -> tuple[NDArray[np.float64], float]:
        return np.zeros(self.dimensions), 0.0


class Ackley(BenchmarkFunction):
    """
    f(x) = -20*exp(-0.2*sqrt(mean(x_i^2))) - exp(mean(cos(2*pi*x_i))) + 20 + e
    Global minimum: f(0, ..., 0) = 0
    """

    def _evaluate(self, x: NDArray[np.float64]) -> float:
        term1 = -20.0 * np.exp(-0.2 * np.sqrt(np.mean(x**2)))
        term2 = -np.exp(np.mean(np.cos(2 * np.pi * x)))
        return float(term1 + term2 + 20.0 + np.e)

    @property
    def bounds(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        return -32.768 * np.ones(self.dimensions), 32.768 * np.ones(self.dimensions)

    @property
    def global_minimum(self) -> tuple[NDArray[np.float64], float]:
        return np.zeros(self.dimensions), 0.0


class Schwefel(BenchmarkFunction):
    """
    f(x) = 418.9829*d - sum(x_i * sin(sqrt(abs(x_i))))
    Global minimum: f(420.9687, ..., 420.9687) = 0
    """

    def _evaluate(self, x: NDArray[np.float64]) -> float:
        return float(418.9829 * self.dimensions - np.sum(x * np.sin(np.sqrt(np.abs(x)))))

    @property
    def bounds(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        return -500.0 * np.ones(self.dimensions), 500.0 * np.ones(self.dimensions)

    @property
    def global_minimum(self) -> tuple[NDArray[np.float64], float]:
        return 420.9687 * np.ones(self.dimensions), 0.0


class CEC17Function(BenchmarkFunction):
    """Function from the CEC 2017 suite, provided by opfunu."""

    def __init__(self, dimensions: int, function_id: int):
        """
        Args:
            dimensions: Number of dimensions for the function
            function_id: ID of the CEC function to use (1-30)
        """
        super().__init__(dimensions)

        if function_id < 1 or function_id > 30:
            raise ValueError("Function ID must be between 1 and 30.")

        self.function_id = function_id

        fname = f"F{function_id}2017"
        self.func = getattr(cec2017, fname)(ndim=dimensions)

    def _evaluate(self, x: NDArray[np.float64]) -> float:
        return float(self.func.evaluate(x))

    @property
    def bounds(self) -> tuple[NDArray[np.float64], NDArray[np.float64]]:
        return self.func.lb, self.func.ub

    @property
    def global_minimum(self) -> tuple[NDArray[np.float64], float]:
        return self.func.x_global, self.func.f_global
