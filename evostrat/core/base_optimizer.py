from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar
import logging

import numpy as np
from numpy.typing import NDArray

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.core.config_base import BaseConfig
from evostrat.core.objective import ObjectiveFunction
from evostrat.logging.base_logger import BaseLogData, BaseLogger
from evostrat.logging.logger_factory import LoggerFactory

logger = logging.getLogger(__name__)

LogT = TypeVar("LogT", bound=BaseLogData)
ConfigT = TypeVar("ConfigT", bound=BaseConfig)


@dataclass
class OptimizationResult(Generic[LogT]):
    """Outcome of an optimization run."""

    best_solution: NDArray[np.float64]
    best_fitness: float
    evaluations: int
    iterations: int
    message: str
    converged: bool
    diagnostic: LogT
    algorithm: AlgorithmChoice


class BaseOptimizer(ABC, Generic[LogT, ConfigT]):
    """
    Iterative optimizer driving one strategy.

    A strategy supplies `create_state` and `advance_generation`; this class owns
    the population buffer, the iteration budget, convergence checks and the
    best solution found over the whole run.
    """

    def __init__(
        self,
        func: Callable[[NDArray[np.float64]], float] | ObjectiveFunction,
        initial_point: NDArray[np.float64],
        config: ConfigT,
        algorithm: AlgorithmChoice,
    ) -> None:
        self.objective = (
            func if isinstance(func, ObjectiveFunction) else ObjectiveFunction(func)
        )
        self.initial_point = np.array(initial_point, dtype=np.float64)
        self.dimensions = len(self.initial_point)
        self.config = config
        self.algorithm = algorithm
        self.logger: BaseLogger[LogT] = LoggerFactory.create_logger(algorithm, config)

    @property
    def evaluations(self) -> int:
        return self.objective.evaluations

    @property
    @abstractmethod
    def population_size(self) -> int:
        """Number of individuals in the population buffer."""

    @classmethod
    @abstractmethod
    def default_options(cls) -> dict[str, Any]:
        """Driver options used when the configuration leaves them unset."""

    @abstractmethod
    def create_state(
        self, objective: ObjectiveFunction, population: list[NDArray[np.float64]]
    ) -> Any:
        """Build the strategy state from the initial population."""

    @abstractmethod
    def advance_generation(
        self,
        objective: ObjectiveFunction,
        state: Any,
        population: list[NDArray[np.float64]],
    ) -> bool:
        """Run one generation in place, returning True if the run must stop."""

    def log_generation(
        self,
        iteration: int,
        state: Any,
        population: list[NDArray[np.float64]],
        best_fitness: float,
        best_solution: NDArray[np.float64],
    ) -> None:
        self.logger.log_iteration(
            iteration=iteration,
            evaluations=self.evaluations,
            best_fitness=best_fitness,
            best_solution=best_solution,
        )

    def initial_population(self) -> list[NDArray[np.float64]]:
        return [self.initial_point.copy() for _ in range(self.population_size)]

    def resolve_options(self) -> dict[str, Any]:
        options = dict(self.default_options())
        if self.config.iterations is not None:
            options["iterations"] = self.config.iterations
        if self.config.abstol is not None:
            options["abstol"] = self.config.abstol
        options["successive_f_tol"] = self.config.successive_f_tol
        return options

    def optimize(self) -> OptimizationResult[LogT]:
        """Run generations until convergence, budget exhaustion or numeric failure."""
        options = self.resolve_options()
        iterations = options["iterations"]
        abstol = options["abstol"]
        successive_f_tol = options["successive_f_tol"]

        population = self.initial_population()
        state = self.create_state(self.objective, population)

        best_fitness = float("inf")
        best_solution = self.initial_point.copy()
        previous_value = float("inf")
        within_tol = 0
        converged = False
        message = None
        iteration = 0

        while iteration < iterations:
            iteration += 1

            if self.advance_generation(self.objective, state, population):
                message = "Covariance matrix is not positive definite."
                logger.warning(
                    "%s stopped at generation %d: %s",
                    self.algorithm.value,
                    iteration,
                    message,
                )
                break

            current_value = state.value
            if current_value < best_fitness:
                best_fitness = float(current_value)
                best_solution = np.array(state.minimizer, copy=True)

            self.log_generation(
                iteration, state, population, best_fitness, best_solution
            )

            if abs(current_value - previous_value) <= abstol:
                within_tol += 1
            else:
                within_tol = 0
            previous_value = current_value

            if within_tol >= successive_f_tol:
                converged = True
                message = "Fitness change below absolute tolerance."
                break

        if message is None:
            message = "Maximum number of iterations reached."

        logger.info(
            "%s finished after %d generations (%d evaluations): %s",
            self.algorithm.value,
            iteration,
            self.evaluations,
            message,
        )

        return OptimizationResult(
            best_solution=best_solution,
            best_fitness=best_fitness,
            evaluations=self.evaluations,
            iterations=iteration,
            message=message,
            converged=converged,
            diagnostic=self.get_logs(),
            algorithm=self.algorithm,
        )

    def get_logs(self) -> LogT:
        return self.logger.get_logs()
