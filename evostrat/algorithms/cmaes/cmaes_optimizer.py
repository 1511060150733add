from typing import Any, Callable, final, TYPE_CHECKING
import numpy as np

from numpy.typing import NDArray

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.algorithms.cmaes.config import CMAESConfig
from evostrat.algorithms.cmaes.state import CMAESState
from evostrat.algorithms.cmaes import strategy

from evostrat.core.base_optimizer import BaseOptimizer
from evostrat.core.objective import ObjectiveFunction

if TYPE_CHECKING:
    from evostrat.logging.cmaes_logger import CMAESLogData


@final
class CMAESOptimizer(BaseOptimizer["CMAESLogData", CMAESConfig]):
    """(mu/mu_I, lambda)-CMA-ES optimizer with per-generation diagnostics."""

    def __init__(
        self,
        func: Callable[[NDArray[np.float64]], float] | ObjectiveFunction,
        initial_point: NDArray[np.float64],
        config: CMAESConfig | None = None,
    ) -> None:
        if config is None:
            config = CMAESConfig()

        super().__init__(
            func=func,
            initial_point=initial_point,
            config=config,
            algorithm=AlgorithmChoice.CMAES,
        )

    @property
    def population_size(self) -> int:
        return self.config.population_size

    @classmethod
    def default_options(cls) -> dict[str, Any]:
        return CMAESConfig.default_options()

    def create_state(
        self, objective: ObjectiveFunction, population: list[NDArray[np.float64]]
    ) -> CMAESState:
        return strategy.create_state(self.config, objective, population)

    def advance_generation(
        self,
        objective: ObjectiveFunction,
        state: CMAESState,
        population: list[NDArray[np.float64]],
    ) -> bool:
        return strategy.advance_generation(objective, state, population, self.config)

    def log_generation(
        self,
        iteration: int,
        state: CMAESState,
        population: list[NDArray[np.float64]],
        best_fitness: float,
        best_solution: NDArray[np.float64],
    ) -> None:
        self.logger.log_iteration(
            iteration=iteration,
            evaluations=self.evaluations,
            sigma=state.sigma,
            fitness=state.fitpop,
            population=np.array(population[: self.config.mu]),
            best_fitness=best_fitness,
            best_solution=best_solution,
            s=state.s,
            s_sigma=state.s_sigma,
            parent=state.parent,
            covariance_matrix=state.C,
        )
