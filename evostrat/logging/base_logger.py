from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Generic, TypeVar

import numpy as np
from numpy.typing import NDArray

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.core.config_base import BaseConfig


@dataclass
class BaseLogData:
    """Per-generation diagnostics shared by all strategies."""

    iteration: list[int] = field(default_factory=list)
    """Generation number"""

    evaluations: list[int] = field(default_factory=list)
    """Function evaluations used so far"""

    best_fitness: list[float] = field(default_factory=list)
    """Best fitness found so far"""

    worst_fitness: list[float] = field(default_factory=list)
    """Worst fitness of the parent population"""

    mean_fitness: list[float] = field(default_factory=list)
    """Mean fitness of the parent population"""

    std_fitness: list[float] = field(default_factory=list)
    """Standard deviation of the parent fitness"""

    population: list[NDArray[np.float64]] = field(default_factory=list)
    best_solution: list[NDArray[np.float64]] = field(default_factory=list)
    eigenvalues: list[NDArray[np.float64]] = field(default_factory=list)
    condition_number: list[float] = field(default_factory=list)

    def clear_common(self) -> None:
        self.iteration.clear()
        self.evaluations.clear()
        self.best_fitness.clear()
        self.worst_fitness.clear()
        self.mean_fitness.clear()
        self.std_fitness.clear()
        self.population.clear()
        self.best_solution.clear()
        self.eigenvalues.clear()
        self.condition_number.clear()

    def to_dict_common(self) -> dict[str, list[Any]]:
        return {
            "iteration": self.iteration,
            "evaluations": self.evaluations,
            "best_fitness": self.best_fitness,
            "worst_fitness": self.worst_fitness,
            "mean_fitness": self.mean_fitness,
            "std_fitness": self.std_fitness,
            "population": self.population,
            "best_solution": self.best_solution,
            "eigenvalues": self.eigenvalues,
            "condition_number": self.condition_number,
        }

    def clear(self) -> None:
        self.clear_common()

    def to_dict(self) -> dict[str, list[Any]]:
        return self.to_dict_common()


LogT = TypeVar("LogT", bound=BaseLogData)


class BaseLogger(ABC, Generic[LogT]):
    """Collects per-generation diagnostics of one optimization run."""

    def __init__(self, config: BaseConfig, algorithm: AlgorithmChoice):
        self.config = config
        self.algorithm = algorithm
        self.logs: LogT = self._create_log_data()

    @abstractmethod
    def _create_log_data(self) -> LogT:
        """Create the algorithm-specific log data container."""

    @abstractmethod
    def log_iteration(self, iteration: int, evaluations: int, **kwargs) -> None:
        """Record one generation."""

    def get_logs(self) -> LogT:
        return self.logs

    def clear(self) -> None:
        self.logs.clear()
