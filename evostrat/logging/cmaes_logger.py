from typing import Any
import numpy as np
from numpy.typing import NDArray
from dataclasses import dataclass, field

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.logging.base_logger import BaseLogger, BaseLogData
from evostrat.algorithms.cmaes.config import CMAESConfig


@dataclass
class CMAESLogData(BaseLogData):
    """CMA-ES-specific log data container."""

    median_fitness: list[float] = field(default_factory=list)
    """Median fitness of the parent population"""

    # Step-size and adaptation
    sigma: list[float] = field(default_factory=list)
    """Step size values"""

    # Evolution paths
    s_norm: list[float] = field(default_factory=list)
    """Norm of the direction path driving the covariance update"""

    s_sigma_norm: list[float] = field(default_factory=list)
    """Norm of the step-size path"""

    # Distribution mean
    parent: list[NDArray[np.float64]] = field(default_factory=list)
    """Mean of the search distribution"""

    parent_norm: list[float] = field(default_factory=list)
    """Norm of the distribution mean"""

    # Covariance matrix properties
    covariance_determinant: list[float] = field(default_factory=list)
    """Determinant of covariance matrix"""

    max_eigenvalue: list[float] = field(default_factory=list)
    min_eigenvalue: list[float] = field(default_factory=list)

    coordinate_std: list[NDArray[np.float64]] = field(default_factory=list)
    """Standard deviation in each coordinate, sigma * sqrt(diag(C))"""

    def clear(self) -> None:
        """Reset all log data including CMA-ES-specific."""
        self.clear_common()
        self.median_fitness.clear()
        self.sigma.clear()
        self.s_norm.clear()
        self.s_sigma_norm.clear()
        self.parent.clear()
        self.parent_norm.clear()
        self.covariance_determinant.clear()
        self.max_eigenvalue.clear()
        self.min_eigenvalue.clear()
        self.coordinate_std.clear()

    def to_dict(self) -> dict[str, list[Any]]:
        """Convert all log data to dictionary format."""
        result = self.to_dict_common()
        result.update(
            {
                "median_fitness": self.median_fitness,
                "sigma": self.sigma,
                "s_norm": self.s_norm,
                "s_sigma_norm": self.s_sigma_norm,
                "parent": self.parent,
                "parent_norm": self.parent_norm,
                "covariance_determinant": self.covariance_determinant,
                "max_eigenvalue": self.max_eigenvalue,
                "min_eigenvalue": self.min_eigenvalue,
                "coordinate_std": self.coordinate_std,
            }
        )
        return result


class CMAESLogger(BaseLogger[CMAESLogData]):
    """Logger for CMA-ES algorithm with proper typing."""

    def __init__(self, config: CMAESConfig):
        super().__init__(config, AlgorithmChoice.CMAES)

    def _create_log_data(self) -> CMAESLogData:
        return CMAESLogData()

    def log_iteration(
        self,
        iteration: int,
        evaluations: int,
        sigma: float = 1.0,
        fitness: NDArray[np.float64] | None = None,
        population: NDArray[np.float64] | None = None,
        best_fitness: float = float("inf"),
        best_solution: NDArray[np.float64] | None = None,
        s: NDArray[np.float64] | None = None,
        s_sigma: NDArray[np.float64] | None = None,
        parent: NDArray[np.float64] | None = None,
        covariance_matrix: NDArray[np.float64] | None = None,
        **kwargs,
    ) -> None:
        """Log CMA-ES generation data."""

        self.logs.iteration.append(iteration)
        self.logs.evaluations.append(evaluations)
        self.logs.best_fitness.append(best_fitness)

        if fitness is not None and len(fitness) > 0:
            finite = fitness[np.isfinite(fitness)]
            if finite.size > 0:
                self.logs.worst_fitness.append(float(np.max(finite)))
                self.logs.mean_fitness.append(float(np.mean(finite)))
                self.logs.median_fitness.append(float(np.median(finite)))
                self.logs.std_fitness.append(float(np.std(finite)))
            else:
                self.logs.worst_fitness.append(float("inf"))
                self.logs.mean_fitness.append(float("inf"))
                self.logs.median_fitness.append(float("inf"))
                self.logs.std_fitness.append(0.0)

        if population is not None and self.config.diag_pop:
            self.logs.population.append(np.array(population, copy=True))

        if best_solution is not None:
            self.logs.best_solution.append(best_solution.copy())

        if self.config.diag_sigma:
            self.logs.sigma.append(sigma)

        if s is not None:
            self.logs.s_norm.append(float(np.linalg.norm(s)))

        if s_sigma is not None:
            self.logs.s_sigma_norm.append(float(np.linalg.norm(s_sigma)))

        if parent is not None:
            self.logs.parent.append(parent.copy())
            self.logs.parent_norm.append(float(np.linalg.norm(parent)))

        if covariance_matrix is not None and self.config.diag_eigen:
            eigenvalues = np.sort(np.linalg.eigvalsh(covariance_matrix))
            self.logs.eigenvalues.append(eigenvalues)
            self.logs.max_eigenvalue.append(float(eigenvalues[-1]))
            self.logs.min_eigenvalue.append(float(eigenvalues[0]))
            self.logs.condition_number.append(
                float(eigenvalues[-1] / max(1e-300, eigenvalues[0]))
            )
            self.logs.covariance_determinant.append(
                float(np.linalg.det(covariance_matrix))
            )
            self.logs.coordinate_std.append(
                sigma * np.sqrt(np.abs(np.diag(covariance_matrix)))
            )
