from dataclasses import dataclass, field

import numpy as np
from numpy.typing import NDArray


@dataclass
class CMAESState:
    """
    Evolving search distribution of a CMA-ES run.

    Created once per run and mutated in place every generation.
    """

    N: int
    """Problem dimension"""

    tau: float
    """Resolved time constant of the direction path"""

    tau_c: float
    """Resolved time constant of the covariance matrix"""

    tau_sigma: float
    """Resolved time constant of the global step size"""

    fitpop: NDArray[np.float64]
    """Fitness of the current parents, best first"""

    C: NDArray[np.float64]
    """Covariance shape matrix"""

    s: NDArray[np.float64]
    """Evolution path for covariance adaptation"""

    s_sigma: NDArray[np.float64]
    """Evolution path for step-size control"""

    sigma: float
    """Global step size"""

    parent: NDArray[np.float64]
    """Mean of the search distribution"""

    fittest: NDArray[np.float64]
    """Best individual of the current parent population"""

    rng: np.random.Generator = field(default_factory=np.random.default_rng)
    """Random source for offspring sampling"""

    @property
    def value(self) -> float:
        return float(self.fitpop[0])

    @property
    def minimizer(self) -> NDArray[np.float64]:
        return self.fittest
