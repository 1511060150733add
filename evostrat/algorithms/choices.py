from enum import Enum


class AlgorithmChoice(Enum):
    """Strategies known to the optimizer framework."""

    CMAES = "CMA-ES"
