"""CMA-ES (Covariance Matrix Adaptation Evolution Strategy) algorithm module."""

from evostrat.algorithms.cmaes.config import CMAESConfig
from evostrat.algorithms.cmaes.state import CMAESState
from evostrat.algorithms.cmaes.strategy import advance_generation, create_state

__all__ = [
    "CMAESConfig",
    "CMAESState",
    "advance_generation",
    "create_state",
]
