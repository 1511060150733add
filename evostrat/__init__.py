"""
Evolution strategy optimizers
"""

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.algorithms.cmaes.cmaes_optimizer import CMAESOptimizer
from evostrat.algorithms.cmaes.config import CMAESConfig
from evostrat.core.algorithm_factory import AlgorithmFactory
from evostrat.core.base_optimizer import BaseOptimizer, OptimizationResult
from evostrat.core.config_base import BaseConfig
from evostrat.core.errors import InvalidConfiguration
from evostrat.core.objective import ObjectiveFunction


def _register_algorithms():
    """Register all available algorithms with the factory."""
    AlgorithmFactory.register_algorithm(
        AlgorithmChoice.CMAES, CMAESOptimizer, CMAESConfig
    )


_register_algorithms()

__all__ = [
    "AlgorithmChoice",
    "AlgorithmFactory",
    "BaseOptimizer",
    "OptimizationResult",
    "BaseConfig",
    "CMAESConfig",
    "CMAESOptimizer",
    "InvalidConfiguration",
    "ObjectiveFunction",
]
