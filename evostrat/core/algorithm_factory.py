from typing import Callable, Type, overload, Literal
import numpy as np
from numpy.typing import NDArray

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.core.base_optimizer import BaseOptimizer
from evostrat.core.config_base import BaseConfig
from evostrat.core.objective import ObjectiveFunction

from evostrat.algorithms.cmaes.cmaes_optimizer import CMAESOptimizer
from evostrat.algorithms.cmaes.config import CMAESConfig


class AlgorithmFactory:
    """Factory for creating optimization algorithm instances."""

    _algorithms: dict[AlgorithmChoice, Type[BaseOptimizer]] = {}
    _configs: dict[AlgorithmChoice, Type[BaseConfig]] = {}

    @classmethod
    def register_algorithm(
        cls,
        name: AlgorithmChoice,
        optimizer_class: Type[BaseOptimizer],
        config_class: Type[BaseConfig],
    ) -> None:
        """Register a new optimization algorithm."""
        cls._algorithms[name] = optimizer_class
        cls._configs[name] = config_class

    @overload
    @classmethod
    def create_optimizer(
        cls,
        algorithm: Literal[AlgorithmChoice.CMAES],
        func: Callable[[NDArray[np.float64]], float] | ObjectiveFunction,
        initial_point: NDArray[np.float64],
        config: "CMAESConfig | None" = None,
        **kwargs,
    ) -> CMAESOptimizer: ...

    # Generic fallback
    @overload
    @classmethod
    def create_optimizer(
        cls,
        algorithm: AlgorithmChoice,
        func: Callable[[NDArray[np.float64]], float] | ObjectiveFunction,
        initial_point: NDArray[np.float64],
        config: BaseConfig | None = None,
        **kwargs,
    ) -> BaseOptimizer: ...

    @classmethod
    def create_optimizer(
        cls,
        algorithm: AlgorithmChoice,
        func: Callable[[NDArray[np.float64]], float] | ObjectiveFunction,
        initial_point: NDArray[np.float64],
        config: BaseConfig | None = None,
        **kwargs,
    ) -> BaseOptimizer:
        """Create an optimizer instance with proper typing."""
        if algorithm not in cls._algorithms:
            available = ", ".join(str(k) for k in cls._algorithms.keys())
            raise ValueError(f"Unknown algorithm '{algorithm}'. Available: {available}")

        optimizer_class = cls._algorithms[algorithm]

        if config is None:
            config = cls._configs[algorithm]()

        return optimizer_class(
            func=func,
            initial_point=initial_point,
            config=config,
            **kwargs,
        )

    @classmethod
    def get_available_algorithms(cls) -> list[AlgorithmChoice]:
        """Get list of available algorithm names."""
        return list(cls._algorithms.keys())

    @classmethod
    def create_config(cls, algorithm: AlgorithmChoice, **kwargs) -> BaseConfig:
        """Create a configuration object for the specified algorithm."""
        if algorithm not in cls._configs:
            available = ", ".join(str(k) for k in cls._configs.keys())
            raise ValueError(f"Unknown algorithm '{algorithm}'. Available: {available}")

        config_class = cls._configs[algorithm]
        return config_class(**kwargs)
