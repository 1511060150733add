from typing import Type
from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.core.config_base import BaseConfig
from evostrat.logging.base_logger import BaseLogger
from evostrat.logging.cmaes_logger import CMAESLogger


class LoggerFactory:
    """Factory for creating algorithm-specific loggers."""

    _loggers: dict[AlgorithmChoice, Type[BaseLogger]] = {}

    @classmethod
    def register_logger(
        cls, algorithm: AlgorithmChoice, logger_class: Type[BaseLogger]
    ):
        """Register a logger for an algorithm."""
        cls._loggers[algorithm] = logger_class

    @classmethod
    def create_logger(cls, algorithm: AlgorithmChoice, config: BaseConfig) -> BaseLogger:
        """Create a logger for the specified algorithm."""
        if algorithm not in cls._loggers:
            raise NotImplementedError(f"No logger registered for {algorithm.value}")
        return cls._loggers[algorithm](config)


LoggerFactory.register_logger(AlgorithmChoice.CMAES, CMAESLogger)
