"""Tests for algorithm registration and lookup."""

import numpy as np
import pytest

from evostrat import AlgorithmChoice, AlgorithmFactory, CMAESConfig, CMAESOptimizer


class TestAlgorithmFactory:
    def test_cmaes_is_registered(self):
        assert AlgorithmChoice.CMAES in AlgorithmFactory.get_available_algorithms()

    def test_create_config(self):
        config = AlgorithmFactory.create_config(AlgorithmChoice.CMAES, mu=2, lambda_=5)
        assert isinstance(config, CMAESConfig)
        assert config.mu == 2 and config.lambda_ == 5

    def test_create_optimizer_with_default_config(self):
        optimizer = AlgorithmFactory.create_optimizer(
            AlgorithmChoice.CMAES, lambda x: float(np.sum(x**2)), np.ones(2)
        )
        assert isinstance(optimizer, CMAESOptimizer)
        assert isinstance(optimizer.config, CMAESConfig)

    def test_unknown_algorithm(self, monkeypatch):
        monkeypatch.setattr(AlgorithmFactory, "_algorithms", {})
        monkeypatch.setattr(AlgorithmFactory, "_configs", {})
        with pytest.raises(ValueError):
            AlgorithmFactory.create_optimizer(
                AlgorithmChoice.CMAES, lambda x: 0.0, np.ones(2)
            )
        with pytest.raises(ValueError):
            AlgorithmFactory.create_config(AlgorithmChoice.CMAES)
