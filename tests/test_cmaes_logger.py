"""Tests for the CMA-ES diagnostic logger."""

import numpy as np

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.algorithms.cmaes.config import CMAESConfig
from evostrat.logging.cmaes_logger import CMAESLogData, CMAESLogger
from evostrat.logging.logger_factory import LoggerFactory


class TestCMAESLogger:
    def test_factory_creates_cmaes_logger(self):
        logger = LoggerFactory.create_logger(AlgorithmChoice.CMAES, CMAESConfig())
        assert isinstance(logger, CMAESLogger)
        assert isinstance(logger.get_logs(), CMAESLogData)

    def test_fitness_statistics_ignore_infinite_entries(self):
        logger = CMAESLogger(CMAESConfig(mu=3, lambda_=5))
        logger.log_iteration(
            iteration=1,
            evaluations=5,
            fitness=np.array([1.0, 3.0, np.inf]),
            best_fitness=1.0,
        )
        logs = logger.get_logs()

        assert logs.worst_fitness == [3.0]
        assert logs.mean_fitness == [2.0]
        assert logs.median_fitness == [2.0]
        assert logs.std_fitness == [1.0]

    def test_covariance_properties(self):
        config = CMAESConfig().with_all_diagnostics()
        logger = CMAESLogger(config)
        C = np.diag([4.0, 1.0])
        logger.log_iteration(
            iteration=1,
            evaluations=2,
            sigma=0.5,
            covariance_matrix=C,
            s=np.array([3.0, 4.0]),
            s_sigma=np.array([0.0, 2.0]),
            parent=np.array([1.0, 0.0]),
        )
        logs = logger.get_logs()

        np.testing.assert_allclose(logs.eigenvalues[0], [1.0, 4.0])
        assert logs.condition_number == [4.0]
        assert logs.covariance_determinant[0] == np.float64(4.0)
        np.testing.assert_allclose(logs.coordinate_std[0], [1.0, 0.5])
        assert logs.sigma == [0.5]
        assert logs.s_norm == [5.0]
        assert logs.s_sigma_norm == [2.0]
        assert logs.parent_norm == [1.0]

    def test_clear_and_to_dict(self):
        logger = CMAESLogger(CMAESConfig(diag_sigma=True))
        logger.log_iteration(iteration=1, evaluations=2, sigma=0.3, best_fitness=1.0)

        as_dict = logger.get_logs().to_dict()
        assert as_dict["sigma"] == [0.3]
        assert as_dict["best_fitness"] == [1.0]

        logger.clear()
        assert logger.get_logs().iteration == []
        assert logger.get_logs().sigma == []
