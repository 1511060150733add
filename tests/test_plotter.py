"""Smoke tests for the diagnostic plots."""

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import numpy as np
import pytest
from matplotlib.figure import Figure

from evostrat import AlgorithmChoice, CMAESConfig, CMAESOptimizer, OptimizationResult
from evostrat.logging.base_logger import BaseLogData
from evostrat.plotting.multi_algorithm_plotter import MultiAlgorithmPlotter


@pytest.fixture(scope="module")
def results():
    runs = {}
    for label, seed in (("run_a", 1), ("run_b", 2)):
        config = CMAESConfig(mu=2, lambda_=6, seed=seed, iterations=30).with_all_diagnostics()
        runs[label] = CMAESOptimizer(
            lambda x: float(np.sum(x**2)), np.ones(3), config
        ).optimize()
    return runs


@pytest.fixture(autouse=True)
def close_figures():
    yield
    plt.close("all")


class TestMultiAlgorithmPlotter:
    def test_convergence_comparison(self, results, tmp_path):
        path = tmp_path / "convergence.png"
        fig = MultiAlgorithmPlotter().plot_convergence_comparison(results, save_path=path)
        assert isinstance(fig, Figure)
        assert path.exists()

    def test_cmaes_metrics(self, results):
        fig = MultiAlgorithmPlotter().plot_algorithm_specific_metrics(results["run_a"])
        assert isinstance(fig, Figure)

    def test_generic_metrics_for_plain_log_data(self, tmp_path):
        log_data = BaseLogData(
            evaluations=[4, 8, 12],
            best_fitness=[1.0, 0.5, 0.1],
            mean_fitness=[2.0, 1.0, 0.4],
            std_fitness=[0.5, 0.3, 0.1],
        )
        result = OptimizationResult(
            best_solution=np.zeros(2),
            best_fitness=0.1,
            evaluations=12,
            iterations=3,
            message="Maximum number of iterations reached.",
            converged=False,
            diagnostic=log_data,
            algorithm=AlgorithmChoice.CMAES,
        )
        path = tmp_path / "generic.png"

        fig = MultiAlgorithmPlotter().plot_algorithm_specific_metrics(result, save_path=path)
        assert isinstance(fig, Figure)
        assert len(fig.axes) == 2
        assert path.exists()

    def test_parameter_evolution(self, results):
        fig = MultiAlgorithmPlotter().plot_parameter_evolution(results, "sigma")
        assert isinstance(fig, Figure)

    def test_summary_report(self, results, tmp_path):
        figures = MultiAlgorithmPlotter().create_summary_report(results, save_dir=tmp_path)
        assert set(figures) == {"convergence", "run_a_metrics", "run_b_metrics"}
        assert (tmp_path / "run_a_metrics.png").exists()
