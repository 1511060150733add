import logging
import matplotlib.pyplot as plt
from pathlib import Path

from evostrat import AlgorithmFactory

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.algorithms.cmaes.config import CMAESConfig
from evostrat.utils.benchmark_functions import Rosenbrock
from evostrat.utils.initial_point_generator import (
    InitialPointGenerator,
    InitialPointGeneratorType,
)
from evostrat.plotting.multi_algorithm_plotter import MultiAlgorithmPlotter

plt.ioff()
plt.switch_backend("Agg")


def run_optimization_example():
    """Run CMA-ES on the Rosenbrock function and save diagnostic plots."""

    dimensions = 5

    opt_func = Rosenbrock(dimensions=dimensions)
    lower_bounds, upper_bounds = opt_func.bounds

    initial_point_generator = InitialPointGenerator(
        strategy=InitialPointGeneratorType.UNIFORM,
        dimensions=dimensions,
        lower_bounds=lower_bounds,
        upper_bounds=upper_bounds,
        seed=7,
    )

    initial_point = initial_point_generator.generate()

    config = AlgorithmFactory.create_config(
        AlgorithmChoice.CMAES, mu=3, lambda_=12, seed=7, iterations=3000
    )
    assert isinstance(config, CMAESConfig)
    config = config.with_all_diagnostics()

    print(f"Starting {AlgorithmChoice.CMAES.value} optimization...")
    print(f"Dimensions: {dimensions}")
    print(f"Initial point value: {opt_func(initial_point):.20f}")
    print(f"Configuration: {config}")

    optimizer = AlgorithmFactory.create_optimizer(
        algorithm=AlgorithmChoice.CMAES,
        func=opt_func,
        initial_point=initial_point,
        config=config,
    )

    result = optimizer.optimize()

    print("\nOptimization completed:")
    print(f"Best fitness: {result.best_fitness:.20f}")
    print(f"Function evaluations: {result.evaluations}")
    print(f"Generations: {result.iterations}")
    print(f"Message: {result.message}")

    output_dir = Path("plots")
    output_dir.mkdir(exist_ok=True)
    print(f"\nSaving plots to: {output_dir.absolute()}")

    plotter = MultiAlgorithmPlotter()

    metrics_path = output_dir / "cmaes_metrics.png"
    _ = plotter.plot_algorithm_specific_metrics(result, save_path=metrics_path)
    print(f"Saved metrics plot to: {metrics_path}")

    convergence_path = output_dir / "convergence.png"
    _ = plotter.plot_convergence_comparison(
        {"CMA-ES": result},
        save_path=convergence_path,
        title="CMA-ES Convergence on Rosenbrock Function",
    )
    print(f"Saved convergence plot to: {convergence_path}")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    run_optimization_example()
