import time

import numpy as np
import pandas as pd

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.algorithms.cmaes.config import CMAESConfig
from evostrat.core.algorithm_factory import AlgorithmFactory
from evostrat.utils.benchmark_functions import CEC17Function

import warnings

warnings.filterwarnings("ignore", category=SyntaxWarning, module="opfunu")


def run_cmaes_cec2017():
    """Run repeated CMA-ES runs on a CEC 2017 function and save CSV summaries."""

    function_id = 1
    dimensions = 10
    runs = 10

    print("=== CMA-ES on CEC2017 ===")
    print(f"Function: F{function_id}")
    print(f"Dimensions: {dimensions}")
    print(f"Runs: {runs}")
    print("==========================\n")

    results = []

    for run in range(runs):
        print(f"Run {run+1}/{runs}")

        opt_func = CEC17Function(dimensions=dimensions, function_id=function_id)
        initial_point = np.full(dimensions, 50.0)

        config = CMAESConfig(mu=5, lambda_=20, seed=42 + run, iterations=5000)

        optimizer = AlgorithmFactory.create_optimizer(
            algorithm=AlgorithmChoice.CMAES,
            func=opt_func,
            initial_point=initial_point,
            config=config,
        )

        start_time = time.time()
        result = optimizer.optimize()
        end_time = time.time()

        results.append(
            {
                "run": run + 1,
                "best_fitness": result.best_fitness,
                "evaluations": result.evaluations,
                "generations": result.iterations,
                "message": result.message,
                "runtime": end_time - start_time,
                "convergence_history": result.diagnostic.best_fitness,
            }
        )

    save_results(results, function_id, dimensions)

    final_fitness = [r["best_fitness"] for r in results]
    print("\n=== RESULTS SUMMARY ===")
    print(
        f"Best Fitness - Mean: {np.mean(final_fitness):.6e}, Median: {np.median(final_fitness):.6e}"
    )
    print(f"Best Fitness - Std: {np.std(final_fitness):.6e}")
    print(
        f"Best Fitness - Min: {np.min(final_fitness):.6e}, Max: {np.max(final_fitness):.6e}"
    )

    return results


def save_results(results, function_id, dimensions):

    max_length = max(len(r["convergence_history"]) for r in results)
    convergence_matrix = np.full((max_length, len(results)), np.nan)

    for i, result in enumerate(results):
        history = result["convergence_history"]
        convergence_matrix[: len(history), i] = history

    convergence_df = pd.DataFrame(convergence_matrix)
    convergence_df.columns = [f"run_{i+1}" for i in range(len(results))]
    convergence_filename = f"cmaes_convergence_f{function_id}_d{dimensions}.csv"
    convergence_df.to_csv(convergence_filename, index=False)

    summary_df = pd.DataFrame(
        {
            key: [r[key] for r in results]
            for key in ("run", "best_fitness", "evaluations", "generations", "message", "runtime")
        }
    )
    summary_filename = f"cmaes_summary_f{function_id}_d{dimensions}.csv"
    summary_df.to_csv(summary_filename, index=False)

    print(f"Saved results to: {convergence_filename}, {summary_filename}")


if __name__ == "__main__":
    run_cmaes_cec2017()
