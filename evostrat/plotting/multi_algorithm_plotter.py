from typing import Optional, Union
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
import numpy as np
import seaborn as sns
from pathlib import Path

from evostrat.algorithms.choices import AlgorithmChoice
from evostrat.logging.base_logger import BaseLogData
from evostrat.core.base_optimizer import OptimizationResult
from evostrat.logging.cmaes_logger import CMAESLogData


class MultiAlgorithmPlotter:
    """Plotter for comparing optimization runs and inspecting their diagnostics."""

    def __init__(self, style: str = "seaborn-v0_8", figsize: tuple = (12, 8)):
        """
        Args:
            style: Matplotlib style to use
            figsize: Default figure size
        """
        self.style = style
        self.figsize = figsize
        plt.style.use(style)
        sns.set_palette("husl")

    @staticmethod
    def _x_axis(log_data: BaseLogData, length: int, show_evaluations: bool = True):
        if show_evaluations and len(log_data.evaluations) == length:
            return log_data.evaluations
        return range(1, length + 1)

    @staticmethod
    def _save(fig: Figure, save_path: Optional[Union[str, Path]]) -> None:
        if save_path:
            fig.savefig(save_path, dpi=300, bbox_inches="tight")

    def plot_convergence_comparison(
        self,
        results: dict[str, OptimizationResult],
        save_path: Optional[Union[str, Path]] = None,
        title: str = "Convergence Comparison",
        log_scale: bool = True,
        show_evaluations: bool = True,
    ) -> Figure:
        """
        Plot best-so-far fitness curves of several runs.

        Args:
            results: Mapping from run label to its result
            save_path: Path to save the plot
            title: Plot title
            log_scale: Whether to use log scale for y-axis
            show_evaluations: Whether to show x-axis as evaluations or generations

        Returns:
            Figure object
        """
        fig, ax = plt.subplots(figsize=self.figsize)

        for label, result in results.items():
            log_data = result.diagnostic
            if not log_data.best_fitness:
                continue
            x_data = self._x_axis(
                log_data, len(log_data.best_fitness), show_evaluations
            )
            ax.plot(
                x_data,
                log_data.best_fitness,
                label=f"{label} (final: {result.best_fitness:.2e})",
                linewidth=2,
                alpha=0.8,
            )

        ax.set_xlabel("Function Evaluations" if show_evaluations else "Generations")
        ax.set_ylabel("Best Fitness")
        ax.set_title(title)
        ax.legend(fontsize="x-large")
        ax.grid(True, alpha=0.3)

        if log_scale:
            ax.set_yscale("log")

        plt.tight_layout()
        self._save(fig, save_path)

        return fig

    def plot_algorithm_specific_metrics(
        self,
        result: OptimizationResult,
        save_path: Optional[Union[str, Path]] = None,
    ) -> Figure:
        """Plot the diagnostics recorded for the algorithm that produced result."""
        log_data = result.diagnostic

        if result.algorithm == AlgorithmChoice.CMAES and isinstance(
            log_data, CMAESLogData
        ):
            return self._plot_cmaes_metrics(log_data, save_path)
        return self._plot_generic_metrics(log_data, result.algorithm, save_path)

    def _plot_cmaes_metrics(
        self, log_data: CMAESLogData, save_path: Optional[Union[str, Path]] = None
    ) -> Figure:
        """Plot CMA-ES diagnostics in 3 panels."""
        fig = plt.figure(figsize=(20, 12))
        gs = fig.add_gridspec(3, 2, hspace=0.3, wspace=0.3)

        evals = self._x_axis(log_data, len(log_data.best_fitness))

        # ============ PANEL 1: Objective Statistics ============
        ax1 = fig.add_subplot(gs[0, 0])
        if log_data.best_fitness:
            ax1.semilogy(evals, log_data.best_fitness, "b-", linewidth=2, label="Best")
            if len(log_data.median_fitness) == len(log_data.best_fitness):
                ax1.semilogy(
                    evals,
                    log_data.median_fitness,
                    "r:",
                    linewidth=1.5,
                    label="Median parent",
                )
            ax1.set_xlabel("Function Evaluations")
            ax1.set_ylabel("Fitness (log scale)")
            ax1.set_title("Convergence")
            ax1.legend()
            ax1.grid(True, alpha=0.3)

        ax2 = fig.add_subplot(gs[0, 1])
        if log_data.sigma:
            ax2.semilogy(evals, log_data.sigma, "orange", linewidth=2)
            ax2.set_xlabel("Function Evaluations")
            ax2.set_ylabel("σ (log scale)")
            ax2.set_title("Step-Size Evolution")
            ax2.grid(True, alpha=0.3)

        # ============ PANEL 2: Covariance Properties ============
        ax3 = fig.add_subplot(gs[1, 0])
        if log_data.condition_number:
            ax3.semilogy(evals, log_data.condition_number, "brown", linewidth=2)
            ax3.set_xlabel("Function Evaluations")
            ax3.set_ylabel("Condition Number (log scale)")
            ax3.set_title("Covariance Condition Number (κ)")
            ax3.grid(True, alpha=0.3)

        ax4 = fig.add_subplot(gs[1, 1])
        if log_data.eigenvalues:
            eigenvalues_array = np.array(log_data.eigenvalues)
            for i in range(min(5, eigenvalues_array.shape[1])):
                ax4.semilogy(
                    evals,
                    np.maximum(eigenvalues_array[:, -(i + 1)], 1e-300),
                    alpha=0.7,
                    linewidth=1.5,
                    label=f"λ_{i+1}",
                )
            ax4.set_xlabel("Function Evaluations")
            ax4.set_ylabel("Eigenvalues (log scale)")
            ax4.set_title("Eigenvalue Spectrum (largest 5)")
            ax4.legend()
            ax4.grid(True, alpha=0.3)

        # ============ PANEL 3: Evolution Paths and Mean ============
        ax5 = fig.add_subplot(gs[2, 0])
        if log_data.s_norm and log_data.s_sigma_norm:
            ax5.plot(evals, log_data.s_norm, "b-", linewidth=2, label="||s||")
            ax5.plot(evals, log_data.s_sigma_norm, "r--", linewidth=2, label="||s_σ||")
            ax5.set_xlabel("Function Evaluations")
            ax5.set_ylabel("Path Norm")
            ax5.set_title("Evolution Path Norms")
            ax5.legend()
            ax5.grid(True, alpha=0.3)

        ax6 = fig.add_subplot(gs[2, 1])
        if log_data.parent_norm:
            ax6.semilogy(evals, log_data.parent_norm, "darkgreen", linewidth=2)
            ax6.set_xlabel("Function Evaluations")
            ax6.set_ylabel("||m|| (log scale)")
            ax6.set_title("Distribution Mean Norm")
            ax6.grid(True, alpha=0.3)

        plt.suptitle("CMA-ES Diagnostics", fontsize=18, y=0.995)
        self._save(fig, save_path)

        return fig

    def _plot_generic_metrics(
        self,
        log_data: BaseLogData,
        algorithm: AlgorithmChoice,
        save_path: Optional[Union[str, Path]] = None,
    ) -> Figure:
        """Plot the diagnostics every logger records."""
        fig, axes = plt.subplots(1, 2, figsize=(15, 5))

        evals = self._x_axis(log_data, len(log_data.best_fitness))

        if log_data.best_fitness:
            axes[0].semilogy(evals, log_data.best_fitness, "b-", linewidth=2)
            axes[0].set_title("Best Fitness Evolution")
            axes[0].set_xlabel("Function Evaluations")
            axes[0].set_ylabel("Best Fitness")
            axes[0].grid(True, alpha=0.3)

        if len(log_data.mean_fitness) == len(log_data.best_fitness):
            axes[1].plot(evals, log_data.mean_fitness, "g-", linewidth=2, label="Mean")
            if len(log_data.std_fitness) == len(log_data.best_fitness):
                axes[1].plot(
                    evals, log_data.std_fitness, "r--", linewidth=2, label="Std Dev"
                )
            axes[1].set_title("Fitness Statistics")
            axes[1].set_xlabel("Function Evaluations")
            axes[1].set_ylabel("Fitness")
            axes[1].legend()
            axes[1].grid(True, alpha=0.3)

        plt.suptitle(f"{algorithm.value} Metrics", fontsize=16)
        plt.tight_layout()
        self._save(fig, save_path)

        return fig

    def plot_parameter_evolution(
        self,
        results: dict[str, OptimizationResult],
        parameter_name: str,
        save_path: Optional[Union[str, Path]] = None,
        title: Optional[str] = None,
    ) -> Figure:
        """
        Plot one logged scalar series, e.g. "sigma", for several runs.

        Runs that did not record the parameter are skipped.
        """
        fig, ax = plt.subplots(figsize=self.figsize)

        for label, result in results.items():
            param_data = getattr(result.diagnostic, parameter_name, None)
            if isinstance(param_data, list) and len(param_data) > 0:
                evals = self._x_axis(result.diagnostic, len(param_data))
                ax.plot(evals, param_data, label=label, linewidth=2, alpha=0.8)

        pretty = parameter_name.replace("_", " ").title()
        ax.set_xlabel("Function Evaluations")
        ax.set_ylabel(pretty)
        ax.set_title(title or f"{pretty} Evolution")
        ax.legend()
        ax.grid(True, alpha=0.3)

        plt.tight_layout()
        self._save(fig, save_path)

        return fig

    def create_summary_report(
        self,
        results: dict[str, OptimizationResult],
        save_dir: Optional[Union[str, Path]] = None,
    ) -> dict[str, Figure]:
        """
        Create a convergence plot plus one diagnostics plot per run.

        Returns:
            Dictionary of figure objects
        """
        figures = {}

        if save_dir:
            save_dir = Path(save_dir)
            save_dir.mkdir(parents=True, exist_ok=True)

        conv_path = save_dir / "convergence_comparison.png" if save_dir else None
        figures["convergence"] = self.plot_convergence_comparison(results, conv_path)

        for label, result in results.items():
            run_path = save_dir / f"{label.lower()}_metrics.png" if save_dir else None
            figures[f"{label}_metrics"] = self.plot_algorithm_specific_metrics(
                result, run_path
            )

        return figures
