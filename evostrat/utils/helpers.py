import numpy as np
from numpy.typing import NDArray


def nan_to_worst(fitness: NDArray[np.float64]) -> NDArray[np.float64]:
    """Replace NaN fitness values with +inf so they rank last when minimizing."""
    return np.where(np.isnan(fitness), np.inf, fitness)


def symmetrize(matrix: NDArray[np.float64]) -> NDArray[np.float64]:
    """Average a square matrix with its transpose."""
    return (matrix + matrix.T) / 2.0
