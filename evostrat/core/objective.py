from typing import Callable

import numpy as np
from numpy.typing import DTypeLike, NDArray


class ObjectiveFunction:
    """
    Fitness function to be minimized, with an evaluation counter.

    Wraps a plain callable, or can be subclassed by overriding `_evaluate`.
    """

    def __init__(
        self,
        func: Callable[[NDArray[np.float64]], float] | None = None,
        dtype: DTypeLike = np.float64,
    ) -> None:
        """
        Args:
            func: Callable mapping a candidate vector to its fitness
            dtype: Numeric type of the fitness values
        """
        self._func = func
        self.dtype = np.dtype(dtype)
        self.evaluations = 0

    def _evaluate(self, x: NDArray[np.float64]) -> float:
        if self._func is None:
            raise NotImplementedError("Subclasses must implement this method")
        return self._func(x)

    def evaluate(self, x: NDArray[np.float64]) -> float:
        """Evaluate the fitness of x, lower is better."""
        self.evaluations += 1
        return self.dtype.type(self._evaluate(x))

    def __call__(self, x: NDArray[np.float64]) -> float:
        return self.evaluate(x)

    def reset(self) -> None:
        self.evaluations = 0
