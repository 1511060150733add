from enum import Enum
from typing import Union

import numpy as np
from numpy.typing import NDArray


class InitialPointGeneratorType(Enum):
    UNIFORM = "uniform"
    NORMAL = "normal"
    CONSTANT = "constant"


class InitialPointGenerator:
    """
    Produces starting points inside a box.

    UNIFORM samples the box uniformly, NORMAL samples around the box center
    with a sixth of the box width as standard deviation (clipped to the box),
    CONSTANT always returns the box center.
    """

    def __init__(
        self,
        strategy: InitialPointGeneratorType,
        dimensions: int,
        lower_bounds: Union[float, NDArray[np.float64], list[float]] = -100.0,
        upper_bounds: Union[float, NDArray[np.float64], list[float]] = 100.0,
        seed: int | None = None,
    ) -> None:
        self.strategy = strategy
        self.dimensions = dimensions
        self.lower_bounds = np.broadcast_to(
            np.asarray(lower_bounds, dtype=np.float64), (dimensions,)
        ).copy()
        self.upper_bounds = np.broadcast_to(
            np.asarray(upper_bounds, dtype=np.float64), (dimensions,)
        ).copy()

        if np.any(self.lower_bounds > self.upper_bounds):
            raise ValueError("Lower bounds must not exceed upper bounds.")

        self.rng = np.random.default_rng(seed)

    def generate(self) -> NDArray[np.float64]:
        """Generate a single starting point."""
        center = (self.lower_bounds + self.upper_bounds) / 2
        if self.strategy == InitialPointGeneratorType.UNIFORM:
            return self.rng.uniform(self.lower_bounds, self.upper_bounds)
        if self.strategy == InitialPointGeneratorType.NORMAL:
            scale = (self.upper_bounds - self.lower_bounds) / 6
            point = self.rng.normal(loc=center, scale=scale)
            return np.clip(point, self.lower_bounds, self.upper_bounds)
        return center

    def generate_population(self, size: int) -> list[NDArray[np.float64]]:
        return [self.generate() for _ in range(size)]
