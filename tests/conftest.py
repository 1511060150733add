import numpy as np
import pytest

from evostrat.core.objective import ObjectiveFunction


class RecordingObjective(ObjectiveFunction):
    """Sum of squares that remembers every candidate and fitness it produced."""

    def __init__(self):
        super().__init__()
        self.candidates = []
        self.values = []

    def _evaluate(self, x):
        value = float(np.sum(x**2))
        self.candidates.append(np.array(x, copy=True))
        self.values.append(value)
        return value


@pytest.fixture
def sphere():
    return ObjectiveFunction(lambda x: float(np.sum(x**2)))


@pytest.fixture
def recording_sphere():
    return RecordingObjective()
