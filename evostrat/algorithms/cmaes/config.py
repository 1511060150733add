from dataclasses import dataclass
from typing import Any
import math

from evostrat.core.config_base import BaseConfig
from evostrat.core.errors import InvalidConfiguration


def default_tau(dimensions: int) -> float:
    """Default time constant of the direction path s."""
    return math.sqrt(dimensions)


def default_tau_c(dimensions: int) -> float:
    """Default time constant of the covariance matrix C."""
    return float(dimensions**2)


def default_tau_sigma(dimensions: int) -> float:
    """Default time constant of the global step size."""
    return math.sqrt(dimensions)


# Smallest time constants keeping the path weights real and the decay of C non-negative
MIN_TAU = 0.5
MIN_TAU_C = 1.0
MIN_TAU_SIGMA = 0.5


def check_time_constants(tau: float, tau_c: float, tau_sigma: float) -> None:
    """Raise InvalidConfiguration if a time constant is below its lower bound."""
    for name, value, lower in (
        ("tau", tau, MIN_TAU),
        ("tau_c", tau_c, MIN_TAU_C),
        ("tau_sigma", tau_sigma, MIN_TAU_SIGMA),
    ):
        if not value >= lower:
            raise InvalidConfiguration(f"{name} must be at least {lower}, got {value}")


def default_lambda(mu: int) -> int:
    """Default number of offspring based on the number of parents."""
    return mu + 1


@dataclass(frozen=True)
class CMAESConfig(BaseConfig):
    """
    Configuration for the (mu/mu_I, lambda) CMA-ES.
    Extends BaseConfig with the population sizes and adaptation time constants.
    """

    mu: int = 1
    """Number of parents"""

    lambda_: int | None = None
    """Number of offspring (None means mu + 1)"""

    tau: float | None = None
    """Time constant of the direction path (None means sqrt(N))"""

    tau_c: float | None = None
    """Time constant of the covariance matrix (None means N^2)"""

    tau_sigma: float | None = None
    """Time constant of the global step size (None means sqrt(N))"""

    def __post_init__(self) -> None:
        if self.lambda_ is None:
            object.__setattr__(self, "lambda_", default_lambda(self.mu))

    @property
    def population_size(self) -> int:
        """Number of individuals handed back to the driver each generation."""
        return self.mu

    @staticmethod
    def default_options() -> dict[str, Any]:
        return {"iterations": 1500, "abstol": 1e-10}

    def resolve_time_constants(self, dimensions: int) -> tuple[float, float, float]:
        """Resolve unset time constants against the problem dimension."""
        tau = self.tau if self.tau is not None else default_tau(dimensions)
        tau_c = self.tau_c if self.tau_c is not None else default_tau_c(dimensions)
        tau_sigma = (
            self.tau_sigma
            if self.tau_sigma is not None
            else default_tau_sigma(dimensions)
        )
        return float(tau), float(tau_c), float(tau_sigma)

    def validate(self) -> None:
        super().validate()
        if self.mu < 1:
            raise InvalidConfiguration(f"mu must be positive, got {self.mu}")
        if self.mu >= self.lambda_:
            raise InvalidConfiguration(
                "Offspring population must be larger than parent population "
                f"(mu={self.mu}, lambda={self.lambda_})"
            )
        check_time_constants(
            self.tau if self.tau is not None else MIN_TAU,
            self.tau_c if self.tau_c is not None else MIN_TAU_C,
            self.tau_sigma if self.tau_sigma is not None else MIN_TAU_SIGMA,
        )

    def __str__(self) -> str:
        return (
            f"CMAESConfig(mu={self.mu}, lambda={self.lambda_}, tau={self.tau}, "
            f"tau_c={self.tau_c}, tau_sigma={self.tau_sigma}, seed={self.seed})"
        )
