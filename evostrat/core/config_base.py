from dataclasses import dataclass, fields, replace
from typing import Any, Self

from evostrat.core.errors import InvalidConfiguration


@dataclass(frozen=True)
class BaseConfig:
    """
    Options shared by every strategy.
    Strategy configurations extend this with their own parameters.
    """

    seed: int | None = None
    """Seed of the random source (None means nondeterministic)"""

    iterations: int | None = None
    """Maximum number of generations (None means use the strategy default)"""

    abstol: float | None = None
    """Absolute tolerance on the best fitness change (None means use the strategy default)"""

    successive_f_tol: int = 10
    """Number of consecutive generations within abstol before convergence"""

    # Diagnostics
    diag_pop: bool = False
    """Log the parent population every generation"""

    diag_eigen: bool = False
    """Log eigenvalues and related properties of the covariance matrix"""

    diag_sigma: bool = False
    """Log the global step size"""

    def validate(self) -> None:
        """Check the shared options, raising InvalidConfiguration on bad values."""
        if self.iterations is not None and self.iterations < 1:
            raise InvalidConfiguration(
                f"iterations must be positive, got {self.iterations}"
            )
        if self.abstol is not None and self.abstol < 0:
            raise InvalidConfiguration(f"abstol must be non-negative, got {self.abstol}")
        if self.successive_f_tol < 1:
            raise InvalidConfiguration(
                f"successive_f_tol must be positive, got {self.successive_f_tol}"
            )

    def with_all_diagnostics(self) -> Self:
        """Return a copy with every diagnostic toggle enabled."""
        toggles: dict[str, Any] = {
            f.name: True for f in fields(self) if f.name.startswith("diag_")
        }
        return replace(self, **toggles)
