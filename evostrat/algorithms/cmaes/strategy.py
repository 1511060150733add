"""
(mu/mu_I, lambda)-CMA-ES generation step.

Offspring are sampled from N(parent, sigma^2 C), the best mu are kept and their
mean mutation step moves the parent. A direction path s drives a rank-one
update of C and a standardized path s_sigma drives the step size.
"""

import logging
from typing import MutableSequence, Sequence

import numpy as np
from numpy.typing import NDArray
from scipy.linalg import LinAlgError, cholesky

from evostrat.algorithms.cmaes.config import CMAESConfig, check_time_constants
from evostrat.algorithms.cmaes.state import CMAESState
from evostrat.core.objective import ObjectiveFunction
from evostrat.utils.helpers import nan_to_worst, symmetrize

logger = logging.getLogger(__name__)


def create_state(
    config: CMAESConfig,
    objective: ObjectiveFunction,
    population: Sequence[NDArray[np.float64]],
) -> CMAESState:
    """
    Build the initial search distribution.

    Args:
        config: Strategy configuration
        objective: Fitness function, fixes the numeric type of fitness values
        population: Initial population, only its first individual is used

    Returns:
        State centered on the first individual with identity covariance

    Raises:
        InvalidConfiguration: If mu >= lambda or a time constant is too small
        ValueError: If the population or its first individual is empty
    """
    config.validate()
    if len(population) == 0:
        raise ValueError("Initial population must not be empty")

    individual = np.array(population[0], dtype=np.float64)
    N = len(individual)
    if N == 0:
        raise ValueError("Individuals must have at least one dimension")
    tau, tau_c, tau_sigma = config.resolve_time_constants(N)
    check_time_constants(tau, tau_c, tau_sigma)

    return CMAESState(
        N=N,
        tau=tau,
        tau_c=tau_c,
        tau_sigma=tau_sigma,
        fitpop=np.full(config.mu, np.inf, dtype=objective.dtype),
        C=np.eye(N),
        s=np.zeros(N),
        s_sigma=np.zeros(N),
        sigma=1.0,
        parent=individual.copy(),
        fittest=individual.copy(),
        rng=np.random.default_rng(config.seed),
    )


def advance_generation(
    objective: ObjectiveFunction,
    state: CMAESState,
    population: MutableSequence[NDArray[np.float64]],
    config: CMAESConfig,
) -> bool:
    """
    Run one generation, mutating state and population in place.

    The best mu offspring are written to the front of population, best first.

    Returns:
        True if the covariance matrix is not positive definite and the run
        has to stop, False otherwise
    """
    mu, lambda_ = config.mu, config.lambda_
    N, sigma = state.N, state.sigma
    tau, tau_c, tau_sigma = state.tau, state.tau_c, state.tau_sigma

    try:
        sqrt_C = cholesky(symmetrize(state.C), lower=False)
    except (LinAlgError, ValueError) as ex:
        logger.error("Break on Cholesky: %s: %s", ex, state.C)
        return True

    # Rows are offspring: E in standard coordinates, W in distribution coordinates
    E = state.rng.standard_normal((lambda_, N))
    W = sigma * (E @ sqrt_C.T)
    offspring = state.parent + W
    fitoff = np.array([objective(x) for x in offspring], dtype=state.fitpop.dtype)
    fitoff = nan_to_worst(fitoff)

    # Select new parent population
    idx = np.argsort(fitoff, kind="stable")[:mu]
    for i in range(mu):
        population[i] = offspring[idx[i]].copy()
        state.fitpop[i] = fitoff[idx[i]]

    w = W[idx].mean(axis=0)
    eps = E[idx].mean(axis=0)

    state.parent = state.parent + w
    state.s = (1.0 - 1.0 / tau) * state.s + (
        np.sqrt(mu / tau * (2.0 - 1.0 / tau)) / sigma
    ) * w
    state.C = (1.0 - 1.0 / tau_c) * state.C + np.outer(state.s / tau_c, state.s)
    state.s_sigma = (1.0 - 1.0 / tau_sigma) * state.s_sigma + np.sqrt(
        mu / tau_sigma * (2.0 - 1.0 / tau_sigma)
    ) * eps
    state.sigma = float(
        sigma * np.exp((state.s_sigma @ state.s_sigma - N) / (2 * N * np.sqrt(N)))
    )

    state.fittest = np.array(population[0], copy=True)

    return False
