"""
Random variable generators for cafeteria workloads.
All samplers draw from numpy's global generator, so np.random.seed makes a
run reproducible.
"""

import numpy as np
from typing import Callable


# Basic distributions
def poisson(rate: float) -> int:
    """Generate a Poisson count with mean ``rate``."""
    if rate <= 0:
        return 0
    return int(np.random.poisson(rate))


def bernoulli(p: float) -> bool:
    """Generate a Bernoulli trial with success probability p."""
    return bool(np.random.random() < p)


def integer_uniform(low: int, high: int) -> int:
    """Generate an integer uniformly from [low, high] inclusive."""
    return int(np.random.randint(low, high + 1))


# Distribution factory functions
def poisson_distribution(rate: float) -> Callable[[], int]:
    """Create a Poisson arrival-count distribution function."""
    return lambda: poisson(rate)


def bernoulli_distribution(p: float) -> Callable[[], bool]:
    """Create a Bernoulli distribution function."""
    if not 0.0 <= p <= 1.0:
        raise ValueError(f"Probability must be in [0, 1], got {p}")
    return lambda: bernoulli(p)


def integer_uniform_distribution(low: int, high: int) -> Callable[[], int]:
    """Create an inclusive integer uniform distribution function."""
    if low > high:
        raise ValueError(f"Empty range [{low}, {high}]")
    return lambda: integer_uniform(low, high)


def deterministic_distribution(value) -> Callable[[], object]:
    """Create a deterministic distribution (always returns same value)."""
    return lambda: value

