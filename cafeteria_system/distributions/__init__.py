"""Random variable distributions for cafeteria workloads."""

from .random_variables import (
    poisson,
    bernoulli,
    integer_uniform,
    poisson_distribution,
    bernoulli_distribution,
    integer_uniform_distribution,
    deterministic_distribution,
)

__all__ = [
    'poisson',
    'bernoulli',
    'integer_uniform',
    'poisson_distribution',
    'bernoulli_distribution',
    'integer_uniform_distribution',
    'deterministic_distribution',
]
