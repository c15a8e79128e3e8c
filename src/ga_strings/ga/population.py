"""Population initialization for GA."""

from __future__ import annotations

import numpy as np

from ga_strings.ga.evaluation import calculate_fitness
from ga_strings.models.individual import Individual


def random_sequence(pool: str, length: int, rng: np.random.Generator) -> str:
    """Draw ``length`` symbols independently and uniformly from ``pool``."""
    indices = rng.integers(0, len(pool), size=length)
    return "".join(pool[i] for i in indices)


def create_individual(dna: str, target: str) -> Individual:
    """Wrap a sequence with its fitness against ``target``."""
    return Individual(dna=dna, fitness=calculate_fitness(dna, target))


def create_population(
    size: int,
    target: str,
    pool: str,
    rng: np.random.Generator,
) -> list[Individual]:
    """Create ``size`` random individuals of the target's length."""
    length = len(target)
    return [create_individual(random_sequence(pool, length, rng), target) for _ in range(size)]


def invalid_target_symbols(target: str, pool: str) -> list[str]:
    """Symbols of ``target`` missing from ``pool``, deduplicated in first-seen order."""
    invalid: list[str] = []
    for symbol in target:
        if symbol not in pool and symbol not in invalid:
            invalid.append(symbol)
    return invalid
