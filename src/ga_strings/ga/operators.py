"""GA operators: parent selection, crossover, mutation."""

from __future__ import annotations

from collections.abc import Sequence
from typing import assert_never

import numpy as np

from ga_strings.models.config import DEFAULT_MUTATION_RATE, SelectionStrategy
from ga_strings.models.individual import Individual


def pick_uniform(candidates: Sequence[Individual], rng: np.random.Generator) -> Individual:
    """Draw one candidate uniformly, with replacement."""
    return candidates[int(rng.integers(0, len(candidates)))]


def select_parents(
    strategy: SelectionStrategy,
    survivors: Sequence[Individual],
    population: Sequence[Individual],
    rng: np.random.Generator,
) -> tuple[Individual, Individual]:
    """Pick two parents according to the strategy's parent-source rule.

    - elitism: both from survivors
    - semi-elitism: first from survivors, second from the whole population
    - random: both from the whole population
    """
    match strategy:
        case SelectionStrategy.ELITISM:
            return pick_uniform(survivors, rng), pick_uniform(survivors, rng)
        case SelectionStrategy.SEMI_ELITISM:
            return pick_uniform(survivors, rng), pick_uniform(population, rng)
        case SelectionStrategy.RANDOM:
            return pick_uniform(population, rng), pick_uniform(population, rng)
        case _:
            assert_never(strategy)


def crossover_single_point(
    parent1: str,
    parent2: str,
    rng: np.random.Generator,
) -> tuple[str, str]:
    """Single-point crossover of two equal-length sequences.

    The split is drawn uniformly from 1..length-1, so each child takes at
    least one symbol from each parent. Sequences shorter than 2 have no
    interior split; the children are then copies of the parents.
    """
    length = len(parent1)
    if length < 2:
        return parent1, parent2

    split = int(rng.integers(1, length))
    child1 = parent1[:split] + parent2[split:]
    child2 = parent2[:split] + parent1[split:]
    return child1, child2


def mutation(
    dna: str,
    pool: str,
    rng: np.random.Generator,
    mutation_rate: float = DEFAULT_MUTATION_RATE,
    enabled: bool = True,
) -> str:
    """Per-position mutation operator.

    - Each position is replaced with probability ``mutation_rate``
    - Replacement is uniform over ``pool`` and may equal the original symbol
    """
    if not enabled or not dna:
        return dna

    # Fixed number of draws per call, whatever the outcome
    hits = rng.random(len(dna)) < mutation_rate
    replacements = rng.integers(0, len(pool), size=len(dna))
    if not hits.any():
        return dna

    return "".join(
        pool[replacements[i]] if hit else symbol
        for i, (symbol, hit) in enumerate(zip(dna, hits))
    )
