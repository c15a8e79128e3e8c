"""Fitness and population-level measures."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np

from ga_strings.models.individual import Individual


def calculate_fitness(dna: str, target: str) -> int:
    """Count positions where ``dna`` matches ``target``.

    Range is [0, len(target)]; a full score means ``dna == target``.
    """
    return sum(1 for a, b in zip(dna, target) if a == b)


def average_fitness(population: Sequence[Individual]) -> float:
    return float(np.mean([ind.fitness for ind in population]))


def diversity(population: Sequence[Individual]) -> float:
    """Percentage of distinct sequences in the population, in (0, 100]."""
    distinct = len({ind.dna for ind in population})
    return distinct / len(population) * 100.0


def rank_by_fitness(population: Sequence[Individual]) -> list[Individual]:
    """Stable sort by fitness, best first."""
    return sorted(population, key=lambda ind: -ind.fitness)
