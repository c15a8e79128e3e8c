"""Common test fixtures."""

from __future__ import annotations

import numpy as np
import pytest

from ga_strings.models.config import CharacterSet, EvolutionConfig, SelectionStrategy


@pytest.fixture
def rng() -> np.random.Generator:
    return np.random.default_rng(42)


@pytest.fixture
def ab_config() -> EvolutionConfig:
    """Two-symbol target, elitism, no mutation."""
    return EvolutionConfig(
        target="AB",
        population_size=4,
        survival_rate=50,
        mutation_enabled=False,
        character_set=CharacterSet.LETTERS_SPACE,
        selection_strategy=SelectionStrategy.ELITISM,
    )


@pytest.fixture
def hello_config() -> EvolutionConfig:
    """Short target that converges quickly with mutation on."""
    return EvolutionConfig(
        target="Hello",
        population_size=200,
        survival_rate=20,
        mutation_enabled=True,
        mutation_rate=0.02,
        seed=7,
    )


@pytest.fixture
def fast_config() -> EvolutionConfig:
    """Small config for quick smoke runs."""
    return EvolutionConfig(
        target="GA test",
        population_size=50,
        survival_rate=20,
        mutation_rate=0.02,
        seed=1,
    )
