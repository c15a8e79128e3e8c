"""Evolution engine - population state machine and generational step."""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import Enum
from typing import Any

import numpy as np
from loguru import logger
from pydantic import ValidationError

from ga_strings.ga.errors import ConfigurationError, InvalidTargetError, NotInitializedError
from ga_strings.ga.evaluation import average_fitness, diversity, rank_by_fitness
from ga_strings.ga.operators import crossover_single_point, mutation, select_parents
from ga_strings.ga.population import create_individual, create_population, invalid_target_symbols
from ga_strings.models.config import EvolutionConfig, SelectionStrategy, character_pool
from ga_strings.models.individual import Individual
from ga_strings.models.stats import GenerationStats, RankedIndividual

STAGNATION_THRESHOLD = 50


class EngineState(str, Enum):
    """Lifecycle of an engine run."""

    UNINITIALIZED = "uninitialized"
    READY = "ready"
    STEPPING = "stepping"
    TERMINAL = "terminal"


def validate_config(data: EvolutionConfig | Mapping[str, Any]) -> EvolutionConfig:
    raw = data.model_dump() if isinstance(data, EvolutionConfig) else dict(data)
    try:
        return EvolutionConfig.model_validate(raw)
    except ValidationError as e:
        raise ConfigurationError(f"Invalid evolution configuration: {e}") from e


class EvolutionEngine:
    """Evolves a population of strings toward a target.

    The caller drives the run: ``initialize()`` once, then ``step()`` until
    the returned stats report ``is_complete`` (or the caller gives up).
    Statistics bookkeeping is keyed to the generation counter, so
    ``get_stats()`` can be called any number of times between steps.
    """

    def __init__(
        self,
        config: EvolutionConfig | Mapping[str, Any],
        rng: np.random.Generator | None = None,
    ) -> None:
        self.config = validate_config(config)
        self.rng = rng if rng is not None else np.random.default_rng(self.config.seed)
        self._pool = character_pool(self.config.character_set)

        self._population: list[Individual] = []
        self._generation = 0
        self._history: list[int] = []
        self._recorded_generation: int | None = None
        self._since_improvement = 0
        self._state = EngineState.UNINITIALIZED

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    @property
    def character_pool(self) -> str:
        return self._pool

    def get_character_pool(self) -> str:
        return self._pool

    @property
    def state(self) -> EngineState:
        return self._state

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def population(self) -> tuple[Individual, ...]:
        return tuple(self._population)

    @property
    def best_fitness_history(self) -> tuple[int, ...]:
        return tuple(self._history)

    @property
    def survivor_count(self) -> int:
        """Number of top individuals retained each generation (at least 2)."""
        size = len(self._population) or self.config.population_size
        count = max(2, math.ceil(self.config.population_size * self.config.survival_rate / 100))
        return min(count, size)

    # ------------------------------------------------------------------
    # Validation
    # ------------------------------------------------------------------
    def invalid_target_symbols(self) -> list[str]:
        return invalid_target_symbols(self.config.target, self._pool)

    def check_target(self) -> None:
        """Raise InvalidTargetError if the target uses symbols outside the pool."""
        invalid = self.invalid_target_symbols()
        if invalid:
            raise InvalidTargetError(invalid)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def initialize(self) -> None:
        """Create a fresh random population and clear run state."""
        cfg = self.config
        invalid = self.invalid_target_symbols()
        if invalid:
            logger.warning(
                "[EvolutionEngine] Target has symbols outside the pool {}; run cannot complete",
                invalid,
            )

        self._population = create_population(cfg.population_size, cfg.target, self._pool, self.rng)
        self._generation = 0
        self._history = []
        self._recorded_generation = None
        self._since_improvement = 0
        self._state = EngineState.READY
        logger.info(
            "[EvolutionEngine] Initialized: target_length={} population={} strategy={}",
            cfg.target_length,
            cfg.population_size,
            cfg.selection_strategy.value,
        )

    def step(self) -> GenerationStats:
        """Advance exactly one generation and return its statistics."""
        if self._state == EngineState.UNINITIALIZED:
            raise NotInitializedError("initialize() must be called before step()")

        self._state = EngineState.STEPPING
        cfg = self.config

        # 1. Sort by fitness descending (stable)
        ranked = rank_by_fitness(self._population)

        # 2. Select survivors
        survivors = ranked[: self.survivor_count]

        # 3. Elitism carries survivors over verbatim
        if cfg.selection_strategy == SelectionStrategy.ELITISM:
            next_population = list(survivors)
        else:
            next_population = []

        while len(next_population) < cfg.population_size:
            parent1, parent2 = select_parents(cfg.selection_strategy, survivors, ranked, self.rng)
            child1, child2 = crossover_single_point(parent1.dna, parent2.dna, self.rng)

            for child in (child1, child2):
                if len(next_population) >= cfg.population_size:
                    break
                dna = mutation(
                    child,
                    self._pool,
                    self.rng,
                    mutation_rate=cfg.mutation_rate,
                    enabled=cfg.mutation_enabled,
                )
                next_population.append(create_individual(dna, cfg.target))

        # 4. Swap in the new generation
        self._population = next_population
        self._generation += 1

        stats = self.get_stats()
        self._state = EngineState.TERMINAL if stats.is_complete else EngineState.READY
        logger.debug(
            "[EvolutionEngine] Generation {}: best={} avg={:.2f} diversity={:.1f}%",
            stats.generation,
            stats.best_individual.fitness,
            stats.average_fitness,
            stats.diversity,
        )
        if stats.is_complete:
            logger.info(
                "[EvolutionEngine] Target reached at generation {}: {!r}",
                stats.generation,
                stats.best_individual.dna,
            )
        return stats

    def get_stats(self) -> GenerationStats:
        """Statistics for the current generation.

        History and stagnation are updated at most once per generation.
        """
        if not self._population:
            raise NotInitializedError("initialize() must be called before get_stats()")

        best = rank_by_fitness(self._population)[0]
        self._record_best(best.fitness)

        return GenerationStats(
            generation=self._generation,
            best_individual=best,
            average_fitness=average_fitness(self._population),
            diversity=diversity(self._population),
            is_complete=best.fitness == self.config.target_length,
            is_stagnant=self._since_improvement >= STAGNATION_THRESHOLD,
            generations_since_improvement=self._since_improvement,
        )

    def _record_best(self, best_fitness: int) -> None:
        if self._recorded_generation == self._generation:
            return

        if self._history:
            if best_fitness > self._history[-1]:
                self._since_improvement = 0
            else:
                self._since_improvement += 1
                if self._since_improvement == STAGNATION_THRESHOLD:
                    logger.warning(
                        "[EvolutionEngine] Stagnant: no improvement for {} generations",
                        STAGNATION_THRESHOLD,
                    )

        self._history.append(best_fitness)
        self._recorded_generation = self._generation

    def ranked_population(self, limit: int | None = None) -> list[RankedIndividual]:
        """Population sorted best first, with match percentages."""
        if not self._population:
            raise NotInitializedError("initialize() must be called before ranked_population()")

        ranked = rank_by_fitness(self._population)
        if limit is not None:
            ranked = ranked[:limit]
        length = self.config.target_length
        return [
            RankedIndividual(
                rank=i + 1,
                dna=ind.dna,
                fitness=ind.fitness,
                match_percentage=ind.fitness / length * 100.0,
            )
            for i, ind in enumerate(ranked)
        ]

    def reset(self) -> None:
        """Discard the population and run state; keep configuration."""
        self._population = []
        self._generation = 0
        self._history = []
        self._recorded_generation = None
        self._since_improvement = 0
        self._state = EngineState.UNINITIALIZED
        logger.debug("[EvolutionEngine] Reset")

    def update_config(self, **changes: Any) -> None:
        """Merge ``changes`` into the live configuration.

        A character-set change recomputes the pool. A new non-null seed
        replaces the random generator, so the next ``initialize()`` matches a
        fresh engine built with that seed. The current population is left
        as is.
        """
        merged = {**self.config.model_dump(), **changes}
        new_config = validate_config(merged)
        if new_config.character_set != self.config.character_set:
            self._pool = character_pool(new_config.character_set)
        if new_config.seed is not None and new_config.seed != self.config.seed:
            self.rng = np.random.default_rng(new_config.seed)
        self.config = new_config
