"""Headless driving loop for an evolution run."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Callable

import numpy as np
from loguru import logger

from ga_strings.ga.engine import EvolutionEngine
from ga_strings.models.config import EvolutionConfig
from ga_strings.models.stats import GenerationStats, RunResult, StopReason

# Called after every generation with that generation's stats
ProgressCallback = Callable[[GenerationStats], None]


class EvolutionRunner:
    """Runs an engine until the target is reached or a stop condition hits.

    Replaces an interactive start/stop timer: the loop is bounded by
    ``max_generations`` and optionally by stagnation.
    """

    def __init__(
        self,
        config: EvolutionConfig | Mapping[str, Any],
        max_generations: int = 1000,
        stop_on_stagnation: bool = False,
        progress_callback: ProgressCallback | None = None,
        rng: np.random.Generator | None = None,
    ) -> None:
        if max_generations < 1:
            raise ValueError("max_generations must be at least 1")
        self.engine = EvolutionEngine(config, rng=rng)
        self.max_generations = max_generations
        self.stop_on_stagnation = stop_on_stagnation
        self.progress_callback = progress_callback

    def run(self) -> RunResult:
        engine = self.engine
        engine.check_target()
        engine.initialize()

        stats = engine.get_stats()
        average_history = [stats.average_fitness]
        stop_reason = StopReason.MAX_GENERATIONS

        if stats.is_complete:
            stop_reason = StopReason.COMPLETE
        else:
            for _ in range(self.max_generations):
                stats = engine.step()
                average_history.append(stats.average_fitness)

                if self.progress_callback:
                    self.progress_callback(stats)

                if stats.is_complete:
                    stop_reason = StopReason.COMPLETE
                    break
                if self.stop_on_stagnation and stats.is_stagnant:
                    stop_reason = StopReason.STAGNANT
                    break

        logger.info(
            "[EvolutionRunner] Stop: {} after {} generation(s), best={}/{}",
            stop_reason.value,
            stats.generation,
            stats.best_individual.fitness,
            engine.config.target_length,
        )
        return RunResult(
            final_stats=stats,
            stop_reason=stop_reason,
            best_fitness_history=list(engine.best_fitness_history),
            average_fitness_history=average_history,
        )
