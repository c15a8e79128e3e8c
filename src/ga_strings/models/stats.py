"""Per-generation statistics and run results."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field

from ga_strings.models.individual import Individual


class GenerationStats(BaseModel):
    """Snapshot of a population after a generation transition."""

    generation: int = Field(ge=0)
    best_individual: Individual
    average_fitness: float
    diversity: float = Field(gt=0.0, le=100.0, description="Percent of distinct sequences")
    is_complete: bool
    is_stagnant: bool
    generations_since_improvement: int = Field(ge=0)


class RankedIndividual(BaseModel):
    """Population listing entry, sorted by fitness."""

    rank: int = Field(ge=1)
    dna: str
    fitness: int
    match_percentage: float


class StopReason(str, Enum):
    """Why a headless run stopped."""

    COMPLETE = "complete"
    MAX_GENERATIONS = "max_generations"
    STAGNANT = "stagnant"


class RunResult(BaseModel):
    """Result of a headless evolution run."""

    final_stats: GenerationStats
    stop_reason: StopReason
    best_fitness_history: list[int] = Field(default_factory=list)
    average_fitness_history: list[float] = Field(default_factory=list)

    @property
    def generations(self) -> int:
        return self.final_stats.generation

    @property
    def best_dna(self) -> str:
        return self.final_stats.best_individual.dna
