"""Individual data model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Individual(BaseModel):
    """One candidate solution: a symbol sequence and its cached fitness.

    Frozen so that crossover and mutation always produce new instances.
    """

    model_config = ConfigDict(frozen=True)

    dna: str
    fitness: int = Field(ge=0, description="Number of positions matching the target")
