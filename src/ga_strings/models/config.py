"""Evolution run configuration."""

from __future__ import annotations

import string
from enum import Enum
from typing import assert_never

from pydantic import BaseModel, Field

DEFAULT_MUTATION_RATE = 0.01
MAX_POPULATION_SIZE = 10_000


class CharacterSet(str, Enum):
    """Symbol alphabets available for random generation and mutation."""

    LETTERS_SPACE = "letters-space"
    ALPHANUMERIC_SPACE = "alphanumeric-space"
    PRINTABLE_ASCII = "printable-ascii"


class SelectionStrategy(str, Enum):
    """Where the parents of each child are drawn from."""

    ELITISM = "elitism"
    SEMI_ELITISM = "semi-elitism"
    RANDOM = "random"


def character_pool(character_set: CharacterSet) -> str:
    """Resolve a character set to its ordered, deduplicated symbol pool."""
    match character_set:
        case CharacterSet.LETTERS_SPACE:
            return string.ascii_uppercase + string.ascii_lowercase + " "
        case CharacterSet.ALPHANUMERIC_SPACE:
            return string.ascii_uppercase + string.ascii_lowercase + string.digits + " "
        case CharacterSet.PRINTABLE_ASCII:
            return "".join(chr(code) for code in range(0x20, 0x7F))
        case _:
            assert_never(character_set)


class EvolutionConfig(BaseModel):
    """Configuration for a single evolution run."""

    target: str = Field(min_length=1, description="Sequence the population evolves toward")
    population_size: int = Field(default=100, ge=2, le=MAX_POPULATION_SIZE)
    survival_rate: int = Field(
        default=20, ge=1, le=100, description="Percent of the population kept as survivors"
    )
    mutation_enabled: bool = True
    mutation_rate: float = Field(
        default=DEFAULT_MUTATION_RATE,
        ge=0.0,
        le=1.0,
        description="Per-position replacement probability when mutation is enabled",
    )
    character_set: CharacterSet = CharacterSet.LETTERS_SPACE
    selection_strategy: SelectionStrategy = SelectionStrategy.ELITISM
    seed: int | None = Field(default=None, description="Seed for the engine's random source")

    @property
    def target_length(self) -> int:
        return len(self.target)
