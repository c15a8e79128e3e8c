"""Built-in run presets."""

from __future__ import annotations

from pydantic import BaseModel, Field

from ga_strings.models.config import CharacterSet, EvolutionConfig, SelectionStrategy


class Preset(BaseModel):
    """A named, ready-to-run configuration."""

    name: str
    config: EvolutionConfig
    step_delay_ms: int = Field(
        default=100, ge=0, description="Suggested pause between steps for interactive callers"
    )


PRESETS: dict[str, Preset] = {
    "hello": Preset(
        name="hello",
        config=EvolutionConfig(
            target="Hello World",
            population_size=500,
            survival_rate=20,
            character_set=CharacterSet.LETTERS_SPACE,
            selection_strategy=SelectionStrategy.ELITISM,
            mutation_enabled=False,
            mutation_rate=0.01,
        ),
        step_delay_ms=100,
    ),
    "shakespeare": Preset(
        name="shakespeare",
        config=EvolutionConfig(
            target="To be or not to be",
            population_size=800,
            survival_rate=15,
            character_set=CharacterSet.LETTERS_SPACE,
            selection_strategy=SelectionStrategy.ELITISM,
            mutation_enabled=True,
            mutation_rate=0.02,
        ),
        step_delay_ms=50,
    ),
    "pangram": Preset(
        name="pangram",
        config=EvolutionConfig(
            target="The quick brown fox jumps",
            population_size=1000,
            survival_rate=10,
            character_set=CharacterSet.LETTERS_SPACE,
            selection_strategy=SelectionStrategy.SEMI_ELITISM,
            mutation_enabled=True,
            mutation_rate=0.015,
        ),
        step_delay_ms=50,
    ),
    "evolution": Preset(
        name="evolution",
        config=EvolutionConfig(
            target="Evolution in action",
            population_size=800,
            survival_rate=20,
            character_set=CharacterSet.LETTERS_SPACE,
            selection_strategy=SelectionStrategy.ELITISM,
            mutation_enabled=False,
            mutation_rate=0.01,
        ),
        step_delay_ms=75,
    ),
    "dna": Preset(
        name="dna",
        config=EvolutionConfig(
            target="ACGTACGTACGT",
            population_size=300,
            survival_rate=25,
            character_set=CharacterSet.LETTERS_SPACE,
            selection_strategy=SelectionStrategy.RANDOM,
            mutation_enabled=False,
            mutation_rate=0.005,
        ),
        step_delay_ms=100,
    ),
    "code": Preset(
        name="code",
        config=EvolutionConfig(
            target="function hello()",
            population_size=600,
            survival_rate=15,
            character_set=CharacterSet.PRINTABLE_ASCII,
            selection_strategy=SelectionStrategy.ELITISM,
            mutation_enabled=True,
            mutation_rate=0.03,
        ),
        step_delay_ms=75,
    ),
}


def get_preset(name: str) -> Preset:
    """Look up a preset by name.

    Raises:
        KeyError: If no preset has that name.
    """
    try:
        return PRESETS[name]
    except KeyError:
        available = ", ".join(sorted(PRESETS))
        raise KeyError(f"Unknown preset '{name}'. Available: {available}") from None


def list_presets() -> list[Preset]:
    return list(PRESETS.values())
