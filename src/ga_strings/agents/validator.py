"""ValidatorAgent - checks a configuration before a run."""

from __future__ import annotations

from typing import Any

from ga_strings.agents.base import BaseAgent
from ga_strings.ga.engine import validate_config
from ga_strings.ga.population import invalid_target_symbols
from ga_strings.models.config import EvolutionConfig, character_pool
from ga_strings.models.validation import ValidationReport, Violation, ViolationSeverity

LARGE_POPULATION = 5000


class ValidatorAgent(BaseAgent):
    """Validates a configuration and produces a report."""

    @property
    def name(self) -> str:
        return "validator"

    def validate(self, config: EvolutionConfig) -> ValidationReport:
        pool = character_pool(config.character_set)
        violations: list[Violation] = []

        invalid = invalid_target_symbols(config.target, pool)
        if invalid:
            listed = ", ".join(f"'{s}'" for s in invalid)
            violations.append(
                Violation(
                    check_id="invalid_target_symbols",
                    message=f"Target contains characters not in {config.character_set.value}: {listed}",
                    severity=ViolationSeverity.ERROR,
                    symbols=invalid,
                )
            )

        if not config.mutation_enabled:
            violations.append(
                Violation(
                    check_id="mutation_disabled",
                    message="Mutation is off; only symbols present in the initial population can appear",
                    severity=ViolationSeverity.WARNING,
                )
            )

        if config.population_size > LARGE_POPULATION:
            violations.append(
                Violation(
                    check_id="large_population",
                    message=f"Population of {config.population_size} makes each generation slow",
                    severity=ViolationSeverity.INFO,
                )
            )

        return ValidationReport(character_pool=pool, violations=violations)

    def _handle_validate(self, payload: dict[str, Any]) -> dict[str, Any]:
        config = validate_config(payload["config"])
        return {"validation_report": self.validate(config)}
