"""ConductorAgent - orchestrates validate -> run."""

from __future__ import annotations

from typing import Any

from ga_strings.agents.base import BaseAgent
from ga_strings.agents.validator import ValidatorAgent
from ga_strings.ga.engine import validate_config
from ga_strings.ga.runner import EvolutionRunner, ProgressCallback
from ga_strings.models.config import EvolutionConfig


class ConductorAgent(BaseAgent):
    """Orchestrates a complete headless run."""

    def __init__(self) -> None:
        self._validator = ValidatorAgent()

    @property
    def name(self) -> str:
        return "conductor"

    def run_full_pipeline(
        self,
        config: EvolutionConfig,
        max_generations: int = 1000,
        stop_on_stagnation: bool = False,
        progress_callback: ProgressCallback | None = None,
    ) -> dict[str, Any]:
        """Validate the configuration, then run it if it has no errors.

        Returns dict with validation_report and, when the run happened, run_result.
        """
        # 1. Validate
        validation_report = self._validator.validate(config)
        result: dict[str, Any] = {"validation_report": validation_report}
        if not validation_report.is_compliant:
            return result

        # 2. Run
        runner = EvolutionRunner(
            config,
            max_generations=max_generations,
            stop_on_stagnation=stop_on_stagnation,
            progress_callback=progress_callback,
        )
        result["run_result"] = runner.run()
        return result

    def _handle_run_full_pipeline(self, payload: dict[str, Any]) -> dict[str, Any]:
        config = validate_config(payload["config"])
        return self.run_full_pipeline(
            config=config,
            max_generations=payload.get("max_generations", 1000),
            stop_on_stagnation=payload.get("stop_on_stagnation", False),
            progress_callback=payload.get("progress_callback"),
        )
