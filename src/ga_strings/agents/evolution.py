"""EvolutionAgent - drives one engine step by step."""

from __future__ import annotations

from typing import Any

from ga_strings.agents.base import BaseAgent
from ga_strings.ga.engine import EvolutionEngine, validate_config
from ga_strings.ga.errors import NotInitializedError


class EvolutionAgent(BaseAgent):
    """Owns a single EvolutionEngine and exposes its operations as actions."""

    def __init__(self) -> None:
        self._engine: EvolutionEngine | None = None

    @property
    def name(self) -> str:
        return "evolution"

    @property
    def engine(self) -> EvolutionEngine:
        if self._engine is None:
            raise NotInitializedError("No run configured; call the 'initialize' action first")
        return self._engine

    def _handle_initialize(self, payload: dict[str, Any]) -> dict[str, Any]:
        config = payload.get("config")
        if config is not None:
            engine = EvolutionEngine(validate_config(config))
            engine.check_target()
            self._engine = engine
        self.engine.initialize()
        return {"stats": self.engine.get_stats(), "state": self.engine.state}

    def _handle_step(self, payload: dict[str, Any]) -> dict[str, Any]:
        count = max(1, int(payload.get("count", 1)))
        for _ in range(count):
            stats = self.engine.step()
            if stats.is_complete:
                break
        return {"stats": stats, "state": self.engine.state}

    def _handle_get_stats(self, payload: dict[str, Any]) -> dict[str, Any]:
        return {"stats": self.engine.get_stats(), "state": self.engine.state}

    def _handle_reset(self, payload: dict[str, Any]) -> dict[str, Any]:
        self.engine.reset()
        return {"state": self.engine.state}

    def _handle_update_config(self, payload: dict[str, Any]) -> dict[str, Any]:
        self.engine.update_config(**payload.get("changes", {}))
        return {"config": self.engine.config, "character_pool": self.engine.character_pool}
