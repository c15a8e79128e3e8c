"""GA-strings MCP Server.

Exposes the string evolution engine as MCP tools so that AI agents can
configure a run, step it and read back statistics via the Model Context
Protocol.

Usage:
    python -m ga_strings.mcp                   # stdio mode
    fastmcp run src/ga_strings/mcp/server.py   # via CLI
"""

from __future__ import annotations

from typing import Any

from fastmcp import FastMCP

from ga_strings.agents.conductor import ConductorAgent
from ga_strings.agents.validator import ValidatorAgent
from ga_strings.ga.engine import EvolutionEngine
from ga_strings.ga.engine import validate_config as _parse_config
from ga_strings.ga.errors import GAStringsError
from ga_strings.models.config import EvolutionConfig
from ga_strings.models.preset import get_preset, list_presets as _all_presets
from ga_strings.models.stats import GenerationStats
from ga_strings.models.validation import ViolationSeverity

# ---------------------------------------------------------------------------
# Server instance
# ---------------------------------------------------------------------------
mcp = FastMCP(
    name="ga-strings",
    instructions="""
    GA-strings evolves random strings toward a target string with a
    genetic algorithm (selection, crossover, mutation).

    Basic flow:
    1. list_presets → pick a ready-made configuration (optional)
    2. validate_config → check the target against the character set
    3. initialize_run → create the initial population
    4. step_run → advance one or more generations
    5. show_population → inspect the best individuals
    6. reset_run → discard the run

    run_until_complete runs a whole configuration headlessly.
    """,
)

# ---------------------------------------------------------------------------
# In-memory run state (per server session)
# ---------------------------------------------------------------------------
_run_state: dict[str, Any] = {}


def _build_config(
    preset: str | None,
    config: dict[str, Any] | None,
) -> EvolutionConfig:
    """Start from a preset (if given) and overlay explicit fields."""
    base: dict[str, Any] = get_preset(preset).config.model_dump() if preset else {}
    return _parse_config({**base, **(config or {})})


def _stats_summary(stats: GenerationStats) -> dict[str, Any]:
    return {
        "generation": stats.generation,
        "best_dna": stats.best_individual.dna,
        "best_fitness": stats.best_individual.fitness,
        "average_fitness": round(stats.average_fitness, 3),
        "diversity": round(stats.diversity, 1),
        "is_complete": stats.is_complete,
        "is_stagnant": stats.is_stagnant,
        "generations_since_improvement": stats.generations_since_improvement,
    }


def _current_engine() -> EvolutionEngine | None:
    return _run_state.get("engine")


def _no_run() -> dict[str, Any]:
    return {"status": "error", "message": "No active run. Call initialize_run first."}


# ---------------------------------------------------------------------------
# Tool 1: list_presets
# ---------------------------------------------------------------------------
@mcp.tool
def list_presets() -> dict[str, Any]:
    """List the built-in run presets.

    Returns:
        Preset names with their target, population and strategy
    """
    return {
        "status": "ok",
        "presets": [
            {
                "name": p.name,
                "target": p.config.target,
                "population_size": p.config.population_size,
                "survival_rate": p.config.survival_rate,
                "character_set": p.config.character_set.value,
                "selection_strategy": p.config.selection_strategy.value,
                "mutation_enabled": p.config.mutation_enabled,
                "mutation_rate": p.config.mutation_rate,
                "step_delay_ms": p.step_delay_ms,
            }
            for p in _all_presets()
        ],
    }


# ---------------------------------------------------------------------------
# Tool 2: validate_config
# ---------------------------------------------------------------------------
@mcp.tool
def validate_config(
    preset: str | None = None,
    config: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Validate a run configuration without starting it.

    Args:
        preset: Optional preset name to start from
        config: Fields overriding the preset, e.g.
            {"target": "Hello", "population_size": 200, "survival_rate": 20,
             "mutation_enabled": true, "mutation_rate": 0.01,
             "character_set": "letters-space", "selection_strategy": "elitism"}

    Returns:
        Compliance flag and the list of findings
    """
    try:
        cfg = _build_config(preset, config)
    except (KeyError, GAStringsError) as e:
        return {"status": "error", "message": str(e)}

    report = ValidatorAgent().validate(cfg)
    return {
        "status": "ok",
        "is_compliant": report.is_compliant,
        "character_pool": report.character_pool,
        "violations": [
            {"check": v.check_id, "message": v.message, "severity": v.severity.value}
            for v in report.violations
        ],
    }


# ---------------------------------------------------------------------------
# Tool 3: initialize_run
# ---------------------------------------------------------------------------
@mcp.tool
def initialize_run(
    preset: str | None = None,
    config: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """Create a new run and its random initial population.

    Args:
        preset: Optional preset name to start from
        config: Fields overriding the preset (see validate_config)

    Returns:
        Statistics of generation 0
    """
    try:
        engine = EvolutionEngine(_build_config(preset, config))
        engine.check_target()
    except (KeyError, GAStringsError) as e:
        return {"status": "error", "message": str(e)}

    engine.initialize()
    _run_state["engine"] = engine
    return {"status": "ok", "state": engine.state.value, **_stats_summary(engine.get_stats())}


# ---------------------------------------------------------------------------
# Tool 4: step_run
# ---------------------------------------------------------------------------
@mcp.tool
def step_run(generations: int = 1) -> dict[str, Any]:
    """Advance the active run.

    Args:
        generations: Number of generations to advance (stops early on completion)

    Returns:
        Statistics after the last generation
    """
    engine = _current_engine()
    if engine is None:
        return _no_run()

    for _ in range(max(1, generations)):
        stats = engine.step()
        if stats.is_complete:
            break
    return {"status": "ok", "state": engine.state.value, **_stats_summary(stats)}


# ---------------------------------------------------------------------------
# Tool 5: get_run_stats
# ---------------------------------------------------------------------------
@mcp.tool
def get_run_stats() -> dict[str, Any]:
    """Statistics for the current generation of the active run."""
    engine = _current_engine()
    if engine is None:
        return _no_run()
    return {
        "status": "ok",
        "state": engine.state.value,
        "best_fitness_history": list(engine.best_fitness_history),
        **_stats_summary(engine.get_stats()),
    }


# ---------------------------------------------------------------------------
# Tool 6: show_population
# ---------------------------------------------------------------------------
@mcp.tool
def show_population(limit: int = 10) -> dict[str, Any]:
    """List the best individuals of the active run.

    Args:
        limit: Maximum number of individuals to return

    Returns:
        Individuals ranked by fitness with match percentage
    """
    engine = _current_engine()
    if engine is None:
        return _no_run()
    return {
        "status": "ok",
        "generation": engine.generation,
        "individuals": [r.model_dump() for r in engine.ranked_population(limit=limit)],
    }


# ---------------------------------------------------------------------------
# Tool 7: reset_run
# ---------------------------------------------------------------------------
@mcp.tool
def reset_run() -> dict[str, Any]:
    """Discard the active run."""
    engine = _run_state.pop("engine", None)
    if engine is not None:
        engine.reset()
    return {"status": "ok", "state": "uninitialized"}


# ---------------------------------------------------------------------------
# Tool 8: run_until_complete
# ---------------------------------------------------------------------------
@mcp.tool
def run_until_complete(
    preset: str | None = None,
    config: dict[str, Any] | None = None,
    max_generations: int = 1000,
    stop_on_stagnation: bool = False,
) -> dict[str, Any]:
    """Run a configuration headlessly until it completes or a limit is hit.

    Args:
        preset: Optional preset name to start from
        config: Fields overriding the preset (see validate_config)
        max_generations: Upper bound on generations
        stop_on_stagnation: Stop once the best fitness has not improved for 50 generations

    Returns:
        Stop reason, final statistics and the best-fitness history
    """
    try:
        cfg = _build_config(preset, config)
    except (KeyError, GAStringsError) as e:
        return {"status": "error", "message": str(e)}

    result = ConductorAgent().run_full_pipeline(
        cfg,
        max_generations=max(1, max_generations),
        stop_on_stagnation=stop_on_stagnation,
    )
    report = result["validation_report"]
    if "run_result" not in result:
        return {
            "status": "error",
            "message": " / ".join(v.message for v in report.violations if v.severity == ViolationSeverity.ERROR),
        }

    run_result = result["run_result"]
    return {
        "status": "ok",
        "stop_reason": run_result.stop_reason.value,
        "best_fitness_history": run_result.best_fitness_history,
        **_stats_summary(run_result.final_stats),
    }


if __name__ == "__main__":
    mcp.run()
