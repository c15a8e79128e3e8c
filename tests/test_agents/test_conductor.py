"""Tests for the agent layer."""

from __future__ import annotations

import pytest

from ga_strings.agents.conductor import ConductorAgent
from ga_strings.agents.evolution import EvolutionAgent
from ga_strings.agents.validator import ValidatorAgent
from ga_strings.ga.engine import EngineState
from ga_strings.ga.errors import ConfigurationError, InvalidTargetError, NotInitializedError
from ga_strings.models.config import CharacterSet, EvolutionConfig
from ga_strings.models.stats import StopReason


class TestValidatorAgent:
    def test_clean_config(self, hello_config):
        report = ValidatorAgent().validate(hello_config)
        assert report.is_compliant
        assert report.violations == []

    def test_invalid_symbols_are_errors(self):
        cfg = EvolutionConfig(target="Hi 2 you!", population_size=10, survival_rate=10)
        report = ValidatorAgent().validate(cfg)
        assert not report.is_compliant
        error = report.violations[0]
        assert error.check_id == "invalid_target_symbols"
        assert error.symbols == ["2", "!"]

    def test_printable_ascii_accepts_symbols(self):
        cfg = EvolutionConfig(
            target="Hi 2 you!",
            population_size=10,
            survival_rate=10,
            character_set=CharacterSet.PRINTABLE_ASCII,
        )
        assert ValidatorAgent().validate(cfg).is_compliant

    def test_warnings(self):
        cfg = EvolutionConfig(
            target="abc", population_size=6000, survival_rate=10, mutation_enabled=False
        )
        report = ValidatorAgent().validate(cfg)
        assert report.is_compliant
        assert {v.check_id for v in report.violations} == {"mutation_disabled", "large_population"}
        assert report.warning_count == 1

    def test_process_dispatch(self, hello_config):
        result = ValidatorAgent().process("validate", {"config": hello_config.model_dump()})
        assert result["validation_report"].is_compliant

    def test_unknown_action(self):
        with pytest.raises(ValueError, match="does not support"):
            ValidatorAgent().process("explode", {})


class TestEvolutionAgent:
    def test_lifecycle(self, fast_config):
        agent = EvolutionAgent()
        out = agent.process("initialize", {"config": fast_config.model_dump()})
        assert out["state"] == EngineState.READY
        assert out["stats"].generation == 0

        out = agent.process("step", {"count": 3})
        assert out["stats"].generation in (1, 2, 3)

        out = agent.process("get_stats", {})
        assert out["stats"].generation == agent.engine.generation

        out = agent.process("reset", {})
        assert out["state"] == EngineState.UNINITIALIZED

    def test_step_without_run(self):
        with pytest.raises(NotInitializedError):
            EvolutionAgent().process("step", {})

    def test_initialize_rejects_invalid_target(self):
        agent = EvolutionAgent()
        with pytest.raises(InvalidTargetError):
            agent.process("initialize", {"config": {"target": "abc?", "population_size": 5}})

    def test_reinitialize_same_config(self, fast_config):
        agent = EvolutionAgent()
        agent.process("initialize", {"config": fast_config.model_dump()})
        agent.process("step", {})
        out = agent.process("initialize", {})
        assert out["stats"].generation == 0

    def test_update_config(self, fast_config):
        agent = EvolutionAgent()
        agent.process("initialize", {"config": fast_config.model_dump()})
        out = agent.process(
            "update_config", {"changes": {"character_set": CharacterSet.ALPHANUMERIC_SPACE}}
        )
        assert len(out["character_pool"]) == 63

    def test_rejected_target_keeps_previous_run(self, fast_config):
        agent = EvolutionAgent()
        agent.process("initialize", {"config": fast_config.model_dump()})
        agent.process("step", {"count": 2})
        previous = agent.engine

        with pytest.raises(InvalidTargetError):
            agent.process("initialize", {"config": {"target": "abc?", "population_size": 5}})

        assert agent.engine is previous
        out = agent.process("initialize", {})
        assert agent.engine.config.target == "GA test"
        assert out["stats"].generation == 0

    def test_invalid_config_raises_configuration_error(self):
        agent = EvolutionAgent()
        with pytest.raises(ConfigurationError):
            agent.process("initialize", {"config": {"target": "abc", "population_size": 1}})
        with pytest.raises(NotInitializedError):
            agent.process("get_stats", {})


class TestConfigErrors:
    @pytest.mark.parametrize(
        ("agent", "action"),
        [
            (ValidatorAgent(), "validate"),
            (ConductorAgent(), "run_full_pipeline"),
            (EvolutionAgent(), "initialize"),
        ],
    )
    def test_out_of_range_config(self, agent, action):
        with pytest.raises(ConfigurationError, match="Invalid evolution configuration"):
            agent.process(action, {"config": {"target": "abc", "population_size": 1}})

    def test_configuration_error_is_value_error(self):
        with pytest.raises(ValueError):
            ValidatorAgent().process("validate", {"config": {"target": ""}})


class TestConductorAgent:
    def test_full_pipeline(self, hello_config):
        result = ConductorAgent().run_full_pipeline(hello_config, max_generations=500)

        assert result["validation_report"].is_compliant
        run_result = result["run_result"]
        assert run_result.stop_reason == StopReason.COMPLETE
        assert run_result.best_dna == "Hello"

    def test_invalid_config_skips_run(self):
        cfg = EvolutionConfig(target="Hello!", population_size=10, survival_rate=20)
        result = ConductorAgent().run_full_pipeline(cfg)
        assert not result["validation_report"].is_compliant
        assert "run_result" not in result

    def test_pipeline_with_progress(self, fast_config):
        generations = []
        ConductorAgent().run_full_pipeline(
            fast_config,
            max_generations=3,
            progress_callback=lambda stats: generations.append(stats.generation),
        )
        assert generations
        assert generations == list(range(1, len(generations) + 1))

    def test_process_dispatch(self, fast_config):
        result = ConductorAgent().process(
            "run_full_pipeline", {"config": fast_config.model_dump(), "max_generations": 2}
        )
        assert "run_result" in result
