"""Tests for config domain models."""

import pytest
from pydantic import ValidationError

from skill_eval.config.domain.config import EvalConfig
from skill_eval.config.domain.judge import JudgeConfig
from skill_eval.config.domain.scoring import ThresholdsConfig


class TestJudgeConfig:
    def test_defaults(self) -> None:
        cfg = JudgeConfig()

        assert cfg.temperature == 0.0
        assert cfg.output_truncation == 5000
        assert cfg.max_concurrent == 4

    def test_negative_temperature_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JudgeConfig(temperature=-0.1)

    def test_zero_concurrency_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JudgeConfig(max_concurrent=0)

    def test_empty_model_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JudgeConfig(model="")


class TestThresholdsConfig:
    def test_discovery_rate_above_one_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ThresholdsConfig(discovery_rate=1.5)

    def test_avg_score_below_scale_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ThresholdsConfig(avg_score=0.5)


class TestEvalConfig:
    def test_empty_mapping_gives_defaults(self) -> None:
        cfg = EvalConfig.model_validate({})

        assert cfg.scoring.deterministic is True
        assert cfg.scoring.weights.adherence == pytest.approx(0.4)
        assert cfg.ci.exit_on_failure is True

    def test_is_frozen(self) -> None:
        cfg = EvalConfig()

        with pytest.raises(ValidationError):
            cfg.judge = JudgeConfig()  # type: ignore[misc]
