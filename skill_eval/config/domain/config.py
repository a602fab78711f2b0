"""Top-level EvalConfig aggregate — the root configuration object."""

from pydantic import BaseModel, Field

from skill_eval.config.domain.judge import JudgeConfig
from skill_eval.config.domain.scoring import CiConfig, ScoringConfig, ThresholdsConfig


class EvalConfig(BaseModel, frozen=True):
    """Root configuration aggregate for a skill-eval scoring run.

    Every section is optional; an empty config file yields the defaults.
    """

    judge: JudgeConfig = Field(default_factory=JudgeConfig)
    scoring: ScoringConfig = Field(default_factory=ScoringConfig)
    thresholds: ThresholdsConfig = Field(default_factory=ThresholdsConfig)
    ci: CiConfig = Field(default_factory=CiConfig)
