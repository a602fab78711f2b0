"""Scoring configuration models."""

from pydantic import BaseModel, Field

from skill_eval.scoring.domain.weights import ScoringWeights


class ScoringConfig(BaseModel, frozen=True):
    deterministic: bool = True
    judge: bool = True
    weights: ScoringWeights = Field(default_factory=ScoringWeights)


class ThresholdsConfig(BaseModel, frozen=True):
    discovery_rate: float = Field(default=0.8, ge=0.0, le=1.0)
    avg_score: float = Field(default=4.0, ge=1.0, le=5.0)


class CiConfig(BaseModel, frozen=True):
    exit_on_failure: bool = True
