"""JudgeAssessment — structured output from a single judge evaluation."""

from enum import StrEnum
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from skill_eval.scoring.domain.failure import FailureCategory


class JudgeSource(StrEnum):
    """Where an assessment came from: the model, or one of the local fallbacks."""

    MODEL = "model"
    PARSE_FAILURE = "parse_failure"
    HEURISTIC = "heuristic"
    ERRORED_TRIAL = "errored_trial"


class JudgeAssessment(BaseModel):
    """Immutable Pydantic model capturing the qualitative rating of one trial.

    Used as a cross-layer DTO: produced by judge infrastructure, consumed by
    the score merger.
    """

    model_config = ConfigDict(frozen=True)

    discovery: Literal[0, 1]
    adherence: int = Field(ge=1, le=5)
    output_quality: int = Field(ge=1, le=5)
    failure_category: FailureCategory = FailureCategory.NONE
    reasoning: str = ""
    source: JudgeSource = JudgeSource.MODEL
