"""CombinedScore and AggregatedScore — the canonical scoring records."""

from pydantic import BaseModel, Field

from skill_eval.judge.domain.assessment import JudgeAssessment
from skill_eval.scoring.domain.deterministic import DeterministicResult
from skill_eval.scoring.domain.failure import FailureCategory


class CombinedScore(BaseModel, frozen=True):
    """Unified verdict for one (task, trial) pair.

    The raw evaluator outputs are kept next to the canonical dimensions so
    reports can show where each number came from.
    """

    task_id: str
    deterministic: DeterministicResult | None = None
    judge: JudgeAssessment | None = None
    discovery: float = Field(ge=0.0, le=1.0)
    adherence: float = Field(ge=1.0, le=5.0)
    output_quality: float = Field(ge=1.0, le=5.0)
    weighted_score: float = Field(ge=0.0, le=1.0)
    failure_category: FailureCategory
    reasoning: str


class AggregatedScore(CombinedScore, frozen=True):
    """Statistical reduction of num_trials CombinedScores for one task."""

    num_trials: int = Field(ge=1)
