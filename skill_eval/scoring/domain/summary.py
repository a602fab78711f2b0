"""Suite-level statistics over scored tasks, and the CI threshold verdict."""

import statistics
from collections import Counter

from pydantic import BaseModel, Field

from skill_eval.scoring.domain.failure import FailureCategory
from skill_eval.scoring.domain.score import AggregatedScore, CombinedScore
from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial


class TaskEvaluation(BaseModel, frozen=True):
    """Final outcome for one task: the aggregated score and its example trial."""

    task: EvalTask
    representative_trial: Trial
    score: AggregatedScore
    trial_scores: list[CombinedScore]


class FailureBreakdown(BaseModel, frozen=True):
    category: FailureCategory
    count: int = Field(ge=0)
    percentage: float = Field(ge=0.0, le=100.0)


class SuiteSummary(BaseModel, frozen=True):
    total_tasks: int
    discovery_accuracy: float
    avg_adherence: float
    avg_output_quality: float
    avg_weighted_score: float
    total_duration_ms: int
    total_cost_usd: float
    failure_breakdown: list[FailureBreakdown]


class ThresholdVerdict(BaseModel, frozen=True):
    passed: bool
    failures: list[str]


def _mean(values: list[float]) -> float:
    return statistics.fmean(values) if values else 0.0


def failure_breakdown(scores: list[CombinedScore]) -> list[FailureBreakdown]:
    """Count each failure category, most frequent first."""
    counts = Counter(score.failure_category for score in scores)
    total = len(scores)
    # most_common() keeps first-seen order among equal counts.
    return [
        FailureBreakdown(
            category=category,
            count=count,
            percentage=100.0 * count / total,
        )
        for category, count in counts.most_common()
    ]


def summarize(evaluations: list[TaskEvaluation]) -> SuiteSummary:
    """Compute suite statistics from per-task aggregated scores."""
    scores: list[CombinedScore] = [e.score for e in evaluations]
    total = len(scores)
    discovered = sum(1 for s in scores if s.discovery >= 1)

    return SuiteSummary(
        total_tasks=total,
        discovery_accuracy=discovered / total if total else 0.0,
        avg_adherence=_mean([s.adherence for s in scores]),
        avg_output_quality=_mean([s.output_quality for s in scores]),
        avg_weighted_score=_mean([s.weighted_score for s in scores]),
        total_duration_ms=sum(e.representative_trial.duration_ms for e in evaluations),
        total_cost_usd=sum(e.representative_trial.cost_usd for e in evaluations),
        failure_breakdown=failure_breakdown(scores),
    )


def check_thresholds(
    summary: SuiteSummary, discovery_rate: float, avg_score: float
) -> ThresholdVerdict:
    """Compare the summary against the configured pass thresholds."""
    failures: list[str] = []
    if summary.discovery_accuracy < discovery_rate:
        failures.append(
            f"Discovery rate {summary.discovery_accuracy * 100:.1f}%"
            f" below threshold {discovery_rate * 100:.0f}%"
        )
    if summary.avg_adherence < avg_score:
        failures.append(
            f"Avg adherence {summary.avg_adherence:.2f} below threshold {avg_score}"
        )
    if summary.avg_output_quality < avg_score:
        failures.append(
            f"Avg output quality {summary.avg_output_quality:.2f}"
            f" below threshold {avg_score}"
        )
    return ThresholdVerdict(passed=not failures, failures=failures)
