"""Score merger — reconciles deterministic and judge output into one CombinedScore."""

from skill_eval.judge.domain.assessment import JudgeAssessment, JudgeSource
from skill_eval.scoring.domain.deterministic import DeterministicResult
from skill_eval.scoring.domain.failure import FailureCategory
from skill_eval.scoring.domain.score import CombinedScore
from skill_eval.scoring.domain.weights import ScoringWeights, weighted_score

_REASON_SEPARATOR = " | "


def _discovery_from_activation(activated: bool, is_negative_test: bool) -> int:
    # Negative tests: 1 means the agent correctly stayed away from any capability.
    if is_negative_test:
        return 0 if activated else 1
    return 1 if activated else 0


def _reasoning(det: DeterministicResult | None, judge: JudgeAssessment | None) -> str:
    parts: list[str] = []
    if det is not None and det.details:
        parts.append(f"Deterministic: {'; '.join(det.details)}")
    if judge is not None and judge.reasoning:
        parts.append(f"Judge: {judge.reasoning}")
    return _REASON_SEPARATOR.join(parts)


def _trial_errored(det: DeterministicResult | None, judge: JudgeAssessment | None) -> bool:
    if det is not None and det.trial_errored:
        return True
    return judge is not None and judge.source is JudgeSource.ERRORED_TRIAL


def merge_scores(
    task_id: str,
    det: DeterministicResult | None,
    judge: JudgeAssessment | None,
    weights: ScoringWeights,
    is_negative_test: bool,
) -> CombinedScore:
    """Combine zero, one or both evaluator outputs for one trial.

    Deterministic evidence decides discovery; the judge decides adherence and
    output quality. Every call returns a valid score, including when neither
    evaluator ran.
    """
    if det is None and judge is None:
        return CombinedScore(
            task_id=task_id,
            discovery=0,
            adherence=1,
            output_quality=1,
            weighted_score=0.0,
            failure_category=FailureCategory.AGENT_ERROR,
            reasoning="No scoring method available (no deterministic check or judge criteria)",
        )

    if _trial_errored(det, judge):
        return CombinedScore(
            task_id=task_id,
            deterministic=det,
            judge=judge,
            discovery=0,
            adherence=1,
            output_quality=1,
            weighted_score=0.0,
            failure_category=FailureCategory.AGENT_ERROR,
            reasoning=_reasoning(det, judge),
        )

    discovery: float = judge.discovery if judge is not None else 0
    adherence: float = judge.adherence if judge is not None else 1
    output_quality: float = judge.output_quality if judge is not None else 1
    failure_category = (
        judge.failure_category if judge is not None else FailureCategory.NONE
    )

    if det is not None:
        discovery = _discovery_from_activation(det.capability_activated, is_negative_test)
        if judge is None:
            # Binary checks cannot grade quality, only pass or fail.
            adherence = output_quality = 5 if det.passed else 1
        if not is_negative_test and not det.capability_activated:
            failure_category = FailureCategory.DISCOVERY_FAILURE
        if det.unexpected_activation:
            failure_category = FailureCategory.FALSE_POSITIVE

    return CombinedScore(
        task_id=task_id,
        deterministic=det,
        judge=judge,
        discovery=discovery,
        adherence=adherence,
        output_quality=output_quality,
        weighted_score=weighted_score(weights, discovery, adherence, output_quality),
        failure_category=failure_category,
        reasoning=_reasoning(det, judge),
    )
