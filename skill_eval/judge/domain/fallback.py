"""Local assessments used when the judge cannot, or should not, ask the model."""

from skill_eval.judge.domain.assessment import JudgeAssessment, JudgeSource
from skill_eval.scoring.domain.failure import FailureCategory
from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial

PARSE_FAILURE_ASSESSMENT = JudgeAssessment(
    discovery=0,
    adherence=1,
    output_quality=1,
    failure_category=FailureCategory.AGENT_ERROR,
    reasoning="parse failure",
    source=JudgeSource.PARSE_FAILURE,
)


def errored_trial_assessment(trial: Trial) -> JudgeAssessment:
    """Fixed minimal assessment for a trial that crashed during execution."""
    return JudgeAssessment(
        discovery=0,
        adherence=1,
        output_quality=1,
        failure_category=FailureCategory.AGENT_ERROR,
        reasoning=f"Trial failed with error: {trial.error_message or 'unknown error'}",
        source=JudgeSource.ERRORED_TRIAL,
    )


def heuristic_assessment(task: EvalTask, trial: Trial, cause: str) -> JudgeAssessment:
    """Evidence-only assessment for when the reasoning model is unavailable.

    Discovery is read from the trial's activation list; adherence and output
    quality are neutral because nothing can grade them without the model.
    """
    if task.is_negative_test:
        discovered = not trial.capability_activations
    else:
        discovered = task.expected_capability in trial.capability_activations

    return JudgeAssessment(
        discovery=1 if discovered else 0,
        adherence=3,
        output_quality=3,
        failure_category=(
            FailureCategory.NONE if discovered else FailureCategory.DISCOVERY_FAILURE
        ),
        reasoning=f"Heuristic fallback scoring (judge error: {cause})",
        source=JudgeSource.HEURISTIC,
    )
