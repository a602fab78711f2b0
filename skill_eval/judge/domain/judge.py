"""Judge Protocol — structural interface for all judge implementations."""

from typing import Protocol

from skill_eval.judge.domain.assessment import JudgeAssessment
from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial


class Judge(Protocol):
    """Structural interface satisfied by any judge implementation.

    Each instance is constructed once per (task, trial) evaluation. assess()
    must always return an assessment; failures degrade to local fallbacks.
    """

    async def assess(self, task: EvalTask, trial: Trial) -> JudgeAssessment: ...
