"""Structlog implementation of the JudgeObserver port."""

import structlog


class StructlogJudgeObserver:
    """Delegates judge domain events to structlog.

    Satisfies the JudgeObserver protocol structurally.
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def judge_assessment_started(self, task_id: str, trial_index: int, model: str) -> None:
        self._log.info(
            "judge.assessment_started",
            task_id=task_id,
            trial_index=trial_index,
            model=model,
        )

    def judge_assessment_completed(
        self, task_id: str, trial_index: int, duration_ms: int
    ) -> None:
        self._log.info(
            "judge.assessment_completed",
            task_id=task_id,
            trial_index=trial_index,
            duration_ms=duration_ms,
        )

    def judge_assessment_skipped(self, task_id: str, trial_index: int, reason: str) -> None:
        self._log.info(
            "judge.assessment_skipped",
            task_id=task_id,
            trial_index=trial_index,
            reason=reason,
        )

    def judge_parse_failed(self, task_id: str, trial_index: int, reason: str) -> None:
        self._log.warning(
            "judge.parse_failed",
            task_id=task_id,
            trial_index=trial_index,
            reason=reason,
        )

    def judge_invocation_failed(self, task_id: str, trial_index: int, reason: str) -> None:
        self._log.error(
            "judge.invocation_failed",
            task_id=task_id,
            trial_index=trial_index,
            reason=reason,
        )

    def judge_high_temperature_warned(
        self, task_id: str, trial_index: int, temperature: float
    ) -> None:
        self._log.warning(
            "judge.high_temperature_warned",
            task_id=task_id,
            trial_index=trial_index,
            temperature=temperature,
        )
