"""JudgeObserver port — domain events emitted during judge invocations."""

from typing import Protocol


class JudgeObserver(Protocol):
    """Observer port for judge domain events.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def judge_assessment_started(
        self, task_id: str, trial_index: int, model: str
    ) -> None: ...

    def judge_assessment_completed(
        self, task_id: str, trial_index: int, duration_ms: int
    ) -> None: ...

    def judge_assessment_skipped(
        self, task_id: str, trial_index: int, reason: str
    ) -> None: ...

    def judge_parse_failed(self, task_id: str, trial_index: int, reason: str) -> None: ...

    def judge_invocation_failed(
        self, task_id: str, trial_index: int, reason: str
    ) -> None: ...

    def judge_high_temperature_warned(
        self, task_id: str, trial_index: int, temperature: float
    ) -> None: ...
