"""Observer port for the scoring domain — defines events in domain language."""

from typing import Protocol


class ScoringObserver(Protocol):
    """Observer port emitting structured events while a suite is scored.

    Implementations may log to structlog, record for tests, or emit metrics.
    """

    def scoring_started(self, total_tasks: int, total_trials: int) -> None: ...

    def scoring_completed(self, total_tasks: int, elapsed_seconds: float) -> None: ...

    def trial_scored(
        self,
        task_id: str,
        trial_index: int,
        weighted_score: float,
        failure_category: str,
    ) -> None: ...

    def task_aggregated(
        self, task_id: str, num_trials: int, weighted_score: float
    ) -> None: ...

    def task_without_trials(self, task_id: str) -> None: ...

    def trials_without_task(self, task_id: str, num_trials: int) -> None: ...
