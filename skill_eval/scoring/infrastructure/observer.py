"""StructlogScoringObserver — production observer that delegates to structlog."""

import structlog


class StructlogScoringObserver:
    """Logs scoring domain events to structlog.

    Does NOT inherit from ScoringObserver (structural typing via Protocol).
    """

    def __init__(self) -> None:
        self._log = structlog.get_logger()

    def scoring_started(self, total_tasks: int, total_trials: int) -> None:
        self._log.info(
            "scoring.started",
            total_tasks=total_tasks,
            total_trials=total_trials,
        )

    def scoring_completed(self, total_tasks: int, elapsed_seconds: float) -> None:
        self._log.info(
            "scoring.completed",
            total_tasks=total_tasks,
            elapsed_seconds=round(elapsed_seconds, 2),
        )

    def trial_scored(
        self,
        task_id: str,
        trial_index: int,
        weighted_score: float,
        failure_category: str,
    ) -> None:
        self._log.info(
            "scoring.trial_scored",
            task_id=task_id,
            trial_index=trial_index,
            weighted_score=round(weighted_score, 3),
            failure_category=failure_category,
        )

    def task_aggregated(self, task_id: str, num_trials: int, weighted_score: float) -> None:
        self._log.info(
            "scoring.task_aggregated",
            task_id=task_id,
            num_trials=num_trials,
            weighted_score=round(weighted_score, 3),
        )

    def task_without_trials(self, task_id: str) -> None:
        self._log.error("scoring.task_without_trials", task_id=task_id)

    def trials_without_task(self, task_id: str, num_trials: int) -> None:
        self._log.warning(
            "scoring.trials_without_task",
            task_id=task_id,
            num_trials=num_trials,
        )
