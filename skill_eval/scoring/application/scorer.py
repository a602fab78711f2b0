"""TaskScorer — orchestrates deterministic checks, judging, merging and aggregation."""

import asyncio
import time

from skill_eval.config.domain.config import EvalConfig
from skill_eval.judge.domain.assessment import JudgeAssessment
from skill_eval.judge.domain.factory import JudgeFactory
from skill_eval.scoring.application.errors import NoTrialsError
from skill_eval.scoring.domain.aggregate import aggregate_trials
from skill_eval.scoring.domain.deterministic import (
    DeterministicResult,
    evaluate_deterministic,
)
from skill_eval.scoring.domain.merge import merge_scores
from skill_eval.scoring.domain.observer import ScoringObserver
from skill_eval.scoring.domain.score import CombinedScore
from skill_eval.scoring.domain.summary import TaskEvaluation
from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial

_MISSING_TRIALS_MESSAGE = "no trials were recorded for this task"


class TaskScorer:
    """Scores trials against their tasks and reduces repeated trials per task.

    The scorer holds no infrastructure of its own: judging goes through the
    injected factory, so a fake factory can stand in during tests. Passing
    judge_factory=None scores with deterministic checks only.

    Judge calls for independent trials run concurrently, at most
    config.judge.max_concurrent at a time. Nothing is retried.
    """

    def __init__(
        self,
        config: EvalConfig,
        judge_factory: JudgeFactory | None,
        observer: ScoringObserver,
    ) -> None:
        self._config = config
        self._judge_factory = judge_factory
        self._observer = observer
        self._judge_slots = asyncio.Semaphore(config.judge.max_concurrent)

    async def score_trial(self, task: EvalTask, trial: Trial, trial_index: int) -> CombinedScore:
        """Run every enabled evaluator on one trial and merge their output."""
        det: DeterministicResult | None = None
        if self._config.scoring.deterministic:
            det = evaluate_deterministic(task=task, trial=trial)

        judge_assessment: JudgeAssessment | None = None
        judge_factory = self._judge_factory_for(task)
        if judge_factory is not None:
            judge = judge_factory.create(task_id=task.id, trial_index=trial_index)
            async with self._judge_slots:
                judge_assessment = await judge.assess(task=task, trial=trial)

        score = merge_scores(
            task_id=task.id,
            det=det,
            judge=judge_assessment,
            weights=self._config.scoring.weights.with_criteria(task.criteria),
            is_negative_test=task.is_negative_test,
        )
        self._observer.trial_scored(
            task_id=task.id,
            trial_index=trial_index,
            weighted_score=score.weighted_score,
            failure_category=score.failure_category.value,
        )
        return score

    async def score_task(self, task: EvalTask, trials: list[Trial]) -> TaskEvaluation:
        """Score all trials of one task concurrently, then aggregate them.

        Raises:
            NoTrialsError: if trials is empty.
        """
        if not trials:
            raise NoTrialsError(task_id=task.id)

        scores: list[CombinedScore | None] = [None] * len(trials)

        async def _score_into(index: int, trial: Trial) -> None:
            scores[index] = await self.score_trial(task=task, trial=trial, trial_index=index)

        async with asyncio.TaskGroup() as tg:
            for index, trial in enumerate(trials):
                tg.create_task(_score_into(index, trial))

        trial_scores = [score for score in scores if score is not None]
        representative, aggregated = aggregate_trials(
            task=task, trials=trials, scores=trial_scores
        )
        self._observer.task_aggregated(
            task_id=task.id,
            num_trials=aggregated.num_trials,
            weighted_score=aggregated.weighted_score,
        )
        return TaskEvaluation(
            task=task,
            representative_trial=representative,
            score=aggregated,
            trial_scores=trial_scores,
        )

    async def score_suite(
        self, tasks: list[EvalTask], trials: list[Trial]
    ) -> list[TaskEvaluation]:
        """Score every task in the suite, in task order.

        Trials are matched to tasks by task_id, keeping their relative order.
        A task with no trials gets an agent_error evaluation built from a
        synthetic errored trial, so every task receives exactly one result.
        """
        by_task: dict[str, list[Trial]] = {task.id: [] for task in tasks}
        orphans: dict[str, int] = {}
        for trial in trials:
            if trial.task_id in by_task:
                by_task[trial.task_id].append(trial)
            else:
                orphans[trial.task_id] = orphans.get(trial.task_id, 0) + 1

        for task_id, count in orphans.items():
            self._observer.trials_without_task(task_id=task_id, num_trials=count)

        self._observer.scoring_started(
            total_tasks=len(tasks),
            total_trials=sum(len(group) for group in by_task.values()),
        )
        started_at = time.monotonic()

        async with asyncio.TaskGroup() as tg:
            pending = [
                tg.create_task(self.score_task(task=task, trials=self._trials_for(task, by_task)))
                for task in tasks
            ]

        self._observer.scoring_completed(
            total_tasks=len(tasks),
            elapsed_seconds=time.monotonic() - started_at,
        )
        return [job.result() for job in pending]

    def _trials_for(self, task: EvalTask, by_task: dict[str, list[Trial]]) -> list[Trial]:
        group = by_task[task.id]
        if group:
            return group
        self._observer.task_without_trials(task_id=task.id)
        return [
            Trial(task_id=task.id, is_error=True, error_message=_MISSING_TRIALS_MESSAGE)
        ]

    def _judge_factory_for(self, task: EvalTask) -> JudgeFactory | None:
        # Tasks without criteria give the judge nothing to grade against.
        if not self._config.scoring.judge or not task.criteria:
            return None
        return self._judge_factory
