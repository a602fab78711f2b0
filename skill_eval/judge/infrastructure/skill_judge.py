"""SkillJudge — judge implementation that rates a trial through a ReasoningModel."""

import time

from pydantic import ValidationError

from skill_eval.config.domain.judge import JudgeConfig
from skill_eval.judge.domain.assessment import JudgeAssessment, JudgeSource
from skill_eval.judge.domain.fallback import (
    PARSE_FAILURE_ASSESSMENT,
    errored_trial_assessment,
    heuristic_assessment,
)
from skill_eval.judge.domain.observer import JudgeObserver
from skill_eval.judge.domain.reasoning import ReasoningModel
from skill_eval.judge.infrastructure.parsing import JudgeResponse, extract_json_object
from skill_eval.judge.infrastructure.prompt import build_judge_prompt
from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial


class SkillJudge:
    """Judge that asks a reasoning model for a discovery / adherence / output rating.

    One instance is constructed per (task, trial) evaluation. The task id and
    trial index are injected at construction time so that observer events
    carry full context without polluting the assess() signature.

    assess() never raises: an errored trial, an unparseable reply and a failed
    model call each map to a local fallback assessment.
    """

    def __init__(
        self,
        config: JudgeConfig,
        reasoning_model: ReasoningModel,
        task_id: str,
        trial_index: int,
        observer: JudgeObserver,
    ) -> None:
        self._config = config
        self._reasoning_model = reasoning_model
        self._task_id = task_id
        self._trial_index = trial_index
        self._observer = observer

        if config.temperature > 0.0:
            self._observer.judge_high_temperature_warned(
                task_id=task_id,
                trial_index=trial_index,
                temperature=config.temperature,
            )

    async def assess(self, task: EvalTask, trial: Trial) -> JudgeAssessment:
        """Rate one trial against its task."""
        if trial.is_error:
            self._observer.judge_assessment_skipped(
                task_id=self._task_id,
                trial_index=self._trial_index,
                reason="trial errored",
            )
            return errored_trial_assessment(trial)

        prompt = build_judge_prompt(
            task=task, trial=trial, output_truncation=self._config.output_truncation
        )

        self._observer.judge_assessment_started(
            task_id=self._task_id,
            trial_index=self._trial_index,
            model=self._reasoning_model.model,
        )
        start = time.monotonic()
        try:
            raw_content = await self._reasoning_model.complete(prompt)
        except Exception as exc:
            reason = str(exc) or type(exc).__name__
            self._observer.judge_invocation_failed(
                task_id=self._task_id,
                trial_index=self._trial_index,
                reason=reason,
            )
            return heuristic_assessment(task=task, trial=trial, cause=reason)

        duration_ms = int((time.monotonic() - start) * 1000)
        assessment = self._parse(raw_content)
        if assessment.source is JudgeSource.MODEL:
            self._observer.judge_assessment_completed(
                task_id=self._task_id,
                trial_index=self._trial_index,
                duration_ms=duration_ms,
            )
        return assessment

    def _parse(self, raw_content: str) -> JudgeAssessment:
        data = extract_json_object(raw_content)
        if data is None:
            self._observer.judge_parse_failed(
                task_id=self._task_id,
                trial_index=self._trial_index,
                reason="no JSON object in judge response",
            )
            return PARSE_FAILURE_ASSESSMENT

        try:
            response = JudgeResponse.model_validate(data)
        except ValidationError as exc:
            self._observer.judge_parse_failed(
                task_id=self._task_id,
                trial_index=self._trial_index,
                reason=f"invalid judge response: {exc.error_count()} error(s)",
            )
            return PARSE_FAILURE_ASSESSMENT

        return JudgeAssessment(
            discovery=1 if response.discovery else 0,
            adherence=response.adherence,
            output_quality=response.output_quality,
            failure_category=response.failure_category,
            reasoning=response.reasoning,
            source=JudgeSource.MODEL,
        )
