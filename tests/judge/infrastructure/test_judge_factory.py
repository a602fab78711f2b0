"""Tests for LiteLLMJudgeFactory and StructlogJudgeObserver."""

import json
from unittest.mock import AsyncMock, MagicMock, patch

import openai
from structlog.testing import capture_logs

from skill_eval.config.domain.judge import JudgeConfig
from skill_eval.judge.domain.assessment import JudgeSource
from skill_eval.judge.infrastructure.factory import LiteLLMJudgeFactory
from skill_eval.judge.infrastructure.observer import StructlogJudgeObserver
from skill_eval.judge.infrastructure.skill_judge import SkillJudge
from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial
from tests.judge.fake_observer import FakeJudgeObserver

_ACOMPLETION = "skill_eval.judge.infrastructure.litellm.litellm.acompletion"


def _make_acompletion_response(content: str) -> MagicMock:
    message = MagicMock()
    message.content = content
    choice = MagicMock()
    choice.message = message
    response = MagicMock()
    response.choices = [choice]
    return response


def _task() -> EvalTask:
    return EvalTask(id="greet-1", prompt="Say hello.", expected_capability="greeting")


def _trial() -> Trial:
    return Trial(task_id="greet-1", output="Hello!", capability_activations=["greeting"])


class TestLiteLLMJudgeFactory:
    def test_creates_skill_judge(self) -> None:
        factory = LiteLLMJudgeFactory(config=JudgeConfig(), observer=FakeJudgeObserver())

        judge = factory.create(task_id="greet-1", trial_index=0)

        assert isinstance(judge, SkillJudge)

    def test_each_call_returns_new_judge(self) -> None:
        factory = LiteLLMJudgeFactory(config=JudgeConfig(), observer=FakeJudgeObserver())

        first = factory.create(task_id="greet-1", trial_index=0)
        second = factory.create(task_id="greet-1", trial_index=1)

        assert first is not second

    async def test_judge_calls_configured_model(self) -> None:
        factory = LiteLLMJudgeFactory(
            config=JudgeConfig(model="gpt-4o-mini"), observer=FakeJudgeObserver()
        )
        reply = json.dumps({"discovery": 1, "adherence": 5, "output_quality": 4})
        mock = AsyncMock(return_value=_make_acompletion_response(reply))

        with patch(_ACOMPLETION, new=mock):
            judge = factory.create(task_id="greet-1", trial_index=0)
            assessment = await judge.assess(task=_task(), trial=_trial())

        assert mock.call_args.kwargs["model"] == "gpt-4o-mini"
        assert assessment.output_quality == 4
        assert assessment.source is JudgeSource.MODEL

    async def test_upstream_error_becomes_heuristic(self) -> None:
        observer = FakeJudgeObserver()
        factory = LiteLLMJudgeFactory(config=JudgeConfig(), observer=observer)

        with patch(
            _ACOMPLETION,
            new=AsyncMock(side_effect=openai.APIConnectionError(request=MagicMock())),
        ):
            judge = factory.create(task_id="greet-1", trial_index=0)
            assessment = await judge.assess(task=_task(), trial=_trial())

        assert assessment.source is JudgeSource.HEURISTIC
        assert len(observer.invocation_failures) == 1


class TestStructlogJudgeObserver:
    def test_events_are_logged_with_context(self) -> None:
        observer = StructlogJudgeObserver()

        with capture_logs() as logs:
            observer.judge_assessment_started(task_id="t1", trial_index=2, model="m")
            observer.judge_parse_failed(task_id="t1", trial_index=2, reason="bad")
            observer.judge_invocation_failed(task_id="t1", trial_index=2, reason="down")

        assert [(e["event"], e["log_level"]) for e in logs] == [
            ("judge.assessment_started", "info"),
            ("judge.parse_failed", "warning"),
            ("judge.invocation_failed", "error"),
        ]
        assert logs[0]["model"] == "m"
        assert logs[1]["trial_index"] == 2
