"""LiteLLMJudgeFactory — constructs SkillJudge instances backed by LiteLLM."""

import litellm

from skill_eval.config.domain.judge import JudgeConfig
from skill_eval.judge.domain.judge import Judge
from skill_eval.judge.domain.observer import JudgeObserver
from skill_eval.judge.infrastructure.litellm import LiteLLMReasoningModel
from skill_eval.judge.infrastructure.skill_judge import SkillJudge


class LiteLLMJudgeFactory:
    """Creates SkillJudge instances configured for a given task and trial.

    All judges share one LiteLLMReasoningModel; it holds no per-call state.
    """

    def __init__(self, config: JudgeConfig, observer: JudgeObserver) -> None:
        litellm.suppress_debug_info = True
        self._config = config
        self._observer = observer
        self._reasoning_model = LiteLLMReasoningModel(
            model=config.model, temperature=config.temperature
        )

    def create(
        self,
        task_id: str,
        trial_index: int,
    ) -> Judge:
        """Construct a new SkillJudge for the given task and trial."""
        return SkillJudge(
            config=self._config,
            reasoning_model=self._reasoning_model,
            task_id=task_id,
            trial_index=trial_index,
            observer=self._observer,
        )
