"""LiteLLMReasoningModel — ReasoningModel implementation backed by LiteLLM."""

import litellm

from skill_eval.judge.infrastructure.errors import JudgeInvocationError

_SYSTEM_PROMPT = (
    "You are a strict, consistent evaluator of AI agent runs. "
    "Answer with a single JSON object and nothing else."
)


class LiteLLMReasoningModel:
    """Sends one completion request per prompt through litellm.acompletion.

    Satisfies the ReasoningModel protocol structurally.
    """

    def __init__(self, model: str, temperature: float = 0.0) -> None:
        self._model = model
        self._temperature = temperature

    @property
    def model(self) -> str:
        return self._model

    async def complete(self, prompt: str) -> str:
        """Return the text content of the model's reply.

        Raises:
            JudgeInvocationError: if the call fails or the reply carries no content.
        """
        try:
            response = await litellm.acompletion(
                model=self._model,
                temperature=self._temperature,
                messages=[
                    {"role": "system", "content": _SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
            )
        except Exception as exc:
            raise JudgeInvocationError(reason=str(exc)) from exc

        content: str | None = response.choices[0].message.content
        if content is None:
            raise JudgeInvocationError(reason="model returned no content")
        return content
