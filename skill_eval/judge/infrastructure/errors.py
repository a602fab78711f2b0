"""Error types raised by judge infrastructure."""

from skill_eval.core.errors import SkillEvalError


class JudgeInvocationError(SkillEvalError):
    """Raised when the reasoning model cannot be invoked or returns no content."""

    def __init__(self, reason: str, retriable: bool = False) -> None:
        super().__init__(f"Failed to invoke judge model: {reason}", retriable=retriable)
