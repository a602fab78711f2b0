"""Error types raised while reading CLI input files."""

from skill_eval.core.errors import SkillEvalError


class InputLoadError(SkillEvalError):
    """Raised when a task or trial file cannot be read or is malformed."""

    def __init__(self, reason: str) -> None:
        super().__init__(f"Failed to load input: {reason}")
