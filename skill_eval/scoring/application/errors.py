"""Error types raised by the scoring application layer."""

from skill_eval.core.errors import SkillEvalError


class NoTrialsError(SkillEvalError):
    """Raised when a task is handed to the scorer with zero trials."""

    def __init__(self, task_id: str) -> None:
        super().__init__(f"Failed to score task '{task_id}': no trials were provided")
