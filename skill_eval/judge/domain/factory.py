"""JudgeFactory Protocol — structural interface for constructing Judge instances."""

from typing import Protocol

from skill_eval.judge.domain.judge import Judge


class JudgeFactory(Protocol):
    """Constructs a new Judge instance for a given (task, trial) pair."""

    def create(
        self,
        task_id: str,
        trial_index: int,
    ) -> Judge: ...
