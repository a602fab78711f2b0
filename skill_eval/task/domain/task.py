"""EvalTask and its parts — one evaluation task as handed over by the task parser."""

from typing import Literal, TypeAlias

from pydantic import BaseModel, Field

NO_CAPABILITY = "none"

Dimension: TypeAlias = Literal["discovery", "adherence", "output"]


class EvalCriterion(BaseModel, frozen=True):
    """One weighted scoring criterion for a task."""

    dimension: Dimension
    weight: float = Field(ge=0.0)
    description: str


class DeterministicSpec(BaseModel, frozen=True):
    """Evidence-only checks to run against a trial.

    A check left as None is not evaluated.
    """

    expect_activation: bool
    expect_marker: str | None = None
    required_tools: frozenset[str] | None = None
    forbidden_tools: frozenset[str] | None = None


class EvalTask(BaseModel, frozen=True):
    """Immutable value object describing a single evaluation task.

    Criteria weights are expected to sum to roughly 1; that is validated by
    whoever parses the task file, not here.
    """

    id: str = Field(min_length=1)
    prompt: str
    expected_capability: str = NO_CAPABILITY
    criteria: list[EvalCriterion] = Field(default_factory=list)
    checklist: list[str] = Field(default_factory=list)
    deterministic: DeterministicSpec | None = None

    @property
    def is_negative_test(self) -> bool:
        """True when the agent is expected NOT to activate any capability."""
        return self.expected_capability == NO_CAPABILITY
