"""ToolCallRecord and Trial value objects — one recorded agent execution."""

from pydantic import BaseModel, Field, field_validator


class ToolCallRecord(BaseModel, frozen=True):
    """One tool invocation captured from the agent stream."""

    tool: str
    tool_use_id: str
    timestamp: float
    input: dict[str, object] = Field(default_factory=dict)


class Trial(BaseModel, frozen=True):
    """Immutable record of one execution attempt of an agent against a task.

    Produced by the execution collaborator once the run finishes, successfully
    or not; consumed read-only by the scoring engine.
    """

    task_id: str
    output: str = ""
    tool_calls: list[ToolCallRecord] = Field(default_factory=list)
    capability_activations: list[str] = Field(default_factory=list)
    duration_ms: int = Field(default=0, ge=0)
    cost_usd: float = Field(default=0.0, ge=0.0)
    num_turns: int = Field(default=0, ge=0)
    is_error: bool = False
    error_message: str = ""

    @field_validator("capability_activations")
    @classmethod
    def _dedupe_activations(cls, value: list[str]) -> list[str]:
        # Keep first-seen order.
        return list(dict.fromkeys(value))

    @property
    def invoked_tools(self) -> set[str]:
        return {call.tool for call in self.tool_calls}
