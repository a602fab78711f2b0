"""Deterministic evaluator — evidence-only checks against one recorded trial.

Runs without any model call: activation is read from tool calls (or the
runner's activation list), the marker from the output text, and tool usage
from the tool-call records.
"""

from collections.abc import Callable, Mapping
from typing import TypeAlias

from pydantic import BaseModel, Field

from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import ToolCallRecord, Trial

_ACTIVATION_TOOL = "Skill"

ToolInput: TypeAlias = Mapping[str, object]
NameAccessor: TypeAlias = Callable[[ToolInput], str | None]


class DeterministicResult(BaseModel, frozen=True):
    """Outcome of the deterministic checks for one (task, trial) pair.

    Sub-check fields are None when the check was not requested (or not
    evaluated, as for negative tests and errored trials).
    """

    capability_activated: bool
    capability_name: str | None = None
    marker_found: bool | None = None
    required_tools_satisfied: bool | None = None
    forbidden_tools_violated: bool | None = None
    unexpected_activation: bool = False
    trial_errored: bool = False
    passed: bool
    details: list[str] = Field(default_factory=list)


def _field(key: str) -> NameAccessor:
    def accessor(tool_input: ToolInput) -> str | None:
        value = tool_input.get(key)
        if isinstance(value, str) and value:
            return value
        return None

    return accessor


# Local skill tools send "skill", MCP skill servers use "skill_name" or "name".
_NAME_ACCESSORS: tuple[NameAccessor, ...] = (
    _field("skill"),
    _field("skill_name"),
    _field("name"),
)


def is_activation_tool(tool_name: str) -> bool:
    """Return True if the tool loads a capability (local Skill tool or mcp__*__skill)."""
    if tool_name == _ACTIVATION_TOOL:
        return True
    # Case-sensitive: ReadSkillResource or ListSkills do not load a capability.
    return "skill" in tool_name and "skill-resource" not in tool_name


def extract_capability_name(tool_input: ToolInput) -> str | None:
    """Return the first non-empty capability name found by the ordered accessors."""
    for accessor in _NAME_ACCESSORS:
        name = accessor(tool_input)
        if name is not None:
            return name
    return None


def find_activation(tool_calls: list[ToolCallRecord], activations: list[str]) -> str | None:
    """Return the activated capability name, preferring tool-call evidence."""
    for call in tool_calls:
        if not is_activation_tool(call.tool):
            continue
        name = extract_capability_name(call.input)
        if name is not None:
            return name
    if activations:
        return activations[0]
    return None


def evaluate_deterministic(task: EvalTask, trial: Trial) -> DeterministicResult | None:
    """Run the task's deterministic checks against a trial.

    Returns None when the task defines no deterministic spec. That means the
    checks do not apply, not that they failed.
    """
    spec = task.deterministic
    if spec is None:
        return None

    if trial.is_error:
        return DeterministicResult(
            capability_activated=False,
            trial_errored=True,
            passed=False,
            details=["Trial errored: no activation"],
        )

    details: list[str] = []
    activated_name = find_activation(trial.tool_calls, trial.capability_activations)
    activated = activated_name is not None

    if task.is_negative_test:
        if activated:
            details.append(f"Unexpected activation: {activated_name} (false positive)")
        else:
            details.append("Correctly did not activate any capability")
        return DeterministicResult(
            capability_activated=activated,
            capability_name=activated_name,
            unexpected_activation=activated,
            passed=not activated,
            details=details,
        )

    if not activated:
        details.append("Expected capability activation but none was loaded")
    elif activated_name == task.expected_capability:
        details.append(f"Capability activated correctly: {activated_name}")
    else:
        details.append(
            f"Wrong capability activated: expected '{task.expected_capability}',"
            f" got '{activated_name}'"
        )
        activated = False

    marker_found: bool | None = None
    if spec.expect_marker:
        marker_found = spec.expect_marker.lower() in trial.output.lower()
        if marker_found:
            details.append(f'Marker found: "{spec.expect_marker}"')
        else:
            details.append(f'Marker not found: "{spec.expect_marker}"')

    invoked = trial.invoked_tools

    required_satisfied: bool | None = None
    if spec.required_tools:
        missing = sorted(spec.required_tools - invoked)
        required_satisfied = not missing
        if missing:
            details.append(f"Missing required tool calls: {', '.join(missing)}")
        else:
            details.append(
                f"All required tools called: {', '.join(sorted(spec.required_tools))}"
            )

    forbidden_violated: bool | None = None
    if spec.forbidden_tools:
        violations = sorted(spec.forbidden_tools & invoked)
        forbidden_violated = bool(violations)
        if violations:
            details.append(f"Forbidden tools were called: {', '.join(violations)}")
        else:
            details.append("No forbidden tools called")

    passed = activated
    if marker_found is not None:
        passed = passed and marker_found
    if required_satisfied is not None:
        passed = passed and required_satisfied
    if forbidden_violated is not None:
        passed = passed and not forbidden_violated

    return DeterministicResult(
        capability_activated=activated,
        capability_name=activated_name,
        marker_found=marker_found,
        required_tools_satisfied=required_satisfied,
        forbidden_tools_violated=forbidden_violated,
        passed=passed,
        details=details,
    )
