"""Judge prompt construction."""

from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial

_PROMPT_TEMPLATE = """\
You are an expert evaluator for AI agent skills. Score this skill evaluation result.

## Task Information
**Prompt given to agent:** {prompt}

**Expected skill to load:** {expected}

**Criteria:**
{criteria}

**Golden checklist (expected behaviors):**
{checklist}

## Agent Result
**Skills that were loaded:** {activations}

**Agent output:**
{output}

## Scoring Instructions

Score the agent's performance on three dimensions:

1. **Discovery (0 or 1)**: Did the agent load the expected skill "{expected}"?
   - Score 1 if the expected skill was loaded
   - Score 0 if it was not loaded
   - If the expected skill is "none", score 1 if NO skill was loaded, 0 if a \
skill was incorrectly loaded

2. **Adherence (1-5)**: How well did the agent follow the skill's instructions?
   - 5 = Perfectly followed all instructions
   - 4 = Followed most instructions with minor deviations
   - 3 = Followed core instructions but missed some details
   - 2 = Partially followed instructions with significant gaps
   - 1 = Did not follow the skill's instructions

3. **Output Quality (1-5)**: Does the output meet the task requirements?
   - 5 = Excellent output, meets all requirements
   - 4 = Good output with minor issues
   - 3 = Acceptable output, meets basic requirements
   - 2 = Poor output, missing key requirements
   - 1 = Unacceptable output

4. **Failure Category** (if score < 4 on any dimension):
   - "discovery_failure": Agent didn't load the skill when it should have
   - "false_positive": Agent loaded a skill when it should NOT have
   - "instruction_ambiguity": Agent misinterpreted skill instructions
   - "missing_guidance": Skill didn't cover a needed case
   - "agent_error": Agent made a mistake despite clear guidance
   - "none": No significant failure

Respond with a JSON object:
```json
{{
  "discovery": <0 or 1>,
  "adherence": <1-5>,
  "output_quality": <1-5>,
  "failure_category": "<category or none>",
  "reasoning": "<brief explanation of scores>"
}}
```
"""


def build_judge_prompt(task: EvalTask, trial: Trial, output_truncation: int) -> str:
    """Render the judge prompt for one trial, truncating the agent output."""
    criteria = "\n".join(
        f"- **{c.dimension.capitalize()}** (weight {c.weight}): {c.description}"
        for c in task.criteria
    )
    checklist = "\n".join(f"- {item}" for item in task.checklist)
    activations = ", ".join(trial.capability_activations)

    return _PROMPT_TEMPLATE.format(
        prompt=task.prompt,
        expected=task.expected_capability,
        criteria=criteria or "- No specific criteria defined",
        checklist=checklist or "- No checklist defined",
        activations=activations or "None",
        output=trial.output[:output_truncation] or "(no output)",
    )
