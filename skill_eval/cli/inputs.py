"""Task and trial file readers for the CLI."""

import json
from pathlib import Path

from pydantic import TypeAdapter, ValidationError

from skill_eval.cli.errors import InputLoadError
from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial

_TASKS_ADAPTER = TypeAdapter(list[EvalTask])


def load_tasks(path: Path) -> list[EvalTask]:
    """Read a JSON file holding a list of tasks, or an object with a "tasks" list.

    Raises:
        InputLoadError: if the file is missing, not UTF-8, not JSON, or fails validation.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise InputLoadError(f"task file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise InputLoadError(f"task file is not valid UTF-8: {path}") from exc
    except json.JSONDecodeError as exc:
        raise InputLoadError(f"task file is not valid JSON: {exc}") from exc

    if isinstance(data, dict) and "tasks" in data:
        data = data["tasks"]
    try:
        return _TASKS_ADAPTER.validate_python(data)
    except ValidationError as exc:
        raise InputLoadError(f"invalid task file {path}: {exc}") from exc


def load_trials(path: Path) -> list[Trial]:
    """Read a JSONL file with one trial per line.

    Collects ALL per-line errors before raising a single InputLoadError.
    """
    try:
        with open(path, encoding="utf-8") as fh:
            lines = fh.readlines()
    except FileNotFoundError as exc:
        raise InputLoadError(f"trial file not found: {path}") from exc
    except UnicodeDecodeError as exc:
        raise InputLoadError(f"trial file is not valid UTF-8: {path}") from exc

    trials: list[Trial] = []
    errors: list[str] = []
    for index, line in enumerate(lines, start=1):
        if not line.strip():
            continue
        try:
            trials.append(Trial.model_validate_json(line))
        except ValidationError as exc:
            errors.append(f"line {index}: {exc.error_count()} validation error(s)")

    if errors:
        raise InputLoadError("; ".join(errors))
    return trials
