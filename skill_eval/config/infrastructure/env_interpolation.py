"""${ENV_VAR} substitution over the raw YAML tree."""

import os
import re
from collections.abc import Callable
from typing import TypeAlias

_ENV_VAR_PATTERN = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")

RawValue: TypeAlias = (
    str | int | float | bool | None | list["RawValue"] | dict[str, "RawValue"]
)


def _map_strings(data: RawValue, fn: Callable[[str], str]) -> RawValue:
    if isinstance(data, str):
        return fn(data)
    if isinstance(data, list):
        return [_map_strings(item, fn) for item in data]
    if isinstance(data, dict):
        return {key: _map_strings(value, fn) for key, value in data.items()}
    return data


def collect_missing_vars(data: RawValue) -> list[str]:
    """Return every referenced variable that is unset, in first-seen order."""
    missing: list[str] = []

    def record(text: str) -> str:
        for name in _ENV_VAR_PATTERN.findall(text):
            if name not in os.environ and name not in missing:
                missing.append(name)
        return text

    _map_strings(data, record)
    return missing


def interpolate(data: RawValue) -> RawValue:
    """Replace each ${ENV_VAR} with its value.

    Call collect_missing_vars first; an unset variable raises KeyError here.
    """
    return _map_strings(
        data, lambda text: _ENV_VAR_PATTERN.sub(lambda m: os.environ[m.group(1)], text)
    )
