"""YAML config loader — parses, interpolates env vars, applies EVAL_* overrides, validates."""

import os
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from skill_eval.config.domain.config import EvalConfig
from skill_eval.config.domain.observer import ConfigObserver
from skill_eval.config.infrastructure.env_interpolation import (
    collect_missing_vars,
    interpolate,
)
from skill_eval.config.infrastructure.errors import (
    ConfigLoadError,
    ConfigValidationError,
    MissingEnvVarsError,
)

# Environment variable -> (section, field). Values stay strings; pydantic coerces.
ENV_OVERRIDES: dict[str, tuple[str, str]] = {
    "EVAL_JUDGE_MODEL": ("judge", "model"),
    "EVAL_JUDGE_TEMPERATURE": ("judge", "temperature"),
    "EVAL_OUTPUT_TRUNCATION": ("judge", "output_truncation"),
    "EVAL_JUDGE_MAX_CONCURRENT": ("judge", "max_concurrent"),
    "EVAL_DISCOVERY_THRESHOLD": ("thresholds", "discovery_rate"),
    "EVAL_SCORE_THRESHOLD": ("thresholds", "avg_score"),
    "EVAL_EXIT_ON_FAILURE": ("ci", "exit_on_failure"),
}


class YamlConfigLoader:
    """Builds an EvalConfig from defaults, an optional YAML file and the environment."""

    def __init__(self, observer: ConfigObserver) -> None:
        self._observer = observer

    def load(self, path: Path | None = None) -> EvalConfig:
        """
        Load and validate the config. Precedence: defaults < file < EVAL_* env vars.

        With no path, only defaults and the environment are used.

        Raises:
            ConfigLoadError: if path is given but missing, or is not valid YAML.
            MissingEnvVarsError: if any ${ENV_VAR} references are unset (all collected first).
            ConfigValidationError: if the merged data violates the schema.
        """
        raw = _parse_yaml(path=path) if path is not None else {}
        _check_missing_env_vars(raw=raw)
        interpolated = interpolate(raw)
        overridden = _apply_env_overrides(interpolated=interpolated, observer=self._observer)
        cfg = _build_config(resolved=overridden)
        _emit_warnings(cfg=cfg, observer=self._observer)
        self._observer.config_loaded(
            path=str(path) if path is not None else "<defaults>",
            judge_model=cfg.judge.model,
        )
        return cfg


def _parse_yaml(path: Path) -> dict[str, Any]:
    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh)
    except FileNotFoundError as exc:
        raise ConfigLoadError(path=path) from exc
    except yaml.YAMLError as exc:
        raise ConfigLoadError(path=path, reason=f"invalid YAML ({exc})") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigLoadError(path=path, reason="top level must be a mapping")
    return data


def _check_missing_env_vars(raw: Any) -> None:
    """Raise MissingEnvVarsError if any ${ENV_VAR} references in raw are unset."""
    missing = collect_missing_vars(raw)
    if missing:
        raise MissingEnvVarsError(missing)


def _apply_env_overrides(interpolated: Any, observer: ConfigObserver) -> dict[str, Any]:
    """Return a copy of the raw config with every set EVAL_* variable written in."""
    merged: dict[str, Any] = dict(interpolated)
    for variable, (section, field) in ENV_OVERRIDES.items():
        value = os.environ.get(variable)
        if value is None or value == "":
            continue
        section_data = merged.get(section) or {}
        if not isinstance(section_data, dict):
            raise ConfigValidationError(f"section '{section}' must be a mapping")
        merged[section] = {**section_data, field: value}
        observer.config_env_override_applied(variable=variable)
    return merged


def _build_config(resolved: Any) -> EvalConfig:
    try:
        return EvalConfig.model_validate(resolved)
    except ValidationError as exc:
        raise ConfigValidationError(str(exc)) from exc


def _emit_warnings(cfg: EvalConfig, observer: ConfigObserver) -> None:
    if cfg.judge.temperature > 0.0:
        observer.config_judge_temperature_warning(cfg.judge.temperature)
