"""CLI entrypoint for skill-eval — typer app with a `score` command."""

import asyncio
import json
import sys
from pathlib import Path

import structlog
import typer

from skill_eval.cli.inputs import load_tasks, load_trials
from skill_eval.config.infrastructure.observer import StructlogConfigObserver
from skill_eval.config.infrastructure.yaml_loader import YamlConfigLoader
from skill_eval.core.errors import SkillEvalError
from skill_eval.judge.infrastructure.factory import LiteLLMJudgeFactory
from skill_eval.judge.infrastructure.observer import StructlogJudgeObserver
from skill_eval.scoring.application.scorer import TaskScorer
from skill_eval.scoring.domain.summary import check_thresholds, summarize
from skill_eval.scoring.infrastructure.observer import StructlogScoringObserver

app = typer.Typer(add_completion=False)


def _write_output(payload: dict[str, object], output_path: Path | None) -> None:
    """Write the JSON result to output_path, or to stdout when no path is given."""
    text = json.dumps(payload, indent=2)
    if output_path is None:
        typer.echo(text)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(text + "\n", encoding="utf-8")


def _configure_structlog(log_format: str) -> None:
    """Configure structlog to write to stderr; stdout carries the JSON result."""
    if log_format == "console":
        renderer: structlog.types.Processor = structlog.dev.ConsoleRenderer()
    elif log_format == "json":
        renderer = structlog.processors.JSONRenderer()
    else:
        typer.echo(f"Invalid log format: {log_format!r}. Must be 'console' or 'json'.")
        raise typer.Exit(code=1)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            renderer,
        ],
        wrapper_class=structlog.make_filtering_bound_logger(0),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
    )


@app.command()
def score(
    tasks_path: Path = typer.Argument(..., help="JSON file with the task definitions"),
    trials_path: Path = typer.Argument(..., help="JSONL file with one trial per line"),
    config_path: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Path to eval config YAML (defaults and EVAL_* env vars otherwise)",
    ),
    output_path: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the JSON result to this file instead of stdout",
    ),
    no_judge: bool = typer.Option(False, "--no-judge", help="Skip the model judge"),
    no_deterministic: bool = typer.Option(
        False, "--no-deterministic", help="Skip deterministic checks"
    ),
    log_format: str = typer.Option(
        "console",
        "--log-format",
        help="Log format: 'console' or 'json'",
    ),
) -> None:
    """Score recorded trials against their tasks and print the results as JSON."""
    try:
        _configure_structlog(log_format=log_format)

        config = YamlConfigLoader(observer=StructlogConfigObserver()).load(path=config_path)
        if no_judge or no_deterministic:
            scoring = config.scoring.model_copy(
                update={
                    "judge": config.scoring.judge and not no_judge,
                    "deterministic": config.scoring.deterministic and not no_deterministic,
                }
            )
            config = config.model_copy(update={"scoring": scoring})

        tasks = load_tasks(tasks_path)
        trials = load_trials(trials_path)

        judge_factory = (
            LiteLLMJudgeFactory(config=config.judge, observer=StructlogJudgeObserver())
            if config.scoring.judge
            else None
        )
        scorer = TaskScorer(
            config=config,
            judge_factory=judge_factory,
            observer=StructlogScoringObserver(),
        )
        evaluations = asyncio.run(scorer.score_suite(tasks=tasks, trials=trials))

        summary = summarize(evaluations)
        verdict = check_thresholds(
            summary=summary,
            discovery_rate=config.thresholds.discovery_rate,
            avg_score=config.thresholds.avg_score,
        )
        payload = {
            "summary": summary.model_dump(mode="json"),
            "verdict": verdict.model_dump(mode="json"),
            "tasks": [evaluation.model_dump(mode="json") for evaluation in evaluations],
        }
        _write_output(payload=payload, output_path=output_path)

    except KeyboardInterrupt:
        typer.echo("Scoring interrupted.", err=True)
        sys.exit(1)
    except SkillEvalError as exc:
        typer.echo(str(exc), err=True)
        sys.exit(1)

    if not verdict.passed and config.ci.exit_on_failure:
        for failure in verdict.failures:
            typer.echo(failure, err=True)
        sys.exit(1)


if __name__ == "__main__":
    app()
