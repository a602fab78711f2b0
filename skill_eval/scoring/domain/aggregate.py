"""Multi-trial aggregation — reduces N scored trials of one task to a single result."""

import statistics
from collections import Counter

from skill_eval.scoring.domain.failure import FailureCategory
from skill_eval.scoring.domain.score import AggregatedScore, CombinedScore
from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial


def representative_index(scores: list[CombinedScore]) -> int:
    """Index of the score closest to the mean weighted score; lowest index on ties."""
    mean_weighted = statistics.fmean(s.weighted_score for s in scores)
    best_idx = 0
    best_dist = abs(scores[0].weighted_score - mean_weighted)
    for idx, score in enumerate(scores[1:], start=1):
        dist = abs(score.weighted_score - mean_weighted)
        if dist < best_dist:
            best_idx, best_dist = idx, dist
    return best_idx


def modal_category(categories: list[FailureCategory]) -> FailureCategory:
    """Most frequent category; the one seen first wins a tie."""
    # Counter preserves insertion order and max() returns the first maximum.
    counts = Counter(categories)
    return max(counts, key=lambda category: counts[category])


def _merge_trials(trials: list[Trial], rep: Trial) -> Trial:
    """Synthesize one record: the representative's evidence with cumulative spend."""
    activations: dict[str, None] = {}
    for trial in trials:
        activations.update(dict.fromkeys(trial.capability_activations))

    errored = [trial for trial in trials if trial.is_error]
    return rep.model_copy(
        update={
            "duration_ms": sum(t.duration_ms for t in trials),
            "num_turns": sum(t.num_turns for t in trials),
            "cost_usd": sum(t.cost_usd for t in trials),
            "capability_activations": list(activations),
            "is_error": bool(errored),
            "error_message": "; ".join(t.error_message for t in errored),
        }
    )


def aggregate_trials(
    task: EvalTask,
    trials: list[Trial],
    scores: list[CombinedScore],
) -> tuple[Trial, AggregatedScore]:
    """Reduce N trials and their merged scores into one trial and one score.

    scores[i] must be the merged score of trials[i]. With a single trial the
    input is returned unchanged (tagged num_trials=1).

    Raises:
        ValueError: if there are no trials or the two lists differ in length.
    """
    if not trials:
        raise ValueError(f"cannot aggregate task '{task.id}' with zero trials")
    if len(trials) != len(scores):
        raise ValueError(
            f"task '{task.id}' has {len(trials)} trials but {len(scores)} scores"
        )

    num_trials = len(trials)
    if num_trials == 1:
        sole = AggregatedScore.model_validate({**dict(scores[0]), "num_trials": 1})
        return trials[0], sole

    rep = trials[representative_index(scores)]

    mean_discovery = statistics.fmean(s.discovery for s in scores)
    mean_adherence = statistics.fmean(s.adherence for s in scores)
    mean_output = statistics.fmean(s.output_quality for s in scores)
    mean_weighted = statistics.fmean(s.weighted_score for s in scores)
    discovered = sum(1 for s in scores if s.discovery >= 1)

    aggregated = AggregatedScore(
        task_id=task.id,
        discovery=mean_discovery,
        adherence=mean_adherence,
        output_quality=mean_output,
        weighted_score=mean_weighted,
        failure_category=modal_category([s.failure_category for s in scores]),
        reasoning=(
            f"Aggregated over {num_trials} trials: discovery {discovered}/{num_trials},"
            f" mean adherence {mean_adherence:.1f}, mean output {mean_output:.1f}"
        ),
        num_trials=num_trials,
    )
    return _merge_trials(trials, rep), aggregated
