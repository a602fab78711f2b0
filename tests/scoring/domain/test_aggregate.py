"""Tests for scoring/domain/aggregate.py — aggregate_trials() and helpers."""

import pytest

from skill_eval.scoring.domain.aggregate import (
    aggregate_trials,
    modal_category,
    representative_index,
)
from skill_eval.scoring.domain.failure import FailureCategory
from skill_eval.scoring.domain.score import CombinedScore
from skill_eval.task.domain.task import EvalTask
from skill_eval.trial.domain.trial import Trial

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_task() -> EvalTask:
    return EvalTask(id="greet-1", prompt="Say hello.", expected_capability="greeting")


def _make_trial(
    duration_ms: int = 100,
    cost_usd: float = 0.01,
    num_turns: int = 2,
    activations: list[str] | None = None,
    output: str = "",
    is_error: bool = False,
    error_message: str = "",
) -> Trial:
    return Trial(
        task_id="greet-1",
        output=output,
        capability_activations=activations or [],
        duration_ms=duration_ms,
        cost_usd=cost_usd,
        num_turns=num_turns,
        is_error=is_error,
        error_message=error_message,
    )


def _make_score(
    discovery: float = 1,
    adherence: float = 5,
    output_quality: float = 5,
    weighted_score: float = 1.0,
    failure_category: FailureCategory = FailureCategory.NONE,
) -> CombinedScore:
    return CombinedScore(
        task_id="greet-1",
        discovery=discovery,
        adherence=adherence,
        output_quality=output_quality,
        weighted_score=weighted_score,
        failure_category=failure_category,
        reasoning="r",
    )


# ---------------------------------------------------------------------------
# Helpers under test
# ---------------------------------------------------------------------------


class TestRepresentativeIndex:
    def test_picks_score_nearest_mean(self) -> None:
        scores = [_make_score(weighted_score=w) for w in (0.0, 0.6, 1.0)]

        # mean is 0.533..., nearest is 0.6
        assert representative_index(scores) == 1

    def test_tie_keeps_lowest_index(self) -> None:
        scores = [_make_score(weighted_score=w) for w in (0.0, 1.0)]

        assert representative_index(scores) == 0


class TestModalCategory:
    def test_most_frequent_wins(self) -> None:
        categories = [
            FailureCategory.NONE,
            FailureCategory.DISCOVERY_FAILURE,
            FailureCategory.DISCOVERY_FAILURE,
        ]

        assert modal_category(categories) is FailureCategory.DISCOVERY_FAILURE

    def test_tie_goes_to_first_seen(self) -> None:
        categories = [
            FailureCategory.MISSING_GUIDANCE,
            FailureCategory.NONE,
            FailureCategory.NONE,
            FailureCategory.MISSING_GUIDANCE,
        ]

        assert modal_category(categories) is FailureCategory.MISSING_GUIDANCE


# ---------------------------------------------------------------------------
# aggregate_trials
# ---------------------------------------------------------------------------


class TestSingleTrial:
    def test_score_is_returned_unchanged(self) -> None:
        trial = _make_trial()
        score = _make_score(adherence=4, output_quality=3, weighted_score=0.75)

        rep, aggregated = aggregate_trials(_make_task(), [trial], [score])

        assert rep is trial
        assert aggregated.num_trials == 1
        assert aggregated.adherence == 4
        assert aggregated.output_quality == 3
        assert aggregated.weighted_score == 0.75
        assert aggregated.reasoning == score.reasoning


class TestMultipleTrials:
    def test_means_and_modal_category(self) -> None:
        trials = [_make_trial(), _make_trial(), _make_trial()]
        scores = [
            _make_score(discovery=1, weighted_score=1.0),
            _make_score(discovery=1, weighted_score=1.0),
            _make_score(
                discovery=0,
                adherence=3,
                output_quality=3,
                weighted_score=0.1,
                failure_category=FailureCategory.DISCOVERY_FAILURE,
            ),
        ]

        _, aggregated = aggregate_trials(_make_task(), trials, scores)

        assert aggregated.num_trials == 3
        assert aggregated.discovery == pytest.approx(2 / 3)
        assert aggregated.adherence == pytest.approx(13 / 3)
        assert aggregated.output_quality == pytest.approx(13 / 3)
        assert aggregated.weighted_score == pytest.approx(0.7)
        assert aggregated.failure_category is FailureCategory.NONE
        assert "discovery 2/3" in aggregated.reasoning

    def test_exact_mean_match_is_representative(self) -> None:
        trials = [
            _make_trial(output="high", duration_ms=100),
            _make_trial(output="low", duration_ms=200),
            _make_trial(output="mid", duration_ms=300),
        ]
        scores = [_make_score(weighted_score=w) for w in (0.9, 0.5, 0.7)]

        rep, aggregated = aggregate_trials(_make_task(), trials, scores)

        assert aggregated.weighted_score == pytest.approx(0.7)
        assert rep.output == "mid"
        assert rep.duration_ms == 600

    def test_representative_output_is_kept(self) -> None:
        trials = [
            _make_trial(output="zero"),
            _make_trial(output="middle"),
            _make_trial(output="full"),
        ]
        scores = [_make_score(weighted_score=w) for w in (0.0, 0.6, 1.0)]

        rep, _ = aggregate_trials(_make_task(), trials, scores)

        assert rep.output == "middle"

    def test_spend_is_summed(self) -> None:
        trials = [
            _make_trial(duration_ms=100, cost_usd=0.25, num_turns=2),
            _make_trial(duration_ms=300, cost_usd=0.5, num_turns=3),
        ]
        scores = [_make_score(), _make_score()]

        rep, _ = aggregate_trials(_make_task(), trials, scores)

        assert rep.duration_ms == 400
        assert rep.cost_usd == pytest.approx(0.75)
        assert rep.num_turns == 5

    def test_activations_are_unioned_in_order(self) -> None:
        trials = [
            _make_trial(activations=["greeting"]),
            _make_trial(activations=["farewell", "greeting"]),
        ]
        scores = [_make_score(), _make_score()]

        rep, _ = aggregate_trials(_make_task(), trials, scores)

        assert rep.capability_activations == ["greeting", "farewell"]

    def test_errors_are_collected(self) -> None:
        trials = [
            _make_trial(is_error=True, error_message="timeout"),
            _make_trial(),
            _make_trial(is_error=True, error_message="crash"),
        ]
        scores = [_make_score(), _make_score(), _make_score()]

        rep, _ = aggregate_trials(_make_task(), trials, scores)

        assert rep.is_error is True
        assert rep.error_message == "timeout; crash"

    def test_all_clean_trials_stay_clean(self) -> None:
        trials = [_make_trial(), _make_trial()]
        scores = [_make_score(), _make_score()]

        rep, _ = aggregate_trials(_make_task(), trials, scores)

        assert rep.is_error is False
        assert rep.error_message == ""


class TestInvalidInput:
    def test_zero_trials_raises(self) -> None:
        with pytest.raises(ValueError, match="zero trials"):
            aggregate_trials(_make_task(), [], [])

    def test_length_mismatch_raises(self) -> None:
        with pytest.raises(ValueError, match="2 trials but 1 scores"):
            aggregate_trials(_make_task(), [_make_trial(), _make_trial()], [_make_score()])
