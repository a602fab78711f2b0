"""ScoringWeights — per-dimension weights for the composite score."""

from pydantic import BaseModel, Field

from skill_eval.task.domain.task import EvalCriterion


class ScoringWeights(BaseModel, frozen=True):
    discovery: float = Field(default=0.3, ge=0.0)
    adherence: float = Field(default=0.4, ge=0.0)
    output: float = Field(default=0.3, ge=0.0)

    def with_criteria(self, criteria: list[EvalCriterion]) -> "ScoringWeights":
        """Return a copy where each dimension named by a criterion takes its weight.

        Later criteria for the same dimension win. Dimensions without a
        criterion keep the current value.
        """
        overrides = {criterion.dimension: criterion.weight for criterion in criteria}
        if not overrides:
            return self
        return self.model_copy(update=overrides)


def weighted_score(
    weights: ScoringWeights,
    discovery: float,
    adherence: float,
    output_quality: float,
) -> float:
    """Combine the three dimensions into a [0, 1] score.

    Adherence and output quality are normalised from 1..5 onto 0..1. Weights
    are used as given; the result is clamped so that weights which do not
    quite sum to 1 cannot push it outside [0, 1].
    """
    raw = (
        weights.discovery * discovery
        + weights.adherence * ((adherence - 1) / 4)
        + weights.output * ((output_quality - 1) / 4)
    )
    return min(1.0, max(0.0, raw))
