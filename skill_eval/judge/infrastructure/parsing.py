"""Judge response parsing — finds and validates the JSON verdict in model text."""

import json

from pydantic import BaseModel, Field, field_validator

from skill_eval.scoring.domain.failure import FailureCategory

_DECODER = json.JSONDecoder()


class JudgeResponse(BaseModel):
    """Schema of the JSON object the judge model is asked to return."""

    discovery: int = Field(ge=0, le=1)
    adherence: int = Field(ge=1, le=5)
    output_quality: int = Field(ge=1, le=5)
    failure_category: FailureCategory = FailureCategory.NONE
    reasoning: str = ""

    @field_validator("failure_category", mode="before")
    @classmethod
    def _coerce_category(cls, value: object) -> FailureCategory:
        return FailureCategory.coerce(value)

    @field_validator("reasoning", mode="before")
    @classmethod
    def _none_reasoning(cls, value: object) -> str:
        if value is None:
            return ""
        return value if isinstance(value, str) else str(value)


def extract_json_object(text: str) -> dict[str, object] | None:
    """Return the first well-formed JSON object embedded in text, or None.

    Surrounding prose and markdown code fences are skipped.
    """
    index = text.find("{")
    while index != -1:
        try:
            value, _ = _DECODER.raw_decode(text, index)
        except json.JSONDecodeError:
            pass
        else:
            if isinstance(value, dict):
                return value
        index = text.find("{", index + 1)
    return None
