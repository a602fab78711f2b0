"""Tests for judge/infrastructure/parsing.py."""

import pytest
from pydantic import ValidationError

from skill_eval.judge.infrastructure.parsing import JudgeResponse, extract_json_object
from skill_eval.scoring.domain.failure import FailureCategory


class TestExtractJsonObject:
    def test_plain_object(self) -> None:
        assert extract_json_object('{"a": 1}') == {"a": 1}

    def test_object_inside_code_fence(self) -> None:
        text = 'Sure.\n```json\n{"a": {"b": 2}}\n```'

        assert extract_json_object(text) == {"a": {"b": 2}}

    def test_braces_inside_strings(self) -> None:
        assert extract_json_object('{"reasoning": "used {x} twice"}') == {
            "reasoning": "used {x} twice"
        }

    def test_skips_broken_candidate(self) -> None:
        assert extract_json_object('oops { not json } then {"ok": true}') == {"ok": True}

    def test_first_object_wins(self) -> None:
        assert extract_json_object('{"n": 1} {"n": 2}') == {"n": 1}

    def test_no_object(self) -> None:
        assert extract_json_object("no json here") is None

    def test_empty_text(self) -> None:
        assert extract_json_object("") is None


class TestJudgeResponse:
    def test_category_is_coerced(self) -> None:
        response = JudgeResponse.model_validate(
            {
                "discovery": 0,
                "adherence": 2,
                "output_quality": 3,
                "failure_category": "Missing_Guidance",
            }
        )

        assert response.failure_category is FailureCategory.MISSING_GUIDANCE
        assert response.reasoning == ""

    def test_missing_category_defaults_to_none(self) -> None:
        response = JudgeResponse.model_validate(
            {"discovery": 1, "adherence": 5, "output_quality": 5}
        )

        assert response.failure_category is FailureCategory.NONE

    def test_adherence_out_of_range_rejected(self) -> None:
        with pytest.raises(ValidationError):
            JudgeResponse.model_validate({"discovery": 1, "adherence": 6, "output_quality": 5})

    def test_non_string_reasoning_is_stringified(self) -> None:
        response = JudgeResponse.model_validate(
            {"discovery": 1, "adherence": 4, "output_quality": 4, "reasoning": 5}
        )

        assert response.reasoning == "5"
        assert response.adherence == 4
