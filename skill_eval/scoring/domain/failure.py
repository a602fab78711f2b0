"""FailureCategory — closed set of reasons a trial fell short."""

from enum import StrEnum


class FailureCategory(StrEnum):
    DISCOVERY_FAILURE = "discovery_failure"
    FALSE_POSITIVE = "false_positive"
    INSTRUCTION_AMBIGUITY = "instruction_ambiguity"
    MISSING_GUIDANCE = "missing_guidance"
    AGENT_ERROR = "agent_error"
    NONE = "none"

    @classmethod
    def coerce(cls, value: object) -> "FailureCategory":
        """Map an arbitrary value onto the enum; anything unrecognised becomes NONE."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls(value.strip().lower())
            except ValueError:
                return cls.NONE
        return cls.NONE
