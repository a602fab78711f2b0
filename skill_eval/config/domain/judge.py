"""Judge configuration model."""

from pydantic import BaseModel, Field


class JudgeConfig(BaseModel, frozen=True):
    model: str = Field(default="anthropic/claude-3-5-haiku-20241022", min_length=1)
    temperature: float = Field(default=0.0, ge=0.0)
    output_truncation: int = Field(default=5000, ge=1)
    max_concurrent: int = Field(default=4, ge=1)
