"""ReasoningModel Protocol — the one external operation the judge depends on."""

from typing import Protocol


class ReasoningModel(Protocol):
    """Submits a text prompt to a reasoning model and returns its text response.

    Implementations raise on transport or provider failure; the judge turns
    that into a heuristic assessment.
    """

    @property
    def model(self) -> str: ...

    async def complete(self, prompt: str) -> str: ...
