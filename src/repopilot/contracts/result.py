"""Uniform result of a repository operation."""

from __future__ import annotations

from pydantic import BaseModel, Field


class OperationResult(BaseModel):
    """Outcome of a mutating repository operation.

    Attributes:
        errors: Domain errors reported by the remote service. Empty on success.
        url: Web URL of the resulting resource, or ``""`` when not applicable.
    """

    errors: list[str] = Field(default_factory=list)
    url: str = ""

    model_config = {"frozen": True}

    def successful(self) -> bool:
        return not self.errors
