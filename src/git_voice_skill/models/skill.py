"""Outcome of a single skill invocation."""

from typing import Any

from pydantic import BaseModel, Field


class SkillResult(BaseModel):
    """Either a success payload or a failure reason, never both."""

    success: bool
    payload: dict[str, Any] | None = Field(None, description="Alexa response envelope")
    error: str | None = Field(None, description="Failure message")
    error_type: str | None = Field(None, description="Exception class behind the failure")
