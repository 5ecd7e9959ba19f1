"""Pydantic models for request/response schemas."""

from .alexa import (
    AlexaCard,
    AlexaCardImage,
    AlexaIntent,
    AlexaOutputSpeech,
    AlexaReprompt,
    AlexaRequest,
    AlexaRequestEnvelope,
    AlexaResponse,
    AlexaResponseBody,
    AlexaSession,
    AlexaSlot,
)
from .skill import SkillResult

__all__ = [
    "AlexaRequestEnvelope",
    "AlexaRequest",
    "AlexaIntent",
    "AlexaSlot",
    "AlexaSession",
    "AlexaResponse",
    "AlexaResponseBody",
    "AlexaOutputSpeech",
    "AlexaReprompt",
    "AlexaCard",
    "AlexaCardImage",
    "SkillResult",
]
