"""Alexa Skill request/response models."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class AlexaSlot(BaseModel):
    """Alexa slot value."""

    model_config = ConfigDict(extra="allow")

    name: str | None = None
    value: str | None = None


class AlexaIntent(BaseModel):
    """Alexa intent with slots."""

    model_config = ConfigDict(extra="allow")

    name: str
    slots: dict[str, AlexaSlot] | None = None


class AlexaRequest(BaseModel):
    """Alexa request payload."""

    model_config = ConfigDict(extra="allow")

    type: str
    requestId: str | None = None
    intent: AlexaIntent | None = None
    locale: str = "en-US"


class AlexaApplication(BaseModel):
    """Skill the session belongs to."""

    model_config = ConfigDict(extra="allow")

    applicationId: str = ""


class AlexaSession(BaseModel):
    """Alexa session information.

    ``attributes`` is the only state carried between turns. The platform
    stores it for us when a response keeps the session open.
    """

    model_config = ConfigDict(extra="allow")

    sessionId: str = ""
    new: bool = True
    application: AlexaApplication = Field(default_factory=AlexaApplication)
    attributes: dict[str, Any] | None = None


class AlexaRequestEnvelope(BaseModel):
    """Full Alexa request envelope."""

    model_config = ConfigDict(extra="allow")

    version: str = "1.0"
    session: AlexaSession = Field(default_factory=AlexaSession)
    request: AlexaRequest
    context: dict[str, Any] = {}


class AlexaOutputSpeech(BaseModel):
    """Alexa speech output, SSML or plain text."""

    type: str = "PlainText"
    text: str | None = None
    ssml: str | None = None


class AlexaReprompt(BaseModel):
    """Speech played when the user stays silent."""

    outputSpeech: AlexaOutputSpeech


class AlexaCardImage(BaseModel):
    """Image attached to a Standard card."""

    smallImageUrl: str
    largeImageUrl: str


class AlexaCard(BaseModel):
    """Alexa card for visual display.

    Simple cards carry ``content``; Standard cards carry ``text`` and ``image``.
    """

    type: str = "Simple"
    title: str
    content: str | None = None
    text: str | None = None
    image: AlexaCardImage | None = None


class AlexaResponseBody(BaseModel):
    """Alexa response body."""

    outputSpeech: AlexaOutputSpeech
    shouldEndSession: bool = True
    reprompt: AlexaReprompt | None = None
    card: AlexaCard | None = None


class AlexaResponse(BaseModel):
    """Full Alexa response envelope."""

    version: str = "1.0"
    response: AlexaResponseBody
    sessionAttributes: dict[str, Any] | None = None
