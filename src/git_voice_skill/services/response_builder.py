"""Alexa response accumulation and serialization."""

import json
import logging
from typing import Any

from ..errors import ResponseAlreadyFinalizedError
from ..models.alexa import (
    AlexaCard,
    AlexaCardImage,
    AlexaOutputSpeech,
    AlexaReprompt,
    AlexaResponse,
    AlexaResponseBody,
    AlexaSession,
)
from .context import SkillContext

logger = logging.getLogger(__name__)


def create_speech_object(text: str, ssml_enabled: bool = True) -> AlexaOutputSpeech:
    """Wrap text in an SSML envelope, or return it as plain text."""
    if ssml_enabled:
        return AlexaOutputSpeech(type="SSML", ssml=f"<speak>{text}</speak>")
    return AlexaOutputSpeech(type="PlainText", text=text)


def build_card(
    title: str | None,
    content: str | None = None,
    image_url: str | None = None,
) -> AlexaCard | None:
    """Build a Simple card, or a Standard card when an image is attached."""
    if not title:
        return None

    if image_url:
        return AlexaCard(
            type="Standard",
            title=title,
            text=content,
            image=AlexaCardImage(smallImageUrl=image_url, largeImageUrl=image_url),
        )

    return AlexaCard(type="Simple", title=title, content=content)


class ResponseBuilder:
    """Mutable output of one turn, finalized into the Alexa envelope once."""

    def __init__(self, context: SkillContext, session: AlexaSession | None = None):
        self.speech_text = ""
        self.reprompt_text: str | None = None
        self.ssml_enabled = True
        self.should_end_session = True
        self.card_title: str | None = None
        self.card_content: str | None = None
        self.image_url: str | None = None
        self._context = context
        self._session = session
        self._finalized = False

    @property
    def finalized(self) -> bool:
        return self._finalized

    def build(self) -> dict[str, Any]:
        """Serialize the current state without completing the invocation."""
        reprompt = None
        if self.reprompt_text:
            reprompt = AlexaReprompt(
                outputSpeech=create_speech_object(self.reprompt_text, self.ssml_enabled)
            )

        envelope = AlexaResponse(
            response=AlexaResponseBody(
                outputSpeech=create_speech_object(self.speech_text, self.ssml_enabled),
                shouldEndSession=self.should_end_session,
                reprompt=reprompt,
                card=build_card(self.card_title, self.card_content, self.image_url),
            )
        )
        response = envelope.model_dump(exclude_none=True)

        # Attributes are handed back verbatim, None values included
        if (
            not self.should_end_session
            and self._session is not None
            and self._session.attributes is not None
        ):
            response["sessionAttributes"] = self._session.attributes

        return response

    def finalize(
        self,
        speech_text: str | None = None,
        reprompt_text: str | None = None,
        ssml_enabled: bool | None = None,
        should_end_session: bool | None = None,
    ) -> dict[str, Any]:
        """Apply last-moment overrides, serialize and complete the invocation.

        Raises:
            ResponseAlreadyFinalizedError: if this turn was already finalized
        """
        if self._finalized:
            raise ResponseAlreadyFinalizedError("Response has already been finalized")

        if speech_text is not None:
            self.speech_text = speech_text
        if reprompt_text is not None:
            self.reprompt_text = reprompt_text
        if ssml_enabled is not None:
            self.ssml_enabled = ssml_enabled
        if should_end_session is not None:
            self.should_end_session = should_end_session

        response = self.build()
        self._finalized = True

        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(f"Final response:\n{json.dumps(response, indent=2)}")

        self._context.succeed(response)
        return response

    def fail(self, message: str) -> None:
        """Fail the invocation instead of responding."""
        logger.error(message)
        self._finalized = True
        self._context.fail(message)
