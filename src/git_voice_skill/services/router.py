"""Alexa event routing."""

import json
import logging
from typing import Any

from ..errors import InvalidApplicationIdError, format_error
from ..models.alexa import AlexaRequestEnvelope
from ..models.skill import SkillResult
from .context import SkillContext
from .intents import IntentRegistry
from .lifecycle import SessionLifecycle
from .response_builder import ResponseBuilder
from .slots import extract_slots

logger = logging.getLogger(__name__)


class EventRouter:
    """Dispatches one Alexa event to the launch, intent or session-end path."""

    def __init__(
        self,
        registry: IntentRegistry,
        lifecycle: SessionLifecycle | None = None,
        application_id: str = "",
    ):
        """Initialize the router.

        Args:
            registry: Intent handlers by name
            lifecycle: Session hooks and launch handler
            application_id: Expected skill id; empty accepts any skill
        """
        self.registry = registry
        self.lifecycle = lifecycle or SessionLifecycle()
        self.application_id = application_id

    async def handle(self, event: dict[str, Any]) -> SkillResult:
        """Dispatch an event and return its single completion."""
        context = SkillContext()
        await self.dispatch(event, context)
        return context.result

    async def dispatch(self, event: dict[str, Any], context: SkillContext) -> None:
        """
        Process an Alexa event and complete ``context`` exactly once.

        Every exception raised while routing or inside a handler is turned
        into a failed invocation here.

        Args:
            event: Raw Alexa request envelope
            context: Host completion for this invocation
        """
        try:
            envelope = AlexaRequestEnvelope.model_validate(event)
            session = envelope.session
            request = envelope.request

            logger.info(
                f"event.session.application.applicationId={session.application.applicationId}"
            )

            if self.application_id and session.application.applicationId != self.application_id:
                error = InvalidApplicationIdError(session.application.applicationId)
                logger.error(f"{error}: {session.application.applicationId}")
                context.fail(str(error), error_type=type(error).__name__)
                return

            if session.attributes is None:
                session.attributes = {}

            if logger.isEnabledFor(logging.DEBUG):
                logger.debug(f"Incoming request:\n{json.dumps(event, indent=2, default=str)}")

            if session.new:
                self.lifecycle.on_session_started(request.requestId, session)

            if request.type == "LaunchRequest":
                await self.lifecycle.on_launch(request, session, ResponseBuilder(context, session))
            elif request.type == "IntentRequest":
                await self._dispatch_intent(envelope, context)
            elif request.type == "SessionEndedRequest":
                self.lifecycle.on_session_ended(request, session)
                context.succeed(None)
                return
            else:
                logger.warning(f"Unsupported request type: {request.type}")
                context.fail(f"Unsupported request type: {request.type}")
                return

            if not context.completed:
                context.fail(f"{request.type} handler did not produce a response")
        except Exception as e:
            logger.exception("Unhandled error while dispatching Alexa event")
            context.fail("Exception: " + format_error(e), error_type=type(e).__name__)

    async def _dispatch_intent(self, envelope: AlexaRequestEnvelope, context: SkillContext) -> None:
        request = envelope.request
        session = envelope.session
        response = ResponseBuilder(context, session)

        intent_name = request.intent.name if request.intent else ""
        logger.info(f"Alexa intent: {intent_name}")

        handler = self.registry.get(intent_name)
        if handler is None:
            response.speech_text = "Unknown intent"
            response.should_end_session = True
            response.finalize()
            return

        await handler(request, session, response, extract_slots(request))
