"""Session lifecycle hooks and the launch handler."""

import logging

from ..models.alexa import AlexaRequest, AlexaSession
from .diagnostics import GitHubDiagnostics
from .response_builder import ResponseBuilder

logger = logging.getLogger(__name__)

LAUNCH_SPEECH = "Hi, Session has been established, what can I do for you?"
LAUNCH_REPROMPT = "I can create a repository, can clone a repository to configured location"


class SessionLifecycle:
    """Extension points called by the router around session boundaries."""

    def __init__(self, diagnostics: GitHubDiagnostics | None = None):
        self.diagnostics = diagnostics

    def on_session_started(self, request_id: str | None, session: AlexaSession) -> None:
        logger.debug(f"onSessionStarted requestId={request_id}, sessionId={session.sessionId}")

    def on_session_ended(self, request: AlexaRequest, session: AlexaSession) -> None:
        logger.debug(
            f"onSessionEnded requestId={request.requestId}, sessionId={session.sessionId}"
        )

    async def on_launch(
        self,
        request: AlexaRequest,
        session: AlexaSession,
        response: ResponseBuilder,
    ) -> None:
        """Greet the user and keep the session open."""
        logger.debug(f"onLaunch requestId={request.requestId}, sessionId={session.sessionId}")

        if self.diagnostics is not None:
            await self.diagnostics.probe()

        response.speech_text = LAUNCH_SPEECH
        response.reprompt_text = LAUNCH_REPROMPT
        response.should_end_session = False
        response.finalize()
