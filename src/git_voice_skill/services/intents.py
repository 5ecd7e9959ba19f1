"""Intent registry and the skill's intent handlers."""

import asyncio
import logging
from functools import partial
from typing import Awaitable, Callable

from ..config import settings
from ..errors import GitHubServiceError
from ..models.alexa import AlexaRequest, AlexaSession
from ..models.github import RepositoryCreateRequest
from .github_service import GitHubService
from .response_builder import ResponseBuilder

logger = logging.getLogger(__name__)

IntentHandler = Callable[
    [AlexaRequest, AlexaSession, ResponseBuilder, dict[str, str]],
    Awaitable[None],
]


class IntentRegistry:
    """Maps intent names to handlers. Names match exactly, case included."""

    def __init__(self) -> None:
        self._handlers: dict[str, IntentHandler] = {}

    def add(self, name: str, handler: IntentHandler) -> None:
        if name in self._handlers:
            raise ValueError(f"Intent {name} is already registered")
        self._handlers[name] = handler

    def register(self, name: str) -> Callable[[IntentHandler], IntentHandler]:
        """Decorator form of ``add``."""

        def decorator(handler: IntentHandler) -> IntentHandler:
            self.add(name, handler)
            return handler

        return decorator

    def get(self, name: str) -> IntentHandler | None:
        return self._handlers.get(name)

    def names(self) -> list[str]:
        return list(self._handlers)

    def __contains__(self, name: object) -> bool:
        return name in self._handlers

    def __len__(self) -> int:
        return len(self._handlers)


async def create_new_repository(
    request: AlexaRequest,
    session: AlexaSession,
    response: ResponseBuilder,
    slots: dict[str, str],
    *,
    github: GitHubService,
) -> None:
    """Create a GitHub repository named by the repoName slot."""
    repo_name = slots.get("repoName", "")

    if not repo_name:
        response.speech_text = "please suggest a name"
        response.should_end_session = False
        response.finalize()
        return

    logger.info(f"Creating repository: {repo_name}")

    create_request = RepositoryCreateRequest(
        name=repo_name,
        description=settings.repository_description,
    )

    try:
        await asyncio.to_thread(github.create_repository, create_request)
    except GitHubServiceError as e:
        logger.error(f"Repository creation failed for {repo_name}: {e}")
        response.speech_text = "sorry, I could not create the repository"
        response.should_end_session = False
        response.finalize()
        return

    response.speech_text = "repo has been added successfully"
    response.should_end_session = False
    response.finalize()


async def help_intent(
    request: AlexaRequest,
    session: AlexaSession,
    response: ResponseBuilder,
    slots: dict[str, str],
) -> None:
    response.finalize(
        speech_text="You can say things like: create a new repository called demo.",
        should_end_session=False,
    )


async def stop_intent(
    request: AlexaRequest,
    session: AlexaSession,
    response: ResponseBuilder,
    slots: dict[str, str],
) -> None:
    response.finalize(speech_text="Goodbye!", should_end_session=True)


def build_default_registry(github: GitHubService) -> IntentRegistry:
    """Registry with every intent the skill understands."""
    registry = IntentRegistry()
    registry.add("CreateNewRepository", partial(create_new_repository, github=github))
    registry.add("AMAZON.HelpIntent", help_intent)
    registry.add("AMAZON.StopIntent", stop_intent)
    registry.add("AMAZON.CancelIntent", stop_intent)
    return registry
