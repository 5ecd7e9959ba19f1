"""Skill assembly from settings."""

import logging
from functools import lru_cache

from .config import settings
from .services.diagnostics import GitHubDiagnostics
from .services.github_service import GitHubService
from .services.intents import build_default_registry
from .services.lifecycle import SessionLifecycle
from .services.router import EventRouter

logger = logging.getLogger(__name__)


def build_event_router() -> EventRouter:
    """Wire the router, intents and lifecycle hooks from settings."""
    github = GitHubService.from_settings()

    diagnostics = None
    if settings.launch_diagnostics:
        diagnostics = GitHubDiagnostics(
            api_url=settings.github_api_url,
            github=github,
            timeout=settings.diagnostics_timeout,
        )

    if not settings.application_id:
        logger.warning("GIT_SKILL_APPLICATION_ID not set; accepting requests from any skill")

    return EventRouter(
        registry=build_default_registry(github),
        lifecycle=SessionLifecycle(diagnostics=diagnostics),
        application_id=settings.application_id,
    )


@lru_cache(maxsize=1)
def get_event_router() -> EventRouter:
    """Get or create the EventRouter singleton."""
    return build_event_router()
