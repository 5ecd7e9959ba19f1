"""Business logic services."""

from .context import SkillContext
from .diagnostics import GitHubDiagnostics
from .github_service import GitHubService
from .intents import IntentRegistry, build_default_registry
from .lifecycle import SessionLifecycle
from .response_builder import ResponseBuilder
from .router import EventRouter
from .slots import extract_slots

__all__ = [
    "EventRouter",
    "IntentRegistry",
    "build_default_registry",
    "ResponseBuilder",
    "SessionLifecycle",
    "SkillContext",
    "GitHubService",
    "GitHubDiagnostics",
    "extract_slots",
]
