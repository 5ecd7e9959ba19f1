"""Shared fixtures for the skill tests."""

from collections.abc import Callable, Generator
from typing import Any
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from git_voice_skill.main import app
from git_voice_skill.models.github import RepositoryCreateResponse
from git_voice_skill.services.github_service import GitHubService
from git_voice_skill.services.intents import build_default_registry
from git_voice_skill.services.router import EventRouter
from git_voice_skill.skill import get_event_router

APP_ID = "amzn1.ask.skill.test-skill"


@pytest.fixture()
def github() -> MagicMock:
    """GitHubService double that creates repositories successfully."""
    service = MagicMock(spec=GitHubService)
    service.create_repository.return_value = RepositoryCreateResponse(
        name="demo",
        full_name="octocat/demo",
        html_url="https://github.com/octocat/demo",
    )
    return service


@pytest.fixture()
def event_router(github: MagicMock) -> EventRouter:
    return EventRouter(registry=build_default_registry(github), application_id=APP_ID)


@pytest.fixture()
def client(event_router: EventRouter) -> Generator[TestClient, None, None]:
    app.dependency_overrides[get_event_router] = lambda: event_router
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def make_event() -> Callable[..., dict[str, Any]]:
    """Build Alexa request envelopes."""

    def _make_event(
        request_type: str = "IntentRequest",
        intent_name: str | None = None,
        slots: dict[str, Any] | None = None,
        new: bool = False,
        attributes: dict[str, Any] | None = None,
        application_id: str = APP_ID,
    ) -> dict[str, Any]:
        session: dict[str, Any] = {
            "new": new,
            "sessionId": "amzn1.echo-api.session.1",
            "application": {"applicationId": application_id},
        }
        if attributes is not None:
            session["attributes"] = attributes

        request: dict[str, Any] = {
            "type": request_type,
            "requestId": "amzn1.echo-api.request.1",
            "locale": "en-US",
        }
        if intent_name is not None:
            request["intent"] = {"name": intent_name}
            if slots is not None:
                request["intent"]["slots"] = slots

        return {"version": "1.0", "session": session, "request": request}

    return _make_event
