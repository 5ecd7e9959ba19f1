"""Tests for Alexa event routing."""

import logging
from unittest.mock import MagicMock, patch

import pytest

from git_voice_skill.models.alexa import AlexaRequest, AlexaSession
from git_voice_skill.services.context import SkillContext
from git_voice_skill.services.intents import IntentRegistry
from git_voice_skill.services.lifecycle import SessionLifecycle
from git_voice_skill.services.response_builder import ResponseBuilder
from git_voice_skill.services.router import EventRouter

APP_ID = "amzn1.ask.skill.test-skill"


class RecordingLifecycle(SessionLifecycle):
    """Lifecycle that records hook calls into a shared list."""

    def __init__(self, calls: list[str]):
        super().__init__()
        self.calls = calls

    def on_session_started(self, request_id, session) -> None:
        self.calls.append("started")

    def on_session_ended(self, request, session) -> None:
        self.calls.append("ended")

    async def on_launch(self, request, session, response) -> None:
        self.calls.append("launch")
        await super().on_launch(request, session, response)


@pytest.fixture()
def calls() -> list[str]:
    return []


@pytest.fixture()
def registry(calls: list[str]) -> IntentRegistry:
    registry = IntentRegistry()

    @registry.register("RememberColor")
    async def remember_color(request, session, response, slots) -> None:
        calls.append("intent")
        session.attributes["color"] = slots.get("color")
        response.speech_text = f"I will remember {slots.get('color')}"
        response.should_end_session = False
        response.finalize()

    @registry.register("Forget")
    async def forget(request, session, response, slots) -> None:
        session.attributes.clear()
        response.finalize(speech_text="Forgotten", should_end_session=True)

    return registry


@pytest.fixture()
def router(registry: IntentRegistry, calls: list[str]) -> EventRouter:
    return EventRouter(registry, RecordingLifecycle(calls), application_id=APP_ID)


@pytest.mark.asyncio
async def test_session_start_hook_runs_before_intent(router, make_event, calls) -> None:
    await router.handle(make_event(intent_name="RememberColor", new=True))

    assert calls == ["started", "intent"]


@pytest.mark.asyncio
async def test_session_start_hook_runs_before_launch(router, make_event, calls) -> None:
    result = await router.handle(make_event("LaunchRequest", new=True))

    assert calls == ["started", "launch"]
    assert result.payload["response"]["shouldEndSession"] is False


@pytest.mark.asyncio
async def test_session_start_hook_skipped_for_existing_session(router, make_event, calls) -> None:
    await router.handle(make_event(intent_name="RememberColor", new=False))

    assert calls == ["intent"]


@pytest.mark.asyncio
async def test_attributes_round_trip_across_turns(router, make_event) -> None:
    first = await router.handle(
        make_event(
            intent_name="RememberColor",
            slots={"color": {"name": "color", "value": "blue"}},
            new=True,
        )
    )
    assert first.payload["sessionAttributes"] == {"color": "blue"}

    # The platform hands the attributes back on the next turn
    second = await router.handle(
        make_event(intent_name="Forget", attributes=first.payload["sessionAttributes"])
    )
    assert second.payload["response"]["shouldEndSession"] is True
    assert "sessionAttributes" not in second.payload


@pytest.mark.asyncio
async def test_existing_attributes_are_preserved(router, make_event) -> None:
    result = await router.handle(
        make_event(
            intent_name="RememberColor",
            slots={"color": {"name": "color", "value": "red"}},
            attributes={"visits": 3},
        )
    )

    assert result.payload["sessionAttributes"] == {"visits": 3, "color": "red"}


@pytest.mark.asyncio
async def test_unknown_intent_fallback(router, make_event) -> None:
    result = await router.handle(make_event(intent_name="rememberColor"))

    assert result.success is True
    assert result.payload["response"] == {
        "outputSpeech": {"type": "SSML", "ssml": "<speak>Unknown intent</speak>"},
        "shouldEndSession": True,
    }


@pytest.mark.asyncio
async def test_invalid_application_id_fails_without_response(make_event, calls) -> None:
    registry = IntentRegistry()
    handler = MagicMock()
    registry.add("RememberColor", handler)
    router = EventRouter(registry, RecordingLifecycle(calls), application_id=APP_ID)

    result = await router.handle(
        make_event(intent_name="RememberColor", new=True, application_id="amzn1.ask.skill.other")
    )

    assert result.success is False
    assert "Invalid Application ID" in result.error
    assert result.error_type == "InvalidApplicationIdError"
    assert result.payload is None
    assert calls == []
    handler.assert_not_called()


@pytest.mark.asyncio
async def test_empty_application_id_accepts_any_skill(registry, make_event) -> None:
    router = EventRouter(registry)

    result = await router.handle(
        make_event(intent_name="Forget", application_id="amzn1.ask.skill.other")
    )

    assert result.success is True


@pytest.mark.asyncio
async def test_session_ended_runs_hook_and_has_no_body(router, make_event, calls) -> None:
    result = await router.handle(make_event("SessionEndedRequest"))

    assert calls == ["ended"]
    assert result.success is True
    assert result.payload is None


@pytest.mark.asyncio
async def test_handler_exception_becomes_failure(make_event) -> None:
    registry = IntentRegistry()

    @registry.register("Explode")
    async def explode(request, session, response, slots) -> None:
        raise RuntimeError("boom")

    result = await EventRouter(registry).handle(make_event(intent_name="Explode"))

    assert result.success is False
    assert result.error.startswith("Exception: : Message : boom")
    assert "Stacktrace:" in result.error
    assert "RuntimeError" in result.error
    assert result.error_type == "RuntimeError"


@pytest.mark.asyncio
async def test_handler_without_response_fails(make_event) -> None:
    registry = IntentRegistry()

    @registry.register("Silent")
    async def silent(request, session, response, slots) -> None:
        response.speech_text = "never sent"

    result = await EventRouter(registry).handle(make_event(intent_name="Silent"))

    assert result.success is False
    assert "did not produce a response" in result.error


@pytest.mark.asyncio
async def test_double_finalize_completes_once(make_event) -> None:
    registry = IntentRegistry()

    @registry.register("Twice")
    async def twice(request, session, response, slots) -> None:
        response.finalize(speech_text="first")
        response.finalize(speech_text="second")

    context = SkillContext()
    await EventRouter(registry).dispatch(make_event(intent_name="Twice"), context)

    assert context.result.success is True
    assert context.result.payload["response"]["outputSpeech"]["ssml"] == "<speak>first</speak>"


@pytest.mark.asyncio
async def test_unsupported_request_type_fails(router, make_event) -> None:
    result = await router.handle(make_event("CanFulfillIntentRequest"))

    assert result.success is False
    assert "Unsupported request type" in result.error


@pytest.mark.asyncio
async def test_handler_receives_only_filled_slots(make_event) -> None:
    registry = IntentRegistry()
    received: dict = {}

    @registry.register("Capture")
    async def capture(request: AlexaRequest, session: AlexaSession, response: ResponseBuilder, slots) -> None:
        received.update(slots)
        response.finalize()

    await EventRouter(registry).handle(
        make_event(
            intent_name="Capture",
            slots={
                "repoName": {"name": "repoName", "value": "demo"},
                "owner": {"name": "owner"},
            },
        )
    )

    assert received == {"repoName": "demo"}


@pytest.mark.asyncio
async def test_incoming_request_dumped_only_at_debug(router, make_event, caplog) -> None:
    caplog.set_level(logging.INFO, logger="git_voice_skill.services.router")
    with patch("git_voice_skill.services.router.json") as json_module:
        await router.handle(make_event(intent_name="Forget"))
    json_module.dumps.assert_not_called()

    caplog.set_level(logging.DEBUG, logger="git_voice_skill.services.router")
    with patch("git_voice_skill.services.router.json") as json_module:
        json_module.dumps.return_value = "{}"
        await router.handle(make_event(intent_name="Forget"))
    json_module.dumps.assert_called_once()
