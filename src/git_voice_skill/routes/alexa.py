"""Alexa Skill webhook endpoint."""

import logging
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, Request, Response

from ..services.router import EventRouter
from ..skill import get_event_router

logger = logging.getLogger(__name__)

router = APIRouter(tags=["alexa"])


@router.post("/alexa", response_model=None)
async def alexa_webhook(
    request: Request,
    event_router: EventRouter = Depends(get_event_router),
) -> dict[str, Any] | Response:
    """
    Handle Alexa Skill requests.

    This endpoint receives requests from the Alexa service when users
    interact with the skill.

    Supported intents:
    - LaunchRequest: "Alexa, open git helper"
    - CreateNewRepository: "Alexa, ask git helper to create a repository called demo"
    - AMAZON.HelpIntent: "Alexa, ask git helper for help"
    - AMAZON.StopIntent: "Alexa, stop"

    SessionEndedRequest is acknowledged with an empty body. A request for a
    different skill is rejected with 403; any other failure returns 500.
    """
    body = await request.json()

    logger.info(f"Alexa request received: {body.get('request', {}).get('type')}")

    result = await event_router.handle(body)

    if not result.success:
        status_code = 403 if result.error_type == "InvalidApplicationIdError" else 500
        raise HTTPException(status_code=status_code, detail=result.error)

    if result.payload is None:
        return Response(status_code=200)

    return result.payload
