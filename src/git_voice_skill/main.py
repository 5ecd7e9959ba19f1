"""FastAPI application entrypoint with Lambda handlers."""

import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncGenerator

from fastapi import FastAPI
from mangum import Mangum

from .config import settings
from .errors import SkillInvocationError
from .routes import alexa, health
from .skill import get_event_router

# Configure logging
logging.basicConfig(
    level=logging.INFO if not settings.debug else logging.DEBUG,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan handler for startup/shutdown events."""
    logger.info(f"Starting {settings.service_name} in {settings.environment} mode")
    yield
    logger.info(f"Shutting down {settings.service_name}")


app = FastAPI(
    title="Git Voice Skill",
    description="Alexa skill that manages GitHub repositories by voice",
    version="0.1.0",
    lifespan=lifespan,
    docs_url="/docs" if settings.debug else None,
    redoc_url="/redoc" if settings.debug else None,
)

# Include routers
app.include_router(health.router)
app.include_router(alexa.router)

# Lambda handler via Mangum (API Gateway / function URL)
handler = Mangum(app, lifespan="off")


def lambda_handler(event: dict[str, Any], context: Any = None) -> dict[str, Any] | None:
    """
    Lambda handler for direct Alexa Skills Kit invocation.

    Returns the Alexa response envelope, or None for SessionEndedRequest.
    A failed invocation raises, which Lambda reports back to Alexa as an error.
    """
    result = asyncio.run(get_event_router().handle(event))

    if not result.success:
        raise SkillInvocationError(result.error)

    return result.payload
