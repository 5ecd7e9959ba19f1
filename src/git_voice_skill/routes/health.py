"""Health check endpoint."""

from fastapi import APIRouter

from ..config import settings

router = APIRouter(tags=["health"])


@router.get("/health")
async def health_check() -> dict[str, str | bool]:
    """Report service status and whether the skill is fully configured.

    Only reports presence of the identity and GitHub credentials, never values.
    """
    application_id_configured = bool(settings.application_id)
    github_configured = bool(settings.github_token or settings.github_token_secret_arn)

    return {
        "status": "healthy" if application_id_configured and github_configured else "degraded",
        "service": settings.service_name,
        "environment": settings.environment,
        "application_id_configured": application_id_configured,
        "github_configured": github_configured,
        "launch_diagnostics": settings.launch_diagnostics,
    }
