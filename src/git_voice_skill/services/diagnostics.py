"""Launch-time GitHub API reachability probe."""

import logging

import httpx

from ..errors import GitHubServiceError
from .github_service import GitHubService

logger = logging.getLogger(__name__)

# Default timeout for the probe (seconds)
DEFAULT_TIMEOUT = 5.0


class GitHubDiagnostics:
    """Checks that the GitHub API answers with the configured credentials.

    Results are only logged; a failed probe never affects the skill response.
    """

    def __init__(
        self,
        api_url: str,
        github: GitHubService | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_url = api_url
        self.timeout = timeout
        self.github = github
        self._transport = transport

    async def probe(self) -> int | None:
        """Request the API root and return the HTTP status, or None on error."""
        headers = {"Accept": "application/vnd.github+json"}
        token = self._resolve_token()
        if token:
            headers["Authorization"] = f"Bearer {token}"

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                headers=headers,
                transport=self._transport,
            ) as client:
                response = await client.get(self.api_url)
        except httpx.HTTPError as e:
            logger.warning(f"GitHub diagnostics probe failed: {e}")
            return None

        logger.info(f"GitHub diagnostics: {self.api_url} answered {response.status_code}")
        return response.status_code

    def _resolve_token(self) -> str:
        """Token of the GitHub service, Secrets Manager lookup included."""
        if self.github is None:
            return ""
        try:
            return self.github.token
        except GitHubServiceError as e:
            logger.warning(f"GitHub diagnostics running unauthenticated: {e}")
            return ""
