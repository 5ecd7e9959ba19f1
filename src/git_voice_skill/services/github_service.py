"""GitHub API service for repository creation."""

import json
import logging
from functools import lru_cache

import boto3
import requests
from botocore.exceptions import BotoCoreError, ClientError
from github import Auth, Github, GithubException

from ..config import settings
from ..errors import GitHubServiceError
from ..models.github import RepositoryCreateRequest, RepositoryCreateResponse

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_github_token(secret_arn: str) -> str:
    """Retrieve GitHub PAT from AWS Secrets Manager (cached)."""
    client = boto3.client("secretsmanager", region_name=settings.aws_region)
    response = client.get_secret_value(SecretId=secret_arn)
    secret = json.loads(response["SecretString"])
    return secret["token"]


class GitHubService:
    """Service for creating repositories on the authenticated user's account."""

    def __init__(
        self,
        token: str = "",
        secret_arn: str = "",
        base_url: str = "https://api.github.com",
    ):
        """Initialize GitHub service.

        Args:
            token: GitHub personal access token
            secret_arn: AWS Secrets Manager ARN for the PAT, used when no token is given
            base_url: GitHub API root
        """
        self.base_url = base_url
        self._token = token
        self._secret_arn = secret_arn
        self._github: Github | None = None

    @classmethod
    def from_settings(cls) -> "GitHubService":
        return cls(
            token=settings.github_token,
            secret_arn=settings.github_token_secret_arn,
            base_url=settings.github_api_url,
        )

    @property
    def token(self) -> str:
        """Configured token, falling back to Secrets Manager."""
        if not self._token and self._secret_arn:
            try:
                self._token = _get_github_token(self._secret_arn)
            except ClientError as e:
                error_message = e.response["Error"]["Message"]
                logger.error(f"Secrets Manager error: {error_message}")
                raise GitHubServiceError(f"Could not read GitHub token: {error_message}") from e
            except (BotoCoreError, KeyError, json.JSONDecodeError) as e:
                logger.error(f"Could not read GitHub token from {self._secret_arn}: {e!r}")
                raise GitHubServiceError(f"Could not read GitHub token: {e}") from e
        return self._token

    @property
    def github(self) -> Github:
        """Lazy-load GitHub client."""
        if self._github is None:
            if not self.token:
                raise GitHubServiceError(
                    "GitHub token not configured. Set GIT_SKILL_GITHUB_TOKEN "
                    "or GIT_SKILL_GITHUB_TOKEN_SECRET_ARN."
                )
            self._github = Github(auth=Auth.Token(self.token), base_url=self.base_url)
        return self._github

    def create_repository(self, request: RepositoryCreateRequest) -> RepositoryCreateResponse:
        """Create a repository for the authenticated user.

        Args:
            request: Repository name and settings

        Returns:
            The created repository

        Raises:
            GitHubServiceError: if GitHub rejects the request
        """
        try:
            repo = self.github.get_user().create_repo(
                request.name,
                description=request.description,
                homepage=request.homepage,
                private=request.private,
                has_issues=request.has_issues,
                has_projects=request.has_projects,
                has_wiki=request.has_wiki,
            )
        except GithubException as e:
            logger.error(f"Error creating repository {request.name}: {e}")
            raise GitHubServiceError(
                f"Could not create repository {request.name}", status=e.status
            ) from e
        except requests.RequestException as e:
            logger.error(f"GitHub unreachable while creating {request.name}: {e}")
            raise GitHubServiceError(f"Could not reach GitHub: {e}") from e

        logger.info(f"Created repository {repo.full_name}")

        return RepositoryCreateResponse(
            name=repo.name,
            full_name=repo.full_name,
            html_url=repo.html_url,
        )
