"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "git-voice-skill"

    # Alexa skill identity (empty disables the check)
    application_id: str = ""

    # AWS
    aws_region: str = "us-east-1"

    # GitHub - token directly, or a Secrets Manager ARN holding {"token": ...}
    github_token: str = ""
    github_token_secret_arn: str = ""
    github_api_url: str = "https://api.github.com"
    repository_description: str = "This is your first repository through Alexa."

    # Launch-time GitHub reachability probe
    launch_diagnostics: bool = False
    diagnostics_timeout: float = 5.0

    class Config:
        env_prefix = "GIT_SKILL_"
        case_sensitive = False


settings = Settings()
