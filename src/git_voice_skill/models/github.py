"""GitHub repository models."""

from pydantic import BaseModel, Field


class RepositoryCreateRequest(BaseModel):
    """Repository settings sent to GitHub."""

    name: str = Field(..., description="Repository name", min_length=1)
    description: str = Field("", description="Repository description")
    homepage: str = ""
    private: bool = False
    has_issues: bool = True
    has_projects: bool = True
    has_wiki: bool = True


class RepositoryCreateResponse(BaseModel):
    """Repository created on GitHub."""

    name: str
    full_name: str
    html_url: str | None = None
