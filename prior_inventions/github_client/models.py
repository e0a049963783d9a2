"""Pydantic models for GitHub data structures.

These models map to GitHub's REST API v3 repository responses.
API Reference: https://docs.github.com/en/rest/repos/repos
"""

from pydantic import BaseModel, ConfigDict, Field


class GitHubOwner(BaseModel):
    """Account or organization owning a repository.

    Maps to the ``owner`` object of a GitHub REST API Repository.
    API Reference: https://docs.github.com/en/rest/users/users
    """

    model_config = ConfigDict(frozen=True)

    login: str = Field(..., description="GitHub username/organization slug (string)")
    id: int | None = Field(None, description="Unique account identifier (integer)")


class GitHubRepository(BaseModel):
    """GitHub repository model as listed for an account.

    Maps to GitHub REST API Repository object. ``id`` is optional here so a
    malformed record can be reported instead of failing deserialization.
    API Reference: https://docs.github.com/en/rest/repos/repos#list-repositories-for-the-authenticated-user
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(None, description="Unique repository identifier (integer)")
    owner: GitHubOwner = Field(..., description="Owner of the repository")
    name: str = Field(..., description="Repository name without owner (string)")
    fork: bool = Field(False, description="Whether the repository is a fork")
    html_url: str | None = Field(
        None, description="URL of the repository page on GitHub (string)"
    )
    homepage: str | None = Field(
        None, description="Project homepage configured on the repository (string)"
    )
    description: str | None = Field(
        None, description="Short description of the repository (string)"
    )

    @property
    def full_name(self) -> str:
        """Return the repository's owner/name path."""
        return f"{self.owner.login}/{self.name}"
