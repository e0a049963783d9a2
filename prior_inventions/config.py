"""Configuration models and loader for the prior inventions generator.

The configuration file is YAML (JSON documents are accepted too). Keys are
camelCase, mapped onto snake_case attributes through pydantic aliases.
"""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from .errors import ConfigurationError

# Organization slug followed by the repository names admitted from it
OrgPair = tuple[str, list[str]]


class DocumentConfig(BaseModel):
    """Output document settings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    file: str = Field(..., min_length=1, description="Path of the file to write")
    description: str = Field(
        ..., description="Introductory paragraph displayed before the project list"
    )
    markdown_header: str | None = Field(
        None,
        alias="markdownHeader",
        description="Text inserted at the very top of the generated markdown file",
    )


class RepoOverride(BaseModel):
    """Replacement values for a project sourced from a GitHub repository.

    Only fields present in the configuration are applied. ``link: null`` is
    kept apart from an omitted ``link`` through ``model_fields_set``: the first
    removes the project's link, the second leaves it alone.
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    slug: str = Field(..., min_length=1, description="owner/name of the repository")
    name: str | None = Field(None, description="Overridden display name")
    description: str | None = Field(None, description="Overridden description")
    link: str | None = Field(
        None, description="Overridden link, or null to remove the link"
    )


class ManualProject(BaseModel):
    """A project declared directly in configuration instead of GitHub."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    name: str = Field(..., description="Human readable name of the project")
    description: str | None = Field(
        None, description="Short description of the project, required at validation"
    )
    link: str | None = Field(None, description="Optional link to the project")


class GitHubConfig(BaseModel):
    """GitHub account and repository selection settings."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="forbid")

    username: str = Field(
        ..., min_length=1, description="GitHub login whose repositories are sourced"
    )
    token: str | None = Field(
        None,
        description=(
            "Personal access token with repo:status, public_repo, read:org and "
            "read:user scopes. Defaults to the GITHUB_TOKEN environment variable"
        ),
    )
    organizations: list[OrgPair] = Field(
        default_factory=list,
        description="Organizations and the repositories admitted from each",
    )
    repo_overrides: list[RepoOverride] = Field(
        default_factory=list, alias="repoOverrides"
    )

    @field_validator("organizations")
    @classmethod
    def validate_unique_organizations(cls, v: list[OrgPair]) -> list[OrgPair]:
        """Reject organizations listed more than once."""
        seen: set[str] = set()
        for org, _ in v:
            if org in seen:
                raise ValueError(f"Organization '{org}' is listed more than once")
            seen.add(org)
        return v

    @field_validator("repo_overrides")
    @classmethod
    def validate_unique_override_slugs(
        cls, v: list[RepoOverride]
    ) -> list[RepoOverride]:
        """Reject several overrides targeting the same repository."""
        seen: set[str] = set()
        for override in v:
            if override.slug in seen:
                raise ValueError(
                    f"Repository '{override.slug}' has more than one override"
                )
            seen.add(override.slug)
        return v

    def resolved_token(self) -> str | None:
        """Return the configured token, falling back to GITHUB_TOKEN."""
        return self.token or os.getenv("GITHUB_TOKEN")


class Config(BaseModel):
    """Complete generator configuration."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    document: DocumentConfig
    github: GitHubConfig
    projects: list[ManualProject] = Field(default_factory=list)


def load_config(path: str | Path) -> Config:
    """Load and validate a configuration file.

    Args:
        path: Path to a YAML or JSON configuration file

    Returns:
        Validated Config

    Raises:
        ConfigurationError: If the file is missing, unparsable or invalid
    """
    config_path = Path(path)
    if not config_path.is_file():
        raise ConfigurationError(f"Configuration file {config_path} not found")

    try:
        with config_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigurationError(f"Could not parse {config_path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError(
            f"Configuration file {config_path} must contain a mapping at top level"
        )

    try:
        return Config.model_validate(data)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid configuration in {config_path}:\n{e}") from e
