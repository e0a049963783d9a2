"""Test configuration and fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest

from prior_inventions.config import Config
from prior_inventions.github_client.models import GitHubOwner, GitHubRepository

RepoFactory = Callable[..., GitHubRepository]


@pytest.fixture
def make_repo() -> RepoFactory:
    """Build raw repository records with sensible defaults."""

    def _make_repo(
        name: str = "cool-app",
        owner: str = "alice",
        id: int | None = 1,
        fork: bool = False,
        description: str | None = "A cool app.",
        html_url: str | None = None,
        homepage: str | None = None,
    ) -> GitHubRepository:
        return GitHubRepository(
            id=id,
            owner=GitHubOwner(login=owner, id=100),
            name=name,
            fork=fork,
            html_url=html_url or f"https://github.com/{owner}/{name}",
            homepage=homepage,
            description=description,
        )

    return _make_repo


@pytest.fixture
def config_data() -> dict[str, Any]:
    """Raw configuration as it would be read from YAML."""
    return {
        "document": {
            "file": "prior-inventions.md",
            "description": "Everything I have built.",
        },
        "github": {
            "username": "alice",
            "token": "test_token",
            "organizations": [["acme", ["rocket", "anvil"]]],
            "repoOverrides": [],
        },
        "projects": [],
    }


@pytest.fixture
def config(config_data: dict[str, Any]) -> Config:
    """Validated configuration built from ``config_data``."""
    return Config.model_validate(config_data)


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a complete YAML configuration file."""
    path = tmp_path / "config.yaml"
    path.write_text(
        f"""\
document:
  file: {tmp_path / "out" / "prior-inventions.md"}
  description: Everything I have built.
  markdownHeader: |
    ---
    geometry: margin=0.5in
    ---
github:
  username: alice
  token: test_token
  organizations:
    - [acme, [rocket]]
  repoOverrides:
    - slug: alice/cool-app
      description: Overridden description.
projects:
  - name: Widget
    description: A widget.
""",
        encoding="utf-8",
    )
    return path
