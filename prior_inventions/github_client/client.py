"""GitHub API client using PyGitHub."""

import os

from github import Github
from github.AuthenticatedUser import AuthenticatedUser
from github.NamedUser import NamedUser
from github.Organization import Organization
from github.Repository import Repository
from rich.console import Console

from .models import GitHubOwner, GitHubRepository

console = Console()


class GitHubClient:
    """GitHub API client listing the repositories of an account."""

    def __init__(self, token: str | None = None):
        """Initialize GitHub client with authentication.

        Args:
            token: GitHub personal access token. If None, reads from
                GITHUB_TOKEN env var.
        """
        self.token = token or os.getenv("GITHUB_TOKEN")
        if not self.token:
            raise ValueError(
                "GitHub token is required. Set github.token in the configuration "
                "or the GITHUB_TOKEN environment variable."
            )

        self.github = Github(self.token)

    def _convert_owner(
        self, github_owner: NamedUser | AuthenticatedUser | Organization
    ) -> GitHubOwner:
        """Convert PyGitHub owner to our model."""
        return GitHubOwner(login=github_owner.login, id=github_owner.id)

    def _convert_repository(self, github_repo: Repository) -> GitHubRepository:
        """Convert PyGitHub repository to our model."""
        return GitHubRepository(
            id=github_repo.id,
            owner=self._convert_owner(github_repo.owner),
            name=github_repo.name,
            fork=github_repo.fork,
            html_url=github_repo.html_url,
            homepage=github_repo.homepage,
            description=github_repo.description,
        )

    def list_repositories(self) -> list[GitHubRepository]:
        """List repositories visible to the authenticated account.

        Includes repositories owned by the account and those of organizations
        it belongs to; deciding which of them are projects is left to the
        caller.

        Returns:
            List of GitHubRepository objects in API order
        """
        user = self.github.get_user()
        repositories = [self._convert_repository(repo) for repo in user.get_repos()]
        console.print(f"Fetched {len(repositories)} repositories from GitHub")
        return repositories
