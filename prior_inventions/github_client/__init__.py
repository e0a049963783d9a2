"""GitHub client package for API interaction."""

from .client import GitHubClient
from .models import GitHubOwner, GitHubRepository

__all__ = [
    "GitHubClient",
    "GitHubOwner",
    "GitHubRepository",
]
