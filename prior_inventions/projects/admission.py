"""Decide which GitHub repositories are sourced as projects."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from types import MappingProxyType

from ..config import GitHubConfig
from ..errors import DataIntegrityError
from ..github_client.models import GitHubRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AdmissionPolicy:
    """Account name plus the per-organization repository allowlist.

    An organization missing from ``organizations`` is fully disallowed.
    """

    username: str
    organizations: Mapping[str, frozenset[str]]

    @classmethod
    def from_config(cls, github: GitHubConfig) -> "AdmissionPolicy":
        """Build the policy from the github configuration section."""
        allowlist = MappingProxyType(
            {org: frozenset(repos) for org, repos in github.organizations}
        )
        return cls(username=github.username, organizations=allowlist)

    def admits(self, repo: GitHubRepository) -> bool:
        """Decide whether a repository becomes a project.

        Args:
            repo: Raw repository record

        Returns:
            True if the repository is admitted

        Raises:
            DataIntegrityError: If an otherwise admitted repository has no id
        """
        owner = repo.owner.login

        if owner != self.username and owner not in self.organizations:
            logger.debug("Skipping %s: owner not allowed", repo.full_name)
            return False

        if owner != self.username and repo.name not in self.organizations[owner]:
            logger.debug("Skipping %s: not in organization allowlist", repo.full_name)
            return False

        if repo.fork:
            logger.debug("Skipping %s: fork", repo.full_name)
            return False

        if repo.id is None:
            raise DataIntegrityError(
                f"The repository {repo.model_dump_json()} did not have an ID. "
                "Projects cannot be identified without one."
            )

        return True


def filter_admissible(
    repos: Iterable[GitHubRepository], policy: AdmissionPolicy
) -> list[GitHubRepository]:
    """Return the admitted repositories, preserving their order."""
    return [repo for repo in repos if policy.admits(repo)]
