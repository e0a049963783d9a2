"""End-to-end assembly of the project list from its sources."""

import logging
from collections.abc import Iterable

from ..config import Config
from ..github_client.models import GitHubRepository
from .admission import AdmissionPolicy, filter_admissible
from .models import Project
from .normalize import project_from_manual, project_from_repository
from .overrides import build_override_table, resolve_overrides, unused_overrides
from .render import render_document
from .validation import validate_projects

logger = logging.getLogger(__name__)


def build_projects(
    repositories: Iterable[GitHubRepository], config: Config
) -> list[Project]:
    """Merge admitted repositories and manual projects into a validated list.

    Remote projects come first, in API order, followed by manual projects in
    declaration order. Overrides only apply to remote projects.

    Raises:
        DataIntegrityError: If an admitted repository has no id or ids collide
        ValidationError: If any project lacks a required field
    """
    policy = AdmissionPolicy.from_config(config.github)
    overrides = build_override_table(config.github.repo_overrides)

    remote = [
        resolve_overrides(project_from_repository(repo), overrides)
        for repo in filter_admissible(repositories, policy)
    ]
    for slug in unused_overrides(overrides, remote):
        logger.warning("Override for %s did not match any repository", slug)

    manual = [
        project_from_manual(declared, config.github.username)
        for declared in config.projects
    ]

    return validate_projects(remote + manual)


def generate_document(
    repositories: Iterable[GitHubRepository], config: Config
) -> str:
    """Build the project list and render it as the output document."""
    projects = build_projects(repositories, config)
    return render_document(
        projects,
        description=config.document.description,
        markdown_header=config.document.markdown_header,
    )
