"""Map GitHub repositories and manual declarations onto Project."""

from ..config import ManualProject
from ..github_client.models import GitHubRepository
from .models import MANUAL_ID_PREFIX, MANUAL_SLUG_OWNER, Project


def _capitalize_first_letter(word: str) -> str:
    return word[:1].upper() + word[1:]


def prettify_slug(slug: str) -> str:
    """Convert a URL slug to a pretty human title.

    ``cool-app`` becomes ``Cool App`` and ``my_tool`` becomes ``My Tool``.
    Only the first letter of each word is changed.
    """
    words = slug.replace("-", " ").replace("_", " ").split(" ")
    return " ".join(_capitalize_first_letter(word) for word in words)


def project_from_repository(repo: GitHubRepository) -> Project:
    """Synthesize a project from an admitted repository."""
    return Project(
        id=str(repo.id),
        link=repo.homepage or repo.html_url,
        owner=repo.owner.login,
        slug=repo.full_name,
        slug_name=repo.name,
        name=prettify_slug(repo.name),
        description=repo.description or "",
    )


def project_from_manual(manual: ManualProject, username: str) -> Project:
    """Build a project from a manual declaration owned by ``username``.

    Manual names are written by hand and used verbatim.
    """
    return Project(
        id=f"{MANUAL_ID_PREFIX}{manual.name}",
        link=manual.link,
        owner=username,
        slug=f"{MANUAL_SLUG_OWNER}/{manual.name}",
        slug_name=manual.name,
        name=manual.name,
        description=manual.description or "",
    )
