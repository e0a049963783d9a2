"""Apply configured field overrides to projects sourced from GitHub."""

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType
from typing import Any

from ..config import RepoOverride
from .models import Project

logger = logging.getLogger(__name__)


def build_override_table(
    overrides: Iterable[RepoOverride],
) -> Mapping[str, RepoOverride]:
    """Index overrides by the slug of the repository they target."""
    return MappingProxyType({override.slug: override for override in overrides})


def apply_override(project: Project, override: RepoOverride) -> Project:
    """Return a copy of ``project`` with the override's explicit fields applied.

    A field replaces the project's value only if the configuration set it,
    so an explicit ``link: null`` removes the link while an omitted ``link``
    keeps it.
    """
    explicit = override.model_fields_set
    updates: dict[str, Any] = {}

    # null name or description clears the field
    if "name" in explicit:
        updates["name"] = override.name or ""
    if "description" in explicit:
        updates["description"] = override.description or ""
    if "link" in explicit:
        updates["link"] = override.link

    if not updates:
        return project

    logger.debug("Overriding %s on %s", ", ".join(updates), project.slug)
    return project.model_copy(update=updates)


def resolve_overrides(
    project: Project, overrides: Mapping[str, RepoOverride]
) -> Project:
    """Apply the override registered for the project's slug, if any."""
    override = overrides.get(project.slug)
    if override is None:
        return project
    return apply_override(project, override)


def unused_overrides(
    overrides: Mapping[str, RepoOverride], projects: Iterable[Project]
) -> list[str]:
    """Return override slugs that match none of the given projects."""
    slugs = {project.slug for project in projects}
    return [slug for slug in overrides if slug not in slugs]
