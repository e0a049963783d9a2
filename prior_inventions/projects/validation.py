"""Completeness checks run on the merged project set before rendering."""

from collections import Counter
from dataclasses import dataclass

from ..errors import DataIntegrityError, ValidationError
from .models import Project

REQUIRED_FIELDS = ("owner", "slug_name", "name", "description")

# Field names as spelled in configuration and error reports
FIELD_LABELS = {
    "owner": "owner",
    "slug_name": "slugName",
    "name": "name",
    "description": "description",
}


@dataclass(frozen=True)
class ProjectViolation:
    """A project together with the required fields it lacks."""

    project: Project
    missing: list[str]

    def describe(self) -> str:
        """Format the violation for the operator."""
        title = self.project.name or self.project.identity
        return (
            f"{title}:\n"
            f"    Slug          : {self.project.identity}\n"
            f"    Missing fields: {', '.join(self.missing)}"
        )


def missing_fields(project: Project) -> list[str]:
    """Return the labels of required fields that are empty on ``project``.

    Whitespace-only values count as empty.
    """
    return [
        FIELD_LABELS[field]
        for field in REQUIRED_FIELDS
        if not getattr(project, field).strip()
    ]


def check_unique_ids(projects: list[Project]) -> None:
    """Raise DataIntegrityError if two projects share an id."""
    counts = Counter(project.id for project in projects)
    duplicates = sorted(pid for pid, count in counts.items() if count > 1)
    if duplicates:
        raise DataIntegrityError(
            f"Duplicate project ids: {', '.join(duplicates)}. "
            "Manual projects must have unique names."
        )


def validate_projects(projects: list[Project]) -> list[Project]:
    """Verify every project is complete and uniquely identified.

    All offending projects are collected before failing.

    Returns:
        The same projects, unchanged

    Raises:
        DataIntegrityError: If project ids are not unique
        ValidationError: If any project lacks a required field
    """
    check_unique_ids(projects)

    violations = []
    for project in projects:
        missing = missing_fields(project)
        if missing:
            violations.append(ProjectViolation(project=project, missing=missing))

    if violations:
        raise ValidationError(violations)

    return projects
