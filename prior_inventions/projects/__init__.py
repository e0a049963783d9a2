"""Project aggregation pipeline: admission, normalization, overrides,
validation and rendering."""

from .admission import AdmissionPolicy, filter_admissible
from .models import Project
from .normalize import prettify_slug, project_from_manual, project_from_repository
from .overrides import apply_override, build_override_table, resolve_overrides
from .pipeline import build_projects, generate_document
from .render import render_document, sort_projects
from .validation import ProjectViolation, validate_projects

__all__ = [
    "AdmissionPolicy",
    "Project",
    "ProjectViolation",
    "apply_override",
    "build_override_table",
    "build_projects",
    "filter_admissible",
    "generate_document",
    "prettify_slug",
    "project_from_manual",
    "project_from_repository",
    "render_document",
    "resolve_overrides",
    "sort_projects",
    "validate_projects",
]
