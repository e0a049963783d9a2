"""Markdown rendering of the final project list."""

from collections.abc import Iterable

from .models import Project

DOCUMENT_TITLE = "# Prior Inventions"


def wrap_md_link(text: str, link: str | None) -> str:
    """Wrap text in a Markdown [text](url) link. If link is None don't wrap."""
    if link is not None:
        return f"[{text}]({link})"
    return text


def sort_projects(projects: Iterable[Project]) -> list[Project]:
    """Sort by name, case-sensitively. Equal names keep their input order."""
    return sorted(projects, key=lambda project: project.name)


def format_project_line(project: Project) -> str:
    """Format a single project as a Markdown list item."""
    return f"- **{wrap_md_link(project.name, project.link)}**: {project.description}"


def render_document(
    projects: Iterable[Project],
    description: str,
    markdown_header: str | None = None,
) -> str:
    """Render the complete Markdown document.

    Args:
        projects: Validated projects, in merge order
        description: Introductory paragraph shown under the title
        markdown_header: Optional block placed at the very top

    Returns:
        Document text ending with a single newline
    """
    lines = [format_project_line(project) for project in sort_projects(projects)]

    paragraphs = []
    if markdown_header and markdown_header.strip():
        paragraphs.append(markdown_header.strip("\n"))
    intro = description.strip("\n")
    paragraphs.append(f"{DOCUMENT_TITLE}\n{intro}")
    if lines:
        paragraphs.append("\n".join(lines))

    return "\n\n".join(paragraphs) + "\n"
