"""CLI commands for generating and checking the prior inventions document."""

import logging

import typer
from rich.console import Console
from rich.table import Table

from ..config import Config, load_config
from ..errors import ConfigurationError, PriorInventionsError
from ..github_client.client import GitHubClient
from ..github_client.models import GitHubRepository
from ..projects.pipeline import build_projects, generate_document
from ..storage.writer import write_document
from .options import (
    CONFIG_OPTION,
    DRY_RUN_OPTION,
    OUTPUT_OPTION,
    TOKEN_OPTION,
    VERBOSE_OPTION,
)

console = Console()


def _configure_logging(verbose: bool) -> None:
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format="%(levelname)s | %(name)s | %(message)s"
        )


def _fetch_repositories(config: Config, token: str | None) -> list[GitHubRepository]:
    """Fetch the account's repositories, reporting a missing token as config."""
    try:
        client = GitHubClient(token=token or config.github.resolved_token())
    except ValueError as e:
        raise ConfigurationError(str(e)) from e

    console.print(f"🔎 Fetching repositories for {config.github.username}...")
    return client.list_repositories()


def generate(
    config_path: str = CONFIG_OPTION,
    output: str | None = OUTPUT_OPTION,
    token: str | None = TOKEN_OPTION,
    dry_run: bool = DRY_RUN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Generate the prior inventions document.

    Repositories owned by github.username, plus the allowed repositories of
    github.organizations, are merged with the manually declared projects.
    Nothing is written if any project is incomplete.

    Examples:
        # Write to the file configured in document.file
        prior-inventions generate --config config.yaml

        # Preview without writing
        prior-inventions generate --config config.yaml --dry-run
    """
    _configure_logging(verbose)

    try:
        config = load_config(config_path)
        repositories = _fetch_repositories(config, token)
        document = generate_document(repositories, config)
    except PriorInventionsError as e:
        console.print(
            f"❌ Error: {e}", markup=False, highlight=False, emoji=False, soft_wrap=True
        )
        raise typer.Exit(1)

    if dry_run:
        console.print(
            document, markup=False, highlight=False, emoji=False, soft_wrap=True
        )
        return

    destination = output or config.document.file
    try:
        file_path = write_document(destination, document)
    except OSError as e:
        console.print(
            f"❌ Error writing {destination}: {e}",
            markup=False,
            highlight=False,
            emoji=False,
            soft_wrap=True,
        )
        raise typer.Exit(1)

    console.print(f"✅ Wrote {file_path}")
    console.print("Done")


def check(
    config_path: str = CONFIG_OPTION,
    token: str | None = TOKEN_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Validate configuration and sources and list the resulting projects.

    Example:
        prior-inventions check --config config.yaml
    """
    _configure_logging(verbose)

    try:
        config = load_config(config_path)
        repositories = _fetch_repositories(config, token)
        projects = build_projects(repositories, config)
    except PriorInventionsError as e:
        console.print(
            f"❌ Error: {e}", markup=False, highlight=False, emoji=False, soft_wrap=True
        )
        raise typer.Exit(1)

    table = Table(title="Projects")
    table.add_column("Slug", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Link")
    table.add_column("Description")
    for project in projects:
        table.add_row(
            project.slug, project.name, project.link or "-", project.description
        )

    console.print(table)
    console.print(f"✅ {len(projects)} projects are complete")
