"""Standardized CLI option definitions shared by all commands."""

import typer

CONFIG_OPTION = typer.Option(
    "config.yaml", "--config", "-c", help="Path to the YAML configuration file"
)

OUTPUT_OPTION = typer.Option(
    None, "--output", "-O", help="Output file path (defaults to document.file)"
)

TOKEN_OPTION = typer.Option(
    None,
    "--token",
    "-t",
    help="GitHub API token (defaults to github.token, then GITHUB_TOKEN env var)",
)

DRY_RUN_OPTION = typer.Option(
    False, "--dry-run", "-d", help="Print the document instead of writing it"
)

VERBOSE_OPTION = typer.Option(
    False, "--verbose", "-v", help="Log skipped repositories and applied overrides"
)
