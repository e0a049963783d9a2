"""Main CLI entry point."""

import typer
from dotenv import load_dotenv
from rich.console import Console

from .generate import check, generate

# Load environment variables from .env file
load_dotenv()

app = typer.Typer(
    name="prior-inventions",
    help="Generate a prior inventions document from GitHub repositories",
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
)
console = Console()


app.command(name="generate", context_settings={"help_option_names": ["-h", "--help"]})(
    generate
)
app.command(name="check", context_settings={"help_option_names": ["-h", "--help"]})(
    check
)


@app.command(context_settings={"help_option_names": ["-h", "--help"]})
def version() -> None:
    """Show version information."""
    from prior_inventions import __version__

    console.print(f"Prior Inventions v{__version__}")


if __name__ == "__main__":
    app()
