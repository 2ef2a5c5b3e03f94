"""Command-line interface for polyvcs."""

import logging
import sys

import typer
from rich.console import Console
from rich.logging import RichHandler

from polyvcs import __version__
from polyvcs.config import ConfigurationError, PolyVcsConfig
from polyvcs.vcs import RepositoryFactory, RepositoryKind, VCSError

app = typer.Typer(
    name="polyvcs",
    help="One interface over Git, Mercurial and Bazaar",
    add_completion=False,
)
console = Console()

# Help text constants
VERBOSE_OUTPUT_HELP = "Verbose output"
ENV_FILE_HELP = "Path to custom environment file (default: .env.polyvcs or .env)"
REPO_PATH_HELP = "Repository root directory"


def setup_logging(verbose: bool) -> None:
    """Setup logging configuration.

    Args:
        verbose: If True, enable debug logging
    """
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def _report_error(e: Exception, verbose: bool) -> None:
    if isinstance(e, ConfigurationError):
        console.print(f"[red]Configuration error: {e}[/red]")
    else:
        console.print(f"[red]Error: {e}[/red]")
    if verbose:
        console.print_exception()


@app.command()
def init(
    kind: RepositoryKind = typer.Argument(..., help="Kind of repository to create (git, hg, bzr)"),
    path: str = typer.Argument(..., help="Directory to create the repository in"),
    env_file: str | None = typer.Option(
        None,
        "--env-file",
        help=ENV_FILE_HELP,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help=VERBOSE_OUTPUT_HELP,
    ),
) -> None:
    """Initialize a new repository."""
    setup_logging(verbose)

    if kind == RepositoryKind.UNKNOWN:
        console.print("[red]Choose a repository kind to create[/red]")
        sys.exit(1)

    if not kind.is_implemented:
        console.print(f"[red]{kind.display_name} support is not implemented[/red]")
        sys.exit(1)

    try:
        config = PolyVcsConfig(env_file=env_file)
        repo = RepositoryFactory.create(kind, config=config)

        if not repo.init(path):
            console.print(f"[red]{kind.display_name} could not initialize {path}[/red]")
            sys.exit(1)

        console.print(f"[green]Initialized {kind.display_name} repository in {path}[/green]")

    except (ConfigurationError, VCSError) as e:
        _report_error(e, verbose)
        sys.exit(1)


@app.command()
def detect(
    path: str = typer.Argument(".", help=REPO_PATH_HELP),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help=VERBOSE_OUTPUT_HELP,
    ),
) -> None:
    """Show which version control system manages a directory."""
    setup_logging(verbose)

    kind = RepositoryFactory.detect_kind(path)
    if kind == RepositoryKind.UNKNOWN:
        console.print(f"[yellow]No repository found in {path}[/yellow]")
        sys.exit(1)

    console.print(kind.value)


@app.command()
def branches(
    path: str = typer.Argument(".", help=REPO_PATH_HELP),
    env_file: str | None = typer.Option(
        None,
        "--env-file",
        help=ENV_FILE_HELP,
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help=VERBOSE_OUTPUT_HELP,
    ),
) -> None:
    """List the branches of a repository."""
    setup_logging(verbose)

    try:
        config = PolyVcsConfig(env_file=env_file)
        repo = RepositoryFactory.get_repo(path, config)

        if repo is None:
            console.print(f"[red]No repository found in {path}[/red]")
            sys.exit(1)

        for name in repo.branches():
            console.print(name, markup=False, highlight=False, soft_wrap=True)

    except (ConfigurationError, VCSError) as e:
        _report_error(e, verbose)
        sys.exit(1)


@app.command()
def version() -> None:
    """Show version information."""
    console.print(f"polyvcs version {__version__}")


if __name__ == "__main__":
    app()
