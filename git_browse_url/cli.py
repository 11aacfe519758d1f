"""Typer CLI entrypoint for git-browse-url."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console

from . import __version__, git
from .builder import UrlBuilder
from .config import DEFAULT_REMOTE, configure_logging, load_settings
from .exceptions import BrowseUrlError
from .models import BuildRequest

app = typer.Typer(
    help="Print the remote web URL for a file or directory in a git working copy",
    add_completion=False,
)
err_console = Console(stderr=True)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"git-browse-url {__version__}")
        raise typer.Exit()


@app.command()
def main(
    file: str = typer.Argument(
        "./",
        help="File or directory, relative to the current directory or to the repository root.",
    ),
    line: Optional[int] = typer.Option(None, "--line", "-l", min=1, help="Line number to link to."),
    remote: Optional[str] = typer.Option(
        None,
        "--remote",
        "-r",
        help="Remote name (defaults to origin, or the first configured remote).",
    ),
    branch: Optional[str] = typer.Option(
        None,
        "--branch",
        "-b",
        help="Branch name (defaults to the current branch).",
    ),
    open_: bool = typer.Option(False, "--open", "-o", help="Also open the URL in the default browser."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable verbose logging."),
    version: bool = typer.Option(
        False,
        "--version",
        callback=_version_callback,
        is_eager=True,
        help="Show the git-browse-url version and exit.",
    ),
) -> None:
    """Build a blob/tree URL for FILE on the current branch.

    Examples:

        git-browse-url

        git-browse-url src/app.py --line 42

        git-browse-url docs -r upstream -b release/1.2
    """
    _ = version  # handled via callback
    configure_logging(verbose)
    try:
        settings = load_settings()
        cwd = Path.cwd()
        request = BuildRequest(
            remote=remote or settings.remote or git.default_remote(cwd, DEFAULT_REMOTE),
            branch=branch or settings.branch or git.current_branch(cwd),
            file=file,
            line=line,
        )
        url = UrlBuilder.for_repository(cwd).build(request)
    except BrowseUrlError as exc:
        err_console.print(f"[red]Error:[/red] {exc}")
        raise typer.Exit(1) from exc

    typer.echo(url)
    if open_ or settings.open_browser:
        typer.launch(url)


if __name__ == "__main__":
    app()
