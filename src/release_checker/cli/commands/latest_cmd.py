"""relcheck latest <owner/name> - Show the latest release of a repository."""

from __future__ import annotations

import typer

from release_checker.cli.options import OutputOption, RefreshOption
from release_checker.core.errors import FetchError, HTTPError
from release_checker.core.release_cache import cached_fetcher
from release_checker.models.release import RepositoryID
from release_checker.output.formatters import output_release


def latest(
    repository: str = typer.Argument(help="Repository as owner/name or GitHub URL"),
    output: str = OutputOption,
    refresh: bool = RefreshOption,
) -> None:
    """Fetch the latest published release of a GitHub repository."""
    try:
        repo = RepositoryID.parse(repository)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    fetcher = cached_fetcher(force=refresh)
    try:
        release = fetcher.fetch_latest_release(repo)
    except FetchError as e:
        typer.echo(f"Could not fetch latest release [{e.kind}]: {e}", err=True)
        if isinstance(e, HTTPError) and e.status == 404:
            typer.echo("Tip: the repository may not exist or has no published releases.", err=True)
        raise typer.Exit(code=1)

    output_release(release, repo, output)
