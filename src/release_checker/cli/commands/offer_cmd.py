"""relcheck offer <owner/name> --current <version> - Self-update decision."""

from __future__ import annotations

import typer

from release_checker.cli.options import OutputOption, RefreshOption
from release_checker.core.errors import FetchError
from release_checker.core.release_cache import cached_fetcher
from release_checker.core.update_checker import check_self_update
from release_checker.models.release import RepositoryID
from release_checker.output.formatters import output_offer


def offer(
    repository: str = typer.Argument(help="Repository that publishes the package, as owner/name"),
    current: str = typer.Option(..., "--current", "-c", help="Currently installed version"),
    slug: str = typer.Option("", "--slug", "-s", help="Package slug reported in the offer (default: repository name)"),
    output: str = OutputOption,
    refresh: bool = RefreshOption,
) -> None:
    """Report the update a host updater should offer, if any."""
    try:
        repo = RepositoryID.parse(repository)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    fetcher = cached_fetcher(force=refresh)
    try:
        result = check_self_update(str(repo), current, slug, fetcher.fetch_latest_release)
    except FetchError as e:
        # Unknown is not the same as up to date.
        typer.echo(f"Update status unknown [{e.kind}]: {e}", err=True)
        raise typer.Exit(code=1)

    output_offer(result, current, output)
