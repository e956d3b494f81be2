"""relcheck info <owner/name> - Plugin details for a host's "view details" request."""

from __future__ import annotations

from typing import Optional

import typer

from release_checker.cli.options import OutputOption, RefreshOption
from release_checker.core.release_cache import cached_fetcher
from release_checker.core.update_checker import build_plugin_info
from release_checker.models.release import RepositoryID
from release_checker.output.formatters import output_plugin_info


def info(
    repository: str = typer.Argument(help="Repository that publishes the package, as owner/name"),
    slug: str = typer.Option("", "--slug", "-s", help="Package slug (default: repository name)"),
    name: str = typer.Option("", "--name", "-n", help="Display name (default: repository name)"),
    description: str = typer.Option("", "--description", "-d", help="Description section text"),
    request: Optional[str] = typer.Option(
        None, "--request", "-r", help="Slug the host asked about (default: this package's slug)",
    ),
    output: str = OutputOption,
    refresh: bool = RefreshOption,
) -> None:
    """Describe the latest release of a package, if the request is for it."""
    try:
        repo = RepositoryID.parse(repository)
    except ValueError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=2)

    own_slug = slug or repo.name
    requested = own_slug if request is None else request

    fetcher = cached_fetcher(force=refresh)
    result = build_plugin_info(requested, own_slug, name, description, str(repo), fetcher.fetch_latest_release)
    if result is None:
        if requested != own_slug:
            typer.echo(f"Request for '{requested}' is not handled by '{own_slug}'", err=True)
        else:
            typer.echo(f"No plugin information available for '{own_slug}' (release lookup failed)", err=True)
        raise typer.Exit(code=1)

    output_plugin_info(result, output)
