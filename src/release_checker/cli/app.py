"""Root Typer application, mounts sub-commands."""

from __future__ import annotations

import logging

import typer

app = typer.Typer(
    name="relcheck",
    help="Release Checker - Compare installed plugin and theme versions against their latest releases.",
    no_args_is_help=True,
)


@app.callback()
def root(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="[%(levelname)s %(name)s] %(message)s")


def _register_commands() -> None:
    from release_checker.cli.commands.check_cmd import check
    from release_checker.cli.commands.compare_cmd import compare
    from release_checker.cli.commands.info_cmd import info
    from release_checker.cli.commands.latest_cmd import latest
    from release_checker.cli.commands.offer_cmd import offer

    app.command("check", help="Check installed plugins and themes for updates")(check)
    app.command("latest", help="Show the latest release of a repository")(latest)
    app.command("compare", help="Compare two version strings")(compare)
    app.command("offer", help="Decide whether a package should be offered an update")(offer)
    app.command("info", help="Show plugin details for a host's information request")(info)


_register_commands()


def main() -> None:
    app()
