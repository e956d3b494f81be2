"""relcheck compare <current> <latest> - Compare two version strings."""

from __future__ import annotations

import typer

from release_checker.cli.options import OutputOption
from release_checker.output.formatters import output_comparison
from release_checker.utils.version_compare import classify_update, compare_versions


def compare(
    current: str = typer.Argument(help="Installed version"),
    latest: str = typer.Argument(help="Latest known version"),
    output: str = OutputOption,
) -> None:
    """Compare an installed version against a latest version."""
    result = compare_versions(current, latest)
    output_comparison(current, latest, result, classify_update(current, latest), output)
