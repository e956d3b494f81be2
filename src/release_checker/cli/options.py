"""Shared CLI options."""

from __future__ import annotations

import typer

from release_checker.config.settings import settings

OutputOption = typer.Option(
    settings.default_output, "--output", "-o",
    help="Output format: table, json, yaml (default from RELCHECK_OUTPUT)",
)
RefreshOption = typer.Option(False, "--refresh", help="Ignore cached release data and query GitHub again")
