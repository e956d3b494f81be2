"""relcheck check - Check installed plugins and themes for updates."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape

from release_checker.cli.options import OutputOption, RefreshOption
from release_checker.config.settings import settings
from release_checker.core.errors import InventoryError
from release_checker.core.inventory import load_inventory
from release_checker.core.release_cache import cached_fetcher
from release_checker.core.update_checker import check_subjects
from release_checker.output.formatters import output_statuses

console = Console(stderr=True)


def check(
    inventory: Optional[Path] = typer.Option(
        None, "--inventory", "-i", help="Inventory YAML file (default: ~/.config/relcheck/inventory.yaml)",
    ),
    output: str = OutputOption,
    refresh: bool = RefreshOption,
) -> None:
    """Compare every installed plugin and theme against its latest version."""
    path = inventory or settings.inventory_file
    try:
        subjects = load_inventory(path)
    except InventoryError as e:
        typer.echo(str(e), err=True)
        raise typer.Exit(code=1)

    if not subjects:
        console.print("[dim]Inventory is empty.[/dim]")
        return

    fetcher = cached_fetcher(force=refresh)
    with console.status("[bold cyan]Checking versions…") as status:
        def on_progress(i: int, total: int, name: str) -> None:
            status.update(f"[bold cyan]Checking versions… [dim]({i}/{total})[/dim] {escape(name)}")

        results = check_subjects(subjects, fetcher.fetch_latest_release, on_progress=on_progress)

    output_statuses(results, output)
