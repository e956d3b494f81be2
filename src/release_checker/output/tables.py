"""Rich table builders for each command.

Every value that comes from an inventory, a command line or a release
payload is passed through ``escape`` so brackets in it print literally.
"""

from __future__ import annotations

from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from release_checker.models import VersionComparisonResult
from release_checker.models.release import ReleaseInfo, RepositoryID
from release_checker.models.subject import PluginInfo, SubjectStatus, UpdateOffer
from release_checker.output.themes import (
    styled_ordering,
    styled_state,
    styled_update_type,
    styled_version,
)


def _key_value_table() -> Table:
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="bold cyan", no_wrap=True)
    table.add_column("Value")
    return table


def subject_status_table(statuses: list[SubjectStatus], title: str) -> Table:
    table = Table(title=title, expand=True, show_lines=False)
    table.add_column("Name", style="bold white", no_wrap=True)
    table.add_column("Current", no_wrap=True)
    table.add_column("Latest", style="bold", no_wrap=True)
    table.add_column("Status", no_wrap=True)
    table.add_column("Update", no_wrap=True)
    table.add_column("Note", style="dim", max_width=40)

    for s in statuses:
        table.add_row(
            escape(s.subject.name),
            styled_version(s.subject.current_version, s.state),
            escape(s.latest_version or "-"),
            styled_state(s.state),
            styled_update_type(s.update_type),
            escape(s.error),
        )
    return table


def release_panel(release: ReleaseInfo, repo: RepositoryID) -> Panel:
    table = _key_value_table()

    table.add_row("Repository", escape(str(repo)))
    table.add_row("Tag", escape(release.tag))
    if release.name and release.name != release.tag:
        table.add_row("Name", escape(release.name))
    table.add_row("Package", escape(release.artifact_url))
    table.add_row("Page", escape(release.html_url or repo.html_url))
    table.add_row("Published", escape(release.published_at or "-"))
    if release.prerelease:
        table.add_row("Pre-release", "[yellow]yes[/yellow]")

    return Panel(table, title=f"[bold]Latest Release: {escape(str(repo))}[/bold]", border_style="blue")


def comparison_panel(current: str, latest: str, result: VersionComparisonResult, update_type: str) -> Panel:
    table = _key_value_table()

    table.add_row("Current", escape(current or "-"))
    table.add_row("Latest", escape(latest or "-"))
    table.add_row("Ordering", styled_ordering(result.ordering))
    table.add_row("Update Available", "[red bold]yes[/red bold]" if result.update_available else "[green]no[/green]")
    table.add_row("Update Type", styled_update_type(update_type))

    return Panel(table, title="[bold]Version Comparison[/bold]", border_style="blue")


def offer_panel(offer: UpdateOffer) -> Panel:
    table = _key_value_table()

    table.add_row("Slug", escape(offer.slug))
    table.add_row("New Version", f"[bold]{escape(offer.new_version)}[/bold]")
    table.add_row("Package", escape(offer.package))
    table.add_row("URL", escape(offer.url))

    return Panel(table, title="[bold]Update Available[/bold]", border_style="yellow")


def plugin_info_panel(info: PluginInfo) -> Panel:
    table = _key_value_table()

    table.add_row("Name", escape(info.name))
    table.add_row("Slug", escape(info.slug))
    table.add_row("Version", f"[bold]{escape(info.version)}[/bold]")
    table.add_row("Download", escape(info.download_link))
    for section, text in info.sections.items():
        table.add_row(escape(section.title()), escape(text or "-"))

    return Panel(table, title=f"[bold]Plugin Information: {escape(info.name)}[/bold]", border_style="blue")
