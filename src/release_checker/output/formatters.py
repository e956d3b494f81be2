"""Table / JSON / YAML output dispatch."""

from __future__ import annotations

import json
from typing import Any

import yaml
from rich.console import Console
from rich.markup import escape

from release_checker.models import SubjectKind, UpdateState, VersionComparisonResult
from release_checker.models.release import ReleaseInfo, RepositoryID
from release_checker.models.subject import PluginInfo, SubjectStatus, UpdateOffer

console = Console()


def _status_to_dict(s: SubjectStatus) -> dict[str, Any]:
    return {
        "name": s.subject.name,
        "kind": s.subject.kind.value,
        "slug": s.subject.slug,
        "current_version": s.subject.current_version,
        "latest_version": s.latest_version,
        "state": s.state.value,
        "update_type": s.update_type,
        "error": s.error,
    }


def _emit(data: Any, fmt: str) -> bool:
    """Print ``data`` as JSON or YAML; return False for table output."""
    if fmt == "json":
        console.print_json(json.dumps(data, indent=2))
        return True
    if fmt == "yaml":
        console.print(yaml.dump(data, default_flow_style=False, sort_keys=False), markup=False)
        return True
    return False


def output_statuses(statuses: list[SubjectStatus], fmt: str) -> None:
    if _emit([_status_to_dict(s) for s in statuses], fmt):
        return

    from release_checker.output.tables import subject_status_table
    sections = (("Plugins", SubjectKind.PLUGIN), ("Themes", SubjectKind.THEME))
    for title, kind in sections:
        rows = [s for s in statuses if s.subject.kind == kind]
        if rows:
            console.print(subject_status_table(rows, title))

    outdated = sum(1 for s in statuses if s.state == UpdateState.OUTDATED)
    unknown = sum(1 for s in statuses if s.state == UpdateState.UNKNOWN)
    parts = []
    if outdated:
        parts.append(f"[red]{outdated} outdated[/red]")
    if unknown:
        parts.append(f"[yellow]{unknown} unknown (check failed)[/yellow]")
    if parts:
        console.print(f"\n{', '.join(parts)}")
    else:
        console.print("\n[green]Everything is up to date[/green]")


def output_release(release: ReleaseInfo, repo: RepositoryID, fmt: str) -> None:
    data = {"repository": str(repo), **release.to_dict()}
    if _emit(data, fmt):
        return

    from release_checker.output.tables import release_panel
    console.print(release_panel(release, repo))


def output_comparison(
    current: str,
    latest: str,
    result: VersionComparisonResult,
    update_type: str,
    fmt: str,
) -> None:
    data = {
        "current": current,
        "latest": latest,
        "ordering": result.ordering.value,
        "update_available": result.update_available,
        "update_type": update_type,
    }
    if _emit(data, fmt):
        return

    from release_checker.output.tables import comparison_panel
    console.print(comparison_panel(current, latest, result, update_type))


def output_offer(offer: UpdateOffer | None, current_version: str, fmt: str) -> None:
    if fmt in ("json", "yaml"):
        data = {
            "current_version": current_version,
            "update_available": offer is not None,
            "offer": None,
        }
        if offer:
            data["offer"] = {
                "slug": offer.slug,
                "new_version": offer.new_version,
                "package": offer.package,
                "url": offer.url,
            }
        _emit(data, fmt)
        return

    if offer is None:
        console.print(f"[green]Up to date[/green] (current version {escape(current_version)})")
        return

    from release_checker.output.tables import offer_panel
    console.print(offer_panel(offer))


def output_plugin_info(info: PluginInfo, fmt: str) -> None:
    if _emit(info.to_dict(), fmt):
        return

    from release_checker.output.tables import plugin_info_panel
    console.print(plugin_info_panel(info))
