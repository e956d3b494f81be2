"""Installed subject (plugin / theme) and update models."""

from __future__ import annotations

from dataclasses import dataclass, field

from release_checker.models import SubjectKind, UpdateState


@dataclass
class Subject:
    name: str
    current_version: str
    kind: SubjectKind = SubjectKind.PLUGIN
    slug: str = ""
    latest_version: str = ""  # host-known latest, if any
    repository: str = ""  # owner/name whose latest release applies to this subject


@dataclass
class SubjectStatus:
    subject: Subject
    latest_version: str
    state: UpdateState
    update_type: str  # "major", "minor", "patch", "up-to-date", "unknown"
    error: str = ""

    @property
    def is_outdated(self) -> bool:
        return self.state == UpdateState.OUTDATED


@dataclass(frozen=True)
class UpdateOffer:
    slug: str
    new_version: str
    package: str
    url: str


@dataclass(frozen=True)
class PluginInfo:
    """Details a host shows in its "view details" dialog for a package."""

    name: str
    slug: str
    version: str  # latest release tag
    download_link: str  # release archive URL
    sections: dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "slug": self.slug,
            "version": self.version,
            "download_link": self.download_link,
            "sections": dict(self.sections),
        }
