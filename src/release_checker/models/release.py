"""Repository and release models."""

from __future__ import annotations

import re
from dataclasses import dataclass

_SLUG_RE = re.compile(r"^[A-Za-z0-9_.-]+$")
_GITHUB_PREFIXES = ("https://github.com/", "http://github.com/", "github.com/")


@dataclass(frozen=True)
class RepositoryID:
    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"

    @property
    def html_url(self) -> str:
        return f"https://github.com/{self.owner}/{self.name}"

    @classmethod
    def parse(cls, value: str) -> RepositoryID:
        """Parse ``owner/name`` or a github.com repository URL."""
        raw = (value or "").strip()
        for prefix in _GITHUB_PREFIXES:
            if raw.lower().startswith(prefix):
                raw = raw[len(prefix):]
                break
        raw = raw.rstrip("/")
        if raw.endswith(".git"):
            raw = raw[:-4]

        parts = raw.split("/")
        if len(parts) != 2 or not all(_SLUG_RE.match(p) for p in parts):
            raise ValueError(f"Invalid repository identifier: {value!r} (expected owner/name)")
        return cls(owner=parts[0], name=parts[1])


@dataclass(frozen=True)
class ReleaseInfo:
    tag: str
    artifact_url: str
    html_url: str = ""
    name: str = ""
    published_at: str = ""
    prerelease: bool = False

    def to_dict(self) -> dict:
        return {
            "tag": self.tag,
            "artifact_url": self.artifact_url,
            "html_url": self.html_url,
            "name": self.name,
            "published_at": self.published_at,
            "prerelease": self.prerelease,
        }

    @classmethod
    def from_dict(cls, d: dict) -> ReleaseInfo:
        """Rebuild a release from :meth:`to_dict` output (cache entries)."""
        return cls(
            tag=d["tag"],
            artifact_url=d["artifact_url"],
            html_url=d.get("html_url", ""),
            name=d.get("name", ""),
            published_at=d.get("published_at", ""),
            prerelease=bool(d.get("prerelease", False)),
        )
