"""Bounded-interval cache of latest-release lookups.

The cache is a small JSON file mapping ``owner/name`` to the last
successful fetch and its timestamp.  Entries older than the TTL are
ignored, so the remote API is queried at most once per interval per
repository.  Failed fetches are never stored.
"""

from __future__ import annotations

import json
import logging
from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import Callable

from release_checker.config.settings import settings
from release_checker.core.release_fetcher import ReleaseFetcher
from release_checker.models.release import ReleaseInfo, RepositoryID
from release_checker.utils.version_compare import has_version_digits

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _is_usable(release: ReleaseInfo) -> bool:
    """Same acceptance rule as a fresh fetch: a digit-bearing tag and an artifact URL."""
    tag, artifact = release.tag, release.artifact_url
    return isinstance(tag, str) and has_version_digits(tag) and isinstance(artifact, str) and bool(artifact.strip())


class ReleaseCache:
    def __init__(self, path: Path, ttl: timedelta, clock: Clock = _utcnow):
        self.path = path
        self.ttl = ttl
        self.clock = clock

    def _load(self) -> dict:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except Exception:
            logger.debug("Corrupt release cache %s, ignoring", self.path, exc_info=True)
            return {}
        return data if isinstance(data, dict) else {}

    def _save(self, data: dict) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")
        except OSError:
            logger.debug("Could not write release cache %s", self.path, exc_info=True)

    def get(self, repository: str) -> ReleaseInfo | None:
        """Return the cached release if it is younger than the TTL."""
        entry = self._load().get(repository)
        if not isinstance(entry, dict):
            return None
        try:
            fetched_at = datetime.fromisoformat(entry["fetched_at"])
            release = ReleaseInfo.from_dict(entry["release"])
        except (KeyError, TypeError, ValueError):
            logger.debug("Invalid cache entry for %s", repository, exc_info=True)
            return None
        if not _is_usable(release):
            logger.debug("Cache entry for %s has no usable release, ignoring", repository)
            return None
        if fetched_at.tzinfo is None:
            fetched_at = fetched_at.replace(tzinfo=timezone.utc)

        age = self.clock() - fetched_at
        if age < timedelta(0) or age >= self.ttl:
            return None
        return release

    def put(self, repository: str, release: ReleaseInfo) -> None:
        data = self._load()
        data[repository] = {
            "fetched_at": self.clock().isoformat(),
            "release": release.to_dict(),
        }
        self._save(data)

    def invalidate(self, repository: str) -> None:
        data = self._load()
        if data.pop(repository, None) is not None:
            self._save(data)

    def clear(self) -> None:
        if self.path.exists():
            self._save({})


class CachedReleaseFetcher:
    """ReleaseFetcher front-end that consults a ReleaseCache first.

    With ``force=True`` the cache is bypassed for reads but still refreshed.
    """

    def __init__(self, fetcher: ReleaseFetcher, cache: ReleaseCache, force: bool = False):
        self.fetcher = fetcher
        self.cache = cache
        self.force = force

    def fetch_latest_release(self, repository_id: str | RepositoryID) -> ReleaseInfo:
        repo = repository_id if isinstance(repository_id, RepositoryID) else RepositoryID.parse(repository_id)
        key = str(repo)

        if not self.force:
            cached = self.cache.get(key)
            if cached is not None:
                logger.debug("Release cache hit for %s", key)
                return cached

        release = self.fetcher.fetch_latest_release(repo)
        self.cache.put(key, release)
        return release


def cached_fetcher(force: bool = False) -> CachedReleaseFetcher:
    """Build a cached fetcher from the global settings."""
    cache = ReleaseCache(settings.cache_file, settings.cache_ttl)
    return CachedReleaseFetcher(ReleaseFetcher(), cache, force=force)
