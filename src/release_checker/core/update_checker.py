"""Compare installed subject versions against known latest releases."""

from __future__ import annotations

import logging
from typing import Callable

from release_checker.core.errors import FetchError
from release_checker.models import UpdateState
from release_checker.models.release import ReleaseInfo, RepositoryID
from release_checker.models.subject import PluginInfo, Subject, SubjectStatus, UpdateOffer
from release_checker.utils.version_compare import classify_update, compare_versions

logger = logging.getLogger(__name__)

ReleaseLookup = Callable[[str], ReleaseInfo]
ProgressCallback = Callable[[int, int, str], None]


def evaluate_subject(subject: Subject, lookup: ReleaseLookup) -> SubjectStatus:
    """Classify a single subject as outdated, current or unknown.

    Subjects tied to a repository take their latest version from its latest
    release; if that lookup fails the status is UNKNOWN, never CURRENT.
    Other subjects use the host-known latest version, falling back to the
    installed version when nothing newer is known.
    """
    current = subject.current_version

    if subject.repository:
        try:
            latest = lookup(subject.repository).tag
        except FetchError as e:
            logger.debug("Release lookup failed for %s: %s", subject.name, e)
            return SubjectStatus(
                subject=subject,
                latest_version="",
                state=UpdateState.UNKNOWN,
                update_type="unknown",
                error=str(e),
            )
    else:
        latest = subject.latest_version or current

    result = compare_versions(current, latest)
    state = UpdateState.OUTDATED if result.update_available else UpdateState.CURRENT
    return SubjectStatus(
        subject=subject,
        latest_version=latest,
        state=state,
        update_type=classify_update(current, latest),
    )


def check_subjects(
    subjects: list[Subject],
    lookup: ReleaseLookup,
    on_progress: ProgressCallback | None = None,
) -> list[SubjectStatus]:
    """Evaluate every subject, looking up each repository at most once."""
    memo = _MemoLookup(lookup)
    results: list[SubjectStatus] = []
    total = len(subjects)

    for i, subject in enumerate(subjects, 1):
        if on_progress:
            on_progress(i, total, subject.name)
        results.append(evaluate_subject(subject, memo))

    return results


class _MemoLookup:
    """Per-run memo of lookup outcomes, failures included."""

    def __init__(self, lookup: ReleaseLookup):
        self._lookup = lookup
        self._results: dict[str, ReleaseInfo | FetchError] = {}

    def __call__(self, repository: str) -> ReleaseInfo:
        if repository not in self._results:
            try:
                self._results[repository] = self._lookup(repository)
            except FetchError as e:
                self._results[repository] = e
        outcome = self._results[repository]
        if isinstance(outcome, FetchError):
            raise outcome
        return outcome


def build_update_offer(
    slug: str,
    current_version: str,
    release: ReleaseInfo,
    repository: str | RepositoryID,
) -> UpdateOffer | None:
    """Return the offer a host updater should register, or None if up to date."""
    if not compare_versions(current_version, release.tag).update_available:
        return None
    repo = repository if isinstance(repository, RepositoryID) else RepositoryID.parse(repository)
    return UpdateOffer(
        slug=slug or repo.name,
        new_version=release.tag,
        package=release.artifact_url,
        url=repo.html_url,
    )


def check_self_update(
    repository: str,
    current_version: str,
    slug: str,
    lookup: ReleaseLookup,
) -> UpdateOffer | None:
    """Fetch the latest release and build an offer.

    FetchError propagates so callers can tell "unknown" from "no update".
    """
    release = lookup(repository)
    offer = build_update_offer(slug, current_version, release, repository)
    if offer:
        logger.info("Update available for %s: %s -> %s", slug, current_version, offer.new_version)
    return offer


def build_plugin_info(
    requested_slug: str,
    slug: str,
    name: str,
    description: str,
    repository: str,
    lookup: ReleaseLookup,
) -> PluginInfo | None:
    """Answer a host's plugin-information request for this package.

    Returns None when the request is for another slug (without any lookup)
    or when the latest release cannot be fetched, so the host falls back to
    its own handling.
    """
    repo = RepositoryID.parse(repository)
    own_slug = slug or repo.name
    if requested_slug != own_slug:
        return None

    try:
        release = lookup(str(repo))
    except FetchError as e:
        logger.debug("Plugin info for %s unavailable: %s", own_slug, e)
        return None

    return PluginInfo(
        name=name or repo.name,
        slug=own_slug,
        version=release.tag,
        download_link=release.artifact_url,
        sections={"description": description},
    )
