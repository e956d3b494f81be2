"""Fetch the latest published release of a GitHub repository."""

from __future__ import annotations

import logging
from typing import Any

import requests

from release_checker.config.settings import settings
from release_checker.core.errors import HTTPError, MalformedResponse, NetworkError
from release_checker.models.release import ReleaseInfo, RepositoryID
from release_checker.utils.version_compare import has_version_digits

logger = logging.getLogger(__name__)


class ReleaseFetcher:
    """Thin wrapper around the GitHub "latest release" endpoint.

    One call to :meth:`fetch_latest_release` issues exactly one GET request.
    Nothing is retried or stored; see ``release_cache`` for caching.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        api_url: str | None = None,
        timeout: float | None = None,
        user_agent: str | None = None,
    ):
        self.session = session if session is not None else requests.Session()
        self.api_url = (api_url or settings.api_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.timeout
        self.user_agent = user_agent or settings.user_agent

    def release_url(self, repo: RepositoryID) -> str:
        return f"{self.api_url}/repos/{repo.owner}/{repo.name}/releases/latest"

    def fetch_latest_release(self, repository_id: str | RepositoryID) -> ReleaseInfo:
        """Return the latest release of ``repository_id``.

        Raises NetworkError, HTTPError or MalformedResponse.
        """
        repo = _as_repository(repository_id)
        url = self.release_url(repo)
        logger.debug("GET %s (timeout=%ss)", url, self.timeout)

        try:
            resp = self.session.get(
                url,
                headers={
                    "Accept": "application/vnd.github+json",
                    "User-Agent": self.user_agent,
                },
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise NetworkError(str(repo), str(e) or e.__class__.__name__) from e

        if not 200 <= resp.status_code < 300:
            raise HTTPError(str(repo), resp.status_code, _error_reason(resp))

        try:
            payload = resp.json()
        except ValueError as e:
            raise MalformedResponse(str(repo), "body is not valid JSON") from e

        release = parse_release(str(repo), payload)
        logger.debug("%s latest release: %s", repo, release.tag)
        return release


def fetch_latest_release(
    repository_id: str | RepositoryID,
    session: requests.Session | None = None,
    api_url: str | None = None,
    timeout: float | None = None,
) -> ReleaseInfo:
    """Module-level convenience for a one-off fetch."""
    fetcher = ReleaseFetcher(session=session, api_url=api_url, timeout=timeout)
    return fetcher.fetch_latest_release(repository_id)


def parse_release(repository: str, payload: Any) -> ReleaseInfo:
    """Build a ReleaseInfo from a GitHub release object.

    Extra fields are ignored; a missing or digit-free tag is rejected.
    """
    if not isinstance(payload, dict):
        raise MalformedResponse(repository, f"expected a JSON object, got {type(payload).__name__}")

    tag = payload.get("tag_name")
    if not isinstance(tag, str) or not tag.strip():
        raise MalformedResponse(repository, "missing tag_name")
    tag = tag.strip()
    if not has_version_digits(tag):
        raise MalformedResponse(repository, f"tag_name {tag!r} is not a version")

    artifact = payload.get("zipball_url")
    if not isinstance(artifact, str) or not artifact.strip():
        raise MalformedResponse(repository, "missing zipball_url")

    return ReleaseInfo(
        tag=tag,
        artifact_url=artifact.strip(),
        html_url=_str_field(payload, "html_url"),
        name=_str_field(payload, "name"),
        published_at=_str_field(payload, "published_at"),
        prerelease=payload.get("prerelease") is True,
    )


def _as_repository(repository_id: str | RepositoryID) -> RepositoryID:
    if isinstance(repository_id, RepositoryID):
        return repository_id
    return RepositoryID.parse(repository_id)


def _str_field(payload: dict, key: str) -> str:
    value = payload.get(key)
    return value.strip() if isinstance(value, str) else ""


def _error_reason(resp: requests.Response) -> str:
    """Best-effort human-readable reason for a failed response."""
    if resp.status_code in (403, 429) and resp.headers.get("X-RateLimit-Remaining") == "0":
        return "rate limit exceeded"
    try:
        body = resp.json()
    except ValueError:
        return resp.reason or ""
    if isinstance(body, dict) and isinstance(body.get("message"), str):
        return body["message"]
    return resp.reason or ""
