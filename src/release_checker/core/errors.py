"""Exceptions raised by release fetching and inventory loading."""

from __future__ import annotations


class FetchError(Exception):
    """Latest-release information could not be obtained for a repository."""

    kind = "fetch-error"

    def __init__(self, repository: str, message: str):
        super().__init__(f"{repository}: {message}")
        self.repository = repository


class NetworkError(FetchError):
    kind = "network-error"


class HTTPError(FetchError):
    kind = "http-error"

    def __init__(self, repository: str, status: int, reason: str = ""):
        message = f"HTTP {status}" + (f" ({reason})" if reason else "")
        super().__init__(repository, message)
        self.status = status
        self.reason = reason


class MalformedResponse(FetchError):
    kind = "malformed-response"

    def __init__(self, repository: str, reason: str):
        super().__init__(repository, f"malformed response: {reason}")
        self.reason = reason


class InventoryError(ValueError):
    """The inventory file is missing or does not have the expected shape."""
