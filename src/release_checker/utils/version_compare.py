"""Loose semver comparison utilities.

Versions are reduced to a list of numeric segments: any leading non-digit
prefix ("v", "release-") is dropped, a pre-release or build suffix after
the first "-" or "+" is ignored, and each dot-separated segment contributes
its leading digits (0 when it has none). Every string maps to some segment
list, so comparison is total and never raises.

Segments are kept as canonical digit strings (no leading zeros) and ordered
by (length, digits), so arbitrarily long numbers never go through int().
"""

from __future__ import annotations

import re
from itertools import zip_longest

from release_checker.models import Ordering, VersionComparisonResult

_DIGITS = frozenset("0123456789")
_LEADING_DIGITS = re.compile(r"[0-9]+")


def has_version_digits(v: str) -> bool:
    """True if ``v`` contains at least one ASCII digit to compare on."""
    return any(ch in _DIGITS for ch in v or "")


def version_segments(v: str) -> list[str]:
    """Return the canonical numeric segments of a version string (``["0"]`` if none)."""
    text = (v or "").strip()

    start = next((i for i, ch in enumerate(text) if ch in _DIGITS), None)
    if start is None:
        return ["0"]

    core = re.split(r"[-+]", text[start:], maxsplit=1)[0]
    segments: list[str] = []
    for chunk in core.split("."):
        m = _LEADING_DIGITS.match(chunk)
        segments.append((m.group().lstrip("0") or "0") if m else "0")
    return segments


def _first_difference(current: list[str], latest: list[str]) -> tuple[int, int] | None:
    """Return (index, sign) of the first unequal segment pair, or None."""
    for i, (cur, lat) in enumerate(zip_longest(current, latest, fillvalue="0")):
        if cur != lat:
            return i, (-1 if (len(cur), cur) < (len(lat), lat) else 1)
    return None


def compare_versions(current: str, latest: str) -> VersionComparisonResult:
    """Compare ``current`` against ``latest``.

    ``update_available`` is True only when ``current`` orders before ``latest``.
    """
    diff = _first_difference(version_segments(current), version_segments(latest))
    if diff is None:
        ordering = Ordering.EQUAL
    elif diff[1] < 0:
        ordering = Ordering.LESS
    else:
        ordering = Ordering.GREATER
    return VersionComparisonResult(ordering=ordering, update_available=ordering == Ordering.LESS)


def classify_update(current: str, latest: str) -> str:
    """Classify the update type between two version strings.

    Returns: "major", "minor", "patch" or "up-to-date".
    """
    diff = _first_difference(version_segments(current), version_segments(latest))
    if diff is None or diff[1] > 0:
        return "up-to-date"
    index = diff[0]
    if index == 0:
        return "major"
    if index == 1:
        return "minor"
    return "patch"


def is_newer(current: str, candidate: str) -> bool:
    """Return True if candidate is newer than current."""
    return compare_versions(current, candidate).update_available
