"""Data models for Release Checker."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class Ordering(enum.Enum):
    LESS = "less"
    EQUAL = "equal"
    GREATER = "greater"


class SubjectKind(enum.Enum):
    PLUGIN = "plugin"
    THEME = "theme"


class UpdateState(enum.Enum):
    OUTDATED = "outdated"
    CURRENT = "current"
    UNKNOWN = "unknown"


@dataclass(frozen=True)
class VersionComparisonResult:
    ordering: Ordering
    update_available: bool
