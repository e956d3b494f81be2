"""Application configuration and defaults."""

from __future__ import annotations

import math
import os
from dataclasses import dataclass, field
from datetime import timedelta
from pathlib import Path

APP_NAME = "relcheck"
APP_VERSION = "1.0.0"

OUTPUT_FORMATS = ("table", "json", "yaml")

# Keeps timedelta(hours=...) well inside its range.
MAX_CACHE_TTL_HOURS = 24 * 365 * 10.0


def _default_cache_dir() -> Path:
    """Return the cache directory for fetched release data.

    Checks RELCHECK_CACHE_DIR first, then XDG_CACHE_HOME.
    """
    explicit = os.environ.get("RELCHECK_CACHE_DIR", "")
    if explicit:
        return Path(explicit)
    xdg = os.environ.get("XDG_CACHE_HOME", "")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".cache" / APP_NAME


def _default_config_dir() -> Path:
    config_home = os.environ.get("RELCHECK_CONFIG_HOME", "")
    if config_home:
        return Path(config_home)
    xdg = os.environ.get("XDG_CONFIG_HOME", "")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def _env_float(name: str, default: float, maximum: float | None = None) -> float:
    """Positive finite float from the environment, else ``default``."""
    raw = os.environ.get(name, "")
    if not raw:
        return default
    try:
        value = float(raw)
    except ValueError:
        return default
    if not (math.isfinite(value) and value > 0):
        return default
    return min(value, maximum) if maximum is not None else value


def _default_output() -> str:
    fmt = os.environ.get("RELCHECK_OUTPUT", "").strip().lower()
    return fmt if fmt in OUTPUT_FORMATS else "table"


def _default_api_url() -> str:
    return os.environ.get("RELCHECK_API_URL", "").rstrip("/") or "https://api.github.com"


@dataclass
class Settings:
    api_url: str = field(default_factory=_default_api_url)
    timeout: float = field(default_factory=lambda: _env_float("RELCHECK_TIMEOUT", 10.0))
    cache_dir: Path = field(default_factory=_default_cache_dir)
    cache_ttl_hours: float = field(default_factory=lambda: _env_float("RELCHECK_CACHE_TTL_HOURS", 12.0, MAX_CACHE_TTL_HOURS))
    config_dir: Path = field(default_factory=_default_config_dir)
    default_output: str = field(default_factory=_default_output)

    @property
    def cache_file(self) -> Path:
        return self.cache_dir / "releases.json"

    @property
    def inventory_file(self) -> Path:
        return self.config_dir / "inventory.yaml"

    @property
    def cache_ttl(self) -> timedelta:
        return timedelta(hours=self.cache_ttl_hours)

    @property
    def user_agent(self) -> str:
        return f"{APP_NAME}/{APP_VERSION}"


# Global singleton
settings = Settings()
