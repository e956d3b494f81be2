"""Load the installed plugin / theme inventory from YAML.

Expected layout::

    plugins:
      - name: Verificador
        slug: verificador/verificador.php
        version: 1.0.0
        repository: spalmeida/verificador
    themes:
      - name: Twenty Twenty-Four
        version: "1.1"
        latest: "1.2"
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import yaml

from release_checker.core.errors import InventoryError
from release_checker.models import SubjectKind
from release_checker.models.release import RepositoryID
from release_checker.models.subject import Subject

logger = logging.getLogger(__name__)

_SECTIONS = {
    "plugins": SubjectKind.PLUGIN,
    "themes": SubjectKind.THEME,
}


def load_inventory(path: Path) -> list[Subject]:
    if not path.exists():
        raise InventoryError(f"Inventory file not found: {path}")
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise InventoryError(f"Could not parse {path}: {e}") from e
    subjects = parse_inventory(data)
    logger.debug("Loaded %d subjects from %s", len(subjects), path)
    return subjects


def parse_inventory(data: Any) -> list[Subject]:
    if data is None:
        return []
    if not isinstance(data, dict):
        raise InventoryError("Inventory must be a mapping with 'plugins' and/or 'themes'")

    unknown = set(data) - set(_SECTIONS)
    if unknown:
        raise InventoryError(f"Unknown inventory section(s): {', '.join(sorted(map(str, unknown)))}")

    subjects: list[Subject] = []
    for section, kind in _SECTIONS.items():
        entries = data.get(section) or []
        if not isinstance(entries, list):
            raise InventoryError(f"'{section}' must be a list")
        for i, entry in enumerate(entries):
            subjects.append(_parse_entry(entry, kind, f"{section}[{i}]"))
    return subjects


def _parse_entry(entry: Any, kind: SubjectKind, where: str) -> Subject:
    if not isinstance(entry, dict):
        raise InventoryError(f"{where}: expected a mapping")

    name = _text(entry.get("name"))
    if not name:
        raise InventoryError(f"{where}: missing 'name'")
    if "version" not in entry:
        raise InventoryError(f"{where} ({name}): missing 'version'")

    repository = _text(entry.get("repository"))
    if repository:
        try:
            repository = str(RepositoryID.parse(repository))
        except ValueError as e:
            raise InventoryError(f"{where} ({name}): {e}") from e

    return Subject(
        name=name,
        current_version=_text(entry.get("version")),
        kind=kind,
        slug=_text(entry.get("slug")),
        latest_version=_text(entry.get("latest")),
        repository=repository,
    )


def _text(value: Any) -> str:
    # YAML reads unquoted 1.0 as a float
    if value is None:
        return ""
    return str(value).strip()
