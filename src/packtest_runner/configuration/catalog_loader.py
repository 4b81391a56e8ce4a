"""Artifact catalog file loader."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from packtest_runner.artifact_resolution.artifact_catalog import (
    ArtifactCatalog,
    CatalogEntry,
    ModRole,
)


class ConfigurationError(Exception):
    """Raised when the artifact catalog file is invalid."""


def load_artifact_catalog(catalog_path: Path | str) -> ArtifactCatalog:
    """Load and validate a YAML artifact catalog.

    Args:
      catalog_path: Path to a YAML file with a top-level ``versions`` mapping.

    Returns:
      The parsed catalog.

    Raises:
      ConfigurationError: If the file is missing, unparsable or malformed.
    """
    path = Path(catalog_path)
    if not path.exists():
        raise ConfigurationError(f"Artifact catalog file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse artifact catalog: {exc}") from exc

    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Artifact catalog root must be a mapping.")

    versions = _require_mapping(parsed.get("versions"), "versions")
    entries = {
        _require_version_key(version): _parse_entry(value, f"versions.{version}")
        for version, value in versions.items()
    }
    return ArtifactCatalog(entries=entries)


def _parse_entry(value: Any, section_name: str) -> CatalogEntry:
    section = _require_mapping(value, section_name)
    unknown = set(section) - {role.value for role in ModRole}
    if unknown:
        raise ConfigurationError(
            f"{section_name} has unknown keys: {', '.join(sorted(map(str, unknown)))}"
        )
    return CatalogEntry(
        packtest_url=_optional_url(
            section.get(ModRole.PACKTEST.value), f"{section_name}.{ModRole.PACKTEST.value}"
        ),
        fabric_api_url=_optional_url(
            section.get(ModRole.FABRIC_API.value), f"{section_name}.{ModRole.FABRIC_API.value}"
        ),
    )


def _require_version_key(value: Any) -> str:
    # YAML reads an unquoted 1.20 as a float
    if not isinstance(value, str):
        raise ConfigurationError(
            f"Version key {value!r} must be a quoted string (for example \"1.20.4\")."
        )
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError("Version keys must not be empty.")
    return stripped


def _require_mapping(value: Any, section_name: str) -> Mapping[Any, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _optional_url(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    if not stripped.startswith(("http://", "https://")):
        raise ConfigurationError(f"{field_name} must be an http(s) URL.")
    return stripped
