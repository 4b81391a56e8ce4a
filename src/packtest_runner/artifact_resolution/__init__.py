"""Artifact resolution domain exports."""

from .artifact_catalog import (
    DEFAULT_ARTIFACT_CATALOG,
    USE_DEFAULT_SENTINEL,
    ArtifactCatalog,
    ArtifactLocation,
    CatalogEntry,
    ModRole,
    ResolvedArtifacts,
)
from .artifact_resolver import UnsupportedVersionError, resolve_artifact, resolve_artifacts

__all__ = [
    "DEFAULT_ARTIFACT_CATALOG",
    "USE_DEFAULT_SENTINEL",
    "ArtifactCatalog",
    "ArtifactLocation",
    "CatalogEntry",
    "ModRole",
    "ResolvedArtifacts",
    "UnsupportedVersionError",
    "resolve_artifact",
    "resolve_artifacts",
]
