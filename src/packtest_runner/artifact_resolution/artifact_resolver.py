"""Artifact resolution service."""

from __future__ import annotations

from packtest_runner.errors import PackTestError

from .artifact_catalog import (
    DEFAULT_ARTIFACT_CATALOG,
    USE_DEFAULT_SENTINEL,
    ArtifactCatalog,
    ArtifactLocation,
    ModRole,
    ResolvedArtifacts,
)


class UnsupportedVersionError(PackTestError):
    """Raised when no artifact is known for a Minecraft version and none was given."""

    def __init__(self, minecraft_version: str, role: ModRole) -> None:
        super().__init__(
            f"No {role.display_name} available for Minecraft version {minecraft_version}"
        )
        self.minecraft_version = minecraft_version
        self.role = role


def resolve_artifacts(
    minecraft_version: str,
    packtest_url: str | None = None,
    fabric_api_url: str | None = None,
    *,
    catalog: ArtifactCatalog | None = None,
) -> ResolvedArtifacts:
    """Resolve download locations for the PackTest and Fabric API mods.

    An override other than ``None`` or the ``latest`` sentinel is returned
    verbatim, whether or not the version is in the catalog.
    """
    resolved_catalog = catalog if catalog is not None else DEFAULT_ARTIFACT_CATALOG
    return ResolvedArtifacts(
        packtest=resolve_artifact(
            minecraft_version, ModRole.PACKTEST, packtest_url, catalog=resolved_catalog
        ),
        fabric_api=resolve_artifact(
            minecraft_version, ModRole.FABRIC_API, fabric_api_url, catalog=resolved_catalog
        ),
    )


def resolve_artifact(
    minecraft_version: str,
    role: ModRole,
    override_url: str | None,
    *,
    catalog: ArtifactCatalog,
) -> ArtifactLocation:
    """Resolve one mod role, preferring an explicit override."""
    if not is_default_request(override_url):
        return ArtifactLocation(role=role, url=str(override_url))
    url = catalog.lookup(minecraft_version, role)
    if not url:
        raise UnsupportedVersionError(minecraft_version, role)
    return ArtifactLocation(role=role, url=url)


def is_default_request(override_url: str | None) -> bool:
    """Return True when the override asks for the catalog default."""
    return override_url is None or override_url == USE_DEFAULT_SENTINEL
