"""Artifact resolution domain entities."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from enum import Enum

USE_DEFAULT_SENTINEL = "latest"


class ModRole(str, Enum):
    """Mods every test server needs."""

    PACKTEST = "packtest"
    FABRIC_API = "fabric_api"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self]

    @property
    def jar_filename(self) -> str:
        """Fixed filename of this mod inside the instance mods directory."""
        return f"{self.value}.jar"


_DISPLAY_NAMES = {
    ModRole.PACKTEST: "PackTest",
    ModRole.FABRIC_API: "Fabric API",
}


@dataclass(frozen=True)
class ArtifactLocation:
    """A fetchable URL for one mod role."""

    role: ModRole
    url: str


@dataclass(frozen=True)
class ResolvedArtifacts:
    """Both mod locations required for one run."""

    packtest: ArtifactLocation
    fabric_api: ArtifactLocation

    def __iter__(self) -> Iterator[ArtifactLocation]:
        return iter((self.packtest, self.fabric_api))


@dataclass(frozen=True)
class CatalogEntry:
    """Known-good artifact URLs for one Minecraft version."""

    packtest_url: str | None = None
    fabric_api_url: str | None = None

    def url_for(self, role: ModRole) -> str | None:
        if role is ModRole.PACKTEST:
            return self.packtest_url
        return self.fabric_api_url


@dataclass(frozen=True)
class ArtifactCatalog:
    """Static mapping from Minecraft version to known-good artifact URLs."""

    entries: Mapping[str, CatalogEntry] = field(default_factory=dict)

    def lookup(self, minecraft_version: str, role: ModRole) -> str | None:
        entry = self.entries.get(minecraft_version)
        if entry is None:
            return None
        return entry.url_for(role)

    def supported_versions(self) -> tuple[str, ...]:
        return tuple(sorted(self.entries))


# Adding a Minecraft version is a data change here, or a catalog file via --artifact-catalog.
DEFAULT_ARTIFACT_CATALOG = ArtifactCatalog(
    entries={
        "1.20.4": CatalogEntry(
            packtest_url=(
                "https://github.com/misode/packtest/releases/download/v1.3/"
                "packtest-1.3-mc1.20.4.jar"
            ),
            fabric_api_url=(
                "https://cdn.modrinth.com/data/P7dR8mSH/versions/JQ07mKWY/"
                "fabric-api-0.91.3%2B1.20.4.jar"
            ),
        ),
    }
)
