"""Fabric and Quilt server installation from the loader meta services."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
import requests

from .http_json import fetch_file_once, fetch_json
from .runtime_contracts import (
    LoaderFlavor,
    LoaderInstallation,
    RuntimeBackendError,
    Side,
    VersionInfo,
)

log = logging.getLogger(__name__)

META_BASE_URLS = {
    LoaderFlavor.FABRIC: "https://meta.fabricmc.net/v2",
    LoaderFlavor.QUILT: "https://meta.quiltmc.org/v3",
}

_PROFILE_KINDS = {
    Side.SERVER: "server",
    Side.CLIENT: "profile",
}


class MetaLoaderInstaller:  # pylint: disable=too-few-public-methods
    """Installs the newest loader for a game version into a library cache."""

    def __init__(
        self,
        session: requests.Session,
        libraries_dir: Path,
        *,
        meta_base_urls: Mapping[LoaderFlavor, str] | None = None,
    ) -> None:
        self._session = session
        self._libraries_dir = libraries_dir
        self._meta_base_urls = dict(meta_base_urls or META_BASE_URLS)

    def install(
        self, version_info: VersionInfo, flavor: LoaderFlavor, side: Side
    ) -> LoaderInstallation:
        base_url = self._meta_base_urls[flavor].rstrip("/")
        game_version = version_info.version
        loaders = fetch_json(self._session, f"{base_url}/versions/loader/{game_version}")
        loader_version = pick_loader_version(loaders)
        if loader_version is None:
            raise RuntimeBackendError(
                f"No {flavor.value} loader available for Minecraft version {game_version}"
            )
        log.info("Installing %s loader %s for %s", flavor.value, loader_version, game_version)

        profile = fetch_json(
            self._session,
            f"{base_url}/versions/loader/{game_version}/{loader_version}/"
            f"{_PROFILE_KINDS[side]}/json",
        )
        if not isinstance(profile, Mapping) or not profile.get("mainClass"):
            raise RuntimeBackendError(f"Malformed {flavor.value} launch profile")

        libraries = profile.get("libraries") or []
        if not isinstance(libraries, list):
            raise RuntimeBackendError(f"Malformed {flavor.value} launch profile libraries")
        classpath = tuple(self._fetch_library(library) for library in libraries)
        return LoaderInstallation(classpath=classpath, main_class=str(profile["mainClass"]))

    def _fetch_library(self, library: object) -> Path:
        if not isinstance(library, Mapping):
            raise RuntimeBackendError(f"Malformed library entry: {library!r}")
        relative = maven_path(str(library.get("name", "")))
        repository = str(library.get("url") or "").rstrip("/")
        if not repository:
            raise RuntimeBackendError(f"Library {library.get('name')} has no repository URL")
        return fetch_file_once(
            self._session, f"{repository}/{relative.as_posix()}", self._libraries_dir / relative
        )


def pick_loader_version(loaders: object) -> str | None:
    """Return the newest stable loader version, else the newest listed one."""
    if not isinstance(loaders, Sequence):
        return None
    versions = [
        entry["loader"]
        for entry in loaders
        if isinstance(entry, Mapping) and isinstance(entry.get("loader"), Mapping)
    ]
    stable = [loader for loader in versions if loader.get("stable")]
    chosen = (stable or versions or [None])[0]
    return None if chosen is None else str(chosen.get("version"))


def maven_path(coordinate: str) -> Path:
    """Map ``group:artifact:version[:classifier]`` to its repository path."""
    parts = coordinate.split(":")
    if len(parts) not in (3, 4) or not all(parts):
        raise RuntimeBackendError(f"Invalid Maven coordinate: {coordinate!r}")
    group, artifact, version = parts[:3]
    classifier = f"-{parts[3]}" if len(parts) == 4 else ""
    return Path(*group.split("."), artifact, version, f"{artifact}-{version}{classifier}.jar")
