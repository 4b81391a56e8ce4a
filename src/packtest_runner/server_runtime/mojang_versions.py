"""Minecraft version metadata from the Mojang launcher manifest."""

from __future__ import annotations

from collections.abc import Mapping

import requests

from .http_json import fetch_json
from .runtime_contracts import RuntimeBackendError, VersionInfo

VERSION_MANIFEST_URL = "https://piston-meta.mojang.com/mc/game/version_manifest_v2.json"


class MojangVersionLookup:  # pylint: disable=too-few-public-methods
    """Resolves a version id through the Mojang version manifest."""

    def __init__(
        self,
        session: requests.Session,
        *,
        manifest_url: str = VERSION_MANIFEST_URL,
    ) -> None:
        self._session = session
        self._manifest_url = manifest_url

    def get_version_info(self, minecraft_version: str) -> VersionInfo:
        manifest = fetch_json(self._session, self._manifest_url)
        entry = _find_version_entry(manifest, minecraft_version)
        if entry is None:
            raise RuntimeBackendError(f"Unknown Minecraft version: {minecraft_version}")
        metadata = fetch_json(self._session, entry["url"])
        if not isinstance(metadata, Mapping):
            raise RuntimeBackendError(f"Malformed version metadata for {minecraft_version}")
        server = _server_download(metadata, minecraft_version)
        return VersionInfo(
            version=minecraft_version,
            server_jar_url=server.get("url"),
            metadata=metadata,
        )


def _server_download(metadata: Mapping, minecraft_version: str) -> Mapping:
    downloads = metadata.get("downloads") or {}
    if isinstance(downloads, Mapping):
        server = downloads.get("server") or {}
        if isinstance(server, Mapping):
            return server
    raise RuntimeBackendError(
        f"Malformed server download in version metadata for {minecraft_version}"
    )


def _find_version_entry(manifest: object, minecraft_version: str) -> Mapping | None:
    if not isinstance(manifest, Mapping):
        raise RuntimeBackendError("Malformed Minecraft version manifest")
    for entry in manifest.get("versions") or []:
        if isinstance(entry, Mapping) and entry.get("id") == minecraft_version and entry.get("url"):
            return entry
    return None
