"""Generated server.properties for test servers."""

from __future__ import annotations

from pathlib import Path

from .provisioning_errors import ConfigWriteError

# Identical on every run: flat world, no structures, offline auth, no telemetry.
SERVER_PROPERTIES = (
    "rcon.port=25575\n"
    "online-mode=false\n"
    "broadcast-rcon-to-ops=true\n"
    "enable-rcon=true\n"
    "rcon.password=packtest\n"
    "level-type=minecraft\\:flat\n"
    "snooper-enabled=false\n"
    "generate-structures=false\n"
)


def write_server_properties(path: Path) -> Path:
    try:
        path.write_text(SERVER_PROPERTIES, encoding="utf-8")
    except OSError as exc:
        raise ConfigWriteError(path, exc) from exc
    return path
