"""Default runtime wiring backed by Mojang and loader meta services."""

from __future__ import annotations

from pathlib import Path

import requests

from .java_instance import LocalInstanceBuilder
from .loader_meta import MetaLoaderInstaller
from .mojang_versions import MojangVersionLookup
from .runtime_contracts import ServerRuntime


def build_default_runtime(
    cache_dir: Path,
    session: requests.Session,
    *,
    java_executable: str = "java",
) -> ServerRuntime:
    """Build the runtime that downloads libraries and server jars into ``cache_dir``.

    The caller owns ``session`` and closes it once the server has exited.
    """
    return ServerRuntime(
        version_lookup=MojangVersionLookup(session),
        loader_installer=MetaLoaderInstaller(session, cache_dir / "libraries"),
        instance_builder=LocalInstanceBuilder(
            session, cache_dir / "versions", java_executable=java_executable
        ),
    )
