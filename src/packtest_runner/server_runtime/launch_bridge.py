"""Install the mod loader and start the test server."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from packtest_runner.errors import PackTestError
from packtest_runner.instance_provisioning.instance_layout import InstanceLayout

from .runtime_contracts import (
    InstanceDescriptor,
    LoaderFlavor,
    ProcessHandle,
    RuntimeBackendError,
    ServerKind,
    ServerRuntime,
    Side,
)

log = logging.getLogger(__name__)

# Makes PackTest run all tests on startup and stop the server afterwards.
PACKTEST_JVM_ARGS = ("-Dpacktest.auto",)


class InstallFailedError(PackTestError):
    def __init__(self, minecraft_version: str, reason: object) -> None:
        super().__init__(
            f"Failed to install Fabric for Minecraft version {minecraft_version}: {reason}"
        )
        self.minecraft_version = minecraft_version


class LaunchFailedError(PackTestError):
    def __init__(self, root: Path, reason: object) -> None:
        super().__init__(f"Failed to launch instance at {root}: {reason}")
        self.root = root


def launch_server(
    minecraft_version: str,
    mod_files: Sequence[Path],
    layout: InstanceLayout,
    runtime: ServerRuntime,
) -> ProcessHandle:
    """Install Fabric for the server side and start the provisioned instance."""
    try:
        version_info = runtime.version_lookup.get_version_info(minecraft_version)
        installation = runtime.loader_installer.install(
            version_info, LoaderFlavor.FABRIC, Side.SERVER
        )
    except (RuntimeBackendError, OSError) as exc:
        raise InstallFailedError(minecraft_version, exc) from exc

    missing = [path for path in mod_files if not path.is_file()]
    if missing:
        raise LaunchFailedError(
            layout.root, f"missing mod files: {', '.join(str(path) for path in missing)}"
        )

    descriptor = InstanceDescriptor(
        kind=ServerKind(create_eula=True, show_gui=False),
        root=layout.root,
        jvm_args=PACKTEST_JVM_ARGS,
        jar_path=None,
        main_class=installation.main_class,
        additional_libraries=installation.classpath,
    )
    try:
        instance = runtime.instance_builder.build(descriptor, version_info)
        handle = instance.launch()
    except (RuntimeBackendError, OSError) as exc:
        raise LaunchFailedError(layout.root, exc) from exc
    log.info("Server launched from %s", layout.root)
    return handle
