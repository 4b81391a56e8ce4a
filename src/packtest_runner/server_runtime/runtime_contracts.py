"""Server runtime capability contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Protocol

from packtest_runner.errors import PackTestError


class RuntimeBackendError(PackTestError):
    """Raised by runtime collaborators when version, install or launch work fails."""


class LoaderFlavor(str, Enum):
    """Supported mod loader variants."""

    FABRIC = "fabric"
    QUILT = "quilt"


class Side(str, Enum):
    SERVER = "server"
    CLIENT = "client"


@dataclass(frozen=True)
class VersionInfo:
    """Opaque metadata for one Minecraft version."""

    version: str
    server_jar_url: str | None = None
    metadata: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class LoaderInstallation:
    """Classpath and entry point produced by a loader install."""

    classpath: tuple[Path, ...]
    main_class: str


@dataclass(frozen=True)
class ServerKind:
    create_eula: bool = True
    show_gui: bool = False


@dataclass(frozen=True)
class InstanceDescriptor:
    """Declarative description of a launchable server instance."""

    kind: ServerKind
    root: Path
    jvm_args: tuple[str, ...] = ()
    jar_path: Path | None = None
    main_class: str | None = None
    additional_libraries: tuple[Path, ...] = ()


class ProcessHandle(Protocol):  # pylint: disable=too-few-public-methods
    """Spawned server process."""

    def wait(self) -> int: ...


class LaunchableInstance(Protocol):  # pylint: disable=too-few-public-methods
    def launch(self) -> ProcessHandle: ...


class VersionInfoLookup(Protocol):  # pylint: disable=too-few-public-methods
    def get_version_info(self, minecraft_version: str) -> VersionInfo: ...


class LoaderInstaller(Protocol):  # pylint: disable=too-few-public-methods
    def install(
        self, version_info: VersionInfo, flavor: LoaderFlavor, side: Side
    ) -> LoaderInstallation: ...


class InstanceBuilder(Protocol):  # pylint: disable=too-few-public-methods
    def build(
        self, descriptor: InstanceDescriptor, version_info: VersionInfo
    ) -> LaunchableInstance: ...


@dataclass(frozen=True)
class ServerRuntime:
    """The external engines a run needs, bundled for injection."""

    version_lookup: VersionInfoLookup
    loader_installer: LoaderInstaller
    instance_builder: InstanceBuilder
