"""Server runtime domain exports."""

from .default_runtime import build_default_runtime
from .launch_bridge import (
    PACKTEST_JVM_ARGS,
    InstallFailedError,
    LaunchFailedError,
    launch_server,
)
from .runtime_contracts import (
    InstanceBuilder,
    InstanceDescriptor,
    LaunchableInstance,
    LoaderFlavor,
    LoaderInstallation,
    LoaderInstaller,
    ProcessHandle,
    RuntimeBackendError,
    ServerKind,
    ServerRuntime,
    Side,
    VersionInfo,
    VersionInfoLookup,
)

__all__ = [
    "build_default_runtime",
    "PACKTEST_JVM_ARGS",
    "InstallFailedError",
    "LaunchFailedError",
    "launch_server",
    "InstanceBuilder",
    "InstanceDescriptor",
    "LaunchableInstance",
    "LoaderFlavor",
    "LoaderInstallation",
    "LoaderInstaller",
    "ProcessHandle",
    "RuntimeBackendError",
    "ServerKind",
    "ServerRuntime",
    "Side",
    "VersionInfo",
    "VersionInfoLookup",
]
