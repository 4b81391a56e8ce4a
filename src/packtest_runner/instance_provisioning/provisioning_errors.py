"""Instance provisioning errors."""

from __future__ import annotations

from pathlib import Path

from packtest_runner.artifact_resolution.artifact_catalog import ModRole
from packtest_runner.errors import PackTestError


class ProvisioningError(PackTestError):
    """Base error for instance provisioning failures."""


class DirectoryCreateError(ProvisioningError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Failed to create directory {path}: {reason}")
        self.path = path


class DownloadFailedError(ProvisioningError):
    def __init__(self, role: ModRole, url: str, reason: object) -> None:
        super().__init__(f"Failed to download {role.display_name} mod from {url}: {reason}")
        self.role = role
        self.url = url


class InvalidPackPathError(ProvisioningError):
    def __init__(self, source: str, reason: str) -> None:
        super().__init__(f"Invalid pack path {source!r}: {reason}")
        self.source = source


class PackCopyError(ProvisioningError):
    def __init__(self, source: Path, reason: object) -> None:
        super().__init__(f"Failed to copy pack {source} into world: {reason}")
        self.source = source


class ConfigWriteError(ProvisioningError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Failed to write server properties {path}: {reason}")
        self.path = path
