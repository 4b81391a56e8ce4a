"""Local Java server instances."""

from __future__ import annotations

import logging
import os
import shlex
import subprocess
from pathlib import Path

import requests

from .http_json import fetch_file_once
from .runtime_contracts import InstanceDescriptor, RuntimeBackendError, VersionInfo

log = logging.getLogger(__name__)


class JavaServerInstance:  # pylint: disable=too-few-public-methods
    """A built instance that starts as a child Java process."""

    def __init__(self, command: list[str], working_dir: Path) -> None:
        self.command = command
        self.working_dir = working_dir

    def launch(self) -> subprocess.Popen:
        log.info("Launching server: %s", shlex.join(self.command))
        return subprocess.Popen(self.command, cwd=self.working_dir)


class LocalInstanceBuilder:  # pylint: disable=too-few-public-methods
    """Builds server instances that run with a local Java executable."""

    def __init__(
        self,
        session: requests.Session,
        versions_dir: Path,
        *,
        java_executable: str = "java",
    ) -> None:
        self._session = session
        self._versions_dir = versions_dir
        self._java_executable = java_executable

    def build(
        self, descriptor: InstanceDescriptor, version_info: VersionInfo
    ) -> JavaServerInstance:
        root = descriptor.root
        root.mkdir(parents=True, exist_ok=True)
        if descriptor.kind.create_eula:
            eula_file = root / "eula.txt"
            if not eula_file.exists():
                eula_file.write_text("eula=true\n", encoding="utf-8")

        game_jar = descriptor.jar_path or self._server_jar(version_info)
        if descriptor.main_class is None:
            command = [self._java_executable, *descriptor.jvm_args, "-jar", str(game_jar)]
        else:
            classpath = [*descriptor.additional_libraries, game_jar]
            command = [
                self._java_executable,
                *descriptor.jvm_args,
                "-cp",
                os.pathsep.join(str(path) for path in classpath),
                descriptor.main_class,
            ]
        if not descriptor.kind.show_gui:
            command.append("nogui")
        return JavaServerInstance(command, root)

    def _server_jar(self, version_info: VersionInfo) -> Path:
        if not version_info.server_jar_url:
            raise RuntimeBackendError(f"No server jar published for {version_info.version}")
        return fetch_file_once(
            self._session,
            version_info.server_jar_url,
            self._versions_dir / version_info.version / "server.jar",
        )
