"""Instance provisioning service."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

import requests

from packtest_runner.artifact_resolution.artifact_catalog import ResolvedArtifacts

from .artifact_download import Downloader, download_file
from .instance_layout import InstanceLayout, ensure_directory, reset_directory
from .pack_sources import pack_sources_from_arguments, stage_packs
from .provisioning_errors import DownloadFailedError
from .server_properties import write_server_properties

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProvisionedInstance:
    """What provisioning left on disk."""

    layout: InstanceLayout
    mod_files: tuple[Path, ...]
    staged_packs: tuple[Path, ...]


def provision_instance(
    layout: InstanceLayout,
    artifacts: ResolvedArtifacts,
    packs: Sequence[str],
    *,
    comma_separate: bool = False,
    downloader: Downloader | None = None,
) -> ProvisionedInstance:
    """Prepare the instance directory for a test run.

    Every step is fatal on failure and nothing is rolled back, so a failed
    run leaves the partial instance on disk for inspection.
    """
    download = downloader or download_file

    ensure_directory(layout.root)
    ensure_directory(layout.mods_dir)

    mod_files: list[Path] = []
    for artifact in artifacts:
        destination = layout.mod_path(artifact.role.jar_filename)
        log.info("Downloading %s mod from %s", artifact.role.display_name, artifact.url)
        try:
            download(artifact.url, destination)
        except (requests.RequestException, OSError) as exc:
            raise DownloadFailedError(artifact.role, artifact.url, exc) from exc
        mod_files.append(destination)

    # Only the packs of this run are staged.
    reset_directory(layout.datapacks_dir)
    sources = pack_sources_from_arguments(packs, comma_separate=comma_separate)
    staged = stage_packs(sources, layout.datapacks_dir)

    write_server_properties(layout.server_properties_path)

    return ProvisionedInstance(
        layout=layout,
        mod_files=tuple(mod_files),
        staged_packs=tuple(staged),
    )
