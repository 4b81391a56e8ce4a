"""JSON and file fetching shared by the default runtime collaborators."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import requests

from packtest_runner.instance_provisioning.artifact_download import download_file

from .runtime_contracts import RuntimeBackendError

log = logging.getLogger(__name__)

META_TIMEOUT_SECONDS = 30


def fetch_json(session: requests.Session, url: str) -> Any:
    try:
        resp = session.get(url, timeout=META_TIMEOUT_SECONDS)
        resp.raise_for_status()
        return resp.json()
    except (requests.RequestException, ValueError) as exc:
        raise RuntimeBackendError(f"Failed to fetch {url}: {exc}") from exc


def fetch_file_once(session: requests.Session, url: str, dest: Path) -> Path:
    """Download ``url`` to ``dest`` unless a previous run already cached it."""
    if dest.is_file():
        return dest
    dest.parent.mkdir(parents=True, exist_ok=True)
    partial = dest.with_name(dest.name + ".part")
    try:
        download_file(url, partial, session=session)
        partial.replace(dest)
    except (requests.RequestException, OSError) as exc:
        raise RuntimeBackendError(f"Failed to download {url}: {exc}") from exc
    return dest
