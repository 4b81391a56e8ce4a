"""HTTP download of mod artifacts."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import requests

log = logging.getLogger(__name__)

DOWNLOAD_TIMEOUT_SECONDS = 120
USER_AGENT = "packtest-runner"

Downloader = Callable[[str, Path], None]


def download_file(url: str, dest: Path, *, session: requests.Session | None = None) -> None:
    """Stream ``url`` into ``dest``.

    Raises:
      requests.RequestException: On connection errors or a non-2xx status.
      OSError: If ``dest`` cannot be written.
    """
    get = session.get if session is not None else requests.get
    log.debug("Downloading %s -> %s", url, dest)
    with get(
        url, stream=True, timeout=DOWNLOAD_TIMEOUT_SECONDS, headers={"User-Agent": USER_AGENT}
    ) as resp:
        resp.raise_for_status()
        with open(dest, "wb") as fh:
            for chunk in resp.iter_content(chunk_size=8192):
                if chunk:
                    fh.write(chunk)
