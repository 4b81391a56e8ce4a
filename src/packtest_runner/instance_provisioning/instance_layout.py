"""On-disk shape of a provisioned server instance."""

from __future__ import annotations

import shutil
from dataclasses import dataclass
from pathlib import Path

from .provisioning_errors import DirectoryCreateError

LOG_RELATIVE_PATH = Path("logs") / "latest.log"


@dataclass(frozen=True)
class InstanceLayout:
    """Paths of one server instance rooted at a single directory."""

    root: Path
    mods_dir: Path
    datapacks_dir: Path
    server_properties_path: Path
    log_path: Path

    @classmethod
    def at(cls, root: Path | str) -> InstanceLayout:
        resolved_root = Path(root).resolve()
        return cls(
            root=resolved_root,
            mods_dir=resolved_root / "mods",
            datapacks_dir=resolved_root / "world" / "datapacks",
            server_properties_path=resolved_root / "server.properties",
            log_path=resolved_root / LOG_RELATIVE_PATH,
        )

    def mod_path(self, jar_filename: str) -> Path:
        return self.mods_dir / jar_filename


def ensure_directory(path: Path) -> Path:
    """Create ``path`` and its parents; an existing directory is fine."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise DirectoryCreateError(path, exc) from exc
    return path


def reset_directory(path: Path) -> Path:
    """Recreate ``path`` as an empty directory, dropping what an earlier run left there."""
    if path.exists():
        try:
            shutil.rmtree(path)
        except OSError as exc:
            raise DirectoryCreateError(path, exc) from exc
    return ensure_directory(path)
