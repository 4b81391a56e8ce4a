"""Pack source expansion and copying."""

from __future__ import annotations

import glob
import logging
import shutil
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .provisioning_errors import InvalidPackPathError, PackCopyError

log = logging.getLogger(__name__)

PACK_LIST_DELIMITER = ","


@dataclass(frozen=True)
class PackSource:
    """One user-supplied pack argument.

    A literal source names exactly one path; otherwise the value is a glob
    pattern that may match zero or more paths.
    """

    value: str
    literal: bool = False

    def expand(self) -> list[Path]:
        if self.literal:
            return [Path(self.value)]
        return [Path(match) for match in sorted(glob.glob(self.value))]


def pack_sources_from_arguments(
    packs: Sequence[str], *, comma_separate: bool
) -> tuple[PackSource, ...]:
    """Turn CLI pack arguments into pack sources.

    With ``comma_separate`` only the first argument is used; it is split on
    commas into literal paths and no glob expansion happens.
    """
    if not comma_separate:
        return tuple(PackSource(value=pattern) for pattern in packs)
    if not packs:
        raise InvalidPackPathError("", "missing first pack to split")
    if len(packs) > 1:
        log.warning("Ignoring %d pack argument(s) after the comma-separated list", len(packs) - 1)
    return tuple(
        PackSource(value=item, literal=True) for item in packs[0].split(PACK_LIST_DELIMITER)
    )


def pack_name(path: Path, source: str) -> str:
    """Return the base name a pack keeps inside the datapacks directory."""
    name = path.name
    if not name or name == "..":
        raise InvalidPackPathError(source, "missing filename")
    return name


def copy_pack(path: Path, datapacks_dir: Path, *, source: str) -> Path:
    """Copy one pack (directory or archive file) into ``datapacks_dir``."""
    destination = datapacks_dir / pack_name(path, source)
    log.info("Copying pack %s", path)
    try:
        if path.is_dir():
            shutil.copytree(path, destination, dirs_exist_ok=True)
        else:
            shutil.copy2(path, destination)
    except OSError as exc:
        raise PackCopyError(path, exc) from exc
    return destination


def stage_packs(sources: Sequence[PackSource], datapacks_dir: Path) -> list[Path]:
    """Copy every path the sources expand to; return the copied destinations."""
    staged: list[Path] = []
    for source in sources:
        matches = source.expand()
        if not matches:
            log.info("Pack pattern %s matched nothing", source.value)
        for match in matches:
            staged.append(copy_pack(match, datapacks_dir, source=source.value))
    return staged
