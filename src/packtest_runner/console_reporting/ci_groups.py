"""Collapsible GitHub Actions log groups."""

from __future__ import annotations

from collections.abc import Callable, Iterator
from contextlib import contextmanager

import click

Echo = Callable[[str], None]


@contextmanager
def ci_group(title: str, *, enabled: bool, echo: Echo | None = None) -> Iterator[None]:
    """Wrap the block in ``::group::``/``::endgroup::`` when enabled.

    The group is closed even when the block raises.
    """
    if not enabled:
        yield
        return
    emit = echo or click.echo
    emit(f"::group::{title}")
    try:
        yield
    finally:
        emit("::endgroup::")
