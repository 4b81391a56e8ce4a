"""Outcome evaluation service."""

from __future__ import annotations

import logging
from pathlib import Path

from packtest_runner.errors import PackTestError
from packtest_runner.server_runtime.runtime_contracts import ProcessHandle

from .log_classifier import classify_log
from .run_outcomes import RunOutcome

log = logging.getLogger(__name__)


class ProcessWaitError(PackTestError):
    def __init__(self, reason: object) -> None:
        super().__init__(f"Failed to await server process: {reason}")


class LogUnreadableError(PackTestError):
    def __init__(self, path: Path, reason: object) -> None:
        super().__init__(f"Failed to open log file {path}: {reason}")
        self.path = path


def evaluate_run(process: ProcessHandle, log_path: Path) -> RunOutcome:
    """Wait for the server to exit and classify the run.

    There is no timeout: a server that never exits blocks here. A non-zero
    exit status is final and the log is not read. A server that exits
    cleanly but leaves no log is an error, not a pass.
    """
    try:
        exit_status = process.wait()
    except OSError as exc:
        raise ProcessWaitError(exc) from exc
    log.info("Server exited with status %s", exit_status)

    if exit_status != 0:
        return RunOutcome.NON_ZERO_EXIT

    try:
        log_text = log_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise LogUnreadableError(log_path, exc) from exc
    return classify_log(log_text)
