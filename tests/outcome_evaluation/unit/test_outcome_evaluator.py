"""Outcome evaluator tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from packtest_runner.outcome_evaluation import (
    LogUnreadableError,
    ProcessWaitError,
    RunOutcome,
    evaluate_run,
)


class FakeProcess:
    def __init__(self, exit_status: int = 0, error: OSError | None = None) -> None:
        self.exit_status = exit_status
        self.error = error
        self.waited = False

    def wait(self) -> int:
        self.waited = True
        if self.error:
            raise self.error
        return self.exit_status


def _log(tmp_path: Path, text: str) -> Path:
    path = tmp_path / "logs" / "latest.log"
    path.parent.mkdir(parents=True)
    path.write_text(text, encoding="utf-8")
    return path


def test_clean_exit_with_passing_log_is_success(tmp_path: Path) -> None:
    process = FakeProcess()
    log_path = _log(tmp_path, "[Server thread/INFO]: All 2 required tests passed :)\n")

    assert evaluate_run(process, log_path) is RunOutcome.SUCCESS
    assert process.waited


def test_non_zero_exit_wins_over_passing_log(tmp_path: Path) -> None:
    log_path = _log(tmp_path, "[Server thread/INFO]: All 2 required tests passed :)\n")

    assert evaluate_run(FakeProcess(exit_status=1), log_path) is RunOutcome.NON_ZERO_EXIT


def test_non_zero_exit_does_not_read_log(tmp_path: Path) -> None:
    missing_log = tmp_path / "logs" / "latest.log"

    assert evaluate_run(FakeProcess(exit_status=-9), missing_log) is RunOutcome.NON_ZERO_EXIT


def test_clean_exit_without_log_is_an_error(tmp_path: Path) -> None:
    missing_log = tmp_path / "logs" / "latest.log"

    with pytest.raises(LogUnreadableError) as exc_info:
        evaluate_run(FakeProcess(), missing_log)

    assert exc_info.value.path == missing_log


def test_wait_failure_is_process_wait_error(tmp_path: Path) -> None:
    with pytest.raises(ProcessWaitError):
        evaluate_run(FakeProcess(error=ChildProcessError("no child")), tmp_path / "latest.log")


def test_undecodable_log_bytes_are_tolerated(tmp_path: Path) -> None:
    path = tmp_path / "latest.log"
    path.write_bytes(b"\xff\xfe garbage\n1 required tests failed\n")

    assert evaluate_run(FakeProcess(), path) is RunOutcome.REQUIRED_TESTS_FAILED
