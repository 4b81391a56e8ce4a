"""Run outcome classification entities."""

from __future__ import annotations

from enum import Enum


class RunOutcome(str, Enum):
    """Terminal classification of one test run."""

    SUCCESS = "success"
    NON_ZERO_EXIT = "non_zero_exit"
    REQUIRED_TESTS_FAILED = "required_tests_failed"
    TEST_LOAD_FAILURE = "test_load_failure"
    NO_TESTS_FOUND = "no_tests_found"

    @property
    def is_success(self) -> bool:
        return self is RunOutcome.SUCCESS

    @property
    def failure_reason(self) -> str | None:
        """Human-readable reason for a failed outcome, None on success."""
        return _FAILURE_REASONS.get(self)


_FAILURE_REASONS = {
    RunOutcome.NON_ZERO_EXIT: "Exit code was non-zero",
    RunOutcome.REQUIRED_TESTS_FAILED: "Required tests failed",
    RunOutcome.TEST_LOAD_FAILURE: "A test failed to load",
    RunOutcome.NO_TESTS_FOUND: "No tests were found",
}
