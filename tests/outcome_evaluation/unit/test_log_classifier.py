"""Log classification tests."""

from __future__ import annotations

import pytest
from packtest_runner.outcome_evaluation import LOG_FAILURE_MARKERS, RunOutcome, classify_log


@pytest.mark.parametrize(
    ("log_text", "expected"),
    [
        ("[Server thread/INFO]: 3 required tests failed :(", RunOutcome.REQUIRED_TESTS_FAILED),
        ("[Server thread/ERROR]: Failed to load test demo:basic", RunOutcome.TEST_LOAD_FAILURE),
        ("[Server thread/INFO]: All 0 required tests passed :)", RunOutcome.NO_TESTS_FOUND),
        ("[Server thread/INFO]: All 4 required tests passed :)", RunOutcome.SUCCESS),
        ("", RunOutcome.SUCCESS),
    ],
)
def test_classify_log_maps_markers_to_outcomes(log_text: str, expected: RunOutcome) -> None:
    assert classify_log(log_text) is expected


def test_rule_order_wins_over_position_in_log() -> None:
    log_text = (
        "[Server thread/ERROR]: Failed to load test demo:broken\n"
        "[Server thread/INFO]: 1 required tests failed :(\n"
    )

    assert classify_log(log_text) is RunOutcome.REQUIRED_TESTS_FAILED


def test_load_failure_takes_precedence_over_no_tests_found() -> None:
    log_text = (
        "[Server thread/INFO]: All 0 required tests passed :)\n"
        "[Server thread/ERROR]: Failed to load test demo:broken\n"
    )

    assert classify_log(log_text) is RunOutcome.TEST_LOAD_FAILURE


def test_markers_are_case_sensitive() -> None:
    assert classify_log("REQUIRED TESTS FAILED") is RunOutcome.SUCCESS


def test_marker_rules_are_in_fixed_precedence_order() -> None:
    assert [rule.outcome for rule in LOG_FAILURE_MARKERS] == [
        RunOutcome.REQUIRED_TESTS_FAILED,
        RunOutcome.TEST_LOAD_FAILURE,
        RunOutcome.NO_TESTS_FOUND,
    ]


def test_failure_reasons() -> None:
    assert RunOutcome.SUCCESS.failure_reason is None
    assert RunOutcome.NON_ZERO_EXIT.failure_reason == "Exit code was non-zero"
    assert RunOutcome.REQUIRED_TESTS_FAILED.failure_reason == "Required tests failed"
    assert RunOutcome.TEST_LOAD_FAILURE.failure_reason == "A test failed to load"
    assert RunOutcome.NO_TESTS_FOUND.failure_reason == "No tests were found"
