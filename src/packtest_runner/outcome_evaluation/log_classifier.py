"""Marker-based classification of PackTest server logs."""

from __future__ import annotations

from dataclasses import dataclass

from .run_outcomes import RunOutcome


@dataclass(frozen=True)
class LogMarkerRule:
    """A literal log fragment and the outcome it signals."""

    marker: str
    outcome: RunOutcome


# Evaluated in this order; the first rule whose marker occurs anywhere in the log wins.
LOG_FAILURE_MARKERS: tuple[LogMarkerRule, ...] = (
    LogMarkerRule("required tests failed", RunOutcome.REQUIRED_TESTS_FAILED),
    LogMarkerRule("Failed to load test", RunOutcome.TEST_LOAD_FAILURE),
    LogMarkerRule("All 0 required tests", RunOutcome.NO_TESTS_FOUND),
)


def classify_log(
    log_text: str, rules: tuple[LogMarkerRule, ...] = LOG_FAILURE_MARKERS
) -> RunOutcome:
    """Return the outcome of the first matching rule, or SUCCESS."""
    for rule in rules:
        if rule.marker in log_text:
            return rule.outcome
    return RunOutcome.SUCCESS
