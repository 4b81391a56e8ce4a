"""Outcome evaluation domain exports."""

from .log_classifier import LOG_FAILURE_MARKERS, LogMarkerRule, classify_log
from .outcome_evaluator import LogUnreadableError, ProcessWaitError, evaluate_run
from .run_outcomes import RunOutcome

__all__ = [
    "LOG_FAILURE_MARKERS",
    "LogMarkerRule",
    "classify_log",
    "LogUnreadableError",
    "ProcessWaitError",
    "evaluate_run",
    "RunOutcome",
]
