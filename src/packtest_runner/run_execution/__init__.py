"""Run execution domain exports."""

from .pack_test_run_use_case import RunExecutionError, execute_pack_test_run
from .run_contracts import RunReport, RunRequest

__all__ = [
    "RunRequest",
    "RunReport",
    "RunExecutionError",
    "execute_pack_test_run",
]
