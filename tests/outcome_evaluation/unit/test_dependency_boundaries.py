"""Boundary tests for outcome_evaluation internal dependencies."""

from __future__ import annotations

from pathlib import Path


def _project_root() -> Path:
    return Path(__file__).resolve().parents[3]


def test_log_classification_does_not_import_runtime_or_network_modules() -> None:
    evaluation_dir = _project_root() / "src" / "packtest_runner" / "outcome_evaluation"
    core_modules = (
        evaluation_dir / "run_outcomes.py",
        evaluation_dir / "log_classifier.py",
    )
    forbidden_import_fragments = (
        "packtest_runner.server_runtime",
        "packtest_runner.instance_provisioning",
        "import requests",
        "import subprocess",
    )

    for module_path in core_modules:
        text = module_path.read_text(encoding="utf-8")
        for fragment in forbidden_import_fragments:
            assert fragment not in text, f"Forbidden core dependency in {module_path}: {fragment}"
