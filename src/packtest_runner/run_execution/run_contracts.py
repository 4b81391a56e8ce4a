"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass

from packtest_runner.configuration.runtime_settings import (
    DEFAULT_INSTANCE_DIRNAME,
    DEFAULT_JAVA_EXECUTABLE,
    DEFAULT_MINECRAFT_VERSION,
)
from packtest_runner.instance_provisioning.instance_layout import InstanceLayout
from packtest_runner.outcome_evaluation.run_outcomes import RunOutcome


@dataclass(frozen=True)
class RunRequest:  # pylint: disable=too-many-instance-attributes
    """Input contract for executing one run."""

    packs: tuple[str, ...]
    minecraft_version: str = DEFAULT_MINECRAFT_VERSION
    packtest_url: str | None = None
    fabric_api_url: str | None = None
    comma_separate: bool = False
    github: bool = False
    instance_dir: str = DEFAULT_INSTANCE_DIRNAME
    artifact_catalog_path: str | None = None
    java_executable: str = DEFAULT_JAVA_EXECUTABLE


@dataclass(frozen=True)
class RunReport:
    """Output contract for one completed run."""

    outcome: RunOutcome
    layout: InstanceLayout
    staged_packs: tuple[str, ...]

    @property
    def passed(self) -> bool:
        return self.outcome.is_success
