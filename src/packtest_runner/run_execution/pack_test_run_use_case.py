"""Run execution use-case service."""

from __future__ import annotations

from contextlib import ExitStack

import requests

from packtest_runner.artifact_resolution import (
    DEFAULT_ARTIFACT_CATALOG,
    ArtifactCatalog,
    ResolvedArtifacts,
    resolve_artifacts,
)
from packtest_runner.configuration import ConfigurationError, load_artifact_catalog
from packtest_runner.console_reporting import ci_group
from packtest_runner.console_reporting.ci_groups import Echo
from packtest_runner.errors import PackTestError
from packtest_runner.instance_provisioning import (
    Downloader,
    InstanceLayout,
    ProvisionedInstance,
    provision_instance,
)
from packtest_runner.outcome_evaluation import evaluate_run
from packtest_runner.server_runtime import ServerRuntime, build_default_runtime, launch_server

from .run_contracts import RunReport, RunRequest

STAGE_CONFIGURATION = "load configuration"
STAGE_RESOLVE = "resolve artifacts"
STAGE_PROVISION = "provision instance"
STAGE_LAUNCH = "install and launch server"
STAGE_EVALUATE = "evaluate outcome"


class RunExecutionError(Exception):
    """Raised when a pipeline stage fails before a test outcome exists."""

    def __init__(self, stage: str, cause: Exception) -> None:
        super().__init__(f"{stage} failed: {cause}")
        self.stage = stage
        self.cause = cause


def execute_pack_test_run(
    request: RunRequest,
    *,
    runtime: ServerRuntime | None = None,
    downloader: Downloader | None = None,
    catalog: ArtifactCatalog | None = None,
    echo: Echo | None = None,
) -> RunReport:
    """Execute one full pack test run and return its report.

    Stages run strictly in order and none is retried; the first failing
    stage aborts the run with a RunExecutionError naming that stage.
    """
    artifacts = _resolve(request, catalog)
    layout = InstanceLayout.at(request.instance_dir)
    with ExitStack() as resources:
        if runtime is None:
            session = resources.enter_context(requests.Session())
            runtime = build_default_runtime(
                layout.root, session, java_executable=request.java_executable
            )
        return _run_stages(request, artifacts, layout, runtime, downloader, echo)


def _run_stages(
    request: RunRequest,
    artifacts: ResolvedArtifacts,
    layout: InstanceLayout,
    runtime: ServerRuntime,
    downloader: Downloader | None,
    echo: Echo | None,
) -> RunReport:
    with ci_group("Install test server", enabled=request.github, echo=echo):
        provisioned = _run_stage(
            STAGE_PROVISION,
            provision_instance,
            layout,
            artifacts,
            request.packs,
            comma_separate=request.comma_separate,
            downloader=downloader,
        )

    with ci_group("Launch server and run tests", enabled=request.github, echo=echo):
        process = _run_stage(
            STAGE_LAUNCH,
            launch_server,
            request.minecraft_version,
            provisioned.mod_files,
            layout,
            runtime,
        )

    with ci_group("Get result", enabled=request.github, echo=echo):
        outcome = _run_stage(STAGE_EVALUATE, evaluate_run, process, layout.log_path)

    return RunReport(
        outcome=outcome,
        layout=layout,
        staged_packs=_staged_names(provisioned),
    )


def _resolve(request: RunRequest, catalog: ArtifactCatalog | None) -> ResolvedArtifacts:
    resolved_catalog = (
        catalog if catalog is not None else _load_catalog(request.artifact_catalog_path)
    )
    return _run_stage(
        STAGE_RESOLVE,
        resolve_artifacts,
        request.minecraft_version,
        request.packtest_url,
        request.fabric_api_url,
        catalog=resolved_catalog,
    )


def _load_catalog(catalog_path: str | None) -> ArtifactCatalog:
    if catalog_path is None:
        return DEFAULT_ARTIFACT_CATALOG
    try:
        return load_artifact_catalog(catalog_path)
    except ConfigurationError as exc:
        raise RunExecutionError(STAGE_CONFIGURATION, exc) from exc


def _run_stage(stage: str, operation, *args, **kwargs):
    try:
        return operation(*args, **kwargs)
    except PackTestError as exc:
        raise RunExecutionError(stage, exc) from exc


def _staged_names(provisioned: ProvisionedInstance) -> tuple[str, ...]:
    return tuple(path.name for path in provisioned.staged_packs)
