"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys

import click

from packtest_runner.configuration.runtime_settings import (
    DEFAULT_INSTANCE_DIRNAME,
    DEFAULT_JAVA_EXECUTABLE,
    DEFAULT_MINECRAFT_VERSION,
    ENV_ARTIFACT_CATALOG,
    ENV_FABRIC_API_URL,
    ENV_INSTANCE_DIR,
    ENV_JAVA_EXECUTABLE,
    ENV_MINECRAFT_VERSION,
    ENV_PACKTEST_URL,
)
from packtest_runner.run_execution import (
    RunExecutionError,
    RunReport,
    RunRequest,
    execute_pack_test_run,
)


class CliError(Exception):
    """Custom CLI error."""


class TestsFailed(Exception):
    """Raised when the server ran but the pack tests did not pass."""

    __test__ = False

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="packtest-runner")
@click.option(
    "--comma-separate",
    is_flag=True,
    default=False,
    help="Parse the first pack as a comma-separated list of pack paths (no glob expansion).",
)
@click.option(
    "--github",
    is_flag=True,
    default=False,
    help="Output collapsible log groups for GitHub Actions.",
)
@click.option(
    "-m",
    "--minecraft-version",
    default=DEFAULT_MINECRAFT_VERSION,
    show_default=True,
    envvar=ENV_MINECRAFT_VERSION,
    help="Minecraft version to test against. Determines the PackTest and Fabric API "
    "URLs unless one is overridden.",
)
@click.option(
    "--packtest-url",
    default=None,
    envvar=ENV_PACKTEST_URL,
    help="URL of the PackTest mod. 'latest' uses the known-good URL for the Minecraft version.",
)
@click.option(
    "--fabric-api-url",
    default=None,
    envvar=ENV_FABRIC_API_URL,
    help="URL of the Fabric API mod. 'latest' uses the known-good URL for the Minecraft version.",
)
@click.option(
    "--instance-dir",
    default=DEFAULT_INSTANCE_DIRNAME,
    show_default=True,
    envvar=ENV_INSTANCE_DIR,
    type=click.Path(file_okay=False, path_type=str),
    help="Directory the test server is provisioned in.",
)
@click.option(
    "--artifact-catalog",
    "artifact_catalog_path",
    default=None,
    envvar=ENV_ARTIFACT_CATALOG,
    type=click.Path(dir_okay=False, path_type=str),
    help="YAML file mapping Minecraft versions to PackTest and Fabric API URLs.",
)
@click.option(
    "--java",
    "java_executable",
    default=DEFAULT_JAVA_EXECUTABLE,
    show_default=True,
    envvar=ENV_JAVA_EXECUTABLE,
    help="Java executable used to run the server.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.argument("packs", nargs=-1)
def cli(  # pylint: disable=too-many-arguments
    *,
    comma_separate: bool,
    github: bool,
    minecraft_version: str,
    packtest_url: str | None,
    fabric_api_url: str | None,
    instance_dir: str,
    artifact_catalog_path: str | None,
    java_executable: str,
    verbose: bool,
    packs: tuple[str, ...],
) -> None:
    """Run the PackTest tests of PACKS on a disposable Fabric server.

    PACKS are datapacks with pack.mcmeta in their root directory, given as
    paths or glob patterns.
    """
    _configure_logging(verbose)
    try:
        report = execute_pack_test_run(
            RunRequest(
                packs=packs,
                minecraft_version=minecraft_version,
                packtest_url=packtest_url,
                fabric_api_url=fabric_api_url,
                comma_separate=comma_separate,
                github=github,
                instance_dir=instance_dir,
                artifact_catalog_path=artifact_catalog_path,
                java_executable=java_executable,
            )
        )
    except RunExecutionError as exc:
        raise CliError(str(exc)) from exc
    _report_outcome(report)


def _report_outcome(report: RunReport) -> None:
    if not report.passed:
        raise TestsFailed(report.outcome.failure_reason or report.outcome.value)
    click.secho("Test run successful :D", fg="green")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(message)s",
        stream=sys.stderr,
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except TestsFailed as exc:
        click.secho(f"Tests failed because:\n  {exc.reason}", fg="red")
        return 1
    except CliError as exc:
        click.secho(f"Error: {exc}", fg="red", err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
