"""Run configuration defaults."""

from __future__ import annotations

DEFAULT_MINECRAFT_VERSION = "1.20.4"
DEFAULT_INSTANCE_DIRNAME = "packtest_launch"
DEFAULT_JAVA_EXECUTABLE = "java"

ENV_MINECRAFT_VERSION = "PACKTEST_MINECRAFT_VERSION"
ENV_PACKTEST_URL = "PACKTEST_URL"
ENV_FABRIC_API_URL = "PACKTEST_FABRIC_API_URL"
ENV_INSTANCE_DIR = "PACKTEST_INSTANCE_DIR"
ENV_ARTIFACT_CATALOG = "PACKTEST_ARTIFACT_CATALOG"
ENV_JAVA_EXECUTABLE = "PACKTEST_JAVA"
