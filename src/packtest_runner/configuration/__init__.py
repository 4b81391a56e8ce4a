"""Configuration domain exports."""

from .catalog_loader import ConfigurationError, load_artifact_catalog
from .runtime_settings import (
    DEFAULT_INSTANCE_DIRNAME,
    DEFAULT_JAVA_EXECUTABLE,
    DEFAULT_MINECRAFT_VERSION,
)

__all__ = [
    "ConfigurationError",
    "load_artifact_catalog",
    "DEFAULT_INSTANCE_DIRNAME",
    "DEFAULT_JAVA_EXECUTABLE",
    "DEFAULT_MINECRAFT_VERSION",
]
