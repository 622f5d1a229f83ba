"""Configuration model for ag-loader."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from agloader.constants.config import CONFIG_FILENAME, DEFAULT_REGISTRY_DIRNAME


def default_registry_path() -> Path:
    """Return the registry used when no configuration overrides it."""
    return Path.home() / DEFAULT_REGISTRY_DIRNAME


def default_config_path() -> Path:
    """Return the per-user configuration file location."""
    return Path.home() / CONFIG_FILENAME


@dataclass(frozen=True)
class AgLoaderConfig:
    """Persisted user configuration."""

    registry_path: Path = field(default_factory=default_registry_path)
