"""Config loading and persistence for the per-user settings file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

from agloader.config.model import AgLoaderConfig, default_config_path
from agloader.constants.config import CONFIG_REGISTRY_KEY, CONFIG_TEMP_PREFIX, CONFIG_TEMP_SUFFIX
from agloader.io import write_text_atomic

logger = logging.getLogger(__name__)


def load_config(config_path: Path | None = None) -> AgLoaderConfig:
    """Load the user config, falling back to defaults when it is missing or malformed."""
    path = config_path or default_config_path()
    if not path.exists():
        return AgLoaderConfig()

    try:
        raw = yaml.safe_load(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, yaml.YAMLError) as exc:
        logger.warning("Ignoring unreadable config file %s: %s", path, exc)
        return AgLoaderConfig()

    if raw is None:
        return AgLoaderConfig()
    if not isinstance(raw, dict):
        logger.warning("Ignoring config file %s: expected a YAML mapping", path)
        return AgLoaderConfig()

    registry_raw = raw.get(CONFIG_REGISTRY_KEY)
    if registry_raw is None:
        return AgLoaderConfig()
    if not isinstance(registry_raw, str) or not registry_raw.strip():
        logger.warning("Ignoring %s in %s: expected a non-empty string", CONFIG_REGISTRY_KEY, path)
        return AgLoaderConfig()

    return AgLoaderConfig(registry_path=Path(registry_raw).expanduser())


def save_config(config: AgLoaderConfig, config_path: Path | None = None) -> Path:
    """Write the config file atomically and return its path."""
    path = config_path or default_config_path()
    rendered = yaml.safe_dump({CONFIG_REGISTRY_KEY: str(config.registry_path)}, sort_keys=True)
    write_text_atomic(
        path=path,
        content=rendered,
        temp_prefix=CONFIG_TEMP_PREFIX,
        temp_suffix=CONFIG_TEMP_SUFFIX,
    )
    logger.debug("Saved config to %s", path)
    return path


def reset_config(config_path: Path | None = None) -> AgLoaderConfig:
    """Restore the default registry location."""
    config = AgLoaderConfig()
    save_config(config, config_path)
    return config


def get_active_registry_path(config_path: Path | None = None) -> Path:
    return load_config(config_path).registry_path
