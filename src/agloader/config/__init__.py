"""Configuration loading and persistence for ag-loader.

This package facade re-exports all public names so callers can use
``from agloader.config import ...``.
"""

from __future__ import annotations

from agloader.config.loader import get_active_registry_path, load_config, reset_config, save_config
from agloader.config.model import AgLoaderConfig, default_config_path, default_registry_path

__all__ = [
    "AgLoaderConfig",
    "default_config_path",
    "default_registry_path",
    "get_active_registry_path",
    "load_config",
    "reset_config",
    "save_config",
]
