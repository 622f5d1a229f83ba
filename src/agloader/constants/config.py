"""Configuration defaults and filenames."""

from __future__ import annotations

CONFIG_FILENAME: str = ".ag-loader.yaml"
CONFIG_REGISTRY_KEY: str = "registry_path"
CONFIG_TEMP_PREFIX: str = ".ag-loader-"
CONFIG_TEMP_SUFFIX: str = ".yaml"

DEFAULT_REGISTRY_DIRNAME: str = ".ag-skills"
