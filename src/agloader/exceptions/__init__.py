"""Shared exception hierarchy for ag-loader."""

from __future__ import annotations

from .base import AgLoaderError
from .config import ConfigError
from .registry import RegistryError, UnknownCategoryError, UnknownEditorError, UnknownStackError

__all__ = [
    "AgLoaderError",
    "ConfigError",
    "RegistryError",
    "UnknownCategoryError",
    "UnknownEditorError",
    "UnknownStackError",
]
