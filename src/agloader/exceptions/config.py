"""Configuration-related exceptions."""

from __future__ import annotations

from agloader.exceptions.base import AgLoaderError


class ConfigError(AgLoaderError, ValueError):
    """Raised when user-supplied configuration is invalid."""
