"""Base exception for ag-loader."""

from __future__ import annotations


class AgLoaderError(Exception):
    """Base class for all ag-loader errors."""
