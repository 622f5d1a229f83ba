"""Shared type aliases for ag-loader."""

from .common import EditorKey, VsCodeMode

__all__ = ["EditorKey", "VsCodeMode"]
