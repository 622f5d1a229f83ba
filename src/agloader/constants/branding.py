"""Branding constants for terminal output."""

from __future__ import annotations

BRAND_NAME: str = "ag-loader"
TAGLINE: str = "AI skill loader"
CLI_DESCRIPTION: str = (
    "Load AI skills into the current project. Works with Antigravity, Cursor and VS Code."
)
LIST_TITLE: str = "Available skills"
