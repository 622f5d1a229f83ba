"""Constants describing the registry directory layout."""

from __future__ import annotations

ROOT_CATEGORY: str = "__root__"
MARKDOWN_SUFFIX: str = ".md"
