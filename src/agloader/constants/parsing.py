"""Patterns for frontmatter stripping and title extraction."""

from __future__ import annotations

import re

# Leading `---` line through the next `---` line, plus any blank lines after it.
FRONTMATTER_BLOCK_PATTERN: re.Pattern[str] = re.compile(
    r"\A---[ \t]*\r?\n.*?^---[ \t]*(?:\r?\n|\Z)(?:[ \t]*\r?\n)*",
    re.MULTILINE | re.DOTALL,
)
H1_PATTERN: re.Pattern[str] = re.compile(r"^#[ \t]+(.+)$", re.MULTILINE)
