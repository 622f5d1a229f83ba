"""Frontmatter stripping and title derivation for skill documents."""

from __future__ import annotations

from pathlib import Path

from agloader.constants.parsing import FRONTMATTER_BLOCK_PATTERN, H1_PATTERN
from agloader.constants.registry import MARKDOWN_SUFFIX
from agloader.io import read_text
from agloader.model import SkillDocument


def strip_frontmatter(text: str) -> str:
    """Remove a leading ``---`` delimited block and the blank lines after it.

    Text without a leading delimiter, or with an unterminated block, is
    returned unchanged.
    """
    match = FRONTMATTER_BLOCK_PATTERN.match(text)
    if match is None:
        return text
    return text[match.end() :]


def extract_h1(text: str) -> str:
    """Return the first top-level heading, or an empty string."""
    match = H1_PATTERN.search(text)
    return match.group(1).strip() if match else ""


def derive_title(body: str, file_name: str) -> str:
    """Return the first H1 of *body*, falling back to the file name without extension."""
    return extract_h1(body) or file_name.removesuffix(MARKDOWN_SUFFIX)


def load_skill_document(path: Path) -> SkillDocument:
    """Read a skill file and prepare its stripped body and title."""
    raw_content = read_text(path)
    body = strip_frontmatter(raw_content)
    return SkillDocument(
        file_name=path.name,
        raw_content=raw_content,
        body=body,
        derived_title=derive_title(body, path.name),
    )
