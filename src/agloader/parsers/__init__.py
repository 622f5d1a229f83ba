"""Skill document parsers."""

from .skill_markdown import derive_title, extract_h1, load_skill_document, strip_frontmatter

__all__ = ["derive_title", "extract_h1", "load_skill_document", "strip_frontmatter"]
