"""Per-editor transform and emit pipeline."""

from .pipeline import emit_category
from .profiles import EDITOR_PROFILES, EditorProfile, build_mdc_frontmatter, get_profile, glob_for_stack

__all__ = [
    "EDITOR_PROFILES",
    "EditorProfile",
    "build_mdc_frontmatter",
    "emit_category",
    "get_profile",
    "glob_for_stack",
]
