"""The fixed set of editor profiles and their frontmatter conventions."""

from __future__ import annotations

from dataclasses import dataclass

from agloader.constants.editors import FALLBACK_GLOB, STACK_GLOBS
from agloader.exceptions import UnknownEditorError
from agloader.types import EditorKey


@dataclass(frozen=True)
class EditorProfile:
    """Static description of one supported editor."""

    key: EditorKey
    label: str
    hint: str


EDITOR_PROFILES: tuple[EditorProfile, ...] = (
    EditorProfile("antigravity", "Antigravity", "writes .md files into .agents/"),
    EditorProfile("cursor", "Cursor", "writes .mdc rules into .cursor/rules/"),
    EditorProfile("vscode", "VS Code", "writes rules into .clinerules/ (Cline/RooCode)"),
)


def get_profile(key: str) -> EditorProfile:
    for profile in EDITOR_PROFILES:
        if profile.key == key:
            return profile
    expected = ", ".join(profile.key for profile in EDITOR_PROFILES)
    raise UnknownEditorError(f"Unknown editor {key!r}; expected one of: {expected}")


def glob_for_stack(stack_name: str) -> str:
    """Pick the Cursor glob for a stack by keyword, first match wins."""
    lowered = stack_name.lower()
    for keyword, pattern in STACK_GLOBS:
        if keyword in lowered:
            return pattern
    return FALLBACK_GLOB


def build_mdc_frontmatter(*, description: str, globs: str, always_apply: bool) -> str:
    """Render the frontmatter block Cursor expects at the top of a ``.mdc`` rule."""
    return (
        "---\n"
        f"description: {description}\n"
        f"globs: {globs}\n"
        f"alwaysApply: {'true' if always_apply else 'false'}\n"
        "---\n\n"
    )
