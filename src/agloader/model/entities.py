"""Frozen dataclasses shared by the scanner, pipeline and reporters."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from agloader.constants.registry import ROOT_CATEGORY
from agloader.types import EditorKey, VsCodeMode


@dataclass(frozen=True)
class CategoryEntry:
    """A group of markdown files inside a stack directory.

    ``name`` is ``ROOT_CATEGORY`` when the stack has no subfolders, in which
    case ``source_dir`` is the stack directory itself.
    """

    name: str
    files: tuple[str, ...]
    source_dir: Path

    @property
    def is_root(self) -> bool:
        return self.name == ROOT_CATEGORY


@dataclass(frozen=True)
class StackTree:
    """A stack and the categories found beneath it."""

    stack: str
    categories: tuple[CategoryEntry, ...]

    @property
    def file_count(self) -> int:
        return sum(len(category.files) for category in self.categories)


@dataclass(frozen=True)
class SkillDocument:
    """One source document after frontmatter stripping."""

    file_name: str
    raw_content: str
    body: str
    derived_title: str


@dataclass(frozen=True)
class EmitOptions:
    """Profile-specific options chosen for one run."""

    stack: str = ""
    always_apply: bool = False
    vscode_mode: VsCodeMode = "directory"


@dataclass(frozen=True)
class WrittenFile:
    """A single file written into the project."""

    path: Path
    display_path: str
    note: str = ""


@dataclass(frozen=True)
class EmitReport:
    """Outcome of emitting one category for one editor."""

    category: str
    editor: EditorKey
    written: tuple[WrittenFile, ...]
    file_count: int
    skipped: bool = False
