"""Registry tree scanning: editor -> stack -> category -> file."""

from __future__ import annotations

import logging
from pathlib import Path

from agloader.constants.editors import EDITOR_KEYS
from agloader.constants.registry import MARKDOWN_SUFFIX, ROOT_CATEGORY
from agloader.exceptions import UnknownEditorError
from agloader.model import CategoryEntry, StackTree

logger = logging.getLogger(__name__)


def editor_path(root: Path, editor: str) -> Path:
    """Return ``<root>/<editor>`` for a supported editor key."""
    if editor not in EDITOR_KEYS:
        raise UnknownEditorError(f"Unknown editor {editor!r}; expected one of: {', '.join(EDITOR_KEYS)}")
    return root / editor


def list_stacks(root: Path, editor: str) -> list[str]:
    """Return stack folder names under ``<root>/<editor>``, creating the folder if absent."""
    directory = editor_path(root, editor)
    directory.mkdir(parents=True, exist_ok=True)
    stacks = [entry.name for entry in directory.iterdir() if entry.is_dir()]
    logger.debug("Found %d stack(s) in %s", len(stacks), directory)
    return stacks


def list_categories(root: Path, editor: str, stack: str) -> list[CategoryEntry]:
    """Return the categories of a stack.

    A stack without subfolders yields a single ``ROOT_CATEGORY`` entry holding
    its markdown files. As soon as one subfolder exists, every subfolder is a
    category and markdown files directly inside the stack are ignored.
    Raises ``FileNotFoundError`` when the stack directory does not exist.
    """
    stack_dir = editor_path(root, editor) / stack
    entries = list(stack_dir.iterdir())
    subdirs = [entry for entry in entries if entry.is_dir()]

    if not subdirs:
        return [CategoryEntry(name=ROOT_CATEGORY, files=_markdown_names(entries), source_dir=stack_dir)]

    categories: list[CategoryEntry] = []
    for subdir in subdirs:
        categories.append(
            CategoryEntry(
                name=subdir.name,
                files=_markdown_names(list(subdir.iterdir())),
                source_dir=subdir,
            )
        )
    return categories


def list_tree(root: Path, editor: str) -> list[StackTree]:
    """Return every stack of an editor with its categories."""
    return [
        StackTree(stack=stack, categories=tuple(list_categories(root, editor, stack)))
        for stack in list_stacks(root, editor)
    ]


def _markdown_names(entries: list[Path]) -> tuple[str, ...]:
    return tuple(entry.name for entry in entries if entry.is_file() and entry.name.endswith(MARKDOWN_SUFFIX))
