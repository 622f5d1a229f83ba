"""Transform skill documents and write them where each editor expects them."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias, assert_never

from agloader.constants.editors import (
    ANTIGRAVITY_DIR,
    CLINE_RULES_NAME,
    CURSOR_RULE_SUFFIX,
    CURSOR_RULES_DIR,
    ROO_RULES_DIR,
    SECTION_SEPARATOR,
)
from agloader.constants.registry import MARKDOWN_SUFFIX
from agloader.emit.profiles import build_mdc_frontmatter, get_profile, glob_for_stack
from agloader.model import CategoryEntry, EmitOptions, EmitReport, WrittenFile
from agloader.parsers import load_skill_document

logger = logging.getLogger(__name__)

WriteCallback: TypeAlias = Callable[[WrittenFile], None]


def emit_category(
    category: CategoryEntry,
    editor: str,
    options: EmitOptions,
    *,
    project_root: Path,
    on_write: WriteCallback | None = None,
) -> EmitReport:
    """Emit every file of *category* for *editor* into *project_root*.

    Files are handled one at a time in listing order. The first filesystem
    error aborts the category and propagates to the caller.
    """
    profile = get_profile(editor)
    if not category.files:
        logger.debug("Skipping empty category %s", category.name)
        return EmitReport(category=category.name, editor=profile.key, written=(), file_count=0, skipped=True)

    written: list[WrittenFile] = []

    def record(path: Path, note: str = "") -> None:
        item = WrittenFile(path=path, display_path=path.relative_to(project_root).as_posix(), note=note)
        logger.debug("Wrote %s", path)
        written.append(item)
        if on_write is not None:
            on_write(item)

    match profile.key:
        case "antigravity":
            _emit_antigravity(category, project_root, record)
        case "cursor":
            _emit_cursor(category, project_root, options, record)
        case "vscode":
            match options.vscode_mode:
                case "single":
                    _emit_vscode_single(category, project_root, record)
                case "directory":
                    _emit_vscode_directory(category, project_root, record)
                case _:
                    assert_never(options.vscode_mode)
        case _:
            assert_never(profile.key)

    return EmitReport(
        category=category.name,
        editor=profile.key,
        written=tuple(written),
        file_count=len(category.files),
    )


def _emit_antigravity(category: CategoryEntry, project_root: Path, record: Callable[..., None]) -> None:
    dest_dir = project_root / ANTIGRAVITY_DIR
    dest_dir.mkdir(parents=True, exist_ok=True)
    for file_name in category.files:
        dest = dest_dir / file_name
        shutil.copyfile(category.source_dir / file_name, dest)
        record(dest)


def _emit_cursor(
    category: CategoryEntry,
    project_root: Path,
    options: EmitOptions,
    record: Callable[..., None],
) -> None:
    dest_dir = project_root.joinpath(*CURSOR_RULES_DIR)
    dest_dir.mkdir(parents=True, exist_ok=True)
    globs = glob_for_stack(options.stack)
    for file_name in category.files:
        document = load_skill_document(category.source_dir / file_name)
        frontmatter = build_mdc_frontmatter(
            description=document.derived_title,
            globs=globs,
            always_apply=options.always_apply,
        )
        dest = dest_dir / (file_name.removesuffix(MARKDOWN_SUFFIX) + CURSOR_RULE_SUFFIX)
        dest.write_text(frontmatter + document.body, encoding="utf-8")
        record(dest)


def _emit_vscode_directory(category: CategoryEntry, project_root: Path, record: Callable[..., None]) -> None:
    cline_dir = project_root / CLINE_RULES_NAME
    roo_dir = project_root.joinpath(*ROO_RULES_DIR)
    cline_dir.mkdir(parents=True, exist_ok=True)
    roo_dir.mkdir(parents=True, exist_ok=True)
    for file_name in category.files:
        document = load_skill_document(category.source_dir / file_name)
        cline_dest = cline_dir / file_name
        cline_dest.write_text(document.body, encoding="utf-8")
        record(cline_dest)
        roo_dest = roo_dir / file_name
        roo_dest.write_text(document.body, encoding="utf-8")
        record(roo_dest, "RooCode")


def _emit_vscode_single(category: CategoryEntry, project_root: Path, record: Callable[..., None]) -> None:
    sections: list[str] = []
    for file_name in category.files:
        document = load_skill_document(category.source_dir / file_name)
        sections.append(f"# {document.derived_title}\n\n{document.body.strip()}")

    dest = project_root / CLINE_RULES_NAME
    dest.write_text(SECTION_SEPARATOR.join(sections), encoding="utf-8")
    record(dest, f"{len(sections)} skill(s) concatenated")
