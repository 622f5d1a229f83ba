"""Tests for the per-editor emit pipeline."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from agloader.emit import emit_category
from agloader.model import CategoryEntry, EmitOptions, WrittenFile
from agloader.registry import list_categories


def _category(source_dir: Path, files: dict[str, str], name: str = "rules") -> CategoryEntry:
    source_dir.mkdir(parents=True, exist_ok=True)
    for file_name, content in files.items():
        (source_dir / file_name).write_text(content, encoding="utf-8")
    return CategoryEntry(name=name, files=tuple(files), source_dir=source_dir)


def test_cursor_end_to_end(make_registry: Callable[..., Path], project_root: Path) -> None:
    root = make_registry({"cursor/reactstack/rules/a.md": "# A Rule\ntext"})
    (category,) = list_categories(root, "cursor", "reactstack")

    report = emit_category(
        category,
        "cursor",
        EmitOptions(stack="reactstack", always_apply=False),
        project_root=project_root,
    )

    rules_dir = project_root / ".cursor" / "rules"
    assert [path.name for path in rules_dir.iterdir()] == ["a.mdc"]
    content = (rules_dir / "a.mdc").read_text(encoding="utf-8")
    assert content.startswith(
        "---\ndescription: A Rule\nglobs: **/*.{tsx,jsx,ts,js}\nalwaysApply: false\n---\n\n"
    )
    assert content.endswith("text")
    assert report.file_count == 1
    assert [item.display_path for item in report.written] == [".cursor/rules/a.mdc"]


def test_cursor_replaces_existing_frontmatter(tmp_path: Path, project_root: Path) -> None:
    category = _category(
        tmp_path / "src",
        {"py-style.md": "---\ndescription: stale\nglobs: '*'\n---\n\nUse type hints.\n"},
    )

    emit_category(category, "cursor", EmitOptions(stack="python", always_apply=True), project_root=project_root)

    content = (project_root / ".cursor" / "rules" / "py-style.mdc").read_text(encoding="utf-8")
    assert content == (
        "---\ndescription: py-style\nglobs: **/*.py\nalwaysApply: true\n---\n\nUse type hints.\n"
    )
    assert "stale" not in content


def test_antigravity_copies_files_unchanged(tmp_path: Path, project_root: Path) -> None:
    raw = "---\nname: reviewer\n---\n# Reviewer\nbody\n"
    category = _category(tmp_path / "src", {"reviewer.md": raw, "dev.md": "# Dev\n"})

    report = emit_category(category, "antigravity", EmitOptions(), project_root=project_root)

    assert (project_root / ".agents" / "reviewer.md").read_text(encoding="utf-8") == raw
    assert (project_root / ".agents" / "dev.md").read_text(encoding="utf-8") == "# Dev\n"
    assert [item.display_path for item in report.written] == [".agents/reviewer.md", ".agents/dev.md"]


def test_vscode_directory_mode_mirrors_into_roo(tmp_path: Path, project_root: Path) -> None:
    category = _category(tmp_path / "src", {"rule.md": "---\nx: 1\n---\n# Rule\nbody\n"})

    report = emit_category(
        category,
        "vscode",
        EmitOptions(vscode_mode="directory"),
        project_root=project_root,
    )

    cline = (project_root / ".clinerules" / "rule.md").read_text(encoding="utf-8")
    roo = (project_root / ".roo" / "rules" / "rule.md").read_text(encoding="utf-8")
    assert cline == roo == "# Rule\nbody\n"
    assert [(item.display_path, item.note) for item in report.written] == [
        (".clinerules/rule.md", ""),
        (".roo/rules/rule.md", "RooCode"),
    ]


def test_vscode_single_mode_concatenates_sections(tmp_path: Path, project_root: Path) -> None:
    category = _category(tmp_path / "src", {"One.md": "x", "Two.md": "y"}, name="__root__")

    report = emit_category(category, "vscode", EmitOptions(vscode_mode="single"), project_root=project_root)

    content = (project_root / ".clinerules").read_text(encoding="utf-8")
    assert content == "# One\n\nx" + "\n\n---\n\n" + "# Two\n\ny"
    assert len(report.written) == 1
    assert report.written[0].note == "2 skill(s) concatenated"


def test_empty_category_is_a_reported_noop(tmp_path: Path, project_root: Path) -> None:
    category = CategoryEntry(name="drafts", files=(), source_dir=tmp_path)

    report = emit_category(category, "cursor", EmitOptions(), project_root=project_root)

    assert report.skipped is True
    assert report.written == ()
    assert list(project_root.iterdir()) == []


def test_on_write_receives_each_file_in_order(tmp_path: Path, project_root: Path) -> None:
    category = _category(tmp_path / "src", {"b.md": "# B", "a.md": "# A"})
    events: list[WrittenFile] = []

    emit_category(category, "cursor", EmitOptions(stack="node"), project_root=project_root, on_write=events.append)

    assert [event.path.name for event in events] == ["b.mdc", "a.mdc"]


def test_first_failure_aborts_category(tmp_path: Path, project_root: Path) -> None:
    category = _category(tmp_path / "src", {"a.md": "# A", "c.md": "# C"})
    category = CategoryEntry(name=category.name, files=("a.md", "missing.md", "c.md"), source_dir=category.source_dir)

    with pytest.raises(FileNotFoundError):
        emit_category(category, "vscode", EmitOptions(), project_root=project_root)

    assert (project_root / ".clinerules" / "a.md").exists()
    assert not (project_root / ".clinerules" / "c.md").exists()


def test_unknown_vscode_mode_is_rejected(tmp_path: Path, project_root: Path) -> None:
    category = _category(tmp_path / "src", {"rule.md": "# Rule\n"})

    with pytest.raises(AssertionError):
        emit_category(category, "vscode", EmitOptions(vscode_mode="zip"), project_root=project_root)  # type: ignore[arg-type]

    assert list(project_root.iterdir()) == []
