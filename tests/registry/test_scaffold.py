"""Tests for first-run registry scaffolding."""

from __future__ import annotations

from pathlib import Path

from agloader.registry import ensure_registry_exists, list_categories


def test_scaffold_creates_demo_tree(tmp_path: Path) -> None:
    root = tmp_path / ".ag-skills"

    assert ensure_registry_exists(root) is True

    assert (root / "antigravity" / "react" / "skills" / "senior-developer.md").is_file()
    assert (root / "antigravity" / "react" / "agents" / "code-reviewer.md").is_file()
    assert (root / "cursor" / "react" / "rules" / "best-practices.md").is_file()
    names = {category.name for category in list_categories(root, "vscode", "react")}
    assert names == {"instructions", "rules"}


def test_scaffold_leaves_existing_root_alone(tmp_path: Path) -> None:
    root = tmp_path / "mine"
    root.mkdir()

    assert ensure_registry_exists(root) is False
    assert list(root.iterdir()) == []
