"""Shared pytest fixtures for building registries and projects on disk."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path
from typing import TypeAlias

import pytest

FileMap: TypeAlias = dict[str, str]


def write_tree(root: Path, files: FileMap) -> Path:
    """Write ``{relative_path: content}`` under *root*; keys ending in ``/`` create empty directories."""
    for relative, content in files.items():
        target = root / relative
        if relative.endswith("/"):
            target.mkdir(parents=True, exist_ok=True)
            continue
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")
    return root


@pytest.fixture
def registry_root(tmp_path: Path) -> Path:
    """Return an empty registry directory."""
    root = tmp_path / "registry"
    root.mkdir()
    return root


@pytest.fixture
def project_root(tmp_path: Path) -> Path:
    """Return an empty project directory."""
    root = tmp_path / "project"
    root.mkdir()
    return root


@pytest.fixture
def make_registry(registry_root: Path) -> Callable[[FileMap], Path]:
    """Return a builder that populates the registry and returns its root."""

    def _make(files: FileMap) -> Path:
        return write_tree(registry_root, files)

    return _make


@pytest.fixture
def config_file(tmp_path: Path, registry_root: Path) -> Path:
    """Return a config file pointing at ``registry_root``."""
    path = tmp_path / "ag-loader.yaml"
    path.write_text(f"registry_path: {registry_root}\n", encoding="utf-8")
    return path
