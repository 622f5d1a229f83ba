"""Tests for loading and persisting the user config."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from agloader.config import (
    AgLoaderConfig,
    default_registry_path,
    get_active_registry_path,
    load_config,
    reset_config,
    save_config,
)


@pytest.fixture(autouse=True)
def _isolated_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    return home


def test_missing_config_uses_default_registry(tmp_path: Path) -> None:
    config = load_config(tmp_path / "absent.yaml")

    assert config.registry_path == default_registry_path()
    assert config.registry_path.name == ".ag-skills"


def test_default_config_path_lives_in_home(_isolated_home: Path) -> None:
    save_config(AgLoaderConfig(registry_path=Path("/srv/skills")))

    assert (_isolated_home / ".ag-loader.yaml").is_file()
    assert get_active_registry_path() == Path("/srv/skills")


def test_saved_config_is_loaded_back(tmp_path: Path) -> None:
    path = tmp_path / "cfg" / "ag-loader.yaml"

    save_config(AgLoaderConfig(registry_path=tmp_path / "skills"), path)

    assert load_config(path).registry_path == tmp_path / "skills"
    assert list(path.parent.iterdir()) == [path]


@pytest.mark.parametrize(
    "content",
    [
        "registry_path: [unclosed\n",
        "- just\n- a list\n",
        "registry_path: 42\n",
        "registry_path: '   '\n",
    ],
)
def test_malformed_config_falls_back_with_warning(
    tmp_path: Path,
    caplog: pytest.LogCaptureFixture,
    content: str,
) -> None:
    path = tmp_path / "ag-loader.yaml"
    path.write_text(content, encoding="utf-8")

    with caplog.at_level(logging.WARNING, logger="agloader.config.loader"):
        config = load_config(path)

    assert config.registry_path == default_registry_path()
    assert "Ignoring" in caplog.text


def test_empty_config_file_uses_default(tmp_path: Path) -> None:
    path = tmp_path / "ag-loader.yaml"
    path.write_text("", encoding="utf-8")

    assert load_config(path) == AgLoaderConfig()


def test_registry_path_expands_user(tmp_path: Path, _isolated_home: Path) -> None:
    path = tmp_path / "ag-loader.yaml"
    path.write_text("registry_path: ~/skills\n", encoding="utf-8")

    assert load_config(path).registry_path == _isolated_home / "skills"


def test_reset_restores_default(tmp_path: Path) -> None:
    path = tmp_path / "ag-loader.yaml"
    save_config(AgLoaderConfig(registry_path=tmp_path / "custom"), path)

    config = reset_config(path)

    assert config.registry_path == default_registry_path()
    assert load_config(path).registry_path == default_registry_path()
