"""Unit tests for dot_render.config."""

import json
from pathlib import Path

import pytest

from dot_render.config import (
    is_initialized,
    load_config,
    resolve_config,
    save_config,
)
from dot_render.models import RenderConfig


class TestSaveLoadConfig:
    def test_save_creates_file(self, tmp_path: Path) -> None:
        path = save_config(RenderConfig(), tmp_path)
        assert path.exists()

    def test_save_creates_config_dir(self, tmp_path: Path) -> None:
        save_config(RenderConfig(), tmp_path)
        assert (tmp_path / ".dot-render").is_dir()

    def test_roundtrip(self, tmp_path: Path) -> None:
        config = RenderConfig(width=100, ribbon=0.6, indent=4, strict=True)
        save_config(config, tmp_path)
        loaded = load_config(tmp_path)
        assert loaded == config

    def test_load_nonexistent(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_config(tmp_path)

    def test_save_is_valid_json(self, tmp_path: Path) -> None:
        path = save_config(RenderConfig(width=120), tmp_path)
        data = json.loads(path.read_text())
        assert data["width"] == 120
        assert set(data) == {"width", "ribbon", "indent", "strict"}

    def test_unknown_keys_ignored(self, tmp_path: Path) -> None:
        (tmp_path / ".dot-render").mkdir()
        (tmp_path / ".dot-render" / "config.json").write_text(
            '{"version": "0.1.0", "indent": 3}'
        )
        assert load_config(tmp_path) == RenderConfig(indent=3)

    def test_missing_keys_use_defaults(self, tmp_path: Path) -> None:
        (tmp_path / ".dot-render").mkdir()
        (tmp_path / ".dot-render" / "config.json").write_text('{"width": 60}')
        loaded = load_config(tmp_path)
        assert loaded.width == 60
        assert loaded.ribbon == 0.4
        assert loaded.indent == 2

    def test_invalid_values_rejected(self, tmp_path: Path) -> None:
        (tmp_path / ".dot-render").mkdir()
        (tmp_path / ".dot-render" / "config.json").write_text('{"ribbon": 2}')
        with pytest.raises(ValueError, match="ribbon"):
            load_config(tmp_path)


class TestInitialization:
    def test_not_initialized(self, tmp_path: Path) -> None:
        assert not is_initialized(tmp_path)

    def test_initialized(self, initialized_project: Path) -> None:
        assert is_initialized(initialized_project)

    def test_resolve_defaults(self, tmp_path: Path) -> None:
        assert resolve_config(tmp_path) == RenderConfig()

    def test_resolve_project(self, initialized_project: Path) -> None:
        assert resolve_config(initialized_project).strict is True
