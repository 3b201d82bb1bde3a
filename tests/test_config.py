"""Tests for configuration loading."""

from pathlib import Path

import pytest
from pydantic import ValidationError
from codex_tree.config import Config, DEFAULT_IGNORED_DIRS


def test_config_defaults():
    config = Config()

    assert config.viewport_height == 16
    assert config.preview_height == 16
    assert config.preview_width == 70
    assert config.max_file_size == 1_000_000
    assert config.respect_gitignore is True
    assert config.export_dir == Path("exports")


def test_config_from_env_overrides(monkeypatch, tmp_path):
    """Environment variables should override defaults."""
    monkeypatch.setenv("MAX_FILE_SIZE", "2048")
    monkeypatch.setenv("VIEWPORT_HEIGHT", "10")
    monkeypatch.setenv("PREVIEW_WIDTH", "100")
    monkeypatch.setenv("EXPORT_DIR", str(tmp_path / "svg"))
    monkeypatch.setenv("RESPECT_GITIGNORE", "false")
    monkeypatch.setenv("IGNORED_DIRS", "coverage, .mypy_cache")

    config = Config.from_env()

    assert config.max_file_size == 2048
    assert config.viewport_height == 10
    assert config.preview_width == 100
    assert config.export_dir == tmp_path / "svg"
    assert config.respect_gitignore is False

    # Ensure new ignored directories are appended to defaults
    assert set(DEFAULT_IGNORED_DIRS).issubset(set(config.ignored_dirs))
    assert "coverage" in config.ignored_dirs
    assert ".mypy_cache" in config.ignored_dirs


def test_config_from_env_invalid_numbers_fall_back(monkeypatch):
    monkeypatch.setenv("VIEWPORT_HEIGHT", "tall")
    monkeypatch.setenv("PREVIEW_HEIGHT", "0")

    config = Config.from_env()

    assert config.viewport_height == 16
    assert config.preview_height == 1


def test_config_rejects_empty_viewport():
    with pytest.raises(ValidationError):
        Config(viewport_height=0)
