"""Unit tests for config.py"""

import pytest

from fileinspect.config import load_config


@pytest.fixture(autouse=True)
def chdir_tmp(tmp_path, monkeypatch):
    """Run each test from a clean tmp directory so no stray config.yaml is read."""
    monkeypatch.chdir(tmp_path)


def test_load_config_defaults():
    """Settings defaults are used when no config.yaml, env var, or override exists."""
    settings = load_config()
    assert settings.include_hidden is True
    assert settings.ignore_files == [".gitignore", ".ignore"]
    assert settings.sniff_bytes == 8000
    assert settings.log_level == "WARNING"


def test_load_config_reads_config_yaml(tmp_path):
    """Values in config.yaml replace the defaults."""
    (tmp_path / "config.yaml").write_text("sniff_bytes: 512\nmime_types:\n  .foo: text/x-foo\n")
    settings = load_config()
    assert settings.sniff_bytes == 512
    assert settings.mime_types == {".foo": "text/x-foo"}


def test_load_config_env_overrides_config_yaml(tmp_path, monkeypatch):
    """FILEINSPECT_SNIFF_BYTES takes precedence over config.yaml."""
    (tmp_path / "config.yaml").write_text("sniff_bytes: 512\n")
    monkeypatch.setenv("FILEINSPECT_SNIFF_BYTES", "64")
    settings = load_config()
    assert settings.sniff_bytes == 64


def test_load_config_cli_overrides_env(monkeypatch):
    """A non-None CLI override beats the env var."""
    monkeypatch.setenv("FILEINSPECT_INCLUDE_HIDDEN", "true")
    settings = load_config(overrides={"include_hidden": False})
    assert settings.include_hidden is False


def test_load_config_none_override_is_ignored(monkeypatch):
    """A None override leaves the env value in place."""
    monkeypatch.setenv("FILEINSPECT_INCLUDE_HIDDEN", "false")
    settings = load_config(overrides={"include_hidden": None})
    assert settings.include_hidden is False


def test_load_config_env_list_is_comma_split(monkeypatch):
    """FILEINSPECT_IGNORE_FILES is split on commas."""
    monkeypatch.setenv("FILEINSPECT_IGNORE_FILES", ".gitignore, .dockerignore")
    settings = load_config()
    assert settings.ignore_files == [".gitignore", ".dockerignore"]


def test_load_config_invalid_yaml(tmp_path):
    """load_config raises ValueError when config.yaml contains invalid YAML."""
    (tmp_path / "config.yaml").write_text("key: [unclosed\n")
    with pytest.raises(ValueError, match="Invalid config.yaml"):
        load_config()


def test_load_config_rejects_bad_log_level(monkeypatch):
    """An unknown log level fails validation."""
    monkeypatch.setenv("FILEINSPECT_LOG_LEVEL", "LOUD")
    with pytest.raises(ValueError):
        load_config()
