#!/usr/bin/env python3
"""
Tests for YAML project configuration.
"""

import pytest

from strtab.config import ProjectConfig, find_config_file, load_config
from strtab.errors import ConfigError


def test_defaults_without_config_file(tmp_path):
    config = load_config(project_dir=tmp_path)
    assert config == ProjectConfig()
    assert config.id_column == "id"
    assert config.default_locale == "def"
    assert config.values_prefix == "values-"


def test_loads_project_config_file(tmp_path):
    (tmp_path / "strtab.yaml").write_text(
        "locales: [fr, de]\nbackup_suffix: .orig\ndelimiter: ';'\n", encoding="utf-8"
    )
    config = load_config(project_dir=tmp_path)

    assert config.locales == ["fr", "de"]
    assert config.backup_suffix == ".orig"
    assert config.delimiter == ";"
    assert config.backup is True


def test_hidden_config_file_is_found(tmp_path):
    (tmp_path / ".strtab.yaml").write_text("backup: false\n", encoding="utf-8")
    assert find_config_file(tmp_path) == tmp_path / ".strtab.yaml"
    assert load_config(project_dir=tmp_path).backup is False


def test_explicit_config_file(tmp_path):
    path = tmp_path / "custom.yml"
    path.write_text("default_locale: en\n", encoding="utf-8")
    assert load_config(project_dir=tmp_path, config_file=path).default_locale == "en"


def test_empty_config_file_gives_defaults(tmp_path):
    (tmp_path / "strtab.yaml").write_text("", encoding="utf-8")
    assert load_config(project_dir=tmp_path) == ProjectConfig()


def test_missing_explicit_config_file(tmp_path):
    with pytest.raises(ConfigError, match="not found"):
        load_config(config_file=tmp_path / "missing.yaml")


@pytest.mark.parametrize("content, message", [
    ("locales: [fr\n", "Invalid YAML"),
    ("- fr\n- de\n", "must contain a mapping"),
    ("colour: blue\n", "Unknown config key"),
    ("delimiter: ';;'\n", "single character"),
    ("backup: maybe\n", "true or false"),
    ("locales: fr\n", "list of locale names"),
    ("default_locale: ''\n", "non-empty string"),
])
def test_invalid_config(tmp_path, content, message):
    (tmp_path / "strtab.yaml").write_text(content, encoding="utf-8")
    with pytest.raises(ConfigError, match=message):
        load_config(project_dir=tmp_path)


def test_merged_ignores_none_overrides():
    config = ProjectConfig(locales=["fr"]).merged(backup=False, locales=None)
    assert config.backup is False
    assert config.locales == ["fr"]
