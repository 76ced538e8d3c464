"""Tests for build.yaml loading."""

import pytest

from news_build.build.config.exceptions import ConfigFileException, UnknownRepositoryException
from news_build.build.config.loading import CONFIG_ENV_VAR, find_config_file, load_build_config


def test_missing_file_gives_defaults(tmp_path):
    config = load_build_config(project_dir=tmp_path)
    assert config.repositories.names() == ["google", "mavenCentral"]
    assert config.subprojects == []


def test_empty_file_gives_defaults(write_config, tmp_path):
    write_config("")
    config = load_build_config(project_dir=tmp_path)
    assert config.root_name == "android"


def test_full_file(write_config, tmp_path):
    write_config("""
        root: news
        repositories:
          - google
          - mavenCentral
          - name: internal
            url: https://maven.example.com/releases/
        subprojects: [app, core]
        root_build_dir: out
    """)
    config = load_build_config(project_dir=tmp_path)

    assert config.root_name == "news"
    assert config.repositories.names() == ["google", "mavenCentral", "internal"]
    assert config.repositories.repositories[2].url == "https://maven.example.com/releases/"
    assert config.subprojects == ["app", "core"]
    assert config.root_build_dir == "out"


def test_unknown_repository_without_url(write_config, tmp_path):
    write_config("""
        repositories: [google, jcenter]
    """)
    with pytest.raises(UnknownRepositoryException) as exc_info:
        load_build_config(project_dir=tmp_path)
    assert exc_info.value.repository_name == "jcenter"
    assert "google" in exc_info.value.guidance


def test_duplicate_repository(write_config, tmp_path):
    write_config("""
        repositories: [google, google]
    """)
    with pytest.raises(ConfigFileException):
        load_build_config(project_dir=tmp_path)


def test_invalid_yaml(write_config, tmp_path):
    write_config("repositories: [google\n")
    with pytest.raises(ConfigFileException) as exc_info:
        load_build_config(project_dir=tmp_path)
    assert str(tmp_path / "build.yaml") in exc_info.value.guidance


def test_top_level_must_be_mapping(write_config, tmp_path):
    write_config("- google\n")
    with pytest.raises(ConfigFileException):
        load_build_config(project_dir=tmp_path)


def test_schema_violation(write_config, tmp_path):
    write_config("""
        subprojects: app
    """)
    with pytest.raises(ConfigFileException):
        load_build_config(project_dir=tmp_path)


def test_explicit_missing_path_is_an_error(tmp_path):
    with pytest.raises(ConfigFileException):
        load_build_config(config_path=tmp_path / "nope.yaml")


def test_env_var_overrides_project_dir(write_config, tmp_path, monkeypatch):
    path = write_config("root: from-env\n", name="custom.yaml")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert find_config_file(project_dir=tmp_path / "elsewhere") == path
    assert load_build_config(project_dir=tmp_path / "elsewhere").root_name == "from-env"


def test_explicit_path_beats_env_var(write_config, tmp_path, monkeypatch):
    explicit = write_config("root: explicit\n", name="explicit.yaml")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(tmp_path / "missing.yaml"))
    assert load_build_config(config_path=explicit).root_name == "explicit"


def test_template_with_unknown_placeholder(write_config, tmp_path):
    write_config("""
        subprojects: [app]
        subproject_build_dir: "../build/{name}/{variant}"
    """)
    with pytest.raises(ConfigFileException):
        load_build_config(project_dir=tmp_path)
