"""
Tests for settings loading — build-version.yml and the environment.
"""

import textwrap
from pathlib import Path

import pytest

from build_version.core.config.loader import (
    find_settings_file,
    load_settings,
    resolve_output_directory,
)
from build_version.core.errors import ConfigError, MissingEnvVarError
from build_version.core.models.version import VersionSettings


@pytest.fixture
def settings_yml(tmp_path: Path) -> Path:
    content = textwrap.dedent("""\
        language: python
        out_dir_var: GEN_DIR
    """)
    path = tmp_path / "build-version.yml"
    path.write_text(content)
    return path


class TestLoadSettings:
    """Tests for load_settings()."""

    def test_defaults_without_file(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = load_settings(environ={})
        assert settings.language == "rust"
        assert settings.out_dir_var == "OUT_DIR"
        assert settings.output_directory is None

    def test_out_dir_from_environment(self, tmp_path: Path, monkeypatch):
        monkeypatch.chdir(tmp_path)
        settings = load_settings(environ={"OUT_DIR": "/tmp/out"})
        assert settings.output_directory == Path("/tmp/out")

    def test_load_file(self, settings_yml: Path):
        settings = load_settings(settings_yml, environ={"GEN_DIR": "/gen"})
        assert settings.language == "python"
        assert settings.out_dir_var == "GEN_DIR"
        assert settings.output_directory == Path("/gen")

    def test_file_found_by_search(self, settings_yml: Path, monkeypatch):
        sub = settings_yml.parent / "a" / "b"
        sub.mkdir(parents=True)
        monkeypatch.chdir(sub)
        settings = load_settings(environ={})
        assert settings.language == "python"

    def test_wrapped_format(self, tmp_path: Path):
        path = tmp_path / "build-version.yml"
        path.write_text("build_version:\n  language: c\n")
        assert load_settings(path, environ={}).language == "c"

    def test_empty_file(self, tmp_path: Path):
        path = tmp_path / "build-version.yml"
        path.write_text("")
        assert load_settings(path, environ={}).language == "rust"

    def test_file_output_directory_wins(self, tmp_path: Path):
        path = tmp_path / "build-version.yml"
        path.write_text("output_directory: /pinned\n")
        settings = load_settings(path, environ={"OUT_DIR": "/from-env"})
        assert settings.output_directory == Path("/pinned")

    def test_language_env_override(self, settings_yml: Path):
        settings = load_settings(settings_yml, environ={"BUILD_VERSION_LANGUAGE": "c"})
        assert settings.language == "c"

    def test_missing_file_raises(self, tmp_path: Path):
        with pytest.raises(ConfigError, match="not found"):
            load_settings(tmp_path / "nonexistent.yml", environ={})

    def test_invalid_yaml_raises(self, tmp_path: Path):
        path = tmp_path / "build-version.yml"
        path.write_text(":: invalid: yaml: [")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_settings(path, environ={})

    def test_non_mapping_raises(self, tmp_path: Path):
        path = tmp_path / "build-version.yml"
        path.write_text("- just\n- a list\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_settings(path, environ={})

    def test_unknown_language_raises(self, tmp_path: Path):
        path = tmp_path / "build-version.yml"
        path.write_text("language: cobol\n")
        with pytest.raises(ConfigError, match="Invalid settings"):
            load_settings(path, environ={})

    def test_unknown_key_raises(self, tmp_path: Path):
        path = tmp_path / "build-version.yml"
        path.write_text("langauge: rust\n")
        with pytest.raises(ConfigError):
            load_settings(path, environ={})


class TestFindSettingsFile:
    def test_finds_in_current_dir(self, settings_yml: Path):
        assert find_settings_file(settings_yml.parent) == settings_yml

    def test_finds_in_parent(self, settings_yml: Path):
        sub = settings_yml.parent / "sub"
        sub.mkdir()
        assert find_settings_file(sub) == settings_yml

    def test_not_found(self, tmp_path: Path):
        assert find_settings_file(tmp_path) is None


class TestResolveOutputDirectory:
    def test_from_settings(self):
        settings = VersionSettings(output_directory=Path("/explicit"))
        assert resolve_output_directory(settings, environ={}) == Path("/explicit")

    def test_from_environment(self):
        assert resolve_output_directory(VersionSettings(), {"OUT_DIR": "/env"}) == Path("/env")

    def test_missing(self):
        with pytest.raises(MissingEnvVarError, match="OUT_DIR"):
            resolve_output_directory(VersionSettings(), environ={})

    def test_missing_custom_variable(self):
        with pytest.raises(MissingEnvVarError, match="GEN_DIR"):
            resolve_output_directory(VersionSettings(out_dir_var="GEN_DIR"), environ={})
