"""
Settings loader — build-version.yml plus the build environment.

Settings come from an optional YAML file, validated by the
``VersionSettings`` Pydantic model. The output directory is then filled
in from the environment variable the build tool sets (``OUT_DIR`` by
default) unless the file pins it.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from build_version.core.errors import ConfigError, MissingEnvVarError
from build_version.core.models.version import VersionSettings

logger = logging.getLogger(__name__)

# Default settings filename
SETTINGS_FILE = "build-version.yml"

# Overrides the language from the settings file
LANGUAGE_ENV_VAR = "BUILD_VERSION_LANGUAGE"


def find_settings_file(start_dir: Path | None = None) -> Path | None:
    """Search for build-version.yml starting from the given directory, walking up.

    Args:
        start_dir: Directory to start searching from (default: cwd).

    Returns:
        Path to build-version.yml, or None if not found.
    """
    current = (start_dir or Path.cwd()).resolve()

    for _ in range(20):  # safety limit
        candidate = current / SETTINGS_FILE
        if candidate.is_file():
            return candidate
        parent = current.parent
        if parent == current:
            break  # filesystem root
        current = parent

    return None


def load_settings(
    path: Path | None = None,
    environ: Mapping[str, str] | None = None,
) -> VersionSettings:
    """Load settings and resolve the output directory from the environment.

    Args:
        path: Explicit settings file. If None, searches upward; no file
              found means defaults.
        environ: Environment to read (default: ``os.environ``).

    Returns:
        VersionSettings. ``output_directory`` stays None when neither the
        file nor the environment provides one; ``resolve_output_directory``
        turns that into an error.

    Raises:
        ConfigError: If the file is unreadable or invalid.
    """
    env = os.environ if environ is None else environ

    if path is None:
        path = find_settings_file()

    data: dict = {}
    if path is not None:
        data = _read_settings_file(path)

    language = env.get(LANGUAGE_ENV_VAR)
    if language:
        data["language"] = language

    try:
        settings = VersionSettings.model_validate(data)
    except ValidationError as e:
        source = path if path is not None else "environment"
        raise ConfigError(f"Invalid settings ({source}): {e}") from e

    if settings.output_directory is None:
        out_dir = env.get(settings.out_dir_var)
        if out_dir:
            settings = settings.model_copy(update={"output_directory": Path(out_dir)})

    logger.debug(
        "Settings: language=%s output_directory=%s",
        settings.language,
        settings.output_directory,
    )
    return settings


def resolve_output_directory(
    settings: VersionSettings,
    environ: Mapping[str, str] | None = None,
) -> Path:
    """The directory to write into, from settings or the environment.

    Raises:
        MissingEnvVarError: If neither provides one.
    """
    if settings.output_directory is not None:
        return settings.output_directory

    env = os.environ if environ is None else environ
    out_dir = env.get(settings.out_dir_var)
    if not out_dir:
        raise MissingEnvVarError(settings.out_dir_var)
    return Path(out_dir)


def _read_settings_file(path: Path) -> dict:
    if not path.is_file():
        raise ConfigError(f"Settings file not found: {path}")

    logger.debug("Loading settings from %s", path)

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Cannot read {path}: {e}") from e

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a YAML mapping in {path}, got {type(data).__name__}")

    # May be wrapped under a "build_version" key or be flat
    if "build_version" in data:
        data = data["build_version"] or {}
        if not isinstance(data, dict):
            raise ConfigError(f"Expected a mapping under 'build_version' in {path}")

    return dict(data)
