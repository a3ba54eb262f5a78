"""Domain models for build-version."""

from build_version.core.models.version import (
    DEFAULT_LANGUAGE,
    DEFAULT_OUT_DIR_VAR,
    GeneratedFile,
    Language,
    VersionSettings,
    WriteResult,
)

__all__ = [
    "DEFAULT_LANGUAGE",
    "DEFAULT_OUT_DIR_VAR",
    "GeneratedFile",
    "Language",
    "VersionSettings",
    "WriteResult",
]
