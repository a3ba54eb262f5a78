"""
Error types — everything that can stop a version file from being written.

Describing the checkout never raises (see ``adapters.vcs.git``); these
cover configuration and filesystem failures, which the build must see.
"""

from __future__ import annotations

from pathlib import Path


class BuildVersionError(Exception):
    """Base class for all build-version failures."""


class ConfigError(BuildVersionError):
    """Raised when settings are invalid or the settings file can't be read."""


class MissingEnvVarError(BuildVersionError):
    """Raised when the output-directory environment variable is not set."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Environment variable {name} is not set")


class VersionIOError(BuildVersionError):
    """Raised when reading, creating or writing the version file fails.

    Always chained (``raise ... from e``) to the underlying ``OSError``.
    """

    def __init__(self, operation: str, path: Path, error: OSError):
        self.operation = operation
        self.path = path
        self.error = error
        reason = error.strerror or str(error)
        super().__init__(f"Cannot {operation} {path}: {reason}")


class ContentEncodingError(BuildVersionError):
    """Raised when rendered content can't be encoded as UTF-8.

    Only reachable through a custom describer; git output is always
    decoded strictly before it gets here.
    """

    def __init__(self, path: Path, error: UnicodeEncodeError):
        self.path = path
        self.error = error
        super().__init__(f"Cannot encode content for {path}: {error.reason}")
