"""Build-time git version constant generator."""

__version__ = "0.1.0"

from build_version.core.errors import (  # noqa: E402
    BuildVersionError,
    ConfigError,
    ContentEncodingError,
    MissingEnvVarError,
    VersionIOError,
)
from build_version.core.use_cases.write_version import write_version_file  # noqa: E402

__all__ = [
    "BuildVersionError",
    "ConfigError",
    "ContentEncodingError",
    "MissingEnvVarError",
    "VersionIOError",
    "__version__",
    "write_version_file",
]
