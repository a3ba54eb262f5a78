"""
Write version use case — describe, render, sync.

This is what a build hook calls before compilation:

    from build_version import write_version_file
    write_version_file()

The consuming project then includes ``$OUT_DIR/version.rs`` (or the
``.py`` / ``.h`` variant) to get ``GIT_BUILD_VERSION``.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from build_version.adapters.shell.filesystem import ensure_directory
from build_version.adapters.vcs.git import Describer, git_describe
from build_version.core.config.loader import resolve_output_directory
from build_version.core.models.version import GeneratedFile, VersionSettings, WriteResult
from build_version.core.services.file_sync import sync_file
from build_version.core.services.render import (
    CONSTANT_NAME,
    render_version,
    version_file_name,
)

logger = logging.getLogger(__name__)


def describe_version(describe: Describer | None = None) -> str | None:
    """Run the describer (git by default). Never raises."""
    return (describe or git_describe)()


def generate_version_file(
    settings: VersionSettings,
    version: str | None,
    environ: Mapping[str, str] | None = None,
) -> GeneratedFile:
    """Render the version file for ``version`` without touching disk."""
    out_dir = resolve_output_directory(settings, environ)
    return GeneratedFile(
        path=out_dir / version_file_name(settings.language),
        content=render_version(version, settings.language),
        reason=f"git describe: {version}" if version else "no git version available",
    )


def write_version_file(
    settings: VersionSettings | None = None,
    describe: Describer | None = None,
    environ: Mapping[str, str] | None = None,
) -> WriteResult:
    """Write ``version.<ext>`` into the output directory if it changed.

    Args:
        settings: Target directory and language. Default: directory from
                  the environment, Rust output.
        describe: Descriptor source (default: ``git describe``).
        environ: Environment used when ``settings`` has no directory.

    Returns:
        WriteResult. A missing descriptor is not an error; the file then
        holds the "no version" form of the constant.

    Raises:
        MissingEnvVarError: If no output directory is configured. Nothing
            is written in that case.
        VersionIOError: On any filesystem failure.
    """
    settings = settings or VersionSettings()

    out_dir = resolve_output_directory(settings, environ)
    ensure_directory(out_dir)

    version = describe_version(describe)
    if version is None:
        logger.warning("No git version available; writing %s = None", CONSTANT_NAME)
    else:
        logger.info("Git version: %s", version)

    generated = generate_version_file(
        settings.model_copy(update={"output_directory": out_dir}),
        version,
    )
    written = sync_file(generated.path, generated.content)

    return WriteResult(
        path=generated.path,
        language=settings.language,
        version=version,
        written=written,
    )
