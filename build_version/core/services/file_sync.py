"""
File sync — write a generated file only when its content changed.

Build systems key rebuilds off modification times, so an unchanged
version file must not be touched.
"""

from __future__ import annotations

import logging
from pathlib import Path

from build_version.adapters.shell.filesystem import (
    ensure_directory,
    read_existing,
    write_atomic,
)
from build_version.core.errors import ContentEncodingError

logger = logging.getLogger(__name__)


def is_fresh(existing: bytes | None, new_content: str) -> bool:
    """Whether ``existing`` already holds exactly ``new_content``.

    ``existing`` is None when there is no file yet, which is never fresh.
    """
    if existing is None:
        return False
    return existing == new_content.encode("utf-8")


def sync_file(path: Path, content: str) -> bool:
    """Make ``path`` contain ``content``, writing only if needed.

    Returns:
        True if the file was written, False if it was already fresh.

    Raises:
        ContentEncodingError: If ``content`` is not encodable as UTF-8.
        VersionIOError: On any filesystem failure.
    """
    try:
        data = content.encode("utf-8")
    except UnicodeEncodeError as e:
        raise ContentEncodingError(path, e) from e

    ensure_directory(path.parent)

    if is_fresh(read_existing(path), content):
        logger.info("%s is up to date", path)
        return False

    write_atomic(path, data)
    logger.info("Updated %s", path)
    return True
