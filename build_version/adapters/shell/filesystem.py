"""
Filesystem adapter — the three file operations a version write needs.

All ``OSError``s are re-raised as ``VersionIOError`` naming the path, so
a failed build says which file or directory was the problem.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

from build_version.core.errors import VersionIOError

logger = logging.getLogger(__name__)


def ensure_directory(path: Path) -> None:
    """Create ``path`` and any missing parents. No-op if it exists."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise VersionIOError("create directory", path, e) from e


def read_existing(path: Path) -> bytes | None:
    """Return the file's bytes, or None if there is no such file.

    A file that exists but can't be read is an error, not "absent".
    """
    try:
        return path.read_bytes()
    except FileNotFoundError:
        return None
    except OSError as e:
        raise VersionIOError("read", path, e) from e


def write_atomic(path: Path, data: bytes) -> None:
    """Replace ``path`` with ``data`` (atomic write).

    Data goes to a temp file in the same directory which is then
    renamed over the target, so readers see either the old file or the
    complete new one. The target keeps its permissions; a new file gets
    the umask default, as a plain ``open()`` would.
    """
    try:
        mode = _target_mode(path)
        fd, tmp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=f".{path.name}.",
            suffix=".tmp",
        )
    except OSError as e:
        raise VersionIOError("create", path, e) from e

    tmp = Path(tmp_path)
    try:
        with os.fdopen(fd, "wb") as f:
            f.write(data)
            f.flush()
        os.chmod(tmp, mode)
        os.replace(tmp, path)
    except OSError as e:
        tmp.unlink(missing_ok=True)
        raise VersionIOError("write", path, e) from e

    logger.debug("Wrote %d bytes to %s (mode %o)", len(data), path, mode)


def _target_mode(path: Path) -> int:
    # mkstemp always creates 0600
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask
