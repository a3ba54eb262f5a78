"""
Git adapter — describe the current checkout.

Runs the single read-only query ``git describe --tags --always`` and
returns its trimmed output. Uses the git CLI, never a library binding.

Every failure (git missing, not a repository, non-zero exit, output that
is not UTF-8, empty output) collapses to ``None``. A missing version is
not worth failing a build over.
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

# Zero-argument callable returning a descriptor or None.
Describer = Callable[[], str | None]

DESCRIBE_ARGS = ("describe", "--tags", "--always")


def git_describe(cwd: Path | str | None = None) -> str | None:
    """Describe the checkout in ``cwd`` (default: current directory).

    Returns:
        The most recent reachable tag (with distance/hash suffix when HEAD
        is not exactly on it), or the abbreviated commit hash when no tag
        is reachable. None when no descriptor can be obtained.
    """
    try:
        result = subprocess.run(
            ["git", *DESCRIBE_ARGS],
            cwd=cwd,
            capture_output=True,
        )
    except OSError as e:
        logger.debug("git describe could not run: %s", e)
        return None

    if result.returncode != 0:
        logger.debug(
            "git describe exited %d: %s",
            result.returncode,
            result.stderr.decode("utf-8", errors="replace").strip(),
        )
        return None

    try:
        described = result.stdout.decode("utf-8").strip()
    except UnicodeDecodeError as e:
        logger.debug("git describe output is not UTF-8: %s", e)
        return None

    if not described:
        logger.debug("git describe printed nothing")
        return None

    return described


class GitDescriber:
    """Callable describer bound to a working directory.

    Instances satisfy ``Describer`` and can be passed wherever a fake
    describer would be used in tests.
    """

    def __init__(self, cwd: Path | str | None = None):
        self._cwd = cwd

    @property
    def name(self) -> str:
        return "git"

    def is_available(self) -> bool:
        return shutil.which("git") is not None

    def __call__(self) -> str | None:
        return git_describe(self._cwd)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} cwd={self._cwd!r}>"
