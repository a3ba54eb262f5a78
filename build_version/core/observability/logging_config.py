"""
Logging configuration — stderr output for a build hook.

Called once by the CLI. Build tools echo our stderr into their own
log, so console lines stay short and prefixed; full detail goes to the
optional log file.

Levels are resolved in precedence order:
    CLI flag  >  BUILD_VERSION_LOG_LEVEL env var  >  WARNING (default)

Optional file output via BUILD_VERSION_LOG_FILE / BUILD_VERSION_LOG_FILE_LEVEL.
"""

from __future__ import annotations

import logging
import sys

# Console: one prefixed line per message
_FMT_CONSOLE = "build-version: %(message)s"

# Console at DEBUG: say which step (git, filesystem, sync) is talking
_FMT_CONSOLE_DEBUG = "build-version: [%(name)s] %(levelname)s %(message)s"

# File output: timestamped, for CI artifacts
_FMT_FILE = "%(asctime)s %(levelname)-5s %(name)s:%(lineno)d — %(message)s"
_DATEFMT_FILE = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Route log records to stderr, and to ``log_file`` when given.

    Args:
        level: Console level name (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to a log file.
        log_file_level: Level for the log file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    fmt = _FMT_CONSOLE_DEBUG if console_level <= logging.DEBUG else _FMT_CONSOLE

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    console.setFormatter(logging.Formatter(fmt))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(console)
    root_level = console_level

    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        root_level = min(root_level, file_level)

        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FMT_FILE, datefmt=_DATEFMT_FILE))
        root.addHandler(fh)

    root.setLevel(root_level)

    logging.raiseExceptions = False


def _parse_level(level: str | None) -> int:
    """Level name to its numeric constant; unknown names mean WARNING."""
    if not level:
        return logging.WARNING
    numeric = getattr(logging, level.upper(), None)
    if not isinstance(numeric, int):
        return logging.WARNING
    return numeric
