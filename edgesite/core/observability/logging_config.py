"""
Logging setup for the CLI.

edgesite runs inside someone else's build (npm scripts, Pages CI), so
console lines carry the level name up front: build runners and people
scrolling a log can spot ``WARNING:`` and ``ERROR:`` lines without
knowing anything about this tool. ``-v``/``--debug`` add the logger name
and timestamps. EDGESITE_LOG_FILE mirrors everything to a file.

Handlers installed here are tagged so that a second ``setup_logging()``
in the same process (tests, nested CliRunner calls) replaces them
instead of stacking, while handlers owned by the host stay put.
"""

from __future__ import annotations

import logging
import sys

_BUILD_FMT = "%(levelname)s: %(message)s"
_VERBOSE_FMT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
_FILE_FMT = "%(asctime)s %(levelname)-7s %(name)s:%(lineno)d %(message)s"

_TAG = "_edgesite_handler"


def setup_logging(
    level: str = "WARNING",
    log_file: str | None = None,
    log_file_level: str | None = None,
) -> None:
    """Route edgesite's log records to stderr (and optionally a file).

    Args:
        level: Console level name; unknown names mean WARNING.
        log_file: Path of a log file to append to.
        log_file_level: Level for the file; defaults to ``level``.
    """
    console_level = _parse_level(level)
    root = logging.getLogger()

    for handler in [h for h in root.handlers if getattr(h, _TAG, False)]:
        root.removeHandler(handler)
        handler.close()

    console = logging.StreamHandler(sys.stderr)
    console.setLevel(console_level)
    if console_level <= logging.INFO:
        console.setFormatter(logging.Formatter(_VERBOSE_FMT, datefmt="%H:%M:%S"))
    else:
        console.setFormatter(logging.Formatter(_BUILD_FMT))
    _install(root, console)

    lowest = console_level
    if log_file:
        file_level = _parse_level(log_file_level) if log_file_level else console_level
        lowest = min(lowest, file_level)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setLevel(file_level)
        fh.setFormatter(logging.Formatter(_FILE_FMT, datefmt="%Y-%m-%d %H:%M:%S"))
        _install(root, fh)

    root.setLevel(lowest)


def _install(root: logging.Logger, handler: logging.Handler) -> None:
    setattr(handler, _TAG, True)
    root.addHandler(handler)


def _parse_level(level: str | None) -> int:
    """Level name → numeric level, WARNING when missing or unknown."""
    numeric = getattr(logging, (level or "").upper(), None)
    return numeric if isinstance(numeric, int) else logging.WARNING
