"""Logging configuration for the todoq CLI.

Library modules only create loggers with ``logging.getLogger(__name__)``;
handlers are attached here, once, by the CLI. Everything goes to stderr (and
optionally a file) so stdout carries nothing but query results.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

TRACE_LOGGER = "todoq.models"


def setup_logging(
    *,
    level: str | int = logging.WARNING,
    trace: bool = False,
    log_file: str | Path | None = None,
) -> None:
    """Configure the ``todoq`` logger tree.

    Args:
        level: Level for the ``todoq`` loggers.
        trace: Show DEBUG records from the task store (every push, done
            and search).
        log_file: Also write all records to this file.
    """
    root = logging.getLogger("todoq")
    root.setLevel(logging.DEBUG)

    # Remove any pre-existing handlers to avoid duplicates.
    for h in list(root.handlers):
        root.removeHandler(h)

    fmt = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    ch = logging.StreamHandler(sys.stderr)
    ch.setLevel(level)
    ch.setFormatter(fmt)
    root.addHandler(ch)

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(str(log_file), encoding="utf-8")
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(fmt)
        root.addHandler(fh)

    if trace:
        ch.setLevel(logging.DEBUG)
        ch.addFilter(_TraceFilter(level))


class _TraceFilter(logging.Filter):
    """Let store DEBUG records through; hold everything else to ``level``."""

    def __init__(self, level: str | int) -> None:
        super().__init__()
        self.levelno = logging.getLevelName(level) if isinstance(level, str) else level

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(TRACE_LOGGER):
            return True
        return record.levelno >= self.levelno
