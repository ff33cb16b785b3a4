"""Logging for the arraystore namespace.

All package loggers hang off the `arraystore` logger, which owns a single
stream handler and does not propagate to the root logger. The level comes from
`STORE_OPTIONS` (ARRAYSTORE_LOG_LEVEL, raised by the CLI's `-v` flags) unless a
caller passes one explicitly.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TextIO

from arraystore.config import STORE_OPTIONS, normalize_level

__all__ = ["configure_logger", "get_logger", "set_module_level"]

ROOT_NAME = "arraystore"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# ANSI colour per level, applied to the whole line
LEVEL_COLORS = {
    logging.DEBUG: "36",
    logging.INFO: "32",
    logging.WARNING: "33",
    logging.ERROR: "31",
    logging.CRITICAL: "35",
}

_handler: logging.Handler | None = None


class _LevelColorFormatter(logging.Formatter):
    def __init__(self, use_color: bool) -> None:
        super().__init__(LOG_FORMAT, DATE_FORMAT)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        line = super().format(record)
        code = LEVEL_COLORS.get(record.levelno) if self.use_color else None
        return f"\033[{code}m{line}\033[0m" if code else line


def _wants_color(stream: TextIO) -> bool:
    isatty = getattr(stream, "isatty", None)
    return bool(isatty and isatty()) and os.name != "nt"


def configure_logger(
    *,
    level: int | str | None = None,
    stream: TextIO | None = None,
    color: bool | None = None,
    force: bool = False,
) -> None:
    """Attach the arraystore handler.

    Does nothing when already configured unless `force` is set. Logs go to
    stderr so that CLI output on stdout stays clean. Colour defaults to on for
    terminals.
    """
    global _handler
    if _handler is not None and not force:
        return

    root = logging.getLogger(ROOT_NAME)
    if _handler is not None:
        root.removeHandler(_handler)

    target = stream or sys.stderr
    _handler = logging.StreamHandler(target)
    _handler.setFormatter(
        _LevelColorFormatter(_wants_color(target) if color is None else color)
    )

    root.addHandler(_handler)
    root.setLevel(STORE_OPTIONS.effective_log_level if level is None else normalize_level(level))
    root.propagate = False


def get_logger(name: str | None = None) -> logging.Logger:
    """Return `arraystore` or `arraystore.<name>`, configuring on first use."""
    configure_logger()
    return logging.getLogger(f"{ROOT_NAME}.{name}" if name else ROOT_NAME)


def set_module_level(name: str | None, level: int | str) -> None:
    get_logger(name).setLevel(normalize_level(level))
