"""Logging setup for the CLI and the threaded runner."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOG_FORMAT = "%(asctime)s [%(levelname)-5s] %(name)-25s | %(message)s"

# Modules that log once per actor per tick at DEBUG
TICK_DETAIL_LOGGERS = ("timejump.actions", "timejump.ai")


def setup_logging(
    level: str = "INFO",
    stream: TextIO | None = None,
    tick_detail: bool = True,
) -> logging.Handler:
    """Route all timejump logs to *stream* (stderr by default).

    With ``tick_detail=False`` the per-tick combat and AI chatter stays at
    INFO even when *level* is DEBUG. Returns the installed handler.
    """
    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.INFO

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(numeric_level)

    detail_level = logging.NOTSET if tick_detail else max(numeric_level, logging.INFO)
    for name in TICK_DETAIL_LOGGERS:
        logging.getLogger(name).setLevel(detail_level)
    return handler
