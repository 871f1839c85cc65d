#!/usr/bin/env python3
# -*- coding: utf-8 -*-

"""Handlers for the ``tile_demo`` logger namespace.

Modules only call ``logging.getLogger("tile_demo.<area>")``; the runtime entry
point is the single place that installs handlers.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import List

LOGGER_NAME = "tile_demo"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%H:%M:%S"


def _build_handlers(log_file: str | Path | None) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="w", encoding="utf-8"))
    return handlers


def setup_logging(level: int = logging.INFO, log_file: str | Path | None = None) -> logging.Logger:
    """Send the demo's records to stdout and, optionally, a fresh log file.

    Calling it again closes and replaces the handlers of the previous call.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for old in list(logger.handlers):
        logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_file):
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    logger.setLevel(level)

    logger.debug("Logging to stdout%s", f" and {log_file}" if log_file else "")
    return logger


def parse_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        raise ValueError(f"unknown log level: {name!r}")
    return level
