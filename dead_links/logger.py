# === FILE: dead_links/logger.py ===
"""Logging for dead_links.

Every module logs through the ``DeadLinks`` logger. Records go to stderr,
because stdout carries the report table, and optionally to a log file that
rotates once it grows past a few megabytes.
"""
from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Final, List, Union

LOGGER_NAME: Final[str] = "DeadLinks"
DEFAULT_FORMAT: Final[str] = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_FILE_MAX_BYTES: Final[int] = 5 * 1024 * 1024
LOG_FILE_BACKUPS: Final[int] = 3


def get_logger() -> logging.Logger:
    return logging.getLogger(LOGGER_NAME)


def init_logging(
    level: Union[int, str] = "WARNING",
    log_file: Union[str, Path, None] = None,
    log_format: str = DEFAULT_FORMAT,
) -> logging.Logger:
    """Point the crawler's logger at stderr (and *log_file*, when given).

    Handlers left by an earlier call are closed and replaced, so the CLI can
    call this once per run with the user's level and file.
    """
    handlers: List[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file is not None:
        handlers.append(
            RotatingFileHandler(
                str(log_file),
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )

    crawl_logger = get_logger()
    for old in list(crawl_logger.handlers):
        crawl_logger.removeHandler(old)
        old.close()

    formatter = logging.Formatter(log_format)
    for handler in handlers:
        handler.setFormatter(formatter)
        crawl_logger.addHandler(handler)
    crawl_logger.setLevel(level)
    crawl_logger.propagate = False
    return crawl_logger


logger: logging.Logger = init_logging()

__all__ = ["logger", "get_logger", "init_logging", "DEFAULT_FORMAT", "LOGGER_NAME"]
