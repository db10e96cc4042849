"""Centralized logging configuration for dlist.

Diagnostics always go to stderr (or a log file). Stdout is reserved for the
device path so ``$(dlist)`` stays clean.
"""

from __future__ import annotations

import contextlib
import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional, TextIO, Union

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATEFMT = "%Y-%m-%d %H:%M:%S"
_MAX_BYTES = 500 * 1024  # 500 KB
_BACKUP_COUNT = 2


def _coerce_level(level: Union[int, str]) -> int:
    if isinstance(level, str):
        name = level.upper()
        if not hasattr(logging, name):
            raise ValueError(f"Unknown log level '{level}'")
        return getattr(logging, name)
    return int(level)


def configure_logging(
    level: Union[int, str] = logging.WARNING,
    *,
    stream: Optional[TextIO] = None,
    log_file: Optional[Union[str, Path]] = None,
) -> None:
    """Replace the root handlers with a console handler and optional log file.

    Args:
        level: Desired logging level (int or name such as "info").
        stream: Console stream, defaults to stderr.
        log_file: Optional path for a rotating file handler.
    """

    numeric_level = _coerce_level(level)
    root = logging.getLogger()

    for handler in list(root.handlers):
        root.removeHandler(handler)
        with contextlib.suppress(Exception):
            handler.close()

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATEFMT)

    stream_handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    stream_handler.setLevel(numeric_level)
    stream_handler.setFormatter(formatter)
    root.addHandler(stream_handler)

    if log_file:
        log_path = Path(log_file).expanduser()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=_MAX_BYTES,
            backupCount=_BACKUP_COUNT,
            encoding="utf-8",
        )
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(formatter)
        root.addHandler(file_handler)

    root.setLevel(numeric_level)


__all__ = ["configure_logging", "LOG_FORMAT", "LOG_DATEFMT"]
