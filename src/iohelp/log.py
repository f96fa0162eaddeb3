"""Opt-in console/file output for the iohelp loggers.

Modules log through ``logging.getLogger(__name__)`` and emit nothing unless the
application configures logging, either its own way or with ``enable_logging``.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOGGER_NAME = "iohelp"
LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def enable_logging(level: int | str = logging.INFO, log_file: Path | str | None = None) -> logging.Logger:
    """
    Send iohelp log records to stderr (and log_file, when given) at the given level.

    Repeated calls only change the level; handlers are attached on the first call.
    An unknown level name raises ValueError; a log_file that cannot be opened raises OSError.
    """
    if isinstance(level, str):
        value = logging.getLevelName(level.upper())
        if not isinstance(value, int):
            raise ValueError(f"Unknown log level: {level}")
        level = value
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    if not any(not isinstance(h, logging.NullHandler) for h in logger.handlers):
        formatter = logging.Formatter(LOG_FORMAT)
        handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
        if log_file is not None:
            handlers.append(logging.FileHandler(log_file, encoding="utf-8"))
        for handler in handlers:
            handler.setFormatter(formatter)
            logger.addHandler(handler)
    return logger
