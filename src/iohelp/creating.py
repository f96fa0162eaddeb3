"""Create directories and files, creating missing parents on the way."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from iohelp.existing import directory_exists, file_exists

logger = logging.getLogger(__name__)


def create_directory(path: Path | str) -> Path:
    """
    Create the directory (and parents) and return its path.

    If path names an existing file, the file's parent directory is created instead.
    Safe to call repeatedly on the same path.
    """
    path = Path(path)
    if file_exists(path):
        path = path.parent
    path.mkdir(parents=True, exist_ok=True)
    logger.debug("Ensured directory %s", path)
    return path


def _ensure_parent(path: Path) -> None:
    if not directory_exists(path.parent):
        create_directory(path.parent)


def create_file(path: Path | str) -> BinaryIO:
    """Create (or truncate) the file, creating its directory if needed. Returns a read-write handle."""
    path = Path(path)
    _ensure_parent(path)
    logger.debug("Creating file %s", path)
    return open(path, "w+b")


def create_file_without_stream(path: Path | str) -> None:
    """Same as create_file, but the handle is closed right away."""
    with create_file(path):
        pass
