"""Open files, creating them (and their directories) when missing."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import BinaryIO

from iohelp.creating import create_directory, create_file
from iohelp.existing import directory_exists, file_exists

logger = logging.getLogger(__name__)


def open_or_create(path: Path | str) -> BinaryIO:
    """
    Open the file read-write, or create it if it does not exist.

    Missing parent directories are created first. Always returns a handle; the caller owns it.
    OS errors such as PermissionError propagate.
    """
    path = Path(path)
    if not directory_exists(path.parent):
        create_directory(path.parent)
    handle = try_open(path)
    if handle is None:
        handle = create_file(path)
    return handle


def try_open(path: Path | str) -> BinaryIO | None:
    """
    Open an existing file read-write at offset 0 without truncating it.

    Returns None when the file does not exist.
    """
    path = Path(path)
    if not file_exists(path):
        logger.debug("Not opening %s: file does not exist", path)
        return None
    return open(path, "r+b")
