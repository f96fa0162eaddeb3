"""Exception types raised by iohelp."""

from __future__ import annotations

import errno
import os


class MissingFileError(FileNotFoundError):
    """Raised when an operation requires a file that does not exist.

    Subclasses FileNotFoundError, so ``errno``, ``strerror`` and ``filename``
    are populated the same way as for a failed ``open()``.
    """

    def __init__(self, path: str | os.PathLike[str]) -> None:
        super().__init__(errno.ENOENT, "File does not exist", os.fspath(path))
