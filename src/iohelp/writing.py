"""Write, overwrite, and append text to existing files."""

from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import TextIO

from iohelp.config import DEFAULT_ENCODING
from iohelp.errors import MissingFileError
from iohelp.existing import file_exists
from iohelp.opening import try_open

logger = logging.getLogger(__name__)


def get_writer(
    path: Path | str,
    append: bool | None = None,
    encoding: str = DEFAULT_ENCODING,
) -> TextIO | None:
    """
    Text writer for an existing file, or None if the file does not exist.

    append=None writes over the file from offset 0 without truncating it, so bytes past
    the written text are kept. append=False truncates first; append=True writes at the end.
    Text is written as-is (no newline translation).
    """
    if append is None:
        handle = try_open(path)
        if handle is None:
            return None
        return io.TextIOWrapper(handle, encoding=encoding, newline="")
    path = Path(path)
    if not file_exists(path):
        logger.debug("No writer for %s: file does not exist", path)
        return None
    mode = "a" if append else "w"
    return open(path, mode, encoding=encoding, newline="")


def _write(path: Path | str, text: str, append: bool, encoding: str) -> None:
    writer = get_writer(path, append=append, encoding=encoding)
    if writer is None:
        raise MissingFileError(path)
    with writer:
        writer.write(text)


def overwrite_file(path: Path | str, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Replace the file's contents with text. Raises MissingFileError if the file does not exist."""
    _write(path, text, append=False, encoding=encoding)


def append_to_file(path: Path | str, text: str, encoding: str = DEFAULT_ENCODING) -> None:
    """Append text to the file. Raises MissingFileError if the file does not exist."""
    _write(path, text, append=True, encoding=encoding)
