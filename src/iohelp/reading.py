"""Read files as line lists or whole strings."""

from __future__ import annotations

import io
from pathlib import Path
from typing import TextIO

from iohelp.config import DEFAULT_READ_ENCODING
from iohelp.errors import MissingFileError
from iohelp.opening import try_open


def get_reader(path: Path | str, encoding: str = DEFAULT_READ_ENCODING) -> TextIO | None:
    """
    Text reader for the file, or None if the file does not exist.

    Universal newlines; with the default encoding a UTF-8 byte-order mark is dropped.
    """
    handle = try_open(path)
    if handle is None:
        return None
    return io.TextIOWrapper(handle, encoding=encoding)


def get_file_as_lines(path: Path | str, encoding: str = DEFAULT_READ_ENCODING) -> list[str]:
    """
    Return every line of the file in order, without line terminators.

    \\n, \\r\\n and \\r all end a line. Raises MissingFileError if the file does not exist.
    """
    reader = get_reader(path, encoding=encoding)
    if reader is None:
        raise MissingFileError(path)
    lines: list[str] = []
    with reader:
        for line in reader:
            lines.append(line[:-1] if line.endswith("\n") else line)
    return lines


def get_file_as_string(path: Path | str, encoding: str = DEFAULT_READ_ENCODING) -> str:
    """
    Return the file's lines glued together with no separator.

    Line breaks are dropped: lines ["ab", "cd"] give "abcd". Use
    get_file_as_string_formatted to keep them.
    """
    return "".join(get_file_as_lines(path, encoding=encoding))


def get_file_as_string_formatted(path: Path | str, encoding: str = DEFAULT_READ_ENCODING) -> str:
    """Return the file's lines joined by a single "\\n" (no trailing newline)."""
    return "\n".join(get_file_as_lines(path, encoding=encoding))
