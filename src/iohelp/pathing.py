"""Path decomposition and temp-path helpers."""

from __future__ import annotations

import os
import secrets
import string
import tempfile
from pathlib import Path

from iohelp.existing import directory_exists, file_exists

_RANDOM_ALPHABET = string.ascii_lowercase + string.digits


def parent_directory(path: Path | str) -> Path:
    """The directory containing the file or directory. Pure: the path need not exist."""
    return Path(path).parent


def file_name(path: Path | str) -> str | None:
    """File name including extension, or None if the file does not exist."""
    if not file_exists(path):
        return None
    return Path(path).name


def extension(path: Path | str) -> str | None:
    """Extension including the dot (".txt"; "" if none), or None if the file does not exist."""
    if not file_exists(path):
        return None
    return Path(path).suffix


def file_name_without_extension(path: Path | str) -> str | None:
    """File name minus its last extension, or None if the file does not exist."""
    if not file_exists(path):
        return None
    return Path(path).stem


def absolute_path(relative_path: Path | str) -> Path | None:
    """Absolute, normalized path of an existing file, or None if the file does not exist."""
    if not file_exists(relative_path):
        return None
    return Path(relative_path).resolve()


def path_root(path: Path | str) -> str | None:
    """
    Root of the path ("/" on POSIX, e.g. "C:\\\\" on Windows, "" for a relative path).

    Returns None if neither the path nor its containing directory exists.
    """
    path = Path(path)
    if not (directory_exists(path) or directory_exists(path.parent)):
        return None
    return path.anchor


def random_path_segment() -> str:
    """Random 8.3-style file or directory name, e.g. "k3j9x0qa.b7m". Not checked for collisions."""
    stem = "".join(secrets.choice(_RANDOM_ALPHABET) for _ in range(8))
    ext = "".join(secrets.choice(_RANDOM_ALPHABET) for _ in range(3))
    return f"{stem}.{ext}"


def new_temporary_file() -> Path:
    """Create an empty tmp*.tmp file in the temp directory and return its path."""
    fd, name = tempfile.mkstemp(prefix="tmp", suffix=".tmp")
    os.close(fd)
    return Path(name)


def temporary_directory_path() -> Path:
    """The user's temp directory."""
    return Path(tempfile.gettempdir())
