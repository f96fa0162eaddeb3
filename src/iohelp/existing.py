"""Existence checks for files and directories."""

from __future__ import annotations

from pathlib import Path


def file_exists(path: Path | str) -> bool:
    """
    True only if path is an existing regular file.

    Missing parent directories, directories, and paths the OS rejects all give False;
    this never raises.
    """
    try:
        return Path(path).is_file()
    except (OSError, ValueError):
        return False


def directory_exists(path: Path | str) -> bool:
    """True if path is an existing directory. A path to an existing file checks the file's parent."""
    path = Path(path)
    if file_exists(path):
        path = path.parent
    try:
        return path.is_dir()
    except (OSError, ValueError):
        return False
