"""Well-known OS directories and the running program's location.

``Info.detect()`` resolves everything once; build one instance at start-up and pass it
to whatever needs it. Nothing is computed at import time.

Resolution per platform:

- Windows: folders under ``%USERPROFILE%``, the Windows directory from ``%SystemRoot%``
  (or ``%WINDIR%``), and the Administrative Tools start-menu folder under ``%APPDATA%``.
- macOS: ``~/Desktop``, ``~/Documents``, ``~/Pictures``, ``~/Music``, ``~/Movies``.
- Other POSIX: XDG user directories from ``user-dirs.dirs``, falling back to ``~/Desktop`` etc.

A folder that does not exist as a directory is reported as None.
"""

from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping

from iohelp.existing import file_exists
from iohelp.reading import get_file_as_lines

logger = logging.getLogger(__name__)

USER_DIRS_FILENAME = "user-dirs.dirs"

# Folder name under the home directory when no platform setting overrides it
_HOME_FOLDERS = {
    "desktop": "Desktop",
    "documents": "Documents",
    "pictures": "Pictures",
    "music": "Music",
    "videos": "Videos",
}
_MACOS_HOME_FOLDERS = {**_HOME_FOLDERS, "videos": "Movies"}
_XDG_KEYS = {
    "desktop": "XDG_DESKTOP_DIR",
    "documents": "XDG_DOCUMENTS_DIR",
    "pictures": "XDG_PICTURES_DIR",
    "music": "XDG_MUSIC_DIR",
    "videos": "XDG_VIDEOS_DIR",
}
_ADMIN_TOOLS_PARTS = ("Microsoft", "Windows", "Start Menu", "Programs", "Administrative Tools")


@dataclass(frozen=True)
class Info:
    """Resolved special folders plus the running program's name and directory."""

    desktop: Path | None
    windows: Path | None
    admin_tools: Path | None
    pictures: Path | None
    music: Path | None
    documents: Path | None
    videos: Path | None
    program_name: str
    program_directory: Path

    @classmethod
    def detect(
        cls,
        environ: Mapping[str, str] | None = None,
        platform: str | None = None,
        home: Path | str | None = None,
        argv0: str | None = None,
    ) -> Info:
        """
        Resolve folders for the current process.

        Every argument defaults to the live value (os.environ, sys.platform, the user's
        home directory, sys.argv[0]); pass them explicitly to resolve for another setup.
        """
        environ = os.environ if environ is None else environ
        platform = sys.platform if platform is None else platform
        home_dir = Path(home) if home is not None else _home_from(environ, platform)

        windows: Path | None = None
        admin_tools: Path | None = None
        if platform.startswith("win"):
            folders = {key: home_dir / name for key, name in _HOME_FOLDERS.items()}
            system_root = environ.get("SystemRoot") or environ.get("WINDIR")
            if system_root:
                windows = _existing_dir(Path(system_root))
            appdata = environ.get("APPDATA")
            if appdata:
                admin_tools = _existing_dir(Path(appdata).joinpath(*_ADMIN_TOOLS_PARTS))
        elif platform == "darwin":
            folders = {key: home_dir / name for key, name in _MACOS_HOME_FOLDERS.items()}
        else:
            folders = _xdg_folders(environ, home_dir)

        program_name, program_directory = _program_location(argv0)
        info = cls(
            desktop=_existing_dir(folders["desktop"]),
            windows=windows,
            admin_tools=admin_tools,
            pictures=_existing_dir(folders["pictures"]),
            music=_existing_dir(folders["music"]),
            documents=_existing_dir(folders["documents"]),
            videos=_existing_dir(folders["videos"]),
            program_name=program_name,
            program_directory=program_directory,
        )
        logger.debug("Detected folders for platform %s: %s", platform, info)
        return info


def _home_from(environ: Mapping[str, str], platform: str) -> Path:
    key = "USERPROFILE" if platform.startswith("win") else "HOME"
    value = environ.get(key)
    return Path(value) if value else Path.home()


def _existing_dir(path: Path) -> Path | None:
    try:
        return path if path.is_dir() else None
    except (OSError, ValueError):
        return None


def parse_user_dirs(lines: list[str], home: Path) -> dict[str, Path]:
    """
    Parse user-dirs.dirs lines (XDG_DESKTOP_DIR="$HOME/Desktop") into {XDG key: path}.

    "$HOME" is expanded; relative values are taken relative to home.
    """
    result: dict[str, Path] = {}
    for line in lines:
        s = line.strip()
        if not s or s.startswith("#") or "=" not in s:
            continue
        key, _, value = s.partition("=")
        value = value.strip().strip('"')
        if not value:
            continue
        value = value.replace("${HOME}", str(home)).replace("$HOME", str(home))
        path = Path(value)
        result[key.strip()] = path if path.is_absolute() else home / path
    return result


def _xdg_folders(environ: Mapping[str, str], home: Path) -> dict[str, Path]:
    config_home = environ.get("XDG_CONFIG_HOME") or str(home / ".config")
    user_dirs_file = Path(config_home) / USER_DIRS_FILENAME
    configured: dict[str, Path] = {}
    if file_exists(user_dirs_file):
        configured = parse_user_dirs(get_file_as_lines(user_dirs_file), home)
    folders: dict[str, Path] = {}
    for key, xdg_key in _XDG_KEYS.items():
        folders[key] = configured.get(xdg_key) or home / _HOME_FOLDERS[key]
    return folders


def _program_location(argv0: str | None) -> tuple[str, Path]:
    """Friendly name and directory of the running program (script, else interpreter)."""
    if argv0 is None:
        argv0 = sys.argv[0] if sys.argv and sys.argv[0] else sys.executable
    program = Path(argv0)
    if not program.name:
        program = Path(sys.executable)
    return program.name, program.resolve().parent
