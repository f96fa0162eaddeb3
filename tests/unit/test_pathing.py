"""Unit tests for pathing (path parts, roots, temp paths)."""

from __future__ import annotations

import re
from pathlib import Path

import pytest

from iohelp.pathing import (
    absolute_path,
    extension,
    file_name,
    file_name_without_extension,
    new_temporary_file,
    parent_directory,
    path_root,
    random_path_segment,
    temporary_directory_path,
)


@pytest.fixture
def archive(tmp_path: Path) -> Path:
    f = tmp_path / "report.tar.gz"
    f.write_text("x")
    return f


def test_parent_directory_is_pure(tmp_path: Path) -> None:
    """Works for paths that do not exist."""
    assert parent_directory(tmp_path / "no" / "file.txt") == tmp_path / "no"
    assert parent_directory("a/b/c.txt") == Path("a/b")


def test_name_parts_of_existing_file(archive: Path) -> None:
    assert file_name(archive) == "report.tar.gz"
    assert extension(archive) == ".gz"
    assert file_name_without_extension(archive) == "report.tar"


def test_extension_empty_when_none(tmp_path: Path) -> None:
    f = tmp_path / "Makefile"
    f.write_text("all:")
    assert extension(f) == ""
    assert file_name_without_extension(f) == "Makefile"


def test_name_parts_of_missing_file_are_none(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    assert file_name(missing) is None
    assert extension(missing) is None
    assert file_name_without_extension(missing) is None
    assert absolute_path(missing) is None


def test_absolute_path_from_relative(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "a.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    result = absolute_path(Path("sub") / ".." / "sub" / "a.txt")
    assert result == (tmp_path / "sub" / "a.txt").resolve()
    assert result.is_absolute()


# --- path_root ---


def test_path_root_missing_directory_returns_none(tmp_path: Path) -> None:
    assert path_root(tmp_path / "no" / "such" / "file.txt") is None


def test_path_root_existing_returns_anchor(archive: Path, tmp_path: Path) -> None:
    anchor = tmp_path.anchor
    assert anchor
    assert path_root(archive) == anchor
    assert path_root(tmp_path) == anchor
    assert path_root(tmp_path / "not-yet-created.txt") == anchor


def test_path_root_relative_is_empty(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    (tmp_path / "rel.txt").write_text("x")
    monkeypatch.chdir(tmp_path)
    assert path_root("rel.txt") == ""


# --- random and temporary paths ---


def test_random_path_segment_format() -> None:
    segment = random_path_segment()
    assert re.fullmatch(r"[a-z0-9]{8}\.[a-z0-9]{3}", segment)


def test_random_path_segment_varies() -> None:
    assert len({random_path_segment() for _ in range(20)}) > 1


def test_new_temporary_file_is_created_empty() -> None:
    path = new_temporary_file()
    try:
        assert path.is_file()
        assert path.stat().st_size == 0
        assert path.suffix == ".tmp"
        assert path.parent == temporary_directory_path()
    finally:
        path.unlink()


def test_temporary_directory_path_exists() -> None:
    assert temporary_directory_path().is_dir()


def test_dotfile_has_no_extension(tmp_path: Path) -> None:
    """A leading dot is part of the name, not an extension."""
    f = tmp_path / ".bashrc"
    f.write_text("export X=1")
    assert file_name(f) == ".bashrc"
    assert extension(f) == ""
    assert file_name_without_extension(f) == ".bashrc"
