from __future__ import annotations

import os
import stat
import sys
from pathlib import Path

import pytest

from baseutils import path_utils


def test_is_dir_and_is_file(tmp_path: Path):
    (tmp_path / "sub").mkdir()
    (tmp_path / "sub" / "file.txt").write_text("x")

    assert path_utils.is_dir(str(tmp_path), "sub") is True
    assert path_utils.is_file(str(tmp_path), "sub") is False
    assert path_utils.is_file(str(tmp_path), "sub", "file.txt") is True
    assert path_utils.is_dir(str(tmp_path), "sub", "file.txt") is False


def test_is_dir_and_is_file_on_missing_path(tmp_path: Path):
    assert path_utils.is_dir(str(tmp_path), "missing") is False
    assert path_utils.is_file(str(tmp_path), "missing") is False


def test_is_dir_swallows_bad_arguments():
    assert path_utils.is_file(None) is False
    assert path_utils.is_dir("bad\0path") is False


def test_mkdir_sync_recursively_creates_chain(tmp_path: Path):
    target = tmp_path / "a" / "b" / "c"
    path_utils.mkdir_sync_recursively(str(target))
    assert target.is_dir()
    path_utils.mkdir_sync_recursively(str(target))


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_mkdir_sync_recursively_applies_mode(tmp_path: Path):
    target = tmp_path / "private"
    previous = os.umask(0)
    try:
        path_utils.mkdir_sync_recursively(str(target), 0o700)
    finally:
        os.umask(previous)
    assert stat.S_IMODE(target.stat().st_mode) == 0o700


def test_mkdir_sync_recursively_propagates_errors(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    with pytest.raises(OSError):
        path_utils.mkdir_sync_recursively(str(blocker / "child"))


def test_create_directory_if_not_exists(tmp_path: Path):
    target = tmp_path / "x" / "y"
    assert path_utils.create_directory_if_not_exists(str(target)) is True
    assert path_utils.create_directory_if_not_exists(str(target)) is True
    assert target.is_dir()


def test_create_directory_if_not_exists_reports_failure(tmp_path: Path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    assert path_utils.create_directory_if_not_exists(str(blocker / "child")) is False
    assert path_utils.create_directory_if_not_exists(None) is False


def test_get_module_root_path_finds_installed_package():
    root = path_utils.get_module_root_path("pytest")
    assert os.path.isdir(root)
    assert os.path.basename(root) == "pytest"
    assert Path(pytest.__file__).resolve().parent == Path(root).resolve()


def test_get_module_root_path_searches_sys_path(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    (tmp_path / "vendored_assets" / "css").mkdir(parents=True)
    monkeypatch.syspath_prepend(str(tmp_path))

    assert path_utils.get_module_root_path("vendored_assets") == str(tmp_path / "vendored_assets")
    assert path_utils.make_module_root_path("vendored_assets", "css", "site.css") == str(
        tmp_path / "vendored_assets" / "css" / "site.css"
    )


def test_get_module_root_path_fallbacks():
    missing = "definitely_not_installed_pkg_0b1c"
    assert path_utils.get_module_root_path(missing, "/opt/assets") == "/opt/assets"
    assert path_utils.get_module_root_path(missing) == os.path.join("site-packages", missing)
    assert path_utils.make_module_root_path(missing, "dist", "x.js") == os.path.join("site-packages", missing, "dist", "x.js")


def test_empty_join_names_current_directory(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    monkeypatch.chdir(tmp_path)
    assert path_utils.is_dir() is True
    assert path_utils.is_dir("") is True
    assert path_utils.is_dir("", "") is True
    assert path_utils.is_file("") is False


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_mkdir_sync_recursively_applies_mode_to_parents(tmp_path: Path):
    leaf = tmp_path / "outer" / "middle" / "leaf"
    previous = os.umask(0)
    try:
        path_utils.mkdir_sync_recursively(str(leaf), 0o750)
    finally:
        os.umask(previous)
    for created in (tmp_path / "outer", tmp_path / "outer" / "middle", leaf):
        assert stat.S_IMODE(created.stat().st_mode) == 0o750


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_mkdir_sync_recursively_leaves_existing_parents_alone(tmp_path: Path):
    existing = tmp_path / "existing"
    existing.mkdir()
    existing.chmod(0o711)
    path_utils.mkdir_sync_recursively(str(existing / "new"), 0o700)
    assert stat.S_IMODE(existing.stat().st_mode) == 0o711
