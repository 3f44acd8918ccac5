"""Filesystem path helpers: existence checks, directory creation and module lookup."""

from __future__ import annotations

import importlib.util
import logging
import os
import stat
import sys
from typing import Iterator, Optional

logger = logging.getLogger(__name__)

DEFAULT_DIRECTORY_MODE = 0o755
DEPENDENCY_DIRECTORY = "site-packages"


def _join(segments: tuple) -> str:
    """Join path segments; an empty result names the current directory."""
    joined = os.path.join(*segments) if segments else ""
    return joined or os.curdir


def _stat(segments: tuple) -> Optional[os.stat_result]:
    try:
        return os.stat(_join(segments))
    except (OSError, TypeError, ValueError) as exc:  # Expected exception in operation  # policy_guard: allow-silent-handler
        logger.debug("Cannot stat %r: %s", segments, exc)
        return None


def is_dir(*segments: str) -> bool:
    """Return True if the joined path names an existing directory."""
    result = _stat(segments)
    return result is not None and stat.S_ISDIR(result.st_mode)


def is_file(*segments: str) -> bool:
    """Return True if the joined path names an existing regular file."""
    result = _stat(segments)
    return result is not None and stat.S_ISREG(result.st_mode)


def _resolve_mode(mode: object) -> int:
    if isinstance(mode, int) and not isinstance(mode, bool):
        return mode
    return DEFAULT_DIRECTORY_MODE


def mkdir_sync_recursively(dirname: str, mode: int = DEFAULT_DIRECTORY_MODE) -> None:
    """
    Create ``dirname`` and any missing parents.

    An already existing directory is not an error. ``mode`` applies to every
    directory created, subject to the process umask.

    Raises:
        OSError: If the directory chain cannot be created
    """
    resolved_mode = _resolve_mode(mode)
    missing = []
    current = os.path.abspath(os.fspath(dirname))
    while not os.path.isdir(current):
        missing.append(current)
        parent = os.path.dirname(current)
        if parent == current:
            break
        current = parent

    for path in reversed(missing):
        try:
            os.mkdir(path, resolved_mode)
        except FileExistsError:
            if not os.path.isdir(path):
                raise


def create_directory_if_not_exists(dirname: str, mode: int = DEFAULT_DIRECTORY_MODE) -> bool:
    """Like :func:`mkdir_sync_recursively` but report failure as ``False``."""
    try:
        mkdir_sync_recursively(dirname, mode)
    except (OSError, TypeError, ValueError) as exc:  # Best-effort operation  # policy_guard: allow-silent-handler
        logger.debug("Failed to create directory %r: %s", dirname, exc)
        return False
    return True


def _spec_locations(modulename: str) -> Iterator[str]:
    try:
        spec = importlib.util.find_spec(modulename)
    except (AttributeError, ImportError, ValueError) as exc:  # Optional module not available  # policy_guard: allow-silent-handler
        logger.debug("Module spec lookup failed for %r: %s", modulename, exc)
        return
    if spec is None or not spec.submodule_search_locations:
        return
    for location in spec.submodule_search_locations:
        yield os.path.dirname(location)


def _search_path(modulename: str) -> Iterator[str]:
    """Yield the directories that may contain ``modulename``, in lookup order."""
    if "." not in modulename:
        yield from _spec_locations(modulename)
    for entry in sys.path:
        yield entry or os.getcwd()


def get_module_root_path(modulename: str, default_value: Optional[str] = None) -> str:
    """
    Locate the root directory of an installed package.

    Args:
        modulename: Directory name of the package (e.g. ``"orjson"``)
        default_value: Returned when the package cannot be found

    Returns:
        ``<search path entry>/<modulename>`` for the first entry that contains
        it; otherwise ``default_value`` or ``site-packages/<modulename>``
    """
    try:
        for directory in _search_path(modulename):
            candidate = os.path.join(directory, modulename)
            if os.path.isdir(candidate):
                return candidate
    except (OSError, TypeError) as exc:  # Best-effort operation  # policy_guard: allow-silent-handler
        logger.debug("Module root lookup failed for %r: %s", modulename, exc)

    if default_value:
        return default_value
    return os.path.join(DEPENDENCY_DIRECTORY, str(modulename))


def make_module_root_path(modulename: str, *segments: str) -> str:
    """Join the root directory of ``modulename`` with ``segments``."""
    return os.path.join(get_module_root_path(modulename), *segments)


__all__ = [
    "DEFAULT_DIRECTORY_MODE",
    "create_directory_if_not_exists",
    "get_module_root_path",
    "is_dir",
    "is_file",
    "make_module_root_path",
    "mkdir_sync_recursively",
]
