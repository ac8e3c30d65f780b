"""Recursive enumeration of regular files below a directory."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Iterator

from fstools.errors import TOO_DEEP, FilesystemAccessError

LOGGER = logging.getLogger(__name__)


def iter_file_paths(root: Path) -> Iterator[Path]:
    """Yield every regular file reachable from ``root``, depth-first.

    Sibling order is whatever the filesystem reports. Directories are descended
    into but never yielded. The first unreadable directory raises
    :class:`FilesystemAccessError` and ends the walk.

    Symlinked directories are followed. A link cycle ends in an OS loop error
    or in Python's recursion limit; :func:`collect_file_paths` reports both
    as :class:`FilesystemAccessError`.
    """
    root = Path(root)
    LOGGER.debug("Enumerating %s", root)
    try:
        with os.scandir(root) as entries:
            children = list(entries)
    except OSError as exc:
        raise FilesystemAccessError(root, exc.strerror or str(exc)) from exc

    for entry in children:
        path = root / entry.name
        try:
            is_file = entry.is_file()
            is_dir = not is_file and entry.is_dir()
        except OSError as exc:
            raise FilesystemAccessError(path, exc.strerror or str(exc)) from exc

        if is_file:
            yield path
        elif is_dir:
            yield from iter_file_paths(path)


def collect_file_paths(root: Path) -> list[Path]:
    """Enumerate ``root`` completely before returning."""
    try:
        return list(iter_file_paths(root))
    except RecursionError as exc:
        raise FilesystemAccessError(root, TOO_DEEP) from exc
