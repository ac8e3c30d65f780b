"""Depth-bounded directory size aggregation.

The scan root reports the bytes of the files directly inside it. Each
subdirectory closer to the root than the depth limit is walked the same way,
so it also reports only its own loose files. A subdirectory at or beyond the
limit is reported once with the size of everything below it. Every regular
file under the root therefore lands in exactly one record.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import List

from fstools.errors import TOO_DEEP, FilesystemAccessError
from fstools.models import DirectoryRecord, ScanContext

LOGGER = logging.getLogger(__name__)


def hop_distance(root: Path, path: Path) -> int:
    """Number of path segments from ``root`` down to ``path``."""
    return len(Path(path).relative_to(root).parts)


def _list_entries(directory: Path) -> list[os.DirEntry]:
    try:
        with os.scandir(directory) as entries:
            return list(entries)
    except OSError as exc:
        raise FilesystemAccessError(directory, exc.strerror or str(exc)) from exc


def _classify(entry: os.DirEntry, path: Path) -> tuple[bool, bool, int]:
    """Return ``(is_file, is_dir, size)`` for a directory entry."""
    try:
        if entry.is_file():
            return True, False, entry.stat().st_size
        return False, entry.is_dir(), 0
    except OSError as exc:
        raise FilesystemAccessError(path, exc.strerror or str(exc)) from exc


def directory_total(directory: Path) -> int:
    """Sum the sizes of every regular file at any depth below ``directory``."""
    total = 0
    for entry in _list_entries(directory):
        path = directory / entry.name
        is_file, is_dir, size = _classify(entry, path)
        if is_file:
            total += size
        elif is_dir:
            total += directory_total(path)
    return total


def _aggregate(context: ScanContext, directory: Path, records: List[DirectoryRecord]) -> None:
    direct_size = 0
    for entry in _list_entries(directory):
        path = directory / entry.name
        is_file, is_dir, size = _classify(entry, path)
        if is_file:
            direct_size += size
        elif is_dir:
            if hop_distance(context.root, path) < context.depth_limit:
                _aggregate(context, path, records)
            else:
                records.append(DirectoryRecord(path=path, size=directory_total(path)))

    records.append(DirectoryRecord(path=directory, size=direct_size))


def aggregate_sizes(context: ScanContext) -> List[DirectoryRecord]:
    """Produce one :class:`DirectoryRecord` per reporting directory under the root.

    Records are emitted in post-order: a directory's record follows the records
    of the subdirectories it contains. Any unreadable entry raises
    :class:`FilesystemAccessError` and no records are returned.
    """
    root = Path(context.root)
    LOGGER.info("Sizing %s (depth limit %d)", root, context.depth_limit)
    records: List[DirectoryRecord] = []
    try:
        _aggregate(ScanContext(root=root, depth_limit=context.depth_limit), root, records)
    except RecursionError as exc:
        raise FilesystemAccessError(root, TOO_DEEP) from exc
    LOGGER.debug("Produced %d directory records", len(records))
    return records
