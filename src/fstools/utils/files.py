"""Utility helpers for working with files."""

from __future__ import annotations

import logging
from pathlib import Path

from fstools.errors import BackupCreationError, FilesystemAccessError

LOGGER = logging.getLogger(__name__)


def backup_path_for(path: Path, suffix: str = ".bak") -> Path:
    """Append ``suffix`` after the existing extension of ``path``."""
    return path.with_name(path.name + suffix)


def prepend_line(path: Path, text: str, *, backup_suffix: str = ".bak") -> Path:
    """Insert ``text`` as the first line of ``path``, keeping a backup.

    The original is renamed to its backup path first, then a new file is
    streamed at the original location. Between those two steps the original
    path does not exist; the backup always holds the untouched content.
    Returns the backup path.
    """
    path = Path(path)
    backup = backup_path_for(path, backup_suffix)

    try:
        path.rename(backup)
    except OSError as exc:
        raise BackupCreationError(path, backup, exc.strerror or str(exc)) from exc
    LOGGER.debug("Moved %s to %s", path, backup)

    try:
        reader = backup.open("rb")
    except OSError as exc:
        raise FilesystemAccessError(backup, exc.strerror or str(exc)) from exc

    with reader:
        try:
            writer = path.open("xb")
        except OSError as exc:
            raise FilesystemAccessError(path, exc.strerror or str(exc)) from exc
        try:
            with writer:
                writer.write(text.encode("utf-8") + b"\n")
                for line in reader:
                    writer.write(line)
        except OSError as exc:
            raise FilesystemAccessError(path, exc.strerror or str(exc)) from exc

    LOGGER.info("Prepended %d characters to %s", len(text), path)
    return backup
