"""Exceptions raised by the fstools utilities."""

from __future__ import annotations

from pathlib import Path

TOO_DEEP = "directory tree too deep or cyclic"


class FstoolsError(Exception):
    """Base class for every error reported by the tools."""


class InvalidInputError(FstoolsError):
    """User supplied input that cannot be used, such as a malformed regex."""


class FilesystemAccessError(FstoolsError):
    """A path could not be read or written; the whole operation is aborted."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Unable to access {self.path}: {reason}")


class BackupCreationError(FstoolsError):
    """The original file could not be moved to its backup location."""

    def __init__(self, path: Path, backup: Path, reason: str) -> None:
        self.path = Path(path)
        self.backup = Path(backup)
        self.reason = reason
        super().__init__(f"Unable to create {self.backup.name} for {self.path}: {reason}")
