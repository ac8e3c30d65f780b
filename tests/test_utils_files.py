"""Tests for file utility functions."""

from __future__ import annotations

import errno
import io
import os
from pathlib import Path

import pytest

from fstools.errors import BackupCreationError, FilesystemAccessError
from fstools.utils.files import backup_path_for, prepend_line


class TestBackupPathFor:
    """Test backup_path_for function."""

    def test_appends_to_extension(self) -> None:
        assert backup_path_for(Path("/tmp/notes.txt")) == Path("/tmp/notes.txt.bak")

    def test_no_extension(self) -> None:
        assert backup_path_for(Path("Makefile")) == Path("Makefile.bak")

    def test_custom_suffix(self) -> None:
        assert backup_path_for(Path("a.cfg"), ".orig") == Path("a.cfg.orig")


class TestPrependLine:
    """Test prepend_line function."""

    def test_prepends_and_keeps_backup(self, tmp_path: Path) -> None:
        """Should write the header first and keep the original as .bak."""
        target = tmp_path / "data.txt"
        target.write_text("a\nb\n")

        backup = prepend_line(target, "HEADER")

        assert target.read_text().splitlines() == ["HEADER", "a", "b"]
        assert backup == tmp_path / "data.txt.bak"
        assert backup.read_text().splitlines() == ["a", "b"]

    def test_original_bytes_unchanged(self, tmp_path: Path) -> None:
        """Lines after the header are copied byte for byte."""
        target = tmp_path / "raw.csv"
        original = b"x,y\r\n1,2\r\nlast-without-newline"
        target.write_bytes(original)

        prepend_line(target, "# header")

        assert target.read_bytes() == b"# header\n" + original

    def test_empty_file(self, tmp_path: Path) -> None:
        target = tmp_path / "empty"
        target.write_bytes(b"")

        prepend_line(target, "first")

        assert target.read_bytes() == b"first\n"

    def test_unicode_text(self, tmp_path: Path) -> None:
        target = tmp_path / "u.txt"
        target.write_text("body\n", encoding="utf-8")

        prepend_line(target, "héllo ✓")

        assert target.read_text(encoding="utf-8") == "héllo ✓\nbody\n"

    def test_missing_file_raises(self, tmp_path: Path) -> None:
        """A failed rename aborts before anything is written."""
        target = tmp_path / "missing.txt"

        with pytest.raises(BackupCreationError) as excinfo:
            prepend_line(target, "HEADER")

        assert excinfo.value.backup == tmp_path / "missing.txt.bak"
        assert not target.exists()
        assert not (tmp_path / "missing.txt.bak").exists()


class _FullDisk(io.BytesIO):
    def write(self, data):  # type: ignore[override]
        raise OSError(errno.ENOSPC, os.strerror(errno.ENOSPC))


class TestPrependLineFailures:
    """Failures after the backup exists leave it in place for recovery."""

    def test_backup_cannot_be_opened(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        target = tmp_path / "data.txt"
        target.write_bytes(b"a\nb\n")
        real_open = Path.open

        def fake_open(self, mode="r", *args, **kwargs):
            if mode == "rb":
                raise PermissionError(errno.EACCES, "Permission denied")
            return real_open(self, mode, *args, **kwargs)

        monkeypatch.setattr(Path, "open", fake_open)

        with pytest.raises(FilesystemAccessError) as excinfo:
            prepend_line(target, "HEADER")

        monkeypatch.undo()
        backup = tmp_path / "data.txt.bak"
        assert excinfo.value.path == backup
        assert "Permission denied" in str(excinfo.value)
        assert backup.read_bytes() == b"a\nb\n"
        assert not target.exists()

    def test_original_path_reappears(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """A file created at the original path is never overwritten."""
        target = tmp_path / "data.txt"
        target.write_bytes(b"a\nb\n")
        real_rename = Path.rename

        def rename_then_recreate(self, destination):
            moved = real_rename(self, destination)
            self.write_bytes(b"someone else")
            return moved

        monkeypatch.setattr(Path, "rename", rename_then_recreate)

        with pytest.raises(FilesystemAccessError) as excinfo:
            prepend_line(target, "HEADER")

        assert excinfo.value.path == target
        assert (tmp_path / "data.txt.bak").read_bytes() == b"a\nb\n"
        assert target.read_bytes() == b"someone else"

    def test_write_error_is_wrapped(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        """Errors while streaming the new file surface as FilesystemAccessError."""
        target = tmp_path / "data.txt"
        target.write_bytes(b"a\nb\n")
        real_open = Path.open

        def fake_open(self, mode="r", *args, **kwargs):
            if mode == "xb":
                return _FullDisk()
            return real_open(self, mode, *args, **kwargs)

        monkeypatch.setattr(Path, "open", fake_open)

        with pytest.raises(FilesystemAccessError) as excinfo:
            prepend_line(target, "HEADER")

        assert excinfo.value.path == target
        assert isinstance(excinfo.value.__cause__, OSError)
        assert excinfo.value.__cause__.errno == errno.ENOSPC
        assert (tmp_path / "data.txt.bak").read_bytes() == b"a\nb\n"
