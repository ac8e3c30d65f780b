"""Core fstools data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True, frozen=True)
class DirectoryRecord:
    """Aggregated byte count for one reporting directory."""

    path: Path
    size: int


@dataclass(slots=True, frozen=True)
class ScanContext:
    """Root and depth limit of a single size scan."""

    root: Path
    depth_limit: int

    def __post_init__(self) -> None:
        if self.depth_limit < 0:
            raise ValueError(f"depth_limit must be non-negative, got {self.depth_limit}")


@dataclass(slots=True, frozen=True)
class NameMatch:
    """A file whose base name matched a search pattern."""

    path: Path
    start: int
    end: int

    @property
    def prefix(self) -> str:
        return self.path.name[: self.start]

    @property
    def matched(self) -> str:
        return self.path.name[self.start : self.end]

    @property
    def suffix(self) -> str:
        return self.path.name[self.end :]
