"""Application configuration defaults."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class AppConfig:
    depth: int = 5
    results: int = 10
    backup_suffix: str = ".bak"
    progress_spinner: str = "line"
    progress_refresh: float = 4.0
    progress_label: str = "Searching..."
    highlight_style: str = "green"

    def resolve_root(self, root: Path | None = None) -> Path:
        """Return ``root`` or the current working directory when it is missing."""
        if root is None:
            return Path.cwd()
        return Path(root)
