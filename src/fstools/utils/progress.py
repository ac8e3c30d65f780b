"""Spinner shown on stderr while a scan runs."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from rich.console import Console
from rich.progress import Progress, SpinnerColumn, TextColumn, TimeElapsedColumn


@contextmanager
def scan_progress(
    console: Console,
    label: str = "Searching...",
    *,
    spinner: str = "line",
    refresh_per_second: float = 4.0,
) -> Iterator[Optional[Progress]]:
    """Show a transient spinner on ``console`` for the duration of the block.

    Rich refreshes the spinner from its own thread and stops it on exit. Nothing
    is written when ``console`` is not a terminal, and ``None`` is yielded.
    """
    if not console.is_terminal:
        yield None
        return

    progress = Progress(
        SpinnerColumn(spinner_name=spinner),
        TextColumn("[progress.description]{task.description}"),
        TimeElapsedColumn(),
        console=console,
        transient=True,
        refresh_per_second=refresh_per_second,
    )
    with progress:
        progress.add_task(label, total=None)
        yield progress
