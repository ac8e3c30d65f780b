"""Command line interface for fstools."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Callable, NoReturn, Optional

import typer
from rich import filesize
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from fstools.config import AppConfig
from fstools.errors import FstoolsError, InvalidInputError
from fstools.models import NameMatch, ScanContext
from fstools.scan.enumerator import collect_file_paths
from fstools.scan.ranker import rank
from fstools.scan.sizer import aggregate_sizes
from fstools.search.matcher import compile_pattern, find_matches
from fstools.utils.files import prepend_line
from fstools.utils.progress import scan_progress


console = Console()
err_console = Console(stderr=True)
app = typer.Typer(help="fstools - small filesystem utilities")

LOGGER = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


def _printable(text: str) -> str:
    """Escape undecodable bytes that ``os.scandir`` keeps as surrogates."""
    return os.fsencode(text).decode("utf-8", "backslashreplace")


def _fail(exc: FstoolsError) -> NoReturn:
    err_console.print(f"[red]{escape(_printable(str(exc)))}[/red]", soft_wrap=True)
    raise typer.Exit(code=1)


def _render_match(match: NameMatch, root: Path, style: str) -> Text:
    """Path relative to ``root`` with the matched span of the name styled."""
    text = Text()
    parent = match.path.parent.relative_to(root)
    if parent != Path("."):
        text.append(f"{_printable(str(parent))}{os.sep}")
    text.append(_printable(match.prefix))
    text.append(_printable(match.matched), style=style)
    text.append(_printable(match.suffix))
    return text


def _display_path(path: Path, root: Path) -> str:
    return _printable(str(path.relative_to(root)))


@app.command()
def fim(
    pattern: str = typer.Argument(..., help="The regular expression used in the search"),
    directory: Optional[Path] = typer.Option(
        None, "--directory", "-d", help="The root directory to search. Defaults to PWD"
    ),
    progress: bool = typer.Option(
        True, "--progress/--no-progress", help="Show a spinner while scanning"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Find files whose name matches PATTERN."""
    _setup_logging(verbose)
    config = AppConfig()
    try:
        regex = compile_pattern(pattern)
    except InvalidInputError as exc:
        raise typer.BadParameter(str(exc), param_hint="PATTERN") from exc

    root = config.resolve_root(directory)
    try:
        if progress:
            with scan_progress(
                err_console,
                config.progress_label,
                spinner=config.progress_spinner,
                refresh_per_second=config.progress_refresh,
            ):
                paths = collect_file_paths(root)
        else:
            paths = collect_file_paths(root)
    except FstoolsError as exc:
        _fail(exc)

    LOGGER.debug("Scanned %d files under %s", len(paths), root)
    for match in find_matches(paths, regex):
        console.print(_render_match(match, root, config.highlight_style), soft_wrap=True)


@app.command()
def prepend(
    text: str = typer.Argument(..., help="The text to prepend"),
    file: Path = typer.Argument(..., help="The file to prepend TEXT to"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Prepend TEXT to the beginning of FILE, keeping a backup."""
    _setup_logging(verbose)
    config = AppConfig()
    try:
        backup = prepend_line(file, text, backup_suffix=config.backup_suffix)
    except FstoolsError as exc:
        _fail(exc)
    console.print(
        f"Original saved as [bold]{escape(_printable(str(backup)))}[/bold]", soft_wrap=True
    )


@app.command()
def sizer(
    root: Optional[Path] = typer.Option(
        None,
        "--root-directory",
        "-r",
        help="The root directory to begin sizing. Defaults to PWD",
    ),
    results: int = typer.Option(
        AppConfig().results, "--results", "-n", min=0, help="Number of results to display"
    ),
    depth: int = typer.Option(
        AppConfig().depth,
        "--depth",
        "-d",
        min=0,
        help="Levels below the root at which directories are reported as a whole",
    ),
    raw_bytes: bool = typer.Option(False, "--bytes", help="Print sizes as plain byte counts"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose logging"),
) -> None:
    """Find the largest directories."""
    _setup_logging(verbose)
    config = AppConfig(depth=depth, results=results)
    resolved_root = config.resolve_root(root)

    try:
        records = aggregate_sizes(ScanContext(root=resolved_root, depth_limit=config.depth))
    except FstoolsError as exc:
        _fail(exc)

    ranked = rank(records, config.results)
    if not ranked:
        console.print("[yellow]No directories to report.[/yellow]")
        return

    table = Table(show_header=True, header_style="bold magenta")
    table.add_column("Size", justify="right")
    table.add_column("Directory", overflow="fold")

    for record in ranked:
        size = str(record.size) if raw_bytes else filesize.decimal(record.size)
        table.add_row(size, escape(_display_path(record.path, resolved_root)))

    console.print(table)


def _run_single(command: Callable[..., None]) -> None:
    single = typer.Typer(add_completion=False)
    single.command()(command)
    single()


def fim_main() -> None:
    _run_single(fim)


def prepend_main() -> None:
    _run_single(prepend)


def sizer_main() -> None:
    _run_single(sizer)
