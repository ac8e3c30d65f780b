"""Regular expression matching against file base names."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator

from fstools.errors import InvalidInputError
from fstools.models import NameMatch


def compile_pattern(pattern: str) -> re.Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as exc:
        raise InvalidInputError("Unable to parse regex string") from exc


def match_name(path: Path, regex: re.Pattern[str]) -> NameMatch | None:
    """Search the base name of ``path`` and return the first match span."""
    found = regex.search(path.name)
    if found is None:
        return None
    return NameMatch(path=path, start=found.start(), end=found.end())


def find_matches(paths: Iterable[Path], regex: re.Pattern[str]) -> Iterator[NameMatch]:
    """Yield matches in the order the paths were enumerated."""
    for path in paths:
        match = match_name(path, regex)
        if match is not None:
            yield match
