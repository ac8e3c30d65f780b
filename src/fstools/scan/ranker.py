"""Top-N selection over directory records."""

from __future__ import annotations

import heapq
from typing import Iterable, List

from fstools.models import DirectoryRecord


def rank(records: Iterable[DirectoryRecord], count: int) -> List[DirectoryRecord]:
    """Return the ``count`` largest records, biggest first.

    Ties keep no particular order. Asking for more records than exist returns
    all of them.
    """
    if count < 0:
        raise ValueError(f"count must be non-negative, got {count}")
    if count == 0:
        return []
    return heapq.nlargest(count, records, key=lambda record: record.size)
