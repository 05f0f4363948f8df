"""First-seen-wins deduplication by venue identity.

A venue hosting several events appears once per event in the record
source.  Deduplication runs strictly after matching, so the row kept for
a venue is its first *matching* row.
"""

from __future__ import annotations

from collections.abc import Callable, Hashable, Iterable
from typing import Any, TypeVar

T = TypeVar("T")


def venue_identity(item: Any) -> Hashable:
    """Default key: the item's ``venue_id`` attribute."""
    return item.venue_id


def dedupe(items: Iterable[T], key: Callable[[T], Hashable] = venue_identity) -> list[T]:
    """Keep the first item of each identity, preserving input order."""
    seen: set[Hashable] = set()
    unique: list[T] = []
    for item in items:
        identity = key(item)
        if identity in seen:
            continue
        seen.add(identity)
        unique.append(item)
    return unique
