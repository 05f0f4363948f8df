"""Text normalization helpers shared by the filter engine.

Two concerns live here:

1. **Tag splitting** -- upstream vibe and genre columns hold compound
   strings such as ``"Techno|Deep House"``; :func:`split_tags` turns them
   into atomic tags before classification.

2. **Comparison folding** -- every case-insensitive comparison in the
   engine (areas, tags, search) goes through :func:`fold`.
"""

import re
from collections.abc import Iterable

TAG_DELIMITER = "|"

_MULTI_SPACE = re.compile(r"\s+")


def split_tags(compound: str | None) -> list[str]:
    """Split a ``|``-delimited tag string into trimmed, non-empty tags.

    A string without the delimiter yields a single-element list, so
    splitting an already-atomic tag returns it unchanged.

    Args:
        compound: Raw tag string, e.g. ``"Techno|Deep House"``.

    Returns:
        List of atomic tags in their original order.
    """
    if not compound:
        return []
    return [part.strip() for part in compound.split(TAG_DELIMITER) if part.strip()]


def split_tag_list(values: Iterable[str | None] | None) -> list[str]:
    """Split every compound string of a tag column and flatten the result."""
    if not values:
        return []
    tags: list[str] = []
    for value in values:
        tags.extend(split_tags(value))
    return tags


def fold(text: str | None) -> str:
    """Casefold *text* for comparison and collapse inner whitespace.

    ``None`` folds to the empty string.
    """
    if not text:
        return ""
    return _MULTI_SPACE.sub(" ", text.strip()).casefold()


def alphabetical_key(value: str) -> tuple[str, str]:
    """Sort key: case-insensitive alphabetical, ties broken by the raw string."""
    return (value.casefold(), value)
