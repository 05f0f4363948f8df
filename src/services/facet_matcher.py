"""Multi-facet matching of normalized records against a FilterState.

Facets combine with AND.  Within a facet:

- **area**     -- OR over the selected areas; each is a case-insensitive
  substring test against the record's area, widened through AREA_ALIASES
  ("JBR" also hits "Jumeirah Beach Residence").  "All Dubai" lifts the
  constraint.
- **vibe/genre** -- AND over the selections; each must equal one of the
  record's primaries or secondaries (case-insensitive, trimmed).
- **date**     -- OR over the selected literals; equality of calendar dates.
- **search**   -- case-insensitive substring of the name or category.

A record lacking the attribute a facet constrains (no area, no tags, no
date) fails that facet whenever it is active.

The option calculator reuses :func:`compile_predicate` with one facet
excluded.
"""

from __future__ import annotations

from collections.abc import Callable, Collection, Iterable
from datetime import date

from src.config.taxonomy import ALL_AREAS_SENTINELS, AREA_ALIASES
from src.models.filters import Facet, FilterState
from src.models.venue import NormalizedRecord, TagSet
from src.utils.date_canonicalizer import canonicalize
from src.utils.text_normalizer import fold

RecordPredicate = Callable[[NormalizedRecord], bool]


# ---------------------------------------------------------------------------
# Selection preparation
# ---------------------------------------------------------------------------

def area_needles(selected_areas: Iterable[str]) -> tuple[str, ...] | None:
    """Expand an area selection into folded substrings to look for.

    Returns None when the selection places no constraint (empty, or it
    contains an "all areas" sentinel).
    """
    needles: list[str] = []
    for area in selected_areas:
        folded = fold(area)
        if not folded:
            continue
        if folded in ALL_AREAS_SENTINELS:
            return None
        needles.extend(AREA_ALIASES.get(folded, (folded,)))
    return tuple(needles) or None


def selected_tags(selected: Iterable[str]) -> tuple[str, ...]:
    """Fold tag selections, dropping blank ones."""
    return tuple(tag for tag in (fold(value) for value in selected) if tag)


def selected_dates(active_dates: Iterable[str]) -> frozenset[date]:
    """Canonicalize date selections; unreadable ones are dropped."""
    dates = (canonicalize(value) for value in active_dates)
    return frozenset(value for value in dates if value is not None)


# ---------------------------------------------------------------------------
# Per-facet predicates
#
# Each public match_* prepares its selection and defers to the _*_hit test
# that compile_predicate also uses.
# ---------------------------------------------------------------------------

def match_area(record: NormalizedRecord, selected_areas: Iterable[str]) -> bool:
    needles = area_needles(selected_areas)
    return needles is None or _area_hit(record.area_key, needles)


def match_tags(tags: TagSet, selected: Iterable[str]) -> bool:
    """True when every selected tag is one of *tags* (or nothing is selected)."""
    wanted = selected_tags(selected)
    return not wanted or _tags_hit(tags, wanted)


def match_date(event_date: date | None, active_dates: Collection[str]) -> bool:
    if not active_dates:
        return True
    return _date_hit(event_date, selected_dates(active_dates))


def match_search(record: NormalizedRecord, query: str | None) -> bool:
    needle = fold(query)
    return not needle or _search_hit(record, needle)


def _area_hit(area_key: str, needles: tuple[str, ...]) -> bool:
    if not area_key:
        return False
    return any(needle in area_key for needle in needles)


def _tags_hit(tags: TagSet, wanted: tuple[str, ...]) -> bool:
    if tags.is_empty:
        return False
    return all(tags.contains(tag) for tag in wanted)


def _date_hit(event_date: date | None, wanted: frozenset[date]) -> bool:
    # Selections that all failed to parse match nothing.
    return event_date is not None and event_date in wanted


def _search_hit(record: NormalizedRecord, needle: str) -> bool:
    return needle in fold(record.record.name) or needle in fold(record.record.category)


# ---------------------------------------------------------------------------
# Combined predicate
# ---------------------------------------------------------------------------

def _facet_check(facet: Facet, state: FilterState) -> RecordPredicate | None:
    """Prepare one facet's selection; None when it places no constraint."""
    selection = state.selection(facet)

    if facet is Facet.AREA:
        needles = area_needles(selection)
        if needles is None:
            return None
        return lambda record: _area_hit(record.area_key, needles)

    if facet is Facet.DATE:
        if not selection:
            return None
        dates = selected_dates(selection)
        return lambda record: _date_hit(record.event_date, dates)

    wanted = selected_tags(selection)
    if not wanted:
        return None
    if facet is Facet.VIBE:
        return lambda record: _tags_hit(record.vibe, wanted)
    return lambda record: _tags_hit(record.genre, wanted)


def compile_predicate(
    state: FilterState,
    *,
    exclude: Collection[Facet] = (),
    include_search: bool = True,
) -> RecordPredicate:
    """Prepare *state* once and return a predicate over records.

    Args:
        state: Active selections.
        exclude: Facets to ignore (the option calculator excludes the facet
            whose options it is computing).
        include_search: Whether the free-text query narrows the result.
    """
    checks: list[RecordPredicate] = []
    for facet in Facet:
        if facet in exclude:
            continue
        check = _facet_check(facet, state)
        if check is not None:
            checks.append(check)

    if include_search:
        needle = fold(state.search_query)
        if needle:
            checks.append(lambda record: _search_hit(record, needle))

    if not checks:
        return lambda record: True
    return lambda record: all(check(record) for check in checks)


def matches(
    record: NormalizedRecord,
    state: FilterState,
    *,
    exclude: Collection[Facet] = (),
    include_search: bool = True,
) -> bool:
    """Return True when *record* satisfies every active facet of *state*."""
    return compile_predicate(state, exclude=exclude, include_search=include_search)(record)


def filter_records(
    records: Iterable[NormalizedRecord],
    state: FilterState,
    *,
    exclude: Collection[Facet] = (),
    include_search: bool = True,
) -> list[NormalizedRecord]:
    """Return the records of *records* that match, in their original order."""
    predicate = compile_predicate(state, exclude=exclude, include_search=include_search)
    return [record for record in records if predicate(record)]
