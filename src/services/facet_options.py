"""Exclude-self facet option computation.

For each facet F the options are the values of F found among the records
that satisfy every *other* active facet.  F's own selection is ignored, so
picking "Techno" never hides "House" from the genre list; it only narrows
the area, vibe and date lists.

The free-text query is not a facet and never narrows options.

Values equal under case-insensitive comparison are listed once, in the
spelling of the first record that carries them.

Ordering:
    areas, vibes, genres -- case-insensitive alphabetical, ties by raw string
    dates                -- chronological, rendered in ``state.date_format``
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Sequence

from src.models.filters import Facet, FacetOptions, FilterState
from src.models.venue import NormalizedRecord, TagSet
from src.services.deduplicator import dedupe
from src.services.facet_matcher import filter_records
from src.utils.date_canonicalizer import format_date
from src.utils.text_normalizer import alphabetical_key, fold


def _distinct(values: Iterable[str]) -> list[str]:
    """Values unique under fold(), first spelling kept, sorted alphabetically."""
    return sorted(dedupe(values, key=fold), key=alphabetical_key)


def _tag_values(tag_sets: Iterable[TagSet]) -> Iterator[str]:
    for tags in tag_sets:
        yield from sorted(tags.all_tags(), key=alphabetical_key)


def _project_areas(records: Sequence[NormalizedRecord], state: FilterState) -> list[str]:
    areas = (record.record.area.strip() for record in records if record.record.area)
    return _distinct(area for area in areas if area)


def _project_vibes(records: Sequence[NormalizedRecord], state: FilterState) -> list[str]:
    return _distinct(_tag_values(record.vibe for record in records))


def _project_genres(records: Sequence[NormalizedRecord], state: FilterState) -> list[str]:
    return _distinct(_tag_values(record.genre for record in records))


def _project_dates(records: Sequence[NormalizedRecord], state: FilterState) -> list[str]:
    dates = {record.event_date for record in records if record.event_date is not None}
    return [format_date(value, state.date_format) for value in sorted(dates)]


_PROJECTIONS: dict[Facet, Callable[[Sequence[NormalizedRecord], FilterState], list[str]]] = {
    Facet.AREA: _project_areas,
    Facet.VIBE: _project_vibes,
    Facet.DATE: _project_dates,
    Facet.GENRE: _project_genres,
}


def options_for(
    facet: Facet, records: Sequence[NormalizedRecord], state: FilterState
) -> list[str]:
    """Return the selectable values of *facet* given the other facets."""
    view = filter_records(records, state, exclude=(facet,), include_search=False)
    return _PROJECTIONS[facet](view, state)


def compute_options(records: Sequence[NormalizedRecord], state: FilterState) -> FacetOptions:
    """Compute options for all four facets."""
    return FacetOptions(**{facet.value: options_for(facet, records, state) for facet in Facet})
