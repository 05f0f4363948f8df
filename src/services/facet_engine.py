"""Facet engine -- filtering and option computation over one snapshot.

Binds the matcher, the option calculator and the deduplicator to an
immutable tuple of normalized records.  The engine holds no other state,
so one instance can serve concurrent queries; the snapshot service hands
out a new engine after every refresh.
"""

from __future__ import annotations

from collections.abc import Iterable

from src.models.filters import Facet, FacetOptions, FacetQueryResult, FilterState
from src.models.venue import NormalizedRecord, VenueRecord
from src.services.deduplicator import dedupe
from src.services.facet_matcher import filter_records
from src.services.facet_options import compute_options
from src.utils.logging import get_logger


class FacetEngine:
    """Answers venue and option queries for a fixed set of records."""

    def __init__(self, records: Iterable[NormalizedRecord]) -> None:
        self._records: tuple[NormalizedRecord, ...] = tuple(records)
        self._logger = get_logger(__name__)

    @classmethod
    def empty(cls) -> FacetEngine:
        """An engine with no records; every query returns empty results."""
        return cls(())

    @property
    def records(self) -> tuple[NormalizedRecord, ...]:
        return self._records

    def __len__(self) -> int:
        return len(self._records)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def filter_venues(self, state: FilterState) -> list[VenueRecord]:
        """Return matching venues, one per ``venue_id``, in source order."""
        venues, _ = self._match_and_dedupe(state)
        return venues

    def filter_options(self, state: FilterState) -> FacetOptions:
        """Return the exclude-self option lists for every facet."""
        options = compute_options(self._records, state)
        self._logger.debug(
            "filter_options_computed",
            records=len(self._records),
            **{facet.value: len(options.for_facet(facet)) for facet in Facet},
        )
        return options

    def query(self, state: FilterState) -> FacetQueryResult:
        """Compute venues and options for *state* in one call."""
        venues, total_before_dedup = self._match_and_dedupe(state)
        return FacetQueryResult(
            venues=venues,
            options=self.filter_options(state),
            total_before_dedup=total_before_dedup,
        )

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _match_and_dedupe(self, state: FilterState) -> tuple[list[VenueRecord], int]:
        if state.is_default:
            matched = list(self._records)
        else:
            matched = filter_records(self._records, state)
        venues = [record.record for record in dedupe(matched)]
        self._logger.debug(
            "venues_filtered",
            before=len(self._records),
            matched=len(matched),
            after=len(venues),
        )
        return venues, len(matched)
