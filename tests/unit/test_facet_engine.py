"""Unit tests for the FacetEngine facade over the sample snapshot."""

from __future__ import annotations

from src.models.filters import FilterState
from src.services.facet_engine import FacetEngine
from src.services.facet_matcher import filter_records
from src.utils.date_canonicalizer import DateFormat
from tests.conftest import make_record


def _ids(venues: list) -> list[int]:
    return [venue.venue_id for venue in venues]


class TestFilterVenues:
    def test_default_state_returns_every_venue_once(self, sample_engine: FacetEngine) -> None:
        venues = sample_engine.filter_venues(FilterState())
        assert _ids(venues) == [101, 102, 103, 104, 105, 106, 107, 108]

    def test_genre_filter(self, sample_engine: FacetEngine) -> None:
        assert _ids(sample_engine.filter_venues(FilterState(active_genres=["Techno"]))) == [102]

    def test_genre_and_semantics(self, sample_engine: FacetEngine) -> None:
        state = FilterState(active_genres=["Techno", "House"])
        assert sample_engine.filter_venues(state) == []

    def test_primary_genre_selection(self, sample_engine: FacetEngine) -> None:
        state = FilterState(active_genres=["Electronic"])
        assert _ids(sample_engine.filter_venues(state)) == [101, 102, 105]

    def test_jbr_alias(self, sample_engine: FacetEngine) -> None:
        state = FilterState(selected_areas=["JBR"])
        assert _ids(sample_engine.filter_venues(state)) == [104, 106]

    def test_date_filter_uses_utc_record_day(self, sample_engine: FacetEngine) -> None:
        state = FilterState(active_dates=["17/September/2025"])
        assert _ids(sample_engine.filter_venues(state)) == [101, 103, 106]

    def test_short_date_literal(self, sample_engine: FacetEngine) -> None:
        state = FilterState(active_dates=["17 Sept 25"])
        assert _ids(sample_engine.filter_venues(state)) == [101, 103, 106]

    def test_dedupe_runs_after_matching(self, sample_engine: FacetEngine) -> None:
        # Venue 101's first row is on the 17th; only its second row is on the 18th.
        state = FilterState(active_dates=["18/September/2025"])
        venues = sample_engine.filter_venues(state)
        assert _ids(venues) == [101, 105]
        assert venues[0].event_date == "2025-09-18T00:00:00+00:00"

    def test_search_on_name(self, sample_engine: FacetEngine) -> None:
        state = FilterState(search_query="beach")
        assert _ids(sample_engine.filter_venues(state)) == [101, 106]

    def test_search_on_category(self, sample_engine: FacetEngine) -> None:
        state = FilterState(search_query="comedy")
        assert _ids(sample_engine.filter_venues(state)) == [108]

    def test_filtering_is_idempotent(self, sample_engine: FacetEngine) -> None:
        state = FilterState(selected_areas=["JBR", "Palm Jumeirah"], active_vibes=["Beach & Pool"])
        first = sample_engine.filter_venues(state)
        assert sample_engine.filter_venues(state) == first

    def test_blank_selections_keep_records_missing_attributes(self) -> None:
        engine = FacetEngine(
            [make_record(1, area=None, genres=None, vibes=None), make_record(2, area="JBR")]
        )
        state = FilterState(selected_areas=["  "], active_genres=[""], search_query=" ")
        assert state.is_default
        assert _ids(engine.filter_venues(state)) == [1, 2]

    def test_default_state_agrees_with_matcher(self, sample_engine: FacetEngine) -> None:
        matched = filter_records(sample_engine.records, FilterState())
        result = sample_engine.query(FilterState())
        assert result.total_before_dedup == len(matched)


class TestQuery:
    def test_reports_rows_before_dedupe(self, sample_engine: FacetEngine) -> None:
        result = sample_engine.query(FilterState())
        assert result.total_before_dedup == 9
        assert len(result.venues) == 8

    def test_options_follow_date_format(self, sample_engine: FacetEngine) -> None:
        result = sample_engine.query(FilterState(date_format=DateFormat.SHORT))
        assert result.options.dates[0] == "17 Sept 25"

    def test_options_match_filter_options(self, sample_engine: FacetEngine) -> None:
        state = FilterState(active_vibes=["Party"])
        assert sample_engine.query(state).options == sample_engine.filter_options(state)


class TestEmptyEngine:
    def test_every_query_is_empty(self) -> None:
        engine = FacetEngine.empty()
        assert len(engine) == 0
        assert engine.filter_venues(FilterState()) == []
        options = engine.filter_options(FilterState(active_genres=["Techno"]))
        assert options.areas == options.vibes == options.dates == options.genres == []
