"""Unit tests for the venue, filter and snapshot models."""

from __future__ import annotations

from datetime import date, datetime, timezone

import pytest
from pydantic import ValidationError

from src.models.filters import Facet, FacetOptions, FilterState
from src.models.snapshot import Snapshot
from src.models.venue import FILTER_ONLY_FIELDS, TagSet, VenueRecord
from tests.conftest import make_record, make_venue


# ======================================================================
# VenueRecord
# ======================================================================


class TestVenueRecord:
    def test_flattened_and_table_names_are_equivalent(self) -> None:
        flat = VenueRecord(venue_id=1, name="Irish Village", lat=25.2, lng=55.3, phone="04")
        table = VenueRecord.model_validate(
            {
                "venue_venue_id": 1,
                "venue_name_original": "Irish Village",
                "venue_lat": 25.2,
                "venue_lng": 55.3,
                "venue_phone_number": "04",
            }
        )
        assert flat == table

    def test_null_name_becomes_empty(self) -> None:
        assert VenueRecord(venue_id=1, name=None, lat=0, lng=0).name == ""

    @pytest.mark.parametrize("country", [None, ""])
    def test_missing_country_defaults_to_uae(self, country: str | None) -> None:
        assert VenueRecord(venue_id=1, lat=0, lng=0, country=country).country == "UAE"

    def test_explicit_country_kept(self) -> None:
        assert VenueRecord(venue_id=1, lat=0, lng=0, country="Oman").country == "Oman"

    def test_scalar_tag_wrapped(self) -> None:
        record = VenueRecord(venue_id=1, lat=0, lng=0, music_genre="Techno|House")
        assert record.music_genre == ("Techno|House",)

    def test_tag_list_drops_non_strings(self) -> None:
        record = VenueRecord(venue_id=1, lat=0, lng=0, event_vibe=["Party", None, 3])
        assert record.event_vibe == ("Party",)

    def test_datetime_event_date_stringified(self) -> None:
        when = datetime(2025, 9, 17, 20, 0, tzinfo=timezone.utc)
        record = VenueRecord(venue_id=1, lat=0, lng=0, event_date=when)
        assert record.event_date == "2025-09-17T20:00:00+00:00"

    def test_missing_coordinates_rejected(self) -> None:
        with pytest.raises(ValidationError):
            VenueRecord.model_validate({"venue_id": 1, "lat": None, "lng": 55.0})

    def test_display_payload_drops_filter_fields(self) -> None:
        payload = make_venue(genres=["Techno"], event_date="2025-09-17").display_payload()
        assert FILTER_ONLY_FIELDS.isdisjoint(payload)
        assert payload["venue_id"] == 1
        assert payload["country"] == "UAE"

    def test_frozen(self) -> None:
        record = make_venue()
        with pytest.raises(ValidationError):
            record.name = "changed"  # type: ignore[misc]


# ======================================================================
# TagSet / NormalizedRecord
# ======================================================================


class TestTagSet:
    def test_build_groups_secondaries(self) -> None:
        tags = TagSet.build([("Electronic", "Techno"), ("Electronic", None), ("Chill", None)])
        assert tags.primaries == {"Electronic", "Chill"}
        assert tags.secondaries_by_primary["Electronic"] == {"Techno"}
        assert tags.all_tags() == {"Electronic", "Techno", "Chill"}
        assert tags.contains("techno")

    def test_blank_primary_ignored(self) -> None:
        assert TagSet.build([("", "Techno")]).is_empty

    def test_normalized_record_exposes_venue_id(self) -> None:
        assert make_record(42).venue_id == 42


# ======================================================================
# FilterState
# ======================================================================


class TestFilterState:
    def test_strips_and_drops_blank_selections(self) -> None:
        state = FilterState(
            selected_areas=[" JBR ", "", "  "],
            active_genres=None,
            search_query="  soho  ",
        )
        assert state.selected_areas == ("JBR",)
        assert state.active_genres == ()
        assert state.search_query == "soho"

    def test_scalar_selection_wrapped(self) -> None:
        assert FilterState(active_vibes="Party").active_vibes == ("Party",)

    def test_hashable_and_equal_by_value(self) -> None:
        first = FilterState(active_genres=["Techno"], selected_areas=["JBR"])
        second = FilterState(active_genres=("Techno",), selected_areas=("JBR",))
        assert first == second
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_selection(self) -> None:
        state = FilterState(active_genres=["Techno"], active_vibes=["Party"])
        assert state.selection(Facet.GENRE) == ("Techno",)
        assert state.selection(Facet.VIBE) == ("Party",)
        assert state.selection(Facet.AREA) == ()

    def test_is_default(self) -> None:
        assert FilterState().is_default
        assert FilterState(selected_areas=["  "]).is_default
        assert not FilterState(search_query="x").is_default
        assert not FilterState(active_dates=["17/September/2025"]).is_default


class TestFacetOptions:
    def test_for_facet(self) -> None:
        options = FacetOptions(areas=["JBR"], genres=["Techno"])
        assert options.for_facet(Facet.AREA) == ["JBR"]
        assert options.for_facet(Facet.GENRE) == ["Techno"]
        assert options.for_facet(Facet.DATE) == []


class TestSnapshot:
    def test_record_count(self) -> None:
        snapshot = Snapshot(
            version=3,
            records=(make_record(1), make_record(2)),
            fetched_at=datetime(2025, 9, 17, tzinfo=timezone.utc),
            source_name="memory",
        )
        assert snapshot.record_count == 2
        assert snapshot.records[0].event_date is None

    def test_normalized_date_is_a_date(self) -> None:
        record = make_record(event_date="2025-09-17T22:00:00-04:00")
        assert record.event_date == date(2025, 9, 18)
