"""Shared pytest fixtures for the vibeMap test suite."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from src.models.filters import FilterState
from src.models.venue import NormalizedRecord, VenueRecord
from src.services.facet_engine import FacetEngine
from src.services.record_normalizer import normalize_record, normalize_records

# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


@pytest.fixture
def project_root() -> Path:
    """Return the project root directory."""
    return Path(__file__).parent.parent


@pytest.fixture
def sample_snapshot_path(project_root: Path) -> Path:
    """Return the path to the sample ``final_1`` export."""
    return project_root / "tests" / "fixtures" / "sample_snapshot.json"


@pytest.fixture
def sample_rows(sample_snapshot_path: Path) -> list[dict[str, Any]]:
    """Raw rows of the sample export, invalid ones included."""
    return json.loads(sample_snapshot_path.read_text(encoding="utf-8"))


@pytest.fixture
def sample_records(sample_rows: list[dict[str, Any]]) -> list[VenueRecord]:
    """Valid rows of the sample export (9 rows, venues 101-108)."""
    records = []
    for row in sample_rows:
        if row.get("venue_venue_id") is None or row.get("venue_lat") is None:
            continue
        records.append(VenueRecord.model_validate(row))
    return records


@pytest.fixture
def sample_normalized(sample_records: list[VenueRecord]) -> tuple[NormalizedRecord, ...]:
    return normalize_records(sample_records)


@pytest.fixture
def sample_engine(sample_normalized: tuple[NormalizedRecord, ...]) -> FacetEngine:
    return FacetEngine(sample_normalized)


@pytest.fixture
def default_state() -> FilterState:
    return FilterState()


# ---------------------------------------------------------------------------
# Record builders
# ---------------------------------------------------------------------------


def make_venue(
    venue_id: int = 1,
    *,
    name: str = "Test Venue",
    area: str | None = "Dubai Marina",
    category: str | None = "Nightlife",
    vibes: list[str] | None = None,
    genres: list[str] | None = None,
    event_date: str | None = None,
    **extra: Any,
) -> VenueRecord:
    """Build a VenueRecord with sensible defaults for tests."""
    return VenueRecord(
        venue_id=venue_id,
        name=name,
        area=area,
        lat=25.08,
        lng=55.14,
        category=category,
        event_vibe=vibes,
        music_genre=genres,
        event_date=event_date,
        **extra,
    )


def make_record(venue_id: int = 1, **kwargs: Any) -> NormalizedRecord:
    """Build a NormalizedRecord via the real normalizer."""
    return normalize_record(make_venue(venue_id, **kwargs))
