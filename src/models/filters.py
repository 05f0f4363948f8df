"""Filter state and facet result models.

``FilterState`` is the value a caller passes on every query; it is frozen
and hashable so the HTTP layer can key a response cache on it.
``FacetOptions`` and ``FacetQueryResult`` are pure derivations of a
snapshot and a state and are never cached by the engine itself.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

from src.models.venue import VenueRecord
from src.utils.date_canonicalizer import DateFormat


class Facet(str, Enum):
    """The four filterable dimensions.  Values double as response keys."""

    AREA = "areas"
    VIBE = "vibes"
    DATE = "dates"
    GENRE = "genres"


# Facet -> FilterState field holding that facet's selection.
_SELECTION_FIELDS: dict[Facet, str] = {
    Facet.AREA: "selected_areas",
    Facet.VIBE: "active_vibes",
    Facet.DATE: "active_dates",
    Facet.GENRE: "active_genres",
}


class FilterState(BaseModel):
    """Active selections across all facets plus the free-text query.

    Every selection is a tuple of trimmed, non-blank strings.  An empty tuple
    means the facet is unconstrained; so does an area selection containing
    "All Dubai" (see src/config/taxonomy.py ALL_AREAS_SENTINELS).
    """

    model_config = ConfigDict(frozen=True)

    selected_areas: tuple[str, ...] = ()
    active_vibes: tuple[str, ...] = ()
    # Literal dates as the UI sends them ("17/September/2025" or "17 Sept 25").
    active_dates: tuple[str, ...] = ()
    active_genres: tuple[str, ...] = ()
    search_query: str = ""
    # Format the date facet's options are rendered in.  It does not affect
    # matching: both literal formats are accepted as selections.
    date_format: DateFormat = DateFormat.LONG

    @field_validator(
        "selected_areas", "active_vibes", "active_dates", "active_genres", mode="before"
    )
    @classmethod
    def _drop_blank(cls, value: object) -> object:
        if value is None:
            return ()
        if isinstance(value, str):
            value = [value]
        if isinstance(value, (list, tuple, set, frozenset)):
            return tuple(
                item.strip() for item in value if isinstance(item, str) and item.strip()
            )
        return value

    @field_validator("search_query", mode="before")
    @classmethod
    def _strip_query(cls, value: object) -> object:
        if value is None:
            return ""
        if isinstance(value, str):
            return value.strip()
        return value

    def selection(self, facet: Facet) -> tuple[str, ...]:
        """Return the active selection for *facet*."""
        return getattr(self, _SELECTION_FIELDS[facet])

    @property
    def is_default(self) -> bool:
        """True when no facet is selected and the search query is blank."""
        return not self.search_query and not any(
            self.selection(facet) for facet in Facet
        )


class FacetOptions(BaseModel):
    """Selectable values per facet, each list ordered and duplicate-free."""

    model_config = ConfigDict(frozen=True)

    areas: list[str] = Field(default_factory=list)
    vibes: list[str] = Field(default_factory=list)
    dates: list[str] = Field(default_factory=list)
    genres: list[str] = Field(default_factory=list)

    def for_facet(self, facet: Facet) -> list[str]:
        return getattr(self, facet.value)


class FacetQueryResult(BaseModel):
    """Filtered venues and facet options computed from one snapshot."""

    model_config = ConfigDict(frozen=True)

    venues: list[VenueRecord] = Field(default_factory=list)
    options: FacetOptions = Field(default_factory=FacetOptions)
    # Matching rows before the per-venue dedupe; one venue can host many events.
    total_before_dedup: int = 0
