"""Venue record models for vibeMap.

Defines the Pydantic v2 model for one upstream venue/event row and its
normalized, filter-ready counterpart.  All models use frozen config to
enforce immutability.

    1. A record source reads a raw row         → VenueRecord
    2. The record normalizer prepares it       → NormalizedRecord (TagSet x2)
    3. The facet engine filters and dedupes    → VenueRecord.display_payload()

Upstream rows come from the ``final_1`` table, whose columns carry a
``venue_`` prefix (``venue_venue_id``, ``venue_name_original`` ...).  The API
and the JSON snapshot use the flattened names (``venue_id``, ``name`` ...).
``VenueRecord`` accepts either spelling so every source can share one model.
"""

from __future__ import annotations

import datetime

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from src.utils.text_normalizer import fold

DEFAULT_COUNTRY = "UAE"

# Fields used only for filtering; they are stripped from the public payload.
FILTER_ONLY_FIELDS: frozenset[str] = frozenset({"event_vibe", "event_date", "music_genre"})


# ---------------------------------------------------------------------------
# VenueRecord -- one row of the flat record source.
# ---------------------------------------------------------------------------
class VenueRecord(BaseModel):
    """One venue/event row as delivered by a record source.

    A venue hosting several events appears once per event, so ``venue_id``
    is not unique across a snapshot; the deduplicator collapses repeats
    after filtering.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    # Identity used for deduplication.  Rows without it never get this far.
    venue_id: int = Field(validation_alias=AliasChoices("venue_id", "venue_venue_id"))
    name: str = Field(default="", validation_alias=AliasChoices("name", "venue_name_original"))
    # Display casing is kept here; matching uses NormalizedRecord.area_key.
    area: str | None = Field(default=None, validation_alias=AliasChoices("area", "venue_area"))
    address: str | None = Field(
        default=None, validation_alias=AliasChoices("address", "venue_address")
    )
    country: str = Field(
        default=DEFAULT_COUNTRY, validation_alias=AliasChoices("country", "venue_country")
    )
    lat: float = Field(validation_alias=AliasChoices("lat", "venue_lat"))
    lng: float = Field(validation_alias=AliasChoices("lng", "venue_lng"))
    phone: str | None = Field(
        default=None, validation_alias=AliasChoices("phone", "venue_phone_number")
    )
    website: str | None = Field(
        default=None, validation_alias=AliasChoices("website", "venue_website")
    )
    category: str | None = Field(
        default=None, validation_alias=AliasChoices("category", "venue_category")
    )
    created_at: str | None = Field(
        default=None, validation_alias=AliasChoices("created_at", "venue_created_at")
    )
    final_instagram: str | None = Field(
        default=None, validation_alias=AliasChoices("final_instagram", "venue_final_instagram")
    )

    # --- Filtering-only columns --------------------------------------------
    # Each element may itself be a compound "Techno|Deep House" string.
    event_vibe: tuple[str, ...] | None = None
    # ISO timestamp as stored upstream, e.g. "2025-09-17T00:00:00+00:00".
    event_date: str | None = None
    music_genre: tuple[str, ...] | None = None

    @field_validator("name", mode="before")
    @classmethod
    def _name_not_null(cls, value: object) -> object:
        return "" if value is None else value

    @field_validator("country", mode="before")
    @classmethod
    def _default_country(cls, value: object) -> object:
        # Upstream stores NULL or "" for most Dubai rows.
        return value or DEFAULT_COUNTRY

    @field_validator("event_vibe", "music_genre", mode="before")
    @classmethod
    def _wrap_scalar_tags(cls, value: object) -> object:
        if isinstance(value, str):
            return (value,)
        if isinstance(value, list):
            return tuple(item for item in value if isinstance(item, str))
        return value

    @field_validator("event_date", "created_at", mode="before")
    @classmethod
    def _stringify_timestamp(cls, value: object) -> object:
        if isinstance(value, (datetime.date, datetime.datetime)):
            return value.isoformat()
        return value

    def display_payload(self) -> dict:
        """Return the public display shape (filter-only fields removed)."""
        return self.model_dump(exclude=set(FILTER_ONLY_FIELDS))


# ---------------------------------------------------------------------------
# TagSet -- hierarchical vibe/genre tags of one record.
# ---------------------------------------------------------------------------
class TagSet(BaseModel):
    """Primaries and their secondaries for one record and one taxonomy.

    ``index`` holds every primary and secondary folded, so a selection
    matches when its folded form is a member.  Build instances through
    :meth:`build` so the index can never disagree with the tags.
    """

    model_config = ConfigDict(frozen=True)

    primaries: frozenset[str] = frozenset()
    secondaries_by_primary: dict[str, frozenset[str]] = Field(default_factory=dict)
    index: frozenset[str] = frozenset()

    @classmethod
    def build(cls, pairs: list[tuple[str, str | None]]) -> TagSet:
        """Build a TagSet from ``(primary, secondary)`` pairs.

        Pairs with an empty primary are ignored; ``secondary`` may be None
        when the tag itself was a primary.
        """
        primaries: set[str] = set()
        secondaries: dict[str, set[str]] = {}
        for primary, secondary in pairs:
            if not primary:
                continue
            primaries.add(primary)
            bucket = secondaries.setdefault(primary, set())
            if secondary:
                bucket.add(secondary)

        frozen = {key: frozenset(values) for key, values in secondaries.items()}
        index = {fold(tag) for tag in primaries}
        for values in frozen.values():
            index.update(fold(tag) for tag in values)
        return cls(
            primaries=frozenset(primaries),
            secondaries_by_primary=frozen,
            index=frozenset(index),
        )

    @property
    def is_empty(self) -> bool:
        return not self.primaries

    def all_tags(self) -> set[str]:
        """Every primary and secondary, in their canonical spelling."""
        result = set(self.primaries)
        for secondaries in self.secondaries_by_primary.values():
            result.update(secondaries)
        return result

    def contains(self, folded_tag: str) -> bool:
        """Return True when *folded_tag* is one of this set's tags."""
        return folded_tag in self.index


# ---------------------------------------------------------------------------
# NormalizedRecord -- the filter-ready view of a VenueRecord.
# ---------------------------------------------------------------------------
class NormalizedRecord(BaseModel):
    """A VenueRecord plus the canonical forms the matcher compares against."""

    model_config = ConfigDict(frozen=True)

    record: VenueRecord
    # Casefolded, whitespace-collapsed area ("" when the row has none).
    area_key: str = ""
    vibe: TagSet = Field(default_factory=TagSet)
    genre: TagSet = Field(default_factory=TagSet)
    # UTC calendar day of record.event_date, None when absent or unparseable.
    event_date: datetime.date | None = None

    @property
    def venue_id(self) -> int:
        return self.record.venue_id
