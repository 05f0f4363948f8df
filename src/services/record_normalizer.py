"""Turns raw VenueRecords into filter-ready NormalizedRecords."""

from __future__ import annotations

from collections.abc import Iterable

from src.config.taxonomy import Taxonomy
from src.models.venue import NormalizedRecord, TagSet, VenueRecord
from src.services.category_normalizer import classify
from src.utils.date_canonicalizer import canonicalize
from src.utils.text_normalizer import fold, split_tag_list


def build_tag_set(taxonomy: Taxonomy, values: Iterable[str | None] | None) -> TagSet:
    """Split compound tag strings and classify every atomic tag.

    ``["Techno|Deep House", "Open Format"]`` becomes primaries
    ``{"Electronic", "Mixed"}`` with secondaries
    ``{"Electronic": {"Techno", "Deep House"}, "Mixed": {"Open Format"}}``.
    """
    pairs: list[tuple[str, str | None]] = []
    for tag in split_tag_list(values):
        profile = classify(taxonomy, tag)
        pairs.append((profile.primary, profile.secondary))
    return TagSet.build(pairs)


def normalize_record(record: VenueRecord) -> NormalizedRecord:
    # Record dates follow the UTC calendar rule (see date_canonicalizer).
    return NormalizedRecord(
        record=record,
        area_key=fold(record.area),
        vibe=build_tag_set(Taxonomy.VIBE, record.event_vibe),
        genre=build_tag_set(Taxonomy.GENRE, record.music_genre),
        event_date=canonicalize(record.event_date),
    )


def normalize_records(records: Iterable[VenueRecord]) -> tuple[NormalizedRecord, ...]:
    return tuple(normalize_record(record) for record in records)
