"""vibeMap domain models -- re-exports all public model classes.

The models are organized across four submodules by concern:
    - category.py  -- CategoryProfile returned by the category normalizer
    - filters.py   -- Facet, FilterState, FacetOptions, FacetQueryResult
    - snapshot.py  -- Snapshot and SnapshotStatus
    - venue.py     -- VenueRecord, TagSet, NormalizedRecord

If you add a new model class, remember to add it to ``__all__`` too.
"""

from __future__ import annotations

from src.models.category import CategoryProfile
from src.models.filters import Facet, FacetOptions, FacetQueryResult, FilterState
from src.models.snapshot import Snapshot, SnapshotStatus
from src.models.venue import NormalizedRecord, TagSet, VenueRecord
from src.utils.date_canonicalizer import DateFormat

__all__ = [
    "CategoryProfile",
    "DateFormat",
    "Facet",
    "FacetOptions",
    "FacetQueryResult",
    "FilterState",
    "NormalizedRecord",
    "Snapshot",
    "SnapshotStatus",
    "TagSet",
    "VenueRecord",
]
