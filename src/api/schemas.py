"""Pydantic response schemas for the vibeMap API.

The venue and option envelopes keep the ``{success, data, message}``
shape the web client already consumes; failures carry ``error`` instead
of ``message``.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from src.models.filters import FacetOptions


class VenueListResponse(BaseModel):
    """Filtered, deduplicated venues in display shape."""

    success: bool = True
    data: list[dict[str, Any]] = Field(default_factory=list)
    message: str | None = None
    error: str | None = None


class FilterOptionsResponse(BaseModel):
    """Exclude-self option lists for every facet."""

    success: bool = True
    data: FacetOptions = Field(default_factory=FacetOptions)
    message: str | None = None


class CategoryLegendEntry(BaseModel):
    key: str
    display: str
    color: str
    hex: str
    secondaries: list[str] = Field(default_factory=list)


class CategoriesResponse(BaseModel):
    """Category legend per taxonomy (venue_category, genre, vibe)."""

    success: bool = True
    data: dict[str, list[CategoryLegendEntry]] = Field(default_factory=dict)


class SnapshotInfo(BaseModel):
    status: str
    version: int | None = None
    records: int = 0
    source: str | None = None
    fetched_at: datetime | None = None
    last_error: str | None = None


class HealthResponse(BaseModel):
    """Application health check response."""

    status: str
    version: str
    snapshot: SnapshotInfo
    cache: str | None = None


class RefreshResponse(BaseModel):
    """Result of a manual snapshot refresh."""

    success: bool
    snapshot: SnapshotInfo
    error: str | None = None


class ErrorResponse(BaseModel):
    """Standard error response body."""

    error: str
    detail: str | None = None
