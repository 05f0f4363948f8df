"""Snapshot models -- one immutable, normalized copy of the record source.

A ``Snapshot`` is built once per refresh by
src/services/snapshot_service.py and replaced wholesale on the next one;
nothing mutates it in between, so queries can read it without locking.
"""

from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from src.models.venue import NormalizedRecord


class SnapshotStatus(str, Enum):
    """Lifecycle of the snapshot held by the snapshot service."""

    EMPTY = "empty"              # no refresh attempted yet
    READY = "ready"              # last refresh succeeded
    STALE = "stale"              # last refresh failed; previous snapshot served
    UNAVAILABLE = "unavailable"  # never loaded and the last refresh failed


class Snapshot(BaseModel):
    """Normalized records of one successful refresh."""

    model_config = ConfigDict(frozen=True)

    # Monotonic per service instance; part of the HTTP cache key.
    version: int
    records: tuple[NormalizedRecord, ...] = ()
    fetched_at: datetime = Field(default_factory=lambda: datetime.now(tz=timezone.utc))
    source_name: str = ""

    @property
    def record_count(self) -> int:
        return len(self.records)
