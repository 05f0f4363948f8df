"""Snapshot service -- owns the current normalized snapshot.

Refresh sequence:

    1. Acquire the refresh lock (one refresh at a time).
    2. Fetch rows from the record source under ``timeout_seconds``.
    3. Normalize every row into a new, immutable Snapshot.
    4. Swap ``self._snapshot`` (and the engine built over it) in one step.

Queries never take the lock.  A query that started before step 4 keeps
using the engine it was handed; one that starts after sees the new one.
No query can observe a half-built snapshot.

A failed refresh raises :class:`SnapshotUnavailableError` and leaves the
previous snapshot in place (status STALE), or reports UNAVAILABLE when
nothing was ever loaded.  There are no retries; the caller decides when to
try again.
"""

from __future__ import annotations

import asyncio
import itertools
from datetime import datetime, timezone

from src.interfaces.record_source import IRecordSource
from src.models.snapshot import Snapshot, SnapshotStatus
from src.services.facet_engine import FacetEngine
from src.services.record_normalizer import normalize_records
from src.utils.errors import SnapshotSourceError, SnapshotUnavailableError
from src.utils.logging import get_logger


class SnapshotService:
    """Holds the latest snapshot and refreshes it from a record source."""

    def __init__(self, source: IRecordSource, timeout_seconds: float = 10.0) -> None:
        self._source = source
        self._timeout = timeout_seconds
        self._logger = get_logger(__name__)
        self._lock = asyncio.Lock()
        self._versions = itertools.count(1)

        self._snapshot: Snapshot | None = None
        self._engine: FacetEngine = FacetEngine.empty()
        self._status = SnapshotStatus.EMPTY
        self._last_error: str | None = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def source(self) -> IRecordSource:
        return self._source

    @property
    def snapshot(self) -> Snapshot | None:
        return self._snapshot

    @property
    def status(self) -> SnapshotStatus:
        return self._status

    @property
    def last_error(self) -> str | None:
        return self._last_error

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def engine(self) -> FacetEngine:
        """Return the engine over the current snapshot (empty when none)."""
        return self._engine

    def current(self) -> tuple[Snapshot | None, FacetEngine]:
        """Return the snapshot and its engine as one consistent pair."""
        return self._snapshot, self._engine

    async def refresh(self) -> Snapshot:
        """Fetch, normalize and install a new snapshot.

        Raises:
            SnapshotUnavailableError: The source failed or timed out.
        """
        provider = self._source.get_provider_name()
        async with self._lock:
            try:
                records = await asyncio.wait_for(
                    self._source.fetch_records(), timeout=self._timeout
                )
            except asyncio.TimeoutError as exc:
                self._mark_failed(f"Timed out after {self._timeout:g}s", provider)
                raise SnapshotUnavailableError(
                    message=f"Snapshot refresh timed out after {self._timeout:g}s",
                    provider_name=provider,
                ) from exc
            except SnapshotSourceError as exc:
                self._mark_failed(exc.message, provider)
                raise SnapshotUnavailableError(
                    message=f"Snapshot refresh failed: {exc.message}",
                    provider_name=provider,
                ) from exc

            snapshot = Snapshot(
                version=next(self._versions),
                records=normalize_records(records),
                fetched_at=datetime.now(tz=timezone.utc),
                source_name=provider,
            )
            engine = FacetEngine(snapshot.records)

            self._snapshot, self._engine = snapshot, engine
            self._status = SnapshotStatus.READY
            self._last_error = None

        self._logger.info(
            "snapshot_refreshed",
            provider=provider,
            version=snapshot.version,
            records=snapshot.record_count,
        )
        return snapshot

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    def _mark_failed(self, reason: str, provider: str) -> None:
        self._last_error = reason
        self._status = (
            SnapshotStatus.STALE if self._snapshot is not None else SnapshotStatus.UNAVAILABLE
        )
        self._logger.warning(
            "snapshot_refresh_failed",
            provider=provider,
            reason=reason,
            status=self._status.value,
            serving_version=self._snapshot.version if self._snapshot else None,
        )
