"""JSON file record source.

Reads a snapshot exported from the ``/api/venues`` route or straight from
the ``final_1`` table.  Accepted shapes:

- a JSON array of row objects;
- an envelope ``{"data": [...]}`` as returned by the API.

Column names may be either the flattened API names or the table names;
see :class:`src.models.venue.VenueRecord`.
"""

from __future__ import annotations

import asyncio
import json
from pathlib import Path
from typing import Any

import structlog

from src.interfaces.record_source import IRecordSource
from src.models.venue import VenueRecord
from src.providers.record_source.rows import parse_rows
from src.utils.errors import SnapshotSourceError

logger = structlog.get_logger(logger_name=__name__)


class JsonFileRecordSource(IRecordSource):
    """Loads venue rows from a JSON file on disk."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    async def fetch_records(self) -> list[VenueRecord]:
        # File I/O and JSON decoding run off the event loop.
        payload = await asyncio.to_thread(self._read_payload)
        rows = self._unwrap(payload)
        logger.info("json_snapshot_read", path=str(self._path), rows=len(rows))
        return parse_rows(rows, self.get_provider_name())

    def get_provider_name(self) -> str:
        return "json_file"

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _read_payload(self) -> Any:
        try:
            with open(self._path, encoding="utf-8") as handle:
                return json.load(handle)
        except FileNotFoundError as exc:
            raise SnapshotSourceError(
                message=f"Snapshot file not found: {self._path}",
                provider_name=self.get_provider_name(),
            ) from exc
        except (OSError, ValueError) as exc:
            # ValueError covers JSONDecodeError and UnicodeDecodeError.
            raise SnapshotSourceError(
                message=f"Could not read snapshot file {self._path}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

    def _unwrap(self, payload: Any) -> list[Any]:
        if isinstance(payload, dict) and isinstance(payload.get("data"), list):
            return payload["data"]
        if isinstance(payload, list):
            return payload
        raise SnapshotSourceError(
            message=(
                f"Snapshot file {self._path} must hold a JSON array "
                "or an object with a 'data' array"
            ),
            provider_name=self.get_provider_name(),
        )
