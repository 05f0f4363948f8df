"""In-memory record source for tests and embedding."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from src.interfaces.record_source import IRecordSource
from src.models.venue import VenueRecord
from src.providers.record_source.rows import parse_rows


class InMemoryRecordSource(IRecordSource):
    """Serves a fixed list of rows (dicts or VenueRecords).

    Rows are validated on every fetch, so a test can mutate ``rows`` between
    refreshes to simulate upstream changes.
    """

    def __init__(self, rows: Iterable[dict[str, Any] | VenueRecord] = ()) -> None:
        self.rows: list[dict[str, Any] | VenueRecord] = list(rows)

    async def fetch_records(self) -> list[VenueRecord]:
        raw = [row.model_dump() if isinstance(row, VenueRecord) else row for row in self.rows]
        return parse_rows(raw, self.get_provider_name())

    def get_provider_name(self) -> str:
        return "memory"
