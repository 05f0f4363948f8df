"""Supabase record source over the PostgREST HTTP interface.

Reads the ``final_1`` table with the same column selection and row filters
the web app uses: rows must have a venue id and both coordinates, and are
ordered by venue name.  PostgREST caps a single response (1000 rows by
default), so the table is read in ``page_size`` pages until a short page
comes back.
"""

from __future__ import annotations

from typing import Any

import httpx
import structlog

from src.interfaces.record_source import IRecordSource
from src.models.venue import VenueRecord
from src.providers.record_source.rows import parse_rows
from src.utils.errors import SnapshotSourceError

logger = structlog.get_logger(logger_name=__name__)

_DEFAULT_TIMEOUT = 10.0
_DEFAULT_PAGE_SIZE = 1000

SELECT_COLUMNS: tuple[str, ...] = (
    "venue_venue_id",
    "venue_name_original",
    "venue_area",
    "venue_address",
    "venue_country",
    "venue_lat",
    "venue_lng",
    "venue_phone_number",
    "venue_website",
    "venue_category",
    "venue_created_at",
    "venue_final_instagram",
    "event_vibe",
    "event_date",
    "music_genre",
)


class SupabaseRecordSource(IRecordSource):
    """Fetches venue/event rows from a Supabase table.

    Parameters
    ----------
    url:
        Project URL, e.g. ``https://xyz.supabase.co``.
    api_key:
        Anon (or service) key; sent as ``apikey`` and bearer token.
    table:
        Table name, ``final_1`` in production.
    http_client:
        Optional shared client.  When omitted the source creates one and
        closes it in :meth:`close`.
    """

    def __init__(
        self,
        url: str,
        api_key: str,
        table: str = "final_1",
        http_client: httpx.AsyncClient | None = None,
        page_size: int = _DEFAULT_PAGE_SIZE,
    ) -> None:
        self._endpoint = f"{url.rstrip('/')}/rest/v1/{table}"
        self._table = table
        self._page_size = page_size
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(
            timeout=httpx.Timeout(_DEFAULT_TIMEOUT),
        )
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Accept": "application/json",
        }

    # ------------------------------------------------------------------
    # IRecordSource implementation
    # ------------------------------------------------------------------

    async def fetch_records(self) -> list[VenueRecord]:
        rows: list[Any] = []
        offset = 0
        while True:
            page = await self._fetch_page(offset)
            rows.extend(page)
            if len(page) < self._page_size:
                break
            offset += self._page_size

        logger.info("supabase_rows_fetched", table=self._table, rows=len(rows))
        return parse_rows(rows, self.get_provider_name())

    def get_provider_name(self) -> str:
        return "supabase"

    async def close(self) -> None:
        """Close the HTTP client if this source created it."""
        if self._owns_client:
            await self._client.aclose()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _params(self, offset: int) -> dict[str, str]:
        return {
            "select": ",".join(SELECT_COLUMNS),
            "venue_venue_id": "not.is.null",
            "venue_lat": "not.is.null",
            "venue_lng": "not.is.null",
            "order": "venue_name_original.asc",
            "limit": str(self._page_size),
            "offset": str(offset),
        }

    async def _fetch_page(self, offset: int) -> list[Any]:
        try:
            response = await self._client.get(
                self._endpoint,
                params=self._params(offset),
                headers=self._headers,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.TimeoutException as exc:
            raise SnapshotSourceError(
                message=f"Timeout reading {self._table}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        except httpx.HTTPStatusError as exc:
            raise SnapshotSourceError(
                message=f"HTTP {exc.response.status_code} reading {self._table}",
                provider_name=self.get_provider_name(),
            ) from exc
        except httpx.HTTPError as exc:
            raise SnapshotSourceError(
                message=f"HTTP error reading {self._table}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc
        except ValueError as exc:
            raise SnapshotSourceError(
                message=f"Invalid JSON from {self._table}: {exc}",
                provider_name=self.get_provider_name(),
            ) from exc

        if not isinstance(payload, list):
            raise SnapshotSourceError(
                message=f"Expected a JSON array from {self._table}",
                provider_name=self.get_provider_name(),
            )
        return payload
