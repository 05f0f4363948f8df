"""Abstract base class for venue record sources.

A record source delivers the flat list of venue/event rows a snapshot is
built from.  Concrete adapters live in ``src/providers/record_source/``:
an in-memory list, a JSON file, and the Supabase ``final_1`` table.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from src.models.venue import VenueRecord


class IRecordSource(ABC):
    """Contract for snapshot record sources.

    Implementations validate rows structurally and skip those lacking an
    identity or coordinates; they never normalize tags or dates.
    """

    @abstractmethod
    async def fetch_records(self) -> list[VenueRecord]:
        """Fetch every row of the source.

        Returns
        -------
        list[VenueRecord]
            Valid rows in source order.

        Raises
        ------
        src.utils.errors.SnapshotSourceError
            If the upstream read or decode fails as a whole.
        """

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier such as ``"supabase"`` or ``"json_file"``."""
