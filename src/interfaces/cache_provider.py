"""Abstract base class for response cache providers.

The HTTP layer may memoize venue and option responses per
``(kind, snapshot version, FilterState)``.  The facet engine never reads
or writes a cache; results are always recomputable from the snapshot.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Hashable
from typing import Any


class ICacheProvider(ABC):
    """Contract for a bounded key-value cache.

    Keys are any hashable value (the API uses tuples whose last element is
    a frozen FilterState).  Operations are async so a network-backed store
    could implement the same contract without blocking the event loop.
    """

    @abstractmethod
    async def get(self, key: Hashable) -> Any | None:
        """Return the value stored under *key*, or ``None`` if absent or expired."""

    @abstractmethod
    async def set(self, key: Hashable, value: Any) -> None:
        """Store *value* under *key*, evicting older entries when full."""

    @abstractmethod
    async def clear(self) -> None:
        """Drop every entry (called after a snapshot refresh)."""

    @abstractmethod
    def get_provider_name(self) -> str:
        """Return a short identifier used in logs and the health endpoint."""
