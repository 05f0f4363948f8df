"""In-memory response cache using cachetools.TTLCache.

Entries expire after a uniform TTL and the least recently used entry is
evicted once ``max_entries`` is reached.  Not shared across worker
processes; each uvicorn worker keeps its own.
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Any

import structlog
from cachetools import TTLCache

from src.interfaces.cache_provider import ICacheProvider

logger = structlog.get_logger(logger_name=__name__)


class MemoryCacheProvider(ICacheProvider):
    """Response cache backed by ``cachetools.TTLCache``.

    Parameters
    ----------
    max_entries:
        Maximum number of cached responses.
    ttl:
        Seconds an entry stays valid.
    """

    def __init__(self, max_entries: int = 512, ttl: int = 60) -> None:
        self._cache: TTLCache[Hashable, Any] = TTLCache(maxsize=max_entries, ttl=ttl)

    async def get(self, key: Hashable) -> Any | None:
        value = self._cache.get(key)
        logger.debug("cache_hit" if value is not None else "cache_miss", kind=_kind(key))
        return value

    async def set(self, key: Hashable, value: Any) -> None:
        self._cache[key] = value

    async def clear(self) -> None:
        dropped = len(self._cache)
        self._cache.clear()
        logger.debug("cache_cleared", dropped=dropped)

    def get_provider_name(self) -> str:
        return "memory"

    def __len__(self) -> int:
        return len(self._cache)


def _kind(key: Hashable) -> str:
    # Keys are (kind, version, state) tuples; log only the kind.
    if isinstance(key, tuple) and key:
        return str(key[0])
    return type(key).__name__
