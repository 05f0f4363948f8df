"""Cache providers.

MemoryCacheProvider memoizes filter responses per snapshot version inside
one process.  For multi-worker deployments a shared backend implementing
ICacheProvider can replace it without touching the routes.
"""

from src.providers.cache.memory_cache import MemoryCacheProvider

__all__ = ["MemoryCacheProvider"]
