"""Public interface definitions for vibeMap's external collaborators.

Record sources and the response cache are reached only through the
abstract base classes in this package.  Concrete adapters live in
``src/providers/`` and are wired up in ``src/main.py``.

CONCRETE PROVIDER MAP:
    Interface        ->  Concrete implementations (in src/providers/)
    ----------------------------------------------------------------
    IRecordSource    ->  InMemoryRecordSource, JsonFileRecordSource,
                         SupabaseRecordSource
    ICacheProvider   ->  MemoryCacheProvider
"""

from src.interfaces.cache_provider import ICacheProvider
from src.interfaces.record_source import IRecordSource

__all__ = ["ICacheProvider", "IRecordSource"]
