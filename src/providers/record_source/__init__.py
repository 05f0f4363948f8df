"""Record sources the snapshot service can refresh from.

- InMemoryRecordSource -- fixed rows, for tests and embedding.
- JsonFileRecordSource -- an exported snapshot on disk (development, CLI).
- SupabaseRecordSource -- the live ``final_1`` table via PostgREST.
"""

from src.providers.record_source.json_file_provider import JsonFileRecordSource
from src.providers.record_source.memory_provider import InMemoryRecordSource
from src.providers.record_source.rows import parse_rows
from src.providers.record_source.supabase_provider import SupabaseRecordSource

__all__ = ["InMemoryRecordSource", "JsonFileRecordSource", "SupabaseRecordSource", "parse_rows"]
