"""Application settings loaded from environment variables via pydantic-settings.

# ─── HOW SETTINGS WORK (Junior Developer Guide) ───────────────────────
#
# This class uses pydantic-settings to automatically read configuration
# from TWO sources (in priority order):
#
#   1. **Environment variables** -- e.g., SUPABASE_URL=https://xyz.supabase.co
#      (highest priority -- always wins)
#   2. **.env file** -- key=value lines in the project root .env file
#      (lower priority -- used for local development)
#
# The mapping is automatic: field name `supabase_anon_key` maps to env var
# `SUPABASE_ANON_KEY` (pydantic-settings uppercases and matches).
#
# Default values are used when neither an env var nor .env entry exists.
# Use .env.example as a template showing what variables are available.
# ──────────────────────────────────────────────────────────────────────
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """vibeMap application settings.

    Environment variables override defaults. Loaded from .env file when present.
    """

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    # === Snapshot source ===
    # The Supabase source is used when both values are set; otherwise the
    # JSON file at snapshot_path is loaded (development / offline demos).
    supabase_url: str = ""
    supabase_anon_key: str = ""
    supabase_table: str = "final_1"
    snapshot_path: str = "data/snapshot.json"
    snapshot_timeout_seconds: float = 10.0

    # === Filtering ===
    default_date_format: str = "long"  # "long" = 17/September/2025, "short" = 17 Sept 25

    # === Response cache (HTTP layer only) ===
    cache_ttl_seconds: int = 60
    cache_max_entries: int = 512

    # === App Config ===
    app_host: str = "0.0.0.0"
    app_port: int = 8000
    app_env: str = "development"
    log_level: str = "INFO"

    def get_snapshot_source_name(self) -> str:
        """Return which record source the configured values select."""
        if self.supabase_url and self.supabase_anon_key:
            return "supabase"
        return "json_file"
