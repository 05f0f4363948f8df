"""YAML configuration loader with environment variable overrides.

# ─── CONFIGURATION HIERARCHY (Junior Developer Guide) ──────────────────
#
# Configuration is loaded in layers (later layers override earlier):
#
#   1. config/config.yaml  -- Static defaults checked into the repo
#   2. .env file           -- Local developer overrides (not committed)
#   3. Environment vars    -- Set at deploy time
#
# The load_config() function reads the YAML file first, then deep-merges
# environment-based values on top.  This means you can set a default in
# config.yaml and override it per-environment via env vars.
#
# The _deep_merge helper does recursive dict merging:
#   base = {"snapshot": {"refresh_on_startup": True}}
#   overrides = {"snapshot": {"source": "supabase"}}
#   result = {"snapshot": {"refresh_on_startup": True, "source": "supabase"}}
# ──────────────────────────────────────────────────────────────────────
"""

from pathlib import Path

import yaml

from src.config.settings import Settings


def load_config(path: str = "config/config.yaml", settings: Settings | None = None) -> dict:
    """Load YAML config and merge with environment-based Settings.

    Environment variables (via Settings) override YAML values where keys overlap.

    Args:
        path: Path to the YAML configuration file.
        settings: Settings instance to merge; a fresh one is built when omitted.

    Returns:
        Fully resolved configuration dictionary.
    """
    config_path = Path(path)
    if config_path.exists():
        with open(config_path) as f:
            yaml_config = yaml.safe_load(f) or {}
    else:
        yaml_config = {}

    settings = settings or Settings()
    env_overrides = {
        "app": {
            "host": settings.app_host,
            "port": settings.app_port,
            "env": settings.app_env,
        },
        "snapshot": {
            "source": settings.get_snapshot_source_name(),
            "path": settings.snapshot_path,
            "table": settings.supabase_table,
            "timeout_seconds": settings.snapshot_timeout_seconds,
        },
        "filters": {
            "default_date_format": settings.default_date_format,
        },
        "cache": {
            "ttl": settings.cache_ttl_seconds,
            "max_entries": settings.cache_max_entries,
        },
        "logging": {
            "level": settings.log_level,
        },
    }

    _deep_merge(yaml_config, env_overrides)
    return yaml_config


def _deep_merge(base: dict, overrides: dict) -> None:
    """Recursively merge overrides into base dict, mutating base in place."""
    for key, value in overrides.items():
        if key in base and isinstance(base[key], dict) and isinstance(value, dict):
            _deep_merge(base[key], value)
        else:
            base[key] = value
