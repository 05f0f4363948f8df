"""vibeMap FastAPI application entry point.

Wires the record source, snapshot service, response cache and routes
together.  Loads configuration from ``.env`` and ``config/config.yaml``,
configures structured logging, and loads the first snapshot on startup.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import Any

import httpx
import structlog
import uvicorn
from fastapi import FastAPI

from src.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from src.api.routes import router as api_router
from src.config.loader import load_config
from src.config.settings import Settings
from src.interfaces.record_source import IRecordSource
from src.providers.cache.memory_cache import MemoryCacheProvider
from src.providers.record_source.json_file_provider import JsonFileRecordSource
from src.providers.record_source.supabase_provider import SupabaseRecordSource
from src.services.snapshot_service import SnapshotService
from src.utils.date_canonicalizer import DateFormat
from src.utils.errors import ConfigurationError, SnapshotUnavailableError
from src.utils.logging import configure_logging, get_logger

# ---------------------------------------------------------------------------
# Module-level settings & logging
# ---------------------------------------------------------------------------

settings = Settings()

configure_logging(log_level=settings.log_level, app_env=settings.app_env)
_logger: structlog.BoundLogger = get_logger(__name__)


# ---------------------------------------------------------------------------
# Component assembly
# ---------------------------------------------------------------------------


def _build_record_source(
    app_settings: Settings, http_client: httpx.AsyncClient
) -> IRecordSource:
    """Supabase when both credentials are set, otherwise the JSON snapshot file."""
    if app_settings.get_snapshot_source_name() == "supabase":
        return SupabaseRecordSource(
            url=app_settings.supabase_url,
            api_key=app_settings.supabase_anon_key,
            table=app_settings.supabase_table,
            http_client=http_client,
        )
    return JsonFileRecordSource(app_settings.snapshot_path)


def _resolve_date_format(value: str) -> DateFormat:
    try:
        return DateFormat(value.strip().lower())
    except ValueError as exc:
        raise ConfigurationError(
            message=f"DEFAULT_DATE_FORMAT must be 'long' or 'short', got {value!r}"
        ) from exc


def _build_all(
    app_settings: Settings,
    app_config: dict[str, Any],
    record_source: IRecordSource | None = None,
) -> dict[str, Any]:
    """Construct every component of the application.

    Returns a flat dict of named components to be stored on ``app.state``.
    """
    http_client = httpx.AsyncClient(timeout=app_settings.snapshot_timeout_seconds)
    source = record_source or _build_record_source(app_settings, http_client)

    cache_config = app_config.get("cache", {})
    response_cache = None
    if cache_config.get("enabled", True):
        response_cache = MemoryCacheProvider(
            max_entries=int(cache_config.get("max_entries", app_settings.cache_max_entries)),
            ttl=int(cache_config.get("ttl", app_settings.cache_ttl_seconds)),
        )

    return {
        "http_client": http_client,
        "record_source": source,
        "snapshot_service": SnapshotService(
            source, timeout_seconds=app_settings.snapshot_timeout_seconds
        ),
        "response_cache": response_cache,
        "default_date_format": _resolve_date_format(app_settings.default_date_format),
        "app_version": str(app_config.get("app", {}).get("version", "0.1.0")),
    }


# ---------------------------------------------------------------------------
# FastAPI application factory
# ---------------------------------------------------------------------------


def create_app(
    app_settings: Settings | None = None,
    record_source: IRecordSource | None = None,
    config_path: str = "config/config.yaml",
) -> FastAPI:
    """Build and configure the FastAPI application.

    Args:
        app_settings: Settings to use; the module-level instance by default.
        record_source: Overrides the configured record source (tests).
        config_path: YAML configuration file.
    """
    app_settings = app_settings or settings
    app_config = load_config(config_path, settings=app_settings)

    @asynccontextmanager
    async def _lifespan(application: FastAPI):  # noqa: ANN202
        components = _build_all(app_settings, app_config, record_source)
        for key, value in components.items():
            setattr(application.state, key, value)

        service: SnapshotService = components["snapshot_service"]
        if app_config.get("snapshot", {}).get("refresh_on_startup", True):
            try:
                await service.refresh()
            except SnapshotUnavailableError as exc:
                # Served as 503 / empty options until a refresh succeeds.
                _logger.warning("startup_snapshot_unavailable", error=str(exc))

        _logger.info(
            "app_startup",
            version=components["app_version"],
            environment=app_settings.app_env,
            source=components["record_source"].get_provider_name(),
            snapshot_status=service.status.value,
        )

        yield

        http_client: httpx.AsyncClient = components["http_client"]
        await http_client.aclose()
        _logger.info("app_shutdown", message="HTTP client closed")

    application = FastAPI(
        title="vibeMap API",
        version=str(app_config.get("app", {}).get("version", "0.1.0")),
        description=(
            "Faceted venue and event filtering for the vibeMap map: filter by "
            "area, vibe, date and music genre, and get the options still "
            "available in every facet."
        ),
        lifespan=_lifespan,
    )

    # -- Middleware (order matters: last added = first executed) --
    application.add_middleware(ErrorHandlingMiddleware)
    application.add_middleware(RequestLoggingMiddleware)
    configure_cors(
        application,
        allowed_origins=app_config.get("app", {}).get("cors_allowed_origins"),
    )

    application.include_router(api_router)
    return application


app = create_app()

# ---------------------------------------------------------------------------
# CLI entry point
# ---------------------------------------------------------------------------

if __name__ == "__main__":
    uvicorn.run(
        "src.main:app",
        host=settings.app_host,
        port=settings.app_port,
        reload=(settings.app_env == "development"),
    )
