"""FastAPI routes for vibeMap.

Serves the faceted venue list and the per-facet option lists the map UI
renders, plus the category legend, a health check and a manual snapshot
refresh.  Services are resolved from ``app.state`` via ``Depends`` using
the ``Annotated`` pattern.

# --- API ROUTE MAP ----------------------------------------------------
#
# Endpoint                 Method  Description
# ---------------------------------------------------------------------
# /api/venues              GET     Filtered, deduplicated venues
# /api/filter-options      GET     Exclude-self options per facet
# /api/categories          GET     Category legend per taxonomy
# /api/health              GET     Health + snapshot status
# /api/snapshot/refresh    POST    Reload the snapshot now
#
# Query parameters (venues and filter-options):
#   areas, vibes, genres   comma-separated; "All Dubai" means no constraint
#   dates                  comma- or pipe-separated literals; values that
#                          are not dates are dropped
#   q                      free-text search (venues only)
#   date_format            long | short, format of the date options
# ---------------------------------------------------------------------
"""

from __future__ import annotations

from collections.abc import Hashable
from typing import Annotated, Any

import structlog
from fastapi import APIRouter, Depends, Query, Request
from fastapi.responses import JSONResponse

from src.api.schemas import (
    CategoriesResponse,
    CategoryLegendEntry,
    FilterOptionsResponse,
    HealthResponse,
    RefreshResponse,
    SnapshotInfo,
    VenueListResponse,
)
from src.config.taxonomy import ALL_AREAS_SENTINELS, Taxonomy
from src.interfaces.cache_provider import ICacheProvider
from src.models.filters import FacetOptions, FilterState
from src.models.snapshot import SnapshotStatus
from src.services.category_normalizer import category_legend
from src.services.snapshot_service import SnapshotService
from src.utils.date_canonicalizer import DateFormat, canonicalize
from src.utils.errors import SnapshotUnavailableError
from src.utils.logging import get_logger
from src.utils.text_normalizer import fold

_logger: structlog.BoundLogger = get_logger(__name__)

router = APIRouter(prefix="/api")

_UNAVAILABLE_MESSAGE = "Venue data is temporarily unavailable"


# ---------------------------------------------------------------------------
# Dependencies
# ---------------------------------------------------------------------------

def _get_snapshot_service(request: Request) -> SnapshotService:
    return request.app.state.snapshot_service


def _get_response_cache(request: Request) -> ICacheProvider | None:
    return getattr(request.app.state, "response_cache", None)


def _get_default_date_format(request: Request) -> DateFormat:
    return getattr(request.app.state, "default_date_format", DateFormat.LONG)


SnapshotServiceDep = Annotated[SnapshotService, Depends(_get_snapshot_service)]
CacheDep = Annotated[ICacheProvider | None, Depends(_get_response_cache)]
DefaultDateFormatDep = Annotated[DateFormat, Depends(_get_default_date_format)]


# ---------------------------------------------------------------------------
# Query parsing
# ---------------------------------------------------------------------------

def split_csv(raw: str | None) -> list[str]:
    """Split a comma-separated query value, dropping blank items."""
    if not raw:
        return []
    return [part.strip() for part in raw.split(",") if part.strip()]


def parse_areas(raw: str | None) -> list[str]:
    return [area for area in split_csv(raw) if fold(area) not in ALL_AREAS_SENTINELS]


def parse_dates(raw: str | None) -> list[str]:
    """Split dates on commas and pipes, keeping only values that parse.

    The web client sometimes sends several dates glued together with ``|``;
    those are separated here rather than rejected.
    """
    kept: list[str] = []
    for part in split_csv(raw):
        for piece in part.split("|"):
            piece = piece.strip()
            if not piece:
                continue
            if canonicalize(piece) is None:
                _logger.info("date_selection_dropped", value=piece)
                continue
            kept.append(piece)
    return kept


def build_filter_state(
    *,
    areas: str | None = None,
    vibes: str | None = None,
    dates: str | None = None,
    genres: str | None = None,
    q: str | None = None,
    date_format: DateFormat = DateFormat.LONG,
) -> FilterState:
    """Build a FilterState from raw query-string values."""
    return FilterState(
        selected_areas=parse_areas(areas),
        active_vibes=split_csv(vibes),
        active_dates=parse_dates(dates),
        active_genres=split_csv(genres),
        search_query=q or "",
        date_format=date_format,
    )


# ---------------------------------------------------------------------------
# Cache helpers
# ---------------------------------------------------------------------------

async def _cached(cache: ICacheProvider | None, key: Hashable) -> Any | None:
    if cache is None:
        return None
    return await cache.get(key)


async def _store(cache: ICacheProvider | None, key: Hashable, value: Any) -> None:
    if cache is not None:
        await cache.set(key, value)


def _snapshot_info(service: SnapshotService) -> SnapshotInfo:
    snapshot = service.snapshot
    return SnapshotInfo(
        status=service.status.value,
        version=snapshot.version if snapshot else None,
        records=snapshot.record_count if snapshot else 0,
        source=snapshot.source_name if snapshot else service.source.get_provider_name(),
        fetched_at=snapshot.fetched_at if snapshot else None,
        last_error=service.last_error,
    )


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------

@router.get(
    "/venues",
    response_model=VenueListResponse,
    responses={503: {"model": VenueListResponse}},
    summary="Filtered venue list",
)
async def list_venues(
    service: SnapshotServiceDep,
    cache: CacheDep,
    default_format: DefaultDateFormatDep,
    areas: Annotated[str | None, Query()] = None,
    vibes: Annotated[str | None, Query()] = None,
    dates: Annotated[str | None, Query()] = None,
    genres: Annotated[str | None, Query()] = None,
    q: Annotated[str | None, Query()] = None,
    date_format: Annotated[DateFormat | None, Query()] = None,
) -> Any:
    """Return venues matching every active facet, one entry per venue."""
    state = build_filter_state(
        areas=areas,
        vibes=vibes,
        dates=dates,
        genres=genres,
        q=q,
        date_format=date_format or default_format,
    )

    snapshot, engine = service.current()
    if snapshot is None:
        _logger.warning("venues_unavailable", status=service.status.value)
        body = VenueListResponse(success=False, data=[], error=_UNAVAILABLE_MESSAGE)
        return JSONResponse(status_code=503, content=body.model_dump(mode="json"))

    key = ("venues", snapshot.version, state)
    cached = await _cached(cache, key)
    if cached is not None:
        return cached

    venues = engine.filter_venues(state)
    response = VenueListResponse(
        data=[venue.display_payload() for venue in venues],
        message=f"Retrieved {len(venues)} venues",
    )
    await _store(cache, key, response)
    return response


@router.get(
    "/filter-options",
    response_model=FilterOptionsResponse,
    summary="Selectable values per facet",
)
async def filter_options(
    service: SnapshotServiceDep,
    cache: CacheDep,
    default_format: DefaultDateFormatDep,
    areas: Annotated[str | None, Query()] = None,
    vibes: Annotated[str | None, Query()] = None,
    dates: Annotated[str | None, Query()] = None,
    genres: Annotated[str | None, Query()] = None,
    date_format: Annotated[DateFormat | None, Query()] = None,
) -> Any:
    """Return, per facet, the values consistent with the other facets.

    When no snapshot is loaded the response still succeeds with empty
    lists, so the UI renders empty dropdowns instead of an error.
    """
    state = build_filter_state(
        areas=areas,
        vibes=vibes,
        dates=dates,
        genres=genres,
        date_format=date_format or default_format,
    )

    snapshot, engine = service.current()
    if snapshot is None:
        _logger.warning("filter_options_unavailable", status=service.status.value)
        return FilterOptionsResponse(
            data=FacetOptions(),
            message="Retrieved 0 areas/vibes/dates/genres (snapshot unavailable)",
        )

    key = ("options", snapshot.version, state)
    cached = await _cached(cache, key)
    if cached is not None:
        return cached

    options = engine.filter_options(state)
    response = FilterOptionsResponse(
        data=options,
        message=(
            f"Retrieved {len(options.areas)} areas, {len(options.vibes)} vibes, "
            f"{len(options.dates)} dates, {len(options.genres)} genres"
        ),
    )
    await _store(cache, key, response)
    return response


@router.get("/categories", response_model=CategoriesResponse, summary="Category legend")
async def list_categories() -> CategoriesResponse:
    return CategoriesResponse(
        data={
            taxonomy.value: [CategoryLegendEntry(**entry) for entry in category_legend(taxonomy)]
            for taxonomy in Taxonomy
        }
    )


@router.get("/health", response_model=HealthResponse, summary="Health check")
async def health_check(request: Request, service: SnapshotServiceDep) -> HealthResponse:
    """Report snapshot status: healthy when fresh, degraded when stale."""
    if service.status is SnapshotStatus.READY:
        status = "healthy"
    elif service.status is SnapshotStatus.STALE:
        status = "degraded"
    else:
        status = "unhealthy"

    cache = _get_response_cache(request)
    return HealthResponse(
        status=status,
        version=getattr(request.app.state, "app_version", "0.1.0"),
        snapshot=_snapshot_info(service),
        cache=cache.get_provider_name() if cache is not None else None,
    )


@router.post(
    "/snapshot/refresh",
    response_model=RefreshResponse,
    responses={503: {"model": RefreshResponse}},
    summary="Reload the venue snapshot",
)
async def refresh_snapshot(service: SnapshotServiceDep, cache: CacheDep) -> Any:
    try:
        await service.refresh()
    except SnapshotUnavailableError as exc:
        body = RefreshResponse(success=False, snapshot=_snapshot_info(service), error=exc.message)
        return JSONResponse(status_code=503, content=body.model_dump(mode="json"))

    if cache is not None:
        await cache.clear()
    return RefreshResponse(success=True, snapshot=_snapshot_info(service))
