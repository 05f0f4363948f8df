"""vibeMap API layer: routes, schemas and middleware."""

from src.api.middleware import (
    ErrorHandlingMiddleware,
    RequestLoggingMiddleware,
    configure_cors,
)
from src.api.routes import build_filter_state, router
from src.api.schemas import (
    CategoriesResponse,
    ErrorResponse,
    FilterOptionsResponse,
    HealthResponse,
    RefreshResponse,
    VenueListResponse,
)

__all__ = [
    "CategoriesResponse",
    "ErrorHandlingMiddleware",
    "ErrorResponse",
    "FilterOptionsResponse",
    "HealthResponse",
    "RefreshResponse",
    "RequestLoggingMiddleware",
    "VenueListResponse",
    "build_filter_state",
    "configure_cors",
    "router",
]
