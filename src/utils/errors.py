"""Custom exception hierarchy for vibeMap.

All application exceptions inherit from :class:`VibeMapError`, which
carries an optional ``provider_name`` so error handlers can identify which
record source (e.g. "supabase", "json_file") caused the failure.

    VibeMapError  (base -- catch-all for any vibeMap error)
    +-- SnapshotSourceError       (a record source could not produce rows)
    +-- SnapshotUnavailableError  (no snapshot could be loaded or refreshed)
    +-- ConfigurationError        (startup / missing config)

Malformed *values* inside a record (an unparseable date, an unknown tag)
are never errors: the normalizers degrade them to "absent" or to a
fallback category instead of raising.
"""


class VibeMapError(Exception):
    """Base exception for all vibeMap errors.

    Every subclass carries a human-readable ``message`` and an optional
    ``provider_name``.  ``__str__`` prefixes the provider name in brackets
    for log output, e.g. ``[supabase] HTTP 503 from PostgREST``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        provider_name: str | None = None,
    ) -> None:
        self._message = message
        self._provider_name = provider_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def provider_name(self) -> str | None:
        return self._provider_name

    def __str__(self) -> str:
        if self._provider_name:
            return f"[{self._provider_name}] {self._message}"
        return self._message


# ---------------------------------------------------------------------------
# Snapshot errors
# ---------------------------------------------------------------------------

class SnapshotSourceError(VibeMapError):
    """Raised by a record source when the upstream fetch or decode fails."""

    def __init__(
        self,
        message: str = "Record source failed",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


class SnapshotUnavailableError(VibeMapError):
    """Raised when a snapshot refresh fails or times out.

    The snapshot service keeps serving the previous snapshot (if any);
    callers decide whether to surface the failure.
    """

    def __init__(
        self,
        message: str = "Venue snapshot is unavailable",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)


# ---------------------------------------------------------------------------
# Configuration errors
# ---------------------------------------------------------------------------

class ConfigurationError(VibeMapError):
    """Raised when configuration is invalid or missing at startup."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        provider_name: str | None = None,
    ) -> None:
        super().__init__(message=message, provider_name=provider_name)
