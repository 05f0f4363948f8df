"""Utility modules for vibeMap.

Available utility modules (all re-exported here for convenience):

- **date_canonicalizer** -- reduces record timestamps and the two facet
  literal formats to a calendar date, and renders dates back as literals.
- **errors** -- exception hierarchy rooted at VibeMapError; snapshot and
  configuration failures get their own subclass.
- **logging** -- structlog setup with a dual-renderer pattern: coloured
  console output in development, structured JSON in production.
- **text_normalizer** -- ``|`` tag splitting and the case folding shared by
  every comparison in the filter engine.
"""

# -- Date canonicalization -------------------------------------------------
from src.utils.date_canonicalizer import (
    DateFormat,
    canonicalize,
    canonicalize_literal,
    canonicalize_timestamp,
    format_date,
)

# -- Domain exception hierarchy --------------------------------------------
from src.utils.errors import (
    ConfigurationError,
    SnapshotSourceError,
    SnapshotUnavailableError,
    VibeMapError,
)

# -- Structured logging setup ----------------------------------------------
from src.utils.logging import configure_logging, get_logger

# -- Tag splitting and comparison folding ----------------------------------
from src.utils.text_normalizer import alphabetical_key, fold, split_tag_list, split_tags

__all__ = [
    "ConfigurationError",
    "DateFormat",
    "SnapshotSourceError",
    "SnapshotUnavailableError",
    "VibeMapError",
    "alphabetical_key",
    "canonicalize",
    "canonicalize_literal",
    "canonicalize_timestamp",
    "configure_logging",
    "fold",
    "format_date",
    "get_logger",
    "split_tag_list",
    "split_tags",
]
