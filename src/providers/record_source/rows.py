"""Row validation shared by every record source."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

import structlog
from pydantic import ValidationError

from src.models.venue import VenueRecord

logger = structlog.get_logger(logger_name=__name__)


def parse_rows(rows: Iterable[Any], provider_name: str) -> list[VenueRecord]:
    """Validate raw rows into VenueRecords, skipping invalid ones.

    A row is skipped (and logged) when it is not a mapping or lacks an
    identity or coordinates.  Tag and date values are not inspected here;
    malformed ones degrade during normalization instead.
    """
    records: list[VenueRecord] = []
    skipped = 0
    for index, row in enumerate(rows):
        if not isinstance(row, dict):
            skipped += 1
            logger.warning(
                "record_row_skipped",
                provider=provider_name,
                index=index,
                reason=f"expected object, got {type(row).__name__}",
            )
            continue
        try:
            records.append(VenueRecord.model_validate(row))
        except ValidationError as exc:
            skipped += 1
            logger.warning(
                "record_row_skipped",
                provider=provider_name,
                index=index,
                fields=sorted({".".join(map(str, err["loc"])) for err in exc.errors()}),
            )

    logger.info(
        "record_rows_parsed",
        provider=provider_name,
        accepted=len(records),
        skipped=skipped,
    )
    return records
