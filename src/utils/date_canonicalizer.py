"""Date canonicalization for the date facet.

Upstream data and the UI disagree on how a day is written:

- record rows carry ISO timestamps with an offset
  (``"2025-09-17T23:00:00+04:00"``, ``"2025-09-17T00:00:00Z"``);
- the options route historically rendered ``"17/September/2025"``;
- the page's default-date helper produced ``"17 Sept 25"``.

Everything is reduced to a plain :class:`datetime.date` so equality and
chronological ordering are the date's own.

Record timestamps are converted to UTC before the calendar day is read,
while literal facet values are taken at face value.  A Dubai event at
02:00 local time on the 18th is therefore filed under the 17th.

Nothing in this module raises on bad input: unparseable values become
``None`` and ``None`` never equals a date.
"""

from __future__ import annotations

import re
from datetime import date, datetime, timezone
from enum import Enum

MONTH_NAMES: tuple[str, ...] = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)

# Abbreviations used by the short display format.  September is "Sept".
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sept", "Oct", "Nov", "Dec",
)


def _build_month_lookup() -> dict[str, int]:
    lookup: dict[str, int] = {}
    for index, (full, short) in enumerate(zip(MONTH_NAMES, MONTH_ABBREVIATIONS), start=1):
        lookup[full.casefold()] = index
        lookup[short.casefold()] = index
        lookup[full[:3].casefold()] = index
    return lookup


_MONTH_LOOKUP: dict[str, int] = _build_month_lookup()

# "17/September/2025"
_SLASH_LITERAL = re.compile(r"^\s*(\d{1,2})\s*/\s*([A-Za-z]+)\s*/\s*(\d{4})\s*$")
# "17 Sept 25", "17 Sep. 2025"
_SPACE_LITERAL = re.compile(r"^\s*(\d{1,2})\s+([A-Za-z]+)\.?\s+(\d{4}|\d{2})\s*$")

# Two-digit years below this pivot are 20xx, the rest 19xx.
_TWO_DIGIT_YEAR_PIVOT = 50


class DateFormat(str, Enum):
    """Literal formats the date facet can be rendered in."""

    LONG = "long"    # 17/September/2025
    SHORT = "short"  # 17 Sept 25


def canonicalize(value: object) -> date | None:
    """Reduce a literal date or a record timestamp to a calendar date.

    Literal facet formats are tried first, then ISO timestamps.

    Args:
        value: ``"17/September/2025"``, ``"17 Sept 25"``, an ISO timestamp,
            a ``date``/``datetime``, or anything else.

    Returns:
        The calendar date, or ``None`` when *value* cannot be read.
    """
    literal = canonicalize_literal(value)
    if literal is not None:
        return literal
    return canonicalize_timestamp(value)


def canonicalize_literal(value: object) -> date | None:
    """Parse a facet literal (slash/full-month or space/abbreviated form)."""
    if not isinstance(value, str):
        return None

    match = _SLASH_LITERAL.match(value) or _SPACE_LITERAL.match(value)
    if match is None:
        return None

    day_text, month_text, year_text = match.groups()
    month = _MONTH_LOOKUP.get(month_text.casefold())
    if month is None:
        return None
    return _safe_date(_expand_year(year_text), month, int(day_text))


def canonicalize_timestamp(value: object) -> date | None:
    """Read the UTC calendar day of a record timestamp.

    Naive timestamps are taken to be UTC already.  Date-only ISO strings
    (``"2025-09-17"``) are returned as-is.
    """
    if isinstance(value, datetime):
        moment = value
    elif isinstance(value, date):
        return value
    elif isinstance(value, str):
        text = value.strip()
        if not text:
            return None
        if text[-1] in "Zz":
            text = text[:-1] + "+00:00"
        try:
            moment = datetime.fromisoformat(text)
        except ValueError:
            return None
    else:
        return None

    if moment.tzinfo is None:
        return moment.date()
    return moment.astimezone(timezone.utc).date()


def format_date(value: date, date_format: DateFormat = DateFormat.LONG) -> str:
    """Render a canonical date in one of the facet literal formats.

    ``LONG`` zero-pads the day (``"07/September/2025"``); ``SHORT`` does not
    (``"7 Sept 25"``).  Both read back through :func:`canonicalize` to the
    same date; ``SHORT`` writes a four-digit year when two digits would
    expand to another century (outside 1950-2049).
    """
    if date_format is DateFormat.SHORT:
        month = MONTH_ABBREVIATIONS[value.month - 1]
        return f"{value.day} {month} {_short_year(value.year)}"
    return f"{value.day:02d}/{MONTH_NAMES[value.month - 1]}/{value.year:04d}"


def _short_year(year: int) -> str:
    two_digit = f"{year % 100:02d}"
    if _expand_year(two_digit) == year:
        return two_digit
    return f"{year:04d}"


def _expand_year(text: str) -> int:
    year = int(text)
    if len(text) == 2:
        return 2000 + year if year < _TWO_DIGIT_YEAR_PIVOT else 1900 + year
    return year


def _safe_date(year: int, month: int, day: int) -> date | None:
    try:
        return date(year, month, day)
    except ValueError:
        return None
