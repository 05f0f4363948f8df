"""Unit tests for date canonicalization and rendering."""

from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest

from src.utils.date_canonicalizer import (
    DateFormat,
    canonicalize,
    canonicalize_literal,
    canonicalize_timestamp,
    format_date,
)

SEPT_17 = date(2025, 9, 17)


# ======================================================================
# Literal formats
# ======================================================================


class TestLiteralFormats:
    def test_long_format(self) -> None:
        assert canonicalize("17/September/2025") == SEPT_17

    def test_short_format(self) -> None:
        assert canonicalize("17 Sept 25") == SEPT_17

    def test_long_and_short_agree(self) -> None:
        assert canonicalize("17/September/2025") == canonicalize("17 Sept 25")

    @pytest.mark.parametrize(
        "value",
        ["17/september/2025", "17/SEPTEMBER/2025", "17 / September / 2025", " 17/September/2025 "],
    )
    def test_long_format_is_lenient_on_case_and_spacing(self, value: str) -> None:
        assert canonicalize(value) == SEPT_17

    def test_long_format_single_digit_day(self) -> None:
        assert canonicalize("7/September/2025") == date(2025, 9, 7)

    @pytest.mark.parametrize("value", ["17 Sep 25", "17 Sept 25", "17 September 25", "17 sept. 25"])
    def test_short_format_month_spellings(self, value: str) -> None:
        assert canonicalize(value) == SEPT_17

    def test_short_format_four_digit_year(self) -> None:
        assert canonicalize("17 Sept 2025") == SEPT_17

    def test_two_digit_year_pivot(self) -> None:
        assert canonicalize("1 Jan 49") == date(2049, 1, 1)
        assert canonicalize("1 Jan 50") == date(1950, 1, 1)

    def test_literal_is_not_shifted_to_utc(self) -> None:
        assert canonicalize_literal("18/September/2025") == date(2025, 9, 18)

    @pytest.mark.parametrize(
        "value",
        ["31/February/2025", "17/Septober/2025", "17-09-2025", "Sept 17 2025", "17 Sept"],
    )
    def test_invalid_literals_return_none(self, value: str) -> None:
        assert canonicalize_literal(value) is None


# ======================================================================
# Record timestamps (UTC rule)
# ======================================================================


class TestTimestamps:
    def test_offset_timestamp_is_read_in_utc(self) -> None:
        # 23:00 in Dubai is 19:00 UTC, still the 17th.
        assert canonicalize("2025-09-17T23:00:00+04:00") == SEPT_17

    def test_offset_timestamp_matches_long_literal(self) -> None:
        assert canonicalize("2025-09-17T23:00:00+04:00") == canonicalize("17/September/2025")

    def test_early_local_morning_falls_on_previous_utc_day(self) -> None:
        # 02:00 on the 18th in Dubai is 22:00 UTC on the 17th.
        assert canonicalize("2025-09-18T02:00:00+04:00") == SEPT_17

    def test_z_suffix(self) -> None:
        assert canonicalize("2025-09-17T00:00:00Z") == SEPT_17

    def test_naive_timestamp_taken_as_utc(self) -> None:
        assert canonicalize("2025-09-17T23:30:00") == SEPT_17

    def test_date_only_iso(self) -> None:
        assert canonicalize("2025-09-17") == SEPT_17

    def test_postgres_style_timestamp(self) -> None:
        assert canonicalize("2025-09-17 00:00:00+00:00") == SEPT_17

    def test_datetime_objects(self) -> None:
        dubai = timezone(timedelta(hours=4))
        assert canonicalize_timestamp(datetime(2025, 9, 18, 2, 0, tzinfo=dubai)) == SEPT_17

    def test_date_objects_pass_through(self) -> None:
        assert canonicalize(SEPT_17) == SEPT_17


# ======================================================================
# Failure modes
# ======================================================================


class TestUnparseable:
    @pytest.mark.parametrize("value", [None, "", "   ", "sometime soon", "2025-13-45", 42, ["x"]])
    def test_returns_none_without_raising(self, value: object) -> None:
        assert canonicalize(value) is None

    def test_none_never_equals_a_date(self) -> None:
        assert canonicalize("garbage") != SEPT_17


# ======================================================================
# format_date
# ======================================================================


class TestFormatDate:
    def test_long_zero_pads_day(self) -> None:
        assert format_date(date(2025, 9, 7), DateFormat.LONG) == "07/September/2025"

    def test_short_uses_sept_and_two_digit_year(self) -> None:
        assert format_date(date(2025, 9, 7), DateFormat.SHORT) == "7 Sept 25"

    def test_short_other_months(self) -> None:
        assert format_date(date(2026, 1, 31), DateFormat.SHORT) == "31 Jan 26"

    def test_default_is_long(self) -> None:
        assert format_date(SEPT_17) == "17/September/2025"

    @pytest.mark.parametrize("fmt", list(DateFormat))
    def test_rendered_literals_canonicalize_back(self, fmt: DateFormat) -> None:
        for value in (date(2025, 1, 1), date(2025, 9, 17), date(2030, 12, 31)):
            assert canonicalize(format_date(value, fmt)) == value

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (date(2050, 1, 5), "5 Jan 2050"),
            (date(1949, 12, 31), "31 Dec 1949"),
            (date(1950, 1, 1), "1 Jan 50"),
            (date(2049, 6, 30), "30 Jun 49"),
        ],
    )
    def test_short_keeps_four_digits_outside_pivot_window(
        self, value: date, expected: str
    ) -> None:
        assert format_date(value, DateFormat.SHORT) == expected
        assert canonicalize(expected) == value
