"""Tests for the internal calendar arithmetic."""

from __future__ import annotations

import datetime

import pytest

from symbolic_date._internal.calendar import (
    days_in_month,
    epoch_day_to_weekday,
    epoch_day_to_ymd,
    in_epoch_range,
    is_leap_year,
    is_valid_ymd,
    make_epoch_day,
    ordinal_to_ymd,
    ymd_to_ordinal,
)
from symbolic_date._internal.constants import MAX_EPOCH_DAYS


class TestLeapYears:
    """Tests for leap year rules."""

    @pytest.mark.parametrize(
        "year, expected",
        [
            (2024, True),
            (2023, False),
            (2000, True),
            (1900, False),
            (0, True),
            (-4, True),
            (-100, False),
            (-400, True),
        ],
    )
    def test_is_leap_year(self, year: int, expected: bool) -> None:
        """Gregorian leap rules hold for every year, including BCE."""
        assert is_leap_year(year) is expected

    def test_days_in_february(self) -> None:
        """February has 29 days only in leap years."""
        assert days_in_month(2024, 2) == 29
        assert days_in_month(2023, 2) == 28

    def test_days_in_month_rejects_bad_month(self) -> None:
        """Months outside 1-12 are rejected."""
        with pytest.raises(ValueError, match="month must be 1-12"):
            days_in_month(2024, 13)


class TestOrdinals:
    """Tests for ordinal day numbers."""

    def test_matches_datetime_ordinals(self) -> None:
        """Ordinals agree with datetime.date.toordinal for CE dates."""
        for year, month, day in [(1, 1, 1), (1858, 11, 17), (2000, 1, 1), (9999, 12, 31)]:
            expected = datetime.date(year, month, day).toordinal()
            assert ymd_to_ordinal(year, month, day) == expected
            assert ordinal_to_ymd(expected) == (year, month, day)

    def test_year_zero(self) -> None:
        """Year 0 is a leap year ending on ordinal 0."""
        assert ymd_to_ordinal(0, 12, 31) == 0
        assert ordinal_to_ymd(0) == (0, 12, 31)
        assert ordinal_to_ymd(ymd_to_ordinal(0, 2, 29)) == (0, 2, 29)

    def test_negative_years(self) -> None:
        """Ordinals before year 0 convert back to the same fields."""
        for fields in [(-1, 1, 1), (-44, 3, 15), (-400, 1, 1), (-401, 12, 31)]:
            assert ordinal_to_ymd(ymd_to_ordinal(*fields)) == fields

    def test_cycle_boundaries(self) -> None:
        """Last days of 4-, 100- and 400-year cycles are handled."""
        for fields in [(1996, 12, 31), (1900, 12, 31), (2000, 12, 31), (1600, 12, 31)]:
            assert ordinal_to_ymd(ymd_to_ordinal(*fields)) == fields

    def test_agrees_with_datetime_across_range(self) -> None:
        """Sampled ordinals agree with datetime.date.fromordinal."""
        for ordinal in range(1, 3_652_059, 9_973):
            d = datetime.date.fromordinal(ordinal)
            assert ordinal_to_ymd(ordinal) == (d.year, d.month, d.day)


class TestEpochDays:
    """Tests for epoch day numbers with rollover."""

    def test_epoch(self) -> None:
        """1970-01-01 is epoch day 0."""
        assert make_epoch_day(1970, 0, 1) == 0
        assert epoch_day_to_ymd(0) == (1970, 1, 1)

    def test_known_day(self) -> None:
        """2022-12-01 is epoch day 19327."""
        assert make_epoch_day(2022, 11, 1) == 19327
        assert epoch_day_to_ymd(19327) == (2022, 12, 1)

    def test_day_before_epoch(self) -> None:
        """Epoch day -1 is the last day of 1969."""
        assert make_epoch_day(1970, 0, 0) == -1
        assert epoch_day_to_ymd(-1) == (1969, 12, 31)

    def test_month_rolls_into_next_year(self) -> None:
        """Month index 12 is January of the next year."""
        assert make_epoch_day(2022, 12, 1) == make_epoch_day(2023, 0, 1)

    def test_negative_month_rolls_into_previous_year(self) -> None:
        """Month index -1 is December of the previous year."""
        assert make_epoch_day(2022, -1, 1) == make_epoch_day(2021, 11, 1)
        assert make_epoch_day(2022, -13, 1) == make_epoch_day(2020, 11, 1)

    def test_day_zero_is_last_day_of_previous_month(self) -> None:
        """Day 0 rolls back to the previous month's last day."""
        assert make_epoch_day(2022, 2, 0) == make_epoch_day(2022, 1, 28)
        assert make_epoch_day(2024, 2, 0) == make_epoch_day(2024, 1, 29)

    def test_day_overflow(self) -> None:
        """Days past the end of the month spill into the next one."""
        assert make_epoch_day(2022, 0, 32) == make_epoch_day(2022, 1, 1)
        assert make_epoch_day(2022, 0, 366) == make_epoch_day(2023, 0, 1)

    def test_weekday(self) -> None:
        """Weekdays count from Sunday as 0."""
        assert epoch_day_to_weekday(0) == 4  # Thursday
        assert epoch_day_to_weekday(-1) == 3  # Wednesday
        assert epoch_day_to_weekday(make_epoch_day(2000, 0, 1)) == 6  # Saturday
        assert epoch_day_to_weekday(make_epoch_day(2024, 0, 14)) == 0  # Sunday

    def test_epoch_range(self) -> None:
        """The representable range is 100 million days each way."""
        assert in_epoch_range(MAX_EPOCH_DAYS)
        assert in_epoch_range(-MAX_EPOCH_DAYS)
        assert not in_epoch_range(MAX_EPOCH_DAYS + 1)
        assert not in_epoch_range(-MAX_EPOCH_DAYS - 1)
        assert epoch_day_to_ymd(MAX_EPOCH_DAYS) == (275760, 9, 13)
        assert epoch_day_to_ymd(-MAX_EPOCH_DAYS) == (-271821, 4, 20)


class TestValidation:
    """Tests for calendar field validation."""

    @pytest.mark.parametrize(
        "fields, expected",
        [
            ((2024, 2, 29), True),
            ((2023, 2, 29), False),
            ((2022, 0, 1), False),
            ((2022, 13, 1), False),
            ((2022, 1, 0), False),
            ((2022, 4, 31), False),
            ((0, 1, 1), True),
        ],
    )
    def test_is_valid_ymd(self, fields: tuple[int, int, int], expected: bool) -> None:
        """Only real calendar days are valid."""
        assert is_valid_ymd(*fields) is expected
