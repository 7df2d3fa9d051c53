"""Calendar utilities for SymbolicDate.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, ordinal day numbers and epoch day numbers.

Epoch day 0 = 1970-01-01 (the day whose UTC midnight is the Unix epoch).

Field conversions accept out-of-range months and days and roll them over
the way host date arithmetic does, so callers never have to pre-validate.

This module is not part of the public API.
"""

from __future__ import annotations

from symbolic_date._internal.constants import DAYS_IN_MONTH, MAX_EPOCH_DAYS

# Days in a full 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146_097


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (can be 0 or negative).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)  # Divisible by 400
        True
        >>> is_leap_year(1900)  # Divisible by 100 but not 400
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Args:
        year: The year (needed for February in leap years).
        month: The month (1-12).

    Returns:
        Number of days in the month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (days since year 1).

    The ordinal for 0001-01-01 is 1 and for 0000-12-31 is 0. The day
    is added linearly, so day 0 and days past the end of the month
    land in the neighbouring months.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month: The month (1-12).
        day: The day of the month, any integer.

    Returns:
        The ordinal day number.
    """
    # Python's // floors toward negative infinity, which keeps this exact
    # for years before year 1
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400

    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert ordinal (days since year 1) to year, month, day.

    Args:
        ordinal: The ordinal day number (ordinal 1 = 0001-01-01).

    Returns:
        Tuple of (year, month, day).
    """
    # Shift into the first 400-year cycle; the calendar repeats exactly
    # every 146097 days, so the year offset is added back at the end.
    cycles, n = divmod(ordinal - 1, _DAYS_PER_400_YEARS)

    # 100-year cycles within the 400: each has 36524 days (except last which has 36525)
    n100, n = divmod(n, 36524)

    # 4-year cycles within the 100: each has 1461 days
    n4, n = divmod(n, 1461)

    # Years within the 4-year cycle: each has 365 days (except leap year)
    n1, n = divmod(n, 365)

    year = cycles * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a leap year closing a 4- or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    for month in range(1, 13):
        dim = days_in_month(year, month)
        if doy <= dim:
            return (month, doy)
        doy -= dim

    raise ValueError(f"Invalid day of year: {doy} for year {year}")


_EPOCH_ORDINAL = ymd_to_ordinal(1970, 1, 1)


def make_epoch_day(year: int, month_index: int, day: int) -> int:
    """Convert calendar fields to an epoch day number with rollover.

    Months are zero-based. A month index outside 0-11 moves the year,
    and a day outside the month moves the month, so
    ``make_epoch_day(2022, 12, 1)`` is 2023-01-01 and
    ``make_epoch_day(2022, 11, 0)`` is 2022-11-30.

    Args:
        year: The year (astronomical, can be 0 or negative).
        month_index: Zero-based month, any integer.
        day: Day of month, any integer.

    Returns:
        Days since 1970-01-01.

    Examples:
        >>> make_epoch_day(1970, 0, 1)
        0
        >>> make_epoch_day(1970, 0, 0)
        -1
        >>> make_epoch_day(2022, 11, 1)
        19327
    """
    year_shift, month_index = divmod(month_index, 12)
    ordinal = ymd_to_ordinal(year + year_shift, month_index + 1, 1) + day - 1
    return ordinal - _EPOCH_ORDINAL


def epoch_day_to_ymd(days: int) -> tuple[int, int, int]:
    """Convert an epoch day number to year, one-based month, day.

    Args:
        days: Days since 1970-01-01.

    Returns:
        Tuple of (year, month, day) with month in 1-12.
    """
    return ordinal_to_ymd(days + _EPOCH_ORDINAL)


def epoch_day_to_weekday(days: int) -> int:
    """Return the weekday of an epoch day, Sunday as 0 through Saturday as 6.

    Examples:
        >>> epoch_day_to_weekday(0)  # 1970-01-01 was a Thursday
        4
    """
    return (days + 4) % 7


def is_valid_ymd(year: int, month: int, day: int) -> bool:
    """Return True if year, one-based month and day name a real date."""
    if month < 1 or month > 12:
        return False
    return 1 <= day <= days_in_month(year, month)


def in_epoch_range(days: int) -> bool:
    """Return True if an epoch day lies within the representable range."""
    return -MAX_EPOCH_DAYS <= days <= MAX_EPOCH_DAYS


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "make_epoch_day",
    "epoch_day_to_ymd",
    "epoch_day_to_weekday",
    "is_valid_ymd",
    "in_epoch_range",
]
