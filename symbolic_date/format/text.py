"""Locale-independent day strings.

The day string has the fixed English form ``"Thu Dec 01 2022"``: weekday
abbreviation, month abbreviation, two-digit day and a year padded to at
least four digits. It never depends on the process locale or timezone.

Functions:
    format_day_string: Render calendar fields as a day string.
"""

from __future__ import annotations

from symbolic_date._internal.constants import (
    MONTH_ABBREVIATIONS,
    WEEKDAY_ABBREVIATIONS,
)


def format_day_string(year: int, month: int, day: int, weekday: int) -> str:
    """Render a calendar day as ``"Www Mmm DD YYYY"``.

    Args:
        year: The year (negative years keep a leading minus).
        month: The month (1-12).
        day: The day of the month.
        weekday: Day of week, Sunday as 0.

    Returns:
        The day string.

    Examples:
        >>> format_day_string(2022, 12, 1, 4)
        'Thu Dec 01 2022'
        >>> format_day_string(-44, 3, 15, 5)
        'Fri Mar 15 -0044'
    """
    sign = "-" if year < 0 else ""
    return (
        f"{WEEKDAY_ABBREVIATIONS[weekday]} {MONTH_ABBREVIATIONS[month - 1]} "
        f"{day:02d} {sign}{abs(year):04d}"
    )


__all__ = ["format_day_string"]
