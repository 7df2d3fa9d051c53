"""Internal constants for SymbolicDate.

These constants define the limits, patterns and name tables used
throughout the library. This module is not part of the public API.
"""

from __future__ import annotations

import re

# Time unit conversions
MS_PER_SECOND: int = 1_000
SECONDS_PER_DAY: int = 86_400
MS_PER_DAY: int = SECONDS_PER_DAY * MS_PER_SECOND  # 86_400_000

# Largest distance from the epoch a date may have, in days.
# Matches the +/-8.64e15 ms limit of an ECMAScript time value.
MAX_EPOCH_DAYS: int = 100_000_000

# Year range representable by datetime.date
MIN_DATETIME_YEAR: int = 1
MAX_DATETIME_YEAR: int = 9999

# Calendar-date strings accepted by the parsing constructor: YYYY-MM-DD
# with a syntactic check on the leading month and day digits only.
ISO_DATE_PATTERN: re.Pattern[str] = re.compile(r"[0-9]{4}-[01][0-9]-[0-3][0-9]")

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# English names for the locale-independent day string.
# Weekdays are indexed Sunday=0.
WEEKDAY_ABBREVIATIONS: tuple[str, ...] = (
    "Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat",
)
MONTH_ABBREVIATIONS: tuple[str, ...] = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)

INVALID_DATE_TEXT: str = "Invalid Date"

# Locale used when neither the caller nor the environment names one
FALLBACK_LOCALE: str = "en_US"


__all__ = [
    "MS_PER_SECOND",
    "SECONDS_PER_DAY",
    "MS_PER_DAY",
    "MAX_EPOCH_DAYS",
    "MIN_DATETIME_YEAR",
    "MAX_DATETIME_YEAR",
    "ISO_DATE_PATTERN",
    "DAYS_IN_MONTH",
    "WEEKDAY_ABBREVIATIONS",
    "MONTH_ABBREVIATIONS",
    "INVALID_DATE_TEXT",
    "FALLBACK_LOCALE",
]
