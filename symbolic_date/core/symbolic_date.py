"""SymbolicDate class representing a calendar day.

This module provides the SymbolicDate class: a year/month/day value with
no time of day and no timezone, stored as UTC midnight of that day so
that reading its fields never depends on the process timezone.
"""

from __future__ import annotations

import datetime as _datetime
import logging
import math
import numbers
import time
from typing import Union

from symbolic_date._internal.calendar import (
    epoch_day_to_weekday,
    epoch_day_to_ymd,
    in_epoch_range,
    is_valid_ymd,
    make_epoch_day,
)
from symbolic_date._internal.constants import (
    INVALID_DATE_TEXT,
    ISO_DATE_PATTERN,
    MAX_DATETIME_YEAR,
    MIN_DATETIME_YEAR,
    MS_PER_DAY,
)
from symbolic_date.errors import InvalidDateError, ParseError
from symbolic_date.format.locale import LocalesArg, format_locale_date
from symbolic_date.format.text import format_day_string

logger = logging.getLogger(__name__)

# Accessors return a plain int for valid dates and math.nan otherwise
Field = Union[int, float]


def _to_integer(value: object) -> int | None:
    """Coerce a calendar field to an int, truncating toward zero.

    Returns None for non-numbers, booleans, NaN and infinities.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        return None
    if isinstance(value, numbers.Integral):
        return int(value)
    as_float = float(value)
    if not math.isfinite(as_float):
        return None
    return math.trunc(as_float)


def _is_number(value: object) -> bool:
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def _make_days(year: object, month_index: object, day: object) -> int | None:
    """Build an epoch day from raw fields, or None if it cannot exist."""
    fields = (_to_integer(year), _to_integer(month_index), _to_integer(day))
    if any(field is None for field in fields):
        return None
    days = make_epoch_day(*fields)  # type: ignore[arg-type]
    if not in_epoch_range(days):
        return None
    return days


def _days_from_iso(text: str) -> int | None:
    if not ISO_DATE_PATTERN.fullmatch(text):
        return None
    year, month, day = int(text[0:4]), int(text[5:7]), int(text[8:10])
    if not is_valid_ymd(year, month, day):
        return None
    return make_epoch_day(year, month - 1, day)


def _today_days() -> int:
    # The local calendar day of "now", not the UTC one
    now = time.localtime(time.time())
    return make_epoch_day(now.tm_year, now.tm_mon - 1, now.tm_mday)


class SymbolicDate:
    """A calendar day in the proleptic Gregorian calendar.

    SymbolicDate represents "a day" rather than an instant. It is stored
    as the number of days since 1970-01-01, which is the same as the UTC
    midnight instant of the day, so every accessor reads UTC fields and
    nothing shifts when the process timezone changes.

    Construction mirrors a JavaScript ``Date`` restricted to days:

        - ``SymbolicDate()``: today, as seen in the local timezone.
        - ``SymbolicDate("2022-12-01")``: a bare ISO 8601 calendar date.
          Any other string, including full ISO instants, is invalid.
        - ``SymbolicDate(2022, 11, 1)``: year, zero-based month, day,
          with rollover (month 12 is January of the next year, day 0 is
          the last day of the previous month).

    Bad input never raises. It produces an invalid date whose accessors
    return ``math.nan``, whose ``value_of()`` is ``math.nan`` and which
    compares unequal to everything, itself included.

    Instances are mutable through the ``set_*`` methods and therefore
    unhashable.

    Examples:
        >>> d = SymbolicDate("2022-12-01")
        >>> d.get_full_year(), d.get_month(), d.get_date()
        (2022, 11, 1)
        >>> d.set_date(0).to_iso_format()
        '2022-11-30'
        >>> SymbolicDate(2022, 12, 1)
        SymbolicDate('2023-01-01')
        >>> SymbolicDate("2022-12-01T12:00:00.000Z").is_valid
        False
    """

    __slots__ = ("_days",)

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *args: object) -> None:
        """Create a SymbolicDate from nothing, an ISO date string, or fields.

        Args:
            *args: Either no arguments, one ``YYYY-MM-DD`` string, or
                year, zero-based month index and day of month.

        Examples:
            >>> SymbolicDate(2022, 11, 1)
            SymbolicDate('2022-12-01')
            >>> SymbolicDate(2022, 11)  # Unsupported shape
            SymbolicDate.invalid()
        """
        self._days: int | None
        if not args:
            self._days = _today_days()
        elif len(args) == 1 and isinstance(args[0], str):
            self._days = _days_from_iso(args[0])
        elif len(args) == 3 and all(_is_number(arg) for arg in args):
            self._days = _make_days(*args)
        else:
            logger.debug("unsupported SymbolicDate arguments %r, date is invalid", args)
            self._days = None

    @classmethod
    def today(cls) -> SymbolicDate:
        """Return today's date in the local timezone."""
        return cls()

    @classmethod
    def from_parts(cls, year: float, month_index: float, day: float) -> SymbolicDate:
        """Create a date from year, zero-based month index and day of month.

        Out-of-range months and days roll over into neighbouring months.

        Examples:
            >>> SymbolicDate.from_parts(2022, 0, 0)
            SymbolicDate('2021-12-31')
        """
        return cls(year, month_index, day)

    @classmethod
    def invalid(cls) -> SymbolicDate:
        """Return a new invalid date."""
        date = cls.__new__(cls)
        date._days = None
        return date

    @classmethod
    def from_iso_format(cls, s: str) -> SymbolicDate:
        """Parse a ``YYYY-MM-DD`` string, raising instead of going invalid.

        Args:
            s: The ISO 8601 calendar date string.

        Returns:
            The parsed SymbolicDate.

        Raises:
            ParseError: If the string is not a real calendar date.

        Examples:
            >>> SymbolicDate.from_iso_format("2024-02-29")
            SymbolicDate('2024-02-29')

            >>> SymbolicDate.from_iso_format("2023-02-29")
            Traceback (most recent call last):
            ...
            symbolic_date.errors.ParseError: Invalid ISO 8601 calendar date: '2023-02-29'
        """
        date = cls(s) if isinstance(s, str) else cls.invalid()
        if not date.is_valid:
            raise ParseError(f"Invalid ISO 8601 calendar date: {s!r}")
        return date

    @classmethod
    def from_local_date(cls, instant: _datetime.date) -> SymbolicDate:
        """Return the calendar day an instant falls on in the local timezone.

        Aware datetimes are converted to local time first. Naive
        datetimes are taken to already be local time. A plain
        ``datetime.date`` contributes its own fields.

        Args:
            instant: A datetime or date.

        Returns:
            The SymbolicDate of the local calendar day, invalid when
            the local time falls outside datetime's range.

        Raises:
            TypeError: If instant is not a date or datetime.
        """
        if isinstance(instant, _datetime.datetime):
            if instant.tzinfo is not None:
                try:
                    instant = instant.astimezone()
                except (OverflowError, ValueError):
                    logger.debug("%r has no local date, date is invalid", instant)
                    return cls.invalid()
        elif not isinstance(instant, _datetime.date):
            raise TypeError(f"expected date or datetime, got {type(instant).__name__}")
        return cls(instant.year, instant.month - 1, instant.day)

    @classmethod
    def from_utc_date(cls, instant: _datetime.date) -> SymbolicDate:
        """Return the calendar day an instant falls on in UTC.

        Naive datetimes are interpreted as local time, the same way
        ``datetime.astimezone`` treats them. A plain ``datetime.date``
        contributes its own fields.

        Args:
            instant: A datetime or date.

        Returns:
            The SymbolicDate of the UTC calendar day, invalid when the
            UTC time falls outside datetime's range.

        Raises:
            TypeError: If instant is not a date or datetime.
        """
        if isinstance(instant, _datetime.datetime):
            try:
                instant = instant.astimezone(_datetime.timezone.utc)
            except (OverflowError, ValueError):
                logger.debug("%r has no UTC date, date is invalid", instant)
                return cls.invalid()
        elif not isinstance(instant, _datetime.date):
            raise TypeError(f"expected date or datetime, got {type(instant).__name__}")
        return cls(instant.year, instant.month - 1, instant.day)

    @property
    def is_valid(self) -> bool:
        """Return True unless this is the invalid sentinel."""
        return self._days is not None

    def get_date(self) -> Field:
        """Return the day of the month (1-31), or nan if invalid."""
        if self._days is None:
            return math.nan
        return epoch_day_to_ymd(self._days)[2]

    def get_month(self) -> Field:
        """Return the zero-based month (0-11), or nan if invalid."""
        if self._days is None:
            return math.nan
        return epoch_day_to_ymd(self._days)[1] - 1

    def get_full_year(self) -> Field:
        """Return the year, or nan if invalid."""
        if self._days is None:
            return math.nan
        return epoch_day_to_ymd(self._days)[0]

    def get_day(self) -> Field:
        """Return the day of the week, Sunday as 0 through Saturday as 6.

        Examples:
            >>> SymbolicDate("2022-12-01").get_day()  # Thursday
            4
        """
        if self._days is None:
            return math.nan
        return epoch_day_to_weekday(self._days)

    def set_date(self, date: float) -> SymbolicDate:
        """Set the day of the month in place.

        Days outside the month roll over, so 0 is the last day of the
        previous month.

        Args:
            date: The new day of the month.

        Returns:
            This instance, for chaining.

        Examples:
            >>> SymbolicDate("2022-03-01").set_date(0)
            SymbolicDate('2022-02-28')
        """
        if self._days is not None:
            year, month, _ = epoch_day_to_ymd(self._days)
            self._days = _make_days(year, month - 1, date)
        return self

    def set_month(self, month_index: float, date: float | None = None) -> SymbolicDate:
        """Set the zero-based month, and optionally the day, in place.

        An omitted day keeps the current day of the month, rolling over
        if the new month is shorter.

        Args:
            month_index: The new zero-based month.
            date: The new day of the month, or None to keep it.

        Returns:
            This instance, for chaining.

        Examples:
            >>> SymbolicDate("2022-01-31").set_month(1)
            SymbolicDate('2022-03-03')
        """
        if self._days is not None:
            year, month, day = epoch_day_to_ymd(self._days)
            self._days = _make_days(year, month_index, day if date is None else date)
        return self

    def set_full_year(
        self,
        year: float,
        month_index: float | None = None,
        date: float | None = None,
    ) -> SymbolicDate:
        """Set the year, and optionally month and day, in place.

        Omitted fields keep their current values.

        Args:
            year: The new year.
            month_index: The new zero-based month, or None to keep it.
            date: The new day of the month, or None to keep it.

        Returns:
            This instance, for chaining.

        Examples:
            >>> SymbolicDate("2022-11-30").set_full_year(1970)
            SymbolicDate('1970-11-30')
            >>> SymbolicDate("2024-02-29").set_full_year(2023)
            SymbolicDate('2023-03-01')
        """
        if self._days is not None:
            _, month, day = epoch_day_to_ymd(self._days)
            self._days = _make_days(
                year,
                month - 1 if month_index is None else month_index,
                day if date is None else date,
            )
        return self

    def value_of(self) -> Field:
        """Return milliseconds since the epoch of this day's UTC midnight.

        Returns:
            An int for valid dates, math.nan for invalid ones.

        Examples:
            >>> SymbolicDate("1970-01-02").value_of()
            86400000
        """
        if self._days is None:
            return math.nan
        return self._days * MS_PER_DAY

    def to_iso_format(self) -> str:
        """Return the date as an ISO 8601 calendar date (YYYY-MM-DD).

        Years outside 0-9999 use the signed six-digit extended form.

        Raises:
            InvalidDateError: If this date is invalid.

        Examples:
            >>> SymbolicDate(2022, 11, 1).to_iso_format()
            '2022-12-01'
            >>> SymbolicDate(-44, 2, 15).to_iso_format()
            '-000044-03-15'
        """
        if self._days is None:
            raise InvalidDateError("invalid date has no ISO 8601 form")
        year, month, day = epoch_day_to_ymd(self._days)
        if 0 <= year <= 9999:
            return f"{year:04d}-{month:02d}-{day:02d}"
        sign = "-" if year < 0 else "+"
        return f"{sign}{abs(year):06d}-{month:02d}-{day:02d}"

    def to_utc_string(self) -> str:
        """Return the canonical ``YYYY-MM-DD`` form (see to_iso_format)."""
        return self.to_iso_format()

    def to_json(self) -> str:
        """Return the JSON form of this date, the ``YYYY-MM-DD`` string.

        Raises:
            InvalidDateError: If this date is invalid.
        """
        return self.to_iso_format()

    def to_string(self) -> str:
        """Return a fixed English day string such as ``"Thu Dec 01 2022"``.

        Invalid dates give ``"Invalid Date"``.
        """
        if self._days is None:
            return INVALID_DATE_TEXT
        year, month, day = epoch_day_to_ymd(self._days)
        return format_day_string(year, month, day, epoch_day_to_weekday(self._days))

    def to_locale_string(
        self,
        locales: LocalesArg = None,
        options: dict | None = None,
    ) -> str:
        """Return the date formatted for a locale.

        Args:
            locales: A BCP 47 tag such as ``"en-US"``, a list of tags
                (the first known one is used), or None for the default.
            options: Intl-style options: ``weekday``, ``era``, ``year``,
                ``month``, ``day`` or ``dateStyle``.

        Returns:
            The localized string, or ``"Invalid Date"``.

        Raises:
            ValueError: If options are unsupported or inconsistent.

        Examples:
            >>> SymbolicDate("2022-12-01").to_locale_string("en-US")
            '12/1/2022'
            >>> SymbolicDate("2022-12-01").to_locale_string("de-DE", {"dateStyle": "long"})
            '1. Dezember 2022'
        """
        if self._days is None:
            return INVALID_DATE_TEXT
        year, month, day = epoch_day_to_ymd(self._days)
        if not MIN_DATETIME_YEAR <= year <= MAX_DATETIME_YEAR:
            logger.debug("year %d cannot be localized, using day string", year)
            return self.to_string()
        return format_locale_date(year, month, day, locales, options)

    def to_date(self) -> _datetime.date | None:
        """Return the equivalent ``datetime.date``.

        Returns:
            The date, or None if invalid or outside datetime's year range.
        """
        if self._days is None:
            return None
        year, month, day = epoch_day_to_ymd(self._days)
        if not MIN_DATETIME_YEAR <= year <= MAX_DATETIME_YEAR:
            return None
        return _datetime.date(year, month, day)

    def as_local_midnight(self) -> _datetime.datetime | None:
        """Return local-timezone midnight of this day as an aware datetime.

        Returns:
            The datetime, or None if invalid or out of datetime's range.
        """
        date = self.to_date()
        if date is None:
            return None
        try:
            return _datetime.datetime(date.year, date.month, date.day).astimezone()
        except (OverflowError, ValueError):
            # No local offset at the ends of datetime's range
            return None

    def as_utc_midnight(self) -> _datetime.datetime | None:
        """Return UTC midnight of this day as an aware datetime.

        Returns:
            The datetime, or None if invalid or out of datetime's range.
        """
        date = self.to_date()
        if date is None:
            return None
        return _datetime.datetime(
            date.year, date.month, date.day, tzinfo=_datetime.timezone.utc
        )

    def copy(self) -> SymbolicDate:
        """Return an independent instance for the same day."""
        date = type(self).__new__(type(self))
        date._days = self._days
        return date

    def __copy__(self) -> SymbolicDate:
        return self.copy()

    def __deepcopy__(self, memo: dict) -> SymbolicDate:
        return self.copy()

    def __float__(self) -> float:
        return float(self.value_of())

    def __eq__(self, other: object) -> bool:
        """Check equality by numeric value.

        Invalid dates are unequal to everything, themselves included.

        Examples:
            >>> SymbolicDate("2022-12-01") == SymbolicDate(2022, 11, 1)
            True
        """
        if not isinstance(other, SymbolicDate):
            return NotImplemented
        return self.value_of() == other.value_of()

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, SymbolicDate):
            return NotImplemented
        return self.value_of() < other.value_of()

    def __le__(self, other: object) -> bool:
        if not isinstance(other, SymbolicDate):
            return NotImplemented
        return self.value_of() <= other.value_of()

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, SymbolicDate):
            return NotImplemented
        return self.value_of() > other.value_of()

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, SymbolicDate):
            return NotImplemented
        return self.value_of() >= other.value_of()

    def __sub__(self, other: object) -> Field:
        """Return the difference between two dates in milliseconds.

        Examples:
            >>> SymbolicDate("2022-12-02") - SymbolicDate("2022-12-01")
            86400000
        """
        if not isinstance(other, SymbolicDate):
            return NotImplemented
        return self.value_of() - other.value_of()

    def __bool__(self) -> bool:
        """Valid dates are truthy, the invalid sentinel is falsy."""
        return self._days is not None

    def __repr__(self) -> str:
        if self._days is None:
            return f"{type(self).__name__}.invalid()"
        return f"{type(self).__name__}({self.to_iso_format()!r})"

    def __str__(self) -> str:
        return self.to_string()


__all__ = ["SymbolicDate"]
