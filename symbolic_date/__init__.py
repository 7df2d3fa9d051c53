"""SymbolicDate: calendar days without time of day or timezone.

A SymbolicDate means "December 1, 2022", not an instant. It is stored as
UTC midnight of its day, so reading its fields gives the same answer in
every process timezone, and it still converts to and from
``datetime.datetime`` and JSON.

Core Types:
    SymbolicDate: Calendar day (year, zero-based month, day of month)

JSON Functions:
    revive_symbolic_date: Reviver turning "YYYY-MM-DD" strings into dates
    dumps: Serialize data containing SymbolicDate values
    loads: Parse JSON text, reviving calendar-date strings

Exceptions:
    SymbolicDateError: Base exception
    ParseError: Strict parsing failed
    InvalidDateError: Invalid date asked for its ISO form

Example:
    >>> from symbolic_date import SymbolicDate, dumps, loads
    >>> d = SymbolicDate("2022-12-01")
    >>> d.set_date(d.get_date() - 1)
    SymbolicDate('2022-11-30')
    >>> loads(dumps({"date": d}))
    {'date': SymbolicDate('2022-11-30')}
"""

from __future__ import annotations

__version__ = "0.1.0"

# Core types
from symbolic_date.core.symbolic_date import SymbolicDate

# JSON
from symbolic_date.convert.json import (
    SymbolicDateEncoder,
    dumps,
    loads,
    revive,
    revive_symbolic_date,
)

# Exceptions
from symbolic_date.errors import (
    InvalidDateError,
    ParseError,
    SymbolicDateError,
)

__all__: list[str] = [
    "__version__",
    # Core types
    "SymbolicDate",
    # JSON
    "SymbolicDateEncoder",
    "dumps",
    "loads",
    "revive",
    "revive_symbolic_date",
    # Exceptions
    "SymbolicDateError",
    "ParseError",
    "InvalidDateError",
]
