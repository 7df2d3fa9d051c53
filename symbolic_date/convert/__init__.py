"""Conversion utilities for calendar days.

This module provides functions for converting SymbolicDate values to and
from JSON:
    - dumps / SymbolicDateEncoder: serialize dates as "YYYY-MM-DD"
    - loads / revive / revive_symbolic_date: turn date strings back
      into SymbolicDate values while parsing

Examples:
    >>> from symbolic_date import SymbolicDate
    >>> from symbolic_date.convert import dumps, loads

    >>> text = dumps({"date": SymbolicDate("2022-12-01")})
    >>> loads(text)["date"] == SymbolicDate("2022-12-01")
    True
"""

from __future__ import annotations

from symbolic_date.convert.json import (
    SymbolicDateEncoder,
    dumps,
    loads,
    revive,
    revive_symbolic_date,
)

__all__ = [
    "SymbolicDateEncoder",
    "dumps",
    "loads",
    "revive",
    "revive_symbolic_date",
]
