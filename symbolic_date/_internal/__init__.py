"""Internal utilities for SymbolicDate.

This module contains private implementation details:
    - Constants, patterns and name tables
    - Proleptic Gregorian day-number arithmetic

Note: This module is not part of the public API.
"""

from __future__ import annotations

from symbolic_date._internal.calendar import (
    epoch_day_to_weekday,
    epoch_day_to_ymd,
    in_epoch_range,
    is_valid_ymd,
    make_epoch_day,
)

__all__: list[str] = [
    "epoch_day_to_weekday",
    "epoch_day_to_ymd",
    "in_epoch_range",
    "is_valid_ymd",
    "make_epoch_day",
]
