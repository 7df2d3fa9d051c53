"""Formatting for calendar days.

This module provides:
    - format_day_string: fixed English day string ("Thu Dec 01 2022")
    - format_locale_date: locale-aware rendering through Babel

Examples:
    >>> from symbolic_date.format import format_day_string
    >>> format_day_string(2022, 12, 1, 4)
    'Thu Dec 01 2022'
"""

from __future__ import annotations

from symbolic_date.format.locale import (
    format_locale_date,
    resolve_locale,
    resolve_pattern,
)
from symbolic_date.format.text import format_day_string

__all__: list[str] = [
    "format_day_string",
    "format_locale_date",
    "resolve_locale",
    "resolve_pattern",
]
