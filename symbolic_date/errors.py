"""SymbolicDate exception hierarchy.

All SymbolicDate-specific exceptions inherit from SymbolicDateError.

Constructing, mutating, comparing and subtracting dates never raises:
bad input produces an invalid date instead. The exceptions below are
reserved for the few operations that cannot return a sentinel.
"""

from __future__ import annotations


class SymbolicDateError(Exception):
    """Base exception for all SymbolicDate errors."""

    pass


class ParseError(SymbolicDateError, ValueError):
    """Failed to parse string representation.

    Raised by the strict parsing factory when a string is not a real
    calendar date in YYYY-MM-DD form.

    Examples:
        - Full ISO instant such as "2022-12-01T12:00:00Z"
        - Missing separators such as "20221201"
        - Impossible day such as "2023-02-29"
    """

    pass


class InvalidDateError(SymbolicDateError, ValueError):
    """Operation needs a valid date but got the invalid sentinel.

    Raised when an invalid date is asked for its ISO 8601 form, which
    includes JSON serialization.
    """

    pass


__all__ = [
    "SymbolicDateError",
    "ParseError",
    "InvalidDateError",
]
