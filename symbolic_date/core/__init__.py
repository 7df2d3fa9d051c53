"""Core value types for SymbolicDate.

This module exports the main value type:
    - SymbolicDate: A calendar day with no time of day or timezone
"""

from __future__ import annotations

from symbolic_date.core.symbolic_date import SymbolicDate

__all__: list[str] = [
    "SymbolicDate",
]
