"""Tests for symbolic_date package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_symbolic_date() -> None:
    """Import symbolic_date package succeeds."""
    import symbolic_date

    assert hasattr(symbolic_date, "__version__")
    assert symbolic_date.__version__ == "0.1.0"


def test_public_api() -> None:
    """Every name in __all__ is exported."""
    import symbolic_date

    for name in symbolic_date.__all__:
        assert hasattr(symbolic_date, name), name


def test_import_core_module() -> None:
    """Import symbolic_date.core submodule succeeds."""
    from symbolic_date import core

    assert hasattr(core, "__all__")


def test_import_format_module() -> None:
    """Import symbolic_date.format submodule succeeds."""
    from symbolic_date import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_convert_module() -> None:
    """Import symbolic_date.convert submodule succeeds."""
    from symbolic_date import convert

    assert hasattr(convert, "__all__")


def test_import_internal_module() -> None:
    """Import symbolic_date._internal submodule succeeds."""
    from symbolic_date import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import symbolic_date.errors succeeds with all exception classes."""
    from symbolic_date.errors import (
        InvalidDateError,
        ParseError,
        SymbolicDateError,
    )

    # Verify inheritance hierarchy
    assert issubclass(ParseError, SymbolicDateError)
    assert issubclass(InvalidDateError, SymbolicDateError)
    assert issubclass(ParseError, ValueError)
    assert issubclass(InvalidDateError, ValueError)
    assert issubclass(SymbolicDateError, Exception)


def test_import_constants() -> None:
    """Import symbolic_date._internal.constants succeeds."""
    from symbolic_date._internal.constants import (
        DAYS_IN_MONTH,
        MAX_EPOCH_DAYS,
        MS_PER_DAY,
    )

    assert MS_PER_DAY == 86_400_000
    assert MAX_EPOCH_DAYS * MS_PER_DAY == 8_640_000_000_000_000
    assert len(DAYS_IN_MONTH) == 13  # 0-indexed placeholder + 12 months
