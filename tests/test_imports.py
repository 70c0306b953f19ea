"""Tests for dmyparse package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_dmyparse() -> None:
    """Import dmyparse package succeeds."""
    import dmyparse

    assert hasattr(dmyparse, "__version__")
    assert dmyparse.__version__ == "0.1.0"


def test_top_level_exports() -> None:
    """The parse functions and value types are re-exported at top level."""
    import dmyparse
    from dmyparse.parse import parse_date, parse_date_time, parse_time

    assert dmyparse.parse_date is parse_date
    assert dmyparse.parse_time is parse_time
    assert dmyparse.parse_date_time is parse_date_time
    for name in dmyparse.__all__:
        assert hasattr(dmyparse, name)


def test_import_core_module() -> None:
    """Import dmyparse.core submodule succeeds."""
    from dmyparse import core

    assert core.__all__ == ["Date", "DateTime", "Time"]


def test_import_internal_module() -> None:
    """Import dmyparse._internal submodule succeeds."""
    from dmyparse import _internal

    assert hasattr(_internal, "__all__")


def test_import_errors() -> None:
    """Import dmyparse.errors succeeds with all exception classes."""
    from dmyparse.errors import DmyparseError, ParseError, ValidationError

    assert issubclass(ValidationError, DmyparseError)
    assert issubclass(ParseError, DmyparseError)
    assert issubclass(DmyparseError, Exception)


def test_import_constants() -> None:
    """Import dmyparse._internal.constants succeeds."""
    from dmyparse._internal.constants import (
        CENTURY_PREFIX,
        DAYS_IN_MONTH,
        MAX_YEAR,
        MIN_YEAR,
    )

    assert CENTURY_PREFIX == "20"
    assert MIN_YEAR == -9999
    assert MAX_YEAR == 9999
    assert len(DAYS_IN_MONTH) == 13  # 0-indexed placeholder + 12 months
