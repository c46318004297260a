"""Tests for chronoperiod package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations

import doctest
import importlib

import pytest


def test_import_chronoperiod() -> None:
    """Import chronoperiod package succeeds."""
    import chronoperiod

    assert hasattr(chronoperiod, "__version__")
    assert chronoperiod.__version__ == "0.1.0"


def test_import_core_module() -> None:
    """Import chronoperiod.core submodule succeeds."""
    from chronoperiod import core

    assert hasattr(core, "__all__")
    assert "Period" in core.__all__


def test_import_units_module() -> None:
    """Import chronoperiod.units submodule succeeds."""
    from chronoperiod import units

    assert hasattr(units, "__all__")


def test_import_chrono_module() -> None:
    """Import chronoperiod.chrono submodule succeeds."""
    from chronoperiod import chrono

    assert hasattr(chrono, "__all__")


def test_import_arithmetic_module() -> None:
    """Import chronoperiod.arithmetic submodule succeeds."""
    from chronoperiod import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_format_module() -> None:
    """Import chronoperiod.format submodule succeeds."""
    from chronoperiod import format

    assert hasattr(format, "__all__")


def test_import_internal_module() -> None:
    """Import chronoperiod._internal submodule succeeds."""
    from chronoperiod import _internal

    assert hasattr(_internal, "__all__")


def test_public_names_resolve() -> None:
    """Every name in __all__ is an attribute of the package."""
    import chronoperiod

    for name in chronoperiod.__all__:
        assert hasattr(chronoperiod, name), name


def test_exception_hierarchy() -> None:
    """Every library exception derives from ChronoPeriodError."""
    from chronoperiod import (
        ArithmeticOverflowError,
        ChronologyMismatchError,
        ChronoPeriodError,
        HasCalendarUnitsError,
        NoValidFieldsError,
        NullInputError,
        ParseError,
        UnsupportedFieldError,
        UnsupportedUnitError,
        ValidationError,
    )

    for error_type in (
        ValidationError,
        ParseError,
        ArithmeticOverflowError,
        UnsupportedUnitError,
        UnsupportedFieldError,
        ChronologyMismatchError,
        NoValidFieldsError,
        HasCalendarUnitsError,
        NullInputError,
    ):
        assert issubclass(error_type, ChronoPeriodError)
    assert issubclass(ArithmeticOverflowError, ArithmeticError)
    assert issubclass(NullInputError, TypeError)
    assert issubclass(ParseError, ValueError)


def test_library_logger_has_null_handler() -> None:
    """The package logger is silent unless the application configures logging."""
    import logging

    import chronoperiod  # noqa: F401

    handlers = logging.getLogger("chronoperiod").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


@pytest.mark.parametrize(
    "module_name",
    [
        "chronoperiod._internal.safe_math",
        "chronoperiod.core.date",
        "chronoperiod.core.duration",
    ],
)
def test_docstring_examples_run(module_name: str) -> None:
    """Examples in docstrings, including raised errors, match real output."""
    module = importlib.import_module(module_name)

    result = doctest.testmod(module)

    assert result.attempted > 0
    assert result.failed == 0
