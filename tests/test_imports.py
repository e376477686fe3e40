"""Tests for halfopen package imports.

These tests verify that the package structure is correct and all
modules are importable.
"""

from __future__ import annotations


def test_import_halfopen() -> None:
    """Import halfopen package succeeds."""
    import halfopen

    assert hasattr(halfopen, "__version__")
    assert halfopen.__version__ == "0.1.0"


def test_import_core_module() -> None:
    from halfopen import core

    assert hasattr(core, "__all__")


def test_import_units_module() -> None:
    from halfopen import units

    assert hasattr(units, "__all__")


def test_import_convert_module() -> None:
    from halfopen import convert

    assert hasattr(convert, "__all__")


def test_import_arithmetic_module() -> None:
    from halfopen import arithmetic

    assert hasattr(arithmetic, "__all__")


def test_import_format_module() -> None:
    from halfopen import format  # noqa: A004

    assert hasattr(format, "__all__")


def test_import_internal_module() -> None:
    from halfopen import _internal

    assert hasattr(_internal, "__all__")


def test_public_names_resolve() -> None:
    """Every name in halfopen.__all__ is an attribute of the package."""
    import halfopen

    for name in halfopen.__all__:
        assert hasattr(halfopen, name), name


def test_error_hierarchy() -> None:
    """All halfopen exceptions inherit from HalfOpenError."""
    from halfopen.errors import (
        HalfOpenError,
        InvalidRangeError,
        LossyConversionError,
        OffsetMismatchError,
        OverflowError,
        ParseError,
        ResolutionMismatchError,
        ValidationError,
    )

    for exc in (
        InvalidRangeError,
        LossyConversionError,
        OffsetMismatchError,
        OverflowError,
        ParseError,
        ResolutionMismatchError,
        ValidationError,
    ):
        assert issubclass(exc, HalfOpenError)

    assert issubclass(InvalidRangeError, ValueError)
    assert issubclass(ValidationError, ValueError)
    assert issubclass(ResolutionMismatchError, TypeError)
    assert issubclass(OffsetMismatchError, TypeError)


def test_library_logger_has_null_handler() -> None:
    import logging

    import halfopen  # noqa: F401

    handlers = logging.getLogger("halfopen").handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)


def test_subpackages_stay_reachable_as_attributes() -> None:
    """Top-level re-exports never hide a subpackage of the same name."""
    import types

    import halfopen

    for name in ("core", "units", "convert", "arithmetic", "format"):
        assert isinstance(getattr(halfopen, name), types.ModuleType), name
    assert callable(halfopen.convert.to_json)
    assert callable(halfopen.convert.convert)
