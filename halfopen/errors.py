"""halfopen exception hierarchy.

All halfopen-specific exceptions inherit from HalfOpenError. Every failure
is a caller-correctable input problem; nothing is retried internally.
"""

from __future__ import annotations


class HalfOpenError(Exception):
    """Base exception for all halfopen errors."""

    pass


class InvalidRangeError(HalfOpenError, ValueError):
    """Interval end precedes its start.

    Raised when constructing an Interval with end < start. A start equal
    to the end is valid and yields a degenerate interval.
    """

    pass


class ResolutionMismatchError(HalfOpenError, TypeError):
    """Operands at different resolutions were combined.

    Raised when comparing, subtracting, or building an interval from
    values whose resolutions differ. Callers must convert explicitly.

    Examples:
        - Comparing a DAY instant with a SECOND instant
        - Interval(start at MILLISECOND, end at MICROSECOND)
    """

    pass


class OffsetMismatchError(HalfOpenError, TypeError):
    """Operands do not share a UTC offset frame.

    Raised when a naive instant is ordered against an aware one, or when
    an operation that needs a single wall-clock frame gets two different
    offsets.
    """

    pass


class LossyConversionError(HalfOpenError):
    """A narrowing conversion under the exact policy would drop a remainder.

    Examples:
        - 1500 milliseconds converted to seconds
        - 2021-01-01T12:00:00 converted to a date
    """

    pass


class OverflowError(HalfOpenError):
    """Tick arithmetic exceeded the signed 64-bit range.

    Examples:
        - A year-2300 instant at nanosecond resolution
        - Widening a very large millisecond count to nanoseconds
    """

    pass


class ValidationError(HalfOpenError, ValueError):
    """Invalid input values.

    Examples:
        - Month value outside 1-12
        - Offset outside -14h to +14h
        - Unknown resolution name
    """

    pass


class ParseError(HalfOpenError):
    """Failed to parse a string or serialized representation."""

    pass


__all__ = [
    "HalfOpenError",
    "InvalidRangeError",
    "ResolutionMismatchError",
    "OffsetMismatchError",
    "LossyConversionError",
    "OverflowError",
    "ValidationError",
    "ParseError",
]
