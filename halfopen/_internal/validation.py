"""Validation utilities for halfopen.

This module provides the range checks shared by the value types and the
compatibility checks applied before two values are combined.

This module is not part of the public API.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from halfopen._internal.constants import MAX_YEAR, MIN_YEAR, TICK_MAX, TICK_MIN
from halfopen.errors import (
    OffsetMismatchError,
    OverflowError,
    ResolutionMismatchError,
    ValidationError,
)

if TYPE_CHECKING:
    from halfopen.core.instant import Instant
    from halfopen.units.resolution import Resolution


def check_ticks(ticks: int, resolution: Resolution) -> int:
    """Validate that a tick count is an int within the signed 64-bit range.

    Args:
        ticks: The tick count to check.
        resolution: The resolution the ticks are counted in (for messages).

    Returns:
        The tick count, unchanged.

    Raises:
        TypeError: If ticks is not an int (bool is rejected too).
        OverflowError: If ticks is outside [TICK_MIN, TICK_MAX].
    """
    if not isinstance(ticks, int) or isinstance(ticks, bool):
        raise TypeError(f"ticks must be an integer, got {type(ticks).__name__}")
    if ticks < TICK_MIN or ticks > TICK_MAX:
        raise OverflowError(
            f"{ticks} {resolution.value} ticks is outside the 64-bit range "
            f"[{TICK_MIN}, {TICK_MAX}]"
        )
    return ticks


def validate_year(year: int) -> None:
    """Raise ValidationError if year is outside MIN_YEAR to MAX_YEAR."""
    if year < MIN_YEAR or year > MAX_YEAR:
        raise ValidationError(
            f"year must be between {MIN_YEAR} and {MAX_YEAR}, got {year}"
        )


def validate_date(year: int, month: int, day: int) -> None:
    """Validate calendar date components.

    Raises:
        ValidationError: If any component is out of range for the calendar.
    """
    from halfopen._internal.calendar import days_in_month

    validate_year(year)
    if month < 1 or month > 12:
        raise ValidationError(f"month must be between 1 and 12, got {month}")
    max_day = days_in_month(year, month)
    if day < 1 or day > max_day:
        raise ValidationError(
            f"day must be between 1 and {max_day} for {year}-{month:02d}, got {day}"
        )


def validate_time(hour: int, minute: int, second: int, nanosecond: int) -> None:
    """Validate time-of-day components.

    Raises:
        ValidationError: If any component is out of range.
    """
    for name, value, upper in (
        ("hour", hour, 23),
        ("minute", minute, 59),
        ("second", second, 59),
        ("nanosecond", nanosecond, 999_999_999),
    ):
        if value < 0 or value > upper:
            raise ValidationError(f"{name} must be between 0 and {upper}, got {value}")


def check_same_resolution(left: Resolution, right: Resolution, operation: str) -> None:
    """Raise ResolutionMismatchError unless both resolutions are identical."""
    if left is not right:
        raise ResolutionMismatchError(
            f"cannot {operation} values at {left.value} and {right.value} "
            f"resolution; convert one of them first"
        )


def check_same_frame(left: Instant, right: Instant, operation: str) -> None:
    """Require two instants to share resolution and UTC offset.

    Raises:
        ResolutionMismatchError: If the resolutions differ.
        OffsetMismatchError: If the offsets differ (naive vs aware included).
    """
    check_same_resolution(left.resolution, right.resolution, operation)
    if left.offset != right.offset:
        raise OffsetMismatchError(
            f"cannot {operation} instants in different offset frames: "
            f"{_describe_offset(left)} and {_describe_offset(right)}"
        )


def _describe_offset(instant: Instant) -> str:
    if instant.offset is None:
        return "naive"
    return str(instant.offset)


__all__ = [
    "check_ticks",
    "validate_year",
    "validate_date",
    "validate_time",
    "check_same_resolution",
    "check_same_frame",
]
