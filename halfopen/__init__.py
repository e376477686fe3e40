"""halfopen: half-open time intervals with explicit resolutions.

halfopen models time intervals as [start, end) with an exclusive end, so
a duration is always end - start with no +1/-1 correction. Adjacent
intervals share a boundary without overlapping.

Core Types:
    Instant: Point in time as integer ticks at a Resolution
    Duration: Signed tick count at a Resolution
    Interval: Half-open span [start, end) between two Instants

Units:
    Resolution: DAY < SECOND < MILLISECOND < MICROSECOND < NANOSECOND
    RoundingPolicy: EXACT / TRUNCATE / ROUND for narrowing conversions
    UtcOffset: Fixed offset from UTC
    CalendarProvider: Protocol for caller-supplied zone rules

Exceptions:
    HalfOpenError: Base exception
    InvalidRangeError: Interval end precedes start
    ResolutionMismatchError: Values at different resolutions combined
    OffsetMismatchError: Values in different offset frames combined
    LossyConversionError: Exact narrowing would drop a remainder
    OverflowError: Ticks outside the signed 64-bit range

Example:
    >>> from halfopen import Instant, Interval, Resolution
    >>> from halfopen.convert import convert
    >>> jan = Interval(Instant.from_date(2021, 1, 1), Instant.from_date(2021, 2, 1))
    >>> jan.duration().ticks
    31
    >>> convert(jan, Resolution.SECOND).duration().ticks == 31 * 86400
    True
"""

from __future__ import annotations

import logging

__version__ = "0.1.0"

# Core types
from halfopen.core.duration import Duration
from halfopen.core.instant import Instant, Ordering, compare
from halfopen.core.interval import Interval

# Units
from halfopen.units.offset import CalendarProvider, FixedOffsetCalendar, UtcOffset
from halfopen.units.resolution import DEFAULT_POLICY, Resolution, RoundingPolicy

# Exceptions
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

# Conversion and algebra
from halfopen.arithmetic import (
    add_calendar_days,
    add_duration,
    adjacent,
    elapsed,
    intersect,
    overlaps,
    union,
)
from halfopen.convert import assume_offset, shift_offset, to_date, to_datetime
from halfopen.format import format_instant, format_interval, parse_instant, parse_interval

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__: list[str] = [
    "__version__",
    # Core types
    "Duration",
    "Instant",
    "Interval",
    "Ordering",
    "compare",
    # Units
    "Resolution",
    "RoundingPolicy",
    "DEFAULT_POLICY",
    "UtcOffset",
    "CalendarProvider",
    "FixedOffsetCalendar",
    # Exceptions
    "HalfOpenError",
    "InvalidRangeError",
    "ResolutionMismatchError",
    "OffsetMismatchError",
    "LossyConversionError",
    "OverflowError",
    "ValidationError",
    "ParseError",
    # Conversion
    "to_date",
    "to_datetime",
    "assume_offset",
    "shift_offset",
    # Algebra and arithmetic
    "overlaps",
    "adjacent",
    "intersect",
    "union",
    "add_duration",
    "add_calendar_days",
    "elapsed",
    # Formatting
    "format_instant",
    "parse_instant",
    "format_interval",
    "parse_interval",
]
