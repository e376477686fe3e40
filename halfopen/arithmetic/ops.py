"""Instant arithmetic: elapsed durations versus calendar days.

This module keeps two operations apart that are easy to conflate:

    add_duration       moves an instant by elapsed ticks ("24 hours")
    add_calendar_days  moves the date and keeps the wall-clock time
                       ("same time tomorrow"), asking a caller-supplied
                       CalendarProvider which offset is in force there

Across a daylight-saving transition the two differ: one calendar day may
be 23 or 25 hours of elapsed time. The library never decides that on its
own; the provider does.

Functions:
    add_duration: Add a Duration (or raw tick count) to an Instant.
    subtract: Wall-clock tick difference of two instants in one frame.
    elapsed: Physical time between two instants, offsets may differ.
    add_calendar_days: Move an Instant by whole calendar days.

Class operators on Instant delegate to add_duration and subtract.
"""

from __future__ import annotations

import logging
from typing import Union

from halfopen._internal.validation import (
    check_same_frame,
    check_same_resolution,
)
from halfopen.core.duration import Duration
from halfopen.core.instant import Instant
from halfopen.errors import OffsetMismatchError
from halfopen.units.offset import CalendarProvider
from halfopen.units.resolution import DEFAULT_POLICY, Resolution, RoundingPolicy

logger = logging.getLogger(__name__)


def add_duration(instant: Instant, duration: Union[Duration, int]) -> Instant:
    """Move an instant by an elapsed duration; the offset is unchanged.

    Args:
        instant: The instant to move.
        duration: A Duration at the instant's resolution, or a plain tick count.

    Raises:
        ResolutionMismatchError: If duration is at another resolution.
        OverflowError: If the result leaves the signed 64-bit range.

    Examples:
        >>> from halfopen import Resolution
        >>> add_duration(Instant.at(Resolution.SECOND, 10), 5).ticks
        15
    """
    if isinstance(duration, Duration):
        check_same_resolution(instant.resolution, duration.resolution, "add")
        ticks = duration.ticks
    elif isinstance(duration, int) and not isinstance(duration, bool):
        ticks = duration
    else:
        raise TypeError(
            f"can only add a Duration or int to an Instant, not {type(duration).__name__}"
        )
    return instant.with_ticks(instant.ticks + ticks)


def subtract(left: Instant, right: Instant) -> Duration:
    """Return left - right as a Duration of wall-clock ticks.

    Raises:
        ResolutionMismatchError: If the resolutions differ.
        OffsetMismatchError: If the offsets differ; use elapsed() for that.
    """
    check_same_frame(left, right, "subtract")
    return Duration(left.ticks - right.ticks, left.resolution)


def elapsed(
    start: Instant,
    end: Instant,
    policy: RoundingPolicy | str = DEFAULT_POLICY,
) -> Duration:
    """Return the physical time from start to end.

    Unlike subtract(), the two instants may carry different offsets; they
    are compared as UTC moments. Two naive instants are compared by their
    wall-clock ticks.

    Args:
        start: The earlier instant (a later one gives a negative result).
        end: The later instant.
        policy: Narrowing policy when the difference is not a whole number
            of ticks (only possible at DAY resolution).

    Raises:
        ResolutionMismatchError: If the resolutions differ.
        OffsetMismatchError: If one instant is naive and the other aware.

    Examples:
        >>> from halfopen import Resolution, UtcOffset
        >>> a = Instant.from_datetime(2021, 3, 13, 12, offset=UtcOffset.from_hours(-5))
        >>> b = Instant.from_datetime(2021, 3, 14, 12, offset=UtcOffset.from_hours(-4))
        >>> elapsed(a, b).ticks // 3600
        23
    """
    from halfopen.convert.resolution import rescale

    check_same_resolution(start.resolution, end.resolution, "measure elapsed time between")
    if start.is_aware != end.is_aware:
        raise OffsetMismatchError(
            "cannot measure elapsed time between a naive and an aware instant"
        )
    nanos = end.utc_nanoseconds - start.utc_nanoseconds
    ticks = rescale(nanos, Resolution.NANOSECOND, start.resolution, policy)
    return Duration(ticks, start.resolution)


def add_calendar_days(
    instant: Instant,
    days: int,
    calendar: CalendarProvider | None = None,
) -> Instant:
    """Move an instant by whole calendar days, keeping its wall-clock time.

    Without a calendar the offset is kept, which is the fixed-offset
    calendar. With one, the result carries calendar.utc_offset() for the
    resulting local wall-clock instant (passed to the provider naive), so
    a naive input becomes aware.

    Raises:
        OverflowError: If the result leaves the signed 64-bit range.

    Examples:
        >>> str(add_calendar_days(Instant.from_date(2021, 1, 31), 1))
        '2021-02-01'
    """
    resolution = instant.resolution
    ticks = instant.ticks + days * Resolution.DAY.factor_to(resolution)

    if calendar is None:
        return Instant(resolution, ticks, instant.offset)

    offset = calendar.utc_offset(Instant(resolution, ticks))
    if offset != instant.offset:
        logger.debug(
            "Calendar day step from %s lands in offset %s (was %s)",
            instant,
            offset,
            instant.offset,
        )
    return Instant(resolution, ticks, offset)


__all__ = [
    "add_duration",
    "subtract",
    "elapsed",
    "add_calendar_days",
]
