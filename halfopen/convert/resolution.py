"""Resolution and offset conversion for temporal values.

This module is the one place where values change granularity or offset
frame. Nothing here is implicit: every call names the target, and every
narrowing names a RoundingPolicy.

Functions:
    rescale: Integer core, move a tick count between resolutions.
    convert: Convert an Instant, Duration or Interval to another resolution.
    to_date: Narrow to DAY resolution (drops the time of day).
    to_datetime: Widen a date-only value to midnight timestamps.
    assume_offset: Label wall-clock ticks with an offset without moving them.
    shift_offset: Re-express the same UTC moment in another offset.

Widening (coarser to finer) multiplies and is always exact. Narrowing
(finer to coarser) divides; a non-zero remainder is handled by policy:

    EXACT     raise LossyConversionError
    TRUNCATE  drop it (floor, toward the earlier instant)
    ROUND     nearest tick, ties away from zero

Examples:
    >>> from halfopen import Instant, Resolution, RoundingPolicy
    >>> ms = Instant.at(Resolution.MILLISECOND, 1500)
    >>> convert(ms, Resolution.SECOND, RoundingPolicy.TRUNCATE).ticks
    1
    >>> convert(ms, Resolution.SECOND, RoundingPolicy.ROUND).ticks
    2
"""

from __future__ import annotations

import logging
from typing import TypeVar, Union, overload

from halfopen._internal.validation import check_ticks
from halfopen.core.duration import Duration
from halfopen.core.instant import Instant
from halfopen.core.interval import Interval
from halfopen.errors import LossyConversionError, OffsetMismatchError, ValidationError
from halfopen.units.offset import UtcOffset
from halfopen.units.resolution import DEFAULT_POLICY, Resolution, RoundingPolicy

logger = logging.getLogger(__name__)

# Values whose ticks can be moved between resolutions
Convertible = Union[Instant, Duration, Interval]
C = TypeVar("C", Instant, Duration, Interval)

# Values that live in an offset frame
Framed = TypeVar("Framed", Instant, Interval)


def _coerce_policy(policy: RoundingPolicy | str) -> RoundingPolicy:
    try:
        return RoundingPolicy(policy)
    except ValueError:
        raise ValidationError(f"unknown rounding policy: {policy!r}") from None


def rescale(
    ticks: int,
    source: Resolution,
    target: Resolution,
    policy: RoundingPolicy | str = DEFAULT_POLICY,
) -> int:
    """Move a tick count from one resolution to another.

    Args:
        ticks: Tick count at source resolution.
        source: Resolution the ticks are counted in.
        target: Resolution to express them in.
        policy: How to treat a remainder when narrowing.

    Returns:
        The tick count at target resolution.

    Raises:
        LossyConversionError: If policy is EXACT and a remainder would be lost.
        OverflowError: If the result leaves the signed 64-bit range.

    Examples:
        >>> rescale(2, Resolution.DAY, Resolution.SECOND)
        172800
        >>> rescale(-1, Resolution.SECOND, Resolution.DAY, "truncate")
        -1
    """
    policy = _coerce_policy(policy)
    if target >= source:
        return check_ticks(ticks * source.factor_to(target), target)

    divisor = target.factor_to(source)
    quotient, remainder = divmod(ticks, divisor)
    if remainder == 0:
        return check_ticks(quotient, target)

    if policy is RoundingPolicy.EXACT:
        raise LossyConversionError(
            f"{ticks} {source.value} ticks is not a whole number of "
            f"{target.value} ticks (remainder {remainder}); "
            f"pass RoundingPolicy.TRUNCATE or ROUND to drop it"
        )

    logger.debug(
        "Narrowing %d %s ticks to %s drops remainder %d (%s)",
        ticks,
        source.value,
        target.value,
        remainder,
        policy.value,
    )
    if policy is RoundingPolicy.TRUNCATE:
        return check_ticks(quotient, target)

    # divmod leaves 0 < remainder < divisor, so quotient is the floor
    twice = 2 * remainder
    if twice > divisor or (twice == divisor and ticks > 0):
        quotient += 1
    return check_ticks(quotient, target)


@overload
def convert(value: Instant, target: Resolution, policy: RoundingPolicy | str = ...) -> Instant: ...


@overload
def convert(value: Duration, target: Resolution, policy: RoundingPolicy | str = ...) -> Duration: ...


@overload
def convert(value: Interval, target: Resolution, policy: RoundingPolicy | str = ...) -> Interval: ...


def convert(
    value: Convertible,
    target: Resolution,
    policy: RoundingPolicy | str = DEFAULT_POLICY,
) -> Convertible:
    """Convert an Instant, Duration or Interval to another resolution.

    Offsets are carried unchanged. For an Interval both endpoints are
    converted with the same policy; TRUNCATE and ROUND are monotonic, so
    the result is still a valid interval (possibly degenerate).

    Args:
        value: The value to convert.
        target: The resolution to convert to.
        policy: Narrowing policy; ignored when widening.

    Returns:
        A new value of the same type at target resolution.

    Raises:
        TypeError: If value is not a supported type.
        LossyConversionError: If policy is EXACT and a remainder would be lost.
        OverflowError: If the result leaves the signed 64-bit range.

    Examples:
        >>> from halfopen import Instant, Resolution
        >>> convert(Instant.from_date(1970, 1, 2), Resolution.SECOND).ticks
        86400
    """
    if not isinstance(target, Resolution):
        raise TypeError(f"target must be a Resolution, got {type(target).__name__}")

    if isinstance(value, Instant):
        ticks = rescale(value.ticks, value.resolution, target, policy)
        return Instant(target, ticks, value.offset)
    elif isinstance(value, Duration):
        return Duration(rescale(value.ticks, value.resolution, target, policy), target)
    elif isinstance(value, Interval):
        return Interval(
            convert(value.start, target, policy),
            convert(value.end, target, policy),
        )
    else:
        raise TypeError(
            f"expected Instant, Duration, or Interval, got {type(value).__name__}"
        )


def to_date(value: C, policy: RoundingPolicy | str = DEFAULT_POLICY) -> C:
    """Narrow a value to DAY resolution.

    The time of day is dropped under TRUNCATE; under EXACT a non-midnight
    time of day raises LossyConversionError.

    Examples:
        >>> from halfopen import Instant, Resolution
        >>> noon = Instant.from_datetime(2021, 1, 1, 12)
        >>> str(to_date(noon, "truncate"))
        '2021-01-01'
    """
    return convert(value, Resolution.DAY, policy)


def to_datetime(
    value: Framed,
    resolution: Resolution = Resolution.SECOND,
    offset: UtcOffset | None = None,
) -> Framed:
    """Widen a date-only Instant or Interval to midnight timestamps.

    Every date becomes the midnight that starts it. An exclusive end date is
    already the start of the following day, so it becomes that midnight with
    no adjustment and the duration is unchanged.

    Args:
        value: A DAY-resolution Instant or Interval.
        resolution: A sub-day resolution to widen to.
        offset: Optional offset to label the result with. A naive value
            becomes aware; an aware value must already carry this offset.

    Raises:
        ValidationError: If value is not date-only or resolution is DAY.
        OffsetMismatchError: If value is aware with a different offset.

    Examples:
        >>> from halfopen import Instant, Interval, UtcOffset
        >>> jan = Interval(Instant.from_date(2021, 1, 1), Instant.from_date(2021, 2, 1))
        >>> str(to_datetime(jan, offset=UtcOffset.utc()))
        '[2021-01-01T00:00:00Z, 2021-02-01T00:00:00Z)'
    """
    if value.resolution is not Resolution.DAY:
        raise ValidationError(
            f"to_datetime() widens date-only values, got {value.resolution.value}; "
            f"use convert() for other resolutions"
        )
    if resolution is Resolution.DAY:
        raise ValidationError("to_datetime() needs a sub-day resolution, got day")

    widened = convert(value, resolution, RoundingPolicy.EXACT)
    if offset is None:
        return widened
    if value.offset is None:
        return assume_offset(widened, offset)
    if value.offset != offset:
        raise OffsetMismatchError(
            f"value is already in offset {value.offset}, not {offset}; "
            f"use shift_offset() to move it"
        )
    return widened


def assume_offset(value: Framed, offset: UtcOffset | None) -> Framed:
    """Label the wall-clock ticks of value with offset, without moving them.

    This is how a naive value learns which frame its wall-clock ticks were
    recorded in. Passing None makes the value naive again.

    Examples:
        >>> from halfopen import Instant, Resolution, UtcOffset
        >>> i = assume_offset(Instant.at(Resolution.SECOND, 0), UtcOffset.from_hours(2))
        >>> i.ticks, i.utc_nanoseconds
        (0, -7200000000000)
    """
    if isinstance(value, Instant):
        return Instant(value.resolution, value.ticks, offset)
    elif isinstance(value, Interval):
        return Interval(
            assume_offset(value.start, offset),
            assume_offset(value.end, offset),
        )
    else:
        raise TypeError(f"expected Instant or Interval, got {type(value).__name__}")


def shift_offset(
    value: Framed,
    offset: UtcOffset,
    policy: RoundingPolicy | str = DEFAULT_POLICY,
) -> Framed:
    """Re-express an aware value's UTC moment in another offset.

    The ticks move by the difference between the two offsets. At DAY
    resolution the shifted moment is computed in seconds and then narrowed
    with policy, so the result matches convert() on the same moment. Under
    EXACT a date can only move between offsets that differ by whole days.

    Raises:
        OffsetMismatchError: If value is naive.
        LossyConversionError: If policy is EXACT and the shift is sub-tick.

    Examples:
        >>> from halfopen import Instant, UtcOffset
        >>> utc = Instant.from_datetime(2021, 3, 1, 12, offset=UtcOffset.utc())
        >>> str(shift_offset(utc, UtcOffset.from_hours(-5)))
        '2021-03-01T07:00:00-05:00'
    """
    if value.offset is None:
        raise OffsetMismatchError(
            "cannot shift a naive value; use assume_offset() to label it first"
        )

    delta_seconds = offset.seconds - value.offset.seconds
    resolution = value.resolution

    if isinstance(value, Instant):
        ticks = _shift_ticks(value.ticks, resolution, delta_seconds, policy)
        return Instant(resolution, ticks, offset)
    elif isinstance(value, Interval):
        start = _shift_ticks(value.start.ticks, resolution, delta_seconds, policy)
        end = _shift_ticks(value.end.ticks, resolution, delta_seconds, policy)
        return Interval(Instant(resolution, start, offset), Instant(resolution, end, offset))
    else:
        raise TypeError(f"expected Instant or Interval, got {type(value).__name__}")


def _shift_ticks(
    ticks: int,
    resolution: Resolution,
    delta_seconds: int,
    policy: RoundingPolicy | str,
) -> int:
    if resolution >= Resolution.SECOND:
        return ticks + rescale(delta_seconds, Resolution.SECOND, resolution)
    # Narrow the shifted value, not the delta, so rounding sees the real moment
    seconds = rescale(ticks, resolution, Resolution.SECOND) + delta_seconds
    return rescale(seconds, Resolution.SECOND, resolution, policy)


__all__ = [
    "rescale",
    "convert",
    "to_date",
    "to_datetime",
    "assume_offset",
    "shift_offset",
]
