"""Conversion to and from the standard library's datetime types.

Functions:
    from_python: Create an Instant from datetime.date or datetime.datetime.
    to_python: Convert an Instant to datetime.date or datetime.datetime.

A datetime.date maps to a DAY instant and a datetime.datetime to a
MICROSECOND instant (its native precision). An aware datetime keeps the
offset its tzinfo reports for that moment; the library does not consult
any zone rules itself.

Examples:
    >>> import datetime
    >>> from_python(datetime.date(2021, 1, 1)).ticks
    18628
    >>> to_python(from_python(datetime.date(2021, 1, 1)))
    datetime.date(2021, 1, 1)
"""

from __future__ import annotations

import datetime
from typing import Union

from halfopen._internal.constants import SECONDS_PER_DAY
from halfopen.convert.resolution import convert, rescale
from halfopen.core.instant import Instant
from halfopen.errors import ValidationError
from halfopen.units.offset import UtcOffset
from halfopen.units.resolution import DEFAULT_POLICY, Resolution, RoundingPolicy

PythonTemporal = Union[datetime.date, datetime.datetime]


def from_python(
    value: PythonTemporal,
    resolution: Resolution | None = None,
    policy: RoundingPolicy | str = DEFAULT_POLICY,
) -> Instant:
    """Create an Instant from a standard library date or datetime.

    Args:
        value: A datetime.date or datetime.datetime.
        resolution: Resolution of the result; defaults to DAY for dates and
            MICROSECOND for datetimes.
        policy: Narrowing policy when resolution is coarser than the default.

    Raises:
        TypeError: If value is not a date or datetime.
        ValidationError: If the tzinfo reports a sub-second offset.
        LossyConversionError: If narrowing under EXACT would drop a remainder.

    Examples:
        >>> import datetime
        >>> dt = datetime.datetime(1970, 1, 1, 0, 0, 1, tzinfo=datetime.timezone.utc)
        >>> from_python(dt, Resolution.SECOND).ticks
        1
    """
    if isinstance(value, datetime.datetime):
        offset = _offset_of(value)
        instant = Instant.from_datetime(
            value.year,
            value.month,
            value.day,
            value.hour,
            value.minute,
            value.second,
            value.microsecond * 1000,
            resolution=Resolution.MICROSECOND,
            offset=offset,
        )
    elif isinstance(value, datetime.date):
        instant = Instant.from_date(value.year, value.month, value.day)
    else:
        raise TypeError(f"expected date or datetime, got {type(value).__name__}")

    if resolution is None or resolution is instant.resolution:
        return instant
    return convert(instant, resolution, policy)


def to_python(
    instant: Instant,
    policy: RoundingPolicy | str = DEFAULT_POLICY,
) -> PythonTemporal:
    """Convert an Instant to a standard library date or datetime.

    DAY instants become datetime.date; every other resolution becomes
    datetime.datetime, narrowed to microseconds with policy when needed.
    An aware instant gets a fixed datetime.timezone of its offset.

    Raises:
        ValidationError: If the year is outside datetime's 1-9999 range.
        LossyConversionError: If nanoseconds would be dropped under EXACT.
    """
    if instant.is_date:
        year, month, day = instant.date_parts()
        _check_python_year(year)
        return datetime.date(year, month, day)

    if instant.resolution > Resolution.MICROSECOND:
        ticks = rescale(instant.ticks, instant.resolution, Resolution.MICROSECOND, policy)
        instant = Instant(Resolution.MICROSECOND, ticks, instant.offset)

    year, month, day = instant.date_parts()
    _check_python_year(year)
    hour, minute, second, nanosecond = instant.time_parts()
    tzinfo = None
    if instant.offset is not None:
        tzinfo = datetime.timezone(datetime.timedelta(seconds=instant.offset.seconds))
    return datetime.datetime(
        year, month, day, hour, minute, second, nanosecond // 1000, tzinfo=tzinfo
    )


def _offset_of(value: datetime.datetime) -> UtcOffset | None:
    delta = value.utcoffset()
    if delta is None:
        return None
    if delta.microseconds:
        raise ValidationError(f"sub-second UTC offsets are not supported: {delta}")
    return UtcOffset(delta.days * SECONDS_PER_DAY + delta.seconds)


def _check_python_year(year: int) -> None:
    if year < datetime.MINYEAR or year > datetime.MAXYEAR:
        raise ValidationError(
            f"year {year} is outside the datetime module's range "
            f"{datetime.MINYEAR}-{datetime.MAXYEAR}"
        )


__all__ = ["from_python", "to_python"]
