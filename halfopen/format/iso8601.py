"""ISO 8601 formatting and parsing.

This module provides functions for converting Instants and Intervals to
and from ISO 8601 text.

Functions:
    format_instant: Format an Instant as an ISO 8601 string.
    parse_instant: Parse an ISO 8601 string into an Instant.
    format_interval: Format an Interval as 'start/end'.
    parse_interval: Parse 'start/end' into an Interval.

The textual form follows the resolution exactly:

    DAY          2021-01-01
    SECOND       2021-01-01T00:00:00
    MILLISECOND  2021-01-01T00:00:00.000
    MICROSECOND  2021-01-01T00:00:00.000000
    NANOSECOND   2021-01-01T00:00:00.000000000

followed by 'Z' or '+HH:MM' for aware instants. Parsing infers the
resolution from the same shape, so formatting and parsing agree.

Examples:
    >>> from halfopen import Instant
    >>> format_instant(Instant.from_date(2021, 1, 1))
    '2021-01-01'

    >>> parse_instant("2021-01-01T00:00:00.250Z").resolution
    <Resolution.MILLISECOND: 'millisecond'>
"""

from __future__ import annotations

import re

from halfopen.core.instant import Instant
from halfopen.core.interval import Interval
from halfopen.errors import ParseError, ValidationError
from halfopen.units.offset import UtcOffset
from halfopen.units.resolution import Resolution, RoundingPolicy

_INSTANT_PATTERN = re.compile(
    r"^(?P<year>[+-]?\d{4,5})-(?P<month>\d{2})-(?P<day>\d{2})"
    r"(?:[Tt ](?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})"
    r"(?:[.,](?P<fraction>\d{1,9}))?)?"
    r"(?P<offset>[Zz]|[+-]\d{2}(?::?\d{2}(?::?\d{2})?)?)?$"
)

# Fraction digits written for each sub-second resolution
_FRACTION_DIGITS: dict[Resolution, int] = {
    Resolution.SECOND: 0,
    Resolution.MILLISECOND: 3,
    Resolution.MICROSECOND: 6,
    Resolution.NANOSECOND: 9,
}


def _resolution_for_fraction(fraction: str | None) -> Resolution:
    if not fraction:
        return Resolution.SECOND
    if len(fraction) <= 3:
        return Resolution.MILLISECOND
    if len(fraction) <= 6:
        return Resolution.MICROSECOND
    return Resolution.NANOSECOND


def _format_year(year: int) -> str:
    if year < 0:
        return f"-{-year:04d}"
    return f"{year:04d}"


def format_instant(instant: Instant) -> str:
    """Format an Instant as an ISO 8601 string.

    Examples:
        >>> from halfopen import Instant, Resolution, UtcOffset
        >>> format_instant(Instant.at(Resolution.MILLISECOND, 1500, UtcOffset.utc()))
        '1970-01-01T00:00:01.500Z'
    """
    year, month, day = instant.date_parts()
    text = f"{_format_year(year)}-{month:02d}-{day:02d}"

    if not instant.is_date:
        hour, minute, second, nanosecond = instant.time_parts()
        text += f"T{hour:02d}:{minute:02d}:{second:02d}"
        digits = _FRACTION_DIGITS[instant.resolution]
        if digits:
            fraction = f"{nanosecond:09d}"[:digits]
            text += f".{fraction}"

    if instant.offset is not None:
        text += str(instant.offset)
    return text


def parse_instant(text: str, resolution: Resolution | None = None) -> Instant:
    """Parse an ISO 8601 date or datetime into an Instant.

    Args:
        text: The string to parse.
        resolution: Resolution of the result. If omitted it is inferred
            from the text: date-only is DAY, no fraction is SECOND, and
            1-3 / 4-6 / 7-9 fraction digits are MILLI / MICRO / NANOSECOND.

    Raises:
        ParseError: If the string is not a supported ISO 8601 form.
        ValidationError: If a component is out of range.
        LossyConversionError: If resolution is coarser than the text's
            precision and the dropped part is non-zero.

    Examples:
        >>> parse_instant("2021-02-01").ticks
        18659
        >>> parse_instant("2021-02-01", Resolution.SECOND).ticks
        1612137600
    """
    from halfopen.convert.resolution import convert

    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    match = _INSTANT_PATTERN.match(text.strip())
    if not match:
        raise ParseError(
            f"cannot parse ISO 8601 instant: {text!r}. "
            "Expected YYYY-MM-DD or YYYY-MM-DDTHH:MM:SS[.fff][Z|+HH:MM]"
        )

    offset: UtcOffset | None = None
    if match["offset"]:
        try:
            offset = UtcOffset.parse(match["offset"])
        except ValidationError as exc:
            raise ParseError(f"invalid offset in {text!r}: {exc}") from exc

    year, month, day = int(match["year"]), int(match["month"]), int(match["day"])
    if match["hour"] is None:
        instant = Instant.from_date(year, month, day, offset)
    else:
        fraction = match["fraction"]
        instant = Instant.from_datetime(
            year,
            month,
            day,
            int(match["hour"]),
            int(match["minute"]),
            int(match["second"]),
            int(fraction.ljust(9, "0")) if fraction else 0,
            resolution=_resolution_for_fraction(fraction),
            offset=offset,
        )

    if resolution is None or resolution is instant.resolution:
        return instant
    return convert(instant, resolution, RoundingPolicy.EXACT)


def format_interval(interval: Interval) -> str:
    """Format an Interval in ISO 8601 'start/end' notation.

    Examples:
        >>> from halfopen import Instant, Interval
        >>> jan = Interval(Instant.from_date(2021, 1, 1), Instant.from_date(2021, 2, 1))
        >>> format_interval(jan)
        '2021-01-01/2021-02-01'
    """
    return f"{format_instant(interval.start)}/{format_instant(interval.end)}"


def parse_interval(text: str, resolution: Resolution | None = None) -> Interval:
    """Parse ISO 8601 'start/end' notation into an Interval.

    Without an explicit resolution, both endpoints are widened to the finer
    of their inferred resolutions; widening is exact, so nothing is lost.

    Raises:
        TypeError: If text is not a string.
        ParseError: If the text is not exactly two instants separated by '/'.
        InvalidRangeError: If end precedes start.
        OffsetMismatchError: If the endpoints carry different offsets.
    """
    from halfopen.convert.resolution import convert

    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    parts = text.strip().split("/")
    if len(parts) != 2:
        raise ParseError(f"cannot parse ISO 8601 interval: {text!r}. Expected 'start/end'")

    start = parse_instant(parts[0], resolution)
    end = parse_instant(parts[1], resolution)
    if resolution is None and start.resolution is not end.resolution:
        finer = max(start.resolution, end.resolution)
        start = convert(start, finer)
        end = convert(end, finer)
    return Interval(start, end)


__all__ = [
    "format_instant",
    "parse_instant",
    "format_interval",
    "parse_interval",
]
