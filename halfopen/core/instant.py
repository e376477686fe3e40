"""Instant class representing a point in time at a fixed resolution.

This module provides the Instant class, an integer tick count since
1970-01-01T00:00:00 paired with a Resolution and an optional UtcOffset,
and the compare() function that orders two instants.
"""

from __future__ import annotations

from enum import IntEnum
from typing import TYPE_CHECKING, Union

from halfopen._internal.calendar import civil_from_days, days_from_civil
from halfopen._internal.constants import (
    NANOS_PER_DAY,
    NANOS_PER_HOUR,
    NANOS_PER_MINUTE,
    NANOS_PER_SECOND,
)
from halfopen._internal.validation import (
    check_same_resolution,
    check_ticks,
    validate_date,
    validate_time,
)
from halfopen.errors import OffsetMismatchError
from halfopen.units.offset import UtcOffset
from halfopen.units.resolution import Resolution

if TYPE_CHECKING:
    from halfopen.core.duration import Duration


class Ordering(IntEnum):
    """Result of compare(): LESS, EQUAL or GREATER (-1, 0, 1)."""

    LESS = -1
    EQUAL = 0
    GREATER = 1


class Instant:
    """An immutable point in time, counted in ticks of one resolution.

    The tick count is wall-clock time since 1970-01-01T00:00:00 in the
    frame of the instant's offset. An instant without an offset is naive
    (floating); with one it pins down a single UTC moment. Every day is
    86 400 seconds long (no leap seconds).

    Attributes:
        resolution: The granularity ticks are counted in.
        ticks: Signed 64-bit tick count since the epoch.
        offset: The UtcOffset frame, or None for a naive instant.

    Examples:
        >>> jan1 = Instant.from_date(2021, 1, 1)
        >>> jan1.ticks
        18628
        >>> feb1 = Instant.from_date(2021, 2, 1)
        >>> (feb1 - jan1).ticks
        31

        >>> Instant.at(Resolution.SECOND, 0, UtcOffset.utc())
        Instant.at(Resolution.SECOND, 0, UtcOffset(0))
    """

    __slots__ = ("_resolution", "_ticks", "_offset")

    def __init__(
        self,
        resolution: Resolution,
        ticks: int,
        offset: UtcOffset | None = None,
    ) -> None:
        """Create an Instant.

        Args:
            resolution: The granularity of ticks.
            ticks: Tick count since 1970-01-01T00:00:00 (local to offset).
            offset: Optional fixed UTC offset.

        Raises:
            TypeError: If an argument has the wrong type.
            OverflowError: If ticks is outside the signed 64-bit range.
        """
        if not isinstance(resolution, Resolution):
            raise TypeError(
                f"resolution must be a Resolution, got {type(resolution).__name__}"
            )
        if offset is not None and not isinstance(offset, UtcOffset):
            raise TypeError(
                f"offset must be a UtcOffset or None, got {type(offset).__name__}"
            )
        self._resolution: Resolution = resolution
        self._ticks: int = check_ticks(ticks, resolution)
        self._offset: UtcOffset | None = offset

    @classmethod
    def at(
        cls,
        resolution: Resolution,
        ticks: int,
        offset: UtcOffset | None = None,
    ) -> Instant:
        """Construct an Instant from its raw parts.

        Examples:
            >>> Instant.at(Resolution.MILLISECOND, 1500).ticks
            1500
        """
        return cls(resolution, ticks, offset)

    @classmethod
    def from_date(
        cls,
        year: int,
        month: int,
        day: int,
        offset: UtcOffset | None = None,
    ) -> Instant:
        """Create a date-only (DAY resolution) instant.

        Raises:
            ValidationError: If the date components are invalid.

        Examples:
            >>> Instant.from_date(1970, 1, 2).ticks
            1
        """
        validate_date(year, month, day)
        return cls(Resolution.DAY, days_from_civil(year, month, day), offset)

    @classmethod
    def from_datetime(
        cls,
        year: int,
        month: int,
        day: int,
        hour: int = 0,
        minute: int = 0,
        second: int = 0,
        nanosecond: int = 0,
        *,
        resolution: Resolution = Resolution.SECOND,
        offset: UtcOffset | None = None,
    ) -> Instant:
        """Create an instant from calendar and clock components.

        The components are wall-clock values in the frame of offset.

        Raises:
            ValidationError: If any component is out of range.
            LossyConversionError: If nanosecond cannot be represented at
                resolution (for example 1500 ns at MILLISECOND), or if
                resolution is DAY and the time of day is not midnight.
            OverflowError: If the result does not fit 64-bit ticks.

        Examples:
            >>> i = Instant.from_datetime(1970, 1, 1, 0, 0, 1, 500_000_000,
            ...                           resolution=Resolution.MILLISECOND)
            >>> i.ticks
            1500
        """
        from halfopen.convert.resolution import rescale
        from halfopen.units.resolution import RoundingPolicy

        validate_date(year, month, day)
        validate_time(hour, minute, second, nanosecond)
        total_nanos = (
            days_from_civil(year, month, day) * NANOS_PER_DAY
            + hour * NANOS_PER_HOUR
            + minute * NANOS_PER_MINUTE
            + second * NANOS_PER_SECOND
            + nanosecond
        )
        ticks = rescale(total_nanos, Resolution.NANOSECOND, resolution, RoundingPolicy.EXACT)
        return cls(resolution, ticks, offset)

    @property
    def resolution(self) -> Resolution:
        return self._resolution

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def offset(self) -> UtcOffset | None:
        return self._offset

    @property
    def is_aware(self) -> bool:
        """Return True if the instant carries a UTC offset."""
        return self._offset is not None

    @property
    def is_date(self) -> bool:
        """Return True for date-only (DAY resolution) instants."""
        return self._resolution is Resolution.DAY

    @property
    def local_nanoseconds(self) -> int:
        """Return wall-clock nanoseconds since the epoch, exact."""
        return self._ticks * self._resolution.nanos_per_tick

    @property
    def utc_nanoseconds(self) -> int:
        """Return nanoseconds since 1970-01-01T00:00:00Z, exact.

        For a naive instant this is the wall-clock count, as if it were UTC.
        """
        local = self.local_nanoseconds
        if self._offset is None:
            return local
        return local - self._offset.seconds * NANOS_PER_SECOND

    def date_parts(self) -> tuple[int, int, int]:
        """Return the wall-clock (year, month, day).

        Examples:
            >>> Instant.at(Resolution.SECOND, 86_399).date_parts()
            (1970, 1, 1)
        """
        return civil_from_days(self.local_nanoseconds // NANOS_PER_DAY)

    def time_parts(self) -> tuple[int, int, int, int]:
        """Return the wall-clock (hour, minute, second, nanosecond).

        Always (0, 0, 0, 0) for a date-only instant.
        """
        nanos_of_day = self.local_nanoseconds % NANOS_PER_DAY
        hour, rest = divmod(nanos_of_day, NANOS_PER_HOUR)
        minute, rest = divmod(rest, NANOS_PER_MINUTE)
        second, nanosecond = divmod(rest, NANOS_PER_SECOND)
        return (hour, minute, second, nanosecond)

    def with_ticks(self, ticks: int) -> Instant:
        """Return a new instant with the same resolution and offset."""
        return Instant(self._resolution, ticks, self._offset)

    def compare(self, other: Instant) -> Ordering:
        """Order this instant against another; see compare()."""
        return compare(self, other)

    def __eq__(self, other: object) -> bool:
        """Check equality with another instant.

        Instants at different resolutions, or one naive and one aware, are
        never equal. Aware instants are equal when they denote the same
        UTC moment, whatever their offsets.
        """
        if not isinstance(other, Instant):
            return NotImplemented
        if self._resolution is not other._resolution:
            return False
        if (self._offset is None) != (other._offset is None):
            return False
        return self.utc_nanoseconds == other.utc_nanoseconds

    def __hash__(self) -> int:
        return hash((self._resolution, self._offset is None, self.utc_nanoseconds))

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return compare(self, other) is Ordering.LESS

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return compare(self, other) is not Ordering.GREATER

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return compare(self, other) is Ordering.GREATER

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Instant):
            return NotImplemented
        return compare(self, other) is not Ordering.LESS

    def __add__(self, other: object) -> Instant:
        from halfopen.core.duration import Duration
        from halfopen.arithmetic.ops import add_duration

        if not isinstance(other, Duration):
            return NotImplemented
        return add_duration(self, other)

    def __sub__(self, other: object) -> Union[Instant, Duration]:
        from halfopen.core.duration import Duration
        from halfopen.arithmetic.ops import add_duration, subtract

        if isinstance(other, Duration):
            return add_duration(self, -other)
        if isinstance(other, Instant):
            return subtract(self, other)
        return NotImplemented

    def __repr__(self) -> str:
        args = f"Resolution.{self._resolution.name}, {self._ticks}"
        if self._offset is not None:
            args += f", {self._offset!r}"
        return f"Instant.at({args})"

    def __str__(self) -> str:
        """Return the ISO 8601 form, e.g. '2021-01-01' or '2021-01-01T00:00:00Z'."""
        from halfopen.format.iso8601 import format_instant

        return format_instant(self)


def compare(a: Instant, b: Instant) -> Ordering:
    """Order two instants.

    Both instants must share a resolution, and must both be naive or both
    be aware. Aware instants with different offsets are ordered by their
    UTC moments. Nothing is coerced.

    Args:
        a: First instant.
        b: Second instant.

    Returns:
        Ordering.LESS, Ordering.EQUAL or Ordering.GREATER.

    Raises:
        ResolutionMismatchError: If the resolutions differ.
        OffsetMismatchError: If one instant is naive and the other aware.

    Examples:
        >>> compare(Instant.from_date(2021, 1, 1), Instant.from_date(2021, 2, 1))
        <Ordering.LESS: -1>
    """
    check_same_resolution(a.resolution, b.resolution, "compare")
    if (a.offset is None) != (b.offset is None):
        raise OffsetMismatchError(
            "cannot order a naive instant against an aware one; "
            "attach an offset with assume_offset() first"
        )
    left = a.utc_nanoseconds
    right = b.utc_nanoseconds
    if left < right:
        return Ordering.LESS
    if left > right:
        return Ordering.GREATER
    return Ordering.EQUAL


__all__ = ["Instant", "Ordering", "compare"]
