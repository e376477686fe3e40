"""Interval class representing a half-open time span [start, end).

This module provides the Interval class. Both endpoints share a resolution
and an offset; the start is a member, the end never is. A start equal to
the end is a valid degenerate interval of zero duration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Union, overload

from halfopen._internal.validation import check_same_frame
from halfopen.core.instant import Instant
from halfopen.errors import InvalidRangeError

if TYPE_CHECKING:
    from halfopen.core.duration import Duration
    from halfopen.units.offset import UtcOffset
    from halfopen.units.resolution import Resolution


class Interval:
    """A time span between two instants, half-open [start, end).

    The interval uses half-open semantics:
    - Start is inclusive (contained in the interval)
    - End is exclusive (not contained in the interval)

    This makes intervals composable: [a,b) + [b,c) = [a,c) with no gap
    or overlap at the boundary, and duration is end - start with no +1.

    Attributes:
        start: Start of interval (inclusive).
        end: End of interval (exclusive).

    Examples:
        >>> jan = Interval(Instant.from_date(2021, 1, 1), Instant.from_date(2021, 2, 1))
        >>> jan.duration().ticks
        31
        >>> Instant.from_date(2021, 1, 31) in jan
        True
        >>> Instant.from_date(2021, 2, 1) in jan  # End is exclusive
        False
    """

    __slots__ = ("_start", "_end")

    def __init__(self, start: Instant, end: Instant) -> None:
        """Create an interval [start, end).

        Args:
            start: Start of the interval (inclusive).
            end: End of the interval (exclusive).

        Raises:
            TypeError: If either endpoint is not an Instant.
            ResolutionMismatchError: If the endpoints' resolutions differ.
            OffsetMismatchError: If the endpoints' offsets differ.
            InvalidRangeError: If end < start.
        """
        if not isinstance(start, Instant) or not isinstance(end, Instant):
            raise TypeError(
                f"interval endpoints must be Instants, got "
                f"{type(start).__name__} and {type(end).__name__}"
            )
        check_same_frame(start, end, "build an interval from")
        if end.ticks < start.ticks:
            raise InvalidRangeError(
                f"end must not precede start: got start={start}, end={end}"
            )
        self._start: Instant = start
        self._end: Instant = end

    @classmethod
    def make(cls, start: Instant, end: Instant) -> Interval:
        """Create an interval [start, end); same as the constructor."""
        return cls(start, end)

    @classmethod
    def from_duration(cls, start: Instant, duration: Duration) -> Interval:
        """Create [start, start + duration).

        Raises:
            ResolutionMismatchError: If duration is at another resolution.
            InvalidRangeError: If duration is negative.

        Examples:
            >>> from halfopen.core.duration import Duration
            >>> from halfopen.units.resolution import Resolution
            >>> day = Interval.from_duration(Instant.from_date(2024, 1, 1),
            ...                              Duration(1, Resolution.DAY))
            >>> str(day)
            '[2024-01-01, 2024-01-02)'
        """
        return cls(start, start + duration)

    @classmethod
    def degenerate(cls, at: Instant) -> Interval:
        """Create the zero-duration interval [at, at)."""
        return cls(at, at)

    @property
    def start(self) -> Instant:
        return self._start

    @property
    def end(self) -> Instant:
        return self._end

    @property
    def resolution(self) -> Resolution:
        return self._start.resolution

    @property
    def offset(self) -> UtcOffset | None:
        return self._start.offset

    @property
    def is_degenerate(self) -> bool:
        """Return True if the interval has zero duration (start == end).

        A degenerate interval models an instantaneous event and contains
        no instants; a one-day interval [d, d+1) is a different value.
        """
        return self._start.ticks == self._end.ticks

    def duration(self) -> Duration:
        """Return end.ticks - start.ticks at the interval's resolution.

        Never negative. No boundary adjustment is applied.

        Examples:
            >>> i = Interval(Instant.from_date(2024, 1, 1), Instant.from_date(2024, 1, 1))
            >>> i.duration().ticks
            0
        """
        from halfopen.core.duration import Duration

        return Duration(self._end.ticks - self._start.ticks, self.resolution)

    @overload
    def contains(self, other: Instant) -> bool: ...

    @overload
    def contains(self, other: Interval) -> bool: ...

    def contains(self, other: Union[Instant, Interval]) -> bool:
        """Check if this interval contains an instant or another interval.

        For an instant: True if start <= instant < end. The end boundary is
        never a member, so a degenerate interval contains no instant.
        For an interval: True if this interval covers it entirely.

        Raises:
            ResolutionMismatchError: If other is at a different resolution.
            OffsetMismatchError: If naive and aware values are mixed.
        """
        if isinstance(other, Interval):
            from halfopen.arithmetic.algebra import covers

            return covers(self, other)
        return self._start <= other < self._end

    def __contains__(self, point: Instant) -> bool:
        """Support 'instant in interval' syntax."""
        return self.contains(point)

    def overlaps(self, other: Interval) -> bool:
        """Return True if the intervals share time; see algebra.overlaps()."""
        from halfopen.arithmetic.algebra import overlaps

        return overlaps(self, other)

    def adjacent(self, other: Interval) -> bool:
        """Return True if one interval ends exactly where the other starts."""
        from halfopen.arithmetic.algebra import adjacent

        return adjacent(self, other)

    def intersect(self, other: Interval) -> Interval | None:
        """Return the overlap of two intervals, or None."""
        from halfopen.arithmetic.algebra import intersect

        return intersect(self, other)

    def union(self, other: Interval) -> Interval | None:
        """Return the covering interval of overlapping or adjacent intervals, or None."""
        from halfopen.arithmetic.algebra import union

        return union(self, other)

    def gap(self, other: Interval) -> Duration | None:
        """Return the distance to a disjoint interval, or None if they overlap."""
        from halfopen.arithmetic.algebra import gap

        return gap(self, other)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Interval):
            return NotImplemented
        return self._start == other._start and self._end == other._end

    def __hash__(self) -> int:
        return hash((self._start, self._end))

    def __repr__(self) -> str:
        return f"Interval({self._start!r}, {self._end!r})"

    def __str__(self) -> str:
        """Return mathematical interval notation, e.g. '[2021-01-01, 2021-02-01)'."""
        return f"[{self._start}, {self._end})"


__all__ = ["Interval"]
