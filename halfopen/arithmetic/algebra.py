"""Interval algebra over half-open intervals.

This module provides the binary relations and set operations for
Interval values. Every operation is total: it either returns a result,
returns None where the result is not an interval, or raises because the
operands live in different frames.

Operations:
    - overlaps: the intervals share time
    - adjacent: one ends exactly where the other starts
    - intersect: the shared part, or None
    - union: the covering interval of overlapping/adjacent intervals, or None
    - gap: the distance between disjoint intervals, or None
    - covers: the first interval contains the second entirely

With exclusive ends none of these needs a +1 or -1 tick correction:
[1, 3) and [3, 5) are adjacent and do not overlap.

Both operands must share resolution and offset; otherwise
ResolutionMismatchError or OffsetMismatchError is raised.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from halfopen._internal.validation import check_same_frame

if TYPE_CHECKING:
    from halfopen.core.duration import Duration
    from halfopen.core.interval import Interval


def _check(a: Interval, b: Interval, operation: str) -> None:
    check_same_frame(a.start, b.start, operation)


def overlaps(a: Interval, b: Interval) -> bool:
    """Return True iff a.start < b.end and b.start < a.end.

    Intervals that only touch (a.end == b.start) do not overlap.

    Examples:
        >>> from halfopen import Instant, Interval, Resolution
        >>> def iv(s, e):
        ...     return Interval(Instant.at(Resolution.SECOND, s), Instant.at(Resolution.SECOND, e))
        >>> overlaps(iv(1, 5), iv(3, 8))
        True
        >>> overlaps(iv(1, 3), iv(3, 5))
        False
    """
    _check(a, b, "test overlap of")
    return a.start.ticks < b.end.ticks and b.start.ticks < a.end.ticks


def adjacent(a: Interval, b: Interval) -> bool:
    """Return True iff a.end == b.start or b.end == a.start."""
    _check(a, b, "test adjacency of")
    return a.end.ticks == b.start.ticks or b.end.ticks == a.start.ticks


def intersect(a: Interval, b: Interval) -> Interval | None:
    """Return [max(starts), min(ends)), or None if the intervals do not overlap.

    Examples:
        >>> from halfopen import Instant, Interval, Resolution
        >>> def iv(s, e):
        ...     return Interval(Instant.at(Resolution.SECOND, s), Instant.at(Resolution.SECOND, e))
        >>> intersect(iv(1, 5), iv(3, 8)) == iv(3, 5)
        True
        >>> intersect(iv(1, 3), iv(3, 5)) is None
        True
    """
    from halfopen.core.interval import Interval

    if not overlaps(a, b):
        return None
    start = a.start if a.start.ticks >= b.start.ticks else b.start
    end = a.end if a.end.ticks <= b.end.ticks else b.end
    return Interval(start, end)


def union(a: Interval, b: Interval) -> Interval | None:
    """Return [min(starts), max(ends)) for overlapping or adjacent intervals.

    Returns None for disjoint intervals: the caller must then treat the
    result as the two separate intervals.
    """
    from halfopen.core.interval import Interval

    if not (overlaps(a, b) or adjacent(a, b)):
        return None
    start = a.start if a.start.ticks <= b.start.ticks else b.start
    end = a.end if a.end.ticks >= b.end.ticks else b.end
    return Interval(start, end)


def gap(a: Interval, b: Interval) -> Duration | None:
    """Return the duration between two disjoint intervals.

    Adjacent intervals have a zero gap; overlapping intervals have None.

    Examples:
        >>> from halfopen import Instant, Interval, Resolution
        >>> def iv(s, e):
        ...     return Interval(Instant.at(Resolution.SECOND, s), Instant.at(Resolution.SECOND, e))
        >>> gap(iv(1, 3), iv(7, 9)).ticks
        4
    """
    from halfopen.core.duration import Duration

    if overlaps(a, b):
        return None
    if a.end.ticks <= b.start.ticks:
        return Duration(b.start.ticks - a.end.ticks, a.resolution)
    return Duration(a.start.ticks - b.end.ticks, a.resolution)


def covers(a: Interval, b: Interval) -> bool:
    """Return True iff a.start <= b.start and b.end <= a.end."""
    _check(a, b, "test coverage of")
    return a.start.ticks <= b.start.ticks and b.end.ticks <= a.end.ticks


__all__ = [
    "overlaps",
    "adjacent",
    "intersect",
    "union",
    "gap",
    "covers",
]
