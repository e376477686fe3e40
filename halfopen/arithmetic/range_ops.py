"""Range operation helpers for Interval collections.

This module provides utility functions for working with sequences of
intervals:
    - merge_intervals: Merge overlapping or adjacent intervals
    - span_intervals: Get the span covering all intervals
    - find_gaps: Find gaps between intervals
    - total_duration: Sum durations without double-counting overlaps

These functions complement the pairwise operations in
halfopen.arithmetic.algebra. All intervals in one call must share a
resolution and offset.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from halfopen._internal.validation import check_same_frame
from halfopen.arithmetic.algebra import union
from halfopen.core.duration import Duration

if TYPE_CHECKING:
    from halfopen.core.interval import Interval
    from halfopen.units.resolution import Resolution


def merge_intervals(intervals: Sequence[Interval]) -> list[Interval]:
    """Merge overlapping or adjacent intervals into a minimal sorted set.

    Degenerate intervals are kept only when they do not touch another
    interval; a degenerate interval at a boundary or inside another merges
    into it.

    Examples:
        >>> from halfopen import Instant, Interval, Resolution
        >>> def iv(s, e):
        ...     return Interval(Instant.at(Resolution.SECOND, s), Instant.at(Resolution.SECOND, e))
        >>> merge_intervals([iv(5, 8), iv(1, 3), iv(3, 4)]) == [iv(1, 4), iv(5, 8)]
        True
    """
    if not intervals:
        return []

    ordered = sorted(intervals, key=lambda i: (i.start.ticks, i.end.ticks))

    result: list[Interval] = []
    current = ordered[0]
    for interval in ordered[1:]:
        merged = union(current, interval)
        if merged is not None:
            current = merged
        else:
            result.append(current)
            current = interval

    result.append(current)
    return result


def span_intervals(intervals: Sequence[Interval]) -> Interval | None:
    """Return [earliest start, latest end), or None for an empty input."""
    from halfopen.core.interval import Interval

    if not intervals:
        return None

    first = intervals[0]
    for interval in intervals[1:]:
        check_same_frame(first.start, interval.start, "span")

    start = min((i.start for i in intervals), key=lambda s: s.ticks)
    end = max((i.end for i in intervals), key=lambda e: e.ticks)
    return Interval(start, end)


def find_gaps(intervals: Sequence[Interval]) -> list[Interval]:
    """Return the intervals between the merged members of intervals.

    Examples:
        >>> from halfopen import Instant, Interval, Resolution
        >>> def iv(s, e):
        ...     return Interval(Instant.at(Resolution.SECOND, s), Instant.at(Resolution.SECOND, e))
        >>> find_gaps([iv(1, 3), iv(7, 9)]) == [iv(3, 7)]
        True
    """
    from halfopen.core.interval import Interval

    merged = merge_intervals(intervals)
    return [
        Interval(current.end, following.start)
        for current, following in zip(merged, merged[1:])
    ]


def total_duration(
    intervals: Sequence[Interval],
    resolution: Resolution | None = None,
) -> Duration:
    """Return the total time covered by intervals, counting overlaps once.

    Args:
        intervals: A sequence of Intervals.
        resolution: Resolution of the zero result for an empty input.

    Raises:
        ValueError: If intervals is empty and resolution is not given.
    """
    merged = merge_intervals(intervals)
    if not merged:
        if resolution is None:
            raise ValueError("total_duration() of no intervals needs a resolution")
        return Duration.zero(resolution)

    total = Duration.zero(merged[0].resolution)
    for interval in merged:
        total = total + interval.duration()
    return total


__all__ = [
    "merge_intervals",
    "span_intervals",
    "find_gaps",
    "total_duration",
]
