"""Temporal arithmetic and interval algebra.

Interval Algebra (from halfopen.arithmetic.algebra):
    - overlaps, adjacent: pairwise relations
    - intersect, union: pairwise set operations, None where undefined
    - gap: distance between disjoint intervals
    - covers: full containment of one interval in another

Range Operations (from halfopen.arithmetic.range_ops):
    - merge_intervals, span_intervals, find_gaps, total_duration

Instant Operations (from halfopen.arithmetic.ops):
    - add_duration: move by elapsed ticks
    - subtract: wall-clock difference in one frame
    - elapsed: physical time across offsets
    - add_calendar_days: move by calendar days via a CalendarProvider
"""

from __future__ import annotations

from halfopen.arithmetic.algebra import (
    adjacent,
    covers,
    gap,
    intersect,
    overlaps,
    union,
)
from halfopen.arithmetic.ops import (
    add_calendar_days,
    add_duration,
    elapsed,
    subtract,
)
from halfopen.arithmetic.range_ops import (
    find_gaps,
    merge_intervals,
    span_intervals,
    total_duration,
)

__all__ = [
    # Interval algebra
    "overlaps",
    "adjacent",
    "intersect",
    "union",
    "gap",
    "covers",
    # Range operations
    "merge_intervals",
    "span_intervals",
    "find_gaps",
    "total_duration",
    # Instant operations
    "add_duration",
    "subtract",
    "elapsed",
    "add_calendar_days",
]
