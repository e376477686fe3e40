"""Core temporal types.

This module provides the fundamental value types:
    - Instant: point in time at a fixed resolution
    - Duration: signed tick count at a fixed resolution
    - Interval: half-open span [start, end) between two instants
"""

from __future__ import annotations

from halfopen.core.duration import Duration
from halfopen.core.instant import Instant, Ordering, compare
from halfopen.core.interval import Interval

__all__: list[str] = [
    "Duration",
    "Instant",
    "Interval",
    "Ordering",
    "compare",
]
