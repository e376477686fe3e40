"""Temporal units and enumerations.

This module provides:
    - Resolution: ordered tick granularities (DAY ... NANOSECOND)
    - RoundingPolicy: EXACT / TRUNCATE / ROUND for narrowing conversions
    - UtcOffset: fixed offset from UTC
    - CalendarProvider: protocol for caller-supplied zone rules
"""

from __future__ import annotations

from halfopen.units.offset import CalendarProvider, FixedOffsetCalendar, UtcOffset
from halfopen.units.resolution import DEFAULT_POLICY, Resolution, RoundingPolicy

__all__: list[str] = [
    "Resolution",
    "RoundingPolicy",
    "DEFAULT_POLICY",
    "UtcOffset",
    "CalendarProvider",
    "FixedOffsetCalendar",
]
