"""Internal utilities for halfopen.

This module contains private implementation details:
    - Constants and limits
    - Calendar day-number helpers
    - Validation helpers

Note: This module is not part of the public API.
"""

from __future__ import annotations

from halfopen._internal.validation import (
    check_same_frame,
    check_same_resolution,
    check_ticks,
    validate_date,
    validate_time,
    validate_year,
)

__all__: list[str] = [
    "check_same_frame",
    "check_same_resolution",
    "check_ticks",
    "validate_date",
    "validate_time",
    "validate_year",
]
