"""Temporal conversion utilities.

This module provides functions for converting temporal values:
    - Between resolutions (convert, rescale, to_date, to_datetime)
    - Between offset frames (assume_offset, shift_offset)
    - To and from JSON-serializable dicts (to_json, from_json)
    - To and from the standard library's datetime types

Examples:
    >>> from halfopen import Instant, Resolution
    >>> from halfopen.convert import convert, to_json, from_json

    >>> midnight = convert(Instant.from_date(2021, 1, 1), Resolution.SECOND)
    >>> from_json(to_json(midnight)) == midnight
    True
"""

from __future__ import annotations

from halfopen.convert.json import from_json, to_json
from halfopen.convert.resolution import (
    assume_offset,
    convert,
    rescale,
    shift_offset,
    to_date,
    to_datetime,
)
from halfopen.convert.stdlib import from_python, to_python

__all__ = [
    # Resolution
    "convert",
    "rescale",
    "to_date",
    "to_datetime",
    # Offsets
    "assume_offset",
    "shift_offset",
    # JSON
    "to_json",
    "from_json",
    # Standard library
    "from_python",
    "to_python",
]
