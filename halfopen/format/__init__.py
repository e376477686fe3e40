"""Temporal formatting and parsing.

This module provides functions for converting Instants and Intervals to
and from ISO 8601 text:
    - format_instant / parse_instant
    - format_interval / parse_interval ('start/end' notation)

Examples:
    >>> from halfopen.format import parse_interval, format_interval
    >>> jan = parse_interval("2021-01-01/2021-02-01")
    >>> jan.duration().ticks
    31
    >>> format_interval(jan)
    '2021-01-01/2021-02-01'
"""

from __future__ import annotations

from halfopen.format.iso8601 import (
    format_instant,
    format_interval,
    parse_instant,
    parse_interval,
)

__all__: list[str] = [
    "format_instant",
    "parse_instant",
    "format_interval",
    "parse_interval",
]
