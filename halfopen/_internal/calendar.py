"""Calendar utilities for halfopen.

This module provides internal functions for proleptic Gregorian calendar
calculations: leap years, month lengths, and conversion between
(year, month, day) and day numbers counted from the Unix epoch.

Day 0 = 1970-01-01. Negative day numbers are earlier dates.

This module is not part of the public API.
"""

from __future__ import annotations

from halfopen._internal.constants import DAYS_IN_MONTH, ORDINAL_UNIX_EPOCH

# Days in a full 400-year Gregorian cycle
_DAYS_PER_400_YEARS = 146097

# Days before each month (cumulative), for non-leap years
# Index 0 is unused, months are 1-indexed
_DAYS_BEFORE_MONTH = (0, 0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def is_leap_year(year: int) -> bool:
    """Check if a year is a leap year in the proleptic Gregorian calendar.

    Args:
        year: The year to check (astronomical numbering, can be <= 0).

    Returns:
        True if the year is a leap year.

    Examples:
        >>> is_leap_year(2000)
        True
        >>> is_leap_year(1900)
        False
        >>> is_leap_year(2024)
        True
    """
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_month(year: int, month: int) -> int:
    """Return the number of days in a given month.

    Raises:
        ValueError: If month is not in 1-12.
    """
    if month < 1 or month > 12:
        raise ValueError(f"month must be 1-12, got {month}")

    if month == 2 and is_leap_year(year):
        return 29
    return DAYS_IN_MONTH[month]


def _days_before_month(year: int, month: int) -> int:
    result = _DAYS_BEFORE_MONTH[month]
    if month > 2 and is_leap_year(year):
        result += 1
    return result


def ymd_to_ordinal(year: int, month: int, day: int) -> int:
    """Convert year, month, day to ordinal (0001-01-01 is ordinal 1).

    Python's // floors toward negative infinity, so the year formula
    holds for year 0 and negative years as well.
    """
    y = year - 1
    days_before_year = y * 365 + y // 4 - y // 100 + y // 400
    return days_before_year + _days_before_month(year, month) + day


def ordinal_to_ymd(ordinal: int) -> tuple[int, int, int]:
    """Convert an ordinal day number back to (year, month, day).

    Ordinals below 1 are shifted forward by whole 400-year cycles, which
    repeat exactly in the Gregorian calendar, and shifted back afterwards.
    """
    if ordinal < 1:
        cycles = (1 - ordinal) // _DAYS_PER_400_YEARS + 1
        year, month, day = ordinal_to_ymd(ordinal + cycles * _DAYS_PER_400_YEARS)
        return (year - 400 * cycles, month, day)

    # n is 0-indexed (n=0 means ordinal=1)
    n = ordinal - 1

    n400, n = divmod(n, _DAYS_PER_400_YEARS)
    n100, n = divmod(n, 36524)
    n4, n = divmod(n, 1461)
    n1, n = divmod(n, 365)

    year = n400 * 400 + n100 * 100 + n4 * 4 + n1 + 1

    # Last day of a 4-year or 400-year cycle
    if n1 == 4 or n100 == 4:
        return (year - 1, 12, 31)

    month, day = _doy_to_md(year, n + 1)
    return (year, month, day)


def _doy_to_md(year: int, doy: int) -> tuple[int, int]:
    """Convert 1-indexed day-of-year to (month, day)."""
    month = 12
    while month > 1 and _days_before_month(year, month) >= doy:
        month -= 1
    return (month, doy - _days_before_month(year, month))


def days_from_civil(year: int, month: int, day: int) -> int:
    """Return the number of days from 1970-01-01 to the given date.

    Examples:
        >>> days_from_civil(1970, 1, 1)
        0
        >>> days_from_civil(2021, 2, 1) - days_from_civil(2021, 1, 1)
        31
    """
    return ymd_to_ordinal(year, month, day) - ORDINAL_UNIX_EPOCH


def civil_from_days(days: int) -> tuple[int, int, int]:
    """Return (year, month, day) for a day number relative to 1970-01-01.

    Examples:
        >>> civil_from_days(0)
        (1970, 1, 1)
        >>> civil_from_days(-1)
        (1969, 12, 31)
    """
    return ordinal_to_ymd(days + ORDINAL_UNIX_EPOCH)


__all__ = [
    "is_leap_year",
    "days_in_month",
    "ymd_to_ordinal",
    "ordinal_to_ymd",
    "days_from_civil",
    "civil_from_days",
]
