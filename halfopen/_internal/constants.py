"""Internal constants for halfopen.

These constants define the limits and magic numbers used throughout
the library. This module is not part of the public API.
"""

from __future__ import annotations

# Time unit conversions
NANOS_PER_MICROSECOND: int = 1_000
NANOS_PER_MILLISECOND: int = 1_000_000
NANOS_PER_SECOND: int = 1_000_000_000
NANOS_PER_MINUTE: int = 60 * NANOS_PER_SECOND
NANOS_PER_HOUR: int = 60 * NANOS_PER_MINUTE
NANOS_PER_DAY: int = 24 * NANOS_PER_HOUR  # 86_400_000_000_000

SECONDS_PER_MINUTE: int = 60
SECONDS_PER_HOUR: int = 60 * SECONDS_PER_MINUTE
SECONDS_PER_DAY: int = 24 * SECONDS_PER_HOUR  # 86_400

# Tick counts are signed 64-bit integers
TICK_MIN: int = -(2**63)
TICK_MAX: int = 2**63 - 1

# Year limits for calendar components
MIN_YEAR: int = -9999
MAX_YEAR: int = 9999

# Days in each month (non-leap year)
DAYS_IN_MONTH: tuple[int, ...] = (
    0,   # Placeholder for 1-indexed access
    31,  # January
    28,  # February (non-leap)
    31,  # March
    30,  # April
    31,  # May
    30,  # June
    31,  # July
    31,  # August
    30,  # September
    31,  # October
    30,  # November
    31,  # December
)

# Ordinal (days since 0001-01-01, which is ordinal 1) of 1970-01-01
ORDINAL_UNIX_EPOCH: int = 719163

# Default narrowing policy, by RoundingPolicy value
DEFAULT_POLICY_NAME: str = "exact"

# +/- 14 hours (Pacific/Kiritimati is UTC+14)
MAX_UTC_OFFSET_SECONDS: int = 14 * SECONDS_PER_HOUR


__all__ = [
    "NANOS_PER_MICROSECOND",
    "NANOS_PER_MILLISECOND",
    "NANOS_PER_SECOND",
    "NANOS_PER_MINUTE",
    "NANOS_PER_HOUR",
    "NANOS_PER_DAY",
    "SECONDS_PER_MINUTE",
    "SECONDS_PER_HOUR",
    "SECONDS_PER_DAY",
    "TICK_MIN",
    "TICK_MAX",
    "MIN_YEAR",
    "MAX_YEAR",
    "DAYS_IN_MONTH",
    "ORDINAL_UNIX_EPOCH",
    "DEFAULT_POLICY_NAME",
    "MAX_UTC_OFFSET_SECONDS",
]
