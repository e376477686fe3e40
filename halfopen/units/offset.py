"""UTC offsets and the calendar-provider seam.

This module provides the UtcOffset class, a fixed offset from UTC, and the
CalendarProvider protocol through which callers inject zone rules. The
library never infers an offset from a calendar rule on its own.
"""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

from halfopen._internal.constants import MAX_UTC_OFFSET_SECONDS, SECONDS_PER_HOUR
from halfopen.errors import ValidationError

if TYPE_CHECKING:
    from halfopen.core.instant import Instant

_OFFSET_PATTERN = re.compile(r"^([+-])(\d{1,2})(?::?(\d{2})(?::?(\d{2}))?)?$")


class UtcOffset:
    """A fixed offset from UTC in whole seconds.

    Positive values are east of UTC (ahead), negative values west.

    Examples:
        >>> UtcOffset.utc().is_utc
        True

        >>> UtcOffset.from_hours(5, 30).seconds
        19800

        >>> str(UtcOffset.parse("-0500"))
        '-05:00'
    """

    __slots__ = ("_seconds",)

    _utc_instance: ClassVar[UtcOffset | None] = None

    def __init__(self, seconds: int) -> None:
        """Create an offset of the given number of seconds.

        Raises:
            ValidationError: If seconds is not an int or exceeds +/- 14 hours.
        """
        if not isinstance(seconds, int) or isinstance(seconds, bool):
            raise ValidationError(
                f"offset seconds must be an integer, got {type(seconds).__name__}"
            )
        if abs(seconds) > MAX_UTC_OFFSET_SECONDS:
            raise ValidationError(
                f"offset {seconds}s is outside valid range "
                f"[-{MAX_UTC_OFFSET_SECONDS}, {MAX_UTC_OFFSET_SECONDS}]"
            )
        self._seconds: int = seconds

    @classmethod
    def utc(cls) -> UtcOffset:
        """Return the shared zero offset."""
        if cls._utc_instance is None:
            cls._utc_instance = cls(0)
        return cls._utc_instance

    @classmethod
    def from_hours(cls, hours: int, minutes: int = 0) -> UtcOffset:
        """Create an offset from hours and minutes.

        The sign of hours applies to minutes too, so from_hours(-3, 30)
        is UTC-03:30.

        Raises:
            ValidationError: If minutes is outside 0-59 or the total is out of range.
        """
        if minutes < 0 or minutes > 59:
            raise ValidationError(f"minutes must be 0-59, got {minutes}")
        sign = -1 if hours < 0 else 1
        return cls(hours * SECONDS_PER_HOUR + sign * minutes * 60)

    @classmethod
    def parse(cls, text: str) -> UtcOffset:
        """Parse "Z", "UTC", "+HH:MM[:SS]", "+HHMM" or "+HH".

        Raises:
            ValidationError: If the string cannot be parsed.
        """
        s = text.strip()
        if s.upper() in ("Z", "UTC"):
            return cls.utc()

        match = _OFFSET_PATTERN.match(s)
        if not match:
            raise ValidationError(f"cannot parse UTC offset: {text!r}")

        sign_str, hours_str, minutes_str, seconds_str = match.groups()
        minutes = int(minutes_str) if minutes_str else 0
        extra = int(seconds_str) if seconds_str else 0
        if minutes > 59 or extra > 59:
            raise ValidationError(f"offset minutes or seconds out of range: {text!r}")

        seconds = int(hours_str) * SECONDS_PER_HOUR + minutes * 60 + extra
        return cls(-seconds if sign_str == "-" else seconds)

    @property
    def seconds(self) -> int:
        """Return the offset in seconds."""
        return self._seconds

    @property
    def is_utc(self) -> bool:
        return self._seconds == 0

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, UtcOffset):
            return NotImplemented
        return self._seconds == other._seconds

    def __hash__(self) -> int:
        return hash(self._seconds)

    def __repr__(self) -> str:
        return f"UtcOffset({self._seconds})"

    def __str__(self) -> str:
        """Return "Z" for UTC, otherwise "+HH:MM" (with ":SS" if needed)."""
        if self._seconds == 0:
            return "Z"
        total_minutes, seconds = divmod(abs(self._seconds), 60)
        hours, minutes = divmod(total_minutes, 60)
        sign = "+" if self._seconds > 0 else "-"
        if seconds:
            return f"{sign}{hours:02d}:{minutes:02d}:{seconds:02d}"
        return f"{sign}{hours:02d}:{minutes:02d}"


@runtime_checkable
class CalendarProvider(Protocol):
    """Caller-supplied source of zone rules.

    Implementations answer which UTC offset is in force at a given local
    wall-clock instant (passed naive). Daylight-saving and any other
    rule-based behaviour lives entirely on the caller's side of this seam.
    """

    def utc_offset(self, local: Instant) -> UtcOffset: ...


class FixedOffsetCalendar:
    """A CalendarProvider whose offset never changes."""

    __slots__ = ("_offset",)

    def __init__(self, offset: UtcOffset) -> None:
        self._offset = offset

    def utc_offset(self, local: Instant) -> UtcOffset:
        return self._offset

    def __repr__(self) -> str:
        return f"FixedOffsetCalendar({self._offset!r})"


__all__ = ["UtcOffset", "CalendarProvider", "FixedOffsetCalendar"]
