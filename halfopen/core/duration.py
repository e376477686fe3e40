"""Duration class representing an elapsed tick count.

This module provides the Duration class: a signed number of ticks at a
single Resolution. It is what Interval.duration() returns, and what
add_duration() moves an Instant by.
"""

from __future__ import annotations

from halfopen._internal.validation import check_same_resolution, check_ticks
from halfopen.units.resolution import Resolution


class Duration:
    """A span of time counted in ticks of one resolution.

    Durations may be positive, negative, or zero. Two durations only
    combine or order when they share a resolution; convert first otherwise.

    Examples:
        >>> d = Duration(31, Resolution.DAY)
        >>> d.ticks
        31

        >>> Duration(1500, Resolution.MILLISECOND) + Duration(500, Resolution.MILLISECOND)
        Duration(2000, Resolution.MILLISECOND)
    """

    __slots__ = ("_ticks", "_resolution")

    def __init__(self, ticks: int, resolution: Resolution) -> None:
        """Create a Duration of ticks at resolution.

        Raises:
            TypeError: If resolution is not a Resolution or ticks not an int.
            OverflowError: If ticks is outside the signed 64-bit range.
        """
        if not isinstance(resolution, Resolution):
            raise TypeError(
                f"resolution must be a Resolution, got {type(resolution).__name__}"
            )
        self._ticks: int = check_ticks(ticks, resolution)
        self._resolution: Resolution = resolution

    @classmethod
    def zero(cls, resolution: Resolution) -> Duration:
        """Return a zero-length duration at resolution."""
        return cls(0, resolution)

    @property
    def ticks(self) -> int:
        return self._ticks

    @property
    def resolution(self) -> Resolution:
        return self._resolution

    @property
    def is_zero(self) -> bool:
        return self._ticks == 0

    @property
    def is_negative(self) -> bool:
        return self._ticks < 0

    @property
    def total_nanoseconds(self) -> int:
        """Return the exact length in nanoseconds."""
        return self._ticks * self._resolution.nanos_per_tick

    def __add__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        check_same_resolution(self._resolution, other._resolution, "add")
        return Duration(self._ticks + other._ticks, self._resolution)

    def __sub__(self, other: object) -> Duration:
        if not isinstance(other, Duration):
            return NotImplemented
        check_same_resolution(self._resolution, other._resolution, "subtract")
        return Duration(self._ticks - other._ticks, self._resolution)

    def __neg__(self) -> Duration:
        return Duration(-self._ticks, self._resolution)

    def __abs__(self) -> Duration:
        return Duration(abs(self._ticks), self._resolution)

    def __bool__(self) -> bool:
        return self._ticks != 0

    def __eq__(self, other: object) -> bool:
        """Durations are equal when resolution and ticks both match.

        Durations at different resolutions are never equal, even if they
        span the same time; compare after converting.
        """
        if not isinstance(other, Duration):
            return NotImplemented
        return self._resolution is other._resolution and self._ticks == other._ticks

    def __hash__(self) -> int:
        return hash((self._resolution, self._ticks))

    def _key(self, other: Duration) -> tuple[int, int]:
        check_same_resolution(self._resolution, other._resolution, "compare")
        return self._ticks, other._ticks

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        left, right = self._key(other)
        return left < right

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        left, right = self._key(other)
        return left <= right

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        left, right = self._key(other)
        return left > right

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Duration):
            return NotImplemented
        left, right = self._key(other)
        return left >= right

    def __repr__(self) -> str:
        return f"Duration({self._ticks}, Resolution.{self._resolution.name})"

    def __str__(self) -> str:
        """Return a short form such as '31 day' or '-250 millisecond'."""
        return f"{self._ticks} {self._resolution.value}"


__all__ = ["Duration"]
