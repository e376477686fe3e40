"""Resolution and RoundingPolicy enumerations.

This module provides the Resolution enum, the ordered set of granularities
an Instant's ticks can be counted in, and the RoundingPolicy enum that
governs narrowing conversions between them.
"""

from __future__ import annotations

from enum import Enum

from halfopen._internal.constants import (
    DEFAULT_POLICY_NAME,
    NANOS_PER_DAY,
    NANOS_PER_MICROSECOND,
    NANOS_PER_MILLISECOND,
    NANOS_PER_SECOND,
)
from halfopen.errors import ValidationError


class Resolution(Enum):
    """Temporal granularity of a tick count.

    Resolutions are ordered from coarsest to finest:
    DAY < SECOND < MILLISECOND < MICROSECOND < NANOSECOND.
    A finer resolution compares greater, so converting "upwards" widens
    (exact multiplication) and converting "downwards" narrows (needs a
    RoundingPolicy).

    Examples:
        >>> Resolution.DAY < Resolution.SECOND
        True

        >>> Resolution.SECOND.factor_to(Resolution.MILLISECOND)
        1000

        >>> Resolution.from_name("ms")
        <Resolution.MILLISECOND: 'millisecond'>
    """

    DAY = "day"
    SECOND = "second"
    MILLISECOND = "millisecond"
    MICROSECOND = "microsecond"
    NANOSECOND = "nanosecond"

    @classmethod
    def from_name(cls, name: str) -> Resolution:
        """Look up a resolution by value or short alias.

        Accepts "day", "second", ... as well as "d", "s", "ms", "us", "ns".

        Raises:
            ValidationError: If the name is unknown.
        """
        if isinstance(name, Resolution):
            return name
        key = str(name).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ValidationError(f"unknown resolution: {name!r}") from None

    @property
    def nanos_per_tick(self) -> int:
        """Return how many nanoseconds one tick of this resolution spans."""
        return _NANOS_PER_TICK[self]

    @property
    def rank(self) -> int:
        """Return the position of this resolution, 0 for DAY."""
        return _ORDER.index(self)

    @property
    def is_date(self) -> bool:
        """Return True for the date-only resolution."""
        return self is Resolution.DAY

    def factor_to(self, finer: Resolution) -> int:
        """Return the exact tick multiplier from this resolution to a finer one.

        Raises:
            ValueError: If finer is coarser than this resolution.

        Examples:
            >>> Resolution.DAY.factor_to(Resolution.SECOND)
            86400
            >>> Resolution.SECOND.factor_to(Resolution.SECOND)
            1
        """
        if finer < self:
            raise ValueError(
                f"{finer.value} is coarser than {self.value}; "
                f"use {finer.name}.factor_to({self.name})"
            )
        return self.nanos_per_tick // finer.nanos_per_tick

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Resolution):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other: object) -> bool:
        if not isinstance(other, Resolution):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other: object) -> bool:
        if not isinstance(other, Resolution):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other: object) -> bool:
        if not isinstance(other, Resolution):
            return NotImplemented
        return self.rank >= other.rank


class RoundingPolicy(Enum):
    """How a narrowing conversion treats a non-zero remainder.

    EXACT refuses to drop anything (LossyConversionError). TRUNCATE drops
    the remainder, moving toward the earlier instant. ROUND picks the
    nearest tick, with ties going away from zero.

    Widening conversions ignore the policy; they are always exact.
    """

    EXACT = "exact"
    TRUNCATE = "truncate"
    ROUND = "round"


_ORDER: tuple[Resolution, ...] = (
    Resolution.DAY,
    Resolution.SECOND,
    Resolution.MILLISECOND,
    Resolution.MICROSECOND,
    Resolution.NANOSECOND,
)

_NANOS_PER_TICK: dict[Resolution, int] = {
    Resolution.DAY: NANOS_PER_DAY,
    Resolution.SECOND: NANOS_PER_SECOND,
    Resolution.MILLISECOND: NANOS_PER_MILLISECOND,
    Resolution.MICROSECOND: NANOS_PER_MICROSECOND,
    Resolution.NANOSECOND: 1,
}

_ALIASES: dict[str, str] = {
    "d": "day",
    "days": "day",
    "date": "day",
    "s": "second",
    "sec": "second",
    "seconds": "second",
    "ms": "millisecond",
    "milliseconds": "millisecond",
    "us": "microsecond",
    "microseconds": "microsecond",
    "ns": "nanosecond",
    "nanoseconds": "nanosecond",
}

DEFAULT_POLICY: RoundingPolicy = RoundingPolicy(DEFAULT_POLICY_NAME)


__all__ = ["Resolution", "RoundingPolicy", "DEFAULT_POLICY"]
