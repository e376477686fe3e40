"""Tests for Resolution, RoundingPolicy and UtcOffset."""

from __future__ import annotations

import pytest

from halfopen.core.instant import Instant
from halfopen.errors import ValidationError
from halfopen.units.offset import CalendarProvider, FixedOffsetCalendar, UtcOffset
from halfopen.units.resolution import DEFAULT_POLICY, Resolution, RoundingPolicy


class TestResolutionOrdering:
    """Resolutions order from coarsest to finest."""

    def test_declared_order(self) -> None:
        ordered = [
            Resolution.DAY,
            Resolution.SECOND,
            Resolution.MILLISECOND,
            Resolution.MICROSECOND,
            Resolution.NANOSECOND,
        ]
        assert sorted(reversed(ordered)) == ordered

    def test_comparisons(self) -> None:
        assert Resolution.DAY < Resolution.SECOND
        assert Resolution.NANOSECOND > Resolution.MICROSECOND
        assert Resolution.SECOND <= Resolution.SECOND
        assert Resolution.MILLISECOND >= Resolution.SECOND
        assert max(Resolution.DAY, Resolution.MILLISECOND) is Resolution.MILLISECOND

    def test_comparison_with_other_type_is_unsupported(self) -> None:
        with pytest.raises(TypeError):
            Resolution.DAY < 1  # noqa: B015

    def test_rank(self) -> None:
        assert Resolution.DAY.rank == 0
        assert Resolution.NANOSECOND.rank == 4

    def test_is_date(self) -> None:
        assert Resolution.DAY.is_date
        assert not Resolution.SECOND.is_date


class TestResolutionFactors:
    """Conversion factors between adjacent and distant levels."""

    @pytest.mark.parametrize(
        ("coarse", "fine", "factor"),
        [
            (Resolution.DAY, Resolution.SECOND, 86_400),
            (Resolution.SECOND, Resolution.MILLISECOND, 1_000),
            (Resolution.MILLISECOND, Resolution.MICROSECOND, 1_000),
            (Resolution.MICROSECOND, Resolution.NANOSECOND, 1_000),
            (Resolution.DAY, Resolution.NANOSECOND, 86_400_000_000_000),
            (Resolution.SECOND, Resolution.SECOND, 1),
        ],
    )
    def test_factor_to(self, coarse: Resolution, fine: Resolution, factor: int) -> None:
        assert coarse.factor_to(fine) == factor

    def test_factor_to_coarser_raises(self) -> None:
        with pytest.raises(ValueError, match="coarser"):
            Resolution.SECOND.factor_to(Resolution.DAY)

    def test_nanos_per_tick(self) -> None:
        assert Resolution.NANOSECOND.nanos_per_tick == 1
        assert Resolution.SECOND.nanos_per_tick == 1_000_000_000


class TestResolutionFromName:
    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("day", Resolution.DAY),
            ("d", Resolution.DAY),
            ("second", Resolution.SECOND),
            ("S", Resolution.SECOND),
            ("ms", Resolution.MILLISECOND),
            ("us", Resolution.MICROSECOND),
            (" ns ", Resolution.NANOSECOND),
            ("nanoseconds", Resolution.NANOSECOND),
        ],
    )
    def test_known_names(self, name: str, expected: Resolution) -> None:
        assert Resolution.from_name(name) is expected

    def test_member_passes_through(self) -> None:
        assert Resolution.from_name(Resolution.DAY) is Resolution.DAY

    def test_unknown_name(self) -> None:
        with pytest.raises(ValidationError, match="unknown resolution"):
            Resolution.from_name("fortnight")


class TestRoundingPolicy:
    def test_default_policy_is_exact(self) -> None:
        assert DEFAULT_POLICY is RoundingPolicy.EXACT

    def test_values(self) -> None:
        assert RoundingPolicy("truncate") is RoundingPolicy.TRUNCATE
        assert RoundingPolicy("round") is RoundingPolicy.ROUND


class TestUtcOffset:
    def test_utc_singleton(self) -> None:
        assert UtcOffset.utc() is UtcOffset.utc()
        assert UtcOffset.utc().is_utc
        assert UtcOffset.utc() == UtcOffset(0)

    def test_from_hours(self) -> None:
        assert UtcOffset.from_hours(5, 30).seconds == 19_800
        assert UtcOffset.from_hours(-5).seconds == -18_000
        assert UtcOffset.from_hours(-3, 30).seconds == -12_600

    def test_from_hours_rejects_bad_minutes(self) -> None:
        with pytest.raises(ValidationError, match="minutes"):
            UtcOffset.from_hours(1, 60)

    def test_range_limit(self) -> None:
        assert UtcOffset.from_hours(14).seconds == 50_400
        with pytest.raises(ValidationError, match="outside valid range"):
            UtcOffset(50_401)

    def test_rejects_non_int(self) -> None:
        with pytest.raises(ValidationError, match="integer"):
            UtcOffset(1.5)  # type: ignore[arg-type]

    @pytest.mark.parametrize(
        ("text", "seconds"),
        [
            ("Z", 0),
            ("utc", 0),
            ("+05:30", 19_800),
            ("-0500", -18_000),
            ("+02", 7_200),
            ("-00:00:30", -30),
        ],
    )
    def test_parse(self, text: str, seconds: int) -> None:
        assert UtcOffset.parse(text).seconds == seconds

    @pytest.mark.parametrize("text", ["05:00", "+5:3", "+15:00", "+01:75", "EST"])
    def test_parse_rejects(self, text: str) -> None:
        with pytest.raises(ValidationError):
            UtcOffset.parse(text)

    def test_str(self) -> None:
        assert str(UtcOffset.utc()) == "Z"
        assert str(UtcOffset.from_hours(5, 30)) == "+05:30"
        assert str(UtcOffset.from_hours(-5)) == "-05:00"
        assert str(UtcOffset(-30)) == "-00:00:30"

    def test_equality_and_hash(self) -> None:
        assert UtcOffset(3600) == UtcOffset.from_hours(1)
        assert hash(UtcOffset(3600)) == hash(UtcOffset.from_hours(1))
        assert UtcOffset(3600) != UtcOffset(7200)
        assert UtcOffset(0) != 0


class TestFixedOffsetCalendar:
    def test_satisfies_protocol(self) -> None:
        assert isinstance(FixedOffsetCalendar(UtcOffset.utc()), CalendarProvider)

    def test_always_answers_same_offset(self) -> None:
        calendar = FixedOffsetCalendar(UtcOffset.from_hours(2))
        assert calendar.utc_offset(Instant.from_date(2021, 1, 1)) == UtcOffset.from_hours(2)
        assert calendar.utc_offset(Instant.from_date(2021, 7, 1)) == UtcOffset.from_hours(2)
