"""Tests for resolution and offset conversion."""

from __future__ import annotations

import logging

import pytest

from halfopen.convert.resolution import (
    assume_offset,
    convert,
    rescale,
    shift_offset,
    to_date,
    to_datetime,
)
from halfopen.core.duration import Duration
from halfopen.core.instant import Instant
from halfopen.core.interval import Interval
from halfopen.errors import (
    LossyConversionError,
    OffsetMismatchError,
    OverflowError,
    ValidationError,
)
from halfopen.units.offset import UtcOffset
from halfopen.units.resolution import Resolution, RoundingPolicy


class TestRescaleWidening:
    def test_day_to_second(self) -> None:
        assert rescale(2, Resolution.DAY, Resolution.SECOND) == 172_800

    @pytest.mark.parametrize("policy", list(RoundingPolicy))
    def test_widening_ignores_policy(self, policy: RoundingPolicy) -> None:
        assert rescale(3, Resolution.SECOND, Resolution.MILLISECOND, policy) == 3_000

    def test_same_resolution_is_identity(self) -> None:
        assert rescale(-7, Resolution.SECOND, Resolution.SECOND) == -7

    def test_widening_overflow(self) -> None:
        with pytest.raises(OverflowError):
            rescale(2**62, Resolution.MILLISECOND, Resolution.NANOSECOND)


class TestRescaleNarrowing:
    def test_exact_when_divisible(self) -> None:
        assert rescale(3_000, Resolution.MILLISECOND, Resolution.SECOND) == 3

    def test_exact_refuses_remainder(self) -> None:
        with pytest.raises(LossyConversionError, match="remainder 500"):
            rescale(1_500, Resolution.MILLISECOND, Resolution.SECOND, RoundingPolicy.EXACT)

    @pytest.mark.parametrize(
        ("ticks", "expected"),
        [(1_500, 1), (1_999, 1), (-1, -1), (-1_500, -2), (-1_000, -1)],
    )
    def test_truncate_floors(self, ticks: int, expected: int) -> None:
        result = rescale(ticks, Resolution.MILLISECOND, Resolution.SECOND, "truncate")
        assert result == expected

    @pytest.mark.parametrize(
        ("ticks", "expected"),
        [
            (1_499, 1),
            (1_500, 2),
            (2_500, 3),
            (1_501, 2),
            (-1_499, -1),
            (-1_500, -2),
            (-1_501, -2),
            (-2_500, -3),
        ],
    )
    def test_round_half_away_from_zero(self, ticks: int, expected: int) -> None:
        result = rescale(ticks, Resolution.MILLISECOND, Resolution.SECOND, RoundingPolicy.ROUND)
        assert result == expected

    def test_unknown_policy(self) -> None:
        with pytest.raises(ValidationError, match="rounding policy"):
            rescale(1, Resolution.SECOND, Resolution.DAY, "ceil")

    def test_lossy_narrowing_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="halfopen.convert.resolution"):
            rescale(1_500, Resolution.MILLISECOND, Resolution.SECOND, RoundingPolicy.TRUNCATE)
        assert "drops remainder 500" in caplog.text

    def test_exact_narrowing_is_not_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level(logging.DEBUG, logger="halfopen.convert.resolution"):
            rescale(2_000, Resolution.MILLISECOND, Resolution.SECOND, RoundingPolicy.TRUNCATE)
        assert caplog.records == []


class TestConvert:
    def test_instant_keeps_offset(self) -> None:
        instant = Instant.at(Resolution.SECOND, 5, UtcOffset.from_hours(3))
        result = convert(instant, Resolution.MILLISECOND)
        assert result.ticks == 5_000
        assert result.resolution is Resolution.MILLISECOND
        assert result.offset == UtcOffset.from_hours(3)

    def test_duration(self) -> None:
        result = convert(Duration(2, Resolution.SECOND), Resolution.MICROSECOND)
        assert result == Duration(2_000_000, Resolution.MICROSECOND)

    def test_interval(self, january: Interval) -> None:
        result = convert(january, Resolution.SECOND)
        assert result.resolution is Resolution.SECOND
        assert result.duration().ticks == 31 * 86_400

    def test_interval_narrowing_can_become_degenerate(self, seconds) -> None:
        result = convert(seconds(10, 20), Resolution.DAY, RoundingPolicy.TRUNCATE)
        assert result.is_degenerate

    def test_default_policy_is_exact(self) -> None:
        with pytest.raises(LossyConversionError):
            convert(Instant.at(Resolution.MILLISECOND, 1), Resolution.SECOND)

    def test_unsupported_value(self) -> None:
        with pytest.raises(TypeError, match="expected Instant"):
            convert(5, Resolution.SECOND)  # type: ignore[call-overload]

    def test_target_must_be_resolution(self) -> None:
        with pytest.raises(TypeError, match="Resolution"):
            convert(Instant.from_date(2021, 1, 1), "second")  # type: ignore[call-overload]


class TestDateDatetimeConversion:
    def test_date_becomes_midnight(self) -> None:
        result = to_datetime(Instant.from_date(2021, 1, 1))
        assert result.resolution is Resolution.SECOND
        assert result.time_parts() == (0, 0, 0, 0)
        assert result.date_parts() == (2021, 1, 1)

    def test_exclusive_end_needs_no_adjustment(self, january: Interval) -> None:
        result = to_datetime(january, offset=UtcOffset.utc())
        assert str(result) == "[2021-01-01T00:00:00Z, 2021-02-01T00:00:00Z)"
        assert result.duration().ticks == 31 * 86_400

    def test_to_datetime_at_finer_resolution(self, january: Interval) -> None:
        result = to_datetime(january, Resolution.NANOSECOND)
        assert result.duration().ticks == 31 * 86_400 * 10**9

    def test_to_datetime_rejects_day(self) -> None:
        with pytest.raises(ValidationError, match="sub-day"):
            to_datetime(Instant.from_date(2021, 1, 1), Resolution.DAY)

    @pytest.mark.parametrize("resolution", [Resolution.SECOND, Resolution.NANOSECOND])
    def test_to_datetime_rejects_timestamps(self, resolution: Resolution) -> None:
        timestamp = Instant.at(resolution, 1_500)
        with pytest.raises(ValidationError, match="date-only"):
            to_datetime(timestamp)

    def test_to_datetime_conflicting_offset(self) -> None:
        aware = Instant.from_date(2021, 1, 1, UtcOffset.from_hours(1))
        with pytest.raises(OffsetMismatchError):
            to_datetime(aware, offset=UtcOffset.utc())
        assert to_datetime(aware, offset=UtcOffset.from_hours(1)).is_aware

    def test_to_date_midnight_is_exact(self) -> None:
        midnight = Instant.from_datetime(2021, 2, 1)
        assert to_date(midnight) == Instant.from_date(2021, 2, 1)

    def test_to_date_with_time_of_day(self) -> None:
        noon = Instant.from_datetime(2021, 1, 1, 12)
        with pytest.raises(LossyConversionError):
            to_date(noon)
        assert to_date(noon, RoundingPolicy.TRUNCATE) == Instant.from_date(2021, 1, 1)
        assert to_date(noon, RoundingPolicy.ROUND) == Instant.from_date(2021, 1, 2)

    def test_to_date_before_epoch_truncates_to_same_day(self) -> None:
        evening = Instant.from_datetime(1969, 12, 31, 18)
        assert to_date(evening, "truncate") == Instant.from_date(1969, 12, 31)


class TestOffsets:
    def test_assume_offset_keeps_wall_clock(self) -> None:
        naive = Instant.from_datetime(2021, 6, 1, 9)
        aware = assume_offset(naive, UtcOffset.from_hours(2))
        assert aware.ticks == naive.ticks
        assert aware.time_parts() == (9, 0, 0, 0)
        assert aware.utc_nanoseconds == naive.local_nanoseconds - 7_200 * 10**9

    def test_assume_none_makes_naive(self) -> None:
        aware = Instant.at(Resolution.SECOND, 0, UtcOffset.utc())
        assert not assume_offset(aware, None).is_aware

    def test_assume_offset_on_interval(self, seconds) -> None:
        result = assume_offset(seconds(0, 60), UtcOffset.utc())
        assert result.offset == UtcOffset.utc()
        assert result.duration().ticks == 60

    def test_shift_offset_moves_wall_clock(self) -> None:
        utc = Instant.from_datetime(2021, 3, 1, 12, offset=UtcOffset.utc())
        eastern = shift_offset(utc, UtcOffset.from_hours(-5))
        assert eastern.time_parts() == (7, 0, 0, 0)
        assert eastern == utc

    def test_shift_offset_on_interval_keeps_duration(self) -> None:
        interval = Interval(
            Instant.at(Resolution.SECOND, 0, UtcOffset.utc()),
            Instant.at(Resolution.SECOND, 3_600, UtcOffset.utc()),
        )
        shifted = shift_offset(interval, UtcOffset.from_hours(5, 30))
        assert shifted.duration().ticks == 3_600
        assert shifted.start.ticks == 19_800
        assert shifted.start == interval.start

    def test_shift_naive_raises(self) -> None:
        with pytest.raises(OffsetMismatchError, match="assume_offset"):
            shift_offset(Instant.at(Resolution.SECOND, 0), UtcOffset.utc())

    def test_shift_date_by_hours(self) -> None:
        date = Instant.from_date(2021, 1, 1, UtcOffset.utc())
        with pytest.raises(LossyConversionError):
            shift_offset(date, UtcOffset.from_hours(-5))
        earlier = shift_offset(date, UtcOffset.from_hours(-5), RoundingPolicy.TRUNCATE)
        assert earlier.date_parts() == (2020, 12, 31)

    @pytest.mark.parametrize(
        "date",
        [(1969, 12, 31), (1970, 1, 1), (2021, 1, 1), (1900, 6, 15)],
    )
    def test_shift_date_rounds_like_convert(self, date: tuple[int, int, int]) -> None:
        utc_date = Instant.from_date(*date, UtcOffset.utc())
        plus_twelve = UtcOffset.from_hours(12)
        via_seconds = shift_offset(convert(utc_date, Resolution.SECOND), plus_twelve)
        expected = convert(via_seconds, Resolution.DAY, RoundingPolicy.ROUND)
        assert shift_offset(utc_date, plus_twelve, RoundingPolicy.ROUND) == expected

    def test_shift_date_before_epoch_rounds_half_away_from_zero(self) -> None:
        utc_date = Instant.from_date(1969, 12, 31, UtcOffset.utc())
        shifted = shift_offset(utc_date, UtcOffset.from_hours(12), RoundingPolicy.ROUND)
        assert shifted.date_parts() == (1969, 12, 31)
        assert shifted.offset == UtcOffset.from_hours(12)
