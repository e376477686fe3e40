"""Tests for operations over collections of intervals."""

from __future__ import annotations

import pytest

from halfopen.arithmetic.range_ops import (
    find_gaps,
    merge_intervals,
    span_intervals,
    total_duration,
)
from halfopen.core.duration import Duration
from halfopen.core.instant import Instant
from halfopen.core.interval import Interval
from halfopen.errors import OffsetMismatchError, ResolutionMismatchError
from halfopen.units.offset import UtcOffset
from halfopen.units.resolution import Resolution


class TestMergeIntervals:
    def test_empty(self) -> None:
        assert merge_intervals([]) == []

    def test_single(self, seconds) -> None:
        assert merge_intervals([seconds(1, 3)]) == [seconds(1, 3)]

    def test_unsorted_overlapping_and_adjacent(self, seconds) -> None:
        result = merge_intervals([seconds(5, 8), seconds(1, 3), seconds(3, 4)])
        assert result == [seconds(1, 4), seconds(5, 8)]

    def test_nested(self, seconds) -> None:
        assert merge_intervals([seconds(0, 10), seconds(2, 3), seconds(4, 12)]) == [
            seconds(0, 12)
        ]

    def test_degenerate_inside_is_absorbed(self, seconds) -> None:
        assert merge_intervals([seconds(0, 10), seconds(5, 5)]) == [seconds(0, 10)]

    def test_isolated_degenerate_is_kept(self, seconds) -> None:
        assert merge_intervals([seconds(0, 2), seconds(5, 5)]) == [
            seconds(0, 2),
            seconds(5, 5),
        ]

    def test_mixed_resolutions_rejected(self, seconds, january) -> None:
        with pytest.raises(ResolutionMismatchError):
            merge_intervals([seconds(0, 1), january])


class TestSpanIntervals:
    def test_empty_is_none(self) -> None:
        assert span_intervals([]) is None

    def test_span(self, seconds) -> None:
        assert span_intervals([seconds(5, 8), seconds(1, 3)]) == seconds(1, 8)

    def test_offset_mismatch(self, seconds) -> None:
        aware = Interval(
            Instant.at(Resolution.SECOND, 0, UtcOffset.utc()),
            Instant.at(Resolution.SECOND, 1, UtcOffset.utc()),
        )
        with pytest.raises(OffsetMismatchError):
            span_intervals([seconds(0, 1), aware])


class TestFindGaps:
    def test_gaps(self, seconds) -> None:
        assert find_gaps([seconds(7, 9), seconds(1, 3), seconds(12, 13)]) == [
            seconds(3, 7),
            seconds(9, 12),
        ]

    def test_adjacent_leaves_no_gap(self, seconds) -> None:
        assert find_gaps([seconds(1, 3), seconds(3, 5)]) == []

    def test_empty(self) -> None:
        assert find_gaps([]) == []


class TestTotalDuration:
    def test_overlaps_counted_once(self, seconds) -> None:
        total = total_duration([seconds(0, 10), seconds(5, 15), seconds(20, 25)])
        assert total == Duration(20, Resolution.SECOND)

    def test_months(self, january) -> None:
        february = Interval(Instant.from_date(2021, 2, 1), Instant.from_date(2021, 3, 1))
        assert total_duration([january, february]) == Duration(59, Resolution.DAY)

    def test_empty_with_resolution(self) -> None:
        assert total_duration([], Resolution.DAY) == Duration.zero(Resolution.DAY)

    def test_empty_without_resolution(self) -> None:
        with pytest.raises(ValueError, match="needs a resolution"):
            total_duration([])
