"""Pytest configuration and fixtures for halfopen tests."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Add the project root to sys.path so halfopen can be imported
# without needing to install the package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from halfopen.core.instant import Instant  # noqa: E402
from halfopen.core.interval import Interval  # noqa: E402
from halfopen.units.resolution import Resolution  # noqa: E402


@pytest.fixture
def seconds():
    """Build a naive SECOND-resolution interval from two tick counts."""

    def build(start: int, end: int) -> Interval:
        return Interval(
            Instant.at(Resolution.SECOND, start),
            Instant.at(Resolution.SECOND, end),
        )

    return build


@pytest.fixture
def january() -> Interval:
    """The interval [2021-01-01, 2021-02-01) at DAY resolution."""
    return Interval(Instant.from_date(2021, 1, 1), Instant.from_date(2021, 2, 1))
