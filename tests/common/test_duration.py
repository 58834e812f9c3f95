from __future__ import annotations

import pytest

from timeclock.common.duration import format_duration


@pytest.mark.parametrize(
    "ms, expected",
    [
        (0, "0 minutes"),
        (59_999, "0 minutes"),
        (60_000, "1 minutes"),
        (3_599_999, "59 minutes"),
        (3_600_000, "1h 0m"),
        (30_900_000, "8h 35m"),
        (36_059_999, "10h 0m"),
    ],
)
def test_format_duration_floors(ms, expected):
    assert format_duration(ms) == expected


def test_format_duration_keeps_sign_of_negative_interval():
    assert format_duration(-3_900_000) == "-1h 5m"
    assert format_duration(-120_000) == "-2 minutes"
