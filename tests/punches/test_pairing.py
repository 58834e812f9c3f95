from __future__ import annotations

from datetime import date, datetime, timezone

from timeclock.core.enums import PunchType
from timeclock.punches.model import Punch, PunchPair
from timeclock.punches.pairing import aggregate_week, pair_punches, week_start


def _punch(kind: str, y: int, mo: int, d: int, h: int, mi: int) -> Punch:
    return Punch(
        punch_id=f"p-{kind}-{d}-{h}{mi}",
        worker_id="w1",
        punch_type=PunchType(kind),
        timestamp=datetime(y, mo, d, h, mi, tzinfo=timezone.utc),
    )


def test_first_in_and_last_out_of_the_day():
    pairs = pair_punches(
        [
            _punch("IN", 2026, 2, 2, 8, 5),
            _punch("OUT", 2026, 2, 2, 12, 0),
            _punch("IN", 2026, 2, 2, 12, 30),
            _punch("OUT", 2026, 2, 2, 16, 40),
        ]
    )

    assert len(pairs) == 1
    pair = pairs[0]
    assert pair.date == date(2026, 2, 2)
    assert pair.clock_in == datetime(2026, 2, 2, 8, 5, tzinfo=timezone.utc)
    assert pair.clock_out == datetime(2026, 2, 2, 16, 40, tzinfo=timezone.utc)
    assert pair.total_ms == (8 * 60 + 35) * 60 * 1000


def test_only_in_punch_has_no_total():
    pairs = pair_punches([_punch("IN", 2026, 2, 3, 9, 0)])

    assert pairs == [
        PunchPair(
            date=date(2026, 2, 3),
            clock_in=datetime(2026, 2, 3, 9, 0, tzinfo=timezone.utc),
            clock_out=None,
            total_ms=0,
        )
    ]


def test_only_out_punch_has_no_clock_in():
    pairs = pair_punches([_punch("OUT", 2026, 2, 3, 17, 0)])

    assert pairs[0].clock_in is None
    assert pairs[0].clock_out == datetime(2026, 2, 3, 17, 0, tzinfo=timezone.utc)
    assert pairs[0].total_ms == 0


def test_out_before_in_gives_negative_total():
    # Night shift: OUT 06:00 belongs to yesterday's shift, IN 22:00 starts a new one.
    pairs = pair_punches(
        [
            _punch("OUT", 2026, 2, 3, 6, 0),
            _punch("IN", 2026, 2, 3, 22, 0),
        ]
    )

    assert pairs[0].total_ms == -16 * 3_600_000


def test_dates_are_sparse_and_newest_first():
    pairs = pair_punches(
        [
            _punch("IN", 2026, 1, 30, 8, 0),
            _punch("OUT", 2026, 1, 30, 16, 0),
            _punch("IN", 2026, 2, 3, 8, 0),
            _punch("OUT", 2026, 2, 3, 12, 0),
        ]
    )

    assert [p.date for p in pairs] == [date(2026, 2, 3), date(2026, 1, 30)]


def test_no_punches_no_pairs():
    assert pair_punches([]) == []


def test_week_starts_on_monday():
    assert week_start(date(2026, 2, 2)) == date(2026, 2, 2)  # Monday
    assert week_start(date(2026, 2, 4)) == date(2026, 2, 2)  # Wednesday
    assert week_start(date(2026, 2, 8)) == date(2026, 2, 2)  # Sunday belongs to the week before it


def _pair(d: int, hours: float) -> PunchPair:
    return PunchPair(
        date=date(2026, 2, d) if d > 0 else date(2026, 1, 31 + d),
        clock_in=None,
        clock_out=None,
        total_ms=int(hours * 3_600_000),
    )


def test_aggregate_week_excludes_days_before_monday():
    pairs = [
        _pair(4, 4),  # Wed
        _pair(3, 8),  # Tue
        _pair(2, 7.5),  # Mon
        _pair(1, 6),  # Sun Feb 1, previous week
        _pair(0, 5),  # Sat Jan 31, previous week
    ]

    weekly = aggregate_week(pairs, today=date(2026, 2, 4))

    assert set(weekly.daily_hours) == {"Mon", "Tue", "Wed"}
    assert weekly.daily_hours["Mon"] == 7.5
    assert weekly.total_hours == 19.5
    assert weekly.total_ms == int(19.5 * 3_600_000)


def test_aggregate_week_accumulates_repeated_weekday():
    pairs = [_pair(2, 2), _pair(2, 3)]

    weekly = aggregate_week(pairs, today=date(2026, 2, 4))

    assert weekly.daily_hours == {"Mon": 5.0}
