from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from timeclock.core.enums import PunchType
from timeclock.core.exceptions import StoreError, ValidationError
from timeclock.punches.memory_punch_repository import InMemoryPunchRepository
from timeclock.punches.service import PunchService


class FailingPunches:
    def add_punch(self, *, worker_id, punch_type, timestamp):
        raise StoreError("connection refused")

    def get_latest(self, worker_id):
        raise StoreError("connection refused")

    def list_since(self, worker_id, since):
        raise StoreError("connection refused")


@pytest.fixture
def svc(store) -> PunchService:
    return PunchService(InMemoryPunchRepository(store))


def test_new_worker_is_clocked_out(svc):
    status = svc.get_worker_status("demo-1")

    assert status.is_clocked_in is False
    assert status.clock_in_time is None
    assert status.last_punch is None


def test_status_follows_latest_punch(svc, fixed_now):
    svc.clock_in("demo-1", now=fixed_now - timedelta(hours=2))
    status = svc.get_worker_status("demo-1")
    assert status.is_clocked_in is True
    assert status.clock_in_time == fixed_now - timedelta(hours=2)

    svc.clock_out("demo-1", status.clock_in_time, now=fixed_now)
    status = svc.get_worker_status("demo-1")
    assert status.is_clocked_in is False
    assert status.last_punch.punch_type == PunchType.OUT


def test_status_read_does_not_change_it(svc, fixed_now):
    svc.clock_in("demo-2", now=fixed_now)

    first = svc.get_worker_status("demo-2")
    second = svc.get_worker_status("demo-2")

    assert first == second


def test_double_clock_in_is_accepted(svc, fixed_now):
    # The kiosk decides which button to show; the store keeps whatever it is sent.
    svc.clock_in("demo-1", now=fixed_now - timedelta(minutes=5))
    svc.clock_in("demo-1", now=fixed_now)

    assert svc.get_worker_status("demo-1").clock_in_time == fixed_now


def test_clock_out_reports_time_since_given_clock_in(svc, fixed_now):
    clock_in = fixed_now - timedelta(hours=8, minutes=35, seconds=59)

    result = svc.clock_out("demo-1", clock_in, now=fixed_now)

    assert result.time_worked == "8h 35m"
    assert result.time_worked_ms == (8 * 3600 + 35 * 60 + 59) * 1000
    assert result.punch.punch_type == PunchType.OUT
    assert result.punch.timestamp == fixed_now


def test_clock_out_without_clock_in_time_is_unknown(svc, fixed_now):
    result = svc.clock_out("demo-1", None, now=fixed_now)

    assert result.time_worked == "Unknown"
    assert result.time_worked_ms == 0
    assert svc.get_worker_status("demo-1").is_clocked_in is False


def test_clock_in_store_failure_has_user_message(fixed_now):
    svc = PunchService(FailingPunches())

    with pytest.raises(StoreError) as exc:
        svc.clock_in("demo-1", now=fixed_now)

    assert str(exc.value) == "Failed to clock in. Please try again."


def test_history_requires_positive_window(svc, fixed_now):
    with pytest.raises(ValidationError):
        svc.get_punch_history("demo-1", 0, now=fixed_now)


def test_history_window_excludes_older_punches(svc, fixed_now):
    svc.clock_in("demo-1", now=fixed_now - timedelta(days=10))
    svc.clock_in("demo-1", now=fixed_now - timedelta(days=1))

    history = svc.get_punch_history("demo-1", 7, now=fixed_now)

    assert [p.date for p in history] == [(fixed_now - timedelta(days=1)).date()]


def test_unknown_range_is_rejected(svc, fixed_now):
    with pytest.raises(ValidationError):
        svc.get_history_for_range("demo-1", "year", now=fixed_now)


def test_weekly_hours_only_count_current_week(svc, fixed_now):
    def shift(day: int, start: int, end: int):
        svc.clock_in("demo-1", now=datetime(2026, 2, day, start, 0, tzinfo=timezone.utc))
        svc.clock_out("demo-1", None, now=datetime(2026, 2, day, end, 0, tzinfo=timezone.utc))

    shift(1, 9, 13)  # Sunday, previous week
    shift(2, 8, 16)  # Monday
    shift(3, 8, 12)  # Tuesday

    weekly = svc.get_weekly_hours("demo-1", now=fixed_now)

    assert weekly.daily_hours == {"Mon": 8.0, "Tue": 4.0}
    assert weekly.total_hours == 12.0
    assert weekly.total_ms == 12 * 3_600_000


def test_weekly_hours_empty_week(svc, fixed_now):
    weekly = svc.get_weekly_hours("demo-4", now=fixed_now)

    assert weekly.total_ms == 0
    assert weekly.daily_hours == {}


def test_export_history_csv(svc, fixed_now):
    svc.clock_in("demo-1", now=datetime(2026, 2, 3, 8, 5, tzinfo=timezone.utc))
    svc.clock_out("demo-1", None, now=datetime(2026, 2, 3, 16, 40, tzinfo=timezone.utc))

    body = svc.export_history_csv("demo-1", 7, now=fixed_now)
    lines = body.strip().splitlines()

    assert lines[0] == "date,clock_in,clock_out,hours,duration"
    assert lines[1] == "2026-02-03,08:05,16:40,8.58,8h 35m"
