from __future__ import annotations

import csv
import io
import logging
from datetime import datetime, timedelta
from typing import Optional

from ..common.datetime_utils import elapsed_ms, now_utc
from ..common.duration import format_duration
from ..core.constants import HISTORY_RANGE_DAYS, MS_PER_HOUR, WEEKLY_FETCH_DAYS
from ..core.enums import PunchType
from ..core.exceptions import StoreError, ValidationError
from .model import ClockOutResult, ClockStatus, Punch, PunchPair, WeeklyHours
from .pairing import aggregate_week, pair_punches
from .repository import PunchRepository

logger = logging.getLogger(__name__)


class PunchService:
    def __init__(self, punches: PunchRepository):
        self._punches = punches

    def get_worker_status(self, worker_id: str) -> ClockStatus:
        last = self._punches.get_latest(worker_id)
        if not last or last.punch_type != PunchType.IN:
            return ClockStatus(is_clocked_in=False, clock_in_time=None, last_punch=last)
        return ClockStatus(is_clocked_in=True, clock_in_time=last.timestamp, last_punch=last)

    def clock_in(self, worker_id: str, *, now: datetime | None = None) -> Punch:
        now = now or now_utc()
        try:
            punch = self._punches.add_punch(worker_id=worker_id, punch_type=PunchType.IN, timestamp=now)
        except StoreError as exc:
            raise StoreError("Failed to clock in. Please try again.") from exc
        logger.info("worker %s clocked in", worker_id)
        return punch

    def clock_out(
        self,
        worker_id: str,
        last_clock_in_time: Optional[datetime],
        *,
        now: datetime | None = None,
    ) -> ClockOutResult:
        """Record an OUT punch and report time worked since the caller's clock-in.

        The elapsed time is measured from `last_clock_in_time` as the kiosk
        knows it, not re-read from the store.
        """
        now = now or now_utc()

        worked_ms = 0
        worked = "Unknown"
        if last_clock_in_time is not None:
            worked_ms = elapsed_ms(last_clock_in_time, now)
            worked = format_duration(worked_ms)

        try:
            punch = self._punches.add_punch(worker_id=worker_id, punch_type=PunchType.OUT, timestamp=now)
        except StoreError as exc:
            raise StoreError("Failed to clock out. Please try again.") from exc

        logger.info("worker %s clocked out after %s", worker_id, worked)
        return ClockOutResult(punch=punch, time_worked=worked, time_worked_ms=worked_ms)

    def get_punch_history(self, worker_id: str, days: int, *, now: datetime | None = None) -> list[PunchPair]:
        if int(days) <= 0:
            raise ValidationError("History window must be at least one day.")
        now = now or now_utc()
        since = now - timedelta(days=int(days))
        return pair_punches(self._punches.list_since(worker_id, since))

    def get_history_for_range(self, worker_id: str, range_name: str, *, now: datetime | None = None) -> list[PunchPair]:
        days = HISTORY_RANGE_DAYS.get((range_name or "week").lower())
        if days is None:
            raise ValidationError("Range must be one of: " + ", ".join(HISTORY_RANGE_DAYS))
        return self.get_punch_history(worker_id, days, now=now)

    def get_weekly_hours(self, worker_id: str, *, now: datetime | None = None) -> WeeklyHours:
        now = now or now_utc()
        pairs = self.get_punch_history(worker_id, WEEKLY_FETCH_DAYS, now=now)
        return aggregate_week(pairs, today=now.date())

    def export_history_csv(self, worker_id: str, days: int, *, now: datetime | None = None) -> str:
        pairs = self.get_punch_history(worker_id, days, now=now)

        buf = io.StringIO()
        writer = csv.writer(buf)
        writer.writerow(["date", "clock_in", "clock_out", "hours", "duration"])
        for p in pairs:
            writer.writerow(
                [
                    p.date.isoformat(),
                    p.clock_in.strftime("%H:%M") if p.clock_in else "",
                    p.clock_out.strftime("%H:%M") if p.clock_out else "",
                    f"{p.total_ms / MS_PER_HOUR:.2f}",
                    format_duration(p.total_ms),
                ]
            )
        return buf.getvalue()
