from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, datetime
from typing import Optional

from ..core.enums import PunchType


@dataclass(frozen=True)
class Punch:
    """Domain entity: one clock event. Append-only."""

    punch_id: str
    worker_id: str
    punch_type: PunchType
    timestamp: datetime

    def to_public(self) -> dict:
        return {
            "id": self.punch_id,
            "worker_id": self.worker_id,
            "type": self.punch_type.value,
            "timestamp": self.timestamp.isoformat(),
        }


@dataclass(frozen=True)
class PunchPair:
    """Derived read-model: first IN and last OUT of one calendar date."""

    date: date
    clock_in: Optional[datetime]
    clock_out: Optional[datetime]
    total_ms: int

    def to_public(self) -> dict:
        return {
            "date": self.date.isoformat(),
            "clockIn": self.clock_in.isoformat() if self.clock_in else None,
            "clockOut": self.clock_out.isoformat() if self.clock_out else None,
            "totalMs": self.total_ms,
        }


@dataclass(frozen=True)
class WeeklyHours:
    total_ms: int
    total_hours: float
    daily_hours: dict[str, float] = field(default_factory=dict)

    def to_public(self) -> dict:
        return {
            "totalMs": self.total_ms,
            "totalHours": self.total_hours,
            "dailyHours": dict(self.daily_hours),
        }


@dataclass(frozen=True)
class ClockStatus:
    is_clocked_in: bool
    clock_in_time: Optional[datetime]
    last_punch: Optional[Punch] = None


@dataclass(frozen=True)
class ClockOutResult:
    punch: Punch
    time_worked: str
    time_worked_ms: int
