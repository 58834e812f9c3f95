"""Punch pairing and weekly aggregation.

Raw punches are never assumed to alternate IN/OUT. Each calendar date is
reduced to its first IN and its last OUT, which tolerates forgotten or doubled
punches on the kiosk.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterable, Sequence

from ..common.datetime_utils import elapsed_ms
from ..core.constants import MS_PER_HOUR
from ..core.enums import PunchType
from .model import Punch, PunchPair, WeeklyHours

WEEKDAY_NAMES = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")


def pair_punches(punches: Iterable[Punch]) -> list[PunchPair]:
    """Reduce time-ordered punches to one PunchPair per date, newest date first.

    The date is the timestamp's own date component; no timezone conversion is
    applied. An OUT earlier than the day's IN yields a negative total, which is
    returned as-is.
    """
    ins: dict[date, list[Punch]] = {}
    outs: dict[date, list[Punch]] = {}

    for p in punches:
        day = p.timestamp.date()
        ins.setdefault(day, [])
        outs.setdefault(day, [])
        if p.punch_type == PunchType.IN:
            ins[day].append(p)
        else:
            outs[day].append(p)

    pairs: list[PunchPair] = []
    for day in ins:
        clock_in = ins[day][0].timestamp if ins[day] else None
        clock_out = outs[day][-1].timestamp if outs[day] else None
        total_ms = elapsed_ms(clock_in, clock_out) if clock_in and clock_out else 0
        pairs.append(PunchPair(date=day, clock_in=clock_in, clock_out=clock_out, total_ms=total_ms))

    pairs.sort(key=lambda pair: pair.date, reverse=True)
    return pairs


def week_start(today: date) -> date:
    """Monday of the week containing `today` (Sunday belongs to the week before it)."""
    return today - timedelta(days=today.weekday())


def aggregate_week(pairs: Sequence[PunchPair], *, today: date) -> WeeklyHours:
    start = week_start(today)

    total_ms = 0
    daily_hours: dict[str, float] = {}
    for pair in pairs:
        if pair.date < start:
            continue
        total_ms += pair.total_ms
        name = WEEKDAY_NAMES[pair.date.weekday()]
        daily_hours[name] = daily_hours.get(name, 0.0) + pair.total_ms / MS_PER_HOUR

    return WeeklyHours(total_ms=total_ms, total_hours=total_ms / MS_PER_HOUR, daily_hours=daily_hours)
