from __future__ import annotations

from datetime import date, datetime, timedelta, timezone


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 timestamp, accepting the trailing 'Z' browsers send."""
    v = value.strip()
    if v.endswith("Z"):
        v = v[:-1] + "+00:00"
    return datetime.fromisoformat(v)


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mock it easier.
    """
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    # MySQL DATETIME columns come back naive; they are stored in UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def elapsed_ms(start: datetime, end: datetime) -> int:
    return (as_utc(end) - as_utc(start)) // timedelta(milliseconds=1)
