from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import as_utc
from ..core.enums import PunchType
from ..database.memory import MemoryStore
from .model import Punch
from .repository import PunchRepository


class InMemoryPunchRepository(PunchRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def add_punch(self, *, worker_id: str, punch_type: PunchType, timestamp: datetime) -> Punch:
        self._store.pause("punch")
        punch = Punch(
            punch_id=self._store.next_id("punch"),
            worker_id=worker_id,
            punch_type=punch_type,
            timestamp=as_utc(timestamp),
        )
        self._store.punches.append(punch)
        return punch

    def get_latest(self, worker_id: str) -> Optional[Punch]:
        self._store.pause("status")
        latest = None
        for p in self._store.punches:
            # `>=` keeps the later insert when two punches share a timestamp.
            if p.worker_id == worker_id and (latest is None or p.timestamp >= latest.timestamp):
                latest = p
        return latest

    def list_since(self, worker_id: str, since: datetime) -> Sequence[Punch]:
        self._store.pause("status")
        since = as_utc(since)
        items = [p for p in self._store.punches if p.worker_id == worker_id and p.timestamp >= since]
        # sort() is stable, so equal timestamps keep insertion order.
        items.sort(key=lambda p: p.timestamp)
        return items
