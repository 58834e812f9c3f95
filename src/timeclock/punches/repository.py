from __future__ import annotations

from datetime import datetime
from typing import Optional, Protocol, Sequence

from ..core.enums import PunchType
from .model import Punch


class PunchRepository(Protocol):
    def add_punch(self, *, worker_id: str, punch_type: PunchType, timestamp: datetime) -> Punch:
        raise NotImplementedError

    def get_latest(self, worker_id: str) -> Optional[Punch]:
        raise NotImplementedError

    def list_since(self, worker_id: str, since: datetime) -> Sequence[Punch]:
        """All punches at or after `since`, oldest first."""

        raise NotImplementedError
