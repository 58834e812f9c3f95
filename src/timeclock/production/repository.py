from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from .model import ProductionEntry, ProductionLog


class ProductionLogRepository(Protocol):
    def add_logs(self, *, worker_id: str, entries: Sequence[ProductionEntry], timestamp: datetime) -> Sequence[ProductionLog]:
        """Insert all entries as one batch."""

        raise NotImplementedError
