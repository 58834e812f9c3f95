from __future__ import annotations

import logging
from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import as_utc
from ..database.memory import MemoryStore
from .model import ProductionEntry, ProductionLog
from .repository import ProductionLogRepository

logger = logging.getLogger(__name__)


class InMemoryProductionLogRepository(ProductionLogRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def add_logs(self, *, worker_id: str, entries: Sequence[ProductionEntry], timestamp: datetime) -> Sequence[ProductionLog]:
        self._store.pause("production")
        logs = [
            ProductionLog(
                log_id=self._store.next_id("log"),
                worker_id=worker_id,
                task_name=e.task_name,
                quantity=int(e.quantity),
                timestamp=as_utc(timestamp),
            )
            for e in entries
        ]
        self._store.production_logs.extend(logs)
        logger.debug("demo production logged: %s", logs)
        return logs
