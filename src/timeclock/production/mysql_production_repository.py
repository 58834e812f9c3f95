from __future__ import annotations

from datetime import datetime
from typing import Sequence

from ..common.datetime_utils import as_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, new_id
from .model import ProductionEntry, ProductionLog
from .repository import ProductionLogRepository


class MySQLProductionLogRepository(ProductionLogRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add_logs(self, *, worker_id: str, entries: Sequence[ProductionEntry], timestamp: datetime) -> Sequence[ProductionLog]:
        ts = as_utc(timestamp)
        logs = [
            ProductionLog(
                log_id=new_id(),
                worker_id=worker_id,
                task_name=e.task_name,
                quantity=int(e.quantity),
                timestamp=ts,
            )
            for e in entries
        ]
        with db_cursor(self._conn_factory) as (_, cur):
            cur.executemany(
                """
                INSERT INTO production_logs(id, worker_id, task_name, quantity, timestamp)
                VALUES(%s,%s,%s,%s,%s)
                """,
                [(log.log_id, log.worker_id, log.task_name, log.quantity, ts.replace(tzinfo=None)) for log in logs],
            )
        return logs
