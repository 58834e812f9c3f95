from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import as_utc
from ..core.enums import PunchType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import Punch
from .repository import PunchRepository


def _to_punch(row: dict) -> Punch:
    return Punch(
        punch_id=str(row["id"]),
        worker_id=str(row["worker_id"]),
        punch_type=PunchType(row["type"]),
        timestamp=as_utc(row["timestamp"]),
    )


class MySQLPunchRepository(PunchRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add_punch(self, *, worker_id: str, punch_type: PunchType, timestamp: datetime) -> Punch:
        punch_id = new_id()
        ts = as_utc(timestamp)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO punches(id, worker_id, type, timestamp)
                VALUES(%s,%s,%s,%s)
                """,
                (punch_id, worker_id, punch_type.value, ts.replace(tzinfo=None)),
            )
        return Punch(punch_id=punch_id, worker_id=worker_id, punch_type=punch_type, timestamp=ts)

    def get_latest(self, worker_id: str) -> Optional[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, worker_id, type, timestamp
                FROM punches
                WHERE worker_id=%s
                ORDER BY timestamp DESC
                LIMIT 1
                """,
                (worker_id,),
            )
            row = fetchone(cur)
            return _to_punch(row) if row else None

    def list_since(self, worker_id: str, since: datetime) -> Sequence[Punch]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, worker_id, type, timestamp
                FROM punches
                WHERE worker_id=%s AND timestamp >= %s
                ORDER BY timestamp ASC
                """,
                (worker_id, as_utc(since).replace(tzinfo=None)),
            )
            return [_to_punch(r) for r in fetchall(cur)]
