from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from ..common.datetime_utils import as_utc
from ..core.enums import RequestStatus, TimeOffType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, new_id
from .model import NewTimeOffRequest, TimeOffRequest
from .repository import TimeOffRepository

_SELECT = """
    SELECT r.id, r.worker_id, r.type, r.start_date, r.end_date,
           r.paid_hours, r.unpaid_hours, r.is_excused, r.is_planned, r.comments,
           r.status, r.reviewed_by, r.reviewed_at, r.denial_reason,
           r.created_at, r.updated_at,
           w.full_name AS worker_name,
           rv.full_name AS reviewer_name
    FROM time_off_requests r
    LEFT JOIN workers w ON w.id = r.worker_id
    LEFT JOIN workers rv ON rv.id = r.reviewed_by
"""


def _to_request(r: dict) -> TimeOffRequest:
    return TimeOffRequest(
        request_id=str(r["id"]),
        worker_id=str(r["worker_id"]),
        type=TimeOffType(r["type"]),
        start_date=r["start_date"],
        end_date=r["end_date"],
        paid_hours=float(r.get("paid_hours") or 0),
        unpaid_hours=float(r.get("unpaid_hours") or 0),
        is_excused=bool(r.get("is_excused", True)),
        is_planned=bool(r.get("is_planned", True)),
        comments=r.get("comments"),
        status=RequestStatus(r["status"]),
        created_at=as_utc(r["created_at"]),
        updated_at=as_utc(r["updated_at"]),
        reviewed_by=r.get("reviewed_by"),
        reviewed_at=as_utc(r["reviewed_at"]) if r.get("reviewed_at") else None,
        denial_reason=r.get("denial_reason"),
        worker_name=r.get("worker_name") or "Unknown",
        reviewer_name=r.get("reviewer_name"),
    )


class MySQLTimeOffRepository(TimeOffRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def create_request(self, *, worker_id: str, data: NewTimeOffRequest, now: datetime) -> TimeOffRequest:
        request_id = new_id()
        ts = as_utc(now).replace(tzinfo=None)
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO time_off_requests(
                    id, worker_id, type, start_date, end_date, paid_hours, unpaid_hours,
                    comments, status, created_at, updated_at
                )
                VALUES(%s,%s,%s,%s,%s,%s,%s,%s,%s,%s,%s)
                """,
                (
                    request_id,
                    worker_id,
                    data.type.value,
                    data.start_date,
                    data.end_date,
                    data.paid_hours,
                    data.unpaid_hours,
                    data.comments,
                    RequestStatus.PENDING.value,
                    ts,
                    ts,
                ),
            )
            cur.execute(_SELECT + " WHERE r.id=%s", (request_id,))
            return _to_request(fetchone(cur))

    def get_request(self, request_id: str) -> Optional[TimeOffRequest]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE r.id=%s", (request_id,))
            r = fetchone(cur)
            return _to_request(r) if r else None

    def list_requests(
        self,
        *,
        worker_id: Optional[str] = None,
        status: Optional[RequestStatus] = None,
        oldest_first: bool = False,
        limit: Optional[int] = None,
    ) -> Sequence[TimeOffRequest]:
        clauses = ["1=1"]
        params: list[object] = []

        if worker_id is not None:
            clauses.append("r.worker_id=%s")
            params.append(worker_id)
        if status is not None:
            clauses.append("r.status=%s")
            params.append(status.value)

        sql = _SELECT + f" WHERE {' AND '.join(clauses)} ORDER BY r.created_at {'ASC' if oldest_first else 'DESC'}"
        if limit is not None:
            sql += " LIMIT %s"
            params.append(int(limit))

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            return [_to_request(r) for r in fetchall(cur)]

    def decide(
        self,
        *,
        request_id: str,
        status: RequestStatus,
        reviewed_by: str,
        reviewed_at: datetime,
        denial_reason: Optional[str] = None,
    ) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE time_off_requests
                SET status=%s, reviewed_by=%s, reviewed_at=%s, denial_reason=%s, updated_at=%s
                WHERE id=%s AND status=%s
                """,
                (
                    status.value,
                    reviewed_by,
                    as_utc(reviewed_at).replace(tzinfo=None),
                    denial_reason,
                    as_utc(reviewed_at).replace(tzinfo=None),
                    request_id,
                    RequestStatus.PENDING.value,
                ),
            )
            return cur.rowcount > 0
