from __future__ import annotations

from datetime import datetime
from typing import Optional

from ..common.datetime_utils import as_utc
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchone, new_id
from .model import VerificationCode
from .repository import VerificationCodeRepository


def _naive(value: datetime) -> datetime:
    return as_utc(value).replace(tzinfo=None)


class MySQLVerificationCodeRepository(VerificationCodeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def add_code(self, *, worker_id: str, code_hash: str, expires_at: datetime, created_at: datetime) -> VerificationCode:
        code_id = new_id()
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO verification_codes(id, worker_id, code_hash, expires_at, created_at)
                VALUES(%s,%s,%s,%s,%s)
                """,
                (code_id, worker_id, code_hash, _naive(expires_at), _naive(created_at)),
            )
        return VerificationCode(
            code_id=code_id,
            worker_id=worker_id,
            code_hash=code_hash,
            expires_at=as_utc(expires_at),
            created_at=as_utc(created_at),
        )

    def get_latest_unused(self, worker_id: str) -> Optional[VerificationCode]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT id, worker_id, code_hash, expires_at, used_at, created_at
                FROM verification_codes
                WHERE worker_id=%s AND used_at IS NULL
                ORDER BY created_at DESC
                LIMIT 1
                """,
                (worker_id,),
            )
            r = fetchone(cur)
            if not r:
                return None
            return VerificationCode(
                code_id=str(r["id"]),
                worker_id=str(r["worker_id"]),
                code_hash=r["code_hash"],
                expires_at=as_utc(r["expires_at"]),
                created_at=as_utc(r["created_at"]),
                used_at=None,
            )

    def mark_used(self, code_id: str, *, used_at: datetime) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE verification_codes SET used_at=%s WHERE id=%s AND used_at IS NULL",
                (_naive(used_at), code_id),
            )
            return cur.rowcount > 0
