from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import Role
from ..core.exceptions import PinInUseError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import DuplicateKeyError, db_cursor, fetchall, fetchone, new_id
from .model import Worker
from .repository import WorkerRepository

_COLUMNS = "id, pin, full_name, role, email, phone, is_active, created_at"


def _to_worker(row: dict) -> Worker:
    return Worker(
        worker_id=str(row["id"]),
        pin=str(row["pin"]),
        full_name=row["full_name"],
        role=Role(row["role"]),
        email=row.get("email"),
        phone=row.get("phone"),
        is_active=bool(row.get("is_active", True)),
        created_at=row.get("created_at"),
    )


class MySQLWorkerRepository(WorkerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE id=%s", (worker_id,))
            row = fetchone(cur)
            return _to_worker(row) if row else None

    def get_active_by_pin(self, pin: str) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers WHERE pin=%s AND is_active=1", (pin,))
            row = fetchone(cur)
            return _to_worker(row) if row else None

    def get_active_by_email(self, email: str) -> Optional[Worker]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                SELECT {_COLUMNS}
                FROM workers
                WHERE LOWER(email)=LOWER(%s) AND is_active=1
                ORDER BY created_at ASC
                LIMIT 1
                """,
                (email,),
            )
            row = fetchone(cur)
            return _to_worker(row) if row else None

    def create_worker(
        self,
        *,
        pin: str,
        full_name: str,
        role: Role,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Worker:
        worker_id = new_id()
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO workers(id, pin, full_name, role, email, phone, is_active)
                    VALUES(%s,%s,%s,%s,%s,%s,1)
                    """,
                    (worker_id, pin, full_name, role.value, email, phone),
                )
        except DuplicateKeyError as exc:
            raise PinInUseError("This PIN is already in use.") from exc

        return Worker(
            worker_id=worker_id,
            pin=pin,
            full_name=full_name,
            role=role,
            email=email,
            phone=phone,
        )

    def list_workers(self, *, include_inactive: bool = False) -> Sequence[Worker]:
        where = "" if include_inactive else "WHERE is_active=1"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM workers {where} ORDER BY full_name ASC")
            return [_to_worker(r) for r in fetchall(cur)]

    def set_active(self, worker_id: str, *, is_active: bool) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("UPDATE workers SET is_active=%s WHERE id=%s", (1 if is_active else 0, worker_id))
            return cur.rowcount > 0

    def update_contact(self, worker_id: str, *, email: Optional[str], phone: Optional[str]) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE workers SET email=%s, phone=%s WHERE id=%s",
                (email, phone, worker_id),
            )
            return cur.rowcount > 0
