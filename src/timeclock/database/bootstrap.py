from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable

from .connection import DatabaseConnection
from .memory import DEMO_WORKERS
from .mysql_base import db_cursor, new_id

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parent / "schema.sql"


def _iter_sql_statements(sql: str) -> Iterable[str]:
    # Minimal SQL splitter for the schema file (handles ';' inside quotes, skips '--' comments).
    buf: list[str] = []
    in_single = False
    in_double = False
    escape = False
    in_comment = False

    for i, ch in enumerate(sql):
        if in_comment:
            if ch == "\n":
                in_comment = False
                buf.append(ch)
            continue

        if escape:
            buf.append(ch)
            escape = False
            continue

        if ch == "\\":
            buf.append(ch)
            escape = True
            continue

        if ch == "-" and not in_single and not in_double and sql[i : i + 2] == "--":
            in_comment = True
            continue

        if ch == "'" and not in_double:
            in_single = not in_single
            buf.append(ch)
            continue

        if ch == '"' and not in_single:
            in_double = not in_double
            buf.append(ch)
            continue

        if ch == ";" and not in_single and not in_double:
            stmt = "".join(buf).strip()
            buf.clear()
            if stmt:
                yield stmt
            continue

        buf.append(ch)

    tail = "".join(buf).strip()
    if tail:
        yield tail


def ensure_database_exists(conn_factory: DatabaseConnection) -> None:
    database = conn_factory.config.database
    conn = conn_factory.connect(with_database=False)
    try:
        cur = conn.cursor()
        cur.execute(
            f"CREATE DATABASE IF NOT EXISTS `{database}` CHARACTER SET utf8mb4 COLLATE utf8mb4_unicode_ci"
        )
        conn.commit()
    finally:
        conn.close()


def apply_schema(conn_factory: DatabaseConnection, *, schema_path: str | Path = SCHEMA_PATH) -> None:
    ensure_database_exists(conn_factory)
    sql = Path(schema_path).read_text(encoding="utf-8")

    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        for stmt in _iter_sql_statements(sql):
            cur.execute(stmt)
    logger.info("schema applied to %s", conn_factory.config.database)


def ensure_demo_workers(conn_factory: DatabaseConnection) -> None:
    """Upsert the demo roster by PIN so a fresh database has someone to clock in."""

    with db_cursor(conn_factory) as (_, cur):
        for w in DEMO_WORKERS:
            cur.execute("SELECT id FROM workers WHERE pin=%s", (w["pin"],))
            existing = cur.fetchone()
            if existing:
                cur.execute(
                    """
                    UPDATE workers
                    SET full_name=%s, role=%s, email=%s, phone=%s, is_active=1
                    WHERE pin=%s
                    """,
                    (w["full_name"], w["role"], w.get("email"), w.get("phone"), w["pin"]),
                )
            else:
                cur.execute(
                    """
                    INSERT INTO workers (id, pin, full_name, role, email, phone)
                    VALUES (%s, %s, %s, %s, %s, %s)
                    """,
                    (new_id(), w["pin"], w["full_name"], w["role"], w.get("email"), w.get("phone")),
                )
    logger.info("demo workers ready (%d)", len(DEMO_WORKERS))


def list_tables(conn_factory: DatabaseConnection) -> list[str]:
    with db_cursor(conn_factory, dictionary=False) as (_, cur):
        cur.execute("SHOW TABLES")
        return [row[0] for row in cur.fetchall()]
