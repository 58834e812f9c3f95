from __future__ import annotations

import importlib

from dotenv import load_dotenv

from timeclock.config import get_settings_module
from timeclock.database.bootstrap import apply_schema, list_tables
from timeclock.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    if not settings.DB_CONFIG:
        raise SystemExit("DB_HOST is not set; nothing to initialize (the app would run in demo mode).")

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
    apply_schema(conn)
    tables = list_tables(conn)
    cfg = conn.config
    print(f"OK: Applied schema.sql -> {cfg.user}@{cfg.host}:{cfg.port}/{cfg.database} (tables={len(tables)})")


if __name__ == "__main__":
    main()
