from __future__ import annotations

import importlib

from dotenv import load_dotenv

from timeclock.config import get_settings_module
from timeclock.database.bootstrap import ensure_demo_workers
from timeclock.database.connection import DBConfig, DatabaseConnection


def main() -> None:
    load_dotenv(override=False)
    settings = importlib.import_module(get_settings_module())
    if not settings.DB_CONFIG:
        raise SystemExit("DB_HOST is not set; the demo roster is already built into demo mode.")

    conn = DatabaseConnection.get_instance(DBConfig.from_dict(settings.DB_CONFIG))
    ensure_demo_workers(conn)
    cfg = conn.config
    print(f"OK: Seeded demo workers -> {cfg.user}@{cfg.host}:{cfg.port}/{cfg.database}")


if __name__ == "__main__":
    main()
