from __future__ import annotations

import importlib
import logging
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from .config import get_settings_module
from .container import build_container
from .database.bootstrap import apply_schema, ensure_demo_workers, list_tables
from .production.controller import register as register_production
from .punches.controller import register as register_punches
from .timeoff.controller import register as register_timeoff
from .verification.controller import register as register_verification
from .workers.controller import register as register_workers


def create_app(settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    db_config = getattr(settings, "DB_CONFIG", None)

    if app.config["DEBUG"]:
        app.logger.setLevel(logging.DEBUG)

    container = build_container(
        db_config=db_config,
        demo_latency_scale=float(getattr(settings, "DEMO_LATENCY_SCALE", 1.0)),
    )
    app.extensions["timeclock"] = container

    if container.demo_mode:
        app.logger.info("running in DEMO MODE - no database connection (settings=%s)", settings_module)
        app.logger.info("demo PINs: 123456, 234567, 345678, 456789, 567890; admin PIN: 000000")
    else:
        app.logger.info(
            "connected to %s@%s:%s/%s (settings=%s)",
            db_config.get("user"), db_config.get("host"), db_config.get("port", 3306), db_config.get("database"),
            settings_module,
        )
        if getattr(settings, "AUTO_INIT_DB", False):
            apply_schema(container.conn)
            app.logger.info("schema ready (tables=%d)", len(list_tables(container.conn)))
        if getattr(settings, "AUTO_SEED_DB", False):
            ensure_demo_workers(container.conn)

    register_workers(app, container)
    register_verification(app, container)
    register_punches(app, container)
    register_production(app, container)
    register_timeoff(app, container)

    return app
