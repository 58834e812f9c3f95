from __future__ import annotations

from datetime import datetime, timezone

import pytest

from timeclock.container import build_container
from timeclock.database.memory import MemoryStore
from timeclock.main import create_app


@pytest.fixture
def fixed_now() -> datetime:
    # Wednesday
    return datetime(2026, 2, 4, 15, 0, 0, tzinfo=timezone.utc)


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore(latency_scale=0.0)


@pytest.fixture
def container():
    return build_container(db_config=None, demo_latency_scale=0.0)


@pytest.fixture
def app():
    app = create_app("timeclock.config.testing")
    yield app
    app.extensions["timeclock"].memory.reset()


@pytest.fixture
def client(app):
    return app.test_client()
