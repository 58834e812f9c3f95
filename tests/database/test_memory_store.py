from __future__ import annotations

from datetime import timezone, datetime

from timeclock.core.enums import PunchType
from timeclock.database.memory import DEMO_WORKERS, MemoryStore
from timeclock.punches.memory_punch_repository import InMemoryPunchRepository


def test_seeded_roster():
    store = MemoryStore(latency_scale=0.0)

    assert set(store.workers) == {w["id"] for w in DEMO_WORKERS}
    assert store.workers["demo-3"].role.can_review


def test_unseeded_store_is_empty():
    assert MemoryStore(latency_scale=0.0, seed=False).workers == {}


def test_ids_carry_demo_prefix(store):
    assert store.next_id("req") == "demo-req-1"
    assert store.next_id("punch") == "demo-punch-2"


def test_reset_restores_seed(store):
    repo = InMemoryPunchRepository(store)
    repo.add_punch(worker_id="demo-1", punch_type=PunchType.IN, timestamp=datetime(2026, 2, 4, tzinfo=timezone.utc))
    del store.workers["demo-2"]

    store.reset()

    assert store.punches == []
    assert "demo-2" in store.workers
    assert store.next_id("punch") == "demo-punch-1"
