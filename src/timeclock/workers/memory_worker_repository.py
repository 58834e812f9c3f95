from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence

from ..common.datetime_utils import now_utc
from ..core.enums import Role
from ..core.exceptions import PinInUseError
from ..database.memory import MemoryStore
from .model import Worker
from .repository import WorkerRepository


class InMemoryWorkerRepository(WorkerRepository):
    def __init__(self, store: MemoryStore):
        self._store = store

    def get_by_id(self, worker_id: str) -> Optional[Worker]:
        self._store.pause("default")
        return self._store.workers.get(worker_id)

    def get_active_by_pin(self, pin: str) -> Optional[Worker]:
        self._store.pause("authenticate")
        for w in self._store.workers.values():
            if w.pin == pin and w.is_active:
                return w
        return None

    def get_active_by_email(self, email: str) -> Optional[Worker]:
        self._store.pause("default")
        wanted = email.strip().lower()
        for w in self._store.workers.values():
            if w.is_active and (w.email or "").lower() == wanted:
                return w
        return None

    def create_worker(
        self,
        *,
        pin: str,
        full_name: str,
        role: Role,
        email: Optional[str] = None,
        phone: Optional[str] = None,
    ) -> Worker:
        self._store.pause("create_worker")
        # Uniqueness covers inactive workers too, like the UNIQUE index does.
        if any(w.pin == pin for w in self._store.workers.values()):
            raise PinInUseError("This PIN is already in use.")

        worker = Worker(
            worker_id=self._store.next_id("worker"),
            pin=pin,
            full_name=full_name,
            role=role,
            email=email,
            phone=phone,
            created_at=now_utc(),
        )
        self._store.workers[worker.worker_id] = worker
        return worker

    def list_workers(self, *, include_inactive: bool = False) -> Sequence[Worker]:
        self._store.pause("default")
        items = [w for w in self._store.workers.values() if include_inactive or w.is_active]
        items.sort(key=lambda w: w.full_name)
        return items

    def set_active(self, worker_id: str, *, is_active: bool) -> bool:
        self._store.pause("default")
        worker = self._store.workers.get(worker_id)
        if not worker:
            return False
        self._store.workers[worker_id] = replace(worker, is_active=is_active)
        return True

    def update_contact(self, worker_id: str, *, email: Optional[str], phone: Optional[str]) -> bool:
        self._store.pause("default")
        worker = self._store.workers.get(worker_id)
        if not worker:
            return False
        self._store.workers[worker_id] = replace(worker, email=email, phone=phone)
        return True
