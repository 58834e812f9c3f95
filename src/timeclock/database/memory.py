from __future__ import annotations

import itertools
import time
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from ..core.constants import DEMO_ID_PREFIX
from ..core.enums import Role

if TYPE_CHECKING:
    from ..production.model import ProductionLog
    from ..punches.model import Punch
    from ..timeoff.model import TimeOffRequest
    from ..verification.model import VerificationCode
    from ..workers.model import Worker


DEMO_WORKERS: tuple[dict, ...] = (
    {"id": "demo-1", "pin": "123456", "full_name": "John Smith", "role": "worker",
     "email": "john.smith@example.com"},
    {"id": "demo-2", "pin": "234567", "full_name": "Maria Garcia", "role": "worker",
     "email": "maria.garcia@example.com"},
    {"id": "demo-3", "pin": "345678", "full_name": "James Wilson", "role": "manager",
     "email": "james.wilson@example.com", "phone": "(555) 345-6789"},
    {"id": "demo-4", "pin": "456789", "full_name": "Sarah Johnson", "role": "worker",
     "email": "sarah.johnson@example.com"},
    {"id": "demo-5", "pin": "567890", "full_name": "Michael Brown", "role": "worker",
     "email": "michael.brown@example.com"},
)


# Simulated round-trip per operation, in seconds.
LATENCY = {
    "authenticate": 0.5,
    "status": 0.2,
    "punch": 0.6,
    "create_worker": 0.6,
    "production": 0.8,
    "timeoff_write": 0.6,
    "timeoff_read": 0.3,
    "timeoff_review": 0.5,
    "default": 0.2,
}


@dataclass
class MemoryStore:
    """Process-local tables backing demo mode.

    One instance is created by the container and injected into every memory
    repository; `reset()` restores the seed roster and clears everything else.
    The tables are not guarded by a lock: concurrent writes interleave and the
    later write wins.
    """

    latency_scale: float = 1.0
    seed: bool = True

    workers: dict[str, "Worker"] = field(default_factory=dict)
    punches: list["Punch"] = field(default_factory=list)
    production_logs: list["ProductionLog"] = field(default_factory=list)
    time_off_requests: dict[str, "TimeOffRequest"] = field(default_factory=dict)
    verification_codes: list["VerificationCode"] = field(default_factory=list)

    def __post_init__(self) -> None:
        self._ids = itertools.count(1)
        self.reset()

    def reset(self) -> None:
        from ..workers.model import Worker

        self.workers.clear()
        self.punches.clear()
        self.production_logs.clear()
        self.time_off_requests.clear()
        self.verification_codes.clear()
        self._ids = itertools.count(1)

        if self.seed:
            for w in DEMO_WORKERS:
                self.workers[w["id"]] = Worker(
                    worker_id=w["id"],
                    pin=w["pin"],
                    full_name=w["full_name"],
                    role=Role(w["role"]),
                    email=w.get("email"),
                    phone=w.get("phone"),
                )

    def next_id(self, kind: str) -> str:
        return f"{DEMO_ID_PREFIX}{kind}-{next(self._ids)}"

    def pause(self, operation: str) -> None:
        seconds = LATENCY.get(operation, LATENCY["default"]) * self.latency_scale
        if seconds > 0:
            time.sleep(seconds)
