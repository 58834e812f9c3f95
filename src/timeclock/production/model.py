from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class ProductionEntry:
    """What the kiosk submits: a task and how many units were done."""

    task_name: str
    quantity: int


@dataclass(frozen=True)
class ProductionLog:
    log_id: str
    worker_id: str
    task_name: str
    quantity: int
    timestamp: datetime

    def to_public(self) -> dict:
        return {
            "id": self.log_id,
            "worker_id": self.worker_id,
            "task_name": self.task_name,
            "quantity": self.quantity,
            "timestamp": self.timestamp.isoformat(),
        }
