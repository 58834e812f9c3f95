from __future__ import annotations

import logging
from datetime import datetime
from typing import Iterable, Sequence

from ..common.datetime_utils import now_utc
from ..core.exceptions import StoreError, ValidationError
from .model import ProductionEntry, ProductionLog
from .repository import ProductionLogRepository

logger = logging.getLogger(__name__)

MAX_TASK_NAME_LENGTH = 50


class ProductionService:
    """Use case: a worker logs units completed per task from the kiosk."""

    def __init__(self, logs: ProductionLogRepository):
        self._logs = logs

    @staticmethod
    def _clean(entries: Iterable[ProductionEntry]) -> list[ProductionEntry]:
        valid: list[ProductionEntry] = []
        for e in entries:
            # Zero/negative quantities are untouched keypad rows, not errors.
            if e.quantity <= 0:
                continue
            name = (e.task_name or "").strip()
            if not name:
                raise ValidationError("Task name is required.")
            if len(name) > MAX_TASK_NAME_LENGTH:
                raise ValidationError(f"Task name must be at most {MAX_TASK_NAME_LENGTH} characters.")
            valid.append(ProductionEntry(task_name=name, quantity=int(e.quantity)))
        return valid

    def log_production(
        self,
        worker_id: str,
        entries: Sequence[ProductionEntry],
        *,
        now: datetime | None = None,
    ) -> Sequence[ProductionLog]:
        valid = self._clean(entries)
        if not valid:
            raise ValidationError("No tasks to log. Please add quantities.")

        try:
            logs = self._logs.add_logs(worker_id=worker_id, entries=valid, timestamp=now or now_utc())
        except StoreError as exc:
            raise StoreError("Failed to log production. Please try again.") from exc

        logger.info("worker %s logged %d production entries", worker_id, len(logs))
        return logs
