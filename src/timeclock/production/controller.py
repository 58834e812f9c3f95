from __future__ import annotations

from flask import Flask

from ..common.http import fail, fail_from, json_body, ok
from ..container import Container
from ..core.exceptions import DomainError, ValidationError
from .model import ProductionEntry


def _parse_entries(raw) -> list[ProductionEntry]:
    if not isinstance(raw, list):
        raise ValidationError("entries must be a list.")

    entries: list[ProductionEntry] = []
    for item in raw:
        if not isinstance(item, dict):
            raise ValidationError("Each entry must be an object.")
        raw_quantity = item.get("quantity") or 0
        try:
            number = float(raw_quantity)
        except (TypeError, ValueError):
            raise ValidationError("Quantity must be a whole number.")
        # No truncation: 2.7 units is an input error, not 2.
        if isinstance(raw_quantity, bool) or not number.is_integer():
            raise ValidationError("Quantity must be a whole number.")
        quantity = int(number)
        entries.append(ProductionEntry(task_name=str(item.get("task_name") or item.get("taskName") or ""), quantity=quantity))
    return entries


def register(app: Flask, container: Container) -> None:
    @app.route("/api/kiosk/production", methods=["POST"], endpoint="kiosk_log_production")
    def kiosk_log_production():
        try:
            data = json_body()
            worker_id = str(data.get("worker_id") or "").strip()
            if not worker_id:
                raise ValidationError("worker_id is required.")
            logs = container.production_service.log_production(worker_id, _parse_entries(data.get("entries")))
        except DomainError as e:
            return fail_from(e)
        except Exception:
            app.logger.exception("log production failed")
            return fail("Failed to log production. Please try again.", status=500)
        return ok(201, logs=[log.to_public() for log in logs])
